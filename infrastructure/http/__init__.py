"""HTTP layer package"""

from infrastructure.http.api import create_app, create_app_from_env
from infrastructure.http.puller_service import execute_pull

__all__ = [
    "create_app",
    "create_app_from_env",
    "execute_pull",
]
