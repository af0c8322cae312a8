from domain.issues.errors import (
    TRANSPORT_ERROR_KIND,
    TRANSPORT_ERROR_PREFIX,
    IssueFetchError,
    fetch_error,
)
from domain.issues.models import IssueChange, LabelRequest, RepositoryTarget

__all__ = [
    "TRANSPORT_ERROR_KIND",
    "TRANSPORT_ERROR_PREFIX",
    "IssueChange",
    "IssueFetchError",
    "LabelRequest",
    "RepositoryTarget",
    "fetch_error",
]
