from infrastructure.observability.context import get_request_id, reset_request_id, set_request_id
from infrastructure.observability.logging_utils import (
    configure_logging,
    log_event,
    redact_secrets,
    register_sensitive_values,
)

__all__ = [
    "configure_logging",
    "get_request_id",
    "log_event",
    "redact_secrets",
    "register_sensitive_values",
    "reset_request_id",
    "set_request_id",
]
