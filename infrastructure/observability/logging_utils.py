import logging
import os
import re
from collections.abc import Iterable
from typing import Any

from infrastructure.observability.context import get_request_id


LOG_FORMAT = "%(asctime)s %(levelname)s [request_id=%(request_id)s] %(name)s - %(message)s"
REDACTED = "[REDACTED]"

# (pattern, replacement) pairs; the Bearer pattern keeps its scheme prefix.
TOKEN_PATTERNS = (
    (re.compile(r"(Bearer\s+)[A-Za-z0-9_\-.]+", re.IGNORECASE), rf"\1{REDACTED}"),
    (re.compile(r"\bgh[pousr]_[A-Za-z0-9_]+\b"), REDACTED),
    (re.compile(r"\bgithub_pat_[A-Za-z0-9_]+\b"), REDACTED),
)


class SecretRedactor:
    """Masks registered secret values and well-known GitHub token shapes."""

    def __init__(self, patterns: Iterable[tuple[re.Pattern[str], str]] = TOKEN_PATTERNS) -> None:
        self._patterns = tuple(patterns)
        self._values: set[str] = set()

    def register(self, *values: str) -> None:
        self._values.update(value for value in values if value)

    def clear(self) -> None:
        self._values.clear()

    def __call__(self, text: str) -> str:
        # Longest first so a secret containing another one is masked whole.
        for value in sorted(self._values, key=len, reverse=True):
            text = text.replace(value, REDACTED)
        for pattern, replacement in self._patterns:
            text = pattern.sub(replacement, text)
        return text


# Process-wide: entrypoints register the configured token once at startup.
_redactor = SecretRedactor()


def register_sensitive_values(*values: str) -> None:
    _redactor.register(*values)


def clear_sensitive_values() -> None:
    _redactor.clear()


def redact_secrets(text: str) -> str:
    return _redactor(text)


class RequestIdFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = get_request_id()
        return True


def _resolve_level(level: str | int | None) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName((level or os.getenv("LOG_LEVEL") or "INFO").upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def configure_logging(level: str | int | None = None) -> None:
    """Install the request-id aware format on the root logger.

    Safe to call more than once; handlers already carrying the filter are left alone.
    """
    root_logger = logging.getLogger()
    if not root_logger.handlers:
        logging.basicConfig(format=LOG_FORMAT)
    root_logger.setLevel(_resolve_level(level))

    for handler in root_logger.handlers:
        if not any(isinstance(f, RequestIdFilter) for f in handler.filters):
            handler.addFilter(RequestIdFilter())


def _render_value(value: Any) -> str:
    if isinstance(value, bool):
        rendered = "true" if value else "false"
    elif isinstance(value, (int, float)):
        rendered = str(value)
    elif isinstance(value, bytes):
        rendered = f"<{len(value)} bytes>"
    else:
        rendered = redact_secrets(value if isinstance(value, str) else repr(value))
    return '"' + rendered.replace('"', '\\"') + '"'


def structured_message(event: str, **fields: Any) -> str:
    rendered_fields = (f"{key}={_render_value(value)}" for key, value in fields.items() if value is not None)
    return " ".join([f"event={redact_secrets(event)}", *rendered_fields])


def log_event(logger: logging.Logger, level: int, event: str, **fields: Any) -> None:
    if logger.isEnabledFor(level):
        logger.log(level, structured_message(event, **fields))
