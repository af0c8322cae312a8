TRANSPORT_ERROR_PREFIX = "GitHub issues request failed"
TRANSPORT_ERROR_KIND = "transport"


class IssueFetchError(RuntimeError):
    """Raised when the issues request cannot be built, sent, or read to completion."""

    kind = TRANSPORT_ERROR_KIND


def fetch_error(details: str) -> IssueFetchError:
    return IssueFetchError(f"{TRANSPORT_ERROR_PREFIX}: {details}")
