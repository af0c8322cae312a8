from fastapi import HTTPException, status

from application.issue_pull import PullResult
from domain.issues import TRANSPORT_ERROR_KIND
from infrastructure.http.schemas import PullErrorDetail
from infrastructure.observability.logging_utils import redact_secrets


PULL_FAILED_MESSAGE = "Failed to pull issues from GitHub"


def to_http_exception(result: PullResult) -> HTTPException:
    detail = PullErrorDetail(
        kind=result.error_kind or TRANSPORT_ERROR_KIND,
        message=redact_secrets(result.error or PULL_FAILED_MESSAGE),
    )
    return HTTPException(
        status_code=status.HTTP_502_BAD_GATEWAY,
        detail=detail.model_dump(),
    )
