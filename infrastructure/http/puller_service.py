import logging

from starlette.responses import Response

from application.issue_pull import pull_issues
from application.ports import IssuesFetcher
from infrastructure.http.errors import to_http_exception
from infrastructure.observability.logging_utils import log_event
from infrastructure.settings import PullerSettings


logger = logging.getLogger(__name__)


def execute_pull(settings: PullerSettings, fetch: IssuesFetcher) -> Response:
    result = pull_issues(settings.target, fetch)
    if result.ok:
        return Response(content=result.body)

    if settings.surface_errors:
        raise to_http_exception(result)

    # Silent failure: the caller gets an empty body with the default status.
    log_event(logger, logging.WARNING, "http.pull.empty_response", error_kind=result.error_kind)
    return Response(content=b"")
