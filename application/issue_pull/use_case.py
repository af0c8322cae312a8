import logging

from application.issue_pull.contracts import PullResult
from application.ports import IssuesFetcher
from domain.issues import IssueFetchError, RepositoryTarget
from infrastructure.observability.logging_utils import log_event


logger = logging.getLogger(__name__)


def pull_issues(
    target: RepositoryTarget,
    fetch: IssuesFetcher,
    *,
    raise_on_error: bool = False,
) -> PullResult:
    log_event(
        logger,
        logging.INFO,
        "issues.pull.start",
        org=target.organization,
        repo=target.repository,
    )
    try:
        body = fetch(target.organization, target.repository, target.token)
    except IssueFetchError as error:
        log_event(logger, logging.ERROR, "issues.pull.failed", error=str(error))
        if raise_on_error:
            raise
        return PullResult(status="error", error=str(error), error_kind=error.kind)

    log_event(logger, logging.INFO, "issues.pull.success", bytes=len(body))
    return PullResult(status="success", body=body)
