import json
import logging
import time
from collections.abc import Callable
from typing import Any

from application.issue_inspect import label_for
from application.issue_pull import pull_issues
from application.issue_watch.tracker import IssueChangeTracker
from application.ports import IssueLabeler, IssuesFetcher
from domain.issues import IssueChange, RepositoryTarget
from infrastructure.observability.logging_utils import log_event


logger = logging.getLogger(__name__)


def watch_once(
    target: RepositoryTarget,
    fetch: IssuesFetcher,
    tracker: IssueChangeTracker,
    *,
    labeler: IssueLabeler | None = None,
) -> list[IssueChange]:
    result = pull_issues(target, fetch)
    if not result.ok:
        return []

    try:
        issues = json.loads(result.body)
    except ValueError as error:
        log_event(logger, logging.WARNING, "issues.watch.undecodable_payload", error=str(error))
        return []

    # GitHub answers errors (bad credentials, not found) with a JSON object.
    if not isinstance(issues, list):
        log_event(
            logger,
            logging.WARNING,
            "issues.watch.unexpected_payload",
            payload_type=type(issues).__name__,
            message=issues.get("message") if isinstance(issues, dict) else None,
        )
        return []

    changes = tracker.observe(issues)
    for change in changes:
        log_event(
            logger,
            logging.INFO,
            "issues.watch.change",
            kind=change.kind,
            number=change.number,
            updated_at=change.updated_at,
            title=change.title,
        )

    if labeler is not None:
        _label_changed_issues(changes, issues, labeler)
    return changes


def _label_changed_issues(
    changes: list[IssueChange],
    issues: list[Any],
    labeler: IssueLabeler,
) -> None:
    by_number = {
        issue["number"]: issue
        for issue in issues
        if isinstance(issue, dict) and isinstance(issue.get("number"), int)
    }
    for change in changes:
        request = label_for(by_number[change.number])
        if request is None:
            continue
        log_event(
            logger,
            logging.INFO,
            "issues.watch.label_requested",
            number=request.number,
            label=request.label,
        )
        labeler(request)


def run_watch(
    target: RepositoryTarget,
    fetch: IssuesFetcher,
    *,
    period_seconds: float,
    max_polls: int | None = None,
    tracker: IssueChangeTracker | None = None,
    labeler: IssueLabeler | None = None,
    sleep: Callable[[float], None] = time.sleep,
) -> IssueChangeTracker:
    if tracker is None:
        tracker = IssueChangeTracker()
    log_event(logger, logging.INFO, "issues.watch.start", period_seconds=period_seconds)
    polls = 0
    while max_polls is None or polls < max_polls:
        if polls:
            sleep(period_seconds)
        watch_once(target, fetch, tracker, labeler=labeler)
        polls += 1
    return tracker
