import logging
import sys

from dotenv import load_dotenv

from application.issue_pull import pull_issues
from application.issue_watch import run_watch
from infrastructure.http.factories import build_issue_labeler, build_issues_fetcher
from infrastructure.observability.logging_utils import (
    configure_logging,
    log_event,
    register_sensitive_values,
)
from infrastructure.settings import PullerSettings, load_settings


logger = logging.getLogger(__name__)


def _bootstrap() -> PullerSettings:
    load_dotenv()
    configure_logging()
    settings = load_settings()
    register_sensitive_values(settings.token)
    return settings


def main() -> int:
    settings = _bootstrap()
    log_event(logger, logging.INFO, "cli.pull.start")
    result = pull_issues(settings.target, build_issues_fetcher(settings))
    if not result.ok:
        log_event(logger, logging.ERROR, "cli.pull.failed", error=result.error)
        return 1

    sys.stdout.buffer.write(result.body)
    sys.stdout.buffer.flush()
    log_event(logger, logging.INFO, "cli.pull.end", bytes=len(result.body))
    return 0


def watch() -> int:
    settings = _bootstrap()
    try:
        run_watch(
            settings.target,
            build_issues_fetcher(settings),
            period_seconds=settings.watch_period_seconds,
            labeler=build_issue_labeler(settings),
        )
    except KeyboardInterrupt:
        log_event(logger, logging.INFO, "cli.watch.stopped")
    return 0


if __name__ == "__main__":
    sys.exit(main())
