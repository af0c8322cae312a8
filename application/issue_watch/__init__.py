from application.issue_watch.tracker import IssueChangeTracker
from application.issue_watch.use_case import run_watch, watch_once

__all__ = ["IssueChangeTracker", "run_watch", "watch_once"]
