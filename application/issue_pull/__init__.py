from application.issue_pull.contracts import PullResult
from application.issue_pull.use_case import pull_issues

__all__ = ["PullResult", "pull_issues"]
