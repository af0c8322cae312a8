from application.ports.issues_fetcher import IssueLabeler, IssuesFetcher

__all__ = ["IssueLabeler", "IssuesFetcher"]
