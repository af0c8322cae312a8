from functools import partial

from application.ports import IssueLabeler, IssuesFetcher
from infrastructure.github.github_client import GitHubClient
from infrastructure.settings import PullerSettings


def build_github_client(settings: PullerSettings) -> GitHubClient:
    return GitHubClient(
        base_url=settings.api_base_url,
        timeout=settings.timeout_seconds,
    )


def build_issues_fetcher(settings: PullerSettings) -> IssuesFetcher:
    return build_github_client(settings).fetch_issues


def build_issue_labeler(settings: PullerSettings) -> IssueLabeler | None:
    if not settings.auto_label:
        return None
    return partial(build_github_client(settings).add_label, token=settings.token)
