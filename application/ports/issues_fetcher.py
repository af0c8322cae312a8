from typing import Protocol

from domain.issues import LabelRequest


class IssuesFetcher(Protocol):
    def __call__(self, org: str, repo: str, token: str) -> bytes:
        """Return the raw issue listing body or raise IssueFetchError."""


class IssueLabeler(Protocol):
    def __call__(self, request: LabelRequest) -> bool:
        """Add the label and report whether GitHub accepted it."""
