from dataclasses import dataclass


@dataclass(frozen=True)
class RepositoryTarget:
    organization: str
    repository: str
    token: str


@dataclass(frozen=True)
class IssueChange:
    number: int
    updated_at: str | None
    title: str
    kind: str


@dataclass(frozen=True)
class LabelRequest:
    repository_url: str
    number: int
    label: str
