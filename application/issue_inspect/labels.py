import re
from typing import Any

from domain.issues import LabelRequest


KIND_PATTERN = re.compile(r"(/kind +)([a-zA-Z]+)", re.IGNORECASE)

KIND_LABELS = {
    "enhancement": "enhancement",
    "feature": "enhancement",
    "bug": "bug",
    "doc": "documentation",
}


def parse_kind(body: str) -> str | None:
    match = KIND_PATTERN.search(body)
    return match.group(2) if match else None


def is_pull_request(issue: dict[str, Any]) -> bool:
    pull_request = issue.get("pull_request")
    return isinstance(pull_request, dict) and bool(pull_request.get("url"))


def has_label(issue: dict[str, Any], label: str) -> bool:
    labels = issue.get("labels") or []
    return any(isinstance(item, dict) and item.get("name") == label for item in labels)


def label_for(issue: dict[str, Any]) -> LabelRequest | None:
    """Return the label a `/kind <word>` command in the issue body asks for.

    Pull requests, issues without a body, unknown kinds and labels the issue
    already carries yield None.
    """
    body = issue.get("body")
    if is_pull_request(issue) or not isinstance(body, str):
        return None

    kind = parse_kind(body)
    # Kind lookup is exact: "/kind Bug" does not map.
    label = KIND_LABELS.get(kind) if kind else None
    if label is None or has_label(issue, label):
        return None

    return LabelRequest(
        repository_url=str(issue.get("repository_url") or ""),
        number=int(issue["number"]),
        label=label,
    )
