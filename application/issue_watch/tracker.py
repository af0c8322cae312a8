from collections.abc import Iterable
from typing import Any

from domain.issues import IssueChange


class IssueChangeTracker:
    """Remembers the last ``updated_at`` seen per issue number."""

    def __init__(self) -> None:
        self._last_updated: dict[int, str | None] = {}

    def __len__(self) -> int:
        return len(self._last_updated)

    def observe(self, issues: Iterable[Any]) -> list[IssueChange]:
        changes: list[IssueChange] = []
        for issue in issues:
            if not isinstance(issue, dict) or not isinstance(issue.get("number"), int):
                continue
            number = issue["number"]
            updated_at = issue.get("updated_at")

            if number not in self._last_updated:
                kind = "new"
            elif self._last_updated[number] != updated_at:
                kind = "modified"
            else:
                kind = None

            self._last_updated[number] = updated_at
            if kind is not None:
                changes.append(
                    IssueChange(
                        number=number,
                        updated_at=updated_at,
                        title=str(issue.get("title") or ""),
                        kind=kind,
                    )
                )
        return changes
