from dataclasses import dataclass


@dataclass(frozen=True)
class PullResult:
    status: str
    body: bytes = b""
    error: str | None = None
    error_kind: str | None = None

    @property
    def ok(self) -> bool:
        return self.status == "success"
