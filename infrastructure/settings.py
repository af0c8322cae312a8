import os
from dataclasses import dataclass

from domain.issues import RepositoryTarget


DEFAULT_GITHUB_API_URL = "https://api.github.com"
DEFAULT_WATCH_PERIOD_SECONDS = 30.0
_TRUTHY = ("1", "true", "yes", "on")


def _env(name: str, default: str = "") -> str:
    value = os.getenv(name)
    return value if value is not None else default


def _optional_float(name: str) -> float | None:
    raw_value = _env(name).strip()
    if not raw_value:
        return None
    return float(raw_value)


def _flag(name: str) -> bool:
    return _env(name, "false").strip().lower() in _TRUTHY


def _watch_period() -> float:
    period = _optional_float("ISSUE_WATCH_PERIOD_SECONDS")
    if period is None:
        return DEFAULT_WATCH_PERIOD_SECONDS
    if period <= 0:
        raise ValueError(f"ISSUE_WATCH_PERIOD_SECONDS must be positive, got {period}")
    return period


@dataclass(frozen=True)
class PullerSettings:
    organization: str = ""
    repository: str = ""
    token: str = ""
    api_base_url: str = DEFAULT_GITHUB_API_URL
    timeout_seconds: float | None = None
    surface_errors: bool = False
    watch_period_seconds: float = DEFAULT_WATCH_PERIOD_SECONDS
    auto_label: bool = False

    @property
    def target(self) -> RepositoryTarget:
        return RepositoryTarget(
            organization=self.organization,
            repository=self.repository,
            token=self.token,
        )


def load_settings() -> PullerSettings:
    """Build settings from the process environment.

    Missing GitHub values become empty strings and are passed through as-is.
    """
    return PullerSettings(
        organization=_env("GITHUB_ORG"),
        repository=_env("GITHUB_REPO"),
        token=_env("GITHUB_TOKEN"),
        api_base_url=_env("GITHUB_API_URL") or DEFAULT_GITHUB_API_URL,
        timeout_seconds=_optional_float("GITHUB_TIMEOUT_SECONDS"),
        surface_errors=_flag("ISSUE_PULLER_SURFACE_ERRORS"),
        watch_period_seconds=_watch_period(),
        auto_label=_flag("ISSUE_WATCH_AUTO_LABEL"),
    )
