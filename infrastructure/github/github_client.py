import logging
import re
from collections.abc import Callable

import requests

from domain.issues import LabelRequest, fetch_error
from infrastructure.observability.logging_utils import log_event
from infrastructure.settings import DEFAULT_GITHUB_API_URL


logger = logging.getLogger(__name__)

ISSUES_MEDIA_TYPE = "application/vnd.github.v3+json"
LABELS_MEDIA_TYPE = "application/vnd.github+json"

_CONTROL_CHARACTER = re.compile(r"[\x00-\x1f\x7f]")
_INVALID_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")

SessionFactory = Callable[[], requests.Session]


def build_issues_url(org: str, repo: str, *, base_url: str = DEFAULT_GITHUB_API_URL) -> str:
    # org and repo are substituted verbatim, without quoting.
    return f"{base_url.rstrip('/')}/repos/{org}/{repo}/issues"


def build_issues_headers(token: str) -> dict[str, str]:
    return {
        "Content-Type": ISSUES_MEDIA_TYPE,
        "Authorization": "Bearer " + token,
    }


def check_request_url(url: str) -> None:
    """Reject URLs requests would otherwise re-quote before sending."""
    if _CONTROL_CHARACTER.search(url):
        raise ValueError(f"invalid control character in URL {url!r}")
    invalid_escape = _INVALID_ESCAPE.search(url)
    if invalid_escape:
        raise ValueError(
            f"invalid URL escape {url[invalid_escape.start():invalid_escape.start() + 3]!r}"
        )


def fetch_issues(
    org: str,
    repo: str,
    token: str,
    *,
    base_url: str = DEFAULT_GITHUB_API_URL,
    timeout: float | None = None,
    session_factory: SessionFactory = requests.Session,
) -> bytes:
    """Return the raw body of the repository's issue listing.

    The status code is not inspected: an error document from GitHub is returned
    like any other body. Anything that prevents getting the complete body is
    raised as ``IssueFetchError``.
    """
    url = build_issues_url(org, repo, base_url=base_url)
    log_event(logger, logging.DEBUG, "github.issues.request", url=url)
    try:
        check_request_url(url)
        with session_factory() as session:
            response = session.get(
                url,
                headers=build_issues_headers(token),
                timeout=timeout,
            )
            try:
                body = response.content
            finally:
                response.close()
    except (requests.RequestException, ValueError) as error:
        raise fetch_error(f"{type(error).__name__}: {error}") from error

    log_event(
        logger,
        logging.DEBUG,
        "github.issues.response",
        status_code=response.status_code,
        bytes=len(body),
    )
    return body


def add_label(
    request: LabelRequest,
    token: str,
    *,
    timeout: float | None = None,
    session_factory: SessionFactory = requests.Session,
) -> bool:
    """POST one label to an issue. Only a 200 answer counts as success."""
    url = f"{request.repository_url}/issues/{request.number}/labels"
    status_code: int | None = None
    try:
        with session_factory() as session:
            response = session.post(
                url,
                json={"labels": [request.label]},
                headers={
                    "Accept": LABELS_MEDIA_TYPE,
                    "Authorization": "Bearer " + token,
                },
                timeout=timeout,
            )
            status_code = response.status_code
            response.close()
    except (requests.RequestException, ValueError) as error:
        log_event(
            logger,
            logging.ERROR,
            "github.label.request_failed",
            url=url,
            error=f"{type(error).__name__}: {error}",
        )

    success = status_code == 200
    log_event(
        logger,
        logging.INFO if success else logging.WARNING,
        "github.label.added" if success else "github.label.failed",
        label=request.label,
        number=request.number,
        repository_url=request.repository_url,
        status_code=status_code,
    )
    return success


class GitHubClient:
    """Carries the connection options shared by every call to one GitHub API host."""

    def __init__(
        self,
        *,
        base_url: str = DEFAULT_GITHUB_API_URL,
        timeout: float | None = None,
        session_factory: SessionFactory = requests.Session,
    ) -> None:
        self.base_url = base_url
        self.timeout = timeout
        self.session_factory = session_factory

    def fetch_issues(self, org: str, repo: str, token: str) -> bytes:
        return fetch_issues(
            org,
            repo,
            token,
            base_url=self.base_url,
            timeout=self.timeout,
            session_factory=self.session_factory,
        )

    def add_label(self, request: LabelRequest, token: str) -> bool:
        return add_label(
            request,
            token,
            timeout=self.timeout,
            session_factory=self.session_factory,
        )
