from dotenv import load_dotenv
from fastapi import FastAPI
from starlette.requests import Request
from starlette.responses import Response

from application.ports import IssuesFetcher
from infrastructure.http.factories import build_issues_fetcher
from infrastructure.http.middleware import RequestContextMiddleware
from infrastructure.http.puller_service import execute_pull
from infrastructure.http.schemas import HealthResponse
from infrastructure.observability.logging_utils import configure_logging, register_sensitive_values
from infrastructure.settings import PullerSettings, load_settings


def create_app(
    settings: PullerSettings | None = None,
    fetch: IssuesFetcher | None = None,
) -> FastAPI:
    """Build the issue puller app.

    Settings are resolved once here and shared by every request.
    """
    settings = settings if settings is not None else load_settings()
    fetch = fetch if fetch is not None else build_issues_fetcher(settings)

    app = FastAPI(title="Issue Puller")
    app.state.settings = settings
    app.add_middleware(RequestContextMiddleware)

    @app.get("/health", response_model=HealthResponse)
    def health() -> HealthResponse:
        return HealthResponse()

    # The incoming request itself is ignored: every call pulls the same listing.
    def handle(request: Request) -> Response:
        return execute_pull(settings, fetch)

    # methods=None leaves the route open to every HTTP method, TRACE and CONNECT included.
    app.add_route("/{full_path:path}", handle, methods=None, include_in_schema=False)
    return app


def create_app_from_env() -> FastAPI:
    load_dotenv()
    configure_logging()
    settings = load_settings()
    register_sensitive_values(settings.token)
    return create_app(settings)
