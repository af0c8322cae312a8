import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from infrastructure.observability.context import new_request_id, reset_request_id, set_request_id
from infrastructure.observability.logging_utils import log_event


logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Binds a request id to the logging context and logs one line per request."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or new_request_id()
        context_token = set_request_id(request_id)
        started = time.monotonic()
        try:
            response = await call_next(request)
        except Exception as error:
            log_event(
                logger,
                logging.ERROR,
                "http.request.crashed",
                method=request.method,
                path=request.url.path,
                error=str(error),
            )
            raise
        else:
            response.headers[REQUEST_ID_HEADER] = request_id
            log_event(
                logger,
                logging.INFO,
                "http.request",
                method=request.method,
                path=request.url.path,
                status=response.status_code,
                duration_ms=round((time.monotonic() - started) * 1000, 2),
            )
            return response
        finally:
            reset_request_id(context_token)
