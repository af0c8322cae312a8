import uuid
from contextvars import ContextVar, Token

# "-" marks log lines emitted outside an HTTP request (CLI, watch loop).
_request_id_ctx: ContextVar[str] = ContextVar("request_id", default="-")


def new_request_id() -> str:
    return uuid.uuid4().hex


def set_request_id(request_id: str) -> Token[str]:
    return _request_id_ctx.set(request_id)


def get_request_id() -> str:
    return _request_id_ctx.get()


def reset_request_id(token: Token[str]) -> None:
    _request_id_ctx.reset(token)
