import requests


class FakeResponse:
    def __init__(self, status_code: int, body: bytes, read_error: Exception | None = None) -> None:
        self.status_code = status_code
        self._body = body
        self._read_error = read_error
        self.closed = False

    @property
    def content(self) -> bytes:
        if self._read_error is not None:
            raise self._read_error
        return self._body

    def close(self) -> None:
        self.closed = True


class FakeSession:
    """Stands in for requests.Session and records every request it receives."""

    def __init__(
        self,
        response: FakeResponse | None = None,
        error: Exception | None = None,
    ) -> None:
        self.response = response
        self.error = error
        self.calls: list[dict[str, object]] = []
        self.closed = False

    def __enter__(self) -> "FakeSession":
        return self

    def __exit__(self, *_: object) -> None:
        self.closed = True

    def get(self, url: str, **kwargs: object) -> FakeResponse:
        self.calls.append({"url": url, **kwargs})
        return self._answer()

    def post(self, url: str, **kwargs: object) -> FakeResponse:
        self.calls.append({"method": "POST", "url": url, **kwargs})
        return self._answer()

    def _answer(self) -> FakeResponse:
        if self.error is not None:
            raise self.error
        assert self.response is not None
        return self.response


def connection_refused() -> requests.ConnectionError:
    return requests.ConnectionError("[Errno 111] Connection refused")
