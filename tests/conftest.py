from collections.abc import Mapping
from typing import Any

import httpx
import pytest

from crypto_news.modules.news.contracts import TransportContract

BASE_URL = "https://api.test"
API_KEY = "secret"


def success(data: Any) -> dict[str, Any]:
    return {"status": "SUCCESS", "data": data, "processingTimeSec": 0.01}


def failure(message: str | None) -> dict[str, Any]:
    return {"status": "ERROR", "message": message}


class FakeTransport(TransportContract):
    """Records every call and replays queued bodies (or raises queued errors)."""

    def __init__(self, *responses: Any) -> None:
        self.calls: list[tuple[str, dict[str, Any] | None]] = []
        self._responses = list(responses) or [success({})]

    async def get(self, path: str, params: Mapping[str, Any] | None = None) -> Any:
        self.calls.append((path, dict(params) if params is not None else None))
        response = self._responses.pop(0) if len(self._responses) > 1 else self._responses[0]
        if isinstance(response, BaseException):
            raise response
        return response

    async def aclose(self) -> None:
        pass


class MockApi:
    """httpx.MockTransport handler with a configurable reply."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._status = 200
        self._body: Any = success({})
        self._error: Exception | None = None
        self.transport = httpx.MockTransport(self)

    def reply(self, body: Any, status: int = 200) -> None:
        self._body = body
        self._status = status
        self._error = None

    def fail(self, error: Exception) -> None:
        self._error = error

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self._error is not None:
            raise self._error
        if isinstance(self._body, (bytes, str)):
            return httpx.Response(self._status, content=self._body)
        return httpx.Response(self._status, json=self._body)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def mock_api() -> MockApi:
    return MockApi()
