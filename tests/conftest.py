"""Shared fixtures: a fake Daily API served through httpx.MockTransport."""

from __future__ import annotations

import json
from typing import Any

import httpx
import pytest

from daily.client import DailyClient
from observability.logger import use_library_defaults
from observability.metrics import APICallCollector

TEST_TOKEN = "test-api-key"


class FakeDailyAPI:
    """Records every request and answers from a queue of canned responses."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._responses: list[Any] = []

    def respond(self, status_code: int = 200, *, json: Any = None, text: str | None = None) -> None:
        if text is not None:
            self._responses.append(httpx.Response(status_code, text=text))
        elif json is not None:
            self._responses.append(httpx.Response(status_code, json=json))
        else:
            self._responses.append(httpx.Response(status_code))

    def fail_with(self, exc_type: type[httpx.TransportError], message: str = "boom") -> None:
        self._responses.append((exc_type, message))

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if not self._responses:
            return httpx.Response(200, json={})
        response = self._responses.pop(0)
        if isinstance(response, tuple):
            exc_type, message = response
            raise exc_type(message, request=request)
        return response

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last.content)

    def last_params(self) -> dict[str, str]:
        return dict(self.last.url.params)


@pytest.fixture(autouse=True)
def _library_logging():
    # The CLI reconfigures structlog; every test starts from the import-time default.
    use_library_defaults()
    yield
    use_library_defaults()


@pytest.fixture
def api() -> FakeDailyAPI:
    return FakeDailyAPI()


@pytest.fixture
def metrics() -> APICallCollector:
    return APICallCollector()


@pytest.fixture
async def client(api: FakeDailyAPI, metrics: APICallCollector):
    daily = DailyClient(
        TEST_TOKEN,
        http_transport=httpx.MockTransport(api.handler),
        metrics=metrics,
    )
    yield daily
    await daily.aclose()
