"""Shared fixtures: settings, in-memory transport and httpx mock helpers."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

import httpx
import pytest

from adapters.http_client import HttpxTransport, build_client
from core.config import AppSettings
from core.interfaces.transport import TransportResponse

API_KEY = "TESTKEY123"


class StubTransport:
    """Records every `get` and replies with a canned body (or raises)."""

    def __init__(self, body: Any = None, *, error: Exception | None = None) -> None:
        self.body = body if body is not None else {"response": {"status": {"code": 0, "message": "Success"}}}
        self.error = error
        self.calls: list[tuple[str, dict[str, Any]]] = []
        self.closed = False

    def get(self, path: str, params: Mapping[str, Any]) -> TransportResponse:
        self.calls.append((path, dict(params)))
        if self.error is not None:
            raise self.error
        return TransportResponse(status_code=200, body=self.body)

    def close(self) -> None:
        self.closed = True


def envelope(**payload: Any) -> dict[str, Any]:
    return {"response": {"status": {"code": 0, "message": "Success", "version": "4.2"}, **payload}}


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(
        _env_file=None,
        api_key=API_KEY,
        base_url="https://developer.echonest.test",
        http_timeout_seconds=5,
    )


@pytest.fixture
def stub_transport() -> Callable[..., StubTransport]:
    return StubTransport


@pytest.fixture
def mock_http(settings: AppSettings) -> Callable[[Callable[[httpx.Request], httpx.Response]], HttpxTransport]:
    """Build an `HttpxTransport` whose requests are answered by `handler`."""

    def factory(handler: Callable[[httpx.Request], httpx.Response]) -> HttpxTransport:
        client = build_client(settings, transport=httpx.MockTransport(handler))
        return HttpxTransport(settings, client=client)

    return factory
