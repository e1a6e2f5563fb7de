"""Shared fixtures for the PropertyData MCP test suite."""

from typing import Callable, List

import httpx
import pytest

from propertydata_mcp.config import Settings, get_settings
from propertydata_mcp.propertydata_client import PropertyDataClient

TEST_API_KEY = "test-key"


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch, tmp_path):
    """Keep real environment variables and .env files out of the tests."""
    monkeypatch.chdir(tmp_path)
    for var in [
        "PROPERTYDATA_API_KEY",
        "PROPERTYDATA_TRANSPORT",
        "PROPERTYDATA_LOG_LEVEL",
        "PROPERTYDATA_SERVER_HOST",
        "PROPERTYDATA_SERVER_PORT",
    ]:
        monkeypatch.delenv(var, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings():
    return Settings(api_key=TEST_API_KEY)


class RecordingTransport:
    """Captures outgoing requests and answers them with a canned response."""

    def __init__(self) -> None:
        self.requests: List[httpx.Request] = []
        self.responder: Callable[[httpx.Request], httpx.Response] = lambda request: (
            httpx.Response(200, json={})
        )

    def respond_with(self, status_code: int = 200, **kwargs) -> None:
        self.responder = lambda request: httpx.Response(status_code, **kwargs)

    def raise_error(self, exc: Exception) -> None:
        def _raise(request: httpx.Request) -> httpx.Response:
            raise exc

        self.responder = _raise

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.responder(request)

    @property
    def last_request(self) -> httpx.Request:
        assert self.requests, "no request was sent"
        return self.requests[-1]


@pytest.fixture
def transport():
    return RecordingTransport()


@pytest.fixture
def client(settings, transport):
    """PropertyDataClient whose HTTP traffic is served by `transport`."""
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(transport))
    return PropertyDataClient(settings, http_client=http_client)
