"""
Pytest fixtures for WalletGuard tests. Upstream Moralis calls go through
httpx.MockTransport; no network access is needed.
"""

from __future__ import annotations

from typing import Any, Callable

import httpx
import pytest

from backend_walletguard.config.settings import Settings

TEST_API_KEY = "test-moralis-key"
TEST_BASE_URL = "https://moralis.test/api/v2.2"
VALID_WALLET = "0x" + "ab" * 20


class FakeMoralis:
    """Callable MockTransport handler that records requests and replays a canned reply."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._reply: Callable[[httpx.Request], httpx.Response] = lambda request: httpx.Response(
            200, json={"result": []}
        )

    def respond(self, status_code: int = 200, json: Any = None, text: str | None = None) -> None:
        if text is not None:
            self._reply = lambda request: httpx.Response(status_code, text=text)
        else:
            self._reply = lambda request: httpx.Response(status_code, json=json)

    def fail(self, message: str = "connection refused") -> None:
        def _raise(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError(message, request=request)

        self._reply = _raise

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._reply(request)


@pytest.fixture
def settings() -> Settings:
    return Settings(moralis_api_key=TEST_API_KEY, moralis_base_url=TEST_BASE_URL, request_timeout_sec=5.0)


@pytest.fixture
def fake_moralis() -> FakeMoralis:
    return FakeMoralis()


@pytest.fixture
def client(settings, fake_moralis):
    """FastAPI TestClient with settings and the upstream client overridden."""
    from fastapi.testclient import TestClient

    from backend_walletguard.api_server.server import app, get_upstream_client
    from backend_walletguard.config.settings import get_settings

    async def _upstream_client():
        async with httpx.AsyncClient(transport=httpx.MockTransport(fake_moralis)) as c:
            yield c

    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_upstream_client] = _upstream_client
    yield TestClient(app)
    app.dependency_overrides.clear()
