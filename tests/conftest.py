"""Pytest configuration and fixtures.

Provides environment isolation and HTTP test doubles. Fixtures marked autouse
apply to every test.
"""

from __future__ import annotations

from collections.abc import AsyncIterator, Callable
from contextlib import suppress
import os

import httpx
import pytest
import pytest_asyncio

# =============================================================================
# Environment Isolation (Autouse)
# =============================================================================


@pytest.fixture(autouse=True)
def block_dotenv(request, monkeypatch):
    """Prevent python-dotenv from loading project .env files during tests.

    Opt-out: @pytest.mark.allow_dotenv
    """
    if request.node.get_closest_marker("allow_dotenv"):
        return
    with suppress(Exception):
        monkeypatch.setattr(
            "dotenv.load_dotenv", lambda *_args, **_kwargs: False, raising=False
        )


@pytest.fixture(autouse=True)
def isolate_errtuple_env(request, monkeypatch):
    """Clear ERRTUPLE_* env vars so config tests start from defaults.

    Opt-out: @pytest.mark.allow_env_pollution
    """
    if request.node.get_closest_marker("allow_env_pollution"):
        return
    for key in list(os.environ.keys()):
        if key.startswith("ERRTUPLE_"):
            monkeypatch.delenv(key, raising=False)


# =============================================================================
# HTTP Test Doubles
# =============================================================================

Handler = Callable[[httpx.Request], httpx.Response]


@pytest.fixture
def make_client() -> Callable[[Handler], httpx.AsyncClient]:
    """Return a factory for ``httpx.AsyncClient`` backed by a MockTransport.

    The handler may raise to simulate transport failures.
    """

    def _make(handler: Handler) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(handler))

    return _make


@pytest_asyncio.fixture
async def json_client() -> AsyncIterator[httpx.AsyncClient]:
    """Client that answers every request with ``{"id": 1, "name": "Test"}``."""
    async with httpx.AsyncClient(
        transport=httpx.MockTransport(
            lambda _request: httpx.Response(200, json={"id": 1, "name": "Test"})
        )
    ) as client:
        yield client
