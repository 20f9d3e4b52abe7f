"""Shared test fixtures."""

from collections.abc import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient

from model_catalog.core.config import settings
from model_catalog.main import app


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture(autouse=True)
def clear_api_keys(monkeypatch: pytest.MonkeyPatch) -> None:
    """Start every test with no provider configured and English messages."""
    for field in ("OPENAI_API_KEY", "ANTHROPIC_API_KEY", "GROQ_API_KEY", "GOOGLE_API_KEY"):
        monkeypatch.setattr(settings, field, "")
    monkeypatch.setattr(settings, "LOCALE", "en")


@pytest.fixture
async def client() -> AsyncGenerator[AsyncClient, None]:
    """HTTP client bound to the ASGI app, no auth headers."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
