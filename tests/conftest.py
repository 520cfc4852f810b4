"""Test configuration and fixtures.

The codec is pure and needs no setup; HTTP tests run the FastAPI app
in-process through httpx's ASGITransport (no server, no lifespan).
"""
import logging
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from rupiah.config.settings import get_settings

_SETTINGS_ENV = ("LOG_LEVEL", "API_PREFIX", "DEFAULT_ROUND_UNIT", "WORDS_UPPERCASE")


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Each test starts from default settings and an empty settings cache."""
    for name in _SETTINGS_ENV:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def restore_root_logging():
    """configure_logging() replaces root handlers; put the originals back."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest_asyncio.fixture
async def client() -> AsyncGenerator[AsyncClient, None]:
    from rupiah.main import app

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
