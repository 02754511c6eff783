from __future__ import annotations

import fakeredis
import httpx
import pytest
import pytest_asyncio

from outcome_envelope.config import Settings
from outcome_envelope.core import cache as cache_module
from outcome_envelope.main import create_app


@pytest.fixture
def redis_client(monkeypatch):
    client = fakeredis.FakeAsyncRedis(server=fakeredis.FakeServer(), decode_responses=True)
    monkeypatch.setattr(cache_module.aioredis, "from_url", lambda url, **kwargs: client)
    return client


@pytest.fixture
def app_settings() -> Settings:
    return Settings(
        DEBUG=False,
        CACHE_BACKEND="redis",
        CACHE_TTL_SECONDS=60,
        DEFAULT_PAGE_SIZE=20,
        MAX_PAGE_SIZE=50,
        SEED_DEMO_DATA=False,
    )


@pytest.fixture
def app(app_settings: Settings, redis_client):
    return create_app(app_settings)


@pytest_asyncio.fixture
async def client(app):
    async with app.router.lifespan_context(app):
        transport = httpx.ASGITransport(app=app, raise_app_exceptions=False)
        async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as client:
            yield client
