"""Root conftest: isolated app + async HTTP client per test.

Invariants:
    - Every test gets a fresh app from create_app(): metrics never leak across tests
    - Requests go in-process through ASGITransport (no network)
"""

import pytest
from httpx import ASGITransport, AsyncClient

from roman_api.config import Settings
from roman_api.core.metrics import MetricsCollector
from roman_api.main import create_app


@pytest.fixture
def settings():
    return Settings(_env_file=None, log_format="text")


@pytest.fixture
def metrics():
    return MetricsCollector()


@pytest.fixture
def app(settings, metrics):
    return create_app(settings=settings, metrics=metrics)


@pytest.fixture
async def client(app):
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
