"""Catch-all handler tests: unexpected exceptions never leak details.

Design Decisions:
    - Starlette re-raises after the catch-all responds, so the transport is
      built with raise_app_exceptions=False to observe the response
"""

import pytest
from httpx import ASGITransport, AsyncClient


@pytest.fixture
async def lenient_client(app):
    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        yield c


async def test_unexpected_exception_returns_500(lenient_client, monkeypatch, metrics):
    def _explode(value):
        raise RuntimeError("secret internal detail")

    monkeypatch.setattr(
        "roman_api.api.routes.conversion.convert_to_roman", _explode,
    )
    res = await lenient_client.get("/romannumeral", params={"query": "42"})
    assert res.status_code == 500
    assert res.text == "Internal server error"
    assert "secret" not in res.text
    assert res.headers["X-Trace-Id"]
    assert metrics.error_count == 1
    assert metrics.successful_conversions == 0
