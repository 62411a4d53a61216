"""Shared test fixtures."""

import pytest
from httpx import ASGITransport, AsyncClient

from src.main import create_app
from tests.fakes import FakeCoreEngine


@pytest.fixture
def engine() -> FakeCoreEngine:
    """Fresh in-memory engine: dcr_btc running, ltc_btc stopped."""
    return FakeCoreEngine.default()


@pytest.fixture
async def client(engine: FakeCoreEngine) -> AsyncClient:
    """Async HTTP client for testing the admin endpoints against the fake engine."""
    transport = ASGITransport(app=create_app(engine))
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
