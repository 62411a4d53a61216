"""Tests for the match export adapter against the in-memory engine."""

import pytest

from src.adm_market.application.export import match_records, stream_matches
from tests.fakes import FakeCoreEngine

SCOPE = {"type": "http", "method": "GET", "path": "/api/market/dcr_btc/matches", "headers": []}


async def receive() -> dict:
    return {"type": "http.request", "body": b"", "more_body": False}


@pytest.fixture
def engine() -> FakeCoreEngine:
    return FakeCoreEngine.default()


@pytest.mark.asyncio
async def test_records_are_hex_encoded(engine):
    records = [r async for r in match_records(engine, engine.markets["dcr_btc"], True, 0)]
    assert len(records) == 5
    assert records[1].id == "01" * 32
    assert records[1].maker_acct == engine.matches[1].maker_acct.hex()
    assert engine.open_cursors == 0


@pytest.mark.asyncio
async def test_closing_early_releases_engine_cursor(engine):
    records = match_records(engine, engine.markets["dcr_btc"], True, 0)
    await records.__anext__()
    assert engine.open_cursors == 1

    await records.aclose()

    assert engine.open_cursors == 0


@pytest.mark.asyncio
async def test_client_gone_releases_engine_cursor(engine):
    sent = []

    async def send(message: dict) -> None:
        bodies = [m for m in sent if m["type"] == "http.response.body"]
        if message["type"] == "http.response.body" and bodies:
            raise OSError("connection reset by peer")
        sent.append(message)

    resp = stream_matches(engine, engine.markets["dcr_btc"], True, 0)
    await resp(SCOPE, receive, send)

    assert resp.flushed == 1
    assert engine.open_cursors == 0
