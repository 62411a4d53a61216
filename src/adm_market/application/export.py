"""Match export: engine match history streamed straight to the response.

The engine walks its match history lazily. Each match is converted to a
MatchRecord here and written by JSONSequenceResponse as soon as it arrives,
so memory use does not grow with the size of the export.
"""

from collections.abc import AsyncGenerator

from src.adm_common.response import JSONSequenceResponse
from src.adm_engine.domain.models import MarketSnapshot
from src.adm_engine.domain.protocol import CoreEngineProtocol
from src.adm_market.application.schemas import MatchRecord


async def match_records(
    engine: CoreEngineProtocol,
    status: MarketSnapshot,
    include_inactive: bool,
    n: int,
) -> AsyncGenerator[MatchRecord, None]:
    """Yield records for a market. ``n <= 0`` means no limit."""
    matches = engine.market_matches(status.base, status.quote, include_inactive, n)
    try:
        async for match in matches:
            yield MatchRecord.from_domain(match)
    finally:
        await matches.aclose()


def stream_matches(
    engine: CoreEngineProtocol,
    status: MarketSnapshot,
    include_inactive: bool,
    n: int,
) -> JSONSequenceResponse:
    return JSONSequenceResponse(
        match_records(engine, status, include_inactive, n), label="matches"
    )
