"""MarketAdminService — market views and the suspend/resume lifecycle.

A market is either Running or Stopped as seen through the Core Engine. A
scheduled suspend is not a separate state: it shows up as a nonzero
suspend_epoch while the market is still running.

Preconditions are checked once, at call time. Two admin calls racing on the
same market can both pass the check; the engine decides which schedule wins.
No locking happens here.
"""

import logging
from datetime import datetime

from src.adm_common.datetime_utils import to_unix_ms
from src.adm_common.errors import (
    EngineFailureError,
    MarketNotRunningError,
    MarketRunningError,
    UnknownMarketError,
)
from src.adm_common.response import JSONSequenceResponse
from src.adm_engine.domain.models import BookOrder, MarketSnapshot
from src.adm_engine.domain.protocol import CoreEngineError, CoreEngineProtocol
from src.adm_market.application.export import stream_matches
from src.adm_market.application.schemas import (
    BookOrderNote,
    MarketStatus,
    OrderBook,
    ResumeResult,
    SuspendResult,
)

logger = logging.getLogger(__name__)


class MarketAdminService:
    def __init__(self, engine: CoreEngineProtocol) -> None:
        self._engine = engine

    # ------------------------------------------------------------------
    # Views
    # ------------------------------------------------------------------

    async def list_markets(self) -> dict[str, MarketStatus]:
        statuses = await self._engine.market_statuses()
        # The key is the name, so it is left out of each value.
        return {
            name: MarketStatus.from_domain(s, with_name=False)
            for name, s in statuses.items()
        }

    async def get_market(self, name: str) -> MarketStatus:
        return MarketStatus.from_domain(await self.require_market(name))

    async def require_market(self, name: str) -> MarketSnapshot:
        status = await self._engine.market_status(name)
        if status is None:
            raise UnknownMarketError(name)
        return status

    async def order_book(self, name: str) -> OrderBook:
        status = await self.require_market(name)
        try:
            orders = await self._engine.book_orders(status.base, status.quote)
        except CoreEngineError as exc:
            raise EngineFailureError("failed to obtain order book", exc) from exc
        return _board(name, status, orders)

    async def epoch_orders(self, name: str) -> OrderBook:
        status = await self.require_market(name)
        try:
            orders = await self._engine.epoch_orders(status.base, status.quote)
        except CoreEngineError as exc:
            raise EngineFailureError("failed to obtain epoch orders", exc) from exc
        return _board(name, status, orders)

    async def export_matches(
        self, name: str, include_inactive: bool, n: int
    ) -> JSONSequenceResponse:
        """Streamed match history; the market is resolved before anything is sent."""
        status = await self.require_market(name)
        return stream_matches(self._engine, status, include_inactive, n)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    async def suspend(
        self, name: str, when: datetime | None, persist_book: bool
    ) -> SuspendResult:
        """Schedule a suspend at the epoch boundary at/after ``when``.

        ``when=None`` means as soon as possible. With ``persist_book`` the
        resting orders are kept for the eventual resume, otherwise purged.
        """
        found, running = await self._engine.market_running(name)
        if not found:
            raise UnknownMarketError(name)
        if not running:
            raise MarketNotRunningError(name)

        try:
            final = await self._engine.suspend_market(name, when, persist_book)
        except CoreEngineError as exc:
            raise EngineFailureError("failed to suspend market", exc) from exc
        if final is None or final.idx == 0:
            # Should not happen.
            raise EngineFailureError("failed to suspend market", f"engine returned {final!r}")

        logger.info(
            "Market %s suspending after epoch %d (%s), persist book: %s",
            name, final.idx, final.end.isoformat(), persist_book,
        )
        return SuspendResult.from_epoch(name, final)

    async def resume(self, name: str, when: datetime | None) -> ResumeResult:
        """Schedule a resume at the epoch boundary at/after ``when``."""
        found, running = await self._engine.market_running(name)
        if not found:
            raise UnknownMarketError(name)
        if running:
            raise MarketRunningError(name)

        try:
            start_epoch, start_time = await self._engine.resume_market(name, when)
        except CoreEngineError as exc:
            raise EngineFailureError("failed to resume market", exc) from exc
        if start_epoch == 0 or start_time is None:
            # Should not happen.
            raise EngineFailureError("failed to resume market", "engine returned epoch 0")

        logger.info(
            "Market %s resuming at epoch %d (%s)", name, start_epoch, start_time.isoformat()
        )
        return ResumeResult(
            market=name, start_epoch=start_epoch, start_time=to_unix_ms(start_time)
        )


def _board(name: str, status: MarketSnapshot, orders: list[BookOrder]) -> OrderBook:
    notes: list[BookOrderNote] = []
    for o in orders:
        try:
            notes.append(BookOrderNote.from_domain(o, name))
        except ValueError as exc:
            logger.error("unable to encode order: %s", exc)
            continue
    return OrderBook(market_id=name, epoch=status.active_epoch, orders=notes)
