"""Pydantic schemas for adm_market API responses.

Times are Unix milliseconds. MarketStatus drops its optional fields when they
are None, which is how the name disappears from the /markets map and
persist_book disappears when no suspend is scheduled.
"""

from typing import Any

from pydantic import BaseModel, SerializerFunctionWrapHandler, model_serializer

from src.adm_common.datetime_utils import to_unix_ms
from src.adm_engine.domain.models import (
    BookOrder,
    EpochInfo,
    MarketSnapshot,
    MatchData,
    OrderType,
    TimeInForce,
)

# ---------------------------------------------------------------------------
# Market status
# ---------------------------------------------------------------------------


# The name is dropped inside the /markets map; the suspend fields only appear
# while a suspend is scheduled.
_OMITTED_WHEN_UNSET = ("market", "final_epoch", "persist_book")


class MarketStatus(BaseModel):
    market: str | None = None
    running: bool
    epoch_len: int
    active_epoch: int
    start_epoch: int
    final_epoch: int | None = None
    persist_book: bool | None = None

    @model_serializer(mode="wrap")
    def _omit_unset(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        data = handler(self)
        for key in _OMITTED_WHEN_UNSET:
            if data.get(key) is None:
                data.pop(key, None)
        return data

    @classmethod
    def from_domain(cls, s: MarketSnapshot, with_name: bool = True) -> "MarketStatus":
        scheduled = s.suspend_epoch != 0
        return cls(
            market=s.name if with_name else None,
            running=s.running,
            epoch_len=s.epoch_duration_ms,
            active_epoch=s.active_epoch,
            start_epoch=s.start_epoch,
            final_epoch=s.suspend_epoch if scheduled else None,
            persist_book=s.persist_book if scheduled else None,
        )


# ---------------------------------------------------------------------------
# Lifecycle transitions
# ---------------------------------------------------------------------------


class ResumeResult(BaseModel):
    market: str
    start_epoch: int
    start_time: int


class SuspendResult(BaseModel):
    market: str
    final_epoch: int
    suspend_time: int

    @classmethod
    def from_epoch(cls, market: str, epoch: EpochInfo) -> "SuspendResult":
        return cls(market=market, final_epoch=epoch.idx, suspend_time=to_unix_ms(epoch.end))


# ---------------------------------------------------------------------------
# Order book
# ---------------------------------------------------------------------------

SIDE_BUY = 1
SIDE_SELL = 2
TIF_IMMEDIATE = 0
TIF_STANDING = 1


class BookOrderNote(BaseModel):
    market_id: str
    order_id: str
    side: int
    quantity: int
    rate: int
    tif: int
    time: int

    @classmethod
    def from_domain(cls, o: BookOrder, market: str) -> "BookOrderNote":
        """Raises ValueError for orders that have no book representation."""
        if o.order_type == OrderType.CANCEL:
            raise ValueError(f"cannot book a cancel order ({o.order_id.hex()})")
        return cls(
            market_id=market,
            order_id=o.order_id.hex(),
            side=SIDE_SELL if o.sell else SIDE_BUY,
            quantity=o.quantity,
            rate=o.rate if o.order_type == OrderType.LIMIT else 0,
            tif=TIF_STANDING if o.time_in_force == TimeInForce.STANDING else TIF_IMMEDIATE,
            time=to_unix_ms(o.server_time),
        )


class OrderBook(BaseModel):
    market_id: str
    epoch: int
    orders: list[BookOrderNote]


# ---------------------------------------------------------------------------
# Match export record
# ---------------------------------------------------------------------------


class MatchRecord(BaseModel):
    id: str
    taker_sell: bool
    maker: str
    maker_acct: str
    maker_swap: str
    maker_redeem: str
    maker_addr: str
    taker: str
    taker_acct: str
    taker_swap: str
    taker_redeem: str
    taker_addr: str
    epoch_idx: int
    epoch_dur: int
    quantity: int
    rate: int
    base_rate: float
    quote_rate: float
    active: bool
    status: str

    @classmethod
    def from_domain(cls, m: MatchData) -> "MatchRecord":
        return cls(
            id=m.id.hex(),
            taker_sell=m.taker_sell,
            maker=m.maker.hex(),
            maker_acct=m.maker_acct.hex(),
            maker_swap=m.maker_swap,
            maker_redeem=m.maker_redeem,
            maker_addr=m.maker_addr,
            taker=m.taker.hex(),
            taker_acct=m.taker_acct.hex(),
            taker_swap=m.taker_swap,
            taker_redeem=m.taker_redeem,
            taker_addr=m.taker_addr,
            epoch_idx=m.epoch_idx,
            epoch_dur=m.epoch_dur,
            quantity=m.quantity,
            rate=m.rate,
            base_rate=m.base_rate,
            quote_rate=m.quote_rate,
            active=m.active,
            status=m.status,
        )
