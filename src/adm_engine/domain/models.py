"""Records exchanged with the Core Engine: pure dataclasses, no business logic.

The engine owns all of this state. The admin layer only ever sees a
per-request snapshot.
"""

import json
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any


@dataclass
class MarketSnapshot:
    name: str
    base: int                       # base asset id
    quote: int                      # quote asset id
    running: bool
    epoch_duration_ms: int
    active_epoch: int
    start_epoch: int
    suspend_epoch: int              # 0 = no suspend scheduled
    persist_book: bool              # meaningful only when suspend_epoch != 0


@dataclass
class EpochInfo:
    idx: int
    end: datetime


@dataclass
class Asset:
    id: int
    symbol: str
    version: int
    max_fee_rate: int
    swap_conf: int


@dataclass
class BackedAsset:
    """An asset together with the node backend that answers fee/sync queries."""

    asset: Asset
    backend: Any                    # FeeBackendProtocol


class OrderType(str, Enum):
    LIMIT = "limit"
    MARKET = "market"
    CANCEL = "cancel"


class TimeInForce(str, Enum):
    IMMEDIATE = "immediate"
    STANDING = "standing"


@dataclass
class BookOrder:
    order_id: bytes
    order_type: OrderType
    sell: bool
    quantity: int
    rate: int                       # 0 for market orders
    time_in_force: TimeInForce
    server_time: datetime


@dataclass
class MatchData:
    id: bytes
    taker_sell: bool
    maker: bytes                    # maker order id
    maker_acct: bytes
    maker_swap: str
    maker_redeem: str
    maker_addr: str
    taker: bytes                    # taker order id
    taker_acct: bytes
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


@dataclass
class AccountInfo:
    account_id: bytes
    created: datetime
    tier: int
    score: int
    bonds: list[dict[str, Any]] = field(default_factory=list)


@dataclass
class MatchOutcome:
    match_id: bytes
    status: str
    fail: bool
    stamp: datetime
    value: int
    base: int
    quote: int


@dataclass
class MatchFail:
    match_id: bytes
    status: str


NOTIFICATION_TYPE = 3
NOTIFY_ROUTE = "notify"


@dataclass
class Notification:
    """Trader-protocol message envelope carrying an operator notice."""

    route: str
    payload: str                    # JSON-encoded body
    type: int = NOTIFICATION_TYPE

    @classmethod
    def notice(cls, text: str) -> "Notification":
        return cls(route=NOTIFY_ROUTE, payload=json.dumps(text))
