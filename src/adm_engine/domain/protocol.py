"""Core Engine Protocol: the only way the admin layer reaches the engine.

Tests inject an in-memory double that conforms to this Protocol; production
wires in the real engine through the CORE_ENGINE setting.

Implementations raise CoreEngineError for anything that went wrong inside the
engine. The admin layer never retries.
"""

from collections.abc import AsyncGenerator
from datetime import datetime
from typing import Any, Protocol

from src.adm_engine.domain.models import (
    AccountInfo,
    BackedAsset,
    BookOrder,
    EpochInfo,
    MarketSnapshot,
    MatchData,
    MatchFail,
    MatchOutcome,
    Notification,
)


class CoreEngineError(Exception):
    """Failure reported by the Core Engine or one of its asset backends."""


class FeeBackendProtocol(Protocol):
    async def fee_rate(self) -> int: ...

    async def synced(self) -> bool: ...


class CoreEngineProtocol(Protocol):
    # --- configuration ---
    async def config_msg(self) -> dict[str, Any]: ...

    async def enable_data_api(self, enabled: bool) -> None: ...

    # --- assets ---
    async def asset(self, asset_id: int) -> BackedAsset: ...

    async def scale_fee_rate(self, asset_id: int, rate: int) -> int: ...

    async def set_fee_rate_scale(self, asset_id: int, scale: float) -> None: ...

    # --- markets ---
    async def market_statuses(self) -> dict[str, MarketSnapshot]: ...

    async def market_status(self, name: str) -> MarketSnapshot | None: ...

    async def market_running(self, name: str) -> tuple[bool, bool]:
        """Return (found, running)."""
        ...

    async def resume_market(
        self, name: str, as_soon_as: datetime | None
    ) -> tuple[int, datetime]:
        """Schedule a resume; return (first epoch index, its start time)."""
        ...

    async def suspend_market(
        self, name: str, as_soon_as: datetime | None, persist_book: bool
    ) -> EpochInfo | None:
        """Schedule a suspend; return the final epoch that will run."""
        ...

    async def book_orders(self, base: int, quote: int) -> list[BookOrder]: ...

    async def epoch_orders(self, base: int, quote: int) -> list[BookOrder]: ...

    def market_matches(
        self, base: int, quote: int, include_inactive: bool, n: int
    ) -> AsyncGenerator[MatchData, None]:
        """Walk the match history lazily. ``n <= 0`` means no limit.

        Callers close the generator when they stop early so the engine can
        release its cursor.
        """
        ...

    # --- accounts ---
    async def account_info(self, account_id: bytes) -> AccountInfo: ...

    async def create_prepaid_bonds(
        self, n: int, strength: int, lock_seconds: int
    ) -> list[bytes]: ...

    async def forgive_match_fail(
        self, account_id: bytes, match_id: bytes
    ) -> tuple[bool, bool]:
        """Return (forgiven, unbanned)."""
        ...

    async def account_match_outcomes(
        self, account_id: bytes, n: int
    ) -> list[MatchOutcome]: ...

    async def user_match_fails(self, account_id: bytes, n: int) -> list[MatchFail]: ...

    # --- notifications ---
    async def notify(self, account_id: bytes, message: Notification) -> None: ...

    async def notify_all(self, message: Notification) -> None: ...
