"""AccountAdminService — account lookups and remediation commands.

Everything here is a pass-through to the Core Engine once the parameters
have been validated by the router. Engine failures become 500s.
"""

import logging

from src.adm_account.application.schemas import (
    AccountInfoOut,
    ForgiveResult,
    MatchFailOut,
    MatchOutcomeOut,
)
from src.adm_common.datetime_utils import to_unix_ms, utc_now
from src.adm_common.errors import EngineFailureError
from src.adm_engine.domain.models import Notification
from src.adm_engine.domain.protocol import CoreEngineError, CoreEngineProtocol

logger = logging.getLogger(__name__)


class AccountAdminService:
    def __init__(self, engine: CoreEngineProtocol) -> None:
        self._engine = engine

    async def account_info(self, account_id: bytes) -> AccountInfoOut:
        try:
            info = await self._engine.account_info(account_id)
        except CoreEngineError as exc:
            raise EngineFailureError("failed to retrieve account", exc) from exc
        return AccountInfoOut.from_domain(info)

    async def forgive_match(
        self, account_hex: str, account_id: bytes, match_id: bytes
    ) -> ForgiveResult:
        try:
            forgiven, unbanned = await self._engine.forgive_match_fail(account_id, match_id)
        except CoreEngineError as exc:
            raise EngineFailureError(
                f"failed to forgive failed match {match_id.hex()} for account {account_hex}",
                exc,
            ) from exc
        logger.info(
            "Forgave match %s for account %s (forgiven=%s, unbanned=%s)",
            match_id.hex(), account_hex, forgiven, unbanned,
        )
        return ForgiveResult(
            account_id=account_hex,
            forgiven=forgiven,
            unbanned=unbanned,
            forgive_time=to_unix_ms(utc_now()),
        )

    async def match_outcomes(self, account_id: bytes, n: int) -> list[MatchOutcomeOut]:
        try:
            outcomes = await self._engine.account_match_outcomes(account_id, n)
        except CoreEngineError as exc:
            raise EngineFailureError("failed to retrieve match outcomes", exc) from exc
        return [MatchOutcomeOut.from_domain(o) for o in outcomes]

    async def match_fails(self, account_id: bytes, n: int) -> list[MatchFailOut]:
        try:
            fails = await self._engine.user_match_fails(account_id, n)
        except CoreEngineError as exc:
            raise EngineFailureError("failed to retrieve match fails", exc) from exc
        return [MatchFailOut.from_domain(f) for f in fails]

    async def prepay_bonds(self, n: int, strength: int, lock_seconds: int) -> list[str]:
        try:
            coin_ids = await self._engine.create_prepaid_bonds(n, strength, lock_seconds)
        except CoreEngineError as exc:
            raise EngineFailureError("error creating bonds", exc) from exc
        logger.info(
            "Created %d prepaid bonds (strength %d, lock %ds)",
            len(coin_ids), strength, lock_seconds,
        )
        return [c.hex() for c in coin_ids]

    async def notify(self, account_id: bytes, text: str) -> None:
        await self._engine.notify(account_id, Notification.notice(text))
