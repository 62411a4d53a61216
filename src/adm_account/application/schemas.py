"""Pydantic schemas for adm_account API responses. Ids are hex, times Unix ms."""

from typing import Any

from pydantic import BaseModel

from src.adm_common.datetime_utils import to_unix_ms
from src.adm_engine.domain.models import AccountInfo, MatchFail, MatchOutcome


class AccountInfoOut(BaseModel):
    account_id: str
    created: int
    tier: int
    score: int
    bonds: list[dict[str, Any]]

    @classmethod
    def from_domain(cls, a: AccountInfo) -> "AccountInfoOut":
        return cls(
            account_id=a.account_id.hex(),
            created=to_unix_ms(a.created),
            tier=a.tier,
            score=a.score,
            bonds=a.bonds,
        )


class MatchOutcomeOut(BaseModel):
    match_id: str
    status: str
    fail: bool
    stamp: int
    value: int
    base: int
    quote: int

    @classmethod
    def from_domain(cls, o: MatchOutcome) -> "MatchOutcomeOut":
        return cls(
            match_id=o.match_id.hex(),
            status=o.status,
            fail=o.fail,
            stamp=to_unix_ms(o.stamp),
            value=o.value,
            base=o.base,
            quote=o.quote,
        )


class MatchFailOut(BaseModel):
    match_id: str
    status: str

    @classmethod
    def from_domain(cls, f: MatchFail) -> "MatchFailOut":
        return cls(match_id=f.match_id.hex(), status=f.status)


class ForgiveResult(BaseModel):
    account_id: str
    forgiven: bool
    unbanned: bool
    forgive_time: int
