"""Pydantic schemas for adm_asset API responses."""

from pydantic import BaseModel

from src.adm_engine.domain.models import Asset


class AssetInfo(BaseModel):
    id: int
    symbol: str
    version: int
    max_fee_rate: int
    swap_conf: int
    current_fee_rate: int = 0
    scaled_fee_rate: int = 0
    synced: bool = False
    errors: list[str] = []

    @classmethod
    def from_domain(cls, a: Asset) -> "AssetInfo":
        return cls(
            id=a.id,
            symbol=a.symbol,
            version=a.version,
            max_fee_rate=a.max_fee_rate,
            swap_conf=a.swap_conf,
        )
