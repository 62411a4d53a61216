"""AssetAdminService — asset view and fee-rate scaling.

The asset view combines independent backend queries. Each one either fills
its field or adds a line to ``errors``; none of them can fail the request.
Only an asset that cannot be resolved at all is an error response.
"""

import logging

from src.adm_asset.application.schemas import AssetInfo
from src.adm_common.errors import UnsupportedAssetError
from src.adm_engine.domain.models import BackedAsset
from src.adm_engine.domain.protocol import CoreEngineError, CoreEngineProtocol

logger = logging.getLogger(__name__)


class AssetAdminService:
    def __init__(self, engine: CoreEngineProtocol) -> None:
        self._engine = engine

    async def require_asset(self, symbol: str, asset_id: int) -> BackedAsset:
        try:
            return await self._engine.asset(asset_id)
        except CoreEngineError as exc:
            raise UnsupportedAssetError(symbol, asset_id) from exc

    async def get_asset(self, symbol: str, asset_id: int) -> AssetInfo:
        backed = await self.require_asset(symbol, asset_id)
        info = AssetInfo.from_domain(backed.asset)
        errors: list[str] = []

        try:
            info.current_fee_rate = await backed.backend.fee_rate()
        except Exception as e:
            errors.append(f"unable to get current fee rate: {e}")
        else:
            try:
                scaled = await self._engine.scale_fee_rate(asset_id, info.current_fee_rate)
            except CoreEngineError as e:
                errors.append(f"unable to scale fee rate: {e}")
            else:
                # Same ceiling the markets apply when they process an epoch.
                if scaled > backed.asset.max_fee_rate:
                    scaled = backed.asset.max_fee_rate
                info.scaled_fee_rate = scaled

        try:
            info.synced = await backed.backend.synced()
        except Exception as e:
            errors.append(f"unable to get sync status: {e}")

        info.errors = errors
        return info

    async def set_fee_scale(self, symbol: str, asset_id: int, scale: float) -> None:
        await self.require_asset(symbol, asset_id)
        logger.info(
            "Setting %s (%d) fee rate scale factor to %f", symbol.upper(), asset_id, scale
        )
        await self._engine.set_fee_rate_scale(asset_id, scale)
