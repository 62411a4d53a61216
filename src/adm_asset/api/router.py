"""adm_asset REST endpoints.

GET /asset/{symbol}                       — asset config + live fee/sync state
GET /asset/{symbol}/setfeescale/{scale}   — set the fee rate scale factor
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from starlette.responses import Response

from src.adm_asset.application.service import AssetAdminService
from src.adm_common import params
from src.adm_common.response import empty_response, success_response
from src.adm_engine.dependencies import get_engine
from src.adm_engine.domain.protocol import CoreEngineProtocol

router = APIRouter(prefix="/asset", tags=["assets"])


def get_service(
    engine: Annotated[CoreEngineProtocol, Depends(get_engine)],
) -> AssetAdminService:
    return AssetAdminService(engine)


Service = Annotated[AssetAdminService, Depends(get_service)]


@router.get("/{symbol}")
async def get_asset(symbol: str, service: Service) -> Response:
    symbol = symbol.lower()
    asset_id = params.asset_id_from_symbol(symbol)
    return success_response(await service.get_asset(symbol, asset_id))


@router.get("/{symbol}/setfeescale/{scale}")
async def set_fee_scale(symbol: str, scale: str, service: Service) -> Response:
    symbol = symbol.lower()
    asset_id = params.asset_id_from_symbol(symbol)
    fee_rate_scale = params.parse_float(scale, "fee rate scale")
    await service.set_fee_scale(symbol, asset_id, fee_rate_scale)
    return empty_response()
