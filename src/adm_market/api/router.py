"""adm_market REST endpoints.

GET /markets                         — status of every market, keyed by name
GET /market/{name}                   — status of one market
GET /market/{name}/orderbook         — resting orders
GET /market/{name}/epochorders       — unmatched orders of the current epoch
GET /market/{name}/matches           — match export (JSON sequence, streamed)
GET /market/{name}/resume?t=UNIXMS
GET /market/{name}/suspend?t=UNIXMS&persist=BOOL
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query
from starlette.responses import Response

from src.adm_common import params
from src.adm_common.response import success_response
from src.adm_engine.dependencies import get_engine
from src.adm_engine.domain.protocol import CoreEngineProtocol
from src.adm_market.application.service import MarketAdminService

router = APIRouter(tags=["markets"])


def get_service(
    engine: Annotated[CoreEngineProtocol, Depends(get_engine)],
) -> MarketAdminService:
    return MarketAdminService(engine)


Service = Annotated[MarketAdminService, Depends(get_service)]


@router.get("/markets")
async def list_markets(service: Service) -> Response:
    return success_response(await service.list_markets())


@router.get("/market/{name}")
async def get_market(name: str, service: Service) -> Response:
    return success_response(await service.get_market(name.lower()))


@router.get("/market/{name}/orderbook")
async def get_orderbook(name: str, service: Service) -> Response:
    return success_response(await service.order_book(name.lower()))


@router.get("/market/{name}/epochorders")
async def get_epoch_orders(name: str, service: Service) -> Response:
    return success_response(await service.epoch_orders(name.lower()))


@router.get("/market/{name}/matches")
async def get_matches(
    name: str,
    service: Service,
    includeinactive: str | None = Query(None),
    n: str | None = Query(None, description="Max records; <= 0 for all."),
) -> Response:
    include_inactive = params.optional_bool(includeinactive, "include inactive", False)
    limit = params.optional_int(n, "n", 0)
    return await service.export_matches(name.lower(), include_inactive, limit)


@router.get("/market/{name}/resume")
async def resume_market(
    name: str,
    service: Service,
    t: str | None = Query(None, description="Unix ms; omit for ASAP."),
) -> Response:
    when = params.schedule_time(t, "resume")
    return success_response(await service.resume(name.lower(), when))


@router.get("/market/{name}/suspend")
async def suspend_market(
    name: str,
    service: Service,
    t: str | None = Query(None, description="Unix ms; omit for ASAP."),
    persist: str | None = Query(None, description="Keep the book (default true)."),
) -> Response:
    when = params.schedule_time(t, "suspend")
    persist_book = params.optional_bool(persist, "persist book", True)
    return success_response(await service.suspend(name.lower(), when, persist_book))
