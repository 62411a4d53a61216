"""Admin REST API — liveness, config and server-wide commands."""
from typing import Annotated

from fastapi import APIRouter, Depends, Request
from starlette.responses import Response

from src.adm_admin.application.service import AdminService
from src.adm_common import params
from src.adm_common.response import empty_response, success_response
from src.adm_engine.dependencies import get_engine
from src.adm_engine.domain.protocol import CoreEngineProtocol
from src.adm_gateway.body import read_body

router = APIRouter(tags=["admin"])


def get_service(
    engine: Annotated[CoreEngineProtocol, Depends(get_engine)],
) -> AdminService:
    return AdminService(engine)


Service = Annotated[AdminService, Depends(get_service)]


@router.get("/ping")
async def ping() -> Response:
    return success_response("pong")


@router.get("/config")
async def get_config(service: Service) -> Response:
    return success_response(await service.config())


@router.get("/enabledataapi/{yes}")
async def enable_data_api(yes: str, service: Service) -> Response:
    enabled = params.parse_bool(yes, "selection")
    return success_response(await service.enable_data_api(enabled))


@router.post("/notifyall")
async def notify_all(request: Request, service: Service) -> Response:
    text = params.notice_text(await read_body(request))
    await service.notify_all(text)
    return empty_response()
