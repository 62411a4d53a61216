"""adm_account REST endpoints.

GET  /account/{account_id}
GET  /account/{account_id}/forgive_match/{match_id}
GET  /account/{account_id}/matchoutcomes?n=INT
GET  /account/{account_id}/matchfails?n=INT
POST /account/{account_id}/notify        — body is the notice text
GET  /prepaybonds?n=UINT16&days=UINT&strength=UINT32
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request
from starlette.responses import Response

from config.settings import settings
from src.adm_account.application.service import AccountAdminService
from src.adm_common import params
from src.adm_common.errors import InvalidParameterError
from src.adm_common.response import empty_response, success_response
from src.adm_engine.dependencies import get_engine
from src.adm_engine.domain.protocol import CoreEngineProtocol
from src.adm_gateway.body import read_body

router = APIRouter(tags=["accounts"])


def get_service(
    engine: Annotated[CoreEngineProtocol, Depends(get_engine)],
) -> AccountAdminService:
    return AccountAdminService(engine)


Service = Annotated[AccountAdminService, Depends(get_service)]


@router.get("/account/{account_id}")
async def get_account(account_id: str, service: Service) -> Response:
    acct = params.account_id_from_hex(account_id)
    return success_response(await service.account_info(acct))


@router.get("/account/{account_id}/forgive_match/{match_id}")
async def forgive_match(account_id: str, match_id: str, service: Service) -> Response:
    acct = params.decode_account_id(account_id)
    match = params.decode_match_id(match_id)
    return success_response(await service.forgive_match(account_id, acct, match))


@router.get("/account/{account_id}/matchoutcomes")
async def match_outcomes(
    account_id: str,
    service: Service,
    n: str | None = Query(None),
) -> Response:
    acct = params.decode_account_id(account_id)
    limit = params.optional_int(n, "n", settings.MATCH_HISTORY_LIMIT)
    return success_response(await service.match_outcomes(acct, limit))


@router.get("/account/{account_id}/matchfails")
async def match_fails(
    account_id: str,
    service: Service,
    n: str | None = Query(None),
) -> Response:
    acct = params.decode_account_id(account_id)
    limit = params.optional_int(n, "n", settings.MATCH_HISTORY_LIMIT)
    return success_response(await service.match_fails(acct, limit))


@router.post("/account/{account_id}/notify")
async def notify(account_id: str, request: Request, service: Service) -> Response:
    acct = params.decode_account_id(account_id)
    text = params.notice_text(await read_body(request))
    await service.notify(acct, text)
    return empty_response()


@router.get("/prepaybonds")
async def prepay_bonds(
    service: Service,
    n: str | None = Query(None),
    days: str | None = Query(None),
    strength: str | None = Query(None),
) -> Response:
    count = params.optional_uint(n, "n", 1, bits=16)
    if count > settings.MAX_PREPAID_BONDS:
        raise InvalidParameterError(
            f"requested too many prepaid bonds. max {settings.MAX_PREPAID_BONDS}"
        )
    lock_seconds = params.bond_lock_seconds(days)
    bond_strength = params.optional_uint(strength, "strength", 1, bits=32)
    return success_response(await service.prepay_bonds(count, bond_strength, lock_seconds))
