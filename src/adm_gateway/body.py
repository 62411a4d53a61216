"""Raw request body access for endpoints that take free-form text."""

from starlette.requests import ClientDisconnect, Request

from src.adm_common.errors import InternalError


async def read_body(request: Request) -> bytes:
    try:
        return await request.body()
    except ClientDisconnect as exc:
        raise InternalError(f"unable to read request body: {exc!r}") from exc
