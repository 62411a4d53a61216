"""Response codec for the admin API.

Success bodies are 4-space indented JSON followed by a newline:

    {
        "market": "dcr_btc",
        "final_epoch": 1234
    }

Errors are plain text (message + newline) with the status carried by the
raised AppError. Unbounded result sets use JSONSequenceResponse, which writes
one JSON document per record instead of a single array.
"""

import json
import logging
from collections.abc import AsyncGenerator
from typing import Any

from fastapi.encoders import jsonable_encoder
from pydantic import BaseModel
from starlette.responses import PlainTextResponse, Response
from starlette.types import Receive, Scope, Send

logger = logging.getLogger(__name__)

JSON_MEDIA_TYPE = "application/json; charset=utf-8"


class PrettyJSONResponse(Response):
    media_type = JSON_MEDIA_TYPE

    def render(self, content: Any) -> bytes:
        return encode_json(content)


def encode_json(content: Any) -> bytes:
    """Indented JSON + trailing newline.

    Values are encoded as given. Views that omit unset fields do so in their
    own serializer.
    """
    data = jsonable_encoder(content)
    return (json.dumps(data, indent=4, ensure_ascii=False) + "\n").encode("utf-8")


def success_response(data: Any = None) -> PrettyJSONResponse:
    return PrettyJSONResponse(content=data, status_code=200)


def empty_response() -> Response:
    """200 with no body, for commands that have nothing to report."""
    return Response(status_code=200)


def error_response(message: str, status_code: int) -> PlainTextResponse:
    return PlainTextResponse(message + "\n", status_code=status_code)


class JSONSequenceResponse(Response):
    """Stream records as a sequence of independent JSON documents.

    The body is not an array. Use ``jq -s`` to turn it into one.

    Headers are committed together with the first record. Once that has
    happened a failure can no longer change the status code, so it is only
    logged; a failure before the first record becomes a 500.
    """

    media_type = JSON_MEDIA_TYPE

    def __init__(
        self,
        records: AsyncGenerator[BaseModel, None],
        label: str,
        status_code: int = 200,
    ) -> None:
        self.records = records
        self.label = label
        self.status_code = status_code
        self.background = None
        self.init_headers()
        self.flushed = 0

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        try:
            await self._write(scope, receive, send)
        finally:
            # The producer may still hold an engine cursor.
            await self.records.aclose()

    async def _write(self, scope: Scope, receive: Receive, send: Send) -> None:
        writing = False
        try:
            async for record in self.records:
                chunk = (record.model_dump_json(indent=4) + "\n").encode("utf-8")
                writing = True
                if self.flushed == 0:
                    await send(
                        {
                            "type": "http.response.start",
                            "status": self.status_code,
                            "headers": self.raw_headers,
                        }
                    )
                await send(
                    {"type": "http.response.body", "body": chunk, "more_body": True}
                )
                writing = False
                self.flushed += 1
        except Exception as exc:
            logger.warning(
                "Failed to write %s response after %d records: %s",
                self.label,
                self.flushed,
                exc,
            )
            if writing:
                # Transport is gone; nothing more can be sent.
                return
            if self.flushed == 0:
                error = error_response(
                    f"failed to retrieve {self.label}", status_code=500
                )
                await error(scope, receive, send)
                return

        if self.flushed == 0:
            await send(
                {
                    "type": "http.response.start",
                    "status": self.status_code,
                    "headers": self.raw_headers,
                }
            )
        await send({"type": "http.response.body", "body": b"", "more_body": False})
