"""Request logging middleware.

Logs every HTTP request with method, path, status code, latency, and
a short request ID for correlation. The request_id is also injected into
scope["state"] for handlers and returned to the caller as X-Request-ID.

Log format:
    INFO [GET] /api/market/dcr_btc/suspend → 200 (4ms) req_a1b2c3d4e5f6

This is plain ASGI rather than BaseHTTPMiddleware so that ``send`` reaches
the transport directly: the match export must see its own write failures.
Latency for streamed responses covers the whole stream.
"""

import logging
import time
import uuid

from starlette.datastructures import MutableHeaders
from starlette.types import ASGIApp, Message, Receive, Scope, Send

logger = logging.getLogger("adm.request")


class RequestLogMiddleware:
    def __init__(self, app: ASGIApp) -> None:
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        request_id = f"req_{uuid.uuid4().hex[:12]}"
        scope.setdefault("state", {})["request_id"] = request_id
        status_code = 500

        async def send_with_id(message: Message) -> None:
            nonlocal status_code
            if message["type"] == "http.response.start":
                status_code = message["status"]
                headers = MutableHeaders(scope=message)
                headers.append("X-Request-ID", request_id)
            await send(message)

        start = time.perf_counter()
        try:
            await self.app(scope, receive, send_with_id)
        finally:
            elapsed_ms = (time.perf_counter() - start) * 1000
            logger.info(
                "[%s] %s → %d (%.0fms) %s",
                scope["method"],
                scope["path"],
                status_code,
                elapsed_ms,
                request_id,
            )
