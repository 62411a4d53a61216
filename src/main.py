"""FastAPI application entry point.

Run with: uvicorn src.main:app --port 8000

The Core Engine is named by the CORE_ENGINE setting ("package.module:factory")
and loaded at startup. Tests call create_app(engine=...) with a double instead.
"""

# ruff: noqa: E402  -- uvloop.install() must run before other imports

import uvloop

uvloop.install()

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from starlette.responses import Response

from config.settings import settings
from src.adm_account.api.router import router as account_router
from src.adm_admin.api.router import router as admin_router
from src.adm_asset.api.router import router as asset_router
from src.adm_common.errors import AppError, EngineFailureError
from src.adm_common.response import error_response
from src.adm_engine.domain.protocol import CoreEngineError, CoreEngineProtocol
from src.adm_engine.loader import load_engine
from src.adm_gateway.middleware.request_log import RequestLogMiddleware
from src.adm_market.api.router import router as market_router

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Startup: attach the Core Engine unless one was injected."""
    if getattr(app.state, "engine", None) is None:
        app.state.engine = load_engine(settings.CORE_ENGINE)
    yield


async def app_error_handler(request: Request, exc: AppError) -> Response:
    if exc.http_status >= 500:
        detail = exc.detail if isinstance(exc, EngineFailureError) else None
        logger.error(
            "[%s] %s failed: %s (code=%d, detail=%s)",
            request.method, request.url.path, exc.message, exc.code, detail,
        )
    return error_response(exc.message, exc.http_status)


async def engine_error_handler(request: Request, exc: CoreEngineError) -> Response:
    logger.error("[%s] %s core engine error: %s", request.method, request.url.path, exc)
    return error_response("core engine error", 500)


def create_app(engine: CoreEngineProtocol | None = None) -> FastAPI:
    app = FastAPI(
        title=settings.APP_NAME,
        version="0.1.0",
        debug=settings.DEBUG,
        lifespan=lifespan,
    )
    app.state.engine = engine

    app.add_middleware(RequestLogMiddleware)
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(CoreEngineError, engine_error_handler)

    app.include_router(admin_router, prefix=settings.API_PREFIX)
    app.include_router(asset_router, prefix=settings.API_PREFIX)
    app.include_router(market_router, prefix=settings.API_PREFIX)
    app.include_router(account_router, prefix=settings.API_PREFIX)
    return app


app = create_app()
