"""Admin application service: server-wide commands."""

import logging
from typing import Any

from src.adm_common.errors import EngineFailureError
from src.adm_engine.domain.models import Notification
from src.adm_engine.domain.protocol import CoreEngineError, CoreEngineProtocol

logger = logging.getLogger(__name__)


class AdminService:
    def __init__(self, engine: CoreEngineProtocol) -> None:
        self._engine = engine

    async def config(self) -> dict[str, Any]:
        try:
            return await self._engine.config_msg()
        except CoreEngineError as exc:
            raise EngineFailureError("failed to retrieve config", exc) from exc

    async def enable_data_api(self, enabled: bool) -> str:
        await self._engine.enable_data_api(enabled)
        msg = "Data API enabled" if enabled else "Data API disabled"
        logger.info(msg)
        return msg

    async def notify_all(self, text: str) -> None:
        logger.info("Broadcasting operator notice (%d bytes)", len(text.encode("utf-8")))
        await self._engine.notify_all(Notification.notice(text))
