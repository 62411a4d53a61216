"""FastAPI dependency: get_engine.

Usage in any router:
    from src.adm_engine.dependencies import get_engine

    @router.get("/thing")
    async def thing(engine: Annotated[CoreEngineProtocol, Depends(get_engine)]):
        ...
"""

from fastapi import Request

from src.adm_common.errors import InternalError
from src.adm_engine.domain.protocol import CoreEngineProtocol


def get_engine(request: Request) -> CoreEngineProtocol:
    """Return the Core Engine attached to the running app."""
    engine = getattr(request.app.state, "engine", None)
    if engine is None:
        raise InternalError("core engine unavailable")
    return engine
