"""Resolve the Core Engine implementation named by settings.CORE_ENGINE."""

import importlib
import logging

from src.adm_engine.domain.protocol import CoreEngineProtocol

logger = logging.getLogger(__name__)


def load_engine(path: str) -> CoreEngineProtocol:
    """Import ``package.module:factory`` and call the factory.

    The factory may be a dotted attribute, e.g. ``engine:Engine.from_env``.
    """
    if not path:
        raise RuntimeError("CORE_ENGINE is not configured")
    module_path, sep, attr = path.partition(":")
    if not sep or not module_path or not attr:
        raise RuntimeError(f"CORE_ENGINE must look like 'package.module:factory', got {path!r}")
    module = importlib.import_module(module_path)
    factory = module
    for part in attr.split("."):
        factory = getattr(factory, part)
    engine = factory()
    logger.info("Core engine loaded from %s", path)
    return engine
