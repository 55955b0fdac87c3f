from contextlib import asynccontextmanager
import logging

from cv_customizer.ai.config import load_ai_config
from cv_customizer.ai.factory import get_ai_client

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app):
    cfg = load_ai_config()
    try:
        get_ai_client()
    except (RuntimeError, ValueError) as exc:
        logger.critical("FATAL: generation client unavailable provider=%s: %s", cfg.provider, exc)
        raise RuntimeError(f"Cannot start without a generation client: {exc}") from exc

    logger.info("cv_customizer_started provider=%s model=%s", cfg.provider, cfg.model)
    yield
    logger.info("cv_customizer_stopped")
