from functools import lru_cache

from cv_customizer.ai.config import load_ai_config
from cv_customizer.ai.types import AIClient

from cv_customizer.ai.providers.openai_provider import OpenAIProvider


def build_ai_client() -> AIClient:
    cfg = load_ai_config()

    if cfg.provider == "openai":
        return OpenAIProvider(model=cfg.model)

    raise ValueError(f"Unsupported AI_PROVIDER='{cfg.provider}'")


@lru_cache(maxsize=1)
def get_ai_client() -> AIClient:
    """FastAPI dependency; tests replace it through ``app.dependency_overrides``."""
    return build_ai_client()
