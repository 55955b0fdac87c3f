from __future__ import annotations

import logging
import os
from typing import Optional, Sequence

import openai
from openai import AsyncOpenAI

from cv_customizer.ai.types import ChatMessage, GenerationError

logger = logging.getLogger(__name__)


def _to_generation_error(exc: Exception) -> GenerationError:
    if isinstance(exc, openai.APITimeoutError):
        return GenerationError(f"AI Service Error: {exc}", code="timeout", status_code=504)
    if isinstance(exc, openai.APIConnectionError):
        return GenerationError(f"AI Service Error: {exc}", code="connection_error", status_code=502)
    if isinstance(exc, openai.RateLimitError):
        return GenerationError(f"AI Service Error: {exc.message}", code="rate_limited", status_code=503)
    if isinstance(exc, (openai.AuthenticationError, openai.PermissionDeniedError)):
        return GenerationError(f"AI Service Error: {exc.message}", code="invalid_credentials", status_code=502)
    if isinstance(exc, openai.APIStatusError):
        return GenerationError(f"AI Service Error: {exc.message}", code="upstream_status", status_code=502)
    if isinstance(exc, openai.APIError):
        return GenerationError(f"AI Service Error: {exc.message}", code="upstream_error", status_code=502)
    return GenerationError(str(exc) or exc.__class__.__name__, code="internal_error", status_code=500)


class OpenAIProvider:
    def __init__(
        self,
        model: str,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout_s: float = 60.0,
        max_retries: int = 0,
    ):
        self._model = model
        key = (api_key or os.getenv("OPENAI_API_KEY") or "").strip()
        if not key:
            raise RuntimeError("OPENAI_API_KEY is missing")

        self._client = AsyncOpenAI(
            api_key=key,
            base_url=(base_url or os.getenv("OPENAI_BASE_URL") or None),
            timeout=float(os.getenv("OPENAI_TIMEOUT_S", str(timeout_s))),
            max_retries=int(os.getenv("OPENAI_MAX_RETRIES", str(max_retries))),
        )

    @property
    def model(self) -> str:
        return self._model

    async def complete(
        self,
        messages: Sequence[ChatMessage],
        *,
        temperature: float,
        max_tokens: int,
    ) -> str:
        payload = [{"role": m.role, "content": m.content} for m in messages]

        try:
            response = await self._client.chat.completions.create(
                model=self._model,
                messages=payload,
                temperature=temperature,
                max_tokens=max_tokens,
            )
        except Exception as exc:
            error = _to_generation_error(exc)
            logger.error(
                "openai_completion_failed model=%s code=%s status=%s: %s",
                self._model,
                error.code,
                error.status_code,
                exc,
            )
            raise error from exc

        if not response.choices:
            return ""
        content = response.choices[0].message.content
        return (content or "").strip()
