from __future__ import annotations

from slowapi import Limiter
from slowapi.util import get_remote_address

from cv_customizer.core.config import settings

limiter = Limiter(key_func=get_remote_address, enabled=settings.rate_limit_enabled)


def rate_limit():
    """Per-client limit for routes that spend provider tokens."""
    if settings.rate_limit_enabled:
        return limiter.limit(settings.rate_limit)

    def decorator(func):
        return func

    return decorator
