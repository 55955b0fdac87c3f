from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()

def _get_env(name: str, default: str | None = None) -> str | None:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    return value


def _get_env_bool(name: str, default: bool) -> bool:
    raw = _get_env(name, None)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _get_env_int(name: str, default: int) -> int:
    raw = _get_env(name, None)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _get_env_float(name: str, default: float) -> float:
    raw = _get_env(name, None)
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _get_env_list(name: str, default: list[str]) -> tuple[str, ...]:
    raw = _get_env(name, None)
    if raw is None:
        return tuple(default)
    values = [item.strip() for item in raw.split(",")]
    clean = [item for item in values if item]
    return tuple(clean) if clean else tuple(default)


@dataclass(frozen=True)
class Settings:
    log_level: str
    sentry_dsn: str | None
    backend_host: str
    backend_port: int
    rate_limit: str
    rate_limit_enabled: bool
    cors_allowed_origins: tuple[str, ...]
    cors_allow_origin_regex: str | None
    resume_temperature: float
    resume_max_tokens: int
    cover_letter_temperature: float
    cover_letter_max_tokens: int
    max_input_chars: int
    pdf_page_width: float
    pdf_page_height: float
    pdf_margin: float
    pdf_line_height: float
    pdf_font_size: float


def load_settings() -> Settings:
    return Settings(
        log_level=_get_env("LOG_LEVEL", "INFO") or "INFO",
        sentry_dsn=_get_env("SENTRY_DSN"),
        backend_host=_get_env("BACKEND_HOST", "0.0.0.0") or "0.0.0.0",
        backend_port=_get_env_int("BACKEND_PORT", 3001),
        rate_limit=_get_env("RATE_LIMIT", "20/minute") or "20/minute",
        rate_limit_enabled=_get_env_bool("RATE_LIMIT_ENABLED", True),
        cors_allowed_origins=_get_env_list(
            "CORS_ALLOWED_ORIGINS",
            [
                "http://localhost:3000",
                "http://127.0.0.1:3000",
                "http://[::1]:3000",
            ],
        ),
        cors_allow_origin_regex=_get_env("CORS_ALLOW_ORIGIN_REGEX"),
        resume_temperature=_get_env_float("RESUME_TEMPERATURE", 0.7),
        resume_max_tokens=_get_env_int("RESUME_MAX_TOKENS", 1500),
        cover_letter_temperature=_get_env_float("COVER_LETTER_TEMPERATURE", 0.7),
        cover_letter_max_tokens=_get_env_int("COVER_LETTER_MAX_TOKENS", 1000),
        max_input_chars=_get_env_int("MAX_INPUT_CHARS", 50000),
        pdf_page_width=_get_env_float("PDF_PAGE_WIDTH", 210.0),
        pdf_page_height=_get_env_float("PDF_PAGE_HEIGHT", 297.0),
        pdf_margin=_get_env_float("PDF_MARGIN", 15.0),
        pdf_line_height=_get_env_float("PDF_LINE_HEIGHT", 7.0),
        pdf_font_size=_get_env_float("PDF_FONT_SIZE", 10.0),
    )


settings = load_settings()

if settings.max_input_chars < 1:
    raise RuntimeError("MAX_INPUT_CHARS must be a positive integer.")
