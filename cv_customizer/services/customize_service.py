from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Any

from cv_customizer.ai.types import AIClient
from cv_customizer.core.config import Settings, settings as default_settings
from cv_customizer.core.errors import InputValidationError
from cv_customizer.prompts.customize import build_cover_letter_messages, build_resume_messages

logger = logging.getLogger(__name__)

RESUME_FALLBACK = "Error: Could not generate tailored resume."
COVER_LETTER_FALLBACK = "Error: Could not generate cover letter."


@dataclass(frozen=True)
class CustomizeResult:
    tailored_resume: str
    cover_letter: str


def _field_length(value: Any) -> int | None:
    return len(value) if isinstance(value, str) else None


def validate_inputs(current_resume: Any, job_description: Any, *, max_chars: int) -> tuple[str, str]:
    if not isinstance(current_resume, str) or not current_resume.strip():
        raise InputValidationError("Missing currentResume or jobDescription")
    if not isinstance(job_description, str) or not job_description.strip():
        raise InputValidationError("Missing currentResume or jobDescription")
    if len(current_resume) > max_chars:
        raise InputValidationError(f"currentResume exceeds {max_chars} characters")
    if len(job_description) > max_chars:
        raise InputValidationError(f"jobDescription exceeds {max_chars} characters")
    return current_resume, job_description


async def customize(
    current_resume: Any,
    job_description: Any,
    client: AIClient,
    config: Settings | None = None,
) -> CustomizeResult:
    """Tailor the resume and write a cover letter with two independent completions.

    Input is validated before the client is touched. Provider failures
    propagate as ``GenerationError``; an empty completion is replaced with a
    fallback message instead.
    """
    cfg = config or default_settings
    logger.info(
        "customize_request resume_len=%s jd_len=%s",
        _field_length(current_resume),
        _field_length(job_description),
    )
    resume_text, jd_text = validate_inputs(current_resume, job_description, max_chars=cfg.max_input_chars)

    started = time.perf_counter()
    tailored_resume = await client.complete(
        build_resume_messages(resume_text, jd_text),
        temperature=cfg.resume_temperature,
        max_tokens=cfg.resume_max_tokens,
    )
    logger.info("tailored_resume_generated len=%s", len(tailored_resume))

    cover_letter = await client.complete(
        build_cover_letter_messages(resume_text, jd_text),
        temperature=cfg.cover_letter_temperature,
        max_tokens=cfg.cover_letter_max_tokens,
    )
    logger.info(
        "cover_letter_generated len=%s latency_ms=%s",
        len(cover_letter),
        int((time.perf_counter() - started) * 1000),
    )

    return CustomizeResult(
        tailored_resume=tailored_resume.strip() or RESUME_FALLBACK,
        cover_letter=cover_letter.strip() or COVER_LETTER_FALLBACK,
    )
