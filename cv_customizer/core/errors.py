from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from cv_customizer.ai.types import GenerationError
from cv_customizer.export.pdf import RenderError

logger = logging.getLogger(__name__)


class InputValidationError(ValueError):
    """Client input rejected before any provider or renderer call."""


def _error_body(error: str, details: str | None = None) -> dict[str, str]:
    body = {"error": error}
    if details:
        body["details"] = details
    return body


async def _input_error_handler(request: Request, exc: InputValidationError) -> JSONResponse:
    logger.warning("input_rejected path=%s: %s", request.url.path, exc)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=_error_body(str(exc)))


async def _request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    logger.warning("request_body_invalid path=%s errors=%s", request.url.path, len(errors))
    first = errors[0] if errors else {}
    details = first.get("msg") if isinstance(first, dict) else None
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_error_body("Invalid request body", details),
    )


async def _generation_error_handler(request: Request, exc: GenerationError) -> JSONResponse:
    logger.error("generation_failed path=%s code=%s status=%s", request.url.path, exc.code, exc.status_code)
    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body("Failed to process request", str(exc)),
    )


async def _render_error_handler(request: Request, exc: RenderError) -> JSONResponse:
    logger.error("render_failed path=%s: %s", request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_error_body("Failed to generate PDF", str(exc)),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(InputValidationError, _input_error_handler)
    app.add_exception_handler(RequestValidationError, _request_validation_handler)
    app.add_exception_handler(GenerationError, _generation_error_handler)
    app.add_exception_handler(RenderError, _render_error_handler)
