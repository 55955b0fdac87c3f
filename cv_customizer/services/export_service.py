from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import PurePosixPath
from typing import Any, Literal

from cv_customizer.core.config import Settings, settings as default_settings
from cv_customizer.core.errors import InputValidationError
from cv_customizer.export.markup import to_plain_text
from cv_customizer.export.pdf import PDFRenderer

logger = logging.getLogger(__name__)

ExportFormat = Literal["txt", "pdf"]

SUGGESTED_FILENAMES = {
    "resume": "tailored_resume",
    "cover_letter": "cover_letter",
}
DEFAULT_STEM = "document"

_UNSAFE_CHARS_RE = re.compile(r"[^A-Za-z0-9._-]+")


@dataclass(frozen=True)
class ExportedFile:
    content: bytes
    filename: str
    media_type: str


def suggested_filename(kind: str, fmt: ExportFormat) -> str:
    stem = SUGGESTED_FILENAMES.get(kind, DEFAULT_STEM)
    return f"{stem}.{fmt}"


def sanitize_filename(filename: str | None, fmt: ExportFormat) -> str:
    raw = (filename or "").strip()
    if raw in SUGGESTED_FILENAMES:
        return suggested_filename(raw, fmt)

    name = PurePosixPath(raw.replace("\\", "/")).name
    stem = name[: -len(f".{fmt}")] if name.lower().endswith(f".{fmt}") else name
    stem = _UNSAFE_CHARS_RE.sub("_", stem).strip("._")
    return f"{stem or DEFAULT_STEM}.{fmt}"


def _require_text(text: Any, *, max_chars: int) -> str:
    if not isinstance(text, str) or not text.strip():
        raise InputValidationError("No text content to export")
    if len(text) > max_chars:
        raise InputValidationError(f"text exceeds {max_chars} characters")
    return text


def export_text(text: Any, filename: str | None = None, config: Settings | None = None) -> ExportedFile:
    cfg = config or default_settings
    content = to_plain_text(_require_text(text, max_chars=cfg.max_input_chars))
    name = sanitize_filename(filename, "txt")
    logger.info("txt_export filename=%s chars=%s", name, len(content))
    return ExportedFile(content=content.encode("utf-8"), filename=name, media_type="text/plain; charset=utf-8")


def build_renderer(config: Settings | None = None) -> PDFRenderer:
    cfg = config or default_settings
    return PDFRenderer.from_dimensions(
        width=cfg.pdf_page_width,
        height=cfg.pdf_page_height,
        margin=cfg.pdf_margin,
        line_height=cfg.pdf_line_height,
        font_size=cfg.pdf_font_size,
    )


def export_pdf(text: Any, filename: str | None = None, config: Settings | None = None) -> ExportedFile:
    """Render ``text`` to PDF. Raises ``RenderError`` without producing any bytes on failure."""
    cfg = config or default_settings
    source = _require_text(text, max_chars=cfg.max_input_chars)
    name = sanitize_filename(filename, "pdf")
    renderer = build_renderer(cfg)
    content = renderer.render(source, title=name[: -len(".pdf")])
    warning = renderer.get_unprintable_warning()
    if warning:
        logger.warning("pdf_export_unprintable filename=%s: %s", name, warning)
    logger.info("pdf_export filename=%s bytes=%s", name, len(content))
    return ExportedFile(content=content, filename=name, media_type="application/pdf")
