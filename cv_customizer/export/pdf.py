"""Serialize a markup layout to PDF with reportlab.

The built-in Helvetica faces only cover Windows-1252, so other characters
are replaced with ``?`` before layout and reported through
:meth:`PDFRenderer.get_unprintable_warning`.
"""

from __future__ import annotations

import io
import logging

from reportlab.lib.units import mm
from reportlab.pdfgen import canvas

from .layout import Layout, MarkupLayoutEngine, PageGeometry, RuleOp, TextOp
from .metrics import ReportLabMetrics

logger = logging.getLogger(__name__)


class RenderError(Exception):
    """Raised when a PDF cannot be produced; no partial document is returned."""


class PDFRenderer:
    """Render marked-up text into PDF bytes."""

    def __init__(
        self,
        geometry: PageGeometry | None = None,
        font_size: float = 10,
        unit: float = mm,
    ):
        self.geometry = geometry or PageGeometry()
        self.unit = unit
        try:
            self.metrics = ReportLabMetrics(font_size=font_size, unit=unit)
        except ValueError as exc:
            raise RenderError(str(exc)) from exc
        self.unprintable_chars: set[str] = set()

    @classmethod
    def from_dimensions(
        cls,
        width: float,
        height: float,
        margin: float,
        line_height: float,
        font_size: float = 10,
    ) -> "PDFRenderer":
        try:
            geometry = PageGeometry(width=width, height=height, margin=margin, line_height=line_height)
        except ValueError as exc:
            raise RenderError(f"Invalid page geometry: {exc}") from exc
        return cls(geometry=geometry, font_size=font_size)

    def layout(self, text: str) -> Layout:
        return MarkupLayoutEngine(geometry=self.geometry, metrics=self.metrics).layout(text)

    def render(self, text: str, title: str | None = None) -> bytes:
        self.unprintable_chars = set()
        safe_text = self._make_pdf_safe(text.replace("\r\n", "\n"))
        try:
            document = self.layout(safe_text)
            return self._draw(document, title)
        except RenderError:
            raise
        except Exception as exc:
            raise RenderError(f"PDF generation failed: {exc}") from exc

    def _draw(self, document: Layout, title: str | None) -> bytes:
        unit = self.unit
        height = document.geometry.height
        buffer = io.BytesIO()

        c = canvas.Canvas(buffer, pagesize=(document.geometry.width * unit, height * unit))
        if title:
            c.setTitle(title)

        for page in document.pages:
            for op in page.ops:
                if isinstance(op, RuleOp):
                    c.line(op.x1 * unit, (height - op.y) * unit, op.x2 * unit, (height - op.y) * unit)
                elif isinstance(op, TextOp):
                    c.setFont(self.metrics.face(op.bold), self.metrics.font_size)
                    c.drawString(op.x * unit, (height - op.y) * unit, op.text)
            c.showPage()

        c.save()
        logger.info("pdf_rendered pages=%s bytes=%s", document.page_count, buffer.tell())
        return buffer.getvalue()

    def _make_pdf_safe(self, text: str) -> str:
        result = []
        for char in text:
            if char in "\n\t":
                result.append(" " if char == "\t" else char)
                continue
            try:
                char.encode("cp1252")
                result.append(char)
            except UnicodeEncodeError:
                self.unprintable_chars.add(char)
                result.append("?")
        return "".join(result)

    def get_unprintable_warning(self) -> str | None:
        if not self.unprintable_chars:
            return None

        char_list = sorted(self.unprintable_chars)
        formatted_chars = [f"'{char}' (U+{ord(char):04X})" for char in char_list[:10]]
        if len(char_list) > 10:
            formatted_chars.append(f"... and {len(char_list) - 10} more")

        return (
            f"{len(char_list)} unprintable character(s) were replaced with '?' in the PDF: "
            f"{', '.join(formatted_chars)}"
        )


def render_pdf(text: str, geometry: PageGeometry | None = None, font_size: float = 10) -> bytes:
    return PDFRenderer(geometry=geometry, font_size=font_size).render(text)
