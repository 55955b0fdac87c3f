"""Text measurement and whitespace wrapping for the PDF layout."""

from __future__ import annotations

import re
from typing import Protocol

from reportlab.lib.units import mm
from reportlab.pdfbase.pdfmetrics import stringWidth

_TOKEN_RE = re.compile(r"\s+|\S+")


class TextMetrics(Protocol):
    def string_width(self, text: str, bold: bool) -> float: ...


class ReportLabMetrics:
    """Widths of the built-in Helvetica faces, in millimetres."""

    def __init__(
        self,
        font_size: float = 10,
        font_name: str = "Helvetica",
        font_name_bold: str = "Helvetica-Bold",
        unit: float = mm,
    ):
        if font_size <= 0:
            raise ValueError(f"font_size must be positive, got {font_size}")
        self.font_size = font_size
        self.font_name = font_name
        self.font_name_bold = font_name_bold
        self.unit = unit

    def face(self, bold: bool) -> str:
        return self.font_name_bold if bold else self.font_name

    def string_width(self, text: str, bold: bool) -> float:
        return stringWidth(text, self.face(bold), self.font_size) / self.unit


def wrap_text(
    text: str,
    metrics: TextMetrics,
    bold: bool,
    first_width: float,
    width: float,
) -> list[str]:
    """Split ``text`` into sub-lines at whitespace.

    The first sub-line must fit in ``first_width`` (the space left on the
    current line), the rest in ``width``. Whitespace inside a sub-line is kept
    as is; the whitespace at a break is dropped. A word wider than ``width`` is
    never split and overflows its own sub-line. When the first word does not
    fit in a partially used line the first sub-line is empty.

    Always returns at least one sub-line.
    """
    lines: list[str] = []
    current = ""
    limit = first_width

    for token in _TOKEN_RE.findall(text):
        if token.isspace():
            current += token
            continue
        candidate = current + token
        if metrics.string_width(candidate, bold) <= limit:
            current = candidate
            continue
        if current.strip():
            lines.append(current.rstrip())
            current = token
        elif not lines and limit < width:
            lines.append("")
            current = token
        else:
            current = candidate
        limit = width

    lines.append(current)
    return lines
