"""Paginated layout of marked-up text.

Coordinates are top-down: ``y`` grows towards the bottom of the page and is
the baseline of the text drawn there. A text line occupies one line height
below its baseline and a rule half of one, and nothing is placed past the
bottom margin. Every call builds a fresh :class:`Layout`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Union

from .markup import RuleLine, TextLine, parse_markup
from .metrics import ReportLabMetrics, TextMetrics, wrap_text

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PageGeometry:
    """Page size, margin and line height, all in the same unit (mm by default)."""

    width: float = 210.0
    height: float = 297.0
    margin: float = 15.0
    line_height: float = 7.0

    def __post_init__(self) -> None:
        if self.line_height <= 0:
            raise ValueError(f"line_height must be positive, got {self.line_height}")
        if self.margin < 0:
            raise ValueError(f"margin must not be negative, got {self.margin}")
        if self.printable_width <= 0 or self.printable_height <= 0:
            raise ValueError(
                f"margin {self.margin} leaves no printable area on a {self.width}x{self.height} page"
            )
        if self.printable_height < self.line_height:
            raise ValueError("printable height is smaller than one line")

    @property
    def printable_width(self) -> float:
        return self.width - 2 * self.margin

    @property
    def printable_height(self) -> float:
        return self.height - 2 * self.margin

    @property
    def bottom(self) -> float:
        return self.height - self.margin


@dataclass(frozen=True)
class TextOp:
    x: float
    y: float
    text: str
    bold: bool = False


@dataclass(frozen=True)
class RuleOp:
    x1: float
    x2: float
    y: float


DrawOp = Union[TextOp, RuleOp]


@dataclass
class Page:
    ops: list[DrawOp] = field(default_factory=list)

    @property
    def texts(self) -> list[TextOp]:
        return [op for op in self.ops if isinstance(op, TextOp)]

    @property
    def rules(self) -> list[RuleOp]:
        return [op for op in self.ops if isinstance(op, RuleOp)]


@dataclass
class Layout:
    geometry: PageGeometry
    pages: list[Page] = field(default_factory=list)

    @property
    def page_count(self) -> int:
        return len(self.pages)

    def add(self, op: DrawOp) -> None:
        self.pages[-1].ops.append(op)


class MarkupLayoutEngine:
    """Lays out rule lines and bold runs onto fixed-size pages."""

    def __init__(self, geometry: PageGeometry | None = None, metrics: TextMetrics | None = None):
        self.geometry = geometry or PageGeometry()
        self.metrics = metrics or ReportLabMetrics()

    def layout(self, text: str) -> Layout:
        geometry = self.geometry
        result = Layout(geometry=geometry, pages=[Page()])
        y = geometry.margin

        for parsed in parse_markup(text):
            if isinstance(parsed, RuleLine):
                half = geometry.line_height / 2
                y = self._make_room(result, y, half)
                result.add(RuleOp(x1=geometry.margin, x2=geometry.width - geometry.margin, y=y))
                y += half
                continue

            y = self._make_room(result, y, geometry.line_height)
            y = self._layout_line(result, parsed, y)
            y += geometry.line_height

        logger.debug("markup_layout lines=%s pages=%s", text.count("\n") + 1, result.page_count)
        return result

    def _make_room(self, result: Layout, y: float, advance: float) -> float:
        # A fresh page always has room: printable height >= one line.
        if y + advance > self.geometry.bottom:
            result.pages.append(Page())
            return self.geometry.margin
        return y

    def _layout_line(self, result: Layout, line: TextLine, y: float) -> float:
        geometry = self.geometry
        x = geometry.margin
        for run in line.runs:
            sub_lines = wrap_text(
                run.text,
                self.metrics,
                run.bold,
                first_width=geometry.printable_width - (x - geometry.margin),
                width=geometry.printable_width,
            )
            for index, sub_line in enumerate(sub_lines):
                if index > 0:
                    x = geometry.margin
                    y = self._make_room(result, y + geometry.line_height, geometry.line_height)
                if sub_line:
                    result.add(TextOp(x=x, y=y, text=sub_line, bold=run.bold))
                x += self.metrics.string_width(sub_line, run.bold)
        return y


def layout_markup(
    text: str,
    geometry: PageGeometry | None = None,
    metrics: TextMetrics | None = None,
) -> Layout:
    return MarkupLayoutEngine(geometry=geometry, metrics=metrics).layout(text)
