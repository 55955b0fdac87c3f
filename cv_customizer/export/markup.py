"""Parsing of the light markup used by generated resumes and cover letters.

Two conventions are recognised:

* a line that is exactly ``---`` once surrounding whitespace is trimmed is a
  horizontal rule;
* ``**`` toggles bold emphasis. Markers need not balance: every marker flips
  the state, so an odd count leaves the final run bold. The state never
  carries over to the next line.

Parsing is independent of drawing so the layout code can be tested against
plain data.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Union

RULE_MARKER = "---"
BOLD_MARKER = "**"
PLAIN_TEXT_RULE = "-" * 60

_BOLD_SPAN_RE = re.compile(r"\*\*(.*?)\*\*")


@dataclass(frozen=True)
class Run:
    text: str
    bold: bool = False


@dataclass(frozen=True)
class RuleLine:
    pass


@dataclass(frozen=True)
class TextLine:
    runs: tuple[Run, ...] = field(default_factory=tuple)


ParsedLine = Union[RuleLine, TextLine]


def is_rule_line(line: str) -> bool:
    return line.strip() == RULE_MARKER


def split_runs(line: str) -> tuple[Run, ...]:
    parts = line.split(BOLD_MARKER)
    runs = []
    bold = False
    for index, part in enumerate(parts):
        if index > 0:
            bold = not bold
        runs.append(Run(text=part, bold=bold))
    return tuple(runs)


def parse_line(line: str) -> ParsedLine:
    if is_rule_line(line):
        return RuleLine()
    return TextLine(runs=split_runs(line))


def parse_markup(text: str) -> list[ParsedLine]:
    return [parse_line(line) for line in text.split("\n")]


def to_plain_text(text: str) -> str:
    """Normalize markup for a ``.txt`` download.

    Rule lines become a fixed-width dash rule and ``**bold**`` spans keep their
    content without the markers.
    """
    lines = []
    for line in text.split("\n"):
        if is_rule_line(line):
            # CR of CRLF input stays so line endings survive.
            line = PLAIN_TEXT_RULE + ("\r" if line.endswith("\r") else "")
        lines.append(line)
    return _BOLD_SPAN_RE.sub(r"\1", "\n".join(lines))
