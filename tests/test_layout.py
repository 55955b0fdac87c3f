import math
import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from cv_customizer.export.layout import PageGeometry, RuleOp, TextOp, layout_markup  # noqa: E402
from cv_customizer.export.metrics import ReportLabMetrics, wrap_text  # noqa: E402


class FixedWidthMetrics:
    """One unit per character, 1.5 units for bold."""

    def string_width(self, text: str, bold: bool) -> float:
        return len(text) * (1.5 if bold else 1.0)


SMALL_PAGE = PageGeometry(width=100, height=100, margin=10, line_height=10)
LONG_RUN = " ".join(["abcdefghi"] * 12)


def _layout(text: str):
    return layout_markup(text, geometry=SMALL_PAGE, metrics=FixedWidthMetrics())


class WrapTextTests(unittest.TestCase):
    def setUp(self):
        self.metrics = FixedWidthMetrics()

    def test_wraps_at_whitespace(self):
        lines = wrap_text(LONG_RUN, self.metrics, False, first_width=80, width=80)
        self.assertEqual(lines, [" ".join(["abcdefghi"] * 8), " ".join(["abcdefghi"] * 4)])

    def test_first_word_too_wide_for_remaining_space_moves_to_next_line(self):
        lines = wrap_text("yyyyyyyy zzzz", self.metrics, True, first_width=10, width=80)
        self.assertEqual(lines, ["", "yyyyyyyy zzzz"])

    def test_single_word_wider_than_page_overflows_without_hyphenation(self):
        word = "x" * 100
        self.assertEqual(wrap_text(word, self.metrics, False, first_width=80, width=80), [word])

    def test_whitespace_only_text_is_kept(self):
        self.assertEqual(wrap_text("   ", self.metrics, False, first_width=80, width=80), ["   "])

    def test_empty_text_yields_one_empty_sub_line(self):
        self.assertEqual(wrap_text("", self.metrics, False, first_width=80, width=80), [""])

    def test_bold_metrics_change_the_break(self):
        text = "aaa bbb ccc"
        self.assertEqual(wrap_text(text, self.metrics, False, first_width=11, width=11), [text])
        self.assertEqual(
            wrap_text(text, self.metrics, True, first_width=11, width=11),
            ["aaa bbb", "ccc"],
        )

    def test_reportlab_bold_is_wider(self):
        metrics = ReportLabMetrics(font_size=10)
        self.assertGreater(metrics.string_width("Jane Doe", True), metrics.string_width("Jane Doe", False))


class PaginationTests(unittest.TestCase):
    def test_page_count_for_short_lines(self):
        for count in (1, 7, 8, 9, 16, 17, 30):
            with self.subTest(lines=count):
                text = "\n".join(f"line {i}" for i in range(count))
                result = _layout(text)
                expected = math.ceil(count * SMALL_PAGE.line_height / SMALL_PAGE.printable_height)
                self.assertEqual(result.page_count, expected)

    def test_text_never_placed_below_bottom_margin(self):
        text = "\n".join(["short", "---", LONG_RUN, "**bold** tail"] * 20)
        result = _layout(text)
        self.assertGreater(result.page_count, 1)
        for page in result.pages:
            for op in page.texts:
                self.assertGreaterEqual(op.y, SMALL_PAGE.margin)
                self.assertLessEqual(op.y + SMALL_PAGE.line_height, SMALL_PAGE.bottom)
            for op in page.rules:
                self.assertLessEqual(op.y, SMALL_PAGE.bottom)

    def test_wrapped_continuation_breaks_to_new_page(self):
        text = "\n".join([f"line {i}" for i in range(7)] + [LONG_RUN])
        result = _layout(text)
        self.assertEqual(result.page_count, 2)
        self.assertEqual(result.pages[0].texts[-1].y, 80)
        self.assertEqual(result.pages[1].texts, [TextOp(x=10, y=10, text=" ".join(["abcdefghi"] * 4))])

    def test_each_call_starts_a_fresh_document(self):
        first = _layout("\n".join(["x"] * 20))
        second = _layout("only line")
        self.assertEqual(first.page_count, 3)
        self.assertEqual(second.page_count, 1)
        self.assertEqual(second.pages[0].texts, [TextOp(x=10, y=10, text="only line")])


class LineLayoutTests(unittest.TestCase):
    def test_rule_advances_half_a_line(self):
        result = _layout("a\n---\nb")
        page = result.pages[0]
        self.assertEqual(page.rules, [RuleOp(x1=10, x2=90, y=20)])
        self.assertEqual([op.y for op in page.texts], [10, 25])

    def test_rule_does_not_toggle_bold_for_later_lines(self):
        page = _layout("**a\n---\nb").pages[0]
        self.assertEqual([op.bold for op in page.texts], [True, False])

    def test_inline_bold_continues_on_same_line(self):
        page = _layout("ab **cd** ef").pages[0]
        self.assertEqual(
            page.texts,
            [
                TextOp(x=10, y=10, text="ab ", bold=False),
                TextOp(x=13, y=10, text="cd", bold=True),
                TextOp(x=16, y=10, text=" ef", bold=False),
            ],
        )

    def test_whitespace_run_advances_x(self):
        page = _layout("**a**   **b**").pages[0]
        self.assertEqual([(op.x, op.text) for op in page.texts], [(10, "a"), (11.5, "   "), (14.5, "b")])

    def test_long_run_wraps_and_advances_one_line_per_sub_line(self):
        page = _layout(f"{LONG_RUN}\nnext").pages[0]
        self.assertEqual(
            page.texts,
            [
                TextOp(x=10, y=10, text=" ".join(["abcdefghi"] * 8)),
                TextOp(x=10, y=20, text=" ".join(["abcdefghi"] * 4)),
                TextOp(x=10, y=30, text="next"),
            ],
        )

    def test_bold_run_wraps_to_margin_when_line_is_full(self):
        page = _layout(("x" * 70) + "**yyyyyyyy zzzz**").pages[0]
        self.assertEqual(
            page.texts,
            [
                TextOp(x=10, y=10, text="x" * 70),
                TextOp(x=10, y=20, text="yyyyyyyy zzzz", bold=True),
            ],
        )

    def test_empty_lines_advance_without_drawing(self):
        page = _layout("a\n\nb").pages[0]
        self.assertEqual([op.y for op in page.texts], [10, 30])


class DefaultGeometryScenarioTests(unittest.TestCase):
    def test_name_rule_and_skills(self):
        result = layout_markup("**Jane Doe**\n---\nSkills: Go, Rust")
        self.assertEqual(result.page_count, 1)
        page = result.pages[0]
        self.assertEqual(
            page.texts,
            [
                TextOp(x=15, y=15, text="Jane Doe", bold=True),
                TextOp(x=15, y=25.5, text="Skills: Go, Rust", bold=False),
            ],
        )
        self.assertEqual(page.rules, [RuleOp(x1=15, x2=195, y=22)])


class GeometryTests(unittest.TestCase):
    def test_invalid_geometry_is_rejected(self):
        with self.assertRaises(ValueError):
            PageGeometry(width=20, height=297, margin=15)
        with self.assertRaises(ValueError):
            PageGeometry(line_height=0)
        with self.assertRaises(ValueError):
            PageGeometry(height=40, margin=15, line_height=20)

    def test_printable_area(self):
        geometry = PageGeometry()
        self.assertEqual(geometry.printable_width, 180)
        self.assertEqual(geometry.printable_height, 267)
        self.assertEqual(geometry.bottom, 282)


if __name__ == "__main__":
    unittest.main()
