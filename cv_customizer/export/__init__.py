from .layout import Layout, MarkupLayoutEngine, Page, PageGeometry, RuleOp, TextOp, layout_markup
from .markup import Run, RuleLine, TextLine, parse_markup, to_plain_text
from .pdf import PDFRenderer, RenderError, render_pdf

__all__ = [
    "Layout",
    "MarkupLayoutEngine",
    "Page",
    "PageGeometry",
    "RuleOp",
    "TextOp",
    "layout_markup",
    "Run",
    "RuleLine",
    "TextLine",
    "parse_markup",
    "to_plain_text",
    "PDFRenderer",
    "RenderError",
    "render_pdf",
]
