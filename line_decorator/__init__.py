"""
line_decorator: Annotate source lines with colored spans and pointer comments.

A Python library for compiler-style listings: each line can carry colored
ranges plus comments above and below it, each pointing at a column. Comments
are stacked over as many rows as needed so that text and connectors never
collide.

Quick start:
    >>> from line_decorator import Document, LineMetadata, render, colors
    >>> doc = Document()
    >>> i = doc.add_line("x = foo(1, 2)", LineMetadata("main.py", 3))
    >>> doc.color_line(i, (4, 7, colors.FG_RED))
    >>> doc.add_below(i, 4, "undefined name 'foo'")
    0
    >>> print(render(doc))

Main components:
    - Document: lines, color ranges and annotations (append-only)
    - paint: resolves overlapping color ranges into a colored string
    - above_rows / below_rows: the annotation layout engine
    - TerminalRenderer / render: gutter + lines + annotation rows
"""

from line_decorator._base import (
    Annotation,
    ColorRange,
    DecoratorException,
    IndexOutOfRangeError,
    InvalidInputError,
    Line,
    LineMetadata,
    Side,
)
from line_decorator import colors
from line_decorator.span import paint
from line_decorator.layout import Phase, Placement, RenderedRow, above_rows, below_rows, layout_rows
from line_decorator.document import Document
from line_decorator.renderer import RenderConfig, TerminalRenderer, render

__version__ = "0.1.0"

__all__ = [
    "Annotation",
    "ColorRange",
    "DecoratorException",
    "IndexOutOfRangeError",
    "InvalidInputError",
    "Line",
    "LineMetadata",
    "Side",
    "colors",
    "paint",
    "Phase",
    "Placement",
    "RenderedRow",
    "above_rows",
    "below_rows",
    "layout_rows",
    "Document",
    "RenderConfig",
    "TerminalRenderer",
    "render",
]
