from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Any

from line_decorator._base import DecoratorException, Line
from line_decorator.colors import RESET
from line_decorator.document import Document
from line_decorator.layout import DOWN_ARROW, UP_ARROW, VERTICAL, RenderedRow, above_rows, below_rows
from line_decorator.span import paint

logger = logging.getLogger(__name__)


@dataclass
class RenderConfig:
    """
    Rendering options for TerminalRenderer.

    Fields:
    - color: emit color and reset tokens; False gives plain text
    - reset: token emitted after every painted span
    - separator: text between the gutter and the row content
    - vertical, down_arrow, up_arrow: connector glyphs
    """
    color: bool = True
    reset: str = RESET
    separator: str = " | "
    vertical: str = VERTICAL
    down_arrow: str = DOWN_ARROW
    up_arrow: str = UP_ARROW


@dataclass
class RenderedLine:
    """Layout of one document line: its above rows (top first), the line, its below rows."""
    line: Line
    above: list[RenderedRow] = field(default_factory=list)
    below: list[RenderedRow] = field(default_factory=list)


@dataclass
class RenderSpec:
    gutter_width: int
    lines: list[RenderedLine]


# ---------- Terminal renderer ----------

class TerminalRenderer:
    """
    Compiler-style rendering of a Document for terminal display.

    Pipeline:
    - build: compute the shared gutter width and lay out every line's annotations
    - render: turn the built spec into a newline-terminated string
    - visualize: build + render

    Output formats:
    - 'ansi': color tokens around painted spans (if config.color)
    - 'plain': no color tokens regardless of config
    """
    ANSI: str = "ansi"
    PLAIN: str = "plain"

    def __init__(self, config: RenderConfig | None = None, **overrides: Any):
        self._config = replace(config or RenderConfig(), **overrides)

    @property
    def config(self) -> RenderConfig:
        return self._config

    def build(self, document: Document) -> RenderSpec:
        """Lay out all lines; rendering the result twice gives identical output."""
        cfg = self._config
        gutter_width = max((len(line.metadata.prefix) for line in document), default=0)

        lines: list[RenderedLine] = []
        for line in document:
            lines.append(
                RenderedLine(
                    line=line,
                    above=list(above_rows(line.above, vertical=cfg.vertical, arrow=cfg.up_arrow)),
                    below=list(below_rows(line.below, vertical=cfg.vertical, arrow=cfg.down_arrow)),
                )
            )
        return RenderSpec(gutter_width=gutter_width, lines=lines)

    def render(self, spec: RenderSpec, *, output_format: str = ANSI) -> str:
        """
        Write out every line with its gutter, colors and annotation rows.

        Errors:
        - DecoratorException on unsupported output_format.
        """
        fmt = output_format.lower()
        if fmt not in (TerminalRenderer.ANSI, TerminalRenderer.PLAIN):
            raise DecoratorException(f"Unsupported output format: {output_format}")
        color = self._config.color and fmt == TerminalRenderer.ANSI

        out: list[str] = []
        blank_gutter = self._gutter("", spec.gutter_width)
        for rendered in spec.lines:
            line = rendered.line
            for row in rendered.above:
                out.append(blank_gutter + self._paint_row(row, color) + "\n")

            out.append(self._gutter(line.metadata.prefix, spec.gutter_width))
            out.append(paint(line.text, line.color_ranges, reset=self._config.reset, enabled=color))
            out.append("\n")

            for row in rendered.below:
                out.append(blank_gutter + self._paint_row(row, color) + "\n")

        logger.debug("rendered %d lines with gutter width %d", len(spec.lines), spec.gutter_width)
        return "".join(out)

    def visualize(self, document: Document, *, output_format: str = ANSI) -> str:
        """Convenience: build + render."""
        return self.render(self.build(document), output_format=output_format)

    # ------------- helpers -------------

    def _gutter(self, prefix: str, width: int) -> str:
        return prefix + " " * (width - len(prefix)) + self._config.separator

    def _paint_row(self, row: RenderedRow, color: bool) -> str:
        out: list[str] = []
        cursor = 0
        for placement in row.placements:
            out.append(" " * (placement.column - cursor))
            if placement.is_reveal:
                out.append(paint(placement.text, placement.color_ranges, reset=self._config.reset, enabled=color))
            else:
                out.append(placement.text)
            cursor = placement.end
        return "".join(out)


def render(document: Document, config: RenderConfig | None = None, **overrides: Any) -> str:
    """Render *document* to a string; one newline-terminated row per output line."""
    return TerminalRenderer(config, **overrides).visualize(document)
