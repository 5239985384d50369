from __future__ import annotations

import logging
from typing import Iterator

from line_decorator._base import (
    Annotation,
    ColorRange,
    IndexOutOfRangeError,
    Line,
    LineMetadata,
    Side,
)
from line_decorator.colors import default_palette
from line_decorator.util import RangeLike, ensure_color_range, ensure_column, ensure_side, ensure_single_line

logger = logging.getLogger(__name__)


class Document:
    """
    An ordered, append-only collection of lines to decorate.

    Responsibilities:
    - hold lines together with their color ranges and above/below annotations,
    - validate text and indices at the call site (nothing is committed on error),
    - hand out stable indices so later color calls can address lines and annotations.

    Contract:
    - add_* calls return the index of the new element.
    - Invalid text, negative columns and malformed ranges raise InvalidInputError;
      unknown indices raise IndexOutOfRangeError.
    - Color ranges given without a color get the next token of the default palette.
    """
    def __init__(self):
        self._lines: list[Line] = []
        self._default_colors: Iterator[str] = default_palette()

    def __len__(self) -> int:
        return len(self._lines)

    def __iter__(self) -> Iterator[Line]:
        return iter(self._lines)

    def __str__(self) -> str:
        from line_decorator.renderer import render

        return render(self)

    @property
    def lines(self) -> tuple[Line, ...]:
        """The lines in insertion order."""
        return tuple(self._lines)

    # ----- Building API -----

    def add_line(self, text: str, metadata: LineMetadata | None = None) -> int:
        """
        Append a line and return its index.

        Parameters:
        - text: the line's text; must not contain newline, tab or carriage return
        - metadata: file name and line number shown in the gutter (optional)
        """
        ensure_single_line(text)
        self._lines.append(Line(text=text, metadata=metadata or LineMetadata()))
        logger.debug("added line %d: %r", len(self._lines) - 1, text)
        return len(self._lines) - 1

    def add_annotation(self, line: int, side: Side | str, column: int, text: str) -> int:
        """
        Attach an annotation pointing at *column* of *line* and return its index within that side.

        Insertion order matters: it is the order in which the layout reveals annotations.
        Columns past the end of the line are allowed.
        """
        side = ensure_side(side)
        ensure_column(column)
        ensure_single_line(text)
        target = self.get_line(line).annotations(side)
        target.append(Annotation(column=column, text=text))
        logger.debug("added %s annotation %d to line %d at column %d", side.value, len(target) - 1, line, column)
        return len(target) - 1

    def add_above(self, line: int, column: int, text: str) -> int:
        return self.add_annotation(line, Side.ABOVE, column, text)

    def add_below(self, line: int, column: int, text: str) -> int:
        return self.add_annotation(line, Side.BELOW, column, text)

    def color_line(self, line: int, color_range: RangeLike) -> None:
        """Apply a color range to the text of *line*."""
        target = self.get_line(line)
        target.color_ranges.append(self._with_color(color_range))

    def color_annotation(self, line: int, side: Side | str, annotation: int, color_range: RangeLike) -> None:
        """Apply a color range to the text of one annotation."""
        target = self.get_annotation(line, side, annotation)
        target.color_ranges.append(self._with_color(color_range))

    def color_above(self, line: int, annotation: int, color_range: RangeLike) -> None:
        self.color_annotation(line, Side.ABOVE, annotation, color_range)

    def color_below(self, line: int, annotation: int, color_range: RangeLike) -> None:
        self.color_annotation(line, Side.BELOW, annotation, color_range)

    # ----- Lookup -----

    def get_line(self, line: int) -> Line:
        """Return the line at *line*; negative indices are not accepted."""
        if not 0 <= line < len(self._lines):
            raise IndexOutOfRangeError(f"line index {line} out of bounds (have {len(self._lines)} lines)")
        return self._lines[line]

    def get_annotation(self, line: int, side: Side | str, annotation: int) -> Annotation:
        side = ensure_side(side)
        annotations = self.get_line(line).annotations(side)
        if not 0 <= annotation < len(annotations):
            raise IndexOutOfRangeError(
                f"{side.value} annotation index {annotation} out of bounds for line {line} "
                f"(have {len(annotations)})"
            )
        return annotations[annotation]

    def _with_color(self, color_range: RangeLike) -> ColorRange:
        resolved = ensure_color_range(color_range)
        if resolved.color is None:
            resolved = ColorRange(resolved.start, resolved.end, next(self._default_colors))
        return resolved
