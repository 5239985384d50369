from __future__ import annotations

import enum
from dataclasses import dataclass, field
from functools import cached_property


class DecoratorException(Exception):
    """
    Domain-specific error for building and rendering decorated listings.

    Raised when:
    - a line or annotation text contains an unsupported control character,
    - a line or annotation index does not exist,
    - a color name or output format is unknown.
    """
    pass


class InvalidInputError(DecoratorException, ValueError):
    """Text contains a newline, tab or carriage return, or an argument has the wrong kind."""
    pass


class IndexOutOfRangeError(DecoratorException, IndexError):
    """A line index or (line, side, annotation) index does not exist."""
    pass


class Side(str, enum.Enum):
    """Which side of a line an annotation is attached to."""
    ABOVE = "above"
    BELOW = "below"


# ---------- Records ----------

@dataclass(frozen=True)
class ColorRange:
    """
    Half-open character range [start, end) painted with an opaque color token.

    Fields:
    - start: index of the first character to color
    - end: index one past the last character to color
    - color: styling token emitted before the span (e.g. an ANSI escape); None picks a palette color
    """
    start: int
    end: int
    color: str | None = None


@dataclass
class LineMetadata:
    """Where a line came from; used to build the left-hand gutter."""
    file_name: str = ""
    line_number: int = 0

    @cached_property
    def prefix(self) -> str:
        """Gutter text for the line, computed once on first use."""
        return f"{self.file_name} @ {self.line_number}"


@dataclass
class Annotation:
    column: int
    text: str
    color_ranges: list[ColorRange] = field(default_factory=list)


@dataclass
class Line:
    text: str
    metadata: LineMetadata = field(default_factory=LineMetadata)
    color_ranges: list[ColorRange] = field(default_factory=list)
    above: list[Annotation] = field(default_factory=list)
    below: list[Annotation] = field(default_factory=list)

    def annotations(self, side: Side) -> list[Annotation]:
        """The annotation list for *side*, in insertion order."""
        return self.above if side is Side.ABOVE else self.below
