from __future__ import annotations

from typing import Sequence, Union

from line_decorator._base import ColorRange, InvalidInputError, Side

UNSUPPORTED_CHARACTERS = ("\n", "\t", "\r")

RangeLike = Union[ColorRange, Sequence]


def ensure_single_line(text: str) -> str:
    if not isinstance(text, str):
        raise InvalidInputError(f"Expected text of type str, got {type(text).__name__}")
    if any(ch in text for ch in UNSUPPORTED_CHARACTERS):
        raise InvalidInputError("string contains one of ['\\n', '\\t', '\\r'] which aren't supported")
    return text


def ensure_side(side: Union[Side, str]) -> Side:
    # Already a Side
    if isinstance(side, Side):
        return side

    # String value ("above" / "below"), any case
    if isinstance(side, str):
        try:
            return Side(side.lower())
        except ValueError as e:
            raise InvalidInputError(f"Unknown side {side!r}; expected 'above' or 'below'") from e

    raise InvalidInputError(f"Unsupported type for side: {type(side).__name__}")


def ensure_column(column: int) -> int:
    if not _is_index(column):
        raise InvalidInputError(f"Expected column of type int, got {type(column).__name__}")
    if column < 0:
        raise InvalidInputError(f"column must be >= 0, got {column}")
    return column


def ensure_color_range(color_range: RangeLike) -> ColorRange:
    # (start, end) or (start, end, color)
    if isinstance(color_range, (tuple, list)) and len(color_range) in (2, 3):
        color_range = ColorRange(*color_range)

    if not isinstance(color_range, ColorRange):
        raise InvalidInputError(
            f"Unsupported type for color range: {type(color_range).__name__}. "
            f"Expected ColorRange or a (start, end[, color]) tuple."
        )

    if not (_is_index(color_range.start) and _is_index(color_range.end)):
        raise InvalidInputError(
            f"color range bounds must be int, got ({color_range.start!r}, {color_range.end!r})"
        )
    if color_range.color is not None and not isinstance(color_range.color, str):
        raise InvalidInputError(f"color must be a str token, got {type(color_range.color).__name__}")
    return color_range


def _is_index(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)
