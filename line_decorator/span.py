from __future__ import annotations

from typing import Iterable

from line_decorator._base import ColorRange
from line_decorator.colors import RESET


# ---------- Span colorizer ----------

def resolve_spans(ranges: Iterable[ColorRange]) -> list[ColorRange]:
    """
    Resolve possibly overlapping ranges into a left-to-right paint order.

    Ranges are sorted by start (stable, so ties keep their insertion order). A range
    starting before the end of the previously painted one is clamped to that end:
    the earlier-starting range keeps the contested characters. A range swallowed
    entirely by clamping is kept as an empty span.
    """
    resolved: list[ColorRange] = []
    cursor = 0
    for span in sorted(ranges, key=lambda r: r.start):
        start = max(span.start, cursor)
        end = max(span.end, start)
        resolved.append(ColorRange(start, end, span.color))
        cursor = end
    return resolved


def paint(
    text: str,
    ranges: Iterable[ColorRange],
    *,
    reset: str = RESET,
    enabled: bool = True,
) -> str:
    """
    Return *text* with every resolved range wrapped in ``color ... reset``.

    Unpainted characters are copied verbatim. With ``enabled=False`` the tokens are
    left out and the text comes back unchanged. Ranges reaching past the end of
    the text are not validated.
    """
    if not enabled:
        return text

    out: list[str] = []
    cursor = 0
    for span in resolve_spans(ranges):
        out.append(text[cursor:span.start])
        out.append(span.color or "")
        out.append(text[span.start:span.end])
        out.append(reset)
        cursor = span.end
    out.append(text[cursor:])
    return "".join(out)
