"""
Annotation layout engine.

Lays out the annotations of one side of a line over ``3 * N`` rows. Each
annotation goes through a three-row cycle of phases:

- LEAD: a vertical connector at the anchor column,
- ARROW: an arrow pointing at the line (``v`` below, ``^`` above),
- REVEAL: the annotation text, starting at the anchor column.

Below a line the cycle runs LEAD, ARROW, REVEAL for the first annotation still
pending; annotations already revealed drop out of the scan. Above a line it runs
REVEAL, ARROW, LEAD; revealed annotations keep a connector down to the line.

Within a row annotations are scanned in insertion order with a horizontal cursor.
An annotation whose column lies before the cursor (it sits under text or a glyph
already placed on that row) is skipped for that row.

Rows are produced lazily by generators; all bookkeeping (cursor, revealed count)
is local to the generator, so the engine has no side effects on its input.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Iterator, Sequence

from line_decorator._base import Annotation, ColorRange, Side
from line_decorator.util import ensure_side

VERTICAL = "│"
DOWN_ARROW = "v"
UP_ARROW = "^"


class Phase(enum.Enum):
    LEAD = "lead"
    ARROW = "arrow"
    REVEAL = "reveal"


BELOW_CYCLE: tuple[Phase, ...] = (Phase.LEAD, Phase.ARROW, Phase.REVEAL)
ABOVE_CYCLE: tuple[Phase, ...] = (Phase.REVEAL, Phase.ARROW, Phase.LEAD)


@dataclass(frozen=True)
class Placement:
    """A piece of a rendered row: a connector glyph or annotation text at a column."""
    column: int
    text: str
    color_ranges: tuple[ColorRange, ...] = ()
    annotation: int | None = None

    @property
    def end(self) -> int:
        return self.column + len(self.text)

    @property
    def is_reveal(self) -> bool:
        return self.annotation is not None


@dataclass(frozen=True)
class RenderedRow:
    """One row of layout output: placements ordered left to right, never overlapping."""
    phase: Phase
    placements: tuple[Placement, ...]

    @property
    def revealed(self) -> tuple[int, ...]:
        """Indices of annotations whose text is printed on this row."""
        return tuple(p.annotation for p in self.placements if p.annotation is not None)

    def plain(self) -> str:
        """The row as uncolored text, padded with spaces between placements."""
        out: list[str] = []
        cursor = 0
        for placement in self.placements:
            out.append(" " * (placement.column - cursor))
            out.append(placement.text)
            cursor = placement.end
        return "".join(out)


def _reveal(index: int, annotation: Annotation) -> Placement:
    return Placement(
        column=annotation.column,
        text=annotation.text,
        color_ranges=tuple(annotation.color_ranges),
        annotation=index,
    )


def below_rows(
    annotations: Sequence[Annotation],
    *,
    vertical: str = VERTICAL,
    arrow: str = DOWN_ARROW,
) -> Iterator[RenderedRow]:
    """Yield the ``3 * len(annotations)`` rows drawn under a line, nearest row first."""
    revealed = 0
    for row in range(3 * len(annotations)):
        phase = BELOW_CYCLE[row % 3]
        cursor = 0
        written = False
        placements: list[Placement] = []

        for index in range(revealed, len(annotations)):
            annotation = annotations[index]
            if cursor > annotation.column:
                continue

            if index == revealed and not written:
                if phase is Phase.REVEAL:
                    # Later annotations must not draw connectors over this text.
                    placements.append(_reveal(index, annotation))
                    cursor = annotation.column + len(annotation.text)
                    written = True
                    revealed += 1
                    continue
                glyph = vertical if phase is Phase.LEAD else arrow
            else:
                glyph = vertical

            placements.append(Placement(annotation.column, glyph))
            cursor = annotation.column + len(glyph)

        yield RenderedRow(phase, tuple(placements))


def above_rows(
    annotations: Sequence[Annotation],
    *,
    vertical: str = VERTICAL,
    arrow: str = UP_ARROW,
) -> Iterator[RenderedRow]:
    """Yield the ``3 * len(annotations)`` rows drawn over a line, top row first."""
    revealed = 0
    for row in range(3 * len(annotations)):
        phase = ABOVE_CYCLE[row % 3]
        cursor = 0
        written = False
        placements: list[Placement] = []

        for index, annotation in enumerate(annotations):
            if cursor > annotation.column:
                continue
            cursor = annotation.column

            if index == revealed and not written and phase is Phase.REVEAL:
                placements.append(_reveal(index, annotation))
                cursor += len(annotation.text)
                written = True
                revealed += 1
            elif index == revealed - 1 and phase is Phase.ARROW:
                placements.append(Placement(annotation.column, arrow))
                cursor += len(arrow)
            elif index < revealed:
                placements.append(Placement(annotation.column, vertical))
                cursor += len(vertical)

        yield RenderedRow(phase, tuple(placements))


def layout_rows(annotations: Sequence[Annotation], side: Side | str, **glyphs: str) -> Iterator[RenderedRow]:
    """Dispatch to :func:`above_rows` or :func:`below_rows`."""
    if ensure_side(side) is Side.ABOVE:
        return above_rows(annotations, **glyphs)
    return below_rows(annotations, **glyphs)
