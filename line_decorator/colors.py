"""ANSI styling tokens for terminal output.

Only one token applies per painted span; tokens are concatenated as-is, so any
string (including a combination such as ``BOLD + FG_RED``) is a valid color.
"""

from __future__ import annotations

from itertools import cycle
from typing import Final, Iterator

from line_decorator._base import DecoratorException

NORMAL: Final[str] = "\033[0m"
BOLD: Final[str] = "\033[1m"

FG_BLACK: Final[str] = "\033[30m"
FG_RED: Final[str] = "\033[31m"
FG_GREEN: Final[str] = "\033[32m"
FG_YELLOW: Final[str] = "\033[33m"
FG_BLUE: Final[str] = "\033[34m"
FG_MAGENTA: Final[str] = "\033[35m"
FG_CYAN: Final[str] = "\033[36m"
FG_WHITE: Final[str] = "\033[37m"

BG_BLACK: Final[str] = "\033[40m"
BG_RED: Final[str] = "\033[41m"
BG_GREEN: Final[str] = "\033[42m"
BG_YELLOW: Final[str] = "\033[43m"
BG_BLUE: Final[str] = "\033[44m"
BG_MAGENTA: Final[str] = "\033[45m"
BG_CYAN: Final[str] = "\033[46m"
BG_WHITE: Final[str] = "\033[47m"

RESET: Final[str] = NORMAL

_NAMED: Final[dict[str, str]] = {
    "normal": NORMAL,
    "bold": BOLD,
    "fgblack": FG_BLACK,
    "fgred": FG_RED,
    "fggreen": FG_GREEN,
    "fgyellow": FG_YELLOW,
    "fgblue": FG_BLUE,
    "fgmagenta": FG_MAGENTA,
    "fgcyan": FG_CYAN,
    "fgwhite": FG_WHITE,
    "bgblack": BG_BLACK,
    "bgred": BG_RED,
    "bggreen": BG_GREEN,
    "bgyellow": BG_YELLOW,
    "bgblue": BG_BLUE,
    "bgmagenta": BG_MAGENTA,
    "bgcyan": BG_CYAN,
    "bgwhite": BG_WHITE,
}

_PALETTE: Final[tuple[str, ...]] = (
    FG_RED, FG_GREEN, FG_YELLOW, FG_BLUE, FG_MAGENTA, FG_CYAN,
)


def color_by_name(name: str) -> str:
    """
    Resolve a color name to its token.

    Names are case-insensitive and ignore ``_``/``-``, so ``"FG_RED"``,
    ``"fg-red"`` and ``"fgred"`` are equivalent.
    """
    key = name.lower().replace("_", "").replace("-", "")
    try:
        return _NAMED[key]
    except KeyError as e:
        raise DecoratorException(f"Unknown color name: {name!r}") from e


def default_palette() -> Iterator[str]:
    """Foreground tokens cycled for ranges supplied without a color (never exhausted)."""
    return cycle(_PALETTE)
