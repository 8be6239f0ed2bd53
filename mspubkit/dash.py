"""Dash patterns for shape outlines."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import List, Optional

from .geometry import EMUS_IN_INCH


class DotStyle(Enum):
    RECT_DOT = 0
    ROUND_DOT = 1


class DashStyle(IntEnum):
    SOLID = 0
    DASH_SYS = 1
    DOT_SYS = 2
    DASH_DOT_SYS = 3
    DASH_DOT_DOT_SYS = 4
    DOT_GEL = 5
    DASH_GEL = 6
    LONG_DASH_GEL = 7
    DASH_DOT_GEL = 8
    LONG_DASH_DOT_GEL = 9
    LONG_DASH_DOT_DOT_GEL = 10


@dataclass(frozen=True)
class Dot:
    """A run of ``count`` dots, each ``length`` inches long (None: default length)."""

    count: int
    length: Optional[float] = None


@dataclass
class Dash:
    """A dash pattern; an empty ``dots`` list means a solid line."""

    distance: float
    dot_style: DotStyle
    dots: List[Dot] = field(default_factory=list)


# style -> (distance in line widths, [(dot count, length in line widths or None)])
_PATTERNS = {
    DashStyle.DASH_SYS: (1, [(1, 3)]),
    DashStyle.DOT_SYS: (1, [(1, None)]),
    DashStyle.DASH_DOT_SYS: (1, [(1, 3), (1, None)]),
    DashStyle.DASH_DOT_DOT_SYS: (1, [(1, 3), (2, None)]),
    DashStyle.DOT_GEL: (3, [(1, None)]),
    DashStyle.DASH_GEL: (3, [(1, 4)]),
    DashStyle.LONG_DASH_GEL: (3, [(1, 8)]),
    DashStyle.DASH_DOT_GEL: (3, [(1, 4), (1, None)]),
    DashStyle.LONG_DASH_DOT_GEL: (3, [(1, 8), (1, None)]),
    DashStyle.LONG_DASH_DOT_DOT_GEL: (3, [(1, 8), (2, None)]),
}


def get_dash(style: int, line_width_emu: int, dot_style: DotStyle) -> Dash:
    """Build the dash pattern for ``style`` scaled to the line width.

    Unknown styles fall back to a solid line.
    """
    try:
        style = DashStyle(style)
    except ValueError:
        style = DashStyle.SOLID
    pattern = _PATTERNS.get(style)
    if pattern is None:
        return Dash(0, DotStyle.RECT_DOT)
    width = line_width_emu / EMUS_IN_INCH
    distance, dots = pattern
    return Dash(
        distance * width,
        dot_style,
        [Dot(count, None if length is None else length * width) for count, length in dots],
    )