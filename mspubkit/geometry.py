"""Shape bounding boxes in EMUs and border adjustments."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Sequence

EMUS_IN_INCH = 914400


class BorderPosition(Enum):
    """Where a shape's border lies relative to its outline."""

    HALF_INSIDE_SHAPE = 0
    INSIDE_SHAPE = 1
    OUTSIDE_SHAPE = 2


@dataclass(frozen=True)
class Coordinate:
    """A rectangle in EMUs relative to the page centre, kept with start <= end."""

    xs: int = 0
    ys: int = 0
    xe: int = 0
    ye: int = 0

    def __post_init__(self) -> None:
        if self.xs > self.xe:
            xs, xe = self.xe, self.xs
            object.__setattr__(self, "xs", xs)
            object.__setattr__(self, "xe", xe)
        if self.ys > self.ye:
            ys, ye = self.ye, self.ys
            object.__setattr__(self, "ys", ys)
            object.__setattr__(self, "ye", ye)

    def x_in(self, page_width: float) -> float:
        """Left edge in inches from the page's left side."""
        return page_width / 2 + self.xs / EMUS_IN_INCH

    def y_in(self, page_height: float) -> float:
        """Top edge in inches from the page's top side."""
        return page_height / 2 + self.ys / EMUS_IN_INCH

    def width_in(self) -> float:
        return (self.xe - self.xs) / EMUS_IN_INCH

    def height_in(self) -> float:
        return (self.ye - self.ys) / EMUS_IN_INCH


def fudged_coordinates(
    coord: Coordinate,
    line_widths: Sequence[int],
    make_bigger: bool,
    border_position: BorderPosition,
) -> Coordinate:
    """Grow or shrink ``coord`` by the widths of its border lines.

    ``line_widths`` holds widths in EMUs in the order top, right, bottom, left;
    missing entries count as zero.
    """
    widths = list(line_widths[:4]) + [0] * (4 - min(len(line_widths), 4))
    if border_position is BorderPosition.HALF_INSIDE_SHAPE:
        top, right, bottom, left = (w // 2 for w in widths)
    elif border_position is BorderPosition.OUTSIDE_SHAPE:
        top, right, bottom, left = widths
    else:
        top = right = bottom = left = 0

    xs, ys, xe, ye = coord.xs, coord.ys, coord.xe, coord.ye
    if make_bigger:
        xs -= left
        xe += right
        ys -= top
        ye += bottom
    else:
        if xe - xs > left:
            xs += left
        if xe - xs > right:
            xe -= right
        if ye - ys > top:
            ys += top
        if ye - ys > bottom:
            ye -= bottom
    return replace(coord, xs=xs, ys=ys, xe=xe, ye=ye)