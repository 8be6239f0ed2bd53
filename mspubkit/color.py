"""Colours and references into a document palette."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

_PALETTE_TYPE = 0x08
_CHANGE_INTENSITY = 0x10
_BLACK_BASE = 0x1
_WHITE_BASE = 0x2


@dataclass(frozen=True)
class Color:
    """An RGB colour with 8-bit channels."""

    r: int = 0
    g: int = 0
    b: int = 0


@dataclass(frozen=True)
class ColorReference:
    """A colour as stored in a document: a base colour and a modified colour.

    Each is a 32-bit value whose top byte tells how the rest is read: 0x08
    indexes the palette, 0x10 (modified colour only) scales the base colour
    towards black or white, anything else is a literal BGR triple.
    """

    base_color: int
    modified_color: Optional[int] = None

    def __post_init__(self) -> None:
        if self.modified_color is None:
            object.__setattr__(self, "modified_color", self.base_color)

    @staticmethod
    def _real_color(value: int, palette: Sequence[Color]) -> Color:
        if (value >> 24) & 0xFF == _PALETTE_TYPE:
            index = value & 0xFFFFFF
            if index >= len(palette):
                return Color()
            return palette[index]
        return Color(value & 0xFF, (value >> 8) & 0xFF, (value >> 16) & 0xFF)

    def final_color(self, palette: Sequence[Color]) -> Color:
        """Resolve this reference to a concrete colour using ``palette``."""
        modified = self.modified_color
        if (modified >> 24) & 0xFF != _CHANGE_INTENSITY:
            return self._real_color(modified, palette)
        base = self._real_color(self.base_color, palette)
        intensity_base = (modified >> 8) & 0xFF
        intensity = ((modified >> 16) & 0xFF) / 0xFF
        if intensity_base == _BLACK_BASE:
            return Color(
                int(base.r * intensity),
                int(base.g * intensity),
                int(base.b * intensity),
            )
        if intensity_base == _WHITE_BASE:
            return Color(
                int(base.r + (255 - base.r) * (1 - intensity)),
                int(base.g + (255 - base.g) * (1 - intensity)),
                int(base.b + (255 - base.b) * (1 - intensity)),
            )
        return Color()


def color_string(color: Color) -> str:
    """Format a colour as ``#rrggbb``."""
    return f"#{color.r & 0xFF:02x}{color.g & 0xFF:02x}{color.b & 0xFF:02x}"