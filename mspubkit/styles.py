"""Paragraph and character styles and the text properties they produce."""

from __future__ import annotations

import locale
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Dict, List, Optional, Sequence

from .color import Color, ColorReference, color_string
from .geometry import EMUS_IN_INCH
from .textlayout import Underline, underline_properties

POINTS_IN_INCH = 72


class Alignment(Enum):
    LEFT = 0
    RIGHT = 1
    CENTER = 2
    JUSTIFY = 6


class LineSpacingType(Enum):
    """Line spacing as a multiple of single spacing, or in points."""

    LINE_SPACING_SP = auto()
    LINE_SPACING_PT = auto()


@dataclass(frozen=True)
class LineSpacing:
    type: LineSpacingType = LineSpacingType.LINE_SPACING_SP
    amount: float = 1.0


class SuperSubType(Enum):
    NO_SUPER_SUB = auto()
    SUPERSCRIPT = auto()
    SUBSCRIPT = auto()


@dataclass
class ParagraphStyle:
    """Paragraph formatting; ``None`` fields fall back to a default style."""

    align: Optional[Alignment] = None
    line_spacing: Optional[LineSpacing] = None
    space_before_emu: Optional[int] = None
    space_after_emu: Optional[int] = None
    first_line_indent_emu: Optional[int] = None
    left_indent_emu: Optional[int] = None
    right_indent_emu: Optional[int] = None
    drop_cap_lines: Optional[int] = None
    drop_cap_letters: Optional[int] = None
    default_char_style_index: Optional[int] = None


@dataclass
class CharacterStyle:
    """Character formatting. Flags are toggled relative to a default style."""

    underline: Optional[Underline] = None
    italic: bool = False
    bold: bool = False
    outline: bool = False
    shadow: bool = False
    small_caps: bool = False
    all_caps: bool = False
    emboss: bool = False
    engrave: bool = False
    text_scale: Optional[float] = None
    text_size_in_pt: Optional[float] = None
    color_index: int = -1
    font_index: Optional[int] = None
    super_sub_type: SuperSubType = SuperSubType.NO_SUPER_SUB
    lcid: Optional[int] = None


def _percent(value: float) -> str:
    return f"{value * 100:g}%"


def _points(value: float) -> str:
    return f"{value:g}pt"


def _pick(value: Any, default: Any, fallback: Any) -> Any:
    if value is not None:
        return value
    if default is not None:
        return default
    return fallback


_ALIGN_NAMES = {
    Alignment.RIGHT: "right",
    Alignment.CENTER: "center",
    Alignment.JUSTIFY: "justify",
    Alignment.LEFT: "left",
}


def _locale_properties(lcid: int) -> Dict[str, str]:
    name = locale.windows_locale.get(lcid)
    if not name:
        return {}
    name, _, script = name.partition("@")
    language, _, country = name.partition("_")
    props: Dict[str, str] = {}
    if language:
        props["fo:language"] = language
    if country:
        props["fo:country"] = country
    if script:
        props["fo:script"] = script
    return props


@dataclass
class StyleSheet:
    """Document-wide style data used to resolve text properties."""

    default_char_styles: List[CharacterStyle] = field(default_factory=list)
    default_para_styles: List[ParagraphStyle] = field(default_factory=list)
    text_colors: List[ColorReference] = field(default_factory=list)
    palette_colors: List[Color] = field(default_factory=list)
    fonts: List[bytes] = field(default_factory=list)
    encoding: str = "utf-16-le"

    def _decode(self, raw: Sequence[int]) -> str:
        return bytes(raw).decode(self.encoding, errors="replace")

    def paragraph_properties(
        self, style: ParagraphStyle, default_index: Optional[int] = None
    ) -> Dict[str, Any]:
        """Paragraph properties of ``style``, falling back to the default
        paragraph style at ``default_index`` where it exists."""
        if default_index is not None and 0 <= default_index < len(self.default_para_styles):
            default = self.default_para_styles[default_index]
        else:
            default = ParagraphStyle()
        props: Dict[str, Any] = {}
        align = _pick(style.align, default.align, Alignment.LEFT)
        props["fo:text-align"] = _ALIGN_NAMES.get(align, "left")

        spacing = _pick(style.line_spacing, default.line_spacing, LineSpacing())
        if not (spacing.type is LineSpacingType.LINE_SPACING_SP and spacing.amount == 1):
            if spacing.type is LineSpacingType.LINE_SPACING_SP:
                props["fo:line-height"] = _percent(spacing.amount)
            elif spacing.type is LineSpacingType.LINE_SPACING_PT:
                props["fo:line-height"] = _points(spacing.amount)

        for key, own, fallback in (
            ("fo:margin-bottom", style.space_after_emu, default.space_after_emu),
            ("fo:margin-top", style.space_before_emu, default.space_before_emu),
            ("fo:text-indent", style.first_line_indent_emu, default.first_line_indent_emu),
            ("fo:margin-left", style.left_indent_emu, default.left_indent_emu),
            ("fo:margin-right", style.right_indent_emu, default.right_indent_emu),
        ):
            value = _pick(own, fallback, 0)
            if value != 0:
                props[key] = value / EMUS_IN_INCH

        drop_cap_lines = _pick(style.drop_cap_lines, default.drop_cap_lines, 0)
        if drop_cap_lines != 0:
            props["style:drop-cap"] = int(drop_cap_lines)
        drop_cap_letters = _pick(style.drop_cap_letters, default.drop_cap_letters, 0)
        if drop_cap_letters != 0:
            props["style:length"] = int(drop_cap_letters)
        return props

    def character_properties(
        self, style: CharacterStyle, default_index: Optional[int] = None
    ) -> Dict[str, Any]:
        """Character properties of ``style`` relative to the default character
        style at ``default_index`` (0 when not given)."""
        if default_index is None:
            default_index = 0
        if 0 <= default_index < len(self.default_char_styles):
            default = self.default_char_styles[default_index]
        else:
            default = CharacterStyle()
        props: Dict[str, Any] = {}
        if style.italic ^ default.italic:
            props["fo:font-style"] = "italic"
        if style.bold ^ default.bold:
            props["fo:font-weight"] = "bold"
        if style.outline ^ default.outline:
            props["style:text-outline"] = "true"
        if style.shadow ^ default.shadow:
            props["fo:text-shadow"] = "1pt 1pt"
        if style.small_caps ^ default.small_caps:
            props["fo:font-variant"] = "small-caps"
        elif style.all_caps ^ default.all_caps:
            props["fo:text-transform"] = "uppercase"
        if style.emboss ^ default.emboss:
            props["style:font-relief"] = "embossed"
        elif style.engrave ^ default.engrave:
            props["style:font-relief"] = "engraved"

        underline = _pick(style.underline, default.underline, None)
        if underline is not None:
            props.update(underline_properties(underline))

        scale = _pick(style.text_scale, default.text_scale, None)
        if scale is not None:
            props["fo:text-scale"] = _percent(scale)

        size = _pick(style.text_size_in_pt, default.text_size_in_pt, None)
        if size is not None:
            props["fo:font-size"] = size / POINTS_IN_INCH

        props["fo:color"] = color_string(self._text_color(style, default))

        font = self._font_index(style, default)
        if font is not None:
            props["style:font-name"] = self._decode(self.fonts[font])

        if style.super_sub_type is SuperSubType.SUPERSCRIPT:
            props["style:text-position"] = "50% 67%"
        elif style.super_sub_type is SuperSubType.SUBSCRIPT:
            props["style:text-position"] = "-50% 67%"

        lcid = _pick(style.lcid, default.lcid, None)
        if lcid:
            props.update(_locale_properties(lcid))
        return props

    def _text_color(self, style: CharacterStyle, default: CharacterStyle) -> Color:
        for index in (style.color_index, default.color_index):
            if 0 <= index < len(self.text_colors):
                return self.text_colors[index].final_color(self.palette_colors)
        return Color(0, 0, 0)

    def _font_index(self, style: CharacterStyle, default: CharacterStyle) -> Optional[int]:
        for index in (style.font_index, default.font_index):
            if index is not None and 0 <= index < len(self.fonts):
                return index
        return 0 if self.fonts else None