# mspubkit

Pure-Python building blocks for turning Microsoft Publisher document data
into drawing and text properties in the OpenDocument style (`svg:x`,
`fo:font-size`, `style:text-underline-style` and so on).

It has no dependencies outside the standard library.

## Modules

- `mspubkit.color`: `Color` (RGB, 8-bit channels) and `ColorReference`, a
  base and a modified 32-bit colour value. `ColorReference.final_color(palette)`
  resolves palette indices (top byte `0x08`), intensity changes towards black
  or white (top byte `0x10`) and literal BGR values. `color_string(color)`
  gives `#rrggbb`.
- `mspubkit.geometry`: `Coordinate`, a rectangle in EMUs relative to the page
  centre, kept with start <= end, with `x_in`, `y_in`, `width_in` and
  `height_in` in inches. `fudged_coordinates(coord, line_widths, make_bigger,
  border_position)` grows or shrinks a box by its border widths (top, right,
  bottom, left) according to a `BorderPosition`.
- `mspubkit.dash`: `DashStyle`, `DotStyle`, `Dot`, `Dash` and
  `get_dash(style, line_width_emu, dot_style)`, which builds a dash pattern
  scaled to the line width; unknown styles give a solid line (no dots).
- `mspubkit.metadata`: `MetaData` reads the first property set of an OLE
  property-set stream given as bytes (`parse`), filling `meta_data` with
  title, subject, author, keywords, comments, template, category, company and
  language; strings are decoded for code pages 65001 and 1252.
  `parse_times` takes the modification time of a compound file's root entry
  as `meta:creation-date` and `dc:date`. Reads past the end of the data raise
  `EndOfStreamError`.
- `mspubkit.textlayout`: `split_tabs` and `split_spaces` turn text into
  `TextEvent`s (text, tab, line break, space); `table_layout` places
  `CellInfo`s on a grid of `LayoutCell`s, ignoring cells that overflow or have
  negative spans; `map_table_text_to_cells` assigns paragraphs to cells by
  character offsets; `underline_properties` maps an `Underline` to its
  properties.
- `mspubkit.styles`: `ParagraphStyle`, `CharacterStyle`, `Alignment`,
  `LineSpacing`, `LineSpacingType`, `SuperSubType` and `StyleSheet`, whose
  `paragraph_properties` and `character_properties` resolve a style against
  the document's default styles, text colours, palette and fonts.

## Example

```python
from mspubkit.color import Color, ColorReference, color_string
from mspubkit.dash import DashStyle, DotStyle, get_dash
from mspubkit.styles import CharacterStyle, StyleSheet

palette = [Color(0, 0, 0), Color(255, 0, 0)]
red = ColorReference(0x08000001).final_color(palette)
print(color_string(red))          # "#ff0000"

dash = get_dash(DashStyle.DASH_SYS, 914400 // 8, DotStyle.ROUND_DOT)
print(dash.distance, dash.dots)   # 0.125 [Dot(count=1, length=0.375)]

sheet = StyleSheet()
print(sheet.character_properties(CharacterStyle(bold=True)))
# {'fo:font-weight': 'bold', 'fo:color': '#000000'}
```

## What it does not do

The package does not open or parse `.pub` files, does not read OLE compound
file directories beyond the root entry's time stamp, does not build fill
properties or evaluate custom-shape formulas, and produces no drawing or SVG
output. It has no command-line tool. It supplies the pieces listed above for
code that does those things.

## Running the tests

```
pip install -e ".[test]"
pytest
```