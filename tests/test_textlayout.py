import pytest

from mspubkit.textlayout import (
    CellInfo,
    LayoutCell,
    TextEvent,
    Underline,
    map_table_text_to_cells,
    split_spaces,
    split_tabs,
    table_layout,
    underline_properties,
)


def _text(events):
    return "".join(e.text for e in events if e.kind == TextEvent.TEXT)


def test_split_tabs_empty():
    assert split_tabs("") == []


def test_split_tabs_tabs_and_newlines():
    events = split_tabs("ab\tcd\nef")
    assert events == [
        TextEvent(TextEvent.TEXT, "ab"),
        TextEvent(TextEvent.TAB),
        TextEvent(TextEvent.TEXT, "cd"),
        TextEvent(TextEvent.LINE_BREAK),
        TextEvent(TextEvent.TEXT, "ef"),
    ]


def test_split_tabs_leading_and_repeated_tabs():
    events = split_tabs("\t\tx")
    assert [e.kind for e in events] == [TextEvent.TAB, TextEvent.TAB, TextEvent.TEXT]
    assert events[-1].text == "x"


def test_split_spaces_empty_inserts_empty_text():
    assert split_spaces("") == [TextEvent(TextEvent.TEXT, "")]


def test_split_spaces_single_spaces_kept():
    assert split_spaces("a b c") == [TextEvent(TextEvent.TEXT, "a b c")]


def test_split_spaces_runs():
    events = split_spaces("a   b")
    assert events == [
        TextEvent(TextEvent.TEXT, "a "),
        TextEvent(TextEvent.SPACE),
        TextEvent(TextEvent.SPACE),
        TextEvent(TextEvent.TEXT, "b"),
    ]


@pytest.mark.parametrize("text", ["x  y\tz", "  lead", "a\n  b   c", "plain"])
def test_split_spaces_preserves_characters(text):
    events = split_spaces(text)
    rebuilt = "".join(
        {TextEvent.TAB: "\t", TextEvent.LINE_BREAK: "\n", TextEvent.SPACE: " "}.get(e.kind, e.text)
        for e in events
    )
    assert rebuilt == text


def test_table_layout_simple_grid():
    cells = [CellInfo(0, 0, 0, 0), CellInfo(0, 0, 1, 1), CellInfo(1, 1, 0, 1)]
    layout = table_layout(cells, 2, 2)
    assert layout[0][0] == LayoutCell(0, 1, 1)
    assert layout[0][1] == LayoutCell(1, 1, 1)
    assert layout[1][0] == LayoutCell(2, 1, 2)
    assert layout[1][1].covered


def test_table_layout_ignores_bad_cells():
    cells = [CellInfo(0, 5, 0, 0), CellInfo(1, 0, 0, 0), CellInfo(0, 0, 1, 0)]
    layout = table_layout(cells, 2, 2)
    assert all(cell.covered for row in layout for cell in row)


def test_table_layout_shape():
    layout = table_layout([], 3, 4)
    assert len(layout) == 3
    assert all(len(row) == 4 for row in layout)


def test_map_table_text_one_paragraph_per_cell():
    paragraphs = [["ab", "\r"], ["cd", "\r"]]
    mapping, texts = map_table_text_to_cells(paragraphs, [4, 7])
    assert mapping == [(0, 0), (1, 1)]
    assert texts == [["ab"], ["cd"]]


def test_map_table_text_several_paragraphs_in_cell():
    paragraphs = [["a"], ["b"], ["c"]]
    mapping, texts = map_table_text_to_cells(paragraphs, [3, 4])
    assert mapping == [(0, 1), (2, 2)]
    assert texts == [["a"], ["b"], ["c"]]


def test_map_table_text_stops_after_last_cell():
    paragraphs = [["a"], ["b"], ["c"]]
    mapping, texts = map_table_text_to_cells(paragraphs, [2])
    assert mapping == [(0, 0)]
    assert len(texts) == 1


def test_map_table_text_carriage_return_only_dropped_at_end():
    mapping, texts = map_table_text_to_cells([["\r", "x"]], [10])
    assert texts == [["\r", "x"]]
    assert mapping == []


def test_underline_none():
    assert underline_properties(Underline.NONE) == {}


def test_underline_double_wave():
    props = underline_properties(Underline.DOUBLE_WAVE)
    assert props["style:text-underline-style"] == "wave"
    assert props["style:text-underline-type"] == "double"
    assert props["style:text-underline-width"] == "auto"
    assert props["style:text-underline-mode"] == "continuous"


def test_underline_words_only():
    props = underline_properties(Underline.WORDS_ONLY)
    assert props["style:text-underline-style"] == "solid"
    assert props["style:text-underline-mode"] == "skip-white-space"


def test_underline_thick_dot_dot_dash():
    props = underline_properties(Underline.THICK_DOT_DOT_DASH)
    assert props["style:text-underline-style"] == "dot-dot-dash"
    assert props["style:text-underline-width"] == "bold"
    assert props["style:text-underline-type"] == "single"


def test_underline_thick_long_dash_not_bold():
    props = underline_properties(Underline.THICK_LONG_DASH)
    assert props["style:text-underline-style"] == "long-dash"
    assert props["style:text-underline-width"] == "auto"


@pytest.mark.parametrize("underline", [u for u in Underline if u is not Underline.NONE])
def test_underline_always_four_keys(underline):
    assert len(underline_properties(underline)) == 4