"""Text run splitting, table cell layout and underline properties."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import ClassVar, Dict, List, Sequence, Tuple


class Underline(Enum):
    NONE = auto()
    SINGLE = auto()
    WORDS_ONLY = auto()
    DOUBLE = auto()
    DOTTED = auto()
    THICK = auto()
    DASH = auto()
    DOT_DASH = auto()
    DOT_DOT_DASH = auto()
    WAVE = auto()
    THICK_WAVE = auto()
    THICK_DOT = auto()
    THICK_DASH = auto()
    THICK_DOT_DASH = auto()
    THICK_DOT_DOT_DASH = auto()
    LONG_DASH = auto()
    THICK_LONG_DASH = auto()
    DOUBLE_WAVE = auto()


@dataclass(frozen=True)
class TextEvent:
    """One piece of output text: a run of characters, a tab, a line break or a space."""

    TEXT: ClassVar[str] = "text"
    TAB: ClassVar[str] = "tab"
    LINE_BREAK: ClassVar[str] = "line-break"
    SPACE: ClassVar[str] = "space"

    kind: str
    text: str = ""


def split_tabs(text: str) -> List[TextEvent]:
    """Split ``text`` into runs, tabs and line breaks."""
    events: List[TextEvent] = []
    pending: List[str] = []

    def flush() -> None:
        if pending:
            events.append(TextEvent(TextEvent.TEXT, "".join(pending)))
            pending.clear()

    for char in text:
        if char == "\t":
            flush()
            events.append(TextEvent(TextEvent.TAB))
        elif char == "\n":
            flush()
            events.append(TextEvent(TextEvent.LINE_BREAK))
        else:
            pending.append(char)
    flush()
    return events


def split_spaces(text: str) -> List[TextEvent]:
    """Split ``text`` like :func:`split_tabs`, turning each space after the first
    of a run of spaces into a separate space event."""
    if not text:
        return [TextEvent(TextEvent.TEXT, "")]
    events: List[TextEvent] = []
    pending: List[str] = []
    consecutive = 0
    for char in text:
        consecutive = consecutive + 1 if char == " " else 0
        if consecutive > 1:
            if pending:
                events.extend(split_tabs("".join(pending)))
                pending.clear()
            events.append(TextEvent(TextEvent.SPACE))
        else:
            pending.append(char)
    events.extend(split_tabs("".join(pending)))
    return events


@dataclass(frozen=True)
class CellInfo:
    """A table cell spanning rows and columns, both ends inclusive."""

    start_row: int
    end_row: int
    start_column: int
    end_column: int


@dataclass
class LayoutCell:
    """A grid position: the index of the cell starting here and its spans."""

    cell: int = 0
    row_span: int = 0
    col_span: int = 0

    @property
    def covered(self) -> bool:
        """True if no cell starts here (the position is covered by a span)."""
        return self.row_span == 0 and self.col_span == 0


def table_layout(
    cells: Sequence[CellInfo], num_rows: int, num_columns: int
) -> List[List[LayoutCell]]:
    """Place ``cells`` on a ``num_rows`` by ``num_columns`` grid.

    Cells that overflow the table or have a negative span are ignored.
    """
    layout = [[LayoutCell() for _ in range(num_columns)] for _ in range(num_rows)]
    for index, info in enumerate(cells):
        if info.end_row >= num_rows or info.end_column >= num_columns:
            continue
        if info.start_row > info.end_row or info.start_column > info.end_column:
            continue
        if info.start_row < 0 or info.start_column < 0:
            continue
        target = layout[info.start_row][info.start_column]
        target.cell = index
        target.row_span = info.end_row - info.start_row + 1
        target.col_span = info.end_column - info.start_column + 1
    return layout


def map_table_text_to_cells(
    paragraphs: Sequence[Sequence[str]], cell_text_ends: Sequence[int]
) -> Tuple[List[Tuple[int, int]], List[List[str]]]:
    """Assign paragraphs of span texts to table cells.

    ``cell_text_ends`` gives the character offset (counted from 1) at which
    each cell's text ends. Returns the first and last paragraph of each cell,
    and the span texts of each paragraph visited, with a trailing lone
    carriage-return span dropped.
    """
    para_to_cell: List[Tuple[int, int]] = []
    para_texts: List[List[str]] = []
    first_para = 0
    offset = 1
    for para, spans in enumerate(paragraphs):
        if len(para_to_cell) >= len(cell_text_ends):
            break
        texts: List[str] = []
        last = len(spans) - 1
        for span_index, span in enumerate(spans):
            offset += len(span)
            if span_index == last and span == "\r":
                continue
            texts.append(span)
        para_texts.append(texts)
        if offset >= cell_text_ends[len(para_to_cell)]:
            para_to_cell.append((first_para, para))
            first_para = para + 1
    return para_to_cell, para_texts


_STYLES = {
    Underline.SINGLE: "solid",
    Underline.WORDS_ONLY: "solid",
    Underline.DOUBLE: "solid",
    Underline.THICK: "solid",
    Underline.DOTTED: "dotted",
    Underline.THICK_DOT: "dotted",
    Underline.DASH: "dash",
    Underline.THICK_DASH: "dash",
    Underline.DOT_DASH: "dot-dash",
    Underline.THICK_DOT_DASH: "dot-dash",
    Underline.DOT_DOT_DASH: "dot-dot-dash",
    Underline.THICK_DOT_DOT_DASH: "dot-dot-dash",
    Underline.WAVE: "wave",
    Underline.THICK_WAVE: "wave",
    Underline.DOUBLE_WAVE: "wave",
    Underline.LONG_DASH: "long-dash",
    Underline.THICK_LONG_DASH: "long-dash",
}

_DOUBLE = {Underline.DOUBLE, Underline.DOUBLE_WAVE}

_BOLD = {
    Underline.THICK,
    Underline.THICK_WAVE,
    Underline.THICK_DOT,
    Underline.THICK_DASH,
    Underline.THICK_DOT_DASH,
    Underline.THICK_DOT_DOT_DASH,
}


def underline_properties(underline: Underline) -> Dict[str, str]:
    """Text properties describing ``underline``; empty for no underline."""
    if underline is Underline.NONE:
        return {}
    return {
        "style:text-underline-style": _STYLES[underline],
        "style:text-underline-type": "double" if underline in _DOUBLE else "single",
        "style:text-underline-width": "bold" if underline in _BOLD else "auto",
        "style:text-underline-mode": (
            "skip-white-space" if underline is Underline.WORDS_ONLY else "continuous"
        ),
    }