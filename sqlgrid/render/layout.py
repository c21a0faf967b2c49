"""Column widths, border glyphs and row formatting for text grids."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence

from .cells import split_lines, stringify
from .types import BorderStyle, Row


@dataclass(frozen=True, slots=True)
class GlyphSet:
    """Border strings for one style.

    ``row_*`` frame header and data rows, ``rule_*`` frame the divider row
    under the header, and ``spacer`` is repeated to fill each divider cell.
    """

    row_leader: str
    row_divider: str
    row_trailer: str
    rule_leader: str
    rule_divider: str
    rule_trailer: str
    spacer: str


GLYPHS: dict[BorderStyle, GlyphSet] = {
    BorderStyle.ASCII: GlyphSet(
        row_leader="| ",
        row_divider=" | ",
        row_trailer=" |",
        rule_leader="|-",
        rule_divider="-+-",
        rule_trailer="-|",
        spacer="-",
    ),
    BorderStyle.UNICODE: GlyphSet(
        row_leader="│ ",
        row_divider=" │ ",
        row_trailer=" │",
        rule_leader="├─",
        rule_divider="─┼─",
        rule_trailer="─┤",
        spacer="─",
    ),
}


def glyphs_for(style: BorderStyle) -> GlyphSet:
    return GLYPHS[style]


def column_widths(rows: Sequence[Row]) -> list[int]:
    """Widest stringified cell per column; include the header row in ``rows``."""
    return [max(len(stringify(cell)) for cell in column) for column in zip(*rows)]


def scalar_width(header: Any, value: Any) -> int:
    """Width for a single-cell result, tracking the longest line of the value."""
    if isinstance(value, str):
        lengths = [len(segment) for segment in split_lines(value)]
    else:
        lengths = [len(stringify(value))]
    return max(len(stringify(header)), *lengths)


def format_row(
    cells: Sequence[Any],
    widths: Sequence[int],
    *,
    leader: str,
    divider: str,
    trailer: str,
    pad_last: bool = True,
) -> str:
    """Join left-aligned cells padded to their column widths."""
    padded: list[str] = []
    last = len(widths) - 1
    for index, (cell, width) in enumerate(zip(cells, widths)):
        text = stringify(cell)
        padded.append(text if index == last and not pad_last else text.ljust(width))
    return leader + divider.join(padded) + trailer


def data_row(
    cells: Sequence[Any],
    widths: Sequence[int],
    glyphs: GlyphSet,
    *,
    outside: bool,
    pad_last: bool = True,
) -> str:
    return format_row(
        cells,
        widths,
        leader=glyphs.row_leader if outside else "",
        divider=glyphs.row_divider,
        trailer=glyphs.row_trailer if outside else "",
        pad_last=pad_last,
    )


def rule_row(widths: Sequence[int], glyphs: GlyphSet, *, outside: bool) -> str:
    """Divider line drawn between the header and the data rows."""
    return format_row(
        [glyphs.spacer * width for width in widths],
        widths,
        leader=glyphs.rule_leader if outside else "",
        divider=glyphs.rule_divider,
        trailer=glyphs.rule_trailer if outside else "",
    )
