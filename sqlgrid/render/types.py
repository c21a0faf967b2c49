"""Data structures shared across the table renderer modules."""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Iterator, Mapping, Sequence

if TYPE_CHECKING:
    from sqlgrid.shared.config import RenderSettings

Row = Sequence[Any]
# Positional form: element 0 is the header, the rest are data rows.
PositionalRows = Sequence[Row]
MappingRows = Sequence[Mapping[Any, Any]]


class ResultShape(str, Enum):
    """How a (row-limited) result set is laid out."""

    GRID = "grid"
    ROTATED = "rotated"
    SCALAR = "scalar"


class BorderStyle(str, Enum):
    ASCII = "ascii"
    UNICODE = "unicode"


def _limit_or_zero(value: int | None) -> int:
    if value is None or value < 0:
        return 0
    return int(value)


@dataclass(slots=True)
class RenderConfig:
    """Mutable rendering configuration held by a renderer.

    Numeric limits use ``0`` for "unlimited". Setters normalise ``None`` and
    negative values instead of rejecting them; the latest value is visible to
    the next render.
    """

    fetch_size: int = 50
    max_rows: int = 99
    show_too_many_rows_message: bool = True
    column_width_limit: int | None = 30
    use_unicode_borders: bool = False
    add_outside_borders: bool = True
    line_break: str = os.linesep

    @classmethod
    def from_settings(cls, settings: RenderSettings) -> RenderConfig:
        return cls(
            fetch_size=settings.fetch_size,
            max_rows=settings.max_rows,
            show_too_many_rows_message=settings.show_too_many_rows_message,
            column_width_limit=settings.column_width_limit,
            use_unicode_borders=settings.use_unicode_borders,
            add_outside_borders=settings.add_outside_borders,
            line_break=settings.line_break,
        )

    def set_fetch_size(self, value: int | None) -> None:
        """Rows to display by default; also a hint for upstream fetch batching."""
        self.fetch_size = _limit_or_zero(value)

    def set_max_rows(self, value: int | None) -> None:
        """Hard cap on the rows a result set may contain."""
        self.max_rows = _limit_or_zero(value)

    def set_show_too_many_rows_message(self, value: bool | None) -> None:
        self.show_too_many_rows_message = bool(value)

    def set_column_width_limit(self, value: int | None) -> None:
        self.column_width_limit = value if value is not None and value > 0 else None

    def set_use_unicode_borders(self, value: bool | None) -> None:
        self.use_unicode_borders = bool(value)

    def set_add_outside_borders(self, value: bool | None) -> None:
        self.add_outside_borders = bool(value)

    @property
    def border_style(self) -> BorderStyle:
        return BorderStyle.UNICODE if self.use_unicode_borders else BorderStyle.ASCII


@dataclass(frozen=True, slots=True)
class LimitedRows:
    """Outcome of the row-limit policy."""

    rows: list[Row]
    message: str = ""
    limit: int = 0
    truncated: bool = False


@dataclass(frozen=True, slots=True)
class RenderedTable:
    """Lines produced for a single result set, in output order."""

    lines: tuple[str, ...]
    message: str = ""
    shape: ResultShape | None = None
    truncated: bool = False

    def __iter__(self) -> Iterator[str]:
        return iter(self.lines)

    def __len__(self) -> int:
        return len(self.lines)

    def text(self, line_break: str = "\n") -> str:
        return line_break.join(self.lines)
