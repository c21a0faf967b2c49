"""Render query results as aligned, bordered text tables."""

from __future__ import annotations

from typing import Any, Callable, Iterable, Sequence

from sqlgrid.shared.logging import Logger

from .cells import normalize_cell, stringify, trim_max_width
from .layout import column_widths, data_row, glyphs_for, rule_row, scalar_width
from .limits import apply_row_limit
from .shape import classify_shape, rotate_table
from .types import MappingRows, PositionalRows, RenderConfig, RenderedTable, ResultShape

Writer = Callable[[str], Any]


class TableRenderer:
    """Lay out result sets according to a mutable :class:`RenderConfig`.

    The configuration is read at render time, so setter calls between renders
    apply to the next one. ``add_outside_borders`` may be overridden per call
    without touching the stored default.
    """

    def __init__(self, config: RenderConfig | None = None, *, logger: Logger | None = None) -> None:
        self.config = config or RenderConfig()
        self.logger = logger

    def render(
        self,
        rows: PositionalRows,
        limit: int | None = None,
        *,
        add_outside_borders: bool | None = None,
    ) -> RenderedTable:
        """Render positional rows (header first) into text lines.

        ``limit`` caps the number of data rows; when omitted the smaller
        non-zero value of ``max_rows`` and ``fetch_size`` applies.
        """
        if not rows:
            return RenderedTable(lines=())

        config = self.config
        outside = config.add_outside_borders if add_outside_borders is None else add_outside_borders
        glyphs = glyphs_for(config.border_style)

        limited = apply_row_limit(rows, limit, config)
        if limited.truncated:
            self._debug(f"Row limit {limited.limit} applied to {len(rows) - 1} data rows.")

        header = [stringify(name) for name in limited.rows[0]]
        data = [list(row) for row in limited.rows[1:]]

        shape = classify_shape(data, outside)
        scalar_value = None
        if shape is ResultShape.ROTATED:
            self._debug(f"Rotating single-row result with {len(header)} columns.")
            data = rotate_table([header, data[0]])
        elif shape is ResultShape.SCALAR:
            scalar_value = data[0][0]
        else:
            limit_width = config.column_width_limit
            header = [trim_max_width(name, limit_width) for name in header]
            data = [[trim_max_width(cell, limit_width) for cell in row] for row in data]

        multiline = shape is ResultShape.SCALAR
        data = [
            [normalize_cell(cell, multiline=multiline, line_break=config.line_break) for cell in row]
            for row in data
        ]

        if shape is ResultShape.SCALAR:
            widths = [scalar_width(header[0], scalar_value)]
        elif shape is ResultShape.ROTATED:
            widths = column_widths(data)
        else:
            widths = column_widths([header, *data])

        lines: list[str] = []
        if limited.message:
            lines.extend([limited.message, ""])
        if shape is not ResultShape.ROTATED:
            lines.append(data_row(header, widths, glyphs, outside=outside))
            lines.append(rule_row(widths, glyphs, outside=outside))

        if outside and shape is ResultShape.SCALAR and isinstance(scalar_value, str):
            emitted: Sequence[Sequence[Any]] = [[segment] for segment in data[0][0].split(config.line_break)]
        else:
            emitted = data
        # The value column of a rotated table carries no trailing padding.
        pad_last = shape is not ResultShape.ROTATED
        lines.extend(data_row(row, widths, glyphs, outside=outside, pad_last=pad_last) for row in emitted)

        return RenderedTable(
            lines=tuple(lines),
            message=limited.message,
            shape=shape,
            truncated=limited.truncated,
        )

    def print_table(
        self,
        rows: PositionalRows,
        writer: Writer = print,
        limit: int | None = None,
        *,
        add_outside_borders: bool | None = None,
    ) -> RenderedTable:
        """Render ``rows`` and hand every line to ``writer``."""
        table = self.render(rows, limit, add_outside_borders=add_outside_borders)
        _emit(table.lines, writer)
        return table

    def render_maps(
        self,
        rows: MappingRows,
        keys: Sequence[Any] | None = None,
        *,
        add_borders: bool = True,
        add_outside_borders: bool | None = None,
    ) -> RenderedTable:
        """Render mapping rows, e.g. metadata listings, as a header plus one line per row.

        Columns follow ``keys`` or, when omitted, the key order of the first
        row. No row limit, rotation or width truncation is applied.
        """
        if not rows:
            return RenderedTable(lines=())

        config = self.config
        outside = add_borders and (
            config.add_outside_borders if add_outside_borders is None else add_outside_borders
        )
        glyphs = glyphs_for(config.border_style)

        columns = list(keys) if keys is not None else list(rows[0].keys())
        header = [stringify(key) for key in columns]
        data = [
            [normalize_cell(row.get(key), multiline=False, line_break=config.line_break) for key in columns]
            for row in rows
        ]
        widths = column_widths([header, *data])

        lines = [
            data_row(header, widths, glyphs, outside=outside),
            rule_row(widths, glyphs, outside=outside),
        ]
        lines.extend(data_row(row, widths, glyphs, outside=outside) for row in data)
        return RenderedTable(lines=tuple(lines), shape=ResultShape.GRID)

    def print_maps(
        self,
        rows: MappingRows,
        writer: Writer = print,
        keys: Sequence[Any] | None = None,
        *,
        add_borders: bool = True,
        add_outside_borders: bool | None = None,
    ) -> RenderedTable:
        table = self.render_maps(
            rows,
            keys,
            add_borders=add_borders,
            add_outside_borders=add_outside_borders,
        )
        _emit(table.lines, writer)
        return table

    def _debug(self, message: str) -> None:
        if self.logger is not None:
            self.logger.debug(message)


def _emit(lines: Iterable[str], writer: Writer) -> None:
    for line in lines:
        writer(line)


def render_table(
    rows: PositionalRows,
    limit: int | None = None,
    *,
    config: RenderConfig | None = None,
    add_outside_borders: bool | None = None,
) -> RenderedTable:
    """One-shot helper around :meth:`TableRenderer.render`."""
    return TableRenderer(config).render(rows, limit, add_outside_borders=add_outside_borders)
