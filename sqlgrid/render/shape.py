"""Detect degenerate result shapes and reshape single wide rows."""

from __future__ import annotations

from typing import Any, Sequence

from .types import ResultShape, Row


def rotate_table(rows: Sequence[Row]) -> list[list[Any]]:
    """Transpose a rectangular table so columns become rows.

    E.g. transform from: a | b | c into: a | 1
                         --+---+--       b | 2
                         1 | 2 | 3       c | 3
    """
    return [list(column) for column in zip(*rows)]


def should_rotate(data_rows: Sequence[Row], add_outside_borders: bool) -> bool:
    """A single wide row is listed vertically, but only without outside borders."""
    return not add_outside_borders and len(data_rows) == 1 and len(data_rows[0]) > 1


def is_scalar(data_rows: Sequence[Row]) -> bool:
    return len(data_rows) == 1 and len(data_rows[0]) == 1


def classify_shape(data_rows: Sequence[Row], add_outside_borders: bool) -> ResultShape:
    if should_rotate(data_rows, add_outside_borders):
        return ResultShape.ROTATED
    if is_scalar(data_rows):
        return ResultShape.SCALAR
    return ResultShape.GRID
