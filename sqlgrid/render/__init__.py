"""Tabular result rendering: row limits, shape handling and grid layout."""

from .limits import apply_row_limit, effective_row_limit, min_not_zero
from .table import TableRenderer, render_table
from .types import BorderStyle, RenderConfig, RenderedTable, ResultShape

__all__ = [
    "BorderStyle",
    "RenderConfig",
    "RenderedTable",
    "ResultShape",
    "TableRenderer",
    "apply_row_limit",
    "effective_row_limit",
    "min_not_zero",
    "render_table",
]
