"""Load result sets handed to the CLI as JSON or CSV."""

from __future__ import annotations

import csv
import io
import json
from dataclasses import dataclass
from pathlib import Path
from typing import IO, Any, Mapping, Sequence

from sqlgrid.shared.exceptions import ResultSourceError

SOURCE_FORMAT_CHOICES = ("json", "csv")


@dataclass(frozen=True, slots=True)
class QueryResult:
    """Result set in column/row form as supplied by the data source."""

    columns: tuple[str, ...]
    rows: Sequence[tuple[Any, ...]]

    def positional(self) -> list[Sequence[Any]]:
        """Header row followed by data rows; empty when there is nothing to show."""
        if not self.columns and not self.rows:
            return []
        return [self.columns, *self.rows]

    def records(self) -> list[dict[str, Any]]:
        return [dict(zip(self.columns, row)) for row in self.rows]


def load_result(source: str | Path, source_format: str = "json", *, stdin: IO[str] | None = None) -> QueryResult:
    """Read a result set from ``source`` (``-`` for stdin)."""
    fmt = (source_format or "json").lower()
    if str(source) == "-":
        if stdin is None:
            raise ResultSourceError("No input stream available for '-'.")
        text = stdin.read()
    else:
        path = Path(source).expanduser()
        try:
            text = path.read_text(encoding="utf-8")
        except FileNotFoundError as exc:
            raise ResultSourceError(f"Result file not found: {path}") from exc

    if fmt == "json":
        return parse_json_result(text)
    if fmt == "csv":
        return parse_csv_result(text)
    raise ResultSourceError(f"Unsupported source format '{source_format}'.")


def parse_json_result(text: str) -> QueryResult:
    """Accept a list of objects, a list of lists (header first), or ``{"columns", "rows"}``."""
    if not text.strip():
        return QueryResult(columns=(), rows=[])
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ResultSourceError(f"Invalid JSON result: {exc}") from exc

    if isinstance(payload, Mapping):
        if "columns" not in payload or "rows" not in payload:
            raise ResultSourceError("JSON object results must define 'columns' and 'rows'.")
        columns = tuple(str(column) for column in payload["columns"])
        return QueryResult(columns=columns, rows=_rows_from(payload["rows"], columns))

    if not isinstance(payload, list):
        raise ResultSourceError("JSON result must be a list or an object with 'columns' and 'rows'.")
    if not payload:
        return QueryResult(columns=(), rows=[])

    first = payload[0]
    if isinstance(first, Mapping):
        columns = tuple(str(key) for key in first.keys())
        return QueryResult(columns=columns, rows=_rows_from(payload, columns))
    if isinstance(first, list):
        columns = tuple(str(column) for column in first)
        return QueryResult(columns=columns, rows=_rows_from(payload[1:], columns))
    raise ResultSourceError("JSON result rows must be objects or arrays.")


def _rows_from(raw_rows: Any, columns: tuple[str, ...]) -> list[tuple[Any, ...]]:
    if not isinstance(raw_rows, list):
        raise ResultSourceError("Result rows must be a list.")
    rows: list[tuple[Any, ...]] = []
    for raw in raw_rows:
        if isinstance(raw, Mapping):
            rows.append(tuple(raw.get(column) for column in columns))
        elif isinstance(raw, list):
            rows.append(tuple(raw))
        else:
            raise ResultSourceError(f"Unsupported row value: {raw!r}")
    return rows


def parse_csv_result(text: str) -> QueryResult:
    reader = csv.reader(io.StringIO(text))
    all_rows = [row for row in reader if row]
    if not all_rows:
        return QueryResult(columns=(), rows=[])
    return QueryResult(columns=tuple(all_rows[0]), rows=[tuple(row) for row in all_rows[1:]])
