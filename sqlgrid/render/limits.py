"""Row-limit policy applied before a result set is laid out."""

from __future__ import annotations

from .types import LimitedRows, PositionalRows, RenderConfig

TOO_MANY_ROWS_MESSAGE = "Too many rows. Only {limit} from {shown}{suffix} are shown."


def min_not_zero(x: int, y: int) -> int:
    """Return the smaller of two limits, treating zero as "no limit"."""
    return min(x if x > 0 else y, y if y > 0 else x)


def effective_row_limit(limit: int | None, config: RenderConfig) -> int:
    """Resolve the data-row limit for one render; ``0`` means unlimited."""
    if limit is not None:
        return max(limit, 0)
    return min_not_zero(config.max_rows, config.fetch_size)


def apply_row_limit(rows: PositionalRows, limit: int | None, config: RenderConfig) -> LimitedRows:
    """Truncate ``rows`` (header first) to the effective limit.

    The header is always kept and never counted against the limit. When rows
    are dropped and the config asks for it, an advisory message is produced;
    its ``+`` suffix signals the query may have had more rows than ``max_rows``
    allowed to be fetched.
    """
    rows = list(rows)
    row_limit = effective_row_limit(limit, config)
    data_count = len(rows) - 1
    if row_limit <= 0 or data_count <= row_limit:
        return LimitedRows(rows=rows, limit=row_limit)

    message = ""
    if config.show_too_many_rows_message:
        more = config.max_rows > 0 and data_count > config.max_rows
        message = TOO_MANY_ROWS_MESSAGE.format(
            limit=row_limit,
            shown=min_not_zero(config.max_rows, data_count),
            suffix="+" if more else "",
        )
    return LimitedRows(rows=rows[: row_limit + 1], message=message, limit=row_limit, truncated=True)
