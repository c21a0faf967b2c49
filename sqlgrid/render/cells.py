"""Cell-level text helpers: stringification, width truncation and line breaks."""

from __future__ import annotations

import os
import re
from typing import Any

LINE_BREAK_RE = re.compile(r"\r\n|\n|\r")
ELLIPSIS = "..."


def stringify(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


def trim_max_width(value: Any, limit: int | None) -> str:
    """Stringify ``value`` and cut it down to ``limit`` characters.

    Over-long text keeps ``limit - 3`` characters followed by ``...`` so the
    result is exactly ``limit`` wide. A missing or non-positive limit disables
    truncation.
    """
    text = stringify(value)
    if limit and limit > 0 and len(text) > limit:
        return text[: max(limit - len(ELLIPSIS), 0)] + ELLIPSIS
    return text


def normalize_line_breaks(text: str, line_break: str = os.linesep) -> str:
    """Unify ``\\r\\n``, ``\\n`` and ``\\r`` to ``line_break``."""
    return LINE_BREAK_RE.sub(lambda _match: line_break, text)


def flatten_line_breaks(text: str) -> str:
    """Replace every line break with a single space to keep grid rows on one line."""
    return LINE_BREAK_RE.sub(" ", text)


def split_lines(text: str) -> list[str]:
    return LINE_BREAK_RE.split(text)


def normalize_cell(value: Any, *, multiline: bool, line_break: str) -> Any:
    """Normalise a cell for emission; non-string values pass through untouched."""
    if not isinstance(value, str):
        return value
    if multiline:
        return normalize_line_breaks(value, line_break)
    return flatten_line_breaks(value)


def unify_str(*parts: str | None, line_break: str = os.linesep) -> str:
    """Concatenate strings, unifying their line breaks to ``line_break``."""
    if not any(parts):
        return ""
    return "".join(normalize_line_breaks(part or "", line_break) for part in parts)
