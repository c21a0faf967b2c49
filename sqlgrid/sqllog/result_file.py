"""Plain-text sink for rendered results."""

from __future__ import annotations

from pathlib import Path


def write_result_file(text: str, result_file: str | Path, *, append: bool = False) -> Path:
    """Write (or append) ``text`` to ``result_file`` and return its path."""
    path = Path(result_file).expanduser()
    with path.open("a" if append else "w", encoding="utf-8", newline="") as handle:
        handle.write(text)
    return path


def clear_result_file(result_file: str | Path) -> Path:
    return write_result_file("", result_file)
