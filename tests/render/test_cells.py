from __future__ import annotations

import pytest

from sqlgrid.render.cells import (
    flatten_line_breaks,
    normalize_cell,
    normalize_line_breaks,
    split_lines,
    stringify,
    trim_max_width,
    unify_str,
)


@pytest.mark.parametrize("limit", [4, 5, 10, 30])
def test_trim_max_width_length_is_exactly_the_limit(limit: int) -> None:
    trimmed = trim_max_width("x" * (limit + 12), limit)

    assert len(trimmed) == limit
    assert trimmed.endswith("...")


def test_trim_max_width_leaves_short_values_alone() -> None:
    assert trim_max_width("abc", 5) == "abc"
    assert trim_max_width(12345, 5) == "12345"


@pytest.mark.parametrize("limit", [None, 0, -3])
def test_trim_max_width_disabled_without_positive_limit(limit: int | None) -> None:
    value = "y" * 80
    assert trim_max_width(value, limit) == value


def test_stringify_renders_none_blank() -> None:
    assert stringify(None) == ""
    assert stringify(1.5) == "1.5"


def test_normalize_line_breaks_unifies_all_styles() -> None:
    assert normalize_line_breaks("a\r\nb\nc\rd", "\n") == "a\nb\nc\nd"
    assert normalize_line_breaks("a\nb", "\r\n") == "a\r\nb"


def test_flatten_line_breaks_uses_single_space() -> None:
    assert flatten_line_breaks("one\r\ntwo\rthree\nfour") == "one two three four"


def test_split_lines_handles_mixed_breaks() -> None:
    assert split_lines("a\r\nbb\rccc") == ["a", "bb", "ccc"]


def test_normalize_cell_passes_non_strings_through() -> None:
    marker = object()
    assert normalize_cell(marker, multiline=False, line_break="\n") is marker
    assert normalize_cell(42, multiline=True, line_break="\n") == 42


def test_normalize_cell_multiline_and_grid_modes() -> None:
    assert normalize_cell("a\r\nb", multiline=True, line_break="\n") == "a\nb"
    assert normalize_cell("a\r\nb", multiline=False, line_break="\n") == "a b"


def test_unify_str_concatenates_and_normalises() -> None:
    assert unify_str("select 1\r\n", "from dual\r", line_break="\n") == "select 1\nfrom dual\n"
    assert unify_str("", None) == ""
