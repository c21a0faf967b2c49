from __future__ import annotations

import pytest

from sqlgrid.render.table import TableRenderer, render_table
from sqlgrid.render.types import RenderConfig, ResultShape


@pytest.fixture()
def renderer() -> TableRenderer:
    return TableRenderer(RenderConfig(line_break="\n"))


def test_basic_grid(renderer: TableRenderer) -> None:
    table = renderer.render([["id", "name"], [1, "Alice"], [2, "Bob"]])

    assert list(table) == [
        "| id | name  |",
        "|----+-------|",
        "| 1  | Alice |",
        "| 2  | Bob   |",
    ]
    assert table.message == ""
    assert table.shape is ResultShape.GRID


def test_empty_result_renders_nothing(renderer: TableRenderer) -> None:
    assert renderer.render([]).lines == ()
    assert renderer.render_maps([]).lines == ()


def test_header_only_result(renderer: TableRenderer) -> None:
    assert list(renderer.render([["id"]])) == ["| id |", "|----|"]


def test_single_wide_row_rotates_without_outside_borders(renderer: TableRenderer) -> None:
    table = renderer.render([["a", "b", "c", "d"], [1, "x", "y", "z"]], add_outside_borders=False)

    assert list(table) == ["a | 1", "b | x", "c | y", "d | z"]
    assert table.shape is ResultShape.ROTATED


def test_rotated_value_column_is_not_padded(renderer: TableRenderer) -> None:
    table = renderer.render([["id", "name"], [7, "Alice"]], add_outside_borders=False)

    assert list(table) == ["id   | 7", "name | Alice"]


def test_single_wide_row_with_outside_borders_stays_a_grid(renderer: TableRenderer) -> None:
    table = renderer.render([["a", "b"], [1, 2]])

    assert list(table) == ["| a | b |", "|---+---|", "| 1 | 2 |"]


def test_per_call_border_override_does_not_mutate_config(renderer: TableRenderer) -> None:
    renderer.render([["a", "b"], [1, 2]], add_outside_borders=False)

    assert renderer.config.add_outside_borders is True
    assert renderer.render([["a", "b"], [1, 2]]).lines[0] == "| a | b |"


def test_scalar_string_splits_into_lines(renderer: TableRenderer) -> None:
    table = renderer.render([["greeting"], ["line1\r\nline2"]])

    assert list(table) == [
        "| greeting |",
        "|----------|",
        "| line1    |",
        "| line2    |",
    ]
    assert table.shape is ResultShape.SCALAR


def test_scalar_without_outside_borders_keeps_value_in_one_row(renderer: TableRenderer) -> None:
    table = renderer.render([["v"], ["a\r\nb"]], add_outside_borders=False)

    assert list(table) == ["v", "-", "a\nb"]


def test_scalar_numbers_render_as_single_row(renderer: TableRenderer) -> None:
    assert list(renderer.render([["count"], [42]])) == ["| count |", "|-------|", "| 42    |"]


def test_scalar_is_never_truncated() -> None:
    renderer = TableRenderer(RenderConfig(column_width_limit=5, line_break="\n"))

    table = renderer.render([["v"], ["abcdefghij"]])

    assert table.lines[2] == "| abcdefghij |"


def test_grid_cells_and_headers_are_truncated() -> None:
    renderer = TableRenderer(RenderConfig(column_width_limit=10, line_break="\n"))

    table = renderer.render([["description", "n"], ["abcdefghijklmnop", 1], ["short", 2]])

    assert table.lines[0] == "| descrip... | n |"
    assert table.lines[2] == "| abcdefg... | 1 |"
    assert table.lines[3] == "| short      | 2 |"


def test_rotated_result_is_never_truncated() -> None:
    renderer = TableRenderer(RenderConfig(column_width_limit=10, line_break="\n"))

    table = renderer.render([["description", "n"], ["abcdefghijklmnop", 1]], add_outside_borders=False)

    assert list(table) == ["description | abcdefghijklmnop", "n           | 1"]


def test_grid_line_breaks_become_spaces(renderer: TableRenderer) -> None:
    table = renderer.render([["a", "b"], ["x\r\ny", 1], ["z", None]])

    assert list(table) == ["| a   | b |", "|-----+---|", "| x y | 1 |", "| z   |   |"]


def test_unicode_borders() -> None:
    config = RenderConfig(line_break="\n")
    config.set_use_unicode_borders(True)

    table = TableRenderer(config).render([["id", "name"], [1, "Alice"], [2, "Bob"]])

    assert list(table) == [
        "│ id │ name  │",
        "├────┼───────┤",
        "│ 1  │ Alice │",
        "│ 2  │ Bob   │",
    ]


def test_too_many_rows_message_precedes_table(renderer: TableRenderer) -> None:
    rows = [["n"], *[[index] for index in range(150)]]

    table = renderer.render(rows)

    assert table.lines[0] == "Too many rows. Only 50 from 99+ are shown."
    assert table.lines[1] == ""
    assert table.lines[2] == "| n  |"
    assert len(table) == 2 + 2 + 50
    assert table.truncated is True


def test_limited_to_one_row_message_precedes_rotated_table(renderer: TableRenderer) -> None:
    table = renderer.render([["a", "b"], [1, 2], [3, 4], [5, 6]], 1, add_outside_borders=False)

    assert list(table) == ["Too many rows. Only 1 from 3 are shown.", "", "a | 1", "b | 2"]
    assert table.shape is ResultShape.ROTATED
    assert table.truncated is True


def test_limit_equal_to_row_count_has_no_message(renderer: TableRenderer) -> None:
    rows = [["n"], *[[index] for index in range(150)]]

    table = renderer.render(rows, 150)

    assert table.message == ""
    assert len(table) == 2 + 150


def test_setter_changes_apply_to_next_render(renderer: TableRenderer) -> None:
    rows = [["n"], *[[index] for index in range(30)]]
    renderer.config.set_fetch_size(10)
    renderer.config.set_max_rows(None)

    table = renderer.render(rows)

    assert table.lines[0] == "Too many rows. Only 10 from 30 are shown."
    assert len(table) == 2 + 2 + 10


def test_print_table_hands_lines_to_writer(renderer: TableRenderer) -> None:
    written: list[str] = []

    renderer.print_table([["id"], [1], [2]], written.append)

    assert written == ["| id |", "|----|", "| 1  |", "| 2  |"]


def test_render_maps_uses_first_row_key_order(renderer: TableRenderer) -> None:
    rows = [
        {"owner": "HR", "table": "EMPLOYEES"},
        {"owner": "SALES", "table": "ORDERS"},
    ]

    assert list(renderer.render_maps(rows)) == [
        "| owner | table     |",
        "|-------+-----------|",
        "| HR    | EMPLOYEES |",
        "| SALES | ORDERS    |",
    ]


def test_render_maps_explicit_keys_without_borders(renderer: TableRenderer) -> None:
    rows = [{"owner": "HR", "table": "EMPLOYEES"}]

    table = renderer.render_maps(rows, ["table", "owner"], add_borders=False)

    assert list(table) == ["table     | owner", "----------+------", "EMPLOYEES | HR   "]


def test_render_table_helper_uses_given_config() -> None:
    table = render_table([["a"], [1], [2]], config=RenderConfig(use_unicode_borders=True))

    assert table.lines[1] == "├───┤"
