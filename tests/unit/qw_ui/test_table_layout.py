import pytest

from qw_common.errors import RenderFailure
from qw_ui.tui.system.components.table_layout import (
    build_option_table,
    render_option_table,
    single_line_rows,
)

pytestmark = pytest.mark.unit_ui


def test_header_is_split_from_items() -> None:
    table = render_option_table([["os", "linux"]], ["Key", "Value"], ["os=linux"])

    header_lines = table.header.split("\n")
    assert len(header_lines) == 2
    assert "KEY" in header_lines[0]
    assert "VALUE" in header_lines[0]
    assert len(table.items) == 1
    assert "os" in table.items[0].text
    assert "linux" in table.items[0].text
    assert "│" in table.items[0].text


def test_answers_map_every_item_to_its_row_value() -> None:
    table = render_option_table(single_line_rows(["a", "b"]), row_values=["A", "B"])

    assert [item.row for item in table.items] == [0, 1]
    assert [table.answers[item] for item in table.items] == ["A", "B"]


def test_answers_empty_when_value_count_differs() -> None:
    table = render_option_table(single_line_rows(["a", "b"]), row_values=["A"])

    assert len(table.items) == 2
    assert table.answers == {}


def test_multi_line_cells_map_each_line_to_the_row() -> None:
    table = render_option_table([["first\nsecond", "x"], ["third", "y"]], row_values=["1", "2"])

    assert [item.row for item in table.items] == [0, 0, 1]
    assert [table.answers[item] for item in table.items] == ["1", "1", "2"]
    assert table.first_item_index(1) == 2
    assert table.first_item_index(5) == -1


def test_blank_lines_are_dropped() -> None:
    table = render_option_table(single_line_rows(["a", "", "b"]), row_values=["1", "2", "3"])

    assert [item.row for item in table.items] == [0, 2]
    assert all(item.text.strip() for item in table.items)


def test_identical_rows_stay_distinct() -> None:
    table = render_option_table(single_line_rows(["same", "same"]), row_values=["1", "2"])

    assert table.items[0] != table.items[1]
    assert [table.answers[item] for item in table.items] == ["1", "2"]


def test_no_rows_and_no_headers_is_empty() -> None:
    table = render_option_table([])

    assert table.header == ""
    assert table.items == []


def test_headers_without_rows_render_only_header() -> None:
    table = render_option_table([], ["Key", "Value"])

    assert "KEY" in table.header
    assert table.items == []


def test_row_header_mismatch_raises_render_failure() -> None:
    with pytest.raises(RenderFailure) as excinfo:
        render_option_table([["a", "b", "c"]], ["Key", "Value"])

    assert excinfo.value.context == {"row": 0, "cells": 3, "headers": 2}


def test_build_option_table_uppercases_headers() -> None:
    table = build_option_table([["a", "b"]], ["name", "value"])

    assert [str(column.header) for column in table.columns] == ["NAME", "VALUE"]
    assert table.show_header is True
    assert table.show_edge is False
