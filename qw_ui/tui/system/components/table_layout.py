from __future__ import annotations

from typing import Sequence

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from qw_common.errors import RenderFailure, wrap_error
from qw_ui.tui.system.models import LineItem, RenderedTable


def _cell_height(value: str) -> int:
    return max(1, len(str(value).splitlines()))


def _row_height(row: Sequence[str]) -> int:
    return max((_cell_height(cell) for cell in row), default=1)


def single_line_rows(values: Sequence[str]) -> list[list[str]]:
    """One-column table data, one row per value."""
    return [[value] for value in values]


def build_option_table(
    rows: Sequence[Sequence[str]],
    headers: Sequence[str] = (),
    *,
    box_style: box.Box = box.MINIMAL,
) -> Table:
    """
    Build a borderless, left-aligned Rich Table for question options.

    Headers are upper-cased and cells are never wrapped, so each source row
    keeps the height of its tallest cell.
    """
    table = Table(
        box=box_style,
        show_header=bool(headers),
        show_edge=False,
        show_lines=False,
        expand=False,
        header_style="",
    )
    column_count = len(headers) or max((len(row) for row in rows), default=0)
    for idx in range(column_count):
        title = Text(str(headers[idx]).upper()) if idx < len(headers) else ""
        table.add_column(title, justify="left", no_wrap=True, overflow="ellipsis")
    for row in rows:
        table.add_row(*(Text(str(cell)) for cell in row))
    return table


def _render_lines(table: Table, width: int) -> list[str]:
    console = Console(
        width=width,
        color_system=None,
        highlight=False,
        force_terminal=False,
        soft_wrap=False,
    )
    with console.capture() as cap:
        console.print(table)
    return [line.rstrip() for line in cap.get().rstrip("\n").split("\n")]


def render_option_table(
    rows: Sequence[Sequence[str]],
    headers: Sequence[str] = (),
    row_values: Sequence[str] = (),
    *,
    width: int = 120,
) -> RenderedTable:
    """
    Render option rows into line items plus the answer map.

    Header lines are split off into ``header``. Blank lines are dropped. The
    answer map is only filled when ``row_values`` has one entry per row;
    otherwise every item carries no committable value.
    """
    headers = list(headers or [])
    if headers:
        for index, row in enumerate(rows):
            if len(row) != len(headers):
                raise RenderFailure(
                    "Option row does not match the table headers",
                    context={"row": index, "cells": len(row), "headers": len(headers)},
                )
    if not rows and not headers:
        return RenderedTable(header="", items=[], answers={})

    try:
        lines = _render_lines(build_option_table(rows, headers), width)
    except Exception as exc:
        raise wrap_error(RenderFailure, "Unable to render option table", cause=exc) from exc

    header = ""
    if headers:
        header_height = _row_height(headers) + 1
        header = "\n".join(lines[:header_height])
        lines = lines[header_height:]

    with_values = len(row_values) == len(rows)
    items: list[LineItem] = []
    answers: dict[LineItem, str] = {}
    position = 0
    for row_index, row in enumerate(rows):
        height = _row_height(row)
        for line in lines[position : position + height]:
            if not line.strip():
                continue
            item = LineItem(text=line, row=row_index)
            items.append(item)
            if with_values:
                answers[item] = row_values[row_index]
        position += height

    return RenderedTable(header=header, items=items, answers=answers)
