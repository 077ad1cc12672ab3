"""Cursor-addressable list of rendered line items."""

from __future__ import annotations

from typing import Callable, Sequence, TypeAlias

from rich.text import Text

from qw_ui.tui.core.theme import QuestionStyle
from qw_ui.tui.system.models import LineItem

# (item, index, focused, style) -> rendered line
ItemRenderer: TypeAlias = Callable[[LineItem, int, bool, QuestionStyle], Text]

NO_SELECTION = -1


def _plain_renderer(item: LineItem, index: int, focused: bool, style: QuestionStyle) -> Text:
    _ = (index, focused, style)
    return Text(item.text)


class SelectableList:
    """An ordered sequence of line items with a single cursor.

    The cursor is either a valid index or ``NO_SELECTION``; it is never left
    pointing outside the list after a mutation.
    """

    def __init__(
        self,
        items: Sequence[LineItem] = (),
        *,
        renderer: ItemRenderer | None = None,
        cursor: int = 0,
    ) -> None:
        self._items: list[LineItem] = list(items)
        self._renderer = renderer or _plain_renderer
        self._cursor = NO_SELECTION
        self.select(cursor)

    @property
    def items(self) -> list[LineItem]:
        return self._items

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def has_selection(self) -> bool:
        return self._cursor != NO_SELECTION

    @property
    def selected_item(self) -> LineItem | None:
        if not self.has_selection:
            return None
        return self._items[self._cursor]

    def __len__(self) -> int:
        return len(self._items)

    def select(self, index: int) -> None:
        """Move the cursor to ``index``; out-of-range clears the selection."""
        if 0 <= index < len(self._items):
            self._cursor = index
        else:
            self._cursor = NO_SELECTION

    def clear_selection(self) -> None:
        self._cursor = NO_SELECTION

    def move(self, delta: int) -> None:
        if not self._items:
            return
        if not self.has_selection:
            self._cursor = 0 if delta > 0 else len(self._items) - 1
            return
        self._cursor = max(0, min(self._cursor + delta, len(self._items) - 1))

    def set_items(self, items: Sequence[LineItem], *, cursor: int = NO_SELECTION) -> None:
        self._items = list(items)
        self.select(cursor)

    def remove(self, index: int) -> LineItem:
        removed = self._items.pop(index)
        if not self._items:
            self._cursor = NO_SELECTION
        elif self._cursor >= len(self._items):
            self._cursor = len(self._items) - 1
        return removed

    def render(self, style: QuestionStyle) -> Text:
        lines = [
            self._renderer(item, index, index == self._cursor, style)
            for index, item in enumerate(self._items)
        ]
        return Text("\n").join(lines)
