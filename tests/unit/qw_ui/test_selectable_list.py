import pytest

from qw_ui.tui.core.theme import PLAIN_STYLE
from qw_ui.tui.system.components.selectable_list import NO_SELECTION, SelectableList
from qw_ui.tui.system.models import LineItem

pytestmark = pytest.mark.unit_ui


def _items(*texts: str) -> list[LineItem]:
    return [LineItem(text=text, row=index) for index, text in enumerate(texts)]


def test_move_clamps_at_both_ends() -> None:
    selectable = SelectableList(_items("a", "b", "c"))

    selectable.move(-1)
    assert selectable.cursor == 0
    selectable.move(5)
    assert selectable.cursor == 2
    assert selectable.selected_item == LineItem("c", 2)


def test_move_without_selection_starts_at_the_near_end() -> None:
    selectable = SelectableList(_items("a", "b", "c"), cursor=NO_SELECTION)
    assert not selectable.has_selection

    selectable.move(-1)
    assert selectable.cursor == 2

    selectable.clear_selection()
    selectable.move(1)
    assert selectable.cursor == 0


def test_select_out_of_range_clears() -> None:
    selectable = SelectableList(_items("a", "b"))

    selectable.select(7)

    assert selectable.cursor == NO_SELECTION
    assert selectable.selected_item is None


def test_remove_keeps_cursor_in_range() -> None:
    selectable = SelectableList(_items("a", "b", "c"), cursor=2)

    removed = selectable.remove(2)
    assert removed.text == "c"
    assert selectable.cursor == 1

    selectable.remove(0)
    selectable.remove(0)
    assert len(selectable) == 0
    assert selectable.cursor == NO_SELECTION


def test_set_items_defaults_to_no_selection() -> None:
    selectable = SelectableList(_items("a"))

    selectable.set_items(_items("x", "y"))
    assert not selectable.has_selection

    selectable.set_items(_items("x", "y"), cursor=1)
    assert selectable.selected_item == LineItem("y", 1)


def test_render_passes_focus_to_renderer() -> None:
    def renderer(item, index, focused, style):
        from rich.text import Text

        return Text(f"{'*' if focused else '-'}{index}:{item.text}")

    selectable = SelectableList(_items("a", "b"), renderer=renderer, cursor=1)

    assert selectable.render(PLAIN_STYLE).plain == "-0:a\n*1:b"


def test_empty_list_ignores_movement() -> None:
    selectable = SelectableList()

    selectable.move(1)

    assert selectable.cursor == NO_SELECTION
    assert selectable.render(PLAIN_STYLE).plain == ""
