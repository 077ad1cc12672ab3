from __future__ import annotations

from rich.text import Text

from qw_ui.settings import DEFAULT_SETTINGS, EngineSettings
from qw_ui.tui.core.theme import QuestionStyle
from qw_ui.tui.questions.base import QuestionBase, resolve_style
from qw_ui.tui.questions.rendering import focus_table_line, indent_block, padded
from qw_ui.tui.system.components.selectable_list import SelectableList
from qw_ui.tui.system.components.table_layout import render_option_table
from qw_ui.tui.system.models import Key, KeyEvent, LineItem, QuestionInput, TickResult


def default_row_index(row_values: list[str], default_value: str) -> int:
    """Row index of ``default_value`` among the row values, or -1."""
    try:
        return row_values.index(default_value)
    except ValueError:
        return -1


class SingleSelectQuestion(QuestionBase):
    """A list of options from which exactly one answer is chosen."""

    kind = "single_select"

    def __init__(self, settings: EngineSettings | None = None) -> None:
        super().__init__()
        self._settings = settings or DEFAULT_SETTINGS
        self.header = ""
        self.answers: dict[LineItem, str] = {}
        self.list = SelectableList(renderer=self._render_item)
        self.choice: str | None = None

    def _setup(self, question_input: QuestionInput) -> None:
        table = render_option_table(
            question_input.rows,
            question_input.headers,
            question_input.row_values,
            width=self._settings.table_width,
        )
        default_row = default_row_index(
            list(question_input.row_values), question_input.default_value
        )
        cursor = table.first_item_index(default_row) if default_row >= 0 else 0
        self.header = table.header
        self.answers = table.answers
        self.list.set_items(table.items, cursor=max(cursor, 0))
        self.choice = None

    @property
    def answer(self) -> str | None:
        return self.choice

    def _handle(self, event: KeyEvent) -> TickResult:
        if event.key is Key.UP:
            self.list.move(-1)
        elif event.key is Key.DOWN:
            self.list.move(1)
        elif event.key is Key.ENTER:
            self.select_item()
            return TickResult.COMMIT
        return TickResult.CONTINUE

    def select_item(self) -> None:
        """Record the value of the highlighted row (None when it has none)."""
        item = self.list.selected_item
        self.choice = self.answers.get(item) if item is not None else None

    def value_at(self, index: int) -> str | None:
        if not 0 <= index < len(self.list):
            return None
        return self.answers.get(self.list.items[index])

    def _render_item(
        self, item: LineItem, index: int, focused: bool, style: QuestionStyle
    ) -> Text:
        _ = index
        if focused:
            return padded(
                focus_table_line(style.cursor + item.text, style), style.small_padding
            )
        return padded(item.text, style.medium_padding)

    def render_text(self, style: QuestionStyle | None = None) -> Text:
        style = resolve_style(style)
        view = self._question_text(style)
        if self.header:
            view.append_text(indent_block(self.header, style.medium_padding))
            view.append("\n")
        view.append_text(self.list.render(style))
        return view

    def print_table(self, style: QuestionStyle | None = None) -> str:
        """Render the table with nothing highlighted, for read-only display."""
        self.list.clear_selection()
        return self.render(style)
