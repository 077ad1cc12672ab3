from __future__ import annotations

import logging

from rich.text import Text

from qw_common.errors import SelectionRequired
from qw_ui.settings import DEFAULT_SETTINGS, EngineSettings
from qw_ui.tui.core.theme import QuestionStyle, button_label
from qw_ui.tui.questions.base import QuestionBase, resolve_style
from qw_ui.tui.questions.rendering import focus_table_line, indent_block, padded
from qw_ui.tui.system.components.selectable_list import SelectableList
from qw_ui.tui.system.components.table_layout import render_option_table
from qw_ui.tui.system.models import Key, KeyEvent, LineItem, QuestionInput, TickResult

logger = logging.getLogger(__name__)

SUBMIT_TEXT = button_label("Submit")
SUBMIT_ROW = -1


class MultiSelectQuestion(QuestionBase):
    """A list of options from which one or more answers are chosen.

    The list ends with a synthetic submit item; Enter or Space on an option
    toggles it, on the submit item it commits the current selection.
    """

    kind = "multi_select"

    def __init__(self, settings: EngineSettings | None = None) -> None:
        super().__init__()
        self._settings = settings or DEFAULT_SETTINGS
        self.header = ""
        self.answers: dict[LineItem, str] = {}
        self.list = SelectableList(renderer=self._render_item)
        self.selected: dict[int, LineItem] = {}
        self.notice = ""

    @property
    def option_count(self) -> int:
        return len(self.list) - 1

    @property
    def submit_index(self) -> int:
        return self.option_count

    def _setup(self, question_input: QuestionInput) -> None:
        table = render_option_table(
            question_input.rows,
            question_input.headers,
            question_input.row_values,
            width=self._settings.table_width,
        )
        items = [*table.items, LineItem(text=SUBMIT_TEXT, row=SUBMIT_ROW)]
        self.header = table.header
        self.answers = table.answers
        self.list.set_items(items, cursor=0)
        self.notice = ""

        self.selected = {}
        row_values = list(question_input.row_values)
        for value in question_input.default_values:
            if value not in row_values:
                continue
            index = table.first_item_index(row_values.index(value))
            if index >= 0:
                self.selected[index] = items[index]

    @property
    def answer(self) -> list[str]:
        return self.selected_values()

    def _handle(self, event: KeyEvent) -> TickResult:
        if event.key is Key.UP:
            self.list.move(-1)
        elif event.key is Key.DOWN:
            self.list.move(1)
        elif event.key in (Key.ENTER, Key.SPACE):
            if self.list.cursor == self.submit_index:
                try:
                    self._submit()
                except SelectionRequired as exc:
                    self.notice = str(exc)
                    logger.debug(f"Multi-select submit rejected: {exc}")
                    return TickResult.CONTINUE
                return TickResult.COMMIT
            self.toggle(self.list.cursor)
        return TickResult.CONTINUE

    def _submit(self) -> None:
        if not self.selected:
            raise SelectionRequired("Please select at least one option")
        self.notice = ""

    def toggle(self, index: int) -> None:
        if not 0 <= index < self.option_count:
            return
        self.notice = ""
        if index in self.selected:
            del self.selected[index]
        else:
            self.selected[index] = self.list.items[index]

    def is_checked(self, index: int) -> bool:
        return index in self.selected

    def selected_values(self) -> list[str]:
        """Answer values of the chosen rows, in ascending list order."""
        values: list[str] = []
        seen_rows: set[int] = set()
        for index in sorted(self.selected):
            item = self.selected[index]
            if item.row in seen_rows or item not in self.answers:
                continue
            seen_rows.add(item.row)
            values.append(self.answers[item])
        return values

    def _checkbox(self, index: int, style: QuestionStyle) -> str:
        return style.checked if self.is_checked(index) else style.unchecked

    def _render_item(
        self, item: LineItem, index: int, focused: bool, style: QuestionStyle
    ) -> Text:
        if index == self.submit_index:
            button_style = style.focused if focused else style.blurred
            return Text("\n") + padded(item.text, style.large_padding, button_style)
        label = f"{self._checkbox(index, style)} {item.text}"
        if focused:
            return padded(
                focus_table_line(style.cursor + label, style), style.small_padding
            )
        return padded(label, style.medium_padding)

    def render_text(self, style: QuestionStyle | None = None) -> Text:
        style = resolve_style(style)
        view = self._question_text(style)
        if self.notice:
            view.append_text(padded(self.notice, style.small_padding, style.error))
            view.append("\n")
        if self.header:
            view.append_text(indent_block(self.header, style.large_padding))
            view.append("\n")
        view.append_text(self.list.render(style))
        return view
