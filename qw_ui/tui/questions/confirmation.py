from __future__ import annotations

import logging

from rich.text import Text

from qw_common.errors import UnmodifiableRow
from qw_ui.settings import DEFAULT_SETTINGS, EngineSettings
from qw_ui.tui.core.theme import QuestionStyle
from qw_ui.tui.questions.base import QuestionBase, resolve_style
from qw_ui.tui.questions.rendering import padded
from qw_ui.tui.questions.single_select import SingleSelectQuestion
from qw_ui.tui.system.components.table_layout import single_line_rows
from qw_ui.tui.system.models import Key, KeyEvent, QuestionInput, TickResult

logger = logging.getLogger(__name__)

RESPONSE_YES = "Yes"
RESPONSE_NO = "No"
YES_NO_OPTIONS = [RESPONSE_YES, RESPONSE_NO]

CONFIG_HEADERS = ["Configuration", "Value"]
CONFIRM_QUESTION = (
    "Please confirm if you would like to launch instance with following options"
    "(Or select a configuration to repeat a question):"
)
UNMODIFIABLE_MESSAGE = "This configuration can't be modified!"


def yes_no_default(value: str) -> str:
    """The Yes/No option to highlight first; anything unrecognized means No."""
    return value if value in YES_NO_OPTIONS else RESPONSE_NO


class ConfirmationQuestion(QuestionBase):
    """Confirm a configuration table with yes/no, or pick a row to redo.

    Owns two single-select lists. Focus values 0..1 address the yes/no
    list; negative values address the configuration list counting back from
    its last row, and are only reachable when ``allow_edit`` is set.
    """

    kind = "confirmation"

    def __init__(
        self, allow_edit: bool = False, settings: EngineSettings | None = None
    ) -> None:
        super().__init__()
        self._settings = settings or DEFAULT_SETTINGS
        self.allow_edit = allow_edit
        self.config_list = SingleSelectQuestion(self._settings)
        self.yes_no_list = SingleSelectQuestion(self._settings)
        self.focus_index = 0
        self.choice: str | None = None
        self.notice = ""

    def set_allow_edit(self, allow_edit: bool) -> None:
        self.allow_edit = allow_edit

    def _setup(self, question_input: QuestionInput) -> None:
        self.config_list = SingleSelectQuestion(self._settings)
        self.config_list.initialize(
            QuestionInput(
                question=question_input.question or CONFIRM_QUESTION,
                rows=question_input.rows,
                headers=question_input.headers or CONFIG_HEADERS,
                row_values=question_input.row_values,
            )
        )
        self.config_list.list.clear_selection()

        self.yes_no_list = SingleSelectQuestion(self._settings)
        self.yes_no_list.initialize(
            QuestionInput(
                rows=single_line_rows(YES_NO_OPTIONS),
                row_values=YES_NO_OPTIONS,
                default_value=yes_no_default(question_input.default_value),
            )
        )
        self.focus_index = self.yes_no_list.list.cursor
        self.choice = None
        self.notice = ""

    @property
    def answer(self) -> str | None:
        return self.choice

    @property
    def lowest_focus(self) -> int:
        return -len(self.config_list.list) if self.allow_edit else 0

    def _handle(self, event: KeyEvent) -> TickResult:
        if event.key is Key.UP:
            if self.focus_index > self.lowest_focus:
                self.focus_index -= 1
            self._sync_lists()
        elif event.key is Key.DOWN:
            if self.focus_index < len(self.yes_no_list.list) - 1:
                self.focus_index += 1
            self._sync_lists()
        elif event.key is Key.ENTER:
            self.notice = ""
            if self.focus_index >= 0:
                self.yes_no_list.select_item()
                self.choice = self.yes_no_list.choice
                return TickResult.COMMIT
            try:
                self.choice = self._pick_config_row()
            except UnmodifiableRow as exc:
                self.notice = str(exc)
                logger.debug(f"Confirmation row rejected: {exc.context}")
                return TickResult.CONTINUE
            return TickResult.COMMIT
        return TickResult.CONTINUE

    def _pick_config_row(self) -> str:
        self.config_list.select_item()
        choice = self.config_list.choice
        if not choice:
            raise UnmodifiableRow(
                UNMODIFIABLE_MESSAGE, context={"row": self.config_list.list.cursor}
            )
        return choice

    def _sync_lists(self) -> None:
        if self.focus_index < 0:
            self.config_list.list.select(len(self.config_list.list) + self.focus_index)
            self.yes_no_list.list.clear_selection()
        else:
            self.config_list.list.clear_selection()
            self.yes_no_list.list.select(self.focus_index)

    def render_text(self, style: QuestionStyle | None = None) -> Text:
        style = resolve_style(style)
        view = Text()
        if self.notice:
            view.append_text(padded(self.notice, 0, style.error))
            view.append("\n")
        view.append_text(self.config_list.render_text(style))
        view.append("\n")
        view.append_text(self.yes_no_list.render_text(style))
        return view
