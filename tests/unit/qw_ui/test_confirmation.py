import pytest

from qw_ui.tui.core.theme import PLAIN_STYLE
from qw_ui.tui.questions import ConfirmationQuestion
from qw_ui.tui.questions.confirmation import UNMODIFIABLE_MESSAGE, yes_no_default
from qw_ui.tui.system.headless import keys
from qw_ui.tui.system.models import QuestionInput, TickResult

pytestmark = pytest.mark.unit_ui

ROWS = [["Region", "eu-west-1"], ["Instance type", "t2.micro"], ["Tags", "env|prod"]]
VALUES = ["region", "", "tags"]


def _press(question, *tokens) -> TickResult:
    result = TickResult.CONTINUE
    for event in keys(*tokens):
        result = question.tick(event)
    return result


def _question(allow_edit: bool = False, default: str = "") -> ConfirmationQuestion:
    question = ConfirmationQuestion(allow_edit=allow_edit)
    question.initialize(QuestionInput(rows=ROWS, row_values=VALUES, default_value=default))
    return question


def test_defaults_to_no() -> None:
    question = _question()

    assert question.focus_index == 1
    assert not question.config_list.list.has_selection
    assert _press(question, "enter") is TickResult.COMMIT
    assert question.answer == "No"


def test_default_yes_is_honoured() -> None:
    question = _question(default="Yes")

    assert question.focus_index == 0


@pytest.mark.parametrize("default", ["region", "yes", "Maybe"])
def test_unrecognized_default_commits_no(default: str) -> None:
    question = _question(default=default)

    assert question.focus_index == 1
    assert _press(question, "enter") is TickResult.COMMIT
    assert question.answer == "No"


def test_yes_no_default_only_keeps_known_options() -> None:
    assert yes_no_default("Yes") == "Yes"
    assert yes_no_default("No") == "No"
    assert yes_no_default("") == "No"
    assert yes_no_default("tags") == "No"


def test_up_cannot_enter_config_list_without_edit() -> None:
    question = _question(allow_edit=False)

    _press(question, "up")
    assert question.focus_index == 0
    _press(question, "up", "up")
    assert question.focus_index == 0
    assert not question.config_list.list.has_selection
    assert _press(question, "enter") is TickResult.COMMIT
    assert question.answer == "Yes"


def test_up_crosses_into_last_config_row() -> None:
    question = _question(allow_edit=True)

    _press(question, "up", "up")

    assert question.focus_index == -1
    assert question.config_list.list.cursor == 2
    assert not question.yes_no_list.list.has_selection


def test_picking_a_row_commits_its_value() -> None:
    question = _question(allow_edit=True)

    _press(question, "up", "up", "up", "up")
    assert question.config_list.list.cursor == 0
    assert _press(question, "enter") is TickResult.COMMIT
    assert question.answer == "region"


def test_row_without_value_cannot_be_modified() -> None:
    question = _question(allow_edit=True)

    assert _press(question, "up", "up", "up", "enter") is TickResult.CONTINUE
    assert not question.done
    assert question.notice == UNMODIFIABLE_MESSAGE
    assert UNMODIFIABLE_MESSAGE in question.render(PLAIN_STYLE)

    _press(question, "up", "enter")
    assert question.answer == "region"


def test_focus_bounds() -> None:
    question = _question(allow_edit=True)

    _press(question, *["up"] * 10)
    assert question.focus_index == -3
    _press(question, *["down"] * 10)
    assert question.focus_index == 1
    assert not question.config_list.list.has_selection
    assert question.yes_no_list.list.cursor == 1


def test_set_allow_edit_after_construction() -> None:
    question = ConfirmationQuestion()
    question.set_allow_edit(True)
    question.initialize(QuestionInput(rows=ROWS, row_values=VALUES))

    _press(question, "up", "up")

    assert question.focus_index == -1


def test_render_shows_both_lists() -> None:
    question = _question()

    frame = question.render(PLAIN_STYLE)

    assert frame.startswith("Please confirm if you would like to launch instance")
    assert "CONFIGURATION" in frame
    assert "t2.micro" in frame
    assert "   >  No" in frame
    assert "      Yes" in frame


def test_cancel() -> None:
    question = _question(allow_edit=True)

    assert _press(question, "up", "c-c") is TickResult.CANCEL
    assert question.answer is None
