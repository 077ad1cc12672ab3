"""The five question kinds driven by the question engine."""

from qw_ui.tui.questions.base import QuestionBase
from qw_ui.tui.questions.confirmation import ConfirmationQuestion
from qw_ui.tui.questions.key_value import KeyValueQuestion
from qw_ui.tui.questions.multi_select import MultiSelectQuestion
from qw_ui.tui.questions.plain_text import PlainTextQuestion
from qw_ui.tui.questions.single_select import SingleSelectQuestion

__all__ = [
    "QuestionBase",
    "ConfirmationQuestion",
    "KeyValueQuestion",
    "MultiSelectQuestion",
    "PlainTextQuestion",
    "SingleSelectQuestion",
]
