from __future__ import annotations

from typing import Any

from qw_common.errors import UserCancelled
from qw_ui.tui.core.capabilities import supports_interactive_questions
from qw_ui.tui.core.protocols import Question, QuestionAsker
from qw_ui.tui.core.theme import DEFAULT_STYLE, QuestionStyle
from qw_ui.tui.system.driver import ask_question
from qw_ui.tui.system.models import QuestionInput


class TerminalAsker(QuestionAsker):
    """Asks every question on the real terminal."""

    def __init__(self, style: QuestionStyle | None = None) -> None:
        self.style = style or DEFAULT_STYLE

    def ask(self, question: Question, question_input: QuestionInput) -> Any:
        if not supports_interactive_questions():
            raise UserCancelled(
                "Interactive questions require a TTY",
                context={"question": question_input.question},
            )
        return ask_question(question, question_input, style=self.style)
