from __future__ import annotations

import logging
from typing import Any, Sequence

from rich.text import Text

from qw_common.errors import ValidationRejected
from qw_ui.tui.core.theme import QuestionStyle, invalid_answer_message
from qw_ui.tui.questions.base import QuestionBase, resolve_style
from qw_ui.tui.questions.rendering import padded
from qw_ui.tui.system.components.text_field import TextField
from qw_ui.tui.system.models import Key, KeyEvent, QuestionInput, TickResult, Validator

logger = logging.getLogger(__name__)


def is_valid_input(validators: Sequence[Validator], context: Any, answer: str) -> bool:
    """Accept ``answer`` when any validator does.

    Without validators, or without a context handle to hand them, every
    answer is accepted.
    """
    if context is None or not validators:
        return True
    for validate in validators:
        try:
            if validate(context, answer):
                return True
        except Exception as exc:
            logger.debug(f"Validator {getattr(validate, '__name__', validate)!r} failed: {exc}")
    return False


class PlainTextQuestion(QuestionBase):
    """A free-text answer checked against a chain of validators."""

    kind = "plain_text"

    def __init__(self) -> None:
        super().__init__()
        self.field = TextField()
        self.validators: list[Validator] = []
        self.context: Any = None
        self.invalid_answer = ""
        self.display_invalid = False

    def _setup(self, question_input: QuestionInput) -> None:
        self.field = TextField(placeholder=question_input.default_value)
        self.field.focus()
        self.validators = list(question_input.validators)
        self.context = question_input.context
        self.invalid_answer = ""
        self.display_invalid = False

    @property
    def answer(self) -> str:
        return self.field.value

    def text_answer(self) -> str:
        return self.field.value

    def _handle(self, event: KeyEvent) -> TickResult:
        if event.key is not Key.ENTER:
            self.field.handle(event)
            return TickResult.CONTINUE

        if not self.field.value:
            self.field.set_value(self.field.placeholder)
        try:
            self._validate(self.field.value)
        except ValidationRejected as exc:
            self.invalid_answer = exc.context.get("answer", "")
            self.display_invalid = True
            self.field.clear()
            logger.debug(f"Rejected answer {self.invalid_answer!r}")
            return TickResult.CONTINUE
        self.display_invalid = False
        self.field.blur()
        return TickResult.COMMIT

    def _validate(self, answer: str) -> None:
        if not is_valid_input(self.validators, self.context, answer):
            raise ValidationRejected(
                invalid_answer_message(answer), context={"answer": answer}
            )

    def render_text(self, style: QuestionStyle | None = None) -> Text:
        style = resolve_style(style)
        view = self._question_text(style)
        if self.display_invalid:
            view.append_text(
                padded(invalid_answer_message(self.invalid_answer), style.small_padding, style.error)
            )
            view.append("\n")
        view.append_text(padded(self.field.render(style), style.small_padding))
        view.append("\n")
        return view
