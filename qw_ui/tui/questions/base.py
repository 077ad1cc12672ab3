from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, ClassVar

from rich.text import Text

from qw_common.errors import UserCancelled
from qw_ui.tui.core.theme import DEFAULT_STYLE, QuestionStyle
from qw_ui.tui.system.models import Key, KeyEvent, QuestionInput, TickResult

logger = logging.getLogger(__name__)


class QuestionBase(ABC):
    """Shared lifecycle for every question kind.

    The cancel key is handled here so it behaves identically everywhere.
    Once a question commits or cancels it ignores further events.
    """

    kind: ClassVar[str] = "question"

    def __init__(self) -> None:
        self.question = ""
        self._error: Exception | None = None
        self._result: TickResult | None = None

    def initialize(self, question_input: QuestionInput) -> None:
        self.question = question_input.question
        self._error = None
        self._result = None
        self._setup(question_input)

    def tick(self, event: KeyEvent) -> TickResult:
        if self._result is not None:
            return self._result
        if event.key is Key.CANCEL:
            self._error = UserCancelled(context={"question": self.kind})
            return self._finish(TickResult.CANCEL)
        result = self._handle(event)
        if result.finished:
            self._finish(result)
        return result

    def _finish(self, result: TickResult) -> TickResult:
        self._result = result
        logger.debug(f"{self.kind} question finished: {result.value}")
        return result

    @property
    def done(self) -> bool:
        return self._result is not None

    def last_error(self) -> Exception | None:
        return self._error

    def render(self, style: QuestionStyle | None = None) -> str:
        return self.render_text(style).plain

    def _question_text(self, style: QuestionStyle, trailing: str = "\n\n") -> Text:
        if not self.question:
            return Text()
        return Text(self.question, style=style.question) + Text(trailing)

    @property
    @abstractmethod
    def answer(self) -> Any: ...

    @abstractmethod
    def _setup(self, question_input: QuestionInput) -> None: ...

    @abstractmethod
    def _handle(self, event: KeyEvent) -> TickResult: ...

    @abstractmethod
    def render_text(self, style: QuestionStyle | None = None) -> Text: ...


def resolve_style(style: QuestionStyle | None) -> QuestionStyle:
    return style or DEFAULT_STYLE
