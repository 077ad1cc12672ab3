from __future__ import annotations

from typing import Any, Iterable, Protocol

from rich.text import Text

from qw_ui.tui.core.theme import QuestionStyle
from qw_ui.tui.system.models import KeyEvent, QuestionInput, TickResult


class Question(Protocol):
    def initialize(self, question_input: QuestionInput) -> None: ...

    def tick(self, event: KeyEvent) -> TickResult: ...

    def render(self, style: QuestionStyle | None = None) -> str: ...

    def render_text(self, style: QuestionStyle | None = None) -> Text: ...

    def last_error(self) -> Exception | None: ...

    @property
    def answer(self) -> Any: ...


EventSource = Iterable[KeyEvent]


class QuestionAsker(Protocol):
    def ask(self, question: Question, question_input: QuestionInput) -> Any: ...
