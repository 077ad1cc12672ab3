"""Runs a question to completion over a stream of key events."""

from __future__ import annotations

import logging
from typing import Any, Callable

from rich.text import Text

from qw_common.errors import UserCancelled
from qw_common.logging import question_context
from qw_ui.tui.core.protocols import EventSource, Question
from qw_ui.tui.core.theme import DEFAULT_STYLE, QuestionStyle
from qw_ui.tui.system.models import KeyEvent, QuestionInput, TickResult

logger = logging.getLogger(__name__)

FrameSink = Callable[[Text], None]


class QuestionDriver:
    """Owns one question for its lifetime and dispatches events to it.

    Events are handled strictly one at a time; once the question commits or
    cancels nothing further reaches it.
    """

    def __init__(self, question: Question, *, style: QuestionStyle | None = None) -> None:
        self.question = question
        self.style = style or DEFAULT_STYLE
        self.result: TickResult | None = None
        self.events_dispatched = 0

    @property
    def finished(self) -> bool:
        return self.result is not None and self.result.finished

    def start(self, question_input: QuestionInput) -> Text:
        """Initialize the question and return its first frame."""
        self.question.initialize(question_input)
        self.result = TickResult.CONTINUE
        self.events_dispatched = 0
        logger.debug(f"Asking {type(self.question).__name__}: {question_input.question!r}")
        return self.frame()

    def frame(self) -> Text:
        return self.question.render_text(self.style)

    def step(self, event: KeyEvent) -> TickResult:
        if self.result is None:
            raise RuntimeError("QuestionDriver.start() must be called before step()")
        if self.finished:
            return self.result
        self.result = self.question.tick(event)
        self.events_dispatched += 1
        return self.result

    def outcome(self) -> Any:
        """Return the committed answer or raise the cancellation."""
        if self.result is TickResult.COMMIT:
            logger.debug(f"{type(self.question).__name__} committed")
            return self.question.answer
        error = self.question.last_error()
        if self.result is TickResult.CANCEL and isinstance(error, UserCancelled):
            logger.debug(f"{type(self.question).__name__} cancelled")
            raise error
        raise UserCancelled(
            "Input ended before the question was answered",
            context={"events": self.events_dispatched},
        )


def ask_question(
    question: Question,
    question_input: QuestionInput,
    events: EventSource | None = None,
    *,
    style: QuestionStyle | None = None,
    on_frame: FrameSink | None = None,
) -> Any:
    """
    Initialize ``question`` and run it until it commits or is cancelled.

    With ``events`` the loop reads from that source and hands every frame to
    ``on_frame``; without it the question runs on the real terminal. Returns
    the answer, raises ``UserCancelled`` on cancellation and
    ``RenderFailure`` when the option table cannot be built.
    """
    driver = QuestionDriver(question, style=style)
    with question_context(type(question).__name__, question_input.question):
        frame = driver.start(question_input)

        if events is None:
            from qw_ui.tui.screens.question_screen import QuestionScreen

            QuestionScreen(driver).run()
            return driver.outcome()

        if on_frame is not None:
            on_frame(frame)
        for event in events:
            result = driver.step(event)
            if on_frame is not None:
                on_frame(driver.frame())
            if result.finished:
                break
        return driver.outcome()
