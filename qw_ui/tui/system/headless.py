from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable

from qw_ui.tui.core.protocols import Question, QuestionAsker
from qw_ui.tui.core.theme import PLAIN_STYLE, QuestionStyle
from qw_ui.tui.system.driver import ask_question
from qw_ui.tui.system.models import Key, KeyEvent, QuestionInput

KEY_ALIASES: dict[str, Key] = {
    "shift-tab": Key.SHIFT_TAB,
    "ctrl-c": Key.CANCEL,
    "cancel": Key.CANCEL,
}


def key(name: str) -> KeyEvent:
    """Event for a named key such as ``"up"``, ``"enter"`` or ``"c-c"``."""
    lowered = name.lower()
    if lowered in KEY_ALIASES:
        return KeyEvent(KEY_ALIASES[lowered])
    try:
        resolved = Key(lowered)
    except ValueError:
        raise ValueError(f"Unknown key name: {name!r}") from None
    if resolved is Key.CHAR:
        raise ValueError("Use text() to type characters")
    return KeyEvent(resolved, " " if resolved is Key.SPACE else "")


def text(value: str) -> list[KeyEvent]:
    """One character event per character of ``value``."""
    return [KeyEvent.char(char) for char in value]


def keys(*tokens: str | KeyEvent | Iterable[KeyEvent]) -> list[KeyEvent]:
    """Flatten key names, events and event lists into one script."""
    events: list[KeyEvent] = []
    for token in tokens:
        if isinstance(token, KeyEvent):
            events.append(token)
        elif isinstance(token, str):
            events.append(key(token))
        else:
            events.extend(token)
    return events


@dataclass
class ScriptedAsker(QuestionAsker):
    """Answers questions from queued key scripts, recording what was shown.

    A question with no script left sees an empty event source and is
    therefore cancelled.
    """

    scripts: list[list[KeyEvent]] = field(default_factory=list)
    style: QuestionStyle = PLAIN_STYLE
    frames: list[str] = field(default_factory=list)
    asked: list[QuestionInput] = field(default_factory=list)

    def queue(self, *tokens: str | KeyEvent | Iterable[KeyEvent]) -> "ScriptedAsker":
        self.scripts.append(keys(*tokens))
        return self

    def ask(self, question: Question, question_input: QuestionInput) -> Any:
        self.asked.append(question_input)
        script = self.scripts.pop(0) if self.scripts else []
        return ask_question(
            question,
            question_input,
            script,
            style=self.style,
            on_frame=lambda frame: self.frames.append(frame.plain),
        )

    @property
    def last_frame(self) -> str:
        return self.frames[-1] if self.frames else ""
