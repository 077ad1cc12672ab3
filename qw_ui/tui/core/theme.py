from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

FOCUSED_COLOR = "color(170)"
BLURRED_COLOR = "color(240)"
ERROR_COLOR = "color(9)"

COLUMN_SEPARATOR = "│"


@dataclass(frozen=True)
class QuestionStyle:
    """Rendering options threaded into every ``render()`` call."""

    focused: str = FOCUSED_COLOR
    blurred: str = BLURRED_COLOR
    error: str = ERROR_COLOR
    question: str = "bold"
    cursor: str = "> "
    checked: str = "[x]"
    unchecked: str = "[ ]"
    small_padding: int = 3
    medium_padding: int = 5
    large_padding: int = 9

    def pad(self, width: int) -> str:
        return " " * width


DEFAULT_STYLE = QuestionStyle()

# Plain rendering used by tests and non-colour sinks.
PLAIN_STYLE = QuestionStyle(focused="", blurred="", error="", question="")


def button_label(text: str) -> str:
    return f"[ {text} ]"


def invalid_answer_message(answer: str) -> str:
    return f"{answer} is an invalid answer. Enter a valid answer."


def prompt_toolkit_question_style() -> Mapping[str, str]:
    return {
        "question": "bold",
        "frame": "",
    }
