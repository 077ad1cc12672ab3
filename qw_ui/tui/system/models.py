from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Sequence

# (context handle, candidate answer) -> accepted?
Validator = Callable[[Any, str], bool]


class Key(str, Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    TAB = "tab"
    SHIFT_TAB = "s-tab"
    ENTER = "enter"
    SPACE = "space"
    BACKSPACE = "backspace"
    DELETE = "delete"
    HOME = "home"
    END = "end"
    CANCEL = "c-c"
    CHAR = "char"


@dataclass(frozen=True)
class KeyEvent:
    key: Key
    data: str = ""

    @classmethod
    def char(cls, value: str) -> "KeyEvent":
        if value == " ":
            return cls(Key.SPACE, " ")
        return cls(Key.CHAR, value)


class TickResult(str, Enum):
    CONTINUE = "continue"
    COMMIT = "commit"
    CANCEL = "cancel"

    @property
    def finished(self) -> bool:
        return self is not TickResult.CONTINUE


@dataclass
class QuestionInput:
    """Everything a caller may hand to a question at initialization."""

    question: str = ""
    rows: Sequence[Sequence[str]] = field(default_factory=list)
    headers: Sequence[str] = field(default_factory=list)
    row_values: Sequence[str] = field(default_factory=list)
    default_value: str = ""
    default_values: Sequence[str] = field(default_factory=list)
    validators: Sequence[Validator] = field(default_factory=list)
    context: Any = None


@dataclass(frozen=True)
class LineItem:
    text: str
    row: int


@dataclass
class RenderedTable:
    header: str
    items: list[LineItem]
    answers: dict[LineItem, str]

    def first_item_index(self, row: int) -> int:
        """Index of the first line rendered for ``row``, or -1."""
        for index, item in enumerate(self.items):
            if item.row == row:
                return index
        return -1
