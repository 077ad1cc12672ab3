"""Single-line text entry backed by a prompt_toolkit buffer."""

from __future__ import annotations

from prompt_toolkit.buffer import Buffer
from prompt_toolkit.document import Document
from rich.text import Text

from qw_ui.tui.core.theme import QuestionStyle
from qw_ui.tui.system.models import Key, KeyEvent


class TextField:
    """Editing model for one line of text.

    Handles character insert/delete and in-line cursor movement. Enter and
    focus traversal belong to the owning question.
    """

    def __init__(
        self,
        *,
        placeholder: str = "",
        char_limit: int = 0,
        prompt: str = "> ",
    ) -> None:
        self.buffer = Buffer(multiline=False)
        self.placeholder = placeholder
        self.char_limit = char_limit
        self.prompt = prompt
        self.focused = False

    @property
    def value(self) -> str:
        return self.buffer.text

    @property
    def cursor_position(self) -> int:
        return self.buffer.cursor_position

    def set_value(self, value: str) -> None:
        if self.char_limit:
            value = value[: self.char_limit]
        self.buffer.document = Document(value, len(value))

    def clear(self) -> None:
        self.set_value("")

    def focus(self) -> None:
        self.focused = True

    def blur(self) -> None:
        self.focused = False

    def handle(self, event: KeyEvent) -> bool:
        """Apply an editing event. Returns False when the event is not ours."""
        if event.key in (Key.CHAR, Key.SPACE):
            self._insert(event.data)
        elif event.key is Key.BACKSPACE:
            self.buffer.delete_before_cursor(1)
        elif event.key is Key.DELETE:
            self.buffer.delete(1)
        elif event.key is Key.LEFT:
            self.buffer.cursor_left()
        elif event.key is Key.RIGHT:
            self.buffer.cursor_right()
        elif event.key is Key.HOME:
            self.buffer.cursor_position = 0
        elif event.key is Key.END:
            self.buffer.cursor_position = len(self.buffer.text)
        else:
            return False
        return True

    def _insert(self, data: str) -> None:
        if not data:
            return
        if self.char_limit:
            remaining = self.char_limit - len(self.buffer.text)
            if remaining <= 0:
                return
            data = data[:remaining]
        self.buffer.insert_text(data)

    def render(self, style: QuestionStyle) -> Text:
        text_style = style.focused if self.focused else ""
        line = Text(self.prompt, style=text_style)
        if not self.value:
            line.append(self.placeholder, style=style.blurred)
            return line
        value = self.value
        if not self.focused:
            line.append(value)
            return line
        pos = self.cursor_position
        line.append(value[:pos], style=text_style)
        line.append(value[pos : pos + 1] or " ", style="reverse")
        line.append(value[pos + 1 :], style=text_style)
        return line
