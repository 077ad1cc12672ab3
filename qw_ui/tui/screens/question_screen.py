from __future__ import annotations

from typing import Any, Callable

from prompt_toolkit.application import Application
from prompt_toolkit.formatted_text import ANSI
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.keys import Keys
from prompt_toolkit.layout import HSplit, Layout, Window
from prompt_toolkit.layout.controls import FormattedTextControl
from prompt_toolkit.styles import Style
from rich.console import Console

from qw_ui.tui.core import theme
from qw_ui.tui.system.driver import QuestionDriver
from qw_ui.tui.system.models import Key, KeyEvent, TickResult

# prompt_toolkit key names for every non-character event
KEY_BINDINGS: dict[str, Key] = {
    "up": Key.UP,
    "down": Key.DOWN,
    "left": Key.LEFT,
    "right": Key.RIGHT,
    "tab": Key.TAB,
    "s-tab": Key.SHIFT_TAB,
    "enter": Key.ENTER,
    "space": Key.SPACE,
    "backspace": Key.BACKSPACE,
    "delete": Key.DELETE,
    "home": Key.HOME,
    "end": Key.END,
    "c-c": Key.CANCEL,
}


class QuestionScreen:
    """Inline prompt_toolkit application that feeds key presses to a driver."""

    def __init__(self, driver: QuestionDriver) -> None:
        self._driver = driver
        self._console = Console(force_terminal=True, color_system="truecolor")
        self.control = FormattedTextControl(self._frame_ansi, focusable=True)
        self.kb = self._bindings()
        self.app: Application = Application(
            layout=Layout(
                HSplit([Window(self.control, dont_extend_height=True, style="class:frame")])
            ),
            key_bindings=self.kb,
            style=Style.from_dict(dict(theme.prompt_toolkit_question_style())),
            full_screen=False,
        )

    def _frame_ansi(self) -> ANSI:
        with self._console.capture() as cap:
            self._console.print(self._driver.frame(), end="")
        return ANSI(cap.get())

    def _exit(self, app: Application, result: Any) -> None:
        """Exit the prompt safely, ignoring duplicate-exit errors."""
        try:
            app.exit(result=result)
        except Exception as exc:  # pragma: no cover - defensive
            if "Return value already set" in str(exc):
                return
            raise

    def dispatch(self, app: Application, key_event: KeyEvent) -> None:
        result = self._driver.step(key_event)
        if result.finished:
            self._exit(app, result)
            return
        app.invalidate()

    def _handler(self, key_event: KeyEvent) -> Callable[[Any], None]:
        def _(event: Any) -> None:
            self.dispatch(event.app, key_event)

        return _

    def _bindings(self) -> KeyBindings:
        kb = KeyBindings()

        for name, key in KEY_BINDINGS.items():
            data = " " if key is Key.SPACE else ""
            kb.add(name)(self._handler(KeyEvent(key, data)))

        @kb.add(Keys.Any)
        def _(event: Any) -> None:
            data = event.data
            if data and data.isprintable():
                self.dispatch(event.app, KeyEvent.char(data))

        return kb

    def run(self) -> TickResult | None:
        return self.app.run()
