"""Terminal question wizard: composable question widgets and their driver."""

from qw_ui.api import (
    ScriptedAsker,
    TerminalAsker,
    ask_question,
    keys,
    text,
)

__all__ = ["ScriptedAsker", "TerminalAsker", "ask_question", "keys", "text"]
