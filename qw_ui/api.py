"""Stable question wizard API surface."""

from __future__ import annotations

from qw_ui.cli import app, main
from qw_ui.flows.errors import UIFlowError
from qw_ui.flows.questions import (
    ask_choice,
    ask_config_table,
    ask_confirmation,
    ask_many,
    ask_text,
    ask_user_tags,
    ask_yes_no,
)
from qw_ui.settings import EngineSettings
from qw_ui.tui.core.theme import DEFAULT_STYLE, PLAIN_STYLE, QuestionStyle
from qw_ui.tui.questions import (
    ConfirmationQuestion,
    KeyValueQuestion,
    MultiSelectQuestion,
    PlainTextQuestion,
    SingleSelectQuestion,
)
from qw_ui.tui.system.components.table_layout import render_option_table
from qw_ui.tui.system.driver import QuestionDriver, ask_question
from qw_ui.tui.system.facade import TerminalAsker
from qw_ui.tui.system.headless import ScriptedAsker, keys, text
from qw_ui.tui.system.models import Key, KeyEvent, QuestionInput, TickResult

__all__ = [
    "app",
    "main",
    "ask_choice",
    "ask_config_table",
    "ask_confirmation",
    "ask_many",
    "ask_question",
    "ask_text",
    "ask_user_tags",
    "ask_yes_no",
    "ConfirmationQuestion",
    "DEFAULT_STYLE",
    "EngineSettings",
    "Key",
    "KeyEvent",
    "KeyValueQuestion",
    "MultiSelectQuestion",
    "PLAIN_STYLE",
    "PlainTextQuestion",
    "QuestionDriver",
    "QuestionInput",
    "QuestionStyle",
    "ScriptedAsker",
    "SingleSelectQuestion",
    "TerminalAsker",
    "TickResult",
    "UIFlowError",
    "keys",
    "render_option_table",
    "text",
]
