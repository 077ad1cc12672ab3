"""
Question widgets, the driver that runs them and terminal/headless askers.
"""

from qw_ui.tui.core.protocols import Question, QuestionAsker
from qw_ui.tui.system.facade import TerminalAsker
from qw_ui.tui.system.headless import ScriptedAsker

__all__ = ["Question", "QuestionAsker", "TerminalAsker", "ScriptedAsker"]
