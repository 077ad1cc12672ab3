from types import SimpleNamespace

import pytest

from qw_common.errors import UserCancelled
from qw_ui.tui.core import capabilities
from qw_ui.tui.questions import SingleSelectQuestion
from qw_ui.tui.system import facade
from qw_ui.tui.system.facade import TerminalAsker
from qw_ui.tui.system.models import QuestionInput

pytestmark = pytest.mark.unit_ui


def test_is_tty_available_checks_stdio(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(
        capabilities,
        "sys",
        SimpleNamespace(
            stdin=SimpleNamespace(isatty=lambda: True),
            stdout=SimpleNamespace(isatty=lambda: False),
        ),
    )
    assert capabilities.is_tty_available() is False
    assert capabilities.supports_interactive_questions() is False


def test_terminal_asker_requires_tty(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(facade, "supports_interactive_questions", lambda: False)

    with pytest.raises(UserCancelled) as excinfo:
        TerminalAsker().ask(SingleSelectQuestion(), QuestionInput(question="Pick"))

    assert excinfo.value.context == {"question": "Pick"}
