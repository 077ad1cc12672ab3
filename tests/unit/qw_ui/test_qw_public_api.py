import pytest

import qw_ui
import qw_ui.api as api
import qw_ui.tui as tui

pytestmark = pytest.mark.unit_ui


def test_api_exports_resolve() -> None:
    for name in api.__all__:
        assert getattr(api, name) is not None, name


def test_package_reexports() -> None:
    assert qw_ui.ScriptedAsker is api.ScriptedAsker
    assert qw_ui.ask_question is api.ask_question
    assert tui.TerminalAsker is api.TerminalAsker
