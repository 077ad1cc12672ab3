import pytest

from qw_common.errors import UserCancelled
from qw_ui.flows.questions import (
    ask_choice,
    ask_config_table,
    ask_confirmation,
    ask_many,
    ask_text,
    ask_user_tags,
    ask_yes_no,
)
from qw_ui.flows.validators import is_integer
from qw_ui.tui.system.headless import ScriptedAsker, text

pytestmark = pytest.mark.unit_ui


def test_ask_yes_no_defaults() -> None:
    asker = ScriptedAsker().queue("enter").queue("enter")

    assert ask_yes_no(asker, "Keep volumes?") == "No"
    assert ask_yes_no(asker, "Keep volumes?", default_yes=True) == "Yes"
    assert asker.asked[1].default_value == "Yes"


def test_ask_config_table_shows_table_as_question() -> None:
    asker = ScriptedAsker().queue("up", "enter")

    answer = ask_config_table(asker, [["Region", "eu-west-1"], ["Type", "t2.micro"]])

    assert answer == "Yes"
    shown = asker.asked[0].question
    assert shown.startswith("Please confirm if you would like to launch instance")
    assert "CONFIGURATIONS" in shown
    assert "eu-west-1" in shown
    assert ">" not in shown


def test_ask_choice_uses_default() -> None:
    asker = ScriptedAsker().queue("enter")

    answer = ask_choice(
        asker,
        "Region",
        [["us-east-1"], ["eu-west-1"]],
        ["us-east-1", "eu-west-1"],
        default="eu-west-1",
    )

    assert answer == "eu-west-1"


def test_ask_many_returns_selected_values() -> None:
    asker = ScriptedAsker().queue("space", "down", "down", "enter")

    answer = ask_many(asker, "Groups", [["web"], ["ssh"]], ["sg-web", "sg-ssh"], defaults=["sg-ssh"])

    assert answer == ["sg-web", "sg-ssh"]


def test_ask_text_validates_with_context() -> None:
    asker = ScriptedAsker().queue(text("ten"), "enter", text("10"), "enter")

    answer = ask_text(asker, "Minutes", validators=[is_integer], context={"unit": "min"})

    assert answer == "10"
    assert any("ten is an invalid answer" in frame for frame in asker.frames)


def test_ask_user_tags_serializes_default_mapping() -> None:
    asker = ScriptedAsker().queue("tab", "tab", "right", "enter")

    answer = ask_user_tags(asker, default_tags={"owner": "me", "env": "dev"})

    assert answer == "owner|me, env|dev"
    assert asker.asked[0].default_value == "owner|me,env|dev"


def test_ask_confirmation_can_pick_row_for_editing() -> None:
    asker = ScriptedAsker().queue("up", "up", "up", "enter")

    answer = ask_confirmation(
        asker,
        [["Region", "eu-west-1"], ["Type", "t2.micro"]],
        ["region", "type"],
        allow_edit=True,
    )

    assert answer == "region"


def test_cancel_propagates_from_flows() -> None:
    asker = ScriptedAsker().queue("c-c")

    with pytest.raises(UserCancelled):
        ask_text(asker, "Name")
