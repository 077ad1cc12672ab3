import pytest

from qw_ui.tui.core.theme import (
    DEFAULT_STYLE,
    PLAIN_STYLE,
    button_label,
    invalid_answer_message,
    prompt_toolkit_question_style,
)
from qw_ui.tui.questions.rendering import focus_table_line, indent_block, padded

pytestmark = pytest.mark.unit_ui


def test_default_style_paddings_and_glyphs() -> None:
    assert (DEFAULT_STYLE.small_padding, DEFAULT_STYLE.medium_padding, DEFAULT_STYLE.large_padding) == (3, 5, 9)
    assert DEFAULT_STYLE.cursor == "> "
    assert DEFAULT_STYLE.pad(2) == "  "


def test_plain_style_has_no_colours() -> None:
    assert PLAIN_STYLE.focused == ""
    assert PLAIN_STYLE.error == ""
    assert PLAIN_STYLE.small_padding == DEFAULT_STYLE.small_padding


def test_messages() -> None:
    assert button_label("Submit") == "[ Submit ]"
    assert invalid_answer_message("x") == "x is an invalid answer. Enter a valid answer."
    assert "question" in prompt_toolkit_question_style()


def test_focus_table_line_leaves_separators_unstyled() -> None:
    line = focus_table_line("> a │ b", DEFAULT_STYLE)

    assert line.plain == "> a │ b"
    separator = line.plain.index("│")
    styled = [span for span in line.spans if span.start <= separator < span.end]
    assert styled == []
    assert any(span.style == DEFAULT_STYLE.focused for span in line.spans)


def test_padding_helpers() -> None:
    assert padded("x", 3).plain == "   x"
    assert indent_block("a\nb", 2).plain == "  a\n  b"
