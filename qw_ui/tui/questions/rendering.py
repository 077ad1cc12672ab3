"""Line styling helpers shared by the list-based questions."""

from __future__ import annotations

from rich.text import Text

from qw_ui.tui.core.theme import COLUMN_SEPARATOR, QuestionStyle


def padded(text: str | Text, width: int, style: str = "") -> Text:
    line = Text(" " * width)
    if isinstance(text, Text):
        line.append_text(text)
        if style:
            line.stylize(style, width)
        return line
    line.append(text, style=style)
    return line


def focus_table_line(text: str, style: QuestionStyle) -> Text:
    """Highlight every table segment of ``text`` but leave separators plain."""
    line = Text()
    for index, segment in enumerate(text.split(COLUMN_SEPARATOR)):
        if index:
            line.append(COLUMN_SEPARATOR)
        line.append(segment, style=style.focused)
    return line


def indent_block(block: str, width: int) -> Text:
    return Text("\n").join(padded(line, width) for line in block.split("\n"))
