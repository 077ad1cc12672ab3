from __future__ import annotations

import logging
from typing import Mapping

from rich.text import Text

from qw_ui.settings import DEFAULT_SETTINGS, EngineSettings
from qw_ui.tui.core.theme import QuestionStyle
from qw_ui.tui.questions.base import QuestionBase, resolve_style
from qw_ui.tui.questions.rendering import focus_table_line, indent_block, padded
from qw_ui.tui.system.components.selectable_list import SelectableList
from qw_ui.tui.system.components.table_layout import render_option_table
from qw_ui.tui.system.components.text_field import TextField
from qw_ui.tui.system.models import Key, KeyEvent, LineItem, QuestionInput, TickResult

logger = logging.getLogger(__name__)

TAG_HEADERS = ["Key", "Value"]
KEY_PLACEHOLDER = "Key"
VALUE_PLACEHOLDER = "Value"
MISSING_KEY_PLACEHOLDER = "Please enter a key!"
MISSING_VALUE_PLACEHOLDER = "Please enter a value!"
INVALID_KEY_PLACEHOLDER = "Keys can't contain '|' or ','!"
INVALID_VALUE_PLACEHOLDER = "Values can't contain '|' or ','!"
PAIR_SEPARATOR = "|"
TAG_SEPARATOR = ","

FIELD_COUNT = 2
BUTTON_SLOT = FIELD_COUNT

Tag = tuple[str, str]


def parse_tags(raw: str) -> list[Tag]:
    """Parse ``"key|value, key|value"``; malformed or empty pairs are skipped."""
    tags: list[Tag] = []
    for chunk in raw.split(TAG_SEPARATOR):
        pair = chunk.split(PAIR_SEPARATOR)
        if len(pair) != 2:
            continue
        key, value = pair[0].strip(), pair[1].strip()
        if key and value:
            tags.append((key, value))
    return tags


def tags_to_string(tags: list[Tag]) -> str:
    return ", ".join(f"{key}{PAIR_SEPARATOR}{value}" for key, value in tags)


def tags_from_mapping(tags: Mapping[str, str]) -> str:
    """Serialize a tag mapping into the default-value format."""
    return TAG_SEPARATOR.join(f"{key}{PAIR_SEPARATOR}{value}" for key, value in tags.items())


def field_prompt(text: str, missing: str, invalid: str) -> str | None:
    """Inline prompt for an unusable tag part, or None when it can be stored."""
    if not text:
        return missing
    if PAIR_SEPARATOR in text or TAG_SEPARATOR in text:
        return invalid
    return None


class KeyValueQuestion(QuestionBase):
    """Collects key/value tags through two text fields and an editable list.

    ``focus_index`` spans three regions: negative values point backward into
    the tag list (-1 is the last tag), 0 and 1 are the key and value fields,
    and ``BUTTON_SLOT`` is the shared ADD/SUBMIT slot where Left/Right
    choose which button Enter triggers.
    """

    kind = "key_value"

    def __init__(self, settings: EngineSettings | None = None) -> None:
        super().__init__()
        self._settings = settings or DEFAULT_SETTINGS
        self.inputs: list[TextField] = []
        self.tags: list[Tag] = []
        self.tag_header = ""
        self.tag_list = SelectableList(renderer=self._render_tag)
        self.focus_index = 0
        self.submit_armed = False

    def _setup(self, question_input: QuestionInput) -> None:
        limit = self._settings.text_char_limit
        self.inputs = [
            TextField(placeholder=KEY_PLACEHOLDER, char_limit=limit),
            TextField(placeholder=VALUE_PLACEHOLDER, char_limit=limit),
        ]
        self.tags = parse_tags(question_input.default_value)
        self.focus_index = 0
        self.submit_armed = False
        self._rebuild_tag_list()
        self._sync_input_focus()

    @property
    def answer(self) -> str:
        return self.tags_to_string()

    def tags_to_string(self) -> str:
        return tags_to_string(self.tags)

    @property
    def buttons_focused(self) -> bool:
        return self.focus_index == BUTTON_SLOT

    def _handle(self, event: KeyEvent) -> TickResult:
        key = event.key
        if key is Key.ENTER and self.buttons_focused:
            if self.submit_armed:
                return TickResult.COMMIT
            self.add_tag()
            self.focus_index = 0
            self._after_focus_change()
        elif key in (Key.UP, Key.SHIFT_TAB):
            self._cycle_focus(-1)
        elif key in (Key.DOWN, Key.TAB, Key.ENTER):
            self._cycle_focus(1)
        elif key in (Key.LEFT, Key.RIGHT) and self.buttons_focused:
            self.submit_armed = not self.submit_armed
        elif key is Key.BACKSPACE and self.focus_index < 0:
            self.delete_tag()
        elif 0 <= self.focus_index < FIELD_COUNT:
            self.inputs[self.focus_index].handle(event)
        return TickResult.CONTINUE

    def _cycle_focus(self, delta: int) -> None:
        self.focus_index = max(
            self._lowest_focus(), min(self.focus_index + delta, BUTTON_SLOT)
        )
        self._after_focus_change()

    def _lowest_focus(self) -> int:
        return -len(self.tag_list)

    def _after_focus_change(self) -> None:
        if self.focus_index >= 0:
            self.tag_list.clear_selection()
        else:
            self.tag_list.select(len(self.tag_list) + self.focus_index)
        if not self.buttons_focused:
            self.submit_armed = False
        self._sync_input_focus()

    def _sync_input_focus(self) -> None:
        for index, field in enumerate(self.inputs):
            if index == self.focus_index:
                field.focus()
            else:
                field.blur()

    def add_tag(self) -> bool:
        """Append the field contents as a tag when both are usable.

        An empty field, or one holding a separator character, gets an inline
        prompt as its placeholder instead. Both fields are cleared either way.
        """
        key_field, value_field = self.inputs
        key = key_field.value.strip()
        value = value_field.value.strip()
        key_prompt = field_prompt(key, MISSING_KEY_PLACEHOLDER, INVALID_KEY_PLACEHOLDER)
        value_prompt = field_prompt(value, MISSING_VALUE_PLACEHOLDER, INVALID_VALUE_PLACEHOLDER)
        if key_prompt:
            key_field.placeholder = key_prompt
        if value_prompt:
            value_field.placeholder = value_prompt
        added = not (key_prompt or value_prompt)
        if added:
            self.tags.append((key, value))
            self._rebuild_tag_list()
            key_field.placeholder = KEY_PLACEHOLDER
            value_field.placeholder = VALUE_PLACEHOLDER
            logger.debug(f"Added tag {key!r}")
        key_field.clear()
        value_field.clear()
        return added

    def delete_tag(self) -> None:
        """Delete the highlighted tag row and move the highlight up by one."""
        item = self.tag_list.selected_item
        if item is None:
            return
        cursor = self.tag_list.cursor
        del self.tags[item.row]
        self._rebuild_tag_list()
        if not self.tags:
            self.focus_index = 0
            self._after_focus_change()
            return
        self.focus_index = max(cursor - 1, 0) - len(self.tag_list)
        self._after_focus_change()

    def _rebuild_tag_list(self) -> None:
        table = render_option_table(
            [list(tag) for tag in self.tags],
            TAG_HEADERS if self.tags else [],
            width=self._settings.table_width,
        )
        self.tag_header = table.header
        self.tag_list.set_items(table.items)

    def _render_tag(
        self, item: LineItem, index: int, focused: bool, style: QuestionStyle
    ) -> Text:
        _ = index
        if focused:
            return padded(
                focus_table_line(style.cursor + item.text, style), style.small_padding
            )
        return padded(item.text, style.medium_padding)

    def _button(self, label: str, armed: bool, style: QuestionStyle) -> Text:
        if self.buttons_focused and armed:
            return Text("[ ") + Text(label, style=style.focused) + Text(" ]")
        return Text(f"[ {label} ]", style=style.blurred)

    def render_text(self, style: QuestionStyle | None = None) -> Text:
        style = resolve_style(style)
        view = self._question_text(style, trailing="\n")
        view.append("\n")
        if len(self.tag_list):
            view.append_text(indent_block(self.tag_header, style.medium_padding))
            view.append("\n")
            view.append_text(self.tag_list.render(style))
            view.append("\n\n")
        fields = [padded(field.render(style), style.small_padding) for field in self.inputs]
        view.append_text(Text("\n").join(fields))
        view.append("\n\n")
        buttons = Text(style.pad(style.small_padding))
        buttons.append_text(
            self._button(self._settings.add_button_text, not self.submit_armed, style)
        )
        buttons.append("  ")
        buttons.append_text(
            self._button(self._settings.submit_button_text, self.submit_armed, style)
        )
        view.append_text(buttons)
        view.append("\n")
        return view
