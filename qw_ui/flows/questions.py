"""Straight-line question helpers built on a ``QuestionAsker``.

Each helper builds the question, asks it and returns the answer.
``UserCancelled`` propagates to the caller untouched.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Sequence

from qw_ui.settings import DEFAULT_SETTINGS, EngineSettings
from qw_ui.tui.core.protocols import QuestionAsker
from qw_ui.tui.core.theme import PLAIN_STYLE
from qw_ui.tui.questions import (
    ConfirmationQuestion,
    KeyValueQuestion,
    MultiSelectQuestion,
    PlainTextQuestion,
    SingleSelectQuestion,
)
from qw_ui.tui.questions.confirmation import (
    CONFIG_HEADERS,
    CONFIRM_QUESTION,
    RESPONSE_NO,
    RESPONSE_YES,
    YES_NO_OPTIONS,
)
from qw_ui.tui.questions.key_value import tags_from_mapping
from qw_ui.tui.system.components.table_layout import single_line_rows
from qw_ui.tui.system.models import QuestionInput, Validator

logger = logging.getLogger(__name__)

CONFIG_TABLE_QUESTION = (
    "Please confirm if you would like to launch instance with following options:"
)
TABLE_HEADERS = ["Configurations", "Values"]


def ask_yes_no(
    asker: QuestionAsker,
    question: str,
    default_yes: bool = False,
    *,
    settings: EngineSettings | None = None,
) -> str:
    """Ask a Yes/No question; returns ``"Yes"`` or ``"No"``."""
    return asker.ask(
        SingleSelectQuestion(settings or DEFAULT_SETTINGS),
        QuestionInput(
            question=question,
            rows=single_line_rows(YES_NO_OPTIONS),
            row_values=YES_NO_OPTIONS,
            default_value=RESPONSE_YES if default_yes else RESPONSE_NO,
        ),
    )


def ask_config_table(
    asker: QuestionAsker,
    rows: Sequence[Sequence[str]],
    *,
    settings: EngineSettings | None = None,
) -> str:
    """Show ``rows`` as a read-only table and ask Yes/No about them."""
    settings = settings or DEFAULT_SETTINGS
    table = SingleSelectQuestion(settings)
    table.initialize(
        QuestionInput(question=CONFIG_TABLE_QUESTION, rows=rows, headers=TABLE_HEADERS)
    )
    return ask_yes_no(asker, table.print_table(PLAIN_STYLE), False, settings=settings)


def ask_choice(
    asker: QuestionAsker,
    question: str,
    rows: Sequence[Sequence[str]],
    row_values: Sequence[str],
    *,
    headers: Sequence[str] = (),
    default: str = "",
    settings: EngineSettings | None = None,
) -> str | None:
    return asker.ask(
        SingleSelectQuestion(settings or DEFAULT_SETTINGS),
        QuestionInput(
            question=question,
            rows=rows,
            headers=headers,
            row_values=row_values,
            default_value=default,
        ),
    )


def ask_many(
    asker: QuestionAsker,
    question: str,
    rows: Sequence[Sequence[str]],
    row_values: Sequence[str],
    *,
    headers: Sequence[str] = (),
    defaults: Sequence[str] = (),
    settings: EngineSettings | None = None,
) -> list[str]:
    return asker.ask(
        MultiSelectQuestion(settings or DEFAULT_SETTINGS),
        QuestionInput(
            question=question,
            rows=rows,
            headers=headers,
            row_values=row_values,
            default_values=defaults,
        ),
    )


def ask_text(
    asker: QuestionAsker,
    question: str,
    *,
    default: str = "",
    validators: Sequence[Validator] = (),
    context: Any = None,
) -> str:
    return asker.ask(
        PlainTextQuestion(),
        QuestionInput(
            question=question,
            default_value=default,
            validators=validators,
            context=context,
        ),
    )


def ask_user_tags(
    asker: QuestionAsker,
    question: str = "Tags to instances and persisted volumes",
    default_tags: Mapping[str, str] | None = None,
    *,
    settings: EngineSettings | None = None,
) -> str:
    """Collect tags; returns ``"key1|value1, key2|value2"``."""
    return asker.ask(
        KeyValueQuestion(settings or DEFAULT_SETTINGS),
        QuestionInput(question=question, default_value=tags_from_mapping(default_tags or {})),
    )


def ask_confirmation(
    asker: QuestionAsker,
    rows: Sequence[Sequence[str]],
    row_values: Sequence[str],
    *,
    allow_edit: bool = False,
    question: str = CONFIRM_QUESTION,
    settings: EngineSettings | None = None,
) -> str:
    """Confirm a configuration table.

    Returns ``"Yes"``/``"No"``, or the value of the configuration row picked
    for editing when ``allow_edit`` is set.
    """
    answer = asker.ask(
        ConfirmationQuestion(allow_edit=allow_edit, settings=settings),
        QuestionInput(
            question=question,
            rows=rows,
            headers=CONFIG_HEADERS,
            row_values=row_values,
        ),
    )
    if answer not in YES_NO_OPTIONS:
        logger.debug(f"Configuration row {answer!r} picked for editing")
    return answer
