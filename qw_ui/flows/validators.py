"""Reusable free-text validators for ``PlainTextQuestion``.

Every validator takes ``(context, answer)``; the context is whatever the
caller passed along with the question and is ignored by the generic checks
below.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Iterable

from qw_ui.tui.system.models import Validator


def is_integer(context: Any, answer: str) -> bool:
    _ = context
    try:
        int(answer)
    except ValueError:
        return False
    return True


def is_existing_file(context: Any, answer: str) -> bool:
    _ = context
    return bool(answer) and Path(answer).expanduser().is_file()


def one_of(options: Iterable[str]) -> Validator:
    """Validator accepting exactly the given answers."""
    allowed = frozenset(options)

    def _validate(context: Any, answer: str) -> bool:
        _ = context
        return answer in allowed

    _validate.__name__ = "one_of"
    return _validate
