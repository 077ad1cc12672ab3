"""Public API surface for qw_common."""

from qw_common.errors import (
    QWError,
    RenderFailure,
    SelectionRequired,
    UnmodifiableRow,
    UserCancelled,
    ValidationRejected,
)
from qw_common.logging import configure_logging, question_context

__all__ = [
    "configure_logging",
    "question_context",
    "QWError",
    "RenderFailure",
    "SelectionRequired",
    "UnmodifiableRow",
    "UserCancelled",
    "ValidationRejected",
]
