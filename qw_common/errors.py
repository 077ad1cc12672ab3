"""Shared error taxonomy for the question wizard."""

from __future__ import annotations

from typing import Any, Mapping, TypeVar


def _normalize_context_value(value: Any) -> Any:
    if isinstance(value, Mapping):
        return normalize_context(value)
    if isinstance(value, (list, tuple)):
        return [_normalize_context_value(item) for item in value]
    if isinstance(value, (str, int, float, bool)) or value is None:
        return value
    return str(value)


def normalize_context(context: Mapping[str, Any]) -> dict[str, Any]:
    """Return a JSON-friendly copy of an error context mapping."""
    return {key: _normalize_context_value(val) for key, val in context.items()}


class QWError(Exception):
    """Base error type for typed failure handling."""

    def __init__(
        self,
        message: str,
        *,
        context: Mapping[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.context = normalize_context(context or {})
        if cause is not None:
            self.__cause__ = cause

    @property
    def error_type(self) -> str:
        return self.__class__.__name__

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.error_type, "message": str(self), "context": self.context}


class UserCancelled(QWError):
    """The user pressed the quit key; terminal for the current question."""

    def __init__(
        self,
        message: str = "Exiting the questionnaire",
        *,
        context: Mapping[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message, context=context, cause=cause)


class ValidationRejected(QWError):
    """No validator accepted a free-text answer."""


class SelectionRequired(QWError):
    """A multiple choice question was submitted with nothing selected."""


class UnmodifiableRow(QWError):
    """A confirmation row without an answer value was picked for editing."""


class RenderFailure(QWError):
    """The option table could not be formatted."""


T = TypeVar("T", bound=QWError)


def wrap_error(
    error_cls: type[T],
    message: str,
    *,
    context: Mapping[str, Any] | None = None,
    cause: Exception | None = None,
) -> T:
    """Create a typed QWError with optional context and cause."""
    return error_cls(message, context=context, cause=cause)
