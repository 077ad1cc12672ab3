from __future__ import annotations

from qw_common.errors import QWError, RenderFailure, UserCancelled

EXIT_CANCELLED = 130
EXIT_BAD_CONFIG = 2


class UIFlowError(RuntimeError):
    """Typed error for question flow failures that the CLI turns into an exit code."""

    def __init__(self, message: str, exit_code: int = 1) -> None:
        super().__init__(message)
        self.exit_code = exit_code

    @classmethod
    def from_error(cls, error: QWError) -> "UIFlowError":
        if isinstance(error, UserCancelled):
            return cls(str(error), exit_code=EXIT_CANCELLED)
        if isinstance(error, RenderFailure):
            return cls(f"Cannot render question: {error}", exit_code=EXIT_BAD_CONFIG)
        return cls(str(error))
