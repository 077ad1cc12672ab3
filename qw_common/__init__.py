"""Shared helpers for the question wizard."""

from qw_common.api import QWError, UserCancelled, configure_logging

__all__ = ["configure_logging", "QWError", "UserCancelled"]
