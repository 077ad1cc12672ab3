"""Engine-wide settings with environment overrides."""

from __future__ import annotations

import logging
import os
from typing import Mapping

from pydantic import BaseModel, Field, ValidationError

from qw_common.config.env import parse_bool_env, parse_int_env

logger = logging.getLogger(__name__)


class EngineSettings(BaseModel):
    """Tunables shared by the question widgets and the CLI."""

    table_width: int = Field(default=120, ge=20, description="Render width for option tables")
    text_char_limit: int = Field(default=32, ge=0, description="Max characters per tag field (0 = unlimited)")
    add_button_text: str = Field(default="ADD TAG")
    submit_button_text: str = Field(default="SUBMIT TAGS")
    log_level: str = Field(default="WARNING")
    log_json: bool = Field(default=False)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "EngineSettings":
        """Build settings from ``QW_*`` variables, ignoring unusable values."""
        env = os.environ if environ is None else environ
        overrides: dict[str, object] = {}
        width = parse_int_env(env.get("QW_TABLE_WIDTH"))
        if width is not None:
            overrides["table_width"] = width
        limit = parse_int_env(env.get("QW_TEXT_CHAR_LIMIT"))
        if limit is not None:
            overrides["text_char_limit"] = limit
        if env.get("QW_LOG_LEVEL"):
            overrides["log_level"] = env["QW_LOG_LEVEL"]
        log_json = parse_bool_env(env.get("QW_LOG_JSON"))
        if log_json is not None:
            overrides["log_json"] = log_json
        try:
            return cls(**overrides)
        except ValidationError as exc:
            logger.warning(f"Ignoring invalid QW_* settings: {exc}")
            return cls()


DEFAULT_SETTINGS = EngineSettings()
