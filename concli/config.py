# Concli CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Runtime configuration for Concli command lines."""
from __future__ import annotations

import os
from typing import Literal

from pydantic import BaseModel, Field, field_validator

from concli.help import PREFERRED_WIDTH


class CliConfig(BaseModel):
    """
    Options that affect how `CommandLine.run()` renders output.

    Attributes:
        help_width (int): Width of the help separator lines and description wrap.
        log_mode (str | None): "cli" or "json". When set, `run()` configures logging
            through `setup_logging()`; when None logging is left untouched.
        no_color (bool): Print help and errors without colors.
    """

    help_width: int = Field(default=PREFERRED_WIDTH, ge=20)
    log_mode: Literal["cli", "json"] | None = None
    no_color: bool = False

    @field_validator("log_mode", mode="before")
    @classmethod
    def normalize_log_mode(cls, value: str | None) -> str | None:
        if isinstance(value, str):
            value = value.strip().lower()
            return value or None
        return value

    @classmethod
    def from_env(cls) -> CliConfig:
        """
        Build a config from the environment.

        Environment Variables:
            CONCLI_HELP_WIDTH: Help width, an integer of at least 20.
            CONCLI_LOG_MODE: "cli" or "json".
            NO_COLOR: Any non-empty value disables colors.
        """
        values: dict[str, object] = {"no_color": bool(os.getenv("NO_COLOR"))}
        width = os.getenv("CONCLI_HELP_WIDTH")
        if width:
            values["help_width"] = width
        log_mode = os.getenv("CONCLI_LOG_MODE")
        if log_mode:
            values["log_mode"] = log_mode
        return cls.model_validate(values)
