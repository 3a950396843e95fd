"""Core configuration.

Why here:
- Centralizes environment variables (pydantic-settings) without leaking
  into the CLI.
- The demo pipeline and the CLI read the same typed settings object.
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def get_user_config_dir() -> Path:
    """Per-user configuration directory (cross-platform, no dependencies)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "protocol-playground"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "protocol-playground"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "protocol-playground"
    return Path.home() / ".config" / "protocol-playground"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Central application settings.

    Why pydantic-settings:
    - Typing + validation at the edge (env vars) without cluttering the core.
    - A single configuration contract for the CLI and the demo pipeline.
    """

    model_config = SettingsConfigDict(
        env_prefix="PROTOPLAY_",
        extra="ignore",
        case_sensitive=False,
        # Order: project first (dev), then the user's global config.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    log_level: str = Field(
        default="WARNING",
        description="Root log level (DEBUG, INFO, WARNING, ERROR).",
    )
    show_banner: bool = Field(
        default=True,
        description="Print the welcome banner before each command.",
    )
    sample_values: list[str] = Field(
        default_factory=lambda: ["a", "b", "c"],
        min_length=1,
        description="Values the linked-list demo adds when none are given.",
    )
    node_default_value: str = Field(
        default="(empty)",
        min_length=1,
        description="Substituted when a blank value is added to a string list.",
    )

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {value!r}")
        return level
