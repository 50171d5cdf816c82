"""
Configuration - settings for the command line tool.

Settings are read from a YAML file. Every field has a default, so a
missing file (or no file at all) gives a working configuration.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

import yaml
from pydantic import BaseModel, Field

from chuk_music_time.constants import CONFIG_ENV_VAR, SCHEMA_VERSION, ErrorMessages, LogLevel

logger = logging.getLogger(__name__)


class MusicTimeConfig(BaseModel):
    """Settings for reading and writing interchange documents."""

    log_level: LogLevel = Field("INFO", description="Root log level")
    json_indent: int | None = Field(2, ge=0, description="Indent for JSON output (None: compact)")
    schema_version: str = Field(SCHEMA_VERSION, description="Schema written to documents")

    model_config = {"frozen": True}


def default_config_path() -> Path | None:
    """The config file named by the environment, if any."""
    value = os.environ.get(CONFIG_ENV_VAR)
    return Path(value) if value else None


def load_config(path: Path | None = None) -> MusicTimeConfig:
    """
    Load settings from a YAML file.

    Args:
        path: Config file; None or a missing file gives the defaults

    Returns:
        The validated configuration

    Raises:
        ValueError: If the file is unreadable or not a YAML mapping
        pydantic.ValidationError: If a setting has an invalid value
    """
    if path is None or not path.exists():
        logger.debug("No config file at %s, using defaults", path)
        return MusicTimeConfig()

    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise ValueError(ErrorMessages.CONFIG_UNREADABLE.format(path=path, error=e)) from e

    if data is None:
        return MusicTimeConfig()
    if not isinstance(data, dict):
        raise ValueError(
            ErrorMessages.CONFIG_NOT_MAPPING.format(path=path, kind=type(data).__name__)
        )
    return MusicTimeConfig(**data)
