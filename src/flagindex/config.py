# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration models and loaders for the flagindex command line."""

from __future__ import annotations

import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Final, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import ConfigError

CONFIG_FILENAME: Final[str] = ".flagindex.toml"
PYPROJECT_FILENAME: Final[str] = "pyproject.toml"
PYPROJECT_TOOL_KEY: Final[str] = "tool"
PYPROJECT_SECTION_KEY: Final[str] = "flagindex"


class OutputConfig(BaseModel):
    """Configuration for controlling console output."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    color: bool = True
    emoji: bool = True
    format: Literal["text", "json"] = "text"


class Config(BaseModel):
    """Top-level configuration container."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    output: OutputConfig = Field(default_factory=OutputConfig)

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-compatible dictionary of the configuration."""

        return self.model_dump(mode="json")


def _read_toml(path: Path) -> Mapping[str, Any]:
    """Return the decoded TOML table stored at ``path``."""

    try:
        with path.open("rb") as handle:
            return tomllib.load(handle)
    except (tomllib.TOMLDecodeError, UnicodeDecodeError) as exc:
        raise ConfigError(f"{path}: failed to parse TOML") from exc


def _pyproject_section(path: Path) -> Mapping[str, Any] | None:
    """Return the ``[tool.flagindex]`` table of ``path`` when present."""

    document = _read_toml(path)
    tool = document.get(PYPROJECT_TOOL_KEY)
    if not isinstance(tool, Mapping):
        return None
    section = tool.get(PYPROJECT_SECTION_KEY)
    if section is None:
        return None
    if not isinstance(section, Mapping):
        raise ConfigError(f"{path}: [{PYPROJECT_TOOL_KEY}.{PYPROJECT_SECTION_KEY}] must be a table")
    return section


def load_config(root: Path) -> Config:
    """Load configuration for the project rooted at ``root``.

    ``.flagindex.toml`` takes precedence over the ``[tool.flagindex]`` table of
    ``pyproject.toml``; built-in defaults apply when neither exists.

    Args:
        root: Project directory searched for configuration files.

    Returns:
        Config: Validated configuration.

    Raises:
        ConfigError: If a configuration file is malformed or holds invalid values.
    """

    dedicated = root / CONFIG_FILENAME
    pyproject = root / PYPROJECT_FILENAME
    data: Mapping[str, Any] | None = None
    source = "defaults"
    if dedicated.is_file():
        data = _read_toml(dedicated)
        source = str(dedicated)
    elif pyproject.is_file():
        data = _pyproject_section(pyproject)
        source = str(pyproject)
    if data is None:
        return Config()
    try:
        return Config.model_validate(dict(data))
    except ValidationError as exc:
        raise ConfigError(f"{source}: invalid configuration\n{exc}") from exc


__all__ = [
    "CONFIG_FILENAME",
    "Config",
    "OutputConfig",
    "load_config",
]
