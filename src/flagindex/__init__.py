# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Option registry with collision-free short flags and prefix search."""

from __future__ import annotations

from importlib import metadata

from .command import CLI, Command
from .errors import (
    ConfigError,
    DashedNameError,
    DuplicateCommandError,
    DuplicateFlagError,
    EmptyNameError,
    FlagIndexError,
    ManifestError,
    ShortFlagExhaustedError,
)
from .generator import generate_short
from .index import OptionIndex
from .model_options import OptionKwargs, OptionKwargsBuilder, OptionRecord

try:
    __version__ = metadata.version("flagindex")
except metadata.PackageNotFoundError:  # pragma: no cover - local development fallback
    __version__ = "0.0.0"

__all__ = [
    "CLI",
    "Command",
    "ConfigError",
    "DashedNameError",
    "DuplicateCommandError",
    "DuplicateFlagError",
    "EmptyNameError",
    "FlagIndexError",
    "ManifestError",
    "OptionIndex",
    "OptionKwargs",
    "OptionKwargsBuilder",
    "OptionRecord",
    "ShortFlagExhaustedError",
    "__version__",
    "generate_short",
]
