# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Custom exceptions raised by option registration and lookup."""

from __future__ import annotations

from collections.abc import Iterable


class FlagIndexError(Exception):
    """Base class for every error raised by :mod:`flagindex`."""


class EmptyNameError(FlagIndexError, ValueError):
    """Raised when a short flag is requested for an empty option name."""

    def __init__(self) -> None:
        """Create the error with a fixed message."""

        super().__init__("option name must not be empty")


class DashedNameError(FlagIndexError, ValueError):
    """Raised when an option name already carries a leading dash.

    Attributes:
        name: Offending option name.
    """

    def __init__(self, name: str) -> None:
        super().__init__(f"option name must not start with '-': '{name}'")
        self.name = name


class ShortFlagExhaustedError(FlagIndexError):
    """Raised when no collision-free short flag can be derived from a name.

    Attributes:
        name: Option name whose candidates were all in use.
    """

    def __init__(self, name: str) -> None:
        """Create the error for ``name``.

        Args:
            name: Option name whose short-flag candidates were exhausted.
        """

        super().__init__(f"no free short flag derivable from '{name}'; supply one manually")
        self.name = name


class DuplicateFlagError(FlagIndexError):
    """Raised when a flag collides with one already registered.

    Attributes:
        flags: Colliding flags in the order they were checked.
    """

    def __init__(self, flags: Iterable[str]) -> None:
        """Create the error for the colliding ``flags``.

        Args:
            flags: Flags already claimed by another option.
        """

        self.flags: tuple[str, ...] = tuple(flags)
        joined = ", ".join(f"'{flag}'" for flag in self.flags)
        super().__init__(f"short and/or long options already exist: {joined}")


class DuplicateCommandError(FlagIndexError):
    """Raised when a subcommand name is registered twice under one parent."""


class ManifestError(FlagIndexError):
    """Raised when an option manifest cannot be parsed or validated."""


class ConfigError(FlagIndexError):
    """Raised when configuration input is invalid."""


__all__ = (
    "ConfigError",
    "DashedNameError",
    "DuplicateCommandError",
    "DuplicateFlagError",
    "EmptyNameError",
    "FlagIndexError",
    "ManifestError",
    "ShortFlagExhaustedError",
)
