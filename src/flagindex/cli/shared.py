# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared utilities for CLI commands (logging, errors, state)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import typer

from ..config import Config, OutputConfig
from ..logging import fail as core_fail
from ..logging import info as core_info
from ..logging import warn as core_warn


class CLIError(RuntimeError):
    """Error raised when a CLI command fails and should exit with a status code."""

    def __init__(self, message: str, *, exit_code: int = 1) -> None:
        """Initialise the error with a message and exit code.

        Args:
            message: Human-readable error message shown to the user.
            exit_code: Exit status associated with the failure.
        """

        super().__init__(message)
        self.exit_code = exit_code


@dataclass(slots=True)
class CLILogger:
    """Adapter around project logging helpers bound to one output configuration."""

    output: OutputConfig

    def fail(self, message: str) -> None:
        core_fail(message, self.output)

    def warn(self, message: str) -> None:
        core_warn(message, self.output)

    def info(self, message: str) -> None:
        core_info(message, self.output)

    def echo(self, message: str) -> None:
        """Write ``message`` to stdout using Typer's echo helper."""

        typer.echo(message)


@dataclass(slots=True)
class CLIState:
    """Options resolved by the application callback and shared with commands."""

    root: Path
    config: Config = field(default_factory=Config)

    @property
    def logger(self) -> CLILogger:
        """Return a logger honouring the configured colour and emoji settings."""

        return CLILogger(self.config.output)

    @property
    def json_output(self) -> bool:
        """Return ``True`` when commands should print JSON payloads."""

        return self.config.output.format == "json"


__all__ = ["CLIError", "CLILogger", "CLIState"]
