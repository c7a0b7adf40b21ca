# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Command and CLI wrappers owning one option index each."""

from __future__ import annotations

from collections.abc import Iterator

from .errors import DuplicateCommandError
from .index import OptionIndex
from .model_options import OptionKwargs


class Command:
    """Named command holding its own options and an ordered list of subcommands.

    Every command owns an independent :class:`OptionIndex`; flags registered on
    a parent never collide with flags registered on a subcommand.
    """

    def __init__(self, name: str, description: str = "") -> None:
        """Initialise an empty command.

        Args:
            name: Command name as typed on the command line.
            description: Human-readable summary of the command.
        """

        self.name = name
        self.description = description
        self.index = OptionIndex()
        self._commands: list[Command] = []

    @property
    def commands(self) -> tuple[Command, ...]:
        """Return subcommands in creation order."""

        return tuple(self._commands)

    def add_option(
        self,
        short: str,
        long: str,
        description: str,
        kwargs: OptionKwargs | None = None,
    ) -> Command:
        """Register an option with explicit flags and return ``self`` for chaining.

        Raises:
            DuplicateFlagError: If either flag is already used by this command.
        """

        self.index.register_manual(short, long, description, kwargs)
        return self

    def create_option(
        self,
        name: str,
        description: str,
        kwargs: OptionKwargs | None = None,
    ) -> Command:
        """Register ``--<name>`` with a generated short flag and return ``self``.

        Raises:
            EmptyNameError: If ``name`` is empty.
            DashedNameError: If ``name`` starts with ``-``.
            DuplicateFlagError: If ``--<name>`` is already used by this command.
            ShortFlagExhaustedError: If no free short flag can be generated.
        """

        self.index.register_auto(name, description, kwargs)
        return self

    def create_command(self, name: str, description: str = "") -> Command:
        """Create, attach, and return a new subcommand named ``name``.

        Raises:
            DuplicateCommandError: If a subcommand named ``name`` already exists.
        """

        if self.get_command(name) is not None:
            raise DuplicateCommandError(f"command '{self.name}' already has a subcommand '{name}'")
        command = Command(name, description)
        self._commands.append(command)
        return command

    def get_command(self, name: str) -> Command | None:
        """Return the direct subcommand named ``name`` when present."""

        return next((command for command in self._commands if command.name == name), None)

    def sort(self, *, recursive: bool = True) -> Command:
        """Sort this command's options, and its descendants' when ``recursive``."""

        self.index.sort()
        if recursive:
            for command in self._commands:
                command.sort(recursive=True)
        return self

    def search_options(self, query: str) -> list[str]:
        """Return long flags of this command's options matching ``query``."""

        return self.index.search(query)

    def walk(self, prefix: tuple[str, ...] = ()) -> Iterator[tuple[tuple[str, ...], Command]]:
        """Yield ``(path, command)`` pairs depth-first, starting with ``self``."""

        path = (*prefix, self.name)
        yield path, self
        for command in self._commands:
            yield from command.walk(path)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, options={len(self.index)}, commands={len(self._commands)})"


class CLI(Command):
    """Top-level command representing a whole command-line application."""


__all__ = ["CLI", "Command"]
