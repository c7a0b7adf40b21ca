# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Declarative option manifests loaded from TOML or JSON documents."""

from __future__ import annotations

import json
import logging
import tomllib
from pathlib import Path
from typing import Any, Final

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from .command import CLI, Command
from .errors import ManifestError
from .model_options import OptionKwargs

LOGGER = logging.getLogger(__name__)

TOML_SUFFIXES: Final[frozenset[str]] = frozenset({".toml"})
JSON_SUFFIXES: Final[frozenset[str]] = frozenset({".json"})


class OptionEntry(BaseModel):
    """Single option declaration.

    Entries carrying only ``name`` are registered in auto mode; entries
    carrying both ``short`` and ``long`` are registered verbatim.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str | None = None
    short: str | None = None
    long: str | None = None
    description: str = ""
    kwargs: dict[str, Any] = Field(default_factory=dict)

    @model_validator(mode="after")
    def _check_mode(self) -> OptionEntry:
        explicit = (self.short, self.long)
        if self.name is not None:
            if any(flag is not None for flag in explicit):
                raise ValueError("declare either 'name' or 'short'/'long', not both")
        elif any(flag is None for flag in explicit):
            raise ValueError("declare 'name', or both 'short' and 'long'")
        return self


class CommandEntry(BaseModel):
    """Command declaration holding options and nested subcommands."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str
    description: str = ""
    options: list[OptionEntry] = Field(default_factory=list)
    commands: list[CommandEntry] = Field(default_factory=list)


CommandEntry.model_rebuild()


def load_manifest(path: Path) -> CommandEntry:
    """Load and validate the manifest stored at ``path``.

    Args:
        path: ``.toml`` or ``.json`` manifest file.

    Returns:
        CommandEntry: Validated root command declaration.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        ManifestError: If the document cannot be decoded or fails validation.
    """

    if not path.exists():
        raise FileNotFoundError(path)
    suffix = path.suffix.lower()
    if suffix in TOML_SUFFIXES:
        with path.open("rb") as handle:
            try:
                payload: Any = tomllib.load(handle)
            except (tomllib.TOMLDecodeError, UnicodeDecodeError) as exc:
                raise ManifestError(f"{path}: failed to parse TOML manifest") from exc
    elif suffix in JSON_SUFFIXES:
        with path.open("r", encoding="utf-8") as stream:
            try:
                payload = json.load(stream)
            except (json.JSONDecodeError, UnicodeDecodeError) as exc:
                raise ManifestError(f"{path}: failed to parse JSON manifest") from exc
    else:
        raise ManifestError(f"{path}: unsupported manifest format '{path.suffix}'")
    try:
        entry = CommandEntry.model_validate(payload)
    except ValidationError as exc:
        raise ManifestError(f"{path}: invalid manifest\n{exc}") from exc
    LOGGER.debug("loaded manifest %s for command '%s'", path, entry.name)
    return entry


def build_cli(entry: CommandEntry) -> CLI:
    """Return a sorted :class:`CLI` populated from ``entry``.

    Raises:
        ManifestError: If option metadata is malformed.
        FlagIndexError: If an option cannot be registered.
    """

    cli = CLI(entry.name, entry.description)
    _populate(cli, entry, context=entry.name)
    cli.sort()
    return cli


def _populate(command: Command, entry: CommandEntry, *, context: str) -> None:
    """Register ``entry``'s options on ``command`` and recurse into subcommands."""

    for position, option in enumerate(entry.options):
        kwargs = (
            OptionKwargs.from_mapping(option.kwargs, context=f"{context}.options[{position}].kwargs")
            if option.kwargs
            else None
        )
        if option.name is not None:
            command.create_option(option.name, option.description, kwargs)
        elif option.short is not None and option.long is not None:
            command.add_option(option.short, option.long, option.description, kwargs)
    for child in entry.commands:
        subcommand = command.create_command(child.name, child.description)
        _populate(subcommand, child, context=f"{context}.{child.name}")


def resolve_command(root: Command, path: str | None) -> Command:
    """Return the command reached by following the dotted ``path`` from ``root``.

    Args:
        root: Command the path starts from.
        path: Dotted subcommand path such as ``"remote.add"``; ``None`` or an
            empty string selects ``root``.

    Raises:
        ManifestError: If a path segment names no subcommand.
    """

    command = root
    if not path:
        return command
    for segment in path.split("."):
        child = command.get_command(segment)
        if child is None:
            raise ManifestError(f"command '{command.name}' has no subcommand '{segment}'")
        command = child
    return command


__all__ = [
    "CommandEntry",
    "OptionEntry",
    "build_cli",
    "load_manifest",
    "resolve_command",
]
