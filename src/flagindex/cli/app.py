# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point for inspecting option manifests."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

import typer

from ..command import Command
from ..config import OutputConfig, load_config
from ..errors import FlagIndexError
from ..generator import generate_short
from ..logging import console_for
from ..manifest import build_cli, load_manifest, resolve_command
from .rendering import build_options_table, matches_json, options_payload
from .shared import CLIError, CLILogger, CLIState
from .typer_ext import create_typer

PACKAGE_LOGGER = logging.getLogger("flagindex")

app = create_typer(
    help="Inspect option manifests: list options, resolve partial flags, preview short flags.",
    no_args_is_help=True,
)


def _ensure_verbose_logger() -> None:
    """Configure the package logger to stream debug messages to stderr."""

    if getattr(PACKAGE_LOGGER, "_flagindex_verbose_configured", False):
        return
    handler = logging.StreamHandler(stream=sys.stderr)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    PACKAGE_LOGGER.addHandler(handler)
    PACKAGE_LOGGER.setLevel(logging.DEBUG)
    PACKAGE_LOGGER.propagate = False
    setattr(PACKAGE_LOGGER, "_flagindex_verbose_configured", True)


@app.callback()
def main(
    ctx: typer.Context,
    root: Path | None = typer.Option(None, "--root", "-r", help="Project root searched for configuration."),
    no_color: bool = typer.Option(False, "--no-color", help="Disable colour output."),
    no_emoji: bool = typer.Option(False, "--no-emoji", help="Disable emoji output."),
    json_output: bool = typer.Option(False, "--json", help="Emit JSON instead of text."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Stream debug logs to stderr."),
) -> None:
    """Resolve configuration and share it with the selected command."""

    if verbose:
        _ensure_verbose_logger()
    project_root = root or Path.cwd()
    try:
        config = load_config(project_root)
    except FlagIndexError as exc:
        CLILogger(OutputConfig(color=not no_color, emoji=not no_emoji)).fail(str(exc))
        raise typer.Exit(code=1) from exc
    if no_color:
        config.output.color = False
    if no_emoji:
        config.output.emoji = False
    if json_output:
        config.output.format = "json"
    ctx.obj = CLIState(root=project_root, config=config)


def _state(ctx: typer.Context) -> CLIState:
    state = ctx.obj
    if not isinstance(state, CLIState):
        state = CLIState(root=Path.cwd())
        ctx.obj = state
    return state


def _load_command(manifest: Path, path: str | None) -> Command:
    """Return the (sub)command at ``path`` from the manifest stored at ``manifest``.

    Raises:
        CLIError: If the manifest is missing, malformed, or cannot be registered.
    """

    try:
        return resolve_command(build_cli(load_manifest(manifest)), path)
    except FileNotFoundError as exc:
        raise CLIError(f"manifest not found: {manifest}") from exc
    except FlagIndexError as exc:
        raise CLIError(str(exc)) from exc


@app.command("search", help="Print long flags matching QUERY (pass QUERY after `--`).")
def search_command(
    ctx: typer.Context,
    manifest: Path = typer.Argument(..., help="TOML or JSON option manifest."),
    query: str = typer.Argument(..., help="Partial flag such as --ver or -v."),
    command: str | None = typer.Option(None, "--command", "-c", help="Dotted subcommand path."),
) -> None:
    """Resolve ``query`` against the selected command's options."""

    state = _state(ctx)
    logger = state.logger
    try:
        target = _load_command(manifest, command)
    except CLIError as exc:
        logger.fail(str(exc))
        raise typer.Exit(code=exc.exit_code) from exc

    matches = target.search_options(query)
    if state.json_output:
        logger.echo(matches_json(query, matches))
        return
    if not matches:
        logger.warn(f"no options of '{target.name}' match '{query}'")
        return
    for long_flag in matches:
        logger.echo(long_flag)


@app.command("list", help="Show the options declared in a manifest.")
def list_command(
    ctx: typer.Context,
    manifest: Path = typer.Argument(..., help="TOML or JSON option manifest."),
    command: str | None = typer.Option(None, "--command", "-c", help="Dotted subcommand path."),
    recursive: bool = typer.Option(False, "--recursive", "-R", help="Include every nested subcommand."),
) -> None:
    """Render option tables for the selected command."""

    state = _state(ctx)
    logger = state.logger
    try:
        target = _load_command(manifest, command)
    except CLIError as exc:
        logger.fail(str(exc))
        raise typer.Exit(code=exc.exit_code) from exc

    commands = list(target.walk()) if recursive else [((target.name,), target)]
    if state.json_output:
        payload = [{"command": ".".join(path), "options": options_payload(item)} for path, item in commands]
        logger.echo(json.dumps(payload, indent=2))
        return
    console = console_for(state.config.output)
    for path, item in commands:
        dotted = ".".join(path)
        if not item.index:
            logger.info(f"'{dotted}' declares no options")
            continue
        console.print(build_options_table(item, title=dotted))


@app.command("short", help="Preview the short flag generated for NAME.")
def short_command(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Option name without leading dashes."),
    used: list[str] | None = typer.Option(None, "--used", "-u", help="Flag already in use (repeatable)."),
) -> None:
    """Print the short flag ``NAME`` would receive given the ``--used`` flags."""

    state = _state(ctx)
    logger = state.logger
    try:
        flag = generate_short(name, frozenset(used or ()))
    except FlagIndexError as exc:
        logger.fail(str(exc))
        raise typer.Exit(code=1) from exc
    if state.json_output:
        logger.echo(json.dumps({"name": name, "short": flag}))
        return
    logger.echo(flag)


__all__ = ["app"]
