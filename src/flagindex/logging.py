# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""User-facing output helpers driven by :class:`~flagindex.config.OutputConfig`."""

from __future__ import annotations

import sys
from functools import lru_cache

from rich.console import Console
from rich.text import Text

from .config import OutputConfig

_INFO_SYMBOL = "ℹ️ "
_WARN_SYMBOL = "⚠️ "
_FAIL_SYMBOL = "❌ "


def _stdout_is_tty() -> bool:
    try:
        return sys.stdout.isatty()
    except (AttributeError, ValueError):
        return False


@lru_cache(maxsize=8)
def _build_console(styled: bool, emoji: bool) -> Console:
    # file is left unset so the console follows sys.stdout when it is swapped.
    return Console(
        color_system="auto" if styled else None,
        force_terminal=styled,
        no_color=not styled,
        emoji=emoji,
        soft_wrap=True,
    )


def console_for(output: OutputConfig) -> Console:
    """Return the shared console rendering with ``output``'s preferences.

    Colour is only emitted when it is enabled *and* stdout is a terminal, so
    redirected output stays free of escape sequences.
    """

    return _build_console(output.color and _stdout_is_tty(), output.emoji)


def _emit(output: OutputConfig, symbol: str, msg: str, style: str) -> None:
    prefix = symbol if output.emoji else ""
    console_for(output).print(Text(f"{prefix}{msg}", style=style))


def info(msg: str, output: OutputConfig) -> None:
    """Emit an informational message."""

    _emit(output, _INFO_SYMBOL, msg, "cyan")


def warn(msg: str, output: OutputConfig) -> None:
    _emit(output, _WARN_SYMBOL, msg, "yellow")


def fail(msg: str, output: OutputConfig) -> None:
    _emit(output, _FAIL_SYMBOL, msg, "bold red")


__all__ = ["console_for", "fail", "info", "warn"]
