# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Custom Typer helpers for consistent, sorted CLI help output."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

import typer
from click.core import Context, Parameter
from click.formatting import HelpFormatter
from typer.core import TyperCommand

from ..types import LONG_PREFIX

HelpRecord = tuple[str, str]


class SortedTyperCommand(TyperCommand):
    """Typer command whose help lists options in long-flag order.

    Options are ordered the way :meth:`flagindex.index.OptionIndex.sort`
    orders an index (code points of the long flag), so ``--help`` output
    reads like a sorted option index.
    """

    def format_options(self, ctx: Context, formatter: HelpFormatter) -> None:
        arguments: list[HelpRecord] = []
        options: list[tuple[str, HelpRecord]] = []
        for param in self.get_params(ctx):
            record = param.get_help_record(ctx)
            if record is None:
                continue
            if param.param_type_name == "argument":
                arguments.append(record)
            else:
                options.append((_long_flag(param), record))
        options.sort(key=lambda item: item[0])
        for title, rows in (("Arguments", arguments), ("Options", [row for _, row in options])):
            if rows:
                with formatter.section(title):
                    formatter.write_dl(rows)


CommandCallback = TypeVar("CommandCallback", bound=Callable[..., Any])


class SortedTyper(typer.Typer):
    """Typer application whose commands default to :class:`SortedTyperCommand`."""

    def command(
        self,
        name: str | None = None,
        *,
        cls: type[TyperCommand] | None = None,
        **kwargs: Any,
    ) -> Callable[[CommandCallback], CommandCallback]:
        """Return a decorator that registers commands using sorted help output."""

        return super().command(name, cls=cls or SortedTyperCommand, **kwargs)


def create_typer(**kwargs: Any) -> SortedTyper:
    """Return a :class:`SortedTyper` configured to emit sorted help listings.

    Rich help rendering bypasses ``format_options``; it is disabled unless the
    caller asks for a markup mode explicitly.
    """

    kwargs.setdefault("rich_markup_mode", None)
    return SortedTyper(**kwargs)


def _long_flag(param: Parameter) -> str:
    """Return the first long flag of ``param``, else its first flag or name."""

    names = [*getattr(param, "opts", ()), *getattr(param, "secondary_opts", ())]
    for name in names:
        if name.startswith(LONG_PREFIX):
            return name
    return names[0] if names else param.name or ""


__all__ = ["SortedTyper", "SortedTyperCommand", "create_typer"]
