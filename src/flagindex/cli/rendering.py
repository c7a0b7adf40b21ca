# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Rendering helpers for option listings and search results."""

from __future__ import annotations

import json
from collections.abc import Sequence

from rich import box
from rich.table import Table

from ..command import Command
from ..model_options import OptionRecord


def build_options_table(command: Command, *, title: str | None = None) -> Table:
    """Return a rich table describing every option registered on ``command``.

    Args:
        command: Command whose option index is rendered.
        title: Optional table title; defaults to the command name.

    Returns:
        Table: Rich table instance ready for rendering.
    """

    table = Table(title=title or command.name, box=box.SIMPLE, expand=True)
    table.add_column("Short", style="bold", no_wrap=True)
    table.add_column("Long", style="bold cyan", no_wrap=True)
    table.add_column("Description", overflow="fold")
    table.add_column("Metadata", overflow="fold")
    for record in command.index.options:
        table.add_row(record.short_flag, record.long_flag, record.description or "-", _metadata(record) or "-")
    return table


def options_payload(command: Command) -> list[dict[str, object]]:
    """Return a JSON-compatible description of ``command``'s options."""

    payload: list[dict[str, object]] = []
    for record in command.index.options:
        payload.append(
            {
                "short": record.short_flag,
                "long": record.long_flag,
                "description": record.description,
                "metadata": _metadata(record) or None,
            },
        )
    return payload


def matches_json(query: str, matches: Sequence[str]) -> str:
    """Return search results serialised as a JSON document."""

    return json.dumps({"query": query, "matches": list(matches)}, indent=2)


def _metadata(record: OptionRecord) -> str:
    return record.kwargs.summary() if record.kwargs is not None else ""


__all__ = ["build_options_table", "matches_json", "options_payload"]
