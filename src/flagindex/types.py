# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared type aliases and constants for option flags."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Final, TypeAlias

OptionValue: TypeAlias = str | int | float | None
JSONPrimitive: TypeAlias = str | int | float | bool | None
JSONValue: TypeAlias = JSONPrimitive | Sequence["JSONValue"] | Mapping[str, "JSONValue"]

SHORT_PREFIX: Final[str] = "-"
LONG_PREFIX: Final[str] = "--"

__all__ = [
    "JSONPrimitive",
    "JSONValue",
    "LONG_PREFIX",
    "OptionValue",
    "SHORT_PREFIX",
]
