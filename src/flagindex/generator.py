# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Collision-avoiding short-flag generation.

Short flags are derived from a long option name by probing two deterministic
candidate sequences against the flags already in use:

1. ``-`` followed by successively longer prefixes of the name
   (``-a``, ``-ap``, ``-app`` ...).
2. When every prefix is taken, ``-`` followed by every second character of
   the name (``-a``, ``-ap``, ``-apr`` for ``"apricot"`` ...).

The first candidate absent from the used set wins. The function never mutates
the used set; the caller claims the returned flag.
"""

from __future__ import annotations

from collections.abc import Collection
from typing import Final

from .errors import DashedNameError, EmptyNameError, ShortFlagExhaustedError
from .types import SHORT_PREFIX

_PROBE_STRIDES: Final[tuple[int, ...]] = (1, 2)


def _probe(name: str, used: Collection[str], stride: int) -> str | None:
    """Return the first candidate built with ``stride`` that is not in ``used``."""

    candidate = SHORT_PREFIX
    for char in name[::stride]:
        candidate += char
        if candidate not in used:
            return candidate
    return None


def check_name(name: str) -> None:
    """Reject names that cannot become a ``--<name>`` long flag."""

    if not name:
        raise EmptyNameError()
    if name.startswith(SHORT_PREFIX):
        raise DashedNameError(name)


def generate_short(name: str, used: Collection[str]) -> str:
    """Return a short flag for ``name`` that does not collide with ``used``.

    Args:
        name: Option name the flag is derived from (without leading dashes).
        used: Flags already claimed; only read.

    Returns:
        str: Short flag such as ``-v`` or ``-ve``.

    Raises:
        EmptyNameError: If ``name`` is empty.
        DashedNameError: If ``name`` starts with ``-``.
        ShortFlagExhaustedError: If neither probe sequence yields a free flag.
    """

    check_name(name)
    for stride in _PROBE_STRIDES:
        candidate = _probe(name, used, stride)
        if candidate is not None:
            return candidate
    raise ShortFlagExhaustedError(name)


__all__ = ["check_name", "generate_short"]
