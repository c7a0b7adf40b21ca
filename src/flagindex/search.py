# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Binary search helpers bounding prefix matches in sorted sequences."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Final, TypeVar

ItemT = TypeVar("ItemT")

NOT_FOUND: Final[int] = -1


def bisect_prefix(
    items: Sequence[ItemT],
    prefix: str,
    *,
    key: Callable[[ItemT], str],
    right: bool = False,
) -> int:
    """Return the outermost index whose key starts with ``prefix``.

    ``items`` must be sorted ascending by ``key``. Entries sharing a prefix are
    contiguous in such an ordering, so a left search and a right search bound
    every match.

    Args:
        items: Sequence sorted ascending by ``key``.
        prefix: Prefix each matching key must start with.
        key: Callable extracting the comparison string from an item.
        right: Return the highest matching index instead of the lowest.

    Returns:
        int: Matching index, or :data:`NOT_FOUND` when no key matches.
    """

    low = 0
    high = len(items) - 1
    found = NOT_FOUND
    while low <= high:
        mid = (low + high) // 2
        item_key = key(items[mid])
        if item_key.startswith(prefix):
            found = mid
            if right:
                low = mid + 1
            else:
                high = mid - 1
        elif item_key < prefix:
            low = mid + 1
        else:
            high = mid - 1
    return found


__all__ = ["NOT_FOUND", "bisect_prefix"]
