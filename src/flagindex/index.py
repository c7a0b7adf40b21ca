# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Option index providing collision-checked registration and prefix search."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from operator import attrgetter

from .errors import DuplicateFlagError
from .generator import check_name, generate_short
from .model_options import OptionKwargs, OptionRecord
from .search import NOT_FOUND, bisect_prefix
from .types import LONG_PREFIX, SHORT_PREFIX

LOGGER = logging.getLogger(__name__)

_by_long_flag = attrgetter("long_flag")
_by_short_flag = attrgetter("short_flag")


class OptionIndex(Mapping[str, OptionRecord]):
    """Registry of command-line options for a single command.

    ``OptionIndex`` behaves like a read-only mapping whose keys are long flags
    and whose values are :class:`OptionRecord` instances, iterated in
    collection order. Registration appends in insertion order; callers invoke
    :meth:`sort` once registration is complete and before issuing
    :meth:`search` queries. Search results over an unsorted index are
    unspecified.
    """

    def __init__(self) -> None:
        """Initialise an empty option index."""

        self._options: list[OptionRecord] = []
        self._by_long: dict[str, OptionRecord] = {}
        self._used: set[str] = set()

    @property
    def options(self) -> tuple[OptionRecord, ...]:
        """Return the option collection in its current order."""

        return tuple(self._options)

    @property
    def used_flags(self) -> frozenset[str]:
        """Return every short and long flag claimed by registered options."""

        return frozenset(self._used)

    def register(self, record: OptionRecord) -> OptionRecord:
        """Insert a pre-built ``record`` after checking both of its flags.

        Args:
            record: Option record to insert.

        Returns:
            OptionRecord: The inserted record.

        Raises:
            DuplicateFlagError: If either flag is already in use, or the short
                and long flags are identical.
        """

        collisions = [flag for flag in record.flags if flag in self._used]
        if not collisions and record.short_flag == record.long_flag:
            collisions = [record.short_flag]
        if collisions:
            raise DuplicateFlagError(collisions)
        self._claim(record)
        return record

    def register_manual(
        self,
        short: str,
        long: str,
        description: str,
        kwargs: OptionKwargs | None = None,
    ) -> OptionRecord:
        """Register an option with caller-supplied short and long flags.

        Args:
            short: Short flag, e.g. ``-v``.
            long: Long flag, e.g. ``--verbose``.
            description: Human-readable description of the option.
            kwargs: Optional option metadata.

        Returns:
            OptionRecord: The registered record.

        Raises:
            DuplicateFlagError: If ``short`` or ``long`` is already in use.
        """

        return self.register(OptionRecord(short, long, description, kwargs))

    def register_auto(
        self,
        name: str,
        description: str,
        kwargs: OptionKwargs | None = None,
    ) -> OptionRecord:
        """Register ``--<name>`` with a generated, collision-free short flag.

        Args:
            name: Option name without leading dashes.
            description: Human-readable description of the option.
            kwargs: Optional option metadata.

        Returns:
            OptionRecord: The registered record.

        Raises:
            EmptyNameError: If ``name`` is empty.
            DashedNameError: If ``name`` starts with ``-``.
            DuplicateFlagError: If ``--<name>`` is already in use.
            ShortFlagExhaustedError: If no free short flag can be generated.
        """

        check_name(name)
        long = f"{LONG_PREFIX}{name}"
        if long in self._used:
            raise DuplicateFlagError([long])
        short = generate_short(name, self._used)
        record = OptionRecord(short, long, description, kwargs)
        self._claim(record)
        return record

    def sort(self) -> None:
        """Order the collection ascending by long flag."""

        self._options.sort(key=_by_long_flag)
        LOGGER.debug("sorted %d options by long flag", len(self._options))

    def search(self, query: str) -> list[str]:
        """Return long flags of every option whose flag starts with ``query``.

        Queries beginning with ``--`` match long flags; queries beginning with a
        single ``-`` match short flags. Anything else matches nothing. Results
        are always long flags in collection order.

        Args:
            query: Partial flag typed by the user.

        Returns:
            list[str]: Matching long flags, empty when nothing matches.
        """

        if query.startswith(LONG_PREFIX):
            key = _by_long_flag
        elif query.startswith(SHORT_PREFIX):
            key = _by_short_flag
        else:
            return []
        left = bisect_prefix(self._options, query, key=key)
        right = bisect_prefix(self._options, query, key=key, right=True)
        if left == NOT_FOUND or right == NOT_FOUND:
            return []
        return [record.long_flag for record in self._options[left : right + 1]]

    def find(self, flag: str) -> OptionRecord | None:
        """Return the option registered under the exact short or long ``flag``."""

        if flag in self._by_long:
            return self._by_long[flag]
        return next((record for record in self._options if record.short_flag == flag), None)

    def __len__(self) -> int:
        return len(self._options)

    def __iter__(self) -> Iterator[str]:
        return iter([record.long_flag for record in self._options])

    def __getitem__(self, long_flag: str) -> OptionRecord:
        return self._by_long[long_flag]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({[record.flags for record in self._options]!r})"

    def _claim(self, record: OptionRecord) -> None:
        """Record ``record``'s flags as used and append it to the collection."""

        self._used.update(record.flags)
        self._by_long[record.long_flag] = record
        self._options.append(record)
        LOGGER.debug("registered option %s/%s", record.short_flag, record.long_flag)


__all__ = ["OptionIndex"]
