# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Option record and metadata models shared by indexes and commands."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Final

from .errors import ManifestError
from .types import JSONValue, OptionValue
from .utils import option_value, option_value_array, optional_bool, optional_count

_KWARGS_KEYS: Final[frozenset[str]] = frozenset(
    {"deprecated", "required", "nargs", "default", "flag", "choices"},
)


@dataclass(frozen=True, slots=True)
class OptionKwargs:
    """Extra metadata attached to an option.

    The values are carried for collaborators such as help renderers and value
    parsers; the index never interprets them.
    """

    deprecated: bool = False
    required: bool = False
    nargs: int | None = None
    default: OptionValue = None
    flag: bool | None = None
    choices: tuple[OptionValue, ...] | None = None

    @staticmethod
    def from_mapping(data: Mapping[str, JSONValue], *, context: str) -> OptionKwargs:
        """Create option metadata from decoded manifest data.

        Args:
            data: Mapping describing the option metadata.
            context: Human-readable context used in error messages.

        Returns:
            OptionKwargs: Frozen metadata instance.

        Raises:
            ManifestError: If the mapping holds unknown keys or mistyped values.

        """

        unknown = sorted(set(data) - _KWARGS_KEYS)
        if unknown:
            raise ManifestError(f"{context}: unknown option metadata keys {', '.join(unknown)}")
        flag_raw = data.get("flag")
        return OptionKwargs(
            deprecated=optional_bool(data.get("deprecated"), key="deprecated", context=context, default=False),
            required=optional_bool(data.get("required"), key="required", context=context, default=False),
            nargs=optional_count(data.get("nargs"), key="nargs", context=context),
            default=option_value(data.get("default"), key="default", context=context),
            flag=None if flag_raw is None else optional_bool(flag_raw, key="flag", context=context),
            choices=option_value_array(data.get("choices"), key="choices", context=context),
        )

    def summary(self) -> str:
        """Return a compact, human-readable description of the set fields."""

        parts: list[str] = []
        if self.deprecated:
            parts.append("deprecated")
        if self.required:
            parts.append("required")
        if self.nargs is not None:
            parts.append(f"nargs={self.nargs}")
        if self.default is not None:
            parts.append(f"default={self.default!r}")
        if self.flag is not None:
            parts.append(f"flag={str(self.flag).lower()}")
        if self.choices is not None:
            parts.append("choices=" + "|".join(str(choice) for choice in self.choices))
        return ", ".join(parts)


class OptionKwargsBuilder:
    """Fluent builder assembling :class:`OptionKwargs` step by step."""

    def __init__(self) -> None:
        self._deprecated = False
        self._required = False
        self._nargs: int | None = None
        self._default: OptionValue = None
        self._flag: bool | None = None
        self._choices: tuple[OptionValue, ...] | None = None

    def set_deprecated(self) -> OptionKwargsBuilder:
        self._deprecated = True
        return self

    def set_required(self) -> OptionKwargsBuilder:
        self._required = True
        return self

    def set_nargs(self, nargs: int) -> OptionKwargsBuilder:
        self._nargs = nargs
        return self

    def set_default(self, default: OptionValue) -> OptionKwargsBuilder:
        self._default = default
        return self

    def set_flag(self, flag: bool) -> OptionKwargsBuilder:
        self._flag = flag
        return self

    def set_choices(self, choices: Iterable[OptionValue]) -> OptionKwargsBuilder:
        self._choices = tuple(choices)
        return self

    def build(self) -> OptionKwargs:
        """Return a frozen snapshot of the builder's current state."""

        return OptionKwargs(
            deprecated=self._deprecated,
            required=self._required,
            nargs=self._nargs,
            default=self._default,
            flag=self._flag,
            choices=self._choices,
        )


@dataclass(frozen=True, slots=True)
class OptionRecord:
    """Registered command-line option.

    Identity for collision purposes is the ``(short_flag, long_flag)`` pair;
    no two records in one index share either field.
    """

    short_flag: str
    long_flag: str
    description: str
    kwargs: OptionKwargs | None = None

    @property
    def flags(self) -> tuple[str, str]:
        """Return the ``(short_flag, long_flag)`` pair."""

        return self.short_flag, self.long_flag


__all__: Final[tuple[str, ...]] = (
    "OptionKwargs",
    "OptionKwargsBuilder",
    "OptionRecord",
)
