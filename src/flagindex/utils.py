# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Utility helpers for validating decoded manifest values."""

from __future__ import annotations

from collections.abc import Sequence

from .errors import ManifestError
from .types import JSONValue, OptionValue


def optional_bool(
    value: JSONValue | None,
    *,
    key: str,
    context: str,
    default: bool | None = None,
) -> bool:
    """Return ``value`` coerced to ``bool`` with an optional default.

    Args:
        value: Raw value extracted from the manifest payload.
        key: Attribute name used in error messages.
        context: Human-friendly prefix describing the validation context.
        default: Value returned when ``value`` is ``None``.

    Returns:
        bool: Boolean value derived from ``value`` or ``default``.

    Raises:
        ManifestError: If ``value`` is not ``None`` and not a bool,
            or ``value`` is ``None`` and no ``default`` was provided.
    """
    if value is None:
        if default is None:
            raise ManifestError(f"{context}: expected '{key}' to be a boolean")
        return default
    if isinstance(value, bool):
        return value
    raise ManifestError(f"{context}: expected '{key}' to be a boolean")


def optional_count(value: JSONValue | None, *, key: str, context: str) -> int | None:
    """Return ``value`` as an optional non-negative integer.

    Args:
        value: Raw value extracted from the manifest payload.
        key: Attribute name used in error messages.
        context: Human-friendly prefix describing the validation context.

    Returns:
        int | None: Validated integer, or ``None`` when absent.

    Raises:
        ManifestError: If ``value`` is present but not a non-negative integer.
    """
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ManifestError(f"{context}: expected '{key}' to be a non-negative integer")
    return value


def option_value(value: JSONValue | None, *, key: str, context: str) -> OptionValue:
    """Return ``value`` when it is a text, integer, or float scalar.

    Raises:
        ManifestError: If ``value`` is a boolean or a container.
    """
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (str, int, float)):
        raise ManifestError(f"{context}: expected '{key}' to be a string, integer, or float")
    return value


def option_value_array(
    value: JSONValue | None,
    *,
    key: str,
    context: str,
) -> tuple[OptionValue, ...] | None:
    """Return ``value`` as a tuple of scalar option values.

    Args:
        value: Raw value extracted from the manifest payload.
        key: Attribute name used in error messages.
        context: Human-friendly prefix describing the validation context.

    Returns:
        tuple[OptionValue, ...] | None: Validated values, or ``None`` when absent.

    Raises:
        ManifestError: If ``value`` is not an array of scalars.
    """
    if value is None:
        return None
    if not isinstance(value, Sequence) or isinstance(value, (str, bytes, bytearray)):
        raise ManifestError(f"{context}: expected '{key}' to be an array")
    return tuple(
        option_value(item, key=f"{key}[{index}]", context=context) for index, item in enumerate(value)
    )


__all__ = [
    "option_value",
    "option_value_array",
    "optional_bool",
    "optional_count",
]
