# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Helpers for validating declarative option mappings."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from .errors import SchemaError
from .types import JSONValue


def optional_string(value: JSONValue | None, *, key: str, context: str) -> str | None:
    """Return ``value`` as an optional string with validation.

    Args:
        value: Raw value extracted from the option mapping.
        key: Attribute name used in error messages.
        context: Human-friendly prefix describing the validation context.

    Returns:
        str | None: ``value`` when present, otherwise ``None``.

    Raises:
        SchemaError: If ``value`` is present but not a string.
    """
    if value is None:
        return None
    if not isinstance(value, str):
        raise SchemaError(f"{context}: expected '{key}' to be a string if present")
    return value


def optional_bool(value: JSONValue | None, *, key: str, context: str, default: bool) -> bool:
    """Return ``value`` coerced to ``bool`` falling back to ``default``.

    Args:
        value: Raw value extracted from the option mapping.
        key: Attribute name used in error messages.
        context: Human-friendly prefix describing the validation context.
        default: Value returned when ``value`` is ``None``.

    Returns:
        bool: Boolean value derived from ``value`` or ``default``.

    Raises:
        SchemaError: If ``value`` is present but not a bool.
    """
    if value is None:
        return default
    if not isinstance(value, bool):
        raise SchemaError(f"{context}: expected '{key}' to be a boolean")
    return value


def expect_mapping(value: JSONValue | None, *, key: str, context: str) -> Mapping[str, JSONValue]:
    """Return ``value`` as a mapping or raise a schema error.

    Args:
        value: Raw value expected to be a mapping.
        key: Attribute name used in error messages.
        context: Human-friendly prefix describing the validation context.

    Returns:
        Mapping[str, JSONValue]: ``value`` narrowed to a mapping.

    Raises:
        SchemaError: If ``value`` is not a mapping.
    """
    if not isinstance(value, Mapping):
        raise SchemaError(f"{context}: expected '{key}' to be an object")
    return value


def expect_sequence(value: JSONValue | None, *, key: str, context: str) -> Sequence[JSONValue]:
    """Return ``value`` as a non-string sequence or raise a schema error.

    Args:
        value: Raw value expected to be an array.
        key: Attribute name used in error messages.
        context: Human-friendly prefix describing the validation context.

    Returns:
        Sequence[JSONValue]: ``value`` narrowed to a sequence.

    Raises:
        SchemaError: If ``value`` is not an array.
    """
    if not isinstance(value, Sequence) or isinstance(value, (str, bytes, bytearray)):
        raise SchemaError(f"{context}: expected '{key}' to be an array")
    return value


__all__ = ["expect_mapping", "expect_sequence", "optional_bool", "optional_string"]
