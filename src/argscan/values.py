# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Recorded option values and the duplicate accumulation policy."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, TypeAlias

from .model_options import OptionSpec


@dataclass(frozen=True, slots=True)
class FlagValue:
    """Flag option seen at least once."""

    value: Literal[True] = True


@dataclass(frozen=True, slots=True)
class ScalarValue:
    """Most recent raw value of a value-taking option."""

    value: str


@dataclass(frozen=True, slots=True)
class CountValue:
    """Number of occurrences of a repeatable flag."""

    value: int


@dataclass(frozen=True, slots=True)
class ListValue:
    """Raw values of a repeatable value-taking option in command-line order."""

    value: tuple[str, ...]


ParsedValue: TypeAlias = FlagValue | ScalarValue | CountValue | ListValue
PlainValue: TypeAlias = bool | str | int | list[str]


def accumulate(previous: ParsedValue | None, raw: str | None, spec: OptionSpec) -> ParsedValue:
    """Return the value recorded after one more occurrence of ``spec``.

    Args:
        previous: Value already recorded under the same key, if any.
        raw: Raw value for value-taking options, ``None`` for flags.
        spec: Option whose occurrence is being recorded.

    Returns:
        ParsedValue: Replacement value for the key.
    """

    if not spec.allow_duplicates:
        return FlagValue() if raw is None else ScalarValue(raw)
    if raw is None:
        count = previous.value if isinstance(previous, CountValue) else 0
        return CountValue(count + 1)
    values = previous.value if isinstance(previous, ListValue) else ()
    return ListValue((*values, raw))


def to_plain(value: ParsedValue) -> PlainValue:
    """Return ``value`` as a plain Python object."""

    if isinstance(value, ListValue):
        return list(value.value)
    return value.value


__all__ = (
    "CountValue",
    "FlagValue",
    "ListValue",
    "ParsedValue",
    "PlainValue",
    "ScalarValue",
    "accumulate",
    "to_plain",
)
