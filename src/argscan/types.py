# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Value kinds accepted by value-taking options and their validators."""

from __future__ import annotations

import re
from collections.abc import Callable, Mapping, Sequence
from enum import Enum
from types import MappingProxyType
from typing import Final, TypeAlias

from .errors import SchemaError

JSONPrimitive: TypeAlias = str | int | float | bool | None
JSONValue: TypeAlias = JSONPrimitive | Sequence["JSONValue"] | Mapping[str, "JSONValue"]

ValueValidator: TypeAlias = Callable[[str], bool]


class ValueKind(str, Enum):
    """Enumerate the value kinds an option may declare."""

    INT = "int"
    STRING = "string"

    @classmethod
    def from_raw(cls, raw: str, *, context: str) -> ValueKind:
        """Return the kind named by ``raw``.

        Args:
            raw: Kind name sourced from a declarative option mapping.
            context: Human-readable context used in error messages.

        Returns:
            ValueKind: Matching enum member.

        Raises:
            SchemaError: If ``raw`` does not name a known kind.
        """

        normalized = raw.strip().lower()
        try:
            return cls(_KIND_ALIASES.get(normalized, normalized))
        except ValueError as exc:
            raise SchemaError(f"{context}: unknown value kind '{raw}'") from exc


_KIND_ALIASES: Final[dict[str, str]] = {
    "integer": "int",
    "str": "string",
}

# Signed integer or decimal numeral with an optional exponent.
_NUMERIC_RE: Final[re.Pattern[str]] = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


def _is_numeric(raw: str) -> bool:
    return _NUMERIC_RE.fullmatch(raw) is not None


def _accept_any(raw: str) -> bool:
    del raw
    return True


VALIDATORS: Final[Mapping[ValueKind, ValueValidator]] = MappingProxyType(
    {
        ValueKind.INT: _is_numeric,
        ValueKind.STRING: _accept_any,
    },
)


def validate_value(raw: str, kind: ValueKind) -> bool:
    """Return ``True`` when ``raw`` is acceptable for ``kind``.

    Args:
        raw: Raw token text supplied on the command line.
        kind: Value kind declared by the option.

    Returns:
        bool: ``True`` when the validator registered for ``kind`` accepts ``raw``.
    """

    return VALIDATORS[kind](raw)


__all__ = (
    "JSONPrimitive",
    "JSONValue",
    "VALIDATORS",
    "ValueKind",
    "ValueValidator",
    "validate_value",
)
