# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Successful scan outcome."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import TypeAlias

from .errors import ParseError, ParseFailure
from .values import ParsedValue, PlainValue, to_plain


@dataclass(frozen=True, slots=True)
class ParseResult:
    """Options recognised by a scan plus the positional arguments left over."""

    options: Mapping[str, ParsedValue]
    positional_args: tuple[str, ...]

    def __contains__(self, name: object) -> bool:
        return name in self.options

    def value(self, name: str, default: PlainValue | None = None) -> PlainValue | None:
        """Return the plain value recorded under ``name`` or ``default``.

        Args:
            name: Short or long option name.
            default: Value returned when the option was not supplied.

        Returns:
            PlainValue | None: ``True`` for flags, the raw string for single
            values, an ``int`` count or a list of raw strings for repeatable
            options.
        """

        recorded = self.options.get(name)
        return default if recorded is None else to_plain(recorded)

    def as_dict(self) -> dict[str, PlainValue]:
        """Return every recorded option as a plain dictionary."""

        return {name: to_plain(value) for name, value in self.options.items()}


ParseOutcome: TypeAlias = ParseResult | ParseError


def unwrap(outcome: ParseOutcome) -> ParseResult:
    """Return ``outcome`` when successful, otherwise raise it.

    Args:
        outcome: Value returned by a scan.

    Returns:
        ParseResult: The successful result.

    Raises:
        ParseFailure: If ``outcome`` is a :class:`ParseError`.
    """

    if isinstance(outcome, ParseError):
        raise ParseFailure(outcome)
    return outcome


__all__ = ("ParseOutcome", "ParseResult", "unwrap")
