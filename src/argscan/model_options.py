# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Option descriptor model shared by the schema, scanner and help renderer."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Final

from .errors import InvalidOptionNameError, MissingNameError, SchemaError
from .types import JSONValue, ValueKind
from .utils import optional_bool, optional_string

_KNOWN_KEYS: Final[frozenset[str]] = frozenset({"short", "long", "value", "vhelp", "help", "dup"})


@dataclass(frozen=True, slots=True)
class OptionSpec:
    """Declarative command-line option.

    An option is addressed by a one-letter ``short`` name (``-s``), a
    multi-character ``long`` name (``--long``) or both. When ``value_kind``
    is set the option takes a value, otherwise it is a flag.
    """

    short: str | None = None
    long: str | None = None
    value_kind: ValueKind | None = None
    allow_duplicates: bool = False
    help_text: str = ""
    value_help_hint: str | None = None

    def __post_init__(self) -> None:
        """Reject descriptors the scanner could never match."""

        if self.short is None and self.long is None:
            raise MissingNameError(f"option declares no name: {self!r}")
        if self.short is not None and (len(self.short) != 1 or self.short == "-"):
            raise InvalidOptionNameError(f"short option name must be one character other than '-': {self.short!r}")
        if self.long is not None and (len(self.long) < 2 or "=" in self.long or self.long.startswith("-")):
            raise InvalidOptionNameError(
                f"long option name must have two or more characters, no '=' and no leading '-': {self.long!r}",
            )

    @property
    def takes_value(self) -> bool:
        """Return ``True`` when the option consumes a value."""

        return self.value_kind is not None

    @property
    def names(self) -> tuple[str, ...]:
        """Return the declared names, short name first."""

        return tuple(name for name in (self.short, self.long) if name is not None)

    @property
    def value_hint(self) -> str:
        """Return the placeholder displayed for the option value in help output."""

        if self.value_help_hint is not None:
            return self.value_help_hint
        return self.value_kind.value if self.value_kind is not None else ""

    @staticmethod
    def from_mapping(data: Mapping[str, JSONValue], *, context: str) -> OptionSpec:
        """Create an ``OptionSpec`` from a declarative mapping.

        The mapping uses the compact keys ``short``, ``long``, ``value``
        (value kind name), ``vhelp`` (value hint), ``help`` and ``dup``.

        Args:
            data: Mapping describing a single option.
            context: Human-readable context used in error messages.

        Returns:
            OptionSpec: Frozen option descriptor.

        Raises:
            SchemaError: If the mapping is malformed or declares no name.
        """

        unknown = sorted(set(data) - _KNOWN_KEYS)
        if unknown:
            raise SchemaError(f"{context}: unknown option keys {', '.join(unknown)}")
        raw_kind = optional_string(data.get("value"), key="value", context=context)
        return OptionSpec(
            short=optional_string(data.get("short"), key="short", context=context),
            long=optional_string(data.get("long"), key="long", context=context),
            value_kind=ValueKind.from_raw(raw_kind, context=context) if raw_kind is not None else None,
            allow_duplicates=optional_bool(data.get("dup"), key="dup", context=context, default=False),
            help_text=optional_string(data.get("help"), key="help", context=context) or "",
            value_help_hint=optional_string(data.get("vhelp"), key="vhelp", context=context),
        )


__all__ = ("OptionSpec",)
