# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Immutable option schema with a name lookup table."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping, Sequence
from dataclasses import dataclass
from types import MappingProxyType

from .errors import DuplicateNameError
from .model_options import OptionSpec
from .types import JSONValue
from .utils import expect_mapping

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class OptionSchema:
    """Ordered option descriptors plus a lookup keyed by every declared name.

    An option declaring both a short and a long name is reachable through
    two keys that share the same :class:`OptionSpec` instance.
    """

    specs: tuple[OptionSpec, ...]
    lookup: Mapping[str, OptionSpec]

    def resolve(self, name: str) -> OptionSpec | None:
        """Return the option registered under ``name`` when present."""

        return self.lookup.get(name)

    def __iter__(self) -> Iterator[OptionSpec]:
        return iter(self.specs)

    def __len__(self) -> int:
        return len(self.specs)

    @staticmethod
    def from_mappings(entries: Sequence[JSONValue], *, context: str = "options") -> OptionSchema:
        """Build a schema from declarative option mappings.

        Args:
            entries: Sequence of mappings accepted by :meth:`OptionSpec.from_mapping`.
            context: Human-readable context used in error messages.

        Returns:
            OptionSchema: Schema built from the decoded option specs.

        Raises:
            SchemaError: If any entry is malformed or names collide.
        """

        specs: list[OptionSpec] = []
        for index, entry in enumerate(entries):
            entry_context = f"{context}[{index}]"
            mapping = expect_mapping(entry, key=entry_context, context=context)
            specs.append(OptionSpec.from_mapping(mapping, context=entry_context))
        return build_schema(specs)


def build_schema(specs: Iterable[OptionSpec]) -> OptionSchema:
    """Return an immutable schema registering every spec under each of its names.

    Args:
        specs: Option descriptors in display order.

    Returns:
        OptionSchema: Schema preserving ``specs`` order.

    Raises:
        DuplicateNameError: If a short or long name is declared twice.
    """

    ordered = tuple(specs)
    lookup: dict[str, OptionSpec] = {}
    for spec in ordered:
        for name in spec.names:
            if name in lookup:
                raise DuplicateNameError(name)
            lookup[name] = spec
    LOGGER.debug("built option schema with %d options and %d names", len(ordered), len(lookup))
    return OptionSchema(specs=ordered, lookup=MappingProxyType(lookup))


__all__ = ("OptionSchema", "build_schema")
