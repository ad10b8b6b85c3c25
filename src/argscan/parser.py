# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Parser facade binding a schema to its error-handling configuration."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from .config import ParserConfig
from .errors import ParseError
from .help import render_help
from .model_options import OptionSpec
from .reporting import exit_with_error
from .result import ParseOutcome, ParseResult
from .scanner import scan
from .schema import OptionSchema, build_schema
from .types import JSONValue


class ArgParser:
    """Parse argument vectors against a fixed option schema.

    Example:
        >>> parser = ArgParser([OptionSpec(short="s"), OptionSpec(short="o", long="option", value_kind=ValueKind.INT)])
        >>> parser.parse("-s --option=100 foo.txt").as_dict()
        {'s': True, 'o': '100', 'option': '100'}
    """

    def __init__(
        self,
        options: OptionSchema | Iterable[OptionSpec],
        config: ParserConfig | None = None,
    ) -> None:
        """Build the parser, constructing a schema when given bare specs.

        Args:
            options: Prebuilt schema or option descriptors in display order.
            config: Error-handling configuration; defaults to returning errors.

        Raises:
            SchemaError: If ``options`` cannot form a valid schema.
        """

        self.schema = options if isinstance(options, OptionSchema) else build_schema(options)
        self.config = config or ParserConfig()

    @classmethod
    def from_mappings(cls, entries: Sequence[JSONValue], config: ParserConfig | None = None) -> ArgParser:
        """Return a parser built from declarative option mappings."""

        return cls(OptionSchema.from_mappings(entries), config)

    def parse(self, args: str | Sequence[str]) -> ParseOutcome:
        """Return the scan outcome for ``args`` without side effects."""

        return scan(self.schema, args)

    def parse_or_exit(self, args: str | Sequence[str]) -> ParseResult:
        """Return the result for ``args``, exiting with status ``1`` on error."""

        outcome = self.parse(args)
        if isinstance(outcome, ParseError):
            exit_with_error(outcome)
        return outcome

    def run(self, args: str | Sequence[str]) -> ParseOutcome:
        """Parse ``args`` honouring ``config.exit_on_error``."""

        if self.config.exit_on_error:
            return self.parse_or_exit(args)
        return self.parse(args)

    def help_string(self) -> str:
        """Return the help listing for the bound schema."""

        return render_help(self.schema)


__all__ = ["ArgParser"]
