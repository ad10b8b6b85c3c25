# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Command-line argument scanning against declarative option schemas."""

from __future__ import annotations

from importlib import metadata

from .config import ParserConfig
from .errors import (
    DuplicateNameError,
    InvalidOptionNameError,
    MissingNameError,
    ParseError,
    ParseErrorKind,
    ParseFailure,
    SchemaDocumentError,
    SchemaError,
)
from .help import render_help
from .model_options import OptionSpec
from .parser import ArgParser
from .result import ParseOutcome, ParseResult, unwrap
from .scanner import scan
from .schema import OptionSchema, build_schema
from .types import ValueKind
from .values import CountValue, FlagValue, ListValue, ParsedValue, ScalarValue

__all__ = [
    "ArgParser",
    "CountValue",
    "DuplicateNameError",
    "FlagValue",
    "InvalidOptionNameError",
    "ListValue",
    "MissingNameError",
    "OptionSchema",
    "OptionSpec",
    "ParseError",
    "ParseErrorKind",
    "ParseFailure",
    "ParseOutcome",
    "ParseResult",
    "ParsedValue",
    "ParserConfig",
    "ScalarValue",
    "SchemaDocumentError",
    "SchemaError",
    "ValueKind",
    "__version__",
    "build_schema",
    "render_help",
    "scan",
    "unwrap",
]

try:
    __version__ = metadata.version("argscan")
except metadata.PackageNotFoundError:  # pragma: no cover - local development fallback
    __version__ = "0.0.0"
