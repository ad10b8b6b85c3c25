# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Errors raised while building schemas and values returned by failed scans."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class SchemaError(ValueError):
    """Raised when option descriptors cannot form a valid schema."""


class MissingNameError(SchemaError):
    """Raised when an option declares neither a short nor a long name."""


class DuplicateNameError(SchemaError):
    """Raised when two option descriptors claim the same name."""

    def __init__(self, name: str) -> None:
        """Create the error for the colliding ``name``.

        Args:
            name: Short or long option name registered more than once.
        """

        super().__init__(f"duplicate option name: {name}")
        self.name = name


class InvalidOptionNameError(SchemaError):
    """Raised when a short or long name cannot be matched by the scanner."""


class SchemaDocumentError(SchemaError):
    """Raised when a schema document cannot be read or is malformed."""


class ParseErrorKind(str, Enum):
    """Enumerate the ways a single scan can fail."""

    UNKNOWN_OPTION = "unknown_option"
    MISSING_VALUE = "missing_value"
    UNEXPECTED_VALUE = "unexpected_value"
    INVALID_VALUE = "invalid_value"


@dataclass(frozen=True, slots=True)
class ParseError:
    """Terminal outcome of a scan that rejected a token."""

    kind: ParseErrorKind
    option: str
    message: str

    def __str__(self) -> str:
        return self.message


class ParseFailure(RuntimeError):
    """Exception wrapper for callers preferring raised parse errors."""

    def __init__(self, error: ParseError) -> None:
        """Wrap ``error`` so it can propagate as an exception.

        Args:
            error: Structured parse error returned by the scanner.
        """

        super().__init__(error.message)
        self.error = error


__all__ = (
    "DuplicateNameError",
    "InvalidOptionNameError",
    "MissingNameError",
    "ParseError",
    "ParseErrorKind",
    "ParseFailure",
    "SchemaDocumentError",
    "SchemaError",
)
