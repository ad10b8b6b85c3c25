# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Token scanner turning an argument vector into recognised options.

Tokens are consumed left to right. ``--name[=value]`` tokens are long
options, ``-abc`` tokens are clusters of short options and the first token
without a leading dash ends option scanning. A bare ``--`` also ends
scanning and is itself dropped from the positional arguments.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from .errors import ParseError, ParseErrorKind
from .model_options import OptionSpec
from .result import ParseOutcome, ParseResult
from .schema import OptionSchema
from .types import validate_value
from .values import ParsedValue, accumulate

LOGGER = logging.getLogger(__name__)

_Options = dict[str, ParsedValue]


def split_args(args: str | Sequence[str]) -> tuple[str, ...]:
    """Return ``args`` as a token tuple, splitting raw strings on whitespace runs."""

    if isinstance(args, str):
        return tuple(args.split())
    return tuple(args)


def scan(schema: OptionSchema, args: str | Sequence[str]) -> ParseOutcome:
    """Scan ``args`` against ``schema``.

    Args:
        schema: Option schema used to resolve names.
        args: Argument vector, or a raw command-line string.

    Returns:
        ParseOutcome: The recognised options and positional arguments, or the
        first :class:`ParseError` encountered.
    """

    tokens = split_args(args)
    options: _Options = {}
    index = 0
    while index < len(tokens):
        token = tokens[index]
        if token.startswith("--"):
            body = token[2:]
            if not body:
                LOGGER.debug("option terminator at index %d", index)
                return _finish(options, tokens[index + 1 :])
            error = _scan_long(schema, body, options)
            if error is not None:
                return error
        elif token.startswith("-"):
            consumed = _scan_short_cluster(schema, tokens, index, options)
            if isinstance(consumed, ParseError):
                return consumed
            index += consumed
        else:
            LOGGER.debug("positional argument %r ends option scanning at index %d", token, index)
            return _finish(options, tokens[index:])
        index += 1
    return _finish(options, ())


def _scan_long(schema: OptionSchema, body: str, options: _Options) -> ParseError | None:
    name, separator, inline_value = body.partition("=")
    flag = f"--{name}"
    spec = schema.resolve(name)
    if spec is None or spec.long != name:
        return _reject(ParseErrorKind.UNKNOWN_OPTION, flag, f"invalid option: {flag}")
    if spec.value_kind is not None:
        if not separator:
            return _reject(ParseErrorKind.MISSING_VALUE, flag, f"option {flag} requires a value")
        if not validate_value(inline_value, spec.value_kind):
            return _reject(ParseErrorKind.INVALID_VALUE, flag, f"value {inline_value} of option {flag} is invalid")
        _record(options, spec, inline_value)
        return None
    if separator:
        return _reject(ParseErrorKind.UNEXPECTED_VALUE, flag, f"option {flag} need not take value")
    _record(options, spec, None)
    return None


def _scan_short_cluster(
    schema: OptionSchema,
    tokens: tuple[str, ...],
    index: int,
    options: _Options,
) -> int | ParseError:
    """Record every option of the cluster at ``tokens[index]``.

    Returns:
        int | ParseError: Count of following tokens consumed as a value
        (``0`` or ``1``), or the error that aborted the cluster.
    """

    letters = tokens[index][1:]
    if not letters:
        return _reject(ParseErrorKind.UNKNOWN_OPTION, "-", "invalid option: -")
    for position, letter in enumerate(letters):
        flag = f"-{letter}"
        spec = schema.resolve(letter)
        if spec is None or spec.short != letter:
            return _reject(ParseErrorKind.UNKNOWN_OPTION, flag, f"invalid option: {flag}")
        if spec.value_kind is None:
            _record(options, spec, None)
            continue
        is_last = position == len(letters) - 1
        if not is_last or index + 1 >= len(tokens):
            return _reject(ParseErrorKind.MISSING_VALUE, flag, f"option {flag} requires a value")
        value = tokens[index + 1]
        if not validate_value(value, spec.value_kind):
            return _reject(ParseErrorKind.INVALID_VALUE, flag, f"value {value} of option {flag} is invalid")
        _record(options, spec, value)
        return 1
    return 0


def _record(options: _Options, spec: OptionSpec, raw: str | None) -> None:
    # Both names of an option hold the same value after every write.
    for name in spec.names:
        options[name] = accumulate(options.get(name), raw, spec)


def _reject(kind: ParseErrorKind, option: str, message: str) -> ParseError:
    LOGGER.debug("scan aborted: %s", message)
    return ParseError(kind=kind, option=option, message=message)


def _finish(options: _Options, positional: Sequence[str]) -> ParseResult:
    return ParseResult(options=options, positional_args=tuple(positional))


__all__ = ("scan", "split_args")
