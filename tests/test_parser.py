# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for the parser facade and its error-reporting adapter."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from argscan import ArgParser, OptionSchema, OptionSpec, ParseError, ParseResult, ParserConfig, ValueKind


def test_parse_returns_errors_by_default(example_schema: OptionSchema) -> None:
    parser = ArgParser(example_schema)
    outcome = parser.run("--option=abc")
    assert isinstance(outcome, ParseError)
    assert outcome.message == "value abc of option --option is invalid"


def test_exit_on_error_reports_and_exits(
    example_schema: OptionSchema,
    capsys: pytest.CaptureFixture[str],
) -> None:
    parser = ArgParser(example_schema, ParserConfig(exit_on_error=True))
    with pytest.raises(SystemExit) as excinfo:
        parser.run(["--option=abc"])
    assert excinfo.value.code == 1
    captured = capsys.readouterr()
    assert "error: value abc of option --option is invalid" in captured.err
    assert captured.out == ""


def test_exit_on_error_passes_successful_results_through(example_schema: OptionSchema) -> None:
    parser = ArgParser(example_schema, ParserConfig(exit_on_error=True))
    outcome = parser.run(["-s", "input"])
    assert isinstance(outcome, ParseResult)
    assert outcome.positional_args == ("input",)


def test_parse_or_exit_ignores_configuration(example_schema: OptionSchema) -> None:
    parser = ArgParser(example_schema)
    with pytest.raises(SystemExit):
        parser.parse_or_exit(["-x"])


def test_parser_builds_schema_from_specs() -> None:
    parser = ArgParser([OptionSpec(short="s"), OptionSpec(short="o", long="option", value_kind=ValueKind.INT)])
    outcome = parser.parse("-s --option=100 foo.txt bar.php")
    assert isinstance(outcome, ParseResult)
    assert outcome.as_dict() == {"s": True, "o": "100", "option": "100"}
    assert parser.help_string() == "-s\n    \n\n-o, --option=int\n    \n"


def test_parser_from_mappings() -> None:
    parser = ArgParser.from_mappings(
        [{"short": "v", "long": "verbose", "dup": True, "help": "more output"}],
        ParserConfig(exit_on_error=False),
    )
    outcome = parser.parse(["-vv", "--verbose"])
    assert isinstance(outcome, ParseResult)
    assert outcome.value("verbose") == 3
    assert parser.help_string() == "-v, --verbose\n    more output\n"


def test_parser_config_rejects_unknown_keys() -> None:
    with pytest.raises(ValidationError):
        ParserConfig.model_validate({"exit_on_error": True, "color": False})
