# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Typer application for checking argument vectors against schema documents."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated, Final

import typer
from rich.console import Console
from rich.table import Table
from rich.text import Text

from ..errors import ParseError, SchemaDocumentError
from ..io import SchemaDocument, load_schema_document
from ..reporting import ERROR_EXIT_CODE, ERROR_PREFIX, error_console, report_error
from ..result import ParseResult

SCHEMA_ERROR_EXIT_CODE: Final[int] = 2

SCHEMA_OPTION = Annotated[
    Path,
    typer.Option("--schema", help="JSON or TOML document declaring the options."),
]
JSON_OPTION = Annotated[
    bool,
    typer.Option("--json", help="Emit the parse result as JSON."),
]
ARGS_ARGUMENT = Annotated[
    list[str] | None,
    typer.Argument(help="Arguments to parse; place them after '--'."),
]

app = typer.Typer(
    name="argscan",
    help="Parse argument vectors against declarative option schemas.",
    no_args_is_help=True,
    add_completion=False,
)


def _load_document(path: Path) -> SchemaDocument:
    try:
        return load_schema_document(path)
    except SchemaDocumentError as exc:
        text = Text(ERROR_PREFIX, style="bold red")
        text.append(str(exc))
        error_console().print(text)
        raise typer.Exit(code=SCHEMA_ERROR_EXIT_CODE) from exc


def _result_payload(result: ParseResult) -> dict[str, object]:
    return {"options": result.as_dict(), "args": list(result.positional_args)}


def _render_result(result: ParseResult, console: Console) -> None:
    table = Table(title="Options", show_header=True, header_style="bold")
    table.add_column("Name", style="cyan")
    table.add_column("Value")
    for name, value in result.as_dict().items():
        table.add_row(name, json.dumps(value))
    console.print(table)
    console.print(Text(f"Arguments: {json.dumps(list(result.positional_args))}"))


@app.command("parse", context_settings={"ignore_unknown_options": True})
def parse_command(
    schema: SCHEMA_OPTION,
    args: ARGS_ARGUMENT = None,
    as_json: JSON_OPTION = False,
) -> None:
    """Parse ARGS with the schema and print the recognised options."""

    document = _load_document(schema)
    outcome = document.build_parser().parse(args or [])
    if isinstance(outcome, ParseError):
        report_error(outcome)
        raise typer.Exit(code=ERROR_EXIT_CODE)
    if as_json:
        typer.echo(json.dumps(_result_payload(outcome)))
        return
    _render_result(outcome, Console(highlight=False, soft_wrap=True))


@app.command("help")
def help_command(schema: SCHEMA_OPTION) -> None:
    """Print the help listing generated from the schema."""

    document = _load_document(schema)
    typer.echo(document.build_parser().help_string(), nl=False)


def main() -> None:
    """Console-script entry point."""

    app()


__all__ = ["SCHEMA_ERROR_EXIT_CODE", "app", "main"]
