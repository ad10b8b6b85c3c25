# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for loading schema documents."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from argscan import OptionSpec, SchemaDocumentError, ValueKind
from argscan.io import load_schema_document

_OPTIONS = [
    {"short": "o", "long": "option", "value": "int", "vhelp": "<number>", "help": "numeric option"},
    {"short": "s", "help": "silent mode"},
    {"long": "include", "value": "string", "dup": True, "help": "include path"},
]

_TOML = """
[parser]
exit_on_error = true

[[options]]
short = "o"
long = "option"
value = "int"
vhelp = "<number>"
help = "numeric option"

[[options]]
short = "s"
help = "silent mode"

[[options]]
long = "include"
value = "string"
dup = true
help = "include path"
"""


def test_load_json_document(tmp_path: Path) -> None:
    path = tmp_path / "schema.json"
    path.write_text(json.dumps({"options": _OPTIONS}), encoding="utf-8")
    document = load_schema_document(path)
    assert document.path == path
    assert not document.config.exit_on_error
    assert document.schema.specs[0] == OptionSpec(
        short="o",
        long="option",
        value_kind=ValueKind.INT,
        help_text="numeric option",
        value_help_hint="<number>",
    )
    assert document.schema.resolve("include") is document.schema.specs[2]


def test_json_and_toml_documents_agree(tmp_path: Path) -> None:
    json_path = tmp_path / "schema.json"
    json_path.write_text(json.dumps({"options": _OPTIONS, "parser": {"exit_on_error": True}}), encoding="utf-8")
    toml_path = tmp_path / "schema.toml"
    toml_path.write_text(_TOML, encoding="utf-8")
    from_json = load_schema_document(json_path)
    from_toml = load_schema_document(toml_path)
    assert from_json.schema.specs == from_toml.schema.specs
    assert from_json.config == from_toml.config
    assert from_toml.config.exit_on_error


def test_document_builds_parser(tmp_path: Path) -> None:
    path = tmp_path / "schema.json"
    path.write_text(json.dumps({"options": _OPTIONS}), encoding="utf-8")
    parser = load_schema_document(path).build_parser()
    assert parser.help_string().startswith("-o, --option=<number>\n    numeric option\n\n")


def test_missing_document(tmp_path: Path) -> None:
    with pytest.raises(SchemaDocumentError, match="not found"):
        load_schema_document(tmp_path / "absent.json")


@pytest.mark.parametrize(
    ("name", "content", "match"),
    [
        ("broken.json", "{not json", "failed to decode"),
        ("broken.toml", "options = [", "failed to decode"),
        ("list.json", "[]", "top-level object"),
        ("no-options.json", "{}", "options"),
        ("bad-entry.json", '{"options": [{"help": "nameless"}]}', "no name"),
        ("dupes.json", '{"options": [{"short": "a"}, {"short": "a"}]}', "duplicate option name: a"),
        ("bad-parser.json", '{"options": [], "parser": {"exit_on_error": "maybe"}}', "parser configuration"),
    ],
)
def test_malformed_documents(tmp_path: Path, name: str, content: str, match: str) -> None:
    path = tmp_path / name
    path.write_text(content, encoding="utf-8")
    with pytest.raises(SchemaDocumentError, match=match):
        load_schema_document(path)
