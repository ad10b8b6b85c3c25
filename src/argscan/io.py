# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Loading option schemas from JSON or TOML documents."""

from __future__ import annotations

import json
import tomllib
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import cast

from pydantic import ValidationError

from .config import ParserConfig
from .errors import SchemaDocumentError, SchemaError
from .parser import ArgParser
from .schema import OptionSchema
from .types import JSONValue
from .utils import expect_mapping, expect_sequence


@dataclass(frozen=True, slots=True)
class SchemaDocument:
    """Option schema and parser configuration read from a document."""

    path: Path
    schema: OptionSchema
    config: ParserConfig

    def build_parser(self) -> ArgParser:
        """Return a parser bound to the document's schema and configuration."""

        return ArgParser(self.schema, self.config)


def load_payload(path: Path) -> Mapping[str, JSONValue]:
    """Read ``path`` as JSON or TOML depending on its suffix.

    Args:
        path: Filesystem path to the schema document.

    Returns:
        Mapping[str, JSONValue]: Decoded top-level object.

    Raises:
        SchemaDocumentError: If the file is missing, cannot be decoded or is
            not an object.
    """
    if not path.is_file():
        raise SchemaDocumentError(f"{path}: schema document not found")
    try:
        if path.suffix.lower() == ".toml":
            with path.open("rb") as stream:
                payload = cast(JSONValue, tomllib.load(stream))
        else:
            with path.open("r", encoding="utf-8") as stream:
                payload = cast(JSONValue, json.load(stream))
    except (json.JSONDecodeError, tomllib.TOMLDecodeError, UnicodeDecodeError) as exc:
        raise SchemaDocumentError(f"{path}: failed to decode schema document: {exc}") from exc
    if not isinstance(payload, Mapping):
        raise SchemaDocumentError(f"{path}: expected a top-level object")
    return payload


def load_schema_document(path: Path) -> SchemaDocument:
    """Load the option schema and parser configuration stored at ``path``.

    The document holds an ``options`` array of option mappings and an
    optional ``parser`` object validated into :class:`ParserConfig`.

    Args:
        path: Filesystem path to a ``.json`` or ``.toml`` document.

    Returns:
        SchemaDocument: Decoded schema and configuration.

    Raises:
        SchemaDocumentError: If the document or any option entry is invalid.
    """
    payload = load_payload(path)
    context = str(path)
    try:
        entries = expect_sequence(payload.get("options"), key="options", context=context)
        schema = OptionSchema.from_mappings(entries, context=f"{context}: options")
        raw_config = payload.get("parser")
        config_data = {} if raw_config is None else expect_mapping(raw_config, key="parser", context=context)
        config = ParserConfig.model_validate(dict(config_data))
    except SchemaError as exc:
        raise SchemaDocumentError(str(exc)) from exc
    except ValidationError as exc:
        raise SchemaDocumentError(f"{context}: invalid parser configuration: {exc}") from exc
    return SchemaDocument(path=path, schema=schema, config=config)


__all__ = ["SchemaDocument", "load_payload", "load_schema_document"]
