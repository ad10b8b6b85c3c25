# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

import pytest

from argscan import OptionSchema, OptionSpec, ValueKind, build_schema


@pytest.fixture
def example_schema() -> OptionSchema:
    """Return the schema used by the end-to-end examples."""
    return build_schema(
        [
            OptionSpec(short="s", help_text="silent mode"),
            OptionSpec(
                short="o",
                long="option",
                value_kind=ValueKind.INT,
                value_help_hint="<number>",
                help_text="an option taking numerical value",
            ),
        ],
    )


@pytest.fixture
def rich_schema() -> OptionSchema:
    """Return a schema mixing flags, values, clusters and repeatable options."""
    return build_schema(
        [
            OptionSpec(short="s", long="silent", help_text="suppress output"),
            OptionSpec(short="v", long="verbose", allow_duplicates=True, help_text="increase verbosity"),
            OptionSpec(short="f", long="file", value_kind=ValueKind.STRING, help_text="input file"),
            OptionSpec(
                short="I",
                long="include",
                value_kind=ValueKind.STRING,
                allow_duplicates=True,
                help_text="include path",
            ),
            OptionSpec(long="count", value_kind=ValueKind.INT, help_text="how many"),
            OptionSpec(short="n", value_kind=ValueKind.INT, help_text="number of runs"),
            OptionSpec(long="dry-run", help_text="do nothing"),
        ],
    )
