# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Plain-text help listing generated from an option schema."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Final

from .model_options import OptionSpec

HELP_INDENT: Final[str] = "    "


def usage_fragment(spec: OptionSpec) -> str:
    """Return the usage line for ``spec``, e.g. ``-o, --option=<n>``.

    Args:
        spec: Option descriptor being rendered.

    Returns:
        str: Short and long forms joined by ``", "``, with the value hint
        attached to the long form when present and to the short form otherwise.
    """

    forms: list[str] = []
    if spec.short is not None:
        forms.append(f"-{spec.short}")
    if spec.long is not None:
        forms.append(f"--{spec.long}")
    if spec.takes_value:
        if spec.long is not None:
            forms[-1] = f"{forms[-1]}={spec.value_hint}"
        else:
            forms[-1] = f"{forms[-1]} {spec.value_hint}"
    return ", ".join(forms)


def render_entry(spec: OptionSpec) -> str:
    """Return the usage line and indented help text for ``spec``."""

    return f"{usage_fragment(spec)}\n{HELP_INDENT}{spec.help_text}\n"


def render_help(specs: Iterable[OptionSpec]) -> str:
    """Return the help listing for ``specs`` with entries separated by blank lines.

    Args:
        specs: Option descriptors in display order, typically an :class:`OptionSchema`.

    Returns:
        str: One entry per option in the given order.
    """

    return "\n".join(render_entry(spec) for spec in specs)


__all__ = ("HELP_INDENT", "render_entry", "render_help", "usage_fragment")
