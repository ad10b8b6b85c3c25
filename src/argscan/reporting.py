# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Console reporting for parse errors at the process boundary."""

from __future__ import annotations

import sys
from typing import Final, NoReturn

from rich.console import Console
from rich.text import Text

from .errors import ParseError

ERROR_PREFIX: Final[str] = "error: "
ERROR_EXIT_CODE: Final[int] = 1


def detect_tty() -> bool:
    """Return ``True`` when stderr appears to be backed by a terminal."""

    try:
        return sys.stderr.isatty()
    except (AttributeError, ValueError):
        return False


def error_console() -> Console:
    """Return a Rich console bound to stderr, coloured only on terminals."""

    tty = detect_tty()
    return Console(stderr=True, no_color=not tty, highlight=False, soft_wrap=True)


def report_error(error: ParseError, *, console: Console | None = None) -> None:
    """Write ``error`` to stderr prefixed with ``error: ``.

    Args:
        error: Parse error to display.
        console: Optional console overriding the default stderr console.
    """

    target = console or error_console()
    text = Text(ERROR_PREFIX, style="bold red")
    text.append(error.message)
    target.print(text)


def exit_with_error(error: ParseError, *, console: Console | None = None) -> NoReturn:
    """Report ``error`` and terminate the process with status ``1``.

    Args:
        error: Parse error to display.
        console: Optional console overriding the default stderr console.

    Raises:
        SystemExit: Always, with code ``1``.
    """

    report_error(error, console=console)
    raise SystemExit(ERROR_EXIT_CODE)


__all__ = ["ERROR_EXIT_CODE", "ERROR_PREFIX", "detect_tty", "error_console", "exit_with_error", "report_error"]
