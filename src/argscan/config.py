# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Parser configuration model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class ParserConfig(BaseModel):
    """Behaviour switches applied when surfacing parse errors.

    ``exit_on_error`` makes :meth:`argscan.parser.ArgParser.run` report the
    error on stderr and exit with status ``1`` instead of returning it.
    """

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    exit_on_error: bool = False


__all__ = ["ParserConfig"]
