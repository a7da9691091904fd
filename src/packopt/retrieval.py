# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Values produced by the conversion protocol, tagged with their source."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TypeAlias

from .errors import ParseError


class ValueSource(str, Enum):
    """Enumerate where a retrieved option value came from."""

    COMMANDLINE = "commandline"
    ENVIRONMENT = "environment"
    DEFAULT = "default"


OptionValue: TypeAlias = bool | str | None


@dataclass(frozen=True, slots=True)
class Retrieved:
    """Successful conversion of an option occurrence."""

    value: OptionValue
    source: ValueSource


ConversionResult: TypeAlias = Retrieved | ParseError

__all__ = ["ConversionResult", "OptionValue", "Retrieved", "ValueSource"]
