# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Option kinds and the protocols shared between them."""

from __future__ import annotations

from .base import (
    RESERVED_ENV_PREFIX,
    RESERVED_LONG_PREFIX,
    RESERVED_PREFIX,
    ArgumentType,
    MatchCriterion,
    Option,
    OptionKind,
    ValuedOption,
    check_name_clash,
)
from .flag import Flag
from .stropt import StrOpt
from .switch import Switch

OPTION_CLASSES: dict[OptionKind, type[Flag] | type[Switch] | type[StrOpt]] = {
    OptionKind.FLAG: Flag,
    OptionKind.SWITCH: Switch,
    OptionKind.STROPT: StrOpt,
}

__all__ = [
    "OPTION_CLASSES",
    "RESERVED_ENV_PREFIX",
    "RESERVED_LONG_PREFIX",
    "RESERVED_PREFIX",
    "ArgumentType",
    "Flag",
    "MatchCriterion",
    "Option",
    "OptionKind",
    "StrOpt",
    "Switch",
    "ValuedOption",
    "check_name_clash",
]
