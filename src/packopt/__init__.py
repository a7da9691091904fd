# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Option definitions, matching protocols and a command-line scanner."""

from __future__ import annotations

from importlib import metadata

from .errors import (
    AmbiguousOptionError,
    ConfigurationError,
    DefinitionError,
    ExtraArgumentError,
    InvalidArgumentError,
    MissingArgumentError,
    NameClashError,
    ParseError,
    UnknownOptionError,
)
from .options import (
    ArgumentType,
    Flag,
    MatchCriterion,
    Option,
    OptionKind,
    StrOpt,
    Switch,
    ValuedOption,
    check_name_clash,
)
from .registry import OptionSet
from .retrieval import Retrieved, ValueSource
from .scanner import Occurrence, Scanner, ScanResult
from .traversal import TraversalPass
from .vocabulary import BooleanVocabulary, SwitchStyle

__all__ = [
    "AmbiguousOptionError",
    "ArgumentType",
    "BooleanVocabulary",
    "ConfigurationError",
    "DefinitionError",
    "ExtraArgumentError",
    "Flag",
    "InvalidArgumentError",
    "MatchCriterion",
    "MissingArgumentError",
    "NameClashError",
    "Occurrence",
    "Option",
    "OptionKind",
    "OptionSet",
    "ParseError",
    "Retrieved",
    "ScanResult",
    "Scanner",
    "StrOpt",
    "Switch",
    "SwitchStyle",
    "TraversalPass",
    "UnknownOptionError",
    "ValueSource",
    "ValuedOption",
    "__version__",
    "check_name_clash",
]

try:
    __version__ = metadata.version("packopt")
except metadata.PackageNotFoundError:  # pragma: no cover - local development fallback
    __version__ = "0.0.0"
