# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Exceptions raised or returned by option definition and scanning."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .options.base import Option


class ConfigurationError(Exception):
    """Raised when an option or option set is defined incorrectly."""


class NameClashError(ConfigurationError):
    """Raised when two distinct options share a short or long name."""

    def __init__(self, first: Option, second: Option, name: str) -> None:
        """Record the clashing options and the shared name.

        Args:
            first: Option already registered under ``name``.
            second: Option attempting to reuse ``name``.
            name: Short or long name both options claim.
        """

        super().__init__(f"options {first!r} and {second!r} both use the name '{name}'")
        self.first = first
        self.second = second
        self.name = name


class DefinitionError(ConfigurationError):
    """Raised when an option definition file cannot be read or validated."""


class ParseError(Exception):
    """Base class for command-line anomalies.

    Parse errors are returned as data by the conversion protocol and the
    scanner so callers can collect several problems before reporting them.
    Callers may still ``raise`` an instance when they consider it fatal.
    """

    def __init__(self, name: str, message: str) -> None:
        super().__init__(message)
        self.name = name

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.args == other.args and vars(self) == vars(other)

    def __hash__(self) -> int:
        return hash((type(self), self.args))


class ExtraArgumentError(ParseError):
    """A no-argument option was given a value."""

    def __init__(self, name: str, value: str) -> None:
        super().__init__(name, f"option '{name}' takes no argument (got '{value}')")
        self.value = value


class MissingArgumentError(ParseError):
    """An option requiring an argument was given none."""

    def __init__(self, name: str) -> None:
        super().__init__(name, f"option '{name}' requires an argument")


class InvalidArgumentError(ParseError):
    """An option argument is outside the accepted vocabulary."""

    def __init__(self, name: str, value: str, accepted: Sequence[str] = ()) -> None:
        message = f"invalid argument '{value}' for option '{name}'"
        if accepted:
            message = f"{message} (expected one of: {', '.join(accepted)})"
        super().__init__(name, message)
        self.value = value
        self.accepted = tuple(accepted)


class UnknownOptionError(ParseError):
    """No registered option matches a command-line token."""

    def __init__(self, name: str) -> None:
        super().__init__(name, f"unknown option '{name}'")


class AmbiguousOptionError(ParseError):
    """An abbreviated long name matches several options."""

    def __init__(self, name: str, candidates: Sequence[str]) -> None:
        super().__init__(
            name,
            f"ambiguous option '{name}' (could be: {', '.join(candidates)})",
        )
        self.candidates = tuple(candidates)


__all__ = [
    "AmbiguousOptionError",
    "ConfigurationError",
    "DefinitionError",
    "ExtraArgumentError",
    "InvalidArgumentError",
    "MissingArgumentError",
    "NameClashError",
    "ParseError",
    "UnknownOptionError",
]
