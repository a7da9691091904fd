# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Shared option model: naming invariants, matching and pack eligibility."""

from __future__ import annotations

import os
from abc import ABC, abstractmethod
from collections.abc import Mapping
from enum import Enum
from typing import ClassVar, Final

from ..errors import ConfigurationError, NameClashError
from ..retrieval import ConversionResult, Retrieved

RESERVED_PREFIX: Final[str] = "packopt"
RESERVED_LONG_PREFIX: Final[str] = f"{RESERVED_PREFIX}-"
RESERVED_ENV_PREFIX: Final[str] = f"{RESERVED_PREFIX.upper()}_"


class OptionKind(str, Enum):
    """Enumerate the concrete option kinds."""

    FLAG = "flag"
    SWITCH = "switch"
    STROPT = "stropt"


class MatchCriterion(str, Enum):
    """Enumerate the ways a command-line name may designate an option."""

    SHORT = "short"
    LONG = "long"
    PARTIAL = "partial"


class ArgumentType(str, Enum):
    """Enumerate argument requiredness for valued options."""

    REQUIRED = "required"
    MANDATORY = "mandatory"
    OPTIONAL = "optional"

    @classmethod
    def from_raw(cls, raw: ArgumentType | str) -> ArgumentType:
        """Return the argument type denoted by ``raw``.

        Args:
            raw: Enum member or its string value.

        Returns:
            ArgumentType: Matching argument type.

        Raises:
            ConfigurationError: If ``raw`` names no argument type.
        """

        if isinstance(raw, ArgumentType):
            return raw
        try:
            return cls(raw)
        except ValueError as exc:
            allowed = ", ".join(member.value for member in cls)
            raise ConfigurationError(
                f"invalid argument type {raw!r} (expected one of: {allowed})",
            ) from exc

    @property
    def required(self) -> bool:
        """Return whether an argument of this type must be supplied.

        Returns:
            bool: ``True`` for required and mandatory arguments.
        """

        return self is not ArgumentType.OPTIONAL


def _has_whitespace(name: str) -> bool:
    return any(char.isspace() for char in name)


class Option(ABC):
    """Abstract base for every command-line option.

    Options are immutable once constructed. Only the concrete kinds exported
    by :mod:`packopt.options` are instantiable; privileged options using the
    reserved ``packopt`` namespace are built by
    :func:`packopt.options.internal.make_internal`.
    """

    __slots__ = ("_short_name", "_long_name", "_description", "_env_var", "_internal")

    kind: ClassVar[OptionKind]

    def _setup(
        self,
        *,
        short_name: str | None = None,
        long_name: str | None = None,
        description: str = "",
        env_var: str | None = None,
        internal: bool = False,
    ) -> None:
        """Validate and store the attributes shared by all options.

        Args:
            short_name: Name used after a single dash, without the dash.
            long_name: Name used after a double dash, without the dashes.
            description: Human-readable description of the option.
            env_var: Environment variable providing a fallback value.
            internal: ``True`` when built through the privileged path.

        Raises:
            ConfigurationError: If the names violate an option invariant.
        """

        if short_name is None and long_name is None:
            raise ConfigurationError("an option needs a short name or a long name")
        if long_name is not None:
            if not long_name:
                raise ConfigurationError("an option's long name cannot be empty")
            if _has_whitespace(long_name):
                raise ConfigurationError(f"long name {long_name!r} contains whitespace")
        if short_name is not None:
            if short_name.startswith("-"):
                raise ConfigurationError(f"short name {short_name!r} cannot begin with a dash")
            if _has_whitespace(short_name):
                raise ConfigurationError(f"short name {short_name!r} contains whitespace")
        if short_name is not None and short_name == long_name:
            raise ConfigurationError(f"short and long names are both {short_name!r}")
        if not internal:
            if long_name is not None and long_name.startswith(RESERVED_LONG_PREFIX):
                raise ConfigurationError(
                    f"long name {long_name!r} uses the reserved '{RESERVED_LONG_PREFIX}' prefix",
                )
            if short_name is not None and short_name.startswith(RESERVED_PREFIX):
                raise ConfigurationError(
                    f"short name {short_name!r} uses the reserved '{RESERVED_PREFIX}' prefix",
                )
        self._short_name = short_name
        self._long_name = long_name
        self._description = description
        self._env_var = env_var
        self._internal = internal

    @property
    def short_name(self) -> str | None:
        """Return the name used after a single dash.

        Returns:
            str | None: Short name without the dash, or ``None`` when absent.
        """

        return self._short_name

    @property
    def long_name(self) -> str | None:
        """Return the name used after a double dash.

        Returns:
            str | None: Long name without the dashes, or ``None`` when absent.
        """

        return self._long_name

    @property
    def description(self) -> str:
        """Return the human-readable description.

        Returns:
            str: Description shown in option listings.
        """

        return self._description

    @property
    def env_var(self) -> str | None:
        """Return the environment variable providing a fallback value.

        Returns:
            str | None: Variable name, or ``None`` when the option has none.
        """

        return self._env_var

    @property
    def internal(self) -> bool:
        """Return ``True`` for options built through the privileged path."""

        return self._internal

    @property
    def name(self) -> str:
        """Return the name used in messages, preferring the long name."""

        if self._long_name is not None:
            return self._long_name
        return self._short_name or "-"

    @property
    def display_names(self) -> str:
        """Return the option's names as typed on a command line, e.g. ``-v, --verbose``."""

        names = []
        if self._short_name is not None:
            names.append(f"-{self._short_name}")
        if self._long_name is not None:
            names.append(f"--{self._long_name}")
        return ", ".join(names)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.display_names}>"

    # Matching protocol -------------------------------------------------

    def matches(self, name: str, criterion: MatchCriterion) -> bool:
        """Return ``True`` when ``name`` designates this option.

        Short and long matches are exact and case-sensitive. Partial matches
        test ``name`` as a prefix of the long name only; short names are
        never abbreviated.

        Args:
            name: Name taken from the command line, dashes stripped.
            criterion: Which kind of match to test.

        Returns:
            bool: ``True`` when the option matches.
        """

        if criterion is MatchCriterion.SHORT:
            return self._short_name is not None and name == self._short_name
        if criterion is MatchCriterion.LONG:
            return self._long_name is not None and name == self._long_name
        return bool(name) and self._long_name is not None and self._long_name.startswith(name)

    def matches_sticky(self, remainder: str) -> str | None:
        """Return the value stuck to this option's short name in ``remainder``.

        Options taking no argument never carry a sticky value.
        """

        return None

    # Char-pack protocol ------------------------------------------------

    def minus_char(self) -> str | None:
        """Return the character this option contributes to a minus-pack."""

        if self._short_name is not None and len(self._short_name) == 1:
            return self._short_name
        return None

    def plus_char(self) -> str | None:
        """Return the character this option contributes to a plus-pack."""

        return None

    # Conversion protocol -----------------------------------------------

    @abstractmethod
    def convert_value(self, matched_name: str, raw_value: str | None) -> ConversionResult:
        """Convert an occurrence recognised under ``matched_name``.

        Args:
            matched_name: Name under which the option was recognised.
            raw_value: Attached text, or ``None`` when none was given.

        Returns:
            ConversionResult: Retrieved value or a parse error to report.
        """

    @abstractmethod
    def convert_environment(self, environ: Mapping[str, str] | None = None) -> Retrieved | None:
        """Return the value provided by the option's environment variable.

        Args:
            environ: Environment mapping; defaults to :data:`os.environ`.

        Returns:
            Retrieved | None: Environment value, or ``None`` when unavailable.
        """

    def _environment_text(self, environ: Mapping[str, str] | None) -> str | None:
        if self._env_var is None:
            return None
        source = os.environ if environ is None else environ
        return source.get(self._env_var)


def check_name_clash(first: Option, second: Option) -> None:
    """Ensure two options can live in the same option set.

    Args:
        first: Option already registered.
        second: Candidate option.

    Raises:
        NameClashError: If distinct options share a short or long name.
    """

    if first is second:
        return
    if first.short_name is not None and first.short_name == second.short_name:
        raise NameClashError(first, second, first.short_name)
    if first.long_name is not None and first.long_name == second.long_name:
        raise NameClashError(first, second, first.long_name)


class ValuedOption(Option):
    """Abstract base for options that carry an argument."""

    __slots__ = ("_argument_name", "_argument_type", "_default_value")

    default_argument_type: ClassVar[ArgumentType] = ArgumentType.REQUIRED

    def _setup(
        self,
        *,
        argument_name: str | None = None,
        argument_type: ArgumentType | str | None = None,
        default_value: str | None = None,
        **common: object,
    ) -> None:
        """Validate and store the shared attributes, then the argument ones.

        Args:
            argument_name: Display name of the argument; kind-specific default.
            argument_type: Requiredness of the argument; kind-specific default.
            default_value: Value used when the optional argument is omitted.
            **common: Attributes forwarded to :meth:`Option._setup`.

        Raises:
            ConfigurationError: If an argument attribute is invalid.
        """

        super()._setup(**common)  # type: ignore[arg-type]
        if argument_name is None:
            argument_name = self._default_argument_name()
        if not argument_name:
            raise ConfigurationError(f"option '{self.name}' has an empty argument name")
        if default_value is not None and not default_value:
            raise ConfigurationError(f"option '{self.name}' has an empty default value")
        self._argument_name = argument_name
        self._argument_type = ArgumentType.from_raw(
            self.default_argument_type if argument_type is None else argument_type,
        )
        self._default_value = default_value

    @abstractmethod
    def _default_argument_name(self) -> str:
        """Return the display name used when none is configured."""

    @property
    def argument_name(self) -> str:
        """Return the display name of the argument.

        Returns:
            str: Name shown in listings, e.g. ``FILE``.
        """

        return self._argument_name

    @property
    def argument_type(self) -> ArgumentType:
        """Return the requiredness of the argument.

        Returns:
            ArgumentType: Configured argument type.
        """

        return self._argument_type

    @property
    def argument_required(self) -> bool:
        """Return whether the argument must be supplied.

        Returns:
            bool: ``True`` unless the argument is optional.
        """

        return self._argument_type.required

    @property
    def default_value(self) -> str | None:
        """Return the value used when the argument is omitted.

        Returns:
            str | None: Default value, or ``None`` when there is none.
        """

        return self._default_value

    def matches_sticky(self, remainder: str) -> str | None:
        """Return the text following the short name at the start of ``remainder``.

        Args:
            remainder: Token text after the leading dash, e.g. ``oVALUE``.

        Returns:
            str | None: Attached value, or ``None`` when ``remainder`` does not
            start with this option's short name.
        """

        if self._short_name and remainder.startswith(self._short_name):
            return remainder[len(self._short_name) :]
        return None

    def minus_char(self) -> str | None:
        """Return the minus-pack character unless the argument is required.

        A required argument would swallow the rest of the pack as its sticky
        value, so such options may only end a pack.
        """

        if self.argument_required:
            return None
        return super().minus_char()


__all__ = [
    "ArgumentType",
    "MatchCriterion",
    "Option",
    "OptionKind",
    "RESERVED_ENV_PREFIX",
    "RESERVED_LONG_PREFIX",
    "RESERVED_PREFIX",
    "ValuedOption",
    "check_name_clash",
]
