# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Option sets enforcing name uniqueness and resolving command-line names."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Sequence
from typing import overload

from .errors import AmbiguousOptionError
from .options import Flag, MatchCriterion, Option, StrOpt, Switch, check_name_clash
from .options.internal import make_internal
from .vocabulary import SwitchStyle

LOGGER = logging.getLogger(__name__)


def builtin_options() -> tuple[Option, ...]:
    """Return fresh instances of the options every program understands.

    Returns:
        tuple[Option, ...]: Internal options living in the ``packopt-`` namespace.
    """

    return (
        make_internal(Flag, long_name="help", description="Print the program's help and exit."),
        make_internal(Flag, long_name="version", description="Print the program's version and exit."),
        make_internal(
            Switch,
            long_name="highlight",
            env_var="HIGHLIGHT",
            argument_style=SwitchStyle.ON_OFF,
            description="Highlight console output.",
        ),
        make_internal(
            StrOpt,
            long_name="line-width",
            env_var="LINE_WIDTH",
            argument_name="WIDTH",
            description="Wrap console output at WIDTH columns.",
        ),
    )


class OptionSet(Sequence[Option]):
    """Flat collection of options in definition order.

    Every option added is checked against each registered option with
    :func:`check_name_clash`, so short and long names stay unique (including
    the single bare-dash option whose short name is ``""``).
    """

    def __init__(self, options: Iterable[Option] = ()) -> None:
        """Initialise the set and register ``options`` in order.

        Args:
            options: Options to register.

        Raises:
            NameClashError: If two options share a name.
        """

        self._options: list[Option] = []
        for option in options:
            self.add(option)

    def add(self, option: Option) -> None:
        """Register ``option`` enforcing name uniqueness.

        Args:
            option: Option to insert.

        Raises:
            NameClashError: If ``option`` shares a name with a registered option.
        """

        for registered in self._options:
            check_name_clash(registered, option)
        if any(registered is option for registered in self._options):
            return
        self._options.append(option)
        LOGGER.debug("registered option %r", option)

    def with_builtins(self) -> OptionSet:
        """Return a new set holding the built-in options followed by these ones."""

        return OptionSet((*builtin_options(), *self._options))

    def find(self, name: str, criterion: MatchCriterion) -> Option | None:
        """Return the first option matching ``name`` under ``criterion``.

        Args:
            name: Name taken from the command line, dashes stripped.
            criterion: Kind of match to test.

        Returns:
            Option | None: Matching option, if any.
        """

        for option in self._options:
            if option.matches(name, criterion):
                return option
        return None

    def resolve_long(self, name: str) -> Option | AmbiguousOptionError | None:
        """Resolve a long name that may be abbreviated.

        An exact long name wins. Otherwise ``name`` must be the prefix of
        exactly one long name; several candidates produce an
        :class:`AmbiguousOptionError` rather than a guess.

        Args:
            name: Long name or prefix, dashes stripped.

        Returns:
            Option | AmbiguousOptionError | None: Resolved option, the
            ambiguity to report, or ``None`` when nothing matches.
        """

        exact = self.find(name, MatchCriterion.LONG)
        if exact is not None:
            return exact
        candidates = [option for option in self._options if option.matches(name, MatchCriterion.PARTIAL)]
        if len(candidates) == 1:
            LOGGER.debug("resolved '--%s' to %r", name, candidates[0])
            return candidates[0]
        if candidates:
            return AmbiguousOptionError(name, [f"--{option.long_name}" for option in candidates])
        return None

    def find_sticky(self, remainder: str) -> tuple[Option, str] | None:
        """Return the option whose short name starts ``remainder`` and its value.

        When several short names prefix ``remainder`` the longest wins.

        Args:
            remainder: Token text after the leading dash, e.g. ``ooutfile``.

        Returns:
            tuple[Option, str] | None: Option and attached value, if any.
        """

        best: tuple[Option, str] | None = None
        for option in self._options:
            value = option.matches_sticky(remainder)
            if value is None:
                continue
            if best is None or len(value) < len(best[1]):
                best = (option, value)
        return best

    def minus_pack_option(self, char: str) -> Option | None:
        """Return the option allowed to occupy ``char`` in a minus-pack."""

        for option in self._options:
            if option.minus_char() == char:
                return option
        return None

    def plus_pack_option(self, char: str) -> Option | None:
        """Return the option allowed to occupy ``char`` in a plus-pack."""

        for option in self._options:
            if option.plus_char() == char:
                return option
        return None

    @overload
    def __getitem__(self, index: int) -> Option: ...

    @overload
    def __getitem__(self, index: slice) -> Sequence[Option]: ...

    def __getitem__(self, index: int | slice) -> Option | Sequence[Option]:
        return self._options[index]

    def __len__(self) -> int:
        return len(self._options)

    def __iter__(self) -> Iterator[Option]:
        return iter(self._options)


__all__ = ["OptionSet", "builtin_options"]
