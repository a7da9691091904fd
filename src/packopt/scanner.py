# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Command-line scanner driving the matching and conversion protocols."""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field

from .errors import AmbiguousOptionError, ExtraArgumentError, ParseError, UnknownOptionError
from .options import Flag, MatchCriterion, Option, Switch, ValuedOption
from .registry import OptionSet
from .retrieval import ConversionResult, OptionValue, Retrieved, ValueSource
from .traversal import TraversalPass

LOGGER = logging.getLogger(__name__)

_END_OF_OPTIONS = "--"


@dataclass(frozen=True, slots=True)
class Occurrence:
    """An option value retrieved during a scan."""

    option: Option
    name: str
    retrieved: Retrieved

    @property
    def value(self) -> OptionValue:
        """Return the retrieved value."""

        return self.retrieved.value

    @property
    def source(self) -> ValueSource:
        """Return where the value came from."""

        return self.retrieved.source


@dataclass(slots=True)
class ScanResult:
    """Outcome of scanning one command line.

    Attributes:
        occurrences: Retrieved values in the order they were produced.
        errors: Parse anomalies collected along the way.
        arguments: Positional arguments left after option processing.
    """

    occurrences: list[Occurrence] = field(default_factory=list)
    errors: list[ParseError] = field(default_factory=list)
    arguments: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        """Return ``True`` when the scan collected no errors."""

        return not self.errors

    @property
    def values(self) -> dict[Option, OptionValue]:
        """Return the last value retrieved for each option."""

        return {occurrence.option: occurrence.value for occurrence in self.occurrences}

    def lookup(self, name: str) -> Occurrence | None:
        """Return the last occurrence of the option named ``name``.

        Args:
            name: Short or long name of the option, without dashes.

        Returns:
            Occurrence | None: Last occurrence, or ``None`` when the option
            produced no value.
        """

        for occurrence in reversed(self.occurrences):
            option = occurrence.option
            if option.matches(name, MatchCriterion.LONG) or option.matches(name, MatchCriterion.SHORT):
                return occurrence
        return None

    def get(self, name: str) -> OptionValue:
        """Return the last value of the option named ``name`` or ``None``."""

        occurrence = self.lookup(name)
        return None if occurrence is None else occurrence.value


class Scanner:
    """Walk a command line and retrieve option values.

    Option processing stops at ``--`` or at the first positional argument.
    Options not given on the command line then fall back to their
    environment variable, and finally to their default value.
    """

    def __init__(self, options: OptionSet) -> None:
        self._options = options

    @property
    def options(self) -> OptionSet:
        """Return the option set this scanner matches against."""

        return self._options

    def scan(self, argv: Sequence[str], environ: Mapping[str, str] | None = None) -> ScanResult:
        """Scan ``argv`` and return the retrieved values and errors.

        Args:
            argv: Command-line arguments, program name excluded.
            environ: Environment mapping; defaults to :data:`os.environ`.

        Returns:
            ScanResult: Values, collected errors and positional arguments.
        """

        result = ScanResult()
        traversal = TraversalPass()
        tokens = deque(argv)
        while tokens:
            token = tokens.popleft()
            if token == _END_OF_OPTIONS:
                break
            if token.startswith("--"):
                self._scan_long(token, tokens, result, traversal)
            elif token == "-":
                if not self._scan_bare_dash(tokens, result, traversal):
                    result.arguments.append(token)
                    break
            elif token.startswith("-"):
                self._scan_minus(token, tokens, result, traversal)
            elif token.startswith("+") and len(token) > 1:
                self._scan_plus(token, result, traversal)
            else:
                result.arguments.append(token)
                break
        result.arguments.extend(tokens)
        self._fill_from_environment(environ, result, traversal)
        self._fill_defaults(result, traversal)
        LOGGER.debug(
            "scanned %d tokens: %d values, %d errors",
            len(argv),
            len(result.occurrences),
            len(result.errors),
        )
        return result

    def _scan_long(
        self,
        token: str,
        tokens: deque[str],
        result: ScanResult,
        traversal: TraversalPass,
    ) -> None:
        name, separator, value = token[2:].partition("=")
        resolved = self._options.resolve_long(name)
        if resolved is None:
            result.errors.append(UnknownOptionError(token))
            return
        if isinstance(resolved, AmbiguousOptionError):
            result.errors.append(resolved)
            return
        raw_value = value if separator else self._detached_value(resolved, tokens)
        matched_name = resolved.long_name or name
        self._record(resolved, matched_name, resolved.convert_value(matched_name, raw_value), result, traversal)

    def _scan_bare_dash(self, tokens: deque[str], result: ScanResult, traversal: TraversalPass) -> bool:
        option = self._options.find("", MatchCriterion.SHORT)
        if option is None:
            return False
        raw_value = self._detached_value(option, tokens)
        self._record(option, "", option.convert_value("", raw_value), result, traversal)
        return True

    def _scan_minus(
        self,
        token: str,
        tokens: deque[str],
        result: ScanResult,
        traversal: TraversalPass,
    ) -> None:
        body = token[1:]
        option = self._options.find(body, MatchCriterion.SHORT)
        if option is not None:
            raw_value = self._detached_value(option, tokens)
            self._record(option, body, option.convert_value(body, raw_value), result, traversal)
            return

        sticky = self._options.find_sticky(body)
        if sticky is not None:
            option, value = sticky
            name = option.short_name or body
            LOGGER.debug("sticky value %r for %r", value, option)
            self._record(option, name, option.convert_value(name, value), result, traversal)
            return

        pack = self._decompose_minus_pack(body)
        if pack is None:
            result.errors.append(UnknownOptionError(token))
            return
        for char, option, attached in pack:
            raw_value = attached
            if attached == "":
                raw_value = self._detached_value(option, tokens)
            self._record(option, char, option.convert_value(char, raw_value), result, traversal)

    def _decompose_minus_pack(self, body: str) -> list[tuple[str, Option, str | None]] | None:
        """Split ``body`` into pack members, or return ``None`` when it is not a pack.

        Every character must be minus-pack eligible, except that an option
        with a required argument may end the pack; the characters after it
        form its value, an empty string meaning the next token.
        """

        members: list[tuple[str, Option, str | None]] = []
        for index, char in enumerate(body):
            option = self._options.minus_pack_option(char)
            if option is not None:
                members.append((char, option, None))
                continue
            option = self._options.find(char, MatchCriterion.SHORT)
            if isinstance(option, ValuedOption) and option.argument_required and index > 0:
                members.append((char, option, body[index + 1 :]))
                return members
            return None
        return members

    def _scan_plus(self, token: str, result: ScanResult, traversal: TraversalPass) -> None:
        body = token[1:]
        option = self._options.find(body, MatchCriterion.SHORT)
        if isinstance(option, Switch):
            self._record(option, body, option.convert_negated(body), result, traversal)
            return

        switches: list[tuple[str, Switch]] = []
        for char in body:
            candidate = self._options.plus_pack_option(char)
            if not isinstance(candidate, Switch):
                result.errors.append(UnknownOptionError(token))
                return
            switches.append((char, candidate))
        for char, switch in switches:
            self._record(switch, char, switch.convert_negated(char), result, traversal)

    @staticmethod
    def _detached_value(option: Option, tokens: deque[str]) -> str | None:
        if isinstance(option, ValuedOption) and option.argument_required and tokens:
            return tokens.popleft()
        return None

    @staticmethod
    def _record(
        option: Option,
        name: str,
        conversion: ConversionResult,
        result: ScanResult,
        traversal: TraversalPass,
    ) -> None:
        """Store ``conversion`` and mark ``option`` as given on the command line.

        Errors are marked too, so the environment and default fallbacks never
        fill in an option the user typed. A flag given an extra argument is
        still present; the error is kept for the caller to judge.
        """

        traversal.next_option(option)
        if isinstance(conversion, ParseError):
            LOGGER.debug("parse error for %r: %s", option, conversion)
            result.errors.append(conversion)
            if not (isinstance(conversion, ExtraArgumentError) and isinstance(option, Flag)):
                return
            conversion = Retrieved(True, ValueSource.COMMANDLINE)
        result.occurrences.append(Occurrence(option, name, conversion))

    def _fill_from_environment(
        self,
        environ: Mapping[str, str] | None,
        result: ScanResult,
        traversal: TraversalPass,
    ) -> None:
        for option in self._options:
            if option.env_var is None or traversal.traversed(option):
                continue
            retrieved = option.convert_environment(environ)
            if retrieved is not None and traversal.next_option(option) is not None:
                result.occurrences.append(Occurrence(option, option.env_var, retrieved))

    def _fill_defaults(self, result: ScanResult, traversal: TraversalPass) -> None:
        for option in traversal.unvisited(self._options):
            if isinstance(option, ValuedOption) and option.default_value is not None:
                retrieved = Retrieved(option.default_value, ValueSource.DEFAULT)
                result.occurrences.append(Occurrence(option, option.name, retrieved))


__all__ = ["Occurrence", "ScanResult", "Scanner"]
