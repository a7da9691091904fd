# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Behavioural tests for :mod:`packopt.registry`."""

from __future__ import annotations

import pytest

from packopt import AmbiguousOptionError, Flag, MatchCriterion, NameClashError, OptionSet, StrOpt, Switch


def test_option_set_behaves_like_sequence(option_set: OptionSet, verbose: Flag, output: StrOpt) -> None:
    assert len(option_set) == 3
    assert option_set[0] is verbose
    assert option_set[1] is output
    assert list(option_set)[:2] == [verbose, output]


def test_add_rejects_clashing_names(option_set: OptionSet) -> None:
    with pytest.raises(NameClashError):
        option_set.add(Flag(short_name="v", long_name="version"))
    with pytest.raises(NameClashError):
        option_set.add(StrOpt(long_name="output"))

    assert len(option_set) == 3


def test_adding_the_same_option_twice_is_a_no_op(option_set: OptionSet, verbose: Flag) -> None:
    option_set.add(verbose)

    assert len(option_set) == 3


def test_only_one_bare_dash_option() -> None:
    option_set = OptionSet([Flag(short_name="")])

    with pytest.raises(NameClashError):
        option_set.add(StrOpt(short_name="", long_name="input"))


def test_end_to_end_lookup(option_set: OptionSet, verbose: Flag, output: StrOpt) -> None:
    assert option_set.find("v", MatchCriterion.SHORT) is verbose
    assert option_set.find("ver", MatchCriterion.PARTIAL) is verbose
    assert option_set.resolve_long("ver") is verbose
    assert option_set.find_sticky("ooutfile") == (output, "outfile")


def test_resolve_long_prefers_exact_name() -> None:
    exact = Flag(long_name="color")
    longer = Switch(long_name="colorize")
    option_set = OptionSet([longer, exact])

    assert option_set.resolve_long("color") is exact
    assert option_set.resolve_long("colori") is longer


def test_resolve_long_reports_ambiguity() -> None:
    option_set = OptionSet([Flag(long_name="verbose"), Flag(long_name="version")])

    result = option_set.resolve_long("ver")

    assert isinstance(result, AmbiguousOptionError)
    assert result.candidates == ("--verbose", "--version")
    assert option_set.resolve_long("nothing") is None


def test_find_sticky_prefers_longest_short_name() -> None:
    short = StrOpt(short_name="m")
    longer = StrOpt(short_name="mx")
    option_set = OptionSet([short, longer])

    assert option_set.find_sticky("mx42") == (longer, "42")
    assert option_set.find_sticky("m42") == (short, "42")
    assert option_set.find_sticky("z42") is None


def test_pack_lookups(option_set: OptionSet, verbose: Flag, color: Switch) -> None:
    assert option_set.minus_pack_option("v") is verbose
    assert option_set.minus_pack_option("c") is color
    assert option_set.minus_pack_option("o") is None
    assert option_set.plus_pack_option("c") is color
    assert option_set.plus_pack_option("v") is None


def test_with_builtins_adds_internal_options(option_set: OptionSet) -> None:
    extended = option_set.with_builtins()

    long_names = [option.long_name for option in extended]
    assert long_names[:4] == [
        "packopt-help",
        "packopt-version",
        "packopt-highlight",
        "packopt-line-width",
    ]
    assert all(option.internal for option in extended[:4])
    assert len(extended) == len(option_set) + 4
    assert len(option_set) == 3
    assert extended.resolve_long("packopt-he") is extended[0]
    assert isinstance(extended.resolve_long("packopt-h"), AmbiguousOptionError)
