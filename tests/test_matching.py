# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for name matching, sticky arguments and pack eligibility."""

from __future__ import annotations

import pytest

from packopt import Flag, MatchCriterion, StrOpt, Switch


def test_exact_matches_are_case_sensitive(verbose: Flag) -> None:
    assert verbose.matches("v", MatchCriterion.SHORT)
    assert verbose.matches("verbose", MatchCriterion.LONG)
    assert not verbose.matches("V", MatchCriterion.SHORT)
    assert not verbose.matches("Verbose", MatchCriterion.LONG)
    assert not verbose.matches("verbose", MatchCriterion.SHORT)


def test_partial_matches_long_name_prefixes_only(verbose: Flag) -> None:
    assert verbose.matches("ver", MatchCriterion.PARTIAL)
    assert verbose.matches("verbose", MatchCriterion.PARTIAL)
    assert not verbose.matches("verbosely", MatchCriterion.PARTIAL)
    assert not verbose.matches("", MatchCriterion.PARTIAL)


def test_partial_never_abbreviates_short_names() -> None:
    option = StrOpt(short_name="out")

    assert not option.matches("o", MatchCriterion.PARTIAL)


def test_stropt_matches_sticky_value(output: StrOpt) -> None:
    assert output.matches_sticky("oVALUE") == "VALUE"
    assert output.matches_sticky("xVALUE") is None


def test_multi_character_short_name_sticky() -> None:
    option = StrOpt(short_name="mx")

    assert option.matches_sticky("mx42") == "42"
    assert option.matches_sticky("m42") is None


def test_option_without_short_name_never_sticks() -> None:
    assert StrOpt(long_name="output").matches_sticky("output") is None


def test_flag_and_switch_never_match_sticky(verbose: Flag, color: Switch) -> None:
    assert verbose.matches_sticky("vVALUE") is None
    assert color.matches_sticky("cyes") is None


def test_flag_minus_char() -> None:
    assert Flag(short_name="f").minus_char() == "f"
    assert Flag(short_name="ff").minus_char() is None
    assert Flag(long_name="force").minus_char() is None


def test_required_stropt_is_excluded_from_minus_packs() -> None:
    assert StrOpt(short_name="o", argument_type="required").minus_char() is None
    assert StrOpt(short_name="o", argument_type="optional").minus_char() == "o"


def test_switch_plus_char_mirrors_minus_char() -> None:
    switch = Switch(short_name="b")

    assert switch.minus_char() == "b"
    assert switch.plus_char() == switch.minus_char()


@pytest.mark.parametrize("argument_type", ["required", "optional"])
def test_stropt_and_flag_never_join_plus_packs(argument_type: str) -> None:
    assert StrOpt(short_name="o", argument_type=argument_type).plus_char() is None
    assert Flag(short_name="f").plus_char() is None


def test_required_switch_leaves_both_packs() -> None:
    switch = Switch(short_name="b", argument_type="required")

    assert switch.minus_char() is None
    assert switch.plus_char() is None
