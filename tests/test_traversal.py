# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for per-pass traversal bookkeeping."""

from __future__ import annotations

from packopt import Flag, OptionSet, StrOpt, TraversalPass


def test_next_option_is_one_shot(verbose: Flag) -> None:
    traversal = TraversalPass()

    assert traversal.next_option(verbose) is verbose
    assert traversal.next_option(verbose) is None
    assert traversal.next_option(verbose) is None

    traversal.untraverse(verbose)

    assert traversal.next_option(verbose) is verbose
    assert traversal.next_option(verbose) is None


def test_reset_starts_a_new_pass(verbose: Flag, output: StrOpt) -> None:
    traversal = TraversalPass()
    traversal.next_option(verbose)
    traversal.next_option(output)

    assert len(traversal) == 2

    traversal.reset()

    assert len(traversal) == 0
    assert traversal.next_option(verbose) is verbose


def test_passes_are_independent(verbose: Flag) -> None:
    first = TraversalPass()
    second = TraversalPass()

    assert first.next_option(verbose) is verbose
    assert second.next_option(verbose) is verbose
    assert first.traversed(verbose)
    assert second.traversed(verbose)


def test_unvisited_skips_produced_options(option_set: OptionSet, verbose: Flag) -> None:
    traversal = TraversalPass()
    traversal.next_option(verbose)

    remaining = list(traversal.unvisited(option_set))

    assert verbose not in remaining
    assert len(remaining) == len(option_set) - 1
    assert list(traversal.unvisited(option_set)) == []
