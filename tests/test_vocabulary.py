# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the switch boolean vocabulary."""

from __future__ import annotations

import pytest

from packopt import BooleanVocabulary, SwitchStyle
from packopt.vocabulary import DEFAULT_VOCABULARY


@pytest.mark.parametrize(
    ("token", "expected"),
    [
        ("yes", True),
        ("Nope", False),
        ("on", True),
        ("yeah", True),
        ("y", True),
        ("f", False),
        ("of", False),
        ("o", None),
        ("", None),
        ("perhaps", None),
    ],
)
def test_default_vocabulary_lookup(token: str, expected: bool | None) -> None:
    assert DEFAULT_VOCABULARY.lookup(token) is expected


def test_custom_vocabulary() -> None:
    vocabulary = BooleanVocabulary(yes=("ja",), no=("nein",))

    assert vocabulary.lookup("ja") is True
    assert vocabulary.lookup("n") is False
    assert vocabulary.lookup("yes") is None
    assert vocabulary.words == ("ja", "nein")


def test_style_from_raw() -> None:
    assert SwitchStyle.from_raw("true/false") is SwitchStyle.TRUE_FALSE
    assert SwitchStyle.from_raw("yup_nope") is SwitchStyle.YUP_NOPE
    assert SwitchStyle.from_raw("yeah-nah") is SwitchStyle.YEAH_NAH
    assert SwitchStyle.from_raw("maybe") is None


def test_style_display_names() -> None:
    assert [style.display_name for style in SwitchStyle] == [
        "yes(no)",
        "on(off)",
        "true(false)",
        "yup(nope)",
        "yeah(nah)",
    ]
