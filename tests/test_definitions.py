# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests covering option definitions loaded from TOML documents."""

from __future__ import annotations

from pathlib import Path

import pytest

from packopt import ConfigurationError, DefinitionError, Flag, NameClashError, StrOpt, Switch, SwitchStyle
from packopt.config import load_definitions, load_option_set, parse_definitions


def test_load_option_set(definitions_file: Path) -> None:
    option_set = load_option_set(definitions_file)

    verbose, output, color = option_set
    assert isinstance(verbose, Flag)
    assert verbose.description == "Be chatty."
    assert isinstance(output, StrOpt)
    assert output.argument_name == "FILE"
    assert output.env_var == "APP_OUTPUT"
    assert output.argument_required is True
    assert isinstance(color, Switch)
    assert color.argument_style is SwitchStyle.ON_OFF
    assert color.argument_name == "on(off)"


def test_load_option_set_with_builtins(definitions_file: Path) -> None:
    option_set = load_option_set(definitions_file, builtins=True)

    assert len(option_set) == 7
    assert option_set[0].long_name == "packopt-help"


def test_underscore_keys_are_accepted() -> None:
    definitions = parse_definitions(
        {"option": [{"kind": "stropt", "long_name": "level", "argument_type": "optional", "default_value": "info"}]},
    )

    (level,) = definitions.build()
    assert isinstance(level, StrOpt)
    assert level.default_value == "info"
    assert level.argument_required is False


@pytest.mark.parametrize(
    "entry",
    [
        {"kind": "widget", "long-name": "x"},
        {"kind": "flag", "long-name": "x", "argument-name": "VALUE"},
        {"kind": "stropt", "long-name": "x", "argument-style": "on/off"},
        {"kind": "switch", "long-name": "x", "default-value": "yes"},
        {"kind": "stropt", "long-name": "x", "argument-type": "sometimes"},
        {"kind": "flag", "long-name": "x", "colour": "red"},
    ],
)
def test_invalid_entries_are_definition_errors(entry: dict[str, str]) -> None:
    with pytest.raises(DefinitionError):
        parse_definitions({"option": [entry]})


def test_option_invariants_surface_when_building() -> None:
    definitions = parse_definitions({"option": [{"kind": "flag", "long-name": ""}]})

    with pytest.raises(ConfigurationError, match="cannot be empty"):
        definitions.build()


def test_clashing_definitions() -> None:
    definitions = parse_definitions(
        {
            "option": [
                {"kind": "flag", "short-name": "v", "long-name": "verbose"},
                {"kind": "flag", "short-name": "v", "long-name": "version"},
            ],
        },
    )

    with pytest.raises(NameClashError):
        definitions.build()


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(DefinitionError, match="cannot read"):
        load_definitions(tmp_path / "absent.toml")


def test_malformed_toml(tmp_path: Path) -> None:
    path = tmp_path / "broken.toml"
    path.write_text("[[option]\nkind = ", encoding="utf-8")

    with pytest.raises(DefinitionError, match="not valid TOML"):
        load_definitions(path)
