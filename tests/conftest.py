# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from packopt import Flag, OptionSet, StrOpt, Switch


@pytest.fixture
def verbose() -> Flag:
    """Return a flag spelled ``-v`` / ``--verbose``."""
    return Flag(short_name="v", long_name="verbose", description="Be chatty.")


@pytest.fixture
def output() -> StrOpt:
    """Return a string option spelled ``-o`` / ``--output`` with a required argument."""
    return StrOpt(short_name="o", long_name="output", argument_type="required", argument_name="FILE")


@pytest.fixture
def color() -> Switch:
    """Return a switch spelled ``-c`` / ``--color`` bound to ``APP_COLOR``."""
    return Switch(short_name="c", long_name="color", env_var="APP_COLOR")


@pytest.fixture
def option_set(verbose: Flag, output: StrOpt, color: Switch) -> OptionSet:
    """Return an option set holding the verbose, output and color options."""
    return OptionSet([verbose, output, color])


@pytest.fixture
def definitions_file(tmp_path: Path) -> Path:
    """Write a small option definition document and return its path."""
    path = tmp_path / "options.toml"
    path.write_text(
        """
[[option]]
kind = "flag"
short-name = "v"
long-name = "verbose"
description = "Be chatty."

[[option]]
kind = "stropt"
short-name = "o"
long-name = "output"
argument-name = "FILE"
env-var = "APP_OUTPUT"

[[option]]
kind = "switch"
short-name = "c"
long-name = "color"
argument-style = "on/off"
""".strip(),
        encoding="utf-8",
    )
    return path
