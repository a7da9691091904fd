# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application for checking option definitions and scanning command lines."""

from __future__ import annotations

import logging
from pathlib import Path

import typer
from rich import box
from rich.logging import RichHandler
from rich.table import Table
from rich.text import Text

from ..config import load_option_set
from ..errors import ConfigurationError, ExtraArgumentError
from ..options import Option, ValuedOption
from ..registry import OptionSet
from ..scanner import Scanner, ScanResult
from .shared import CLIError, CLILogger, build_cli_logger

app = typer.Typer(
    help="Inspect option definitions and scan command lines against them.",
    add_completion=False,
    no_args_is_help=True,
)

_PASSTHROUGH = {"allow_extra_args": True, "ignore_unknown_options": True}


def _configure_logging(debug: bool) -> None:
    if not debug:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        handlers=[RichHandler(show_time=False, show_path=False)],
        force=True,
    )


def _load(definitions: Path, *, builtins: bool, logger: CLILogger) -> OptionSet:
    try:
        option_set = load_option_set(definitions, builtins=builtins)
    except ConfigurationError as exc:
        raise CLIError(str(exc)) from exc
    logger.debug(f"loaded {len(option_set)} options from {definitions}")
    return option_set


def _argument_column(option: Option) -> str:
    if not isinstance(option, ValuedOption):
        return "-"
    if option.argument_required:
        return option.argument_name
    return f"[{option.argument_name}]"


def _options_table(option_set: OptionSet, *, color: bool) -> Table:
    table = Table(title="Options", box=box.SIMPLE_HEAVY if color else box.SIMPLE)
    table.add_column("Kind", style="bold")
    table.add_column("Short")
    table.add_column("Long")
    table.add_column("Argument")
    table.add_column("Default")
    table.add_column("Env")
    table.add_column("Description", overflow="fold")
    for option in option_set:
        default = option.default_value if isinstance(option, ValuedOption) else None
        table.add_row(
            *(
                Text(cell)
                for cell in (
                    option.kind.value,
                    "-" if option.short_name is None else f"-{option.short_name}",
                    "-" if option.long_name is None else f"--{option.long_name}",
                    _argument_column(option),
                    default or "-",
                    option.env_var or "-",
                    option.description or "-",
                )
            ),
        )
    return table


def _values_table(result: ScanResult, *, color: bool) -> Table:
    table = Table(title="Values", box=box.SIMPLE_HEAVY if color else box.SIMPLE)
    table.add_column("Option", style="bold")
    table.add_column("Matched as")
    table.add_column("Source")
    table.add_column("Value", overflow="fold")
    for occurrence in result.occurrences:
        table.add_row(
            Text(occurrence.option.display_names),
            Text(occurrence.name or "-"),
            occurrence.source.value,
            Text(repr(occurrence.value)),
        )
    return table


@app.command("check")
def check(
    definitions: Path = typer.Argument(..., help="TOML file with [[option]] tables."),
    builtins: bool = typer.Option(False, "--builtins", help="Include the built-in options."),
    emoji: bool = typer.Option(True, "--emoji/--no-emoji", help="Decorate messages with emoji."),
    color: bool = typer.Option(True, "--color/--no-color", help="Colour console output."),
    debug: bool = typer.Option(False, "--debug", help="Log definition loading and scanning."),
) -> None:
    """Validate option definitions and list the resulting options."""

    _configure_logging(debug)
    logger = build_cli_logger(emoji=emoji, color=color, debug=debug)
    try:
        option_set = _load(definitions, builtins=builtins, logger=logger)
    except CLIError as exc:
        logger.fail(str(exc))
        raise typer.Exit(code=exc.exit_code) from exc
    logger.console.print(_options_table(option_set, color=color))
    logger.ok(f"{len(option_set)} options defined")


@app.command("parse", context_settings=_PASSTHROUGH)
def parse(
    ctx: typer.Context,
    definitions: Path = typer.Argument(..., help="TOML file with [[option]] tables."),
    builtins: bool = typer.Option(False, "--builtins", help="Include the built-in options."),
    emoji: bool = typer.Option(True, "--emoji/--no-emoji", help="Decorate messages with emoji."),
    color: bool = typer.Option(True, "--color/--no-color", help="Colour console output."),
    debug: bool = typer.Option(False, "--debug", help="Log definition loading and scanning."),
) -> None:
    """Scan the arguments following ``--`` against the option definitions.

    Extra arguments given to flags are reported as warnings; every other
    parse error makes the command fail.
    """

    _configure_logging(debug)
    logger = build_cli_logger(emoji=emoji, color=color, debug=debug)
    try:
        option_set = _load(definitions, builtins=builtins, logger=logger)
    except CLIError as exc:
        logger.fail(str(exc))
        raise typer.Exit(code=exc.exit_code) from exc

    result = Scanner(option_set).scan(list(ctx.args))
    if result.occurrences:
        logger.console.print(_values_table(result, color=color))
    if result.arguments:
        logger.echo(f"arguments: {' '.join(result.arguments)}")
    fatal = False
    for error in result.errors:
        if isinstance(error, ExtraArgumentError):
            logger.warn(str(error))
            continue
        logger.fail(str(error))
        fatal = True
    if fatal:
        raise typer.Exit(code=1)
    logger.ok("command line accepted")


__all__ = ["app"]
