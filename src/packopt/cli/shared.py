# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared utilities for CLI commands (logging, errors)."""

from __future__ import annotations

from dataclasses import dataclass

import typer
from rich.console import Console
from rich.text import Text

from ..logging import fail as core_fail
from ..logging import ok as core_ok
from ..logging import warn as core_warn


class CLIError(RuntimeError):
    """Error raised when a CLI command fails and should exit with a status code."""

    def __init__(self, message: str, *, exit_code: int = 1) -> None:
        """Initialise the error with a message and exit code.

        Args:
            message: Human-readable error message shown to the user.
            exit_code: Exit status associated with the failure.
        """

        super().__init__(message)
        self.exit_code = exit_code


@dataclass(slots=True)
class CLILogger:
    """Adapter around the console helpers respecting CLI presentation settings."""

    console: Console
    use_emoji: bool
    use_color: bool
    debug_enabled: bool = False

    def fail(self, message: str) -> None:
        """Emit ``message`` as an error."""

        core_fail(message, use_emoji=self.use_emoji, use_color=self.use_color)

    def warn(self, message: str) -> None:
        """Emit ``message`` as a warning."""

        core_warn(message, use_emoji=self.use_emoji, use_color=self.use_color)

    def ok(self, message: str) -> None:
        """Emit ``message`` as a success."""

        core_ok(message, use_emoji=self.use_emoji, use_color=self.use_color)

    def echo(self, message: str) -> None:
        """Write ``message`` to stdout using Typer's echo helper."""

        typer.echo(message)

    def debug(self, message: str) -> None:
        """Emit ``message`` prefixed with ``[debug]`` when debug output is enabled."""

        if self.debug_enabled:
            text = Text("[debug] ", style="bold cyan")
            text.append(message, style="dim")
            self.console.print(text)


def build_cli_logger(*, emoji: bool, color: bool = True, debug: bool = False) -> CLILogger:
    """Return a ``CLILogger`` configured for the provided preferences.

    Args:
        emoji: Whether log output may include emoji glyphs.
        color: Whether terminal colour output is allowed.
        debug: Whether debug logging should be enabled.

    Returns:
        CLILogger: Logger instance bound to a dedicated Rich console.
    """

    console = Console(no_color=not color, highlight=False, soft_wrap=True)
    return CLILogger(console=console, use_emoji=emoji, use_color=color, debug_enabled=debug)


__all__ = ["CLIError", "CLILogger", "build_cli_logger"]
