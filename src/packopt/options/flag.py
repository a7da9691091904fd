# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Options taking no argument."""

from __future__ import annotations

from collections.abc import Mapping
from typing import final

from ..errors import ExtraArgumentError
from ..retrieval import ConversionResult, Retrieved, ValueSource
from .base import Option, OptionKind


@final
class Flag(Option):
    """An option that is either present or absent, e.g. ``-v`` / ``--verbose``."""

    __slots__ = ()

    kind = OptionKind.FLAG

    def __init__(
        self,
        *,
        short_name: str | None = None,
        long_name: str | None = None,
        description: str = "",
        env_var: str | None = None,
    ) -> None:
        self._setup(
            short_name=short_name,
            long_name=long_name,
            description=description,
            env_var=env_var,
        )

    def convert_value(self, matched_name: str, raw_value: str | None) -> ConversionResult:
        """Return ``True`` for the occurrence, or an error when a value is attached.

        Args:
            matched_name: Name under which the flag was recognised.
            raw_value: Attached text, if any.

        Returns:
            ConversionResult: Command-line ``True`` or :class:`ExtraArgumentError`.
        """

        if raw_value:
            return ExtraArgumentError(matched_name, raw_value)
        return Retrieved(True, ValueSource.COMMANDLINE)

    def convert_environment(self, environ: Mapping[str, str] | None = None) -> Retrieved | None:
        """Return ``True`` when the flag's environment variable is set."""

        if self._environment_text(environ) is None:
            return None
        return Retrieved(True, ValueSource.ENVIRONMENT)


__all__ = ["Flag"]
