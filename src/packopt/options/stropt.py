# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Options carrying a free-form string argument."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Final, final

from ..errors import MissingArgumentError
from ..retrieval import ConversionResult, Retrieved, ValueSource
from .base import ArgumentType, OptionKind, ValuedOption

DEFAULT_ARGUMENT_NAME: Final[str] = "STR"


@final
class StrOpt(ValuedOption):
    """An option whose argument is an arbitrary string, e.g. ``-o FILE``."""

    __slots__ = ()

    kind = OptionKind.STROPT

    def __init__(
        self,
        *,
        short_name: str | None = None,
        long_name: str | None = None,
        description: str = "",
        env_var: str | None = None,
        argument_name: str | None = None,
        argument_type: ArgumentType | str | None = None,
        default_value: str | None = None,
    ) -> None:
        self._setup(
            short_name=short_name,
            long_name=long_name,
            description=description,
            env_var=env_var,
            argument_name=argument_name,
            argument_type=argument_type,
            default_value=default_value,
        )

    def _default_argument_name(self) -> str:
        """Return ``STR``."""

        return DEFAULT_ARGUMENT_NAME

    def convert_value(self, matched_name: str, raw_value: str | None) -> ConversionResult:
        """Return ``raw_value`` unchanged, falling back to the default.

        Args:
            matched_name: Name under which the option was recognised.
            raw_value: Attached text, or ``None`` when the argument was omitted.

        Returns:
            ConversionResult: Command-line string; the default value when the
            argument was omitted; ``None`` tagged as a command-line value for
            an omitted optional argument without default; otherwise
            :class:`MissingArgumentError`.
        """

        if raw_value is not None:
            return Retrieved(raw_value, ValueSource.COMMANDLINE)
        if self._default_value is not None:
            return Retrieved(self._default_value, ValueSource.DEFAULT)
        if self.argument_required:
            return MissingArgumentError(matched_name)
        return Retrieved(None, ValueSource.COMMANDLINE)

    def convert_environment(self, environ: Mapping[str, str] | None = None) -> Retrieved | None:
        """Return the text of the option's environment variable, if set."""

        text = self._environment_text(environ)
        if text is None:
            return None
        return Retrieved(text, ValueSource.ENVIRONMENT)


__all__ = ["DEFAULT_ARGUMENT_NAME", "StrOpt"]
