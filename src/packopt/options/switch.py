# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Boolean options with an optional yes/no argument."""

from __future__ import annotations

from collections.abc import Mapping
from typing import final

from ..errors import ConfigurationError, InvalidArgumentError
from ..retrieval import ConversionResult, Retrieved, ValueSource
from ..vocabulary import DEFAULT_VOCABULARY, BooleanVocabulary, SwitchStyle
from .base import ArgumentType, OptionKind, ValuedOption


@final
class Switch(ValuedOption):
    """A boolean option.

    ``--color`` or ``-c`` turns the switch on, ``--color=no`` or ``+c`` turns
    it off. The accepted words come from a :class:`BooleanVocabulary`; the
    :class:`SwitchStyle` only decides which pair is advertised.
    """

    __slots__ = ("_style", "_vocabulary")

    kind = OptionKind.SWITCH
    default_argument_type = ArgumentType.OPTIONAL

    def __init__(
        self,
        *,
        short_name: str | None = None,
        long_name: str | None = None,
        description: str = "",
        env_var: str | None = None,
        argument_name: str | None = None,
        argument_type: ArgumentType | str | None = None,
        argument_style: SwitchStyle | str = SwitchStyle.YES_NO,
        vocabulary: BooleanVocabulary = DEFAULT_VOCABULARY,
    ) -> None:
        self._setup(
            short_name=short_name,
            long_name=long_name,
            description=description,
            env_var=env_var,
            argument_name=argument_name,
            argument_type=argument_type,
            argument_style=argument_style,
            vocabulary=vocabulary,
        )

    def _setup(
        self,
        *,
        argument_style: SwitchStyle | str = SwitchStyle.YES_NO,
        vocabulary: BooleanVocabulary = DEFAULT_VOCABULARY,
        **kwargs: object,
    ) -> None:
        style = argument_style
        if not isinstance(style, SwitchStyle):
            style = SwitchStyle.from_raw(style)
        if style is None:
            raise ConfigurationError(f"invalid switch argument style {argument_style!r}")
        self._style = style
        self._vocabulary = vocabulary
        super()._setup(**kwargs)  # type: ignore[arg-type]

    def _default_argument_name(self) -> str:
        """Return the style display name, e.g. ``yes(no)``."""

        return self._style.display_name

    @property
    def argument_style(self) -> SwitchStyle:
        """Return the style advertised for the switch argument.

        Returns:
            SwitchStyle: Style selecting the displayed argument name.
        """

        return self._style

    @property
    def vocabulary(self) -> BooleanVocabulary:
        """Return the words accepted as switch arguments.

        Returns:
            BooleanVocabulary: Vocabulary used by :meth:`convert_value`.
        """

        return self._vocabulary

    def matches_sticky(self, remainder: str) -> str | None:
        """Return ``None``: switches never take a sticky value.

        ``-cyes`` would be indistinguishable from a pack of ``-c``, ``-y``,
        ``-e`` and ``-s``.
        """

        return None

    def plus_char(self) -> str | None:
        """Return the minus-pack character, since a switch may be negated with ``+``."""

        return self.minus_char()

    def convert_value(self, matched_name: str, raw_value: str | None) -> ConversionResult:
        """Return the boolean denoted by ``raw_value``.

        An absent value turns the switch on.

        Args:
            matched_name: Name under which the switch was recognised.
            raw_value: Attached text, if any.

        Returns:
            ConversionResult: Command-line boolean or :class:`InvalidArgumentError`.
        """

        if raw_value is None:
            return Retrieved(True, ValueSource.COMMANDLINE)
        value = self._vocabulary.lookup(raw_value)
        if value is None:
            return InvalidArgumentError(matched_name, raw_value, self._vocabulary.words)
        return Retrieved(value, ValueSource.COMMANDLINE)

    def convert_negated(self, matched_name: str) -> Retrieved:
        """Return ``False`` for an occurrence in a plus-pack such as ``+c``."""

        return Retrieved(False, ValueSource.COMMANDLINE)

    def convert_environment(self, environ: Mapping[str, str] | None = None) -> Retrieved | None:
        """Return whether the switch's environment variable is set.

        Returns:
            Retrieved | None: ``None`` only when the switch has no variable.
        """

        if self._env_var is None:
            return None
        return Retrieved(self._environment_text(environ) is not None, ValueSource.ENVIRONMENT)


__all__ = ["Switch"]
