# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Boolean vocabulary accepted as switch arguments."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Final


class SwitchStyle(str, Enum):
    """Enumerate the yes/no word pairs a switch may advertise."""

    YES_NO = "yes/no"
    ON_OFF = "on/off"
    TRUE_FALSE = "true/false"
    YUP_NOPE = "yup/nope"
    YEAH_NAH = "yeah/nah"

    @classmethod
    def from_raw(cls, raw: str) -> SwitchStyle | None:
        """Return the style matching ``raw`` or ``None``.

        Both the enum value (``"on/off"``) and the member name
        (``"on_off"``, case-insensitive) are recognised.

        Args:
            raw: Style token taken from a definition file or caller.

        Returns:
            SwitchStyle | None: Matching style when recognised; otherwise ``None``.
        """

        try:
            return cls(raw)
        except ValueError:
            return cls.__members__.get(raw.upper().replace("-", "_"))

    @property
    def yes_word(self) -> str:
        """Return the word turning the switch on, e.g. ``yes``."""

        return self.value.split("/", 1)[0]

    @property
    def no_word(self) -> str:
        """Return the word turning the switch off, e.g. ``no``."""

        return self.value.split("/", 1)[1]

    @property
    def display_name(self) -> str:
        """Return the argument display name, e.g. ``yes(no)``."""

        return f"{self.yes_word}({self.no_word})"


@dataclass(frozen=True, slots=True)
class BooleanVocabulary:
    """Words recognised as true or false switch arguments."""

    yes: tuple[str, ...]
    no: tuple[str, ...]

    @classmethod
    def from_styles(cls, styles: tuple[SwitchStyle, ...]) -> BooleanVocabulary:
        """Build a vocabulary accepting the words of every style in ``styles``."""

        return cls(
            yes=tuple(style.yes_word for style in styles),
            no=tuple(style.no_word for style in styles),
        )

    @property
    def words(self) -> tuple[str, ...]:
        """Return every accepted word, true words first."""

        return self.yes + self.no

    def lookup(self, token: str) -> bool | None:
        """Return the boolean denoted by ``token``.

        Matching is case-insensitive. An exact word always wins; otherwise
        ``token`` may abbreviate vocabulary words as long as every word it
        abbreviates has the same polarity.

        Args:
            token: Raw argument text supplied for a switch.

        Returns:
            bool | None: Denoted boolean, or ``None`` when ``token`` is
            unknown or ambiguous.
        """

        folded = token.strip().lower()
        if not folded:
            return None
        if folded in self.yes:
            return True
        if folded in self.no:
            return False
        polarities = {word in self.yes for word in self.words if word.startswith(folded)}
        if len(polarities) == 1:
            return polarities.pop()
        return None


DEFAULT_VOCABULARY: Final[BooleanVocabulary] = BooleanVocabulary.from_styles(tuple(SwitchStyle))

__all__ = ["BooleanVocabulary", "DEFAULT_VOCABULARY", "SwitchStyle"]
