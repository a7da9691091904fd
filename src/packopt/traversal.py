# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Per-pass bookkeeping of options already produced."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import TypeVar

from .options.base import Option

OptionT = TypeVar("OptionT", bound=Option)


class TraversalPass:
    """Visited set guaranteeing each option is produced at most once per pass.

    Marks are keyed by option identity and belong to the pass, not to the
    options, so independent passes over the same option set do not interfere.
    """

    def __init__(self) -> None:
        self._visited: set[int] = set()

    def next_option(self, option: OptionT) -> OptionT | None:
        """Return ``option`` and mark it, or ``None`` when already marked.

        Args:
            option: Option about to be produced.

        Returns:
            OptionT | None: ``option`` on its first visit in this pass.
        """

        key = id(option)
        if key in self._visited:
            return None
        self._visited.add(key)
        return option

    def untraverse(self, option: Option) -> None:
        """Clear the mark on ``option`` so it can be produced again."""

        self._visited.discard(id(option))

    def traversed(self, option: Option) -> bool:
        """Return ``True`` when ``option`` was already produced in this pass."""

        return id(option) in self._visited

    def reset(self) -> None:
        """Clear every mark, starting a new pass."""

        self._visited.clear()

    def unvisited(self, options: Iterable[OptionT]) -> Iterator[OptionT]:
        """Yield each option of ``options`` not yet produced, marking it."""

        for option in options:
            if self.next_option(option) is not None:
                yield option

    def __len__(self) -> int:
        """Return the number of options marked in this pass."""

        return len(self._visited)


__all__ = ["TraversalPass"]
