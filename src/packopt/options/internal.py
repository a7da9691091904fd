# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Privileged construction of options living in the reserved namespace."""

from __future__ import annotations

from typing import TypeVar

from .base import RESERVED_ENV_PREFIX, RESERVED_LONG_PREFIX, Option

OptionT = TypeVar("OptionT", bound=Option)


def make_internal(
    kind: type[OptionT],
    *,
    long_name: str,
    env_var: str | None = None,
    **attributes: object,
) -> OptionT:
    """Build a library-owned option of ``kind``.

    The long name gains the ``packopt-`` prefix and the environment variable
    the ``PACKOPT_`` prefix. The reserved-name check that rejects such names on
    user options is skipped.

    Args:
        kind: Concrete option class to instantiate.
        long_name: Long name without the reserved prefix, e.g. ``help``.
        env_var: Environment variable name without the reserved prefix.
        **attributes: Remaining constructor attributes for ``kind``.

    Returns:
        OptionT: Internal option flagged with :attr:`Option.internal`.
    """

    option = kind.__new__(kind)
    option._setup(
        long_name=f"{RESERVED_LONG_PREFIX}{long_name}",
        env_var=None if env_var is None else f"{RESERVED_ENV_PREFIX}{env_var}",
        internal=True,
        **attributes,
    )
    return option


__all__ = ["make_internal"]
