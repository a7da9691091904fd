# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Option set definitions loaded from TOML documents."""

from __future__ import annotations

import logging
import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Final, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from .errors import DefinitionError
from .options import OPTION_CLASSES, ArgumentType, Option, OptionKind
from .registry import OptionSet
from .vocabulary import SwitchStyle

LOGGER = logging.getLogger(__name__)

OPTION_TABLE_KEY: Final[str] = "option"
_VALUED_FIELDS: Final[tuple[str, ...]] = ("argument_name", "argument_type", "default_value")


class OptionDefinition(BaseModel):
    """Declarative description of one option.

    Keys use the dashed spelling in TOML (``short-name``) and may also be
    given with underscores.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    kind: Literal["flag", "switch", "stropt"]
    short_name: str | None = Field(default=None, alias="short-name")
    long_name: str | None = Field(default=None, alias="long-name")
    description: str = ""
    env_var: str | None = Field(default=None, alias="env-var")
    argument_name: str | None = Field(default=None, alias="argument-name")
    argument_type: ArgumentType | None = Field(default=None, alias="argument-type")
    default_value: str | None = Field(default=None, alias="default-value")
    argument_style: SwitchStyle | None = Field(default=None, alias="argument-style")

    @model_validator(mode="after")
    def _check_kind_fields(self) -> OptionDefinition:
        """Reject attributes the option kind does not understand.

        Returns:
            OptionDefinition: The validated definition.

        Raises:
            ValueError: If a field is set that ``kind`` does not accept.
        """

        if self.kind == OptionKind.FLAG.value:
            present = [name for name in _VALUED_FIELDS if getattr(self, name) is not None]
            if present:
                raise ValueError(f"flag options do not accept {', '.join(present)}")
        if self.kind != OptionKind.SWITCH.value and self.argument_style is not None:
            raise ValueError("argument-style only applies to switch options")
        if self.kind == OptionKind.SWITCH.value and self.default_value is not None:
            raise ValueError("switch options do not accept default-value")
        return self

    def build(self) -> Option:
        """Instantiate the option described by this definition.

        Returns:
            Option: Concrete option.

        Raises:
            ConfigurationError: If the option violates a naming or argument invariant.
        """

        attributes: dict[str, Any] = self.model_dump(exclude={"kind"}, exclude_none=True)
        option_class = OPTION_CLASSES[OptionKind(self.kind)]
        return option_class(**attributes)


class OptionSetDefinition(BaseModel):
    """Top-level document holding an ordered list of option definitions."""

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    options: tuple[OptionDefinition, ...] = Field(default=(), alias=OPTION_TABLE_KEY)

    def build(self, *, builtins: bool = False) -> OptionSet:
        """Return an option set holding every defined option.

        Args:
            builtins: Whether to include the library's internal options.

        Returns:
            OptionSet: Option set in definition order.

        Raises:
            ConfigurationError: If an option is invalid or two options clash.
        """

        option_set = OptionSet(definition.build() for definition in self.options)
        return option_set.with_builtins() if builtins else option_set


def parse_definitions(document: Mapping[str, Any]) -> OptionSetDefinition:
    """Validate a decoded definition document.

    Args:
        document: Mapping decoded from TOML (or any equivalent source).

    Returns:
        OptionSetDefinition: Validated definitions.

    Raises:
        DefinitionError: If the document does not describe valid options.
    """

    try:
        return OptionSetDefinition.model_validate(document)
    except ValidationError as exc:
        raise DefinitionError(f"invalid option definitions: {exc}") from exc


def load_definitions(path: Path) -> OptionSetDefinition:
    """Read and validate the option definitions stored at ``path``.

    Args:
        path: TOML document with one ``[[option]]`` table per option.

    Returns:
        OptionSetDefinition: Validated definitions.

    Raises:
        DefinitionError: If the file cannot be read, decoded or validated.
    """

    try:
        with path.open("rb") as handle:
            document = tomllib.load(handle)
    except OSError as exc:
        raise DefinitionError(f"cannot read {path}: {exc.strerror or exc}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise DefinitionError(f"{path} is not valid TOML: {exc}") from exc
    LOGGER.debug("loaded %d option definitions from %s", len(document.get(OPTION_TABLE_KEY, ())), path)
    return parse_definitions(document)


def load_option_set(path: Path, *, builtins: bool = False) -> OptionSet:
    """Return the option set defined in the TOML file at ``path``."""

    return load_definitions(path).build(builtins=builtins)


__all__ = [
    "OptionDefinition",
    "OptionSetDefinition",
    "load_definitions",
    "load_option_set",
    "parse_definitions",
]
