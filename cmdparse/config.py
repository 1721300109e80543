# Cmdparse Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Declarative option definitions loaded from YAML or TOML files.

A definition file describes the usage summary, the global options and the
commands of a program:

    usage: "build [options] command [arguments]"
    options:
      - long: verbose
        short: v
        description: Talk more
      - long: output
        short: o
        flags: [arg, unique]
    commands:
      - name: clean
        description: Remove build artefacts
        options:
          - long: all
            short: a

`loader()` validates the file with pydantic and builds a ready-to-validate
`Context`, returning it with a mapping of handles keyed by option key,
command name, and `"<command>.<key>"` for command options.
"""
from __future__ import annotations

from pathlib import Path
from typing import Any, Sequence

import toml
import yaml
from pydantic import BaseModel, Field, field_validator, model_validator
from pydantic import ValidationError as ModelValidationError

from cmdparse.context import Context
from cmdparse.exceptions import ConfigError, DefinitionError
from cmdparse.flags import OptionFlag
from cmdparse.logger import logger
from cmdparse.option import CommandHandle, OptionHandle

Handles = dict[str, OptionHandle | CommandHandle]


class RawOption(BaseModel):
    """Raw option model for definition files."""

    key: str | None = None
    long: str | None = None
    short: str | None = None
    description: str | None = None
    flags: Any = OptionFlag.DEFAULTS

    @field_validator("flags", mode="before")
    @classmethod
    def validate_flags(cls, value: Any) -> OptionFlag:
        try:
            return OptionFlag.coerce(value)
        except DefinitionError as error:
            raise ValueError(str(error)) from error

    @model_validator(mode="after")
    def validate_names(self) -> RawOption:
        if self.long is None and self.short is None:
            raise ValueError("An option needs either a short or a long name")
        if self.key is None:
            self.key = self.long or self.short
        return self


class RawCommand(BaseModel):
    """Raw command model for definition files."""

    name: str
    description: str = ""
    options: list[RawOption] = Field(default_factory=list)


class RawDefinition(BaseModel):
    """Top-level definition file model."""

    usage: str
    options: list[RawOption] = Field(default_factory=list)
    commands: list[RawCommand] = Field(default_factory=list)


def read_definition_file(path: Path) -> dict[str, Any]:
    suffix = path.suffix.lower()
    try:
        with path.open("r", encoding="UTF-8") as config_file:
            if suffix in (".yaml", ".yml"):
                raw = yaml.safe_load(config_file)
            elif suffix == ".toml":
                raw = toml.load(config_file)
            else:
                raise ConfigError(f"Unsupported definition file type: {path.suffix}")
    except OSError as error:
        raise ConfigError(f"Could not read definition file '{path}': {error}") from error
    except (yaml.YAMLError, toml.TomlDecodeError) as error:
        raise ConfigError(f"Could not parse definition file '{path}': {error}") from error

    if not isinstance(raw, dict):
        raise ConfigError(f"Definition file '{path}' must contain a mapping")
    return raw


def load_definition(path: Path | str) -> RawDefinition:
    """
    Load and validate a definition file.

    Raises:
        ConfigError: If the file cannot be read, parsed, or validated.
    """
    path = Path(path)
    raw = read_definition_file(path)
    try:
        definition = RawDefinition.model_validate(raw)
    except ModelValidationError as error:
        raise ConfigError(f"Invalid definition file '{path}':\n{error}") from error
    logger.debug(
        "Loaded definition '%s': %d option(s), %d command(s)",
        path,
        len(definition.options),
        len(definition.commands),
    )
    return definition


def build_context(
    definition: RawDefinition,
    args: Sequence[str] | None = None,
) -> tuple[Context, Handles]:
    """
    Build a `Context` from a validated definition.

    Raises:
        ConfigError: If the definition declares invalid or duplicate names.
    """
    context = Context(definition.usage, args)
    handles: Handles = {}
    try:
        for raw_option in definition.options:
            handles[str(raw_option.key)] = context.add_option(
                raw_option.long, raw_option.short, raw_option.description, raw_option.flags
            )
        for raw_command in definition.commands:
            command_handle, command = context.add_command(
                raw_command.name, raw_command.description
            )
            handles[raw_command.name] = command_handle
            for raw_option in raw_command.options:
                handles[f"{raw_command.name}.{raw_option.key}"] = command.add_option(
                    raw_option.long,
                    raw_option.short,
                    raw_option.description,
                    raw_option.flags,
                )
    except DefinitionError as error:
        raise ConfigError(f"Invalid definition: {error}") from error
    return context, handles


def loader(
    path: Path | str, args: Sequence[str] | None = None
) -> tuple[Context, Handles]:
    """Load a definition file and build its `Context` for `args`."""
    return build_context(load_definition(path), args)
