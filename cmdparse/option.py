# Cmdparse Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `OptionSpec`, the immutable description of one declared option, and
the handles returned to callers at registration time.

An option is identified by an optional long name and an optional short name;
at least one must be present. Its `index` points at the result slot allocated
for it in the owning scope's `ResultStore`.

Handles:
- `OptionHandle(context_id, scope, index)`: refers to one option's result slot.
- `CommandHandle(context_id, name)`: refers to a command's "was selected" flag.

Handles are plain, hashable tuples. Indices are assigned sequentially and are
never reused, so a handle stays valid while more options are registered.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple

from cmdparse.exceptions import InvalidDefinitionError
from cmdparse.flags import OptionFlag

MIN_ALIGN = 15


class OptionHandle(NamedTuple):
    """Opaque reference to an option's result slot."""

    context_id: int
    scope: str
    index: int


class CommandHandle(NamedTuple):
    """Opaque reference to a command's selection flag."""

    context_id: int
    name: str


def validate_long_name(name: str) -> str:
    if not isinstance(name, str):
        raise InvalidDefinitionError(f"Long name {name!r} must be a string")
    if len(name) < 2:
        raise InvalidDefinitionError(
            f"Long name '{name}' must be at least 2 characters long"
        )
    if name.startswith("-"):
        raise InvalidDefinitionError(
            f"Long name '{name}' must be given without its leading dashes"
        )
    if "=" in name or any(char.isspace() for char in name):
        raise InvalidDefinitionError(
            f"Long name '{name}' cannot contain '=' or whitespace"
        )
    return name


def validate_short_name(name: str) -> str:
    if not isinstance(name, str):
        raise InvalidDefinitionError(f"Short name {name!r} must be a string")
    if len(name) != 1:
        raise InvalidDefinitionError(
            f"Short name '{name}' must be exactly one character"
        )
    if name == "-" or name.isspace():
        raise InvalidDefinitionError(f"Short name '{name}' is not a valid option name")
    return name


@dataclass(frozen=True)
class OptionSpec:
    """
    Represents a declared command-line option.

    Attributes:
        long_name (str | None): Name used as `--long_name`.
        short_name (str | None): Single character used as `-s`.
        description (str | None): Help text for the option.
        flags (OptionFlag): Behaviour flags.
        index (int): Result slot index in the owning scope.
    """

    long_name: str | None
    short_name: str | None
    description: str | None = None
    flags: OptionFlag = OptionFlag.DEFAULTS
    index: int = -1

    def __post_init__(self) -> None:
        if self.long_name is None and self.short_name is None:
            raise InvalidDefinitionError("An option needs either a short or a long name")
        if self.long_name is not None:
            validate_long_name(self.long_name)
        if self.short_name is not None:
            validate_short_name(self.short_name)

    def has_flag(self, flags: OptionFlag) -> bool:
        return bool(self.flags & flags)

    @property
    def takes_arg(self) -> bool:
        return self.has_flag(OptionFlag.TAKES_ARG)

    @property
    def takes_optional_arg(self) -> bool:
        return self.has_flag(OptionFlag.TAKES_OPTIONAL_ARG)

    @property
    def takes_value(self) -> bool:
        return self.has_flag(OptionFlag.TAKES_ARG | OptionFlag.TAKES_OPTIONAL_ARG)

    @property
    def unique(self) -> bool:
        return self.has_flag(OptionFlag.UNIQUE)

    @property
    def hidden(self) -> bool:
        return self.has_flag(OptionFlag.HIDDEN)

    @property
    def display_name(self) -> str:
        """Return the option as it would be typed, preferring the long form."""
        if self.long_name is not None:
            return f"--{self.long_name}"
        return f"-{self.short_name}"

    @property
    def label_width(self) -> int:
        """Width this option requires in the help label column."""
        if self.long_name is None:
            return MIN_ALIGN
        return MIN_ALIGN + len(self.long_name)

    def get_label(self, alignment: int) -> str:
        """
        Get the left help column for this option, padded to `alignment`.

        Examples:
            -a,     --all
            -m argument,
                    --output=argument
            -l,     --level[=argument]
        """
        label = ""
        if self.short_name is not None:
            label += f"-{self.short_name}"
            if self.long_name is None:
                if self.takes_optional_arg:
                    label += " [argument]"
                elif self.takes_arg:
                    label += " argument"
            label += ",     "
        else:
            label += " " * 8
        if self.long_name is not None:
            label += f"--{self.long_name}"
            if self.takes_optional_arg:
                label += "[=argument]"
            elif self.takes_arg:
                label += "=argument"
        return f"{label:<{alignment + 8}}"

    def __str__(self) -> str:
        names = [
            name
            for name in (
                f"-{self.short_name}" if self.short_name else None,
                f"--{self.long_name}" if self.long_name else None,
            )
            if name
        ]
        return f"OptionSpec({'/'.join(names)}, flags={self.flags!r})"
