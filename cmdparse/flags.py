# Cmdparse Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `OptionFlag`, the bit set configuring how an option behaves during
validation and how it is displayed in the help text.

Members:
    DEFAULTS: No value, may be repeated, shown in help.
    UNIQUE: Fail validation when the option is given more than once.
    HIDDEN: Accepted on the command line but omitted from the help text.
    TAKES_ARG: Must be followed by a value (`-m value`, `--opt=value`).
    TAKES_OPTIONAL_ARG: Consumes the next token only if it is a bare value.

Supports alias coercion for config-friendly values:
    OptionFlag.coerce("unique")              → OptionFlag.UNIQUE
    OptionFlag.coerce(["arg", "unique"])     → OptionFlag.TAKES_ARG | OptionFlag.UNIQUE
    OptionFlag.coerce("optional")            → OptionFlag.TAKES_OPTIONAL_ARG
"""
from __future__ import annotations

from enum import IntFlag
from typing import Any

from cmdparse.exceptions import InvalidDefinitionError


class OptionFlag(IntFlag):
    """Per-option boolean configuration."""

    DEFAULTS = 0
    UNIQUE = 1 << 0
    HIDDEN = 1 << 1
    TAKES_ARG = 1 << 2
    TAKES_OPTIONAL_ARG = 1 << 3

    @classmethod
    def _get_alias(cls, value: str) -> str:
        aliases = {
            "default": "defaults",
            "none": "defaults",
            "arg": "takes_arg",
            "mandatory": "takes_arg",
            "required": "takes_arg",
            "optional": "takes_optional_arg",
            "optional_arg": "takes_optional_arg",
        }
        return aliases.get(value, value)

    @classmethod
    def coerce(cls, value: Any) -> OptionFlag:
        """
        Convert a flag, int, name or iterable of those into an `OptionFlag`.

        Raises:
            InvalidDefinitionError: If a name is unknown or the combination is invalid.
        """
        if isinstance(value, OptionFlag):
            flags = value
        elif isinstance(value, bool):
            raise InvalidDefinitionError(f"Invalid {cls.__name__}: {value!r}")
        elif isinstance(value, int):
            if value & ~sum(member.value for member in cls):
                raise InvalidDefinitionError(f"Invalid {cls.__name__}: {value!r}")
            flags = cls(value)
        elif isinstance(value, str):
            normalized = value.strip().lower().replace("-", "_")
            alias = cls._get_alias(normalized)
            try:
                flags = cls[alias.upper()]
            except KeyError:
                valid = ", ".join(str(member.name).lower() for member in cls)
                raise InvalidDefinitionError(
                    f"Invalid {cls.__name__}: '{value}'. Must be one of: {valid}"
                ) from None
        elif value is None:
            flags = cls.DEFAULTS
        else:
            try:
                items = list(value)
            except TypeError:
                raise InvalidDefinitionError(
                    f"Invalid {cls.__name__}: {value!r}"
                ) from None
            flags = cls.DEFAULTS
            for item in items:
                flags |= cls.coerce(item)

        if flags & cls.TAKES_ARG and flags & cls.TAKES_OPTIONAL_ARG:
            raise InvalidDefinitionError(
                "An option cannot take both a mandatory and an optional argument"
            )
        return flags
