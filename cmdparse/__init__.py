"""
Cmdparse Option Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging

from .context import Context
from .exceptions import (
    CmdParseError,
    ConfigError,
    DefinitionError,
    DuplicateNameError,
    DuplicateOptionError,
    InvalidDefinitionError,
    MissingArgumentError,
    TypeConversionError,
    UnexpectedArgumentError,
    UnexpectedCommandError,
    UnknownOptionError,
    ValidationError,
)
from .flags import OptionFlag
from .option import CommandHandle, OptionHandle, OptionSpec
from .results import ValueOutcome, ValuesOutcome, ValueStatus
from .scope import Command, OptionScope

logger = logging.getLogger("cmdparse")


__all__ = [
    "Context",
    "Command",
    "OptionScope",
    "OptionFlag",
    "OptionSpec",
    "OptionHandle",
    "CommandHandle",
    "ValueOutcome",
    "ValuesOutcome",
    "ValueStatus",
    "CmdParseError",
    "ConfigError",
    "DefinitionError",
    "DuplicateNameError",
    "DuplicateOptionError",
    "InvalidDefinitionError",
    "MissingArgumentError",
    "TypeConversionError",
    "UnexpectedArgumentError",
    "UnexpectedCommandError",
    "UnknownOptionError",
    "ValidationError",
]
