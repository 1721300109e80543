# Cmdparse Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by cmdparse.

Definition errors are raised while options and commands are being declared,
validation errors are raised by `Context.validate()` when the argument vector
does not match the declared grammar, and conversion errors are raised by the
accessors when a captured value cannot be turned into the requested type.

All exceptions inherit from `CmdParseError`, the base exception for the library.

Exception Hierarchy:
- CmdParseError
    ├── DefinitionError
    │   ├── InvalidDefinitionError
    │   └── DuplicateNameError
    ├── ValidationError
    │   ├── UnknownOptionError
    │   ├── MissingArgumentError
    │   ├── DuplicateOptionError
    │   ├── UnexpectedArgumentError
    │   └── UnexpectedCommandError
    ├── TypeConversionError
    └── ConfigError

A validation error always ends the current `validate()` call. Callers are
expected to print the help text annotated with the error message and exit.
"""


class CmdParseError(Exception):
    """Base exception for cmdparse."""


class DefinitionError(CmdParseError):
    """Exception raised when an option or command is declared incorrectly."""


class InvalidDefinitionError(DefinitionError):
    """Exception raised when an option has no name, or a name or flag set is malformed."""


class DuplicateNameError(DefinitionError):
    """Exception raised when a name is already registered in the same scope."""


class ValidationError(CmdParseError):
    """Exception raised when the input arguments don't match the declared grammar."""

    def __init__(self, message: str, name: str = "") -> None:
        super().__init__(message)
        self.message = message
        self.name = name


class UnknownOptionError(ValidationError):
    """Exception raised when a flag does not match any option of the active scope."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Invalid option : {name}.", name)


class MissingArgumentError(ValidationError):
    """Exception raised when an option taking a value is not followed by one."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Missing argument for option : {name}", name)


class DuplicateOptionError(ValidationError):
    """Exception raised when a unique option is given more than once."""

    def __init__(self, name: str) -> None:
        super().__init__(f"The option : {name} was given more than once", name)


class UnexpectedArgumentError(ValidationError):
    """Exception raised when an anonymous argument precedes an option or command."""

    def __init__(self, value: str) -> None:
        super().__init__(f"Unexpected argument : {value}.", value)


class UnexpectedCommandError(ValidationError):
    """Exception raised when a command is invoked more than once."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unexpected command : {name}", name)


class TypeConversionError(CmdParseError):
    """Exception raised when a captured value cannot be converted to the requested type."""


class ConfigError(CmdParseError):
    """Exception raised when a definition file cannot be loaded."""
