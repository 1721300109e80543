# Cmdparse Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `Context`, the entry point of cmdparse. A context owns
the global options, the declared commands, the token stream built from the
argument vector, and the anonymous arguments left over after validation.

Public Interface:
- `add_option(...)`: Register a global option and get its handle.
- `add_command(...)`: Register a command and get its handle and scope.
- `validate()`: Check the arguments against the declared grammar.
- `get_leftover_args()`: Anonymous arguments, in input order.
- `check / count / take_value / take_values / value_or`: Read results.
- `print_help(...)`: Render the usage text with Rich.

Example Usage:
    ctx = Context("cmdparse [options]", ["-v", "--level=3", "file.txt"])
    verbose = ctx.add_flag("verbose", "v", "Talk more")
    level = ctx.add_option("level", "l", "Log level", OptionFlag.TAKES_ARG)

    try:
        ctx.validate()
    except ValidationError as error:
        ctx.print_help(error.message)
        sys.exit(2)

    ctx.check(verbose)                        # True
    ctx.take_value(level, int).value          # 3
    ctx.get_leftover_args()                   # ["file.txt"]
"""
from __future__ import annotations

import sys
from collections import deque
from itertools import count
from typing import Any, Callable, Sequence, TypeVar

from rich.console import Console

from cmdparse.coerce import coerce_value
from cmdparse.console import console as default_console
from cmdparse.exceptions import (
    DuplicateNameError,
    InvalidDefinitionError,
    ValidationError,
)
from cmdparse.flags import OptionFlag
from cmdparse.help import HelpFormatter
from cmdparse.logger import logger
from cmdparse.option import CommandHandle, OptionHandle, OptionSpec
from cmdparse.results import OptionResult, ValueOutcome, ValuesOutcome, ValueStatus
from cmdparse.scope import GLOBAL_SCOPE, Command, OptionScope
from cmdparse.tokens import Token, tokenize
from cmdparse.validator import Validator

T = TypeVar("T")

_context_ids = count(1)


class Context:
    """
    Top-level parsing context for one program invocation.

    Args:
        description (str): Usage summary shown in the help text.
        args (Sequence[str] | None): Arguments without the program name.
            Defaults to `sys.argv[1:]`.
        console (Console | None): Console used to print help.
    """

    def __init__(
        self,
        description: str,
        args: Sequence[str] | None = None,
        console: Console | None = None,
    ) -> None:
        if args is None:
            args = sys.argv[1:]
        self.context_id: int = next(_context_ids)
        self.raw_args: list[str] = list(args)
        self.scope: OptionScope = OptionScope(
            description, GLOBAL_SCOPE, context_id=self.context_id
        )
        self.commands: dict[str, Command] = {}
        self._tokens: deque[Token] = deque(tokenize(self.raw_args))
        self._leftovers: list[str] = []
        self.validated: bool = False
        self._error: ValidationError | None = None
        self.help_formatter = HelpFormatter(self, console or default_console)

    @property
    def description(self) -> str:
        return self.scope.description

    def add_option(
        self,
        long_name: str | None = None,
        short_name: str | None = None,
        description: str | None = None,
        flags: Any = OptionFlag.DEFAULTS,
    ) -> OptionHandle:
        """
        Specify a valid global option.

        Raises:
            InvalidDefinitionError: If the option has neither a short nor a long name.
            DuplicateNameError: If an option with the same name was already added.
        """
        return self.scope.add_option(long_name, short_name, description, flags)

    def add_long_option(self, name: str, description: str) -> OptionHandle:
        return self.scope.add_long_option(name, description)

    def add_short_option(self, name: str, description: str) -> OptionHandle:
        return self.scope.add_short_option(name, description)

    def add_flag(self, long_name: str, short_name: str, description: str) -> OptionHandle:
        return self.scope.add_flag(long_name, short_name, description)

    def add_command(self, name: str, description: str = "") -> tuple[CommandHandle, Command]:
        """
        Specify a valid command. Use the returned `Command` to add its options.

        Raises:
            InvalidDefinitionError: If the name is empty or looks like an option.
            DuplicateNameError: If a command with the same name was already added.
        """
        if not isinstance(name, str) or not name or name.startswith("-"):
            raise InvalidDefinitionError(f"Invalid command name: {name!r}")
        if name in self.commands:
            raise DuplicateNameError(f"The command '{name}' was already added")
        command = Command(name, description, context_id=self.context_id)
        self.commands[name] = command
        logger.debug("Registered command '%s'", name)
        return command.handle, command

    def add_command_with(
        self,
        name: str,
        description: str,
        configure: Callable[[Command], T],
    ) -> tuple[CommandHandle, T]:
        """Add a command and let `configure` declare its options."""
        handle, command = self.add_command(name, description)
        return handle, configure(command)

    def validate(self) -> None:
        """
        Validate the input arguments against the declared options and commands.

        Raises:
            ValidationError: When the input doesn't match the declared grammar. Later
                calls raise the same error again.
        """
        if self._error is not None:
            raise self._error
        if self.validated:
            logger.debug("Context already validated, ignoring validate()")
            return
        try:
            Validator(
                self.scope, self._tokens, self._leftovers, commands=self.commands
            ).run()
        except ValidationError as error:
            self._error = error
            raise
        self.validated = True
        logger.debug(
            "Validation done: %d leftover argument(s), commands=%s",
            len(self._leftovers),
            [name for name, command in self.commands.items() if command.selected],
        )

    def get_leftover_args(self) -> list[str]:
        """Return the anonymous arguments left after validation."""
        return list(self._leftovers)

    def _resolve(self, handle: OptionHandle) -> tuple[OptionSpec, OptionResult]:
        assert isinstance(handle, OptionHandle), f"Not an option handle: {handle!r}"
        assert (
            handle.context_id == self.context_id
        ), f"Handle {handle!r} belongs to another context"
        if handle.scope == GLOBAL_SCOPE:
            scope = self.scope
        else:
            assert handle.scope in self.commands, f"Unknown command scope: {handle.scope}"
            scope = self.commands[handle.scope]
        assert 0 <= handle.index < len(scope), f"Unknown option handle: {handle!r}"
        return scope.get_option(handle.index), scope.get_result(handle.index)

    def _resolve_command(self, handle: CommandHandle) -> Command:
        assert (
            handle.context_id == self.context_id
        ), f"Handle {handle!r} belongs to another context"
        assert handle.name in self.commands, f"Unknown command handle: {handle!r}"
        return self.commands[handle.name]

    def check(self, handle: OptionHandle | CommandHandle) -> bool:
        """Return whether the option (or command) was given."""
        return self.count(handle) > 0

    def count(self, handle: OptionHandle | CommandHandle) -> int:
        """Return how many times the option was given (0 or 1 for a command)."""
        if isinstance(handle, CommandHandle):
            return int(self._resolve_command(handle).selected)
        _, result = self._resolve(handle)
        return result.count

    def get_option(self, handle: OptionHandle) -> OptionSpec:
        option, _ = self._resolve(handle)
        return option

    @staticmethod
    def _convert(raw: str, type: Any) -> ValueOutcome:
        try:
            value = coerce_value(raw, type)
        except (ValueError, TypeError) as error:
            return ValueOutcome(ValueStatus.BAD_TYPE, raw=raw, error=str(error))
        return ValueOutcome(ValueStatus.PARSED, value=value, raw=raw)

    def take_value(self, handle: OptionHandle, type: Any = str) -> ValueOutcome:
        """
        Return the value attached to the option, converted to `type`.

        The first captured value wins when the option was given several times.

        Returns:
            ValueOutcome: PARSED with the value, BAD_TYPE when the value cannot be
            converted, NO_VALUE when the option was passed without a value, or
            NOT_PASSED when the option was never given.
        """
        _, result = self._resolve(handle)
        if not result.values:
            if result.count == 0:
                return ValueOutcome(ValueStatus.NOT_PASSED)
            return ValueOutcome(ValueStatus.NO_VALUE)
        return self._convert(result.values[0], type)

    def take_values(self, handle: OptionHandle, type: Any = str) -> ValuesOutcome:
        """
        Return every value attached to the option, in input order.

        Each value is converted independently; `outcomes` is empty if the option
        never received a value, and `count` tells how often it was passed.
        """
        _, result = self._resolve(handle)
        return ValuesOutcome(
            count=result.count,
            outcomes=tuple(self._convert(raw, type) for raw in result.values),
        )

    def value_or(self, handle: OptionHandle, default: T, type: Any = None) -> T:
        """
        Return the option's value, or `default` if it received none.

        The value is converted to `type`, or to the type of `default` when `type`
        is not given. If the conversion fails the help text is printed with the
        error and the program exits with status 2.
        """
        if type is None:
            type = default.__class__ if default is not None else str
        outcome = self.take_value(handle, type)
        if outcome.status is ValueStatus.PARSED:
            return outcome.value
        if outcome.status is ValueStatus.BAD_TYPE:
            logger.error("Invalid value %r: %s", outcome.raw, outcome.error)
            self.print_help(f"Invalid type for value '{outcome.raw}'")
            sys.exit(2)
        return default

    def get_usage(self) -> str:
        return "\n".join(self.help_formatter.get_lines())

    def print_help(self, message: str | None = None) -> None:
        """Print the help text, prefixed by an error `message` if given."""
        self.help_formatter.render(message)

    def __str__(self) -> str:
        return (
            f"Context(options={len(self.scope)}, commands={len(self.commands)}, "
            f"tokens={len(self._tokens)}, leftovers={len(self._leftovers)})"
        )

    def __repr__(self) -> str:
        return str(self)
