# Cmdparse Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
The validation state machine that checks a token stream against a scope.

States:
    SCANNING: Consuming the next token.
    EXPECTING_VALUE: An option that may take a value was just matched; decide
        whether the next token is its value.
    DONE: The scope consumed everything it owns.
    FAILED: A validation error was raised.

Rules:
- A flag must name an option of the active scope. Each match increments the
  option's count; a unique option seen twice fails.
- A mandatory-value option must be followed by a bare value. An optional-value
  option takes the next token only when it is a bare value.
- A bare value naming a command of the active scope selects it and validates
  the following tokens against the command's own options. The command scope
  ends when the stream is exhausted or when the next bare value names a
  command of the declaring scope.
- Other bare values are anonymous arguments. They must be trailing: any option
  or command matched after one is reported as an unexpected argument.

Validation stops at the first error. Counts recorded before the failure are
left in place.
"""
from __future__ import annotations

from collections import deque
from enum import Enum
from typing import Mapping

from cmdparse.exceptions import (
    DuplicateOptionError,
    MissingArgumentError,
    UnexpectedArgumentError,
    UnknownOptionError,
    ValidationError,
)
from cmdparse.logger import logger
from cmdparse.option import OptionSpec
from cmdparse.scope import Command, OptionScope
from cmdparse.tokens import LongFlag, ShortFlag, Token, Value


class ValidatorState(Enum):
    """States of the validation state machine."""

    SCANNING = "scanning"
    EXPECTING_VALUE = "expecting_value"
    DONE = "done"
    FAILED = "failed"

    def __str__(self) -> str:
        return self.value


class Validator:
    """
    Validates tokens against one scope.

    Args:
        scope (OptionScope): Options valid in this scope.
        tokens (deque[Token]): Shared token stream; consumed tokens are removed.
        leftovers (list[str]): Shared list receiving anonymous arguments.
        commands (Mapping[str, Command] | None): Commands declared by this scope.
        parent_commands (Mapping[str, Command] | None): Commands of the declaring
            scope when `scope` is itself a command.
    """

    def __init__(
        self,
        scope: OptionScope,
        tokens: deque[Token],
        leftovers: list[str],
        commands: Mapping[str, Command] | None = None,
        parent_commands: Mapping[str, Command] | None = None,
    ) -> None:
        self.scope = scope
        self.tokens = tokens
        self.leftovers = leftovers
        self.commands: Mapping[str, Command] = commands or {}
        self.parent_commands: Mapping[str, Command] = parent_commands or {}
        self.state: ValidatorState = ValidatorState.SCANNING
        self._pending: tuple[OptionSpec, str] | None = None

    @property
    def scope_label(self) -> str:
        return self.scope.scope_name or "global"

    def run(self) -> None:
        """
        Consume tokens until the scope is done.

        Raises:
            ValidationError: On the first token that does not fit the grammar.
        """
        try:
            while self.state is not ValidatorState.DONE:
                if self.state is ValidatorState.SCANNING:
                    self._scan()
                elif self.state is ValidatorState.EXPECTING_VALUE:
                    self._expect_value()
        except ValidationError as error:
            self.state = ValidatorState.FAILED
            if self.leftovers and not isinstance(error, UnexpectedArgumentError):
                logger.debug(
                    "[%s] %s reported as unexpected argument", self.scope_label, error
                )
                raise UnexpectedArgumentError(self.leftovers[0]) from error
            raise

    def _ends_scope(self, token: Token) -> bool:
        return (
            isinstance(token, Value)
            and not token.inline
            and token.text in self.parent_commands
        )

    def _scan(self) -> None:
        if not self.tokens or self._ends_scope(self.tokens[0]):
            self.state = ValidatorState.DONE
            return

        token = self.tokens.popleft()
        if isinstance(token, ShortFlag):
            self._match_option(self.scope.find_short(token.name), token.name)
        elif isinstance(token, LongFlag):
            self._match_option(self.scope.find_long(token.name), token.name)
        else:
            self._match_value(token)

    def _match_option(self, spec: OptionSpec | None, name: str) -> None:
        if spec is None:
            raise UnknownOptionError(name)

        result = self.scope.get_result(spec.index)
        result.count += 1
        logger.debug("[%s] Matched option '%s' (%d)", self.scope_label, name, result.count)
        if self.leftovers:
            raise UnexpectedArgumentError(self.leftovers[0])
        if spec.unique and result.count > 1:
            raise DuplicateOptionError(name)
        if spec.takes_value:
            self._pending = (spec, name)
            self.state = ValidatorState.EXPECTING_VALUE

    def _expect_value(self) -> None:
        assert self._pending is not None, "no option waiting for a value"
        spec, name = self._pending
        self._pending = None
        self.state = ValidatorState.SCANNING

        next_token = self.tokens[0] if self.tokens else None
        if isinstance(next_token, Value):
            self.tokens.popleft()
            self.scope.get_result(spec.index).values.append(next_token.text)
            logger.debug(
                "[%s] Option '%s' took value %r", self.scope_label, name, next_token.text
            )
        elif spec.takes_arg:
            raise MissingArgumentError(name)

    def _match_value(self, token: Value) -> None:
        command = None if token.inline else self.commands.get(token.text)
        if command is None:
            self.leftovers.append(token.text)
            logger.debug("[%s] Anonymous argument %r", self.scope_label, token.text)
            return

        if self.leftovers:
            raise UnexpectedArgumentError(self.leftovers[0])
        command.select()
        Validator(
            command,
            self.tokens,
            self.leftovers,
            parent_commands=self.commands,
        ).run()
