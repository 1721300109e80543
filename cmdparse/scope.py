# Cmdparse Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Implements `OptionScope`, the option registry and result store of one
namespace, and `Command`, a sub-command owning its own scope.

A scope maps long and short names to `OptionSpec` objects and allocates one
`OptionResult` slot per registered option. The top-level `Context` owns one
scope for the global options; every `Command` is a scope of its own, so names
declared on a command never collide with global names.

Example:
    scope = OptionScope("build [options]")
    verbose = scope.add_flag("verbose", "v", "Talk more")
    output = scope.add_option("output", "o", "Output path", OptionFlag.TAKES_ARG)
"""
from __future__ import annotations

from typing import Any

from cmdparse.exceptions import (
    DuplicateNameError,
    InvalidDefinitionError,
    UnexpectedCommandError,
)
from cmdparse.flags import OptionFlag
from cmdparse.logger import logger
from cmdparse.option import MIN_ALIGN, CommandHandle, OptionHandle, OptionSpec
from cmdparse.results import OptionResult, ResultStore

GLOBAL_SCOPE = ""


class OptionScope:
    """
    Registry of the options valid in one namespace.

    Attributes:
        description (str): Usage summary or command description.
        scope_name (str): `""` for the global scope, the command name otherwise.
        context_id (int): Identity of the owning context, stamped into handles.
        alignment (int): Running width of the widest help label.
    """

    def __init__(
        self,
        description: str = "",
        scope_name: str = GLOBAL_SCOPE,
        context_id: int = 0,
    ) -> None:
        self.description: str = description
        self.scope_name: str = scope_name
        self.context_id: int = context_id
        self.alignment: int = MIN_ALIGN
        self.results: ResultStore = ResultStore()
        self._options: list[OptionSpec] = []
        self._long: dict[str, OptionSpec] = {}
        self._short: dict[str, OptionSpec] = {}

    def add_option(
        self,
        long_name: str | None = None,
        short_name: str | None = None,
        description: str | None = None,
        flags: Any = OptionFlag.DEFAULTS,
    ) -> OptionHandle:
        """
        Declare a valid option for this scope.

        Args:
            long_name (str | None): Name used as `--long_name`.
            short_name (str | None): Character used as `-s`.
            description (str | None): Help text.
            flags (OptionFlag | str | Iterable): Behaviour flags.

        Returns:
            OptionHandle: Handle used to query the option's result.

        Raises:
            InvalidDefinitionError: If both names are missing or a name is malformed.
            DuplicateNameError: If either name is already used in this scope.
        """
        flags = OptionFlag.coerce(flags)
        if long_name is None and short_name is None:
            raise InvalidDefinitionError("An option needs either a short or a long name")
        if long_name is not None and long_name in self._long:
            raise DuplicateNameError(
                f"An option with the long name '{long_name}' was already added"
            )
        if short_name is not None and short_name in self._short:
            raise DuplicateNameError(
                f"An option with the short name '{short_name}' was already added"
            )

        spec = OptionSpec(
            long_name=long_name,
            short_name=short_name,
            description=description,
            flags=flags,
            index=len(self.results),
        )
        index = self.results.allocate()
        assert index == spec.index, "result slot index out of sync"

        if long_name is not None:
            self._long[long_name] = spec
        if short_name is not None:
            self._short[short_name] = spec
        self._options.append(spec)
        self.alignment = max(self.alignment, spec.label_width)
        logger.debug("[%s] Registered %s", self.scope_name or "global", spec)
        return OptionHandle(self.context_id, self.scope_name, index)

    def add_long_option(self, name: str, description: str) -> OptionHandle:
        """Add a long option with default flags."""
        return self.add_option(name, None, description)

    def add_short_option(self, name: str, description: str) -> OptionHandle:
        """Add a short option with default flags."""
        return self.add_option(None, name, description)

    def add_flag(self, long_name: str, short_name: str, description: str) -> OptionHandle:
        """Add an option with both a long and a short name and default flags."""
        return self.add_option(long_name, short_name, description)

    def find_short(self, name: str) -> OptionSpec | None:
        return self._short.get(name)

    def find_long(self, name: str) -> OptionSpec | None:
        return self._long.get(name)

    @property
    def options(self) -> list[OptionSpec]:
        """All declared options in registration order."""
        return list(self._options)

    @property
    def visible_options(self) -> list[OptionSpec]:
        """Declared options that are not hidden from the help text."""
        return [option for option in self._options if not option.hidden]

    def get_option(self, index: int) -> OptionSpec:
        return self._options[index]

    def get_result(self, index: int) -> OptionResult:
        return self.results[index]

    def __len__(self) -> int:
        return len(self._options)

    def __str__(self) -> str:
        return (
            f"{type(self).__name__}(scope={self.scope_name or 'global'!r}, "
            f"options={len(self._options)}, long={len(self._long)}, "
            f"short={len(self._short)})"
        )

    def __repr__(self) -> str:
        return str(self)


class Command(OptionScope):
    """
    A sub-command with its own options.

    The command is selected the first time its name appears as a bare argument
    in the scope that declared it. Selecting it again is a validation error.
    """

    def __init__(self, name: str, description: str = "", context_id: int = 0) -> None:
        super().__init__(description=description, scope_name=name, context_id=context_id)
        self.name: str = name
        self.selected: bool = False

    @property
    def handle(self) -> CommandHandle:
        return CommandHandle(self.context_id, self.name)

    def select(self) -> None:
        """Mark the command as invoked."""
        if self.selected:
            raise UnexpectedCommandError(self.name)
        self.selected = True
        logger.debug("Command '%s' selected", self.name)
