# Cmdparse Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Result storage for validated options and the outcome types returned by the
accessors.

Contents:
- `OptionResult`: occurrence count and captured values for one option.
- `ResultStore`: append-only arena of `OptionResult` records indexed by the
  handle index assigned at registration.
- `ValueStatus` / `ValueOutcome`: the outcome of reading one value, which keeps
  "parsed", "bad type", "passed without a value" and "never passed" apart.
- `ValuesOutcome`: the per-value outcomes of a repeatable option, together
  with its occurrence count.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterator

from cmdparse.exceptions import TypeConversionError


@dataclass
class OptionResult:
    """Tracks how many times an option was seen and the values it received."""

    count: int = 0
    values: list[str] = field(default_factory=list)

    def reset(self) -> None:
        self.count = 0
        self.values.clear()


class ResultStore:
    """Arena of option results. Slots are never removed or reordered."""

    def __init__(self) -> None:
        self._results: list[OptionResult] = []

    def allocate(self) -> int:
        """Allocate a fresh result slot and return its index."""
        self._results.append(OptionResult())
        return len(self._results) - 1

    def __getitem__(self, index: int) -> OptionResult:
        return self._results[index]

    def __len__(self) -> int:
        return len(self._results)

    def __iter__(self) -> Iterator[OptionResult]:
        return iter(self._results)

    def reset(self) -> None:
        for result in self._results:
            result.reset()


class ValueStatus(Enum):
    """Outcome of reading a captured value."""

    PARSED = "parsed"
    BAD_TYPE = "bad_type"
    NO_VALUE = "no_value"
    NOT_PASSED = "not_passed"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ValueOutcome:
    """
    Result of converting a captured value.

    Attributes:
        status (ValueStatus): Which of the four outcomes occurred.
        value (Any): The converted value when `status` is PARSED.
        raw (str | None): The captured string, if any.
        error (str | None): Conversion error message when `status` is BAD_TYPE.
    """

    status: ValueStatus
    value: Any = None
    raw: str | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.status is ValueStatus.PARSED

    @property
    def passed(self) -> bool:
        """True if the option appeared on the command line."""
        return self.status is not ValueStatus.NOT_PASSED

    def unwrap(self) -> Any:
        """Return the converted value or raise `TypeConversionError`."""
        if self.status is ValueStatus.PARSED:
            return self.value
        if self.status is ValueStatus.BAD_TYPE:
            raise TypeConversionError(f"Invalid type for value '{self.raw}': {self.error}")
        if self.status is ValueStatus.NO_VALUE:
            raise TypeConversionError("The option was passed without a value")
        raise TypeConversionError("The option was not passed")


@dataclass(frozen=True)
class ValuesOutcome:
    """
    Result of converting every value captured by a repeatable option.

    `outcomes` is empty when no value was captured; `count` then tells whether
    the option was never passed (0) or passed without values (> 0).
    """

    count: int
    outcomes: tuple[ValueOutcome, ...] = ()

    @property
    def passed(self) -> bool:
        return self.count > 0

    @property
    def present(self) -> bool:
        return bool(self.outcomes)

    def parsed_values(self) -> list[Any]:
        """Return the converted values, skipping the ones that failed to parse."""
        return [outcome.value for outcome in self.outcomes if outcome.ok]

    def __iter__(self) -> Iterator[ValueOutcome]:
        return iter(self.outcomes)

    def __len__(self) -> int:
        return len(self.outcomes)
