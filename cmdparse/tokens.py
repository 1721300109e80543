# Cmdparse Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Splits a raw argument vector into typed tokens for the validator.

Rules:
- `--name` becomes a `LongFlag`. `--name=value` is split at the first `=` into a
  `LongFlag` followed by an inline `Value` carrying the right-hand side.
- `-abc` becomes one `ShortFlag` per character after the dash.
- Anything else is a bare `Value`.

Tokenization never fails. Malformed input (`--`, `-=`, unknown letters) only
surfaces when the tokens are checked against the declared options.

Example:
    tokenize(["-vx", "--out=build", "src"])
    # [ShortFlag("v"), ShortFlag("x"), LongFlag("out"),
    #  Value("build", inline=True), Value("src")]
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Union


@dataclass(frozen=True)
class ShortFlag:
    """A single-character option, e.g. the `v` of `-v`."""

    name: str

    @property
    def is_option(self) -> bool:
        return True

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class LongFlag:
    """A long option without its dashes, e.g. the `output` of `--output`."""

    name: str

    @property
    def is_option(self) -> bool:
        return True

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Value:
    """
    A bare argument.

    `inline` is True when the value was attached to the preceding long flag
    with `=`.
    """

    text: str
    inline: bool = False

    @property
    def is_option(self) -> bool:
        return False

    def __str__(self) -> str:
        return self.text


Token = Union[ShortFlag, LongFlag, Value]


def tokenize(args: Iterable[str]) -> list[Token]:
    """
    Convert raw arguments (program name excluded) into tokens.

    Args:
        args (Iterable[str]): The argument vector, without the program name.

    Returns:
        list[Token]: Tokens in input order.
    """
    tokens: list[Token] = []
    for arg in args:
        if arg.startswith("--"):
            name, sep, value = arg[2:].partition("=")
            tokens.append(LongFlag(name))
            if sep:
                tokens.append(Value(value, inline=True))
        elif arg.startswith("-"):
            # POSIX bundle
            # e.g. -abc -> -a -b -c
            tokens.extend(ShortFlag(char) for char in arg[1:])
        else:
            tokens.append(Value(arg))
    return tokens
