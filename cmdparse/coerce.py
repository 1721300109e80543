# Cmdparse Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Value coercion utilities used by the result accessors.

Functions:
- coerce_bool: Convert a string to a boolean, rejecting unknown words.
- coerce_enum: Convert a string or raw value to an Enum instance.
- coerce_value: General-purpose coercion to a target type (unions, literals,
  enums, datetimes, or any callable converter).
"""
import types
from datetime import datetime
from enum import EnumMeta
from typing import Any, Literal, Union, get_args, get_origin

from dateutil import parser as date_parser

TRUE_WORDS = frozenset({"true", "t", "1", "yes", "y", "on"})
FALSE_WORDS = frozenset({"false", "f", "0", "no", "n", "off"})


def coerce_bool(value: str) -> bool:
    """
    Convert a string to a boolean.

    Accepts truthy and falsy spellings such as 'true', 'yes', '0', 'off'.

    Raises:
        ValueError: If the string is not a recognised boolean spelling.
    """
    if isinstance(value, bool):
        return value
    normalized = value.strip().lower()
    if normalized in TRUE_WORDS:
        return True
    if normalized in FALSE_WORDS:
        return False
    raise ValueError(f"'{value}' is not a valid boolean")


def coerce_enum(value: Any, enum_type: EnumMeta) -> Any:
    """
    Convert a raw value or string to an Enum instance.

    Tries to resolve by name, then by value coerced to the members' base type.

    Raises:
        ValueError: If the value cannot be resolved to a valid Enum member.
    """
    if isinstance(value, enum_type):
        return value

    if isinstance(value, str):
        try:
            return enum_type[value]
        except KeyError:
            pass

    base_type = type(next(iter(enum_type)).value)
    try:
        coerced_value = base_type(value)
        return enum_type(coerced_value)
    except (ValueError, TypeError):
        values = [str(enum.value) for enum in enum_type]
        raise ValueError(f"'{value}' should be one of {{{', '.join(values)}}}") from None


def coerce_value(value: str, target_type: Any) -> Any:
    """
    Attempt to convert a string to the given target type.

    Args:
        value (str): The captured string.
        target_type (Any): A type, typing construct, or callable converter.

    Returns:
        Any: The coerced value.

    Raises:
        ValueError: If conversion fails or the value is invalid.
        TypeError: If the converter rejects the input type.
    """
    if target_type is None or target_type is str:
        return value

    origin = get_origin(target_type)
    args = get_args(target_type)

    if origin is Literal:
        if value not in args:
            raise ValueError(
                f"Value '{value}' is not a valid literal for type {target_type}"
            )
        return value

    if isinstance(target_type, types.UnionType) or origin is Union:
        for arg in args:
            if arg is type(None):
                continue
            try:
                return coerce_value(value, arg)
            except (ValueError, TypeError):
                continue
        raise ValueError(f"Value '{value}' could not be coerced to any of {args}")

    if isinstance(target_type, EnumMeta):
        return coerce_enum(value, target_type)

    if target_type is bool:
        return coerce_bool(value)

    if target_type is datetime:
        try:
            return date_parser.parse(value)
        except (ValueError, OverflowError) as error:
            raise ValueError(f"Value '{value}' could not be parsed as a datetime") from error

    try:
        return target_type(value)
    except ArithmeticError as error:
        raise ValueError(f"Value '{value}' could not be converted: {error!r}") from error
