# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_dto

"""
Runtime shape checks invoked by every DTO field before a value is accepted.

Each function takes the name of the parameter being checked and its value, returns
normally when the value is acceptable, and raises `InvalidArgumentError` otherwise.
"nullable" variants always accept `None`.
"""

from typing import Any

from coreason_dto.exceptions import InvalidArgumentError

__all__ = [
    "ensure_boolean",
    "ensure_integer",
    "ensure_not_negative",
    "ensure_not_null",
    "ensure_null_or_array_of_string",
    "ensure_null_or_array_of_type",
    "ensure_null_or_string",
    "ensure_null_or_string_or_integer",
    "ensure_null_or_type",
    "ensure_string",
    "ensure_string_or_integer",
]


def _is_integer(value: Any) -> bool:
    # bool is a subclass of int
    return isinstance(value, int) and not isinstance(value, bool)


def _is_array(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def ensure_boolean(name: str, value: Any) -> None:
    """Ensure that the value is a `bool`."""
    if isinstance(value, bool):
        return
    raise InvalidArgumentError(f"'{name}' must be a boolean value.")


def ensure_integer(name: str, value: Any) -> None:
    """Ensure that the value is an `int` (booleans are rejected)."""
    if _is_integer(value):
        return
    raise InvalidArgumentError(f"'{name}' must be an integer.")


def ensure_string(name: str, value: Any) -> None:
    """Ensure that the value is a `str`."""
    if isinstance(value, str):
        return
    raise InvalidArgumentError(f"'{name}' must be a string.")


def ensure_not_null(name: str, value: Any) -> None:
    """Ensure that the value is not `None`."""
    if value is not None:
        return
    raise InvalidArgumentError(f"'{name}' must not be null.")


def ensure_not_negative(name: str, value: Any) -> None:
    """Ensure that the value is an integer not less than 0."""
    if _is_integer(value) and value >= 0:
        return
    raise InvalidArgumentError(f"'{name}' must not be negative.")


def ensure_string_or_integer(name: str, value: Any) -> None:
    """Ensure that the value is either a `str` or an `int`."""
    if isinstance(value, str) or _is_integer(value):
        return
    raise InvalidArgumentError(f"'{name}' must be a string or an integer.")


def ensure_null_or_string(name: str, value: Any) -> None:
    """Ensure that the value is `None` or a `str`."""
    if value is None or isinstance(value, str):
        return
    raise InvalidArgumentError(f"'{name}' must be null or a string.")


def ensure_null_or_type(name: str, value: Any, expected: type) -> None:
    """
    Ensure that the value is `None` or an instance of the expected type.

    Args:
        name: Name of the parameter.
        value: Value of the parameter.
        expected: The type the value must be an instance of.

    Raises:
        InvalidArgumentError: If the value is neither `None` nor an instance of `expected`.
    """
    if value is None or isinstance(value, expected):
        return
    raise InvalidArgumentError(f"'{name}' must be null or an instance of {expected.__name__}.")


def ensure_null_or_string_or_integer(name: str, value: Any) -> None:
    """Ensure that the value is `None`, a `str` or an `int`."""
    if value is None or isinstance(value, str) or _is_integer(value):
        return
    raise InvalidArgumentError(f"'{name}' must be null, a string or an integer.")


def ensure_null_or_array_of_string(name: str, value: Any) -> None:
    """
    Ensure that the value is `None` or a list/tuple whose elements are all strings.

    A bare `str` is not accepted as an array of strings.
    """
    if value is None:
        return
    if _is_array(value) and all(isinstance(element, str) for element in value):
        return
    raise InvalidArgumentError(f"'{name}' must be null or an array of string.")


def ensure_null_or_array_of_type(name: str, value: Any, expected: type) -> None:
    """
    Ensure that the value is `None` or a list/tuple whose elements are all instances of `expected`.

    Args:
        name: Name of the parameter.
        value: Value of the parameter.
        expected: The type every element must be an instance of.

    Raises:
        InvalidArgumentError: If the value is not an array, or one of its elements has the wrong type.
    """
    if value is None:
        return
    if _is_array(value) and all(isinstance(element, expected) for element in value):
        return
    raise InvalidArgumentError(f"'{name}' must be null or an array of {expected.__name__}.")
