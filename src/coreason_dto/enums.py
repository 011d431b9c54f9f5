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
Closed-set values exchanged by their canonical name on the wire.
"""

from enum import Enum
from typing import Any, Self

from coreason_dto.exceptions import InvalidArgumentError


class WireEnum(Enum):
    """
    Base class for closed sets whose members travel as their canonical name.

    Each member's value is its ordinal (an integer used for in-process comparison only);
    its name is the exact string sent over the wire. Members are process-wide singletons,
    so identity comparison is safe.
    """

    @property
    def ordinal(self) -> int:
        return int(self.value)

    def __str__(self) -> str:
        return self.name

    @classmethod
    def value_of(cls, value: Any) -> Self | None:
        """
        Look up a member by canonical name or ordinal.

        Args:
            value: A member name, an ordinal, an existing member, or None.

        Returns:
            The matching member, or None when `value` is None.

        Raises:
            InvalidArgumentError: If `value` matches no member or has an unsupported shape.
        """
        if value is None:
            return None
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            member = cls.__members__.get(value)
            if member is not None:
                return member
        elif isinstance(value, int) and not isinstance(value, bool):
            try:
                return cls(value)
            except ValueError:
                pass
        raise InvalidArgumentError(f"'{value!r}' is not a valid {cls.__name__}.")

    @staticmethod
    def to_string(member: "WireEnum | None") -> str | None:
        """Render a member as its wire name; None passes through."""
        if member is None:
            return None
        return member.name
