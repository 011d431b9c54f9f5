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
Custom exceptions for the coreason-dto package.
"""


class CoreasonDtoError(Exception):
    """Base exception for all coreason-dto errors."""


class InvalidArgumentError(CoreasonDtoError):
    """
    Raised when a field value, constructor argument, or map value fails its type/shape contract.

    Not a `ValueError` subclass: pydantic wraps `ValueError` raised inside validators into
    `ValidationError`, and this error must reach the caller unchanged.
    """


class MalformedInputError(CoreasonDtoError):
    """
    Raised when JSON text cannot be parsed into the generic map form.

    Attributes:
        lineno (int | None): 1-based line of the syntax error, if known.
        colno (int | None): 1-based column of the syntax error, if known.
        pos (int | None): 0-based character offset of the syntax error, if known.
    """

    def __init__(
        self,
        message: str,
        *,
        lineno: int | None = None,
        colno: int | None = None,
        pos: int | None = None,
    ) -> None:
        super().__init__(message)
        self.lineno = lineno
        self.colno = colno
        self.pos = pos


class OversizedInputError(MalformedInputError):
    """Raised when JSON input exceeds the configured size limit."""
