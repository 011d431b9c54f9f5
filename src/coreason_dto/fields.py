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
Declarative field-descriptor table shared by DTO coercion and the map codec.

The table is derived once per DTO class from its pydantic field annotations: the alias is the
wire key, the annotation decides the field kind, and `Annotated` markers add per-field options.
"""

import functools
import types
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Callable, Union, get_args, get_origin

from pydantic import BaseModel
from pydantic.fields import FieldInfo
from pydantic_core import PydanticUndefined

from coreason_dto import validation
from coreason_dto.enums import WireEnum


class _Marker:
    def __init__(self, name: str) -> None:
        self.name = name

    def __repr__(self) -> str:
        return self.name


# Encode None as 0. Lossy: after encoding, None and 0 are indistinguishable.
OR_ZERO = _Marker("OR_ZERO")

# Integer field that rejects values below 0.
NOT_NEGATIVE = _Marker("NOT_NEGATIVE")


class FieldKind(Enum):
    BOOLEAN = auto()
    INTEGER = auto()
    STRING = auto()
    STRING_OR_INTEGER = auto()
    STRING_ARRAY = auto()
    ENUM = auto()
    MODEL = auto()
    MODEL_ARRAY = auto()


@dataclass(frozen=True)
class WireField:
    """
    One row of a DTO's descriptor table.

    Attributes:
        name (str): The Python attribute name.
        key (str): The wire key, preserved verbatim (case-sensitive).
        kind (FieldKind): The semantic type of the field.
        target (type | None): The enum or DTO class for ENUM, MODEL and MODEL_ARRAY fields.
        nullable (bool): Whether None is an accepted value.
        or_zero (bool): Whether None is written as 0 when encoding.
        not_negative (bool): Whether integers below 0 are rejected.
    """

    name: str
    key: str
    kind: FieldKind
    target: type | None
    nullable: bool
    or_zero: bool
    not_negative: bool
    default: Any
    default_factory: Callable[[], Any] | None

    def default_value(self) -> Any:
        if self.default_factory is not None:
            return self.default_factory()
        return self.default

    @property
    def target_type(self) -> type:
        """The enum or DTO class of an ENUM, MODEL or MODEL_ARRAY field."""
        if self.target is None:
            raise TypeError(f"Wire field '{self.name}' of kind {self.kind.name} has no target type")
        return self.target

    def check(self, value: Any) -> None:
        """Run the coercion rule for this field, raising `InvalidArgumentError` on mismatch."""
        name = self.name
        kind = self.kind
        if kind is FieldKind.BOOLEAN:
            if not (self.nullable and value is None):
                validation.ensure_boolean(name, value)
        elif kind is FieldKind.INTEGER:
            if not (self.nullable and value is None):
                validation.ensure_integer(name, value)
                if self.not_negative:
                    validation.ensure_not_negative(name, value)
        elif kind is FieldKind.STRING:
            if self.nullable:
                validation.ensure_null_or_string(name, value)
            else:
                validation.ensure_string(name, value)
        elif kind is FieldKind.STRING_OR_INTEGER:
            if self.nullable:
                validation.ensure_null_or_string_or_integer(name, value)
            else:
                validation.ensure_string_or_integer(name, value)
        else:
            if not self.nullable:
                validation.ensure_not_null(name, value)
            if kind is FieldKind.STRING_ARRAY:
                validation.ensure_null_or_array_of_string(name, value)
            elif kind is FieldKind.MODEL_ARRAY:
                validation.ensure_null_or_array_of_type(name, value, self.target_type)
            else:
                validation.ensure_null_or_type(name, value, self.target_type)

    def own(self, value: Any) -> Any:
        """
        Return the value the DTO stores for an already checked `value`.

        Nested DTOs are deep-copied and sequences become tuples, so the caller keeps no
        reference into the DTO and the DTO's sequences cannot be mutated behind its checks.
        """
        if value is None:
            return None
        kind = self.kind
        if kind is FieldKind.MODEL:
            return value.model_copy(deep=True)
        if kind is FieldKind.MODEL_ARRAY:
            return tuple(item.model_copy(deep=True) for item in value)
        if kind is FieldKind.STRING_ARRAY:
            return tuple(value)
        return value


def _split_optional(annotation: Any) -> tuple[tuple[Any, ...], bool]:
    if get_origin(annotation) in (Union, types.UnionType):
        args = get_args(annotation)
        members = tuple(arg for arg in args if arg is not type(None))
        return members, len(members) != len(args)
    return (annotation,), False


def _is_subclass(candidate: Any, base: type) -> bool:
    return isinstance(candidate, type) and issubclass(candidate, base)


def _resolve_kind(annotation: Any) -> tuple[FieldKind, type | None, bool]:
    members, nullable = _split_optional(annotation)

    if set(members) == {int, str}:
        return FieldKind.STRING_OR_INTEGER, None, nullable
    if len(members) != 1:
        raise TypeError(f"Unsupported wire field annotation: {annotation!r}")

    (inner,) = members
    # Sequences are declared as tuple[X, ...] so a DTO never hands out a mutable view.
    if get_origin(inner) is tuple:
        args = get_args(inner)
        item = args[0] if len(args) == 2 and args[1] is Ellipsis else None
        if item is str:
            return FieldKind.STRING_ARRAY, None, nullable
        if _is_subclass(item, BaseModel):
            return FieldKind.MODEL_ARRAY, item, nullable
    elif inner is bool:
        return FieldKind.BOOLEAN, None, nullable
    elif inner is int:
        return FieldKind.INTEGER, None, nullable
    elif inner is str:
        return FieldKind.STRING, None, nullable
    elif _is_subclass(inner, WireEnum):
        return FieldKind.ENUM, inner, nullable
    elif _is_subclass(inner, BaseModel):
        return FieldKind.MODEL, inner, nullable

    raise TypeError(f"Unsupported wire field annotation: {annotation!r}")


def _describe(name: str, info: FieldInfo) -> WireField:
    kind, target, nullable = _resolve_kind(info.annotation)
    return WireField(
        name=name,
        key=info.alias or name,
        kind=kind,
        target=target,
        nullable=nullable,
        or_zero=any(meta is OR_ZERO for meta in info.metadata),
        not_negative=any(meta is NOT_NEGATIVE for meta in info.metadata),
        default=None if info.default is PydanticUndefined else info.default,
        default_factory=info.default_factory,  # type: ignore[arg-type]
    )


@functools.cache
def wire_fields(model_cls: type[BaseModel]) -> tuple[WireField, ...]:
    """
    Build (once) the descriptor table of a DTO class, in field declaration order.

    Raises:
        TypeError: If a field uses an annotation the wire format cannot express.
    """
    return tuple(_describe(name, info) for name, info in model_cls.model_fields.items())


@functools.cache
def wire_field_index(model_cls: type[BaseModel]) -> dict[str, WireField]:
    """Descriptor table keyed by Python attribute name."""
    return {field.name: field for field in wire_fields(model_cls)}
