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
MapCodec component for converting DTOs to and from the generic ordered map.
"""

from collections.abc import Mapping, Sequence
from typing import Any, TypeVar

from pydantic import BaseModel

from coreason_dto.enums import WireEnum
from coreason_dto.exceptions import InvalidArgumentError
from coreason_dto.fields import FieldKind, WireField, wire_fields
from coreason_dto.utils.logger import logger
from coreason_dto.validation import ensure_not_null
from coreason_dto.wire import WireMap, WireValue

ModelT = TypeVar("ModelT", bound=BaseModel)


def get_from_map(key: str, data: Mapping[str, Any]) -> Any:
    """Read `data[key]`; a missing key reads as None."""
    return data.get(key)


def or_zero(value: int | str | None) -> int | str:
    """Replace None with 0. Callers that must tell None from 0 apart cannot use this."""
    return 0 if value is None else value


class MapCodec:
    """
    Converts DTOs to and from the generic map by walking each DTO class's descriptor table.

    Nested DTO fields and arrays of DTOs are converted recursively. Every inbound value goes
    through the DTO constructor, so it is re-validated by the same rules as direct construction.
    """

    def to_map(self, entity: BaseModel, out: WireMap | None = None) -> WireMap:
        """
        Write every declared field of `entity` into a map, in declaration order.

        Args:
            entity: The DTO to encode.
            out: An existing map to write into. A new one is created when omitted.

        Returns:
            The populated map (`out` itself when given).

        Raises:
            InvalidArgumentError: If `entity` is None.
        """
        ensure_not_null("entity", entity)
        if out is None:
            out = {}
        for field in wire_fields(type(entity)):
            out[field.key] = self._encode(field, getattr(entity, field.name))
        logger.debug(f"Encoded {type(entity).__name__} to wire map")
        return out

    def from_map(self, model_cls: type[ModelT], data: Mapping[str, Any]) -> ModelT:
        """
        Build a new `model_cls` instance from a map.

        Missing keys are treated as explicit nulls; keys the DTO does not declare are ignored.

        Args:
            model_cls: The DTO class to instantiate.
            data: The source map.

        Returns:
            A fully populated DTO.

        Raises:
            InvalidArgumentError: If `data` is not a mapping or any value fails its field's contract.
                No partially populated DTO is ever returned.
        """
        if not isinstance(data, Mapping):
            raise InvalidArgumentError(f"'{model_cls.__name__}' must be decoded from a map.")

        values = {field.name: self._decode(field, get_from_map(field.key, data)) for field in wire_fields(model_cls)}
        entity = model_cls(**values)
        logger.debug(f"Decoded {model_cls.__name__} from wire map")
        return entity

    def convert_models_to_maps(self, entities: Sequence[BaseModel] | None) -> list[WireMap] | None:
        """Encode each DTO of a sequence; None passes through."""
        if entities is None:
            return None
        return [self.to_map(entity) for entity in entities]

    def convert_maps_to_models(
        self, key: str, items: Any, model_cls: type[ModelT]
    ) -> list[ModelT] | None:
        """
        Decode each map of a sequence into `model_cls`; None passes through.

        Raises:
            InvalidArgumentError: If `items` is not an array, or holds an element that is not a map.
        """
        if items is None:
            return None
        if not isinstance(items, (list, tuple)):
            raise InvalidArgumentError(f"'{key}' must be null or an array of {model_cls.__name__}.")
        models = []
        for item in items:
            if not isinstance(item, Mapping):
                raise InvalidArgumentError(f"'{key}' must be null or an array of {model_cls.__name__}.")
            models.append(self.from_map(model_cls, item))
        return models

    def _encode(self, field: WireField, value: Any) -> WireValue:
        kind = field.kind
        if kind is FieldKind.ENUM:
            return WireEnum.to_string(value)
        if kind is FieldKind.MODEL:
            return None if value is None else self.to_map(value)
        if kind is FieldKind.MODEL_ARRAY:
            return self.convert_models_to_maps(value)  # type: ignore[return-value]
        if kind is FieldKind.STRING_ARRAY:
            return None if value is None else list(value)
        if field.or_zero:
            return or_zero(value)
        return value  # type: ignore[no-any-return]

    def _decode(self, field: WireField, raw: Any) -> Any:
        if raw is None:
            return field.default_value()

        kind = field.kind
        if kind is FieldKind.ENUM:
            return field.target_type.value_of(raw)  # type: ignore[attr-defined]
        if kind is FieldKind.MODEL:
            if not isinstance(raw, Mapping):
                raise InvalidArgumentError(f"'{field.key}' must be null or a map.")
            return self.from_map(field.target_type, raw)
        if kind is FieldKind.MODEL_ARRAY:
            return self.convert_maps_to_models(field.key, raw, field.target_type)
        return raw
