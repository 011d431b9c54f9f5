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
Base class for data-transfer objects exchanged with the authorization server.
"""

from collections.abc import Mapping
from typing import Any, Self

from pydantic import BaseModel, ConfigDict, ValidationInfo, field_validator

from coreason_dto.codec import MapCodec
from coreason_dto.fields import wire_field_index
from coreason_dto.json_renderer import JsonRenderer
from coreason_dto.wire import WireMap

_codec = MapCodec()


class WireModel(BaseModel):
    """
    A mutable, typed DTO whose fields are checked on construction and on every assignment.

    Each field's pydantic alias is its wire key. Fields default to None (or their declared
    default); there are no cross-field rules. Nested DTOs are stored as private copies and
    sequences as tuples.
    """

    model_config = ConfigDict(
        validate_assignment=True,
        populate_by_name=True,
        extra="forbid",
    )

    @field_validator("*", mode="before")
    @classmethod
    def check_wire_shape(cls, value: Any, info: ValidationInfo) -> Any:
        # Raises InvalidArgumentError, which pydantic lets through unwrapped.
        field = wire_field_index(cls)[info.field_name]  # type: ignore[index]
        field.check(value)
        return field.own(value)

    def to_map(self) -> WireMap:
        """Encode this DTO into a new wire map."""
        return _codec.to_map(self)

    def copy_to_map(self, out: WireMap) -> None:
        """Write this DTO's fields into an existing map."""
        _codec.to_map(self, out)

    @classmethod
    def from_map(cls, data: Mapping[str, Any]) -> Self:
        """Decode a wire map into a new instance of this DTO."""
        return _codec.from_map(cls, data)

    def to_json(self, pretty: bool = False, renderer: JsonRenderer | None = None) -> str:
        """Encode this DTO as JSON text."""
        renderer = renderer or JsonRenderer()
        data = self.to_map()
        return renderer.serialize_pretty(data) if pretty else renderer.serialize(data)

    @classmethod
    def from_json(cls, text: str | bytes | bytearray, renderer: JsonRenderer | None = None) -> Self:
        """Decode JSON text into a new instance of this DTO."""
        renderer = renderer or JsonRenderer()
        return cls.from_map(renderer.parse(text))
