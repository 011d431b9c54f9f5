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
Typed data-transfer objects for an OAuth/OIDC authorization server API, with a generic
bidirectional mapping between DTOs, ordered wire maps, and JSON text.
"""

__version__ = "0.1.0"
__author__ = "Gowtham A Rao"
__email__ = "gowtham.rao@coreason.ai"

from .codec import MapCodec
from .config import CoreasonDtoConfig
from .enums import WireEnum
from .exceptions import CoreasonDtoError, InvalidArgumentError, MalformedInputError, OversizedInputError
from .json_renderer import JsonRenderer
from .models import (
    Address,
    DeviceCompleteRequest,
    DeviceCompleteResult,
    GrantType,
    IntrospectionBatchRequest,
    IntrospectionRequest,
    Property,
    TokenCreateRequest,
    UserClaims,
)
from .wire_model import WireModel

__all__ = [
    "Address",
    "CoreasonDtoConfig",
    "CoreasonDtoError",
    "DeviceCompleteRequest",
    "DeviceCompleteResult",
    "GrantType",
    "IntrospectionBatchRequest",
    "IntrospectionRequest",
    "InvalidArgumentError",
    "JsonRenderer",
    "MalformedInputError",
    "MapCodec",
    "OversizedInputError",
    "Property",
    "TokenCreateRequest",
    "UserClaims",
    "WireEnum",
    "WireModel",
]
