# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_dto

import pytest

from coreason_dto.codec import MapCodec
from coreason_dto.config import CoreasonDtoConfig
from coreason_dto.json_renderer import JsonRenderer


@pytest.fixture
def codec() -> MapCodec:
    return MapCodec()


@pytest.fixture
def renderer() -> JsonRenderer:
    """A renderer with fixed settings, independent of COREASON_DTO_* variables."""
    return JsonRenderer(CoreasonDtoConfig(json_indent=4, json_ensure_ascii=False, max_input_bytes=4096))
