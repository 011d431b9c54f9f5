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
Configuration for the coreason-dto package.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class CoreasonDtoConfig(BaseSettings):
    """
    Configuration settings for coreason-dto.

    Attributes:
        json_indent (int): Indentation width used for pretty-printed JSON.
        json_ensure_ascii (bool): Escape non-ASCII characters when rendering JSON.
        max_input_bytes (int): Upper bound on the size of JSON text accepted by the parser.
    """

    model_config = SettingsConfigDict(
        env_prefix="COREASON_DTO_",
        case_sensitive=False,
    )

    json_indent: int = Field(default=4, ge=0, description="Indentation width for pretty-printed JSON.")
    json_ensure_ascii: bool = False
    max_input_bytes: int = Field(
        default=1_048_576, gt=0, description="Maximum size in bytes of JSON text accepted by the parser."
    )
