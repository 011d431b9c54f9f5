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
JsonRenderer component for converting the generic map to and from JSON text.
"""

import json
from typing import Any, NoReturn

from coreason_dto.config import CoreasonDtoConfig
from coreason_dto.exceptions import InvalidArgumentError, MalformedInputError, OversizedInputError
from coreason_dto.utils.logger import logger
from coreason_dto.validation import ensure_not_null
from coreason_dto.wire import WireMap


def _reject_constant(name: str) -> NoReturn:
    raise MalformedInputError(f"Non-standard JSON constant '{name}' is not allowed")


class JsonRenderer:
    """
    Renders wire maps as JSON text and parses JSON text back into wire maps.

    Key order is preserved in both directions. JSON numbers parse to `int` when they have no
    fractional or exponent part and to `float` otherwise.
    """

    def __init__(self, config: CoreasonDtoConfig | None = None) -> None:
        """
        Initialize the JsonRenderer.

        Args:
            config: Rendering and parsing settings. Loaded from the environment when omitted.
        """
        self.config = config or CoreasonDtoConfig()

    def serialize(self, data: WireMap) -> str:
        """
        Render a map as compact JSON.

        Raises:
            InvalidArgumentError: If the map holds a value JSON cannot express (including NaN).
        """
        return self._dump(data, indent=None, separators=(",", ":"))

    def serialize_pretty(self, data: WireMap) -> str:
        """Render a map as indented JSON for human inspection."""
        return self._dump(data, indent=self.config.json_indent, separators=(",", ": "))

    def parse(self, text: str | bytes | bytearray) -> WireMap:
        """
        Parse JSON text into a map.

        Args:
            text: JSON text; bytes are decoded as UTF-8.

        Returns:
            The decoded map, with keys in source order.

        Raises:
            OversizedInputError: If the input exceeds `max_input_bytes`.
            MalformedInputError: If the text is not valid JSON or does not encode an object.
        """
        if not isinstance(text, (str, bytes, bytearray)):
            raise InvalidArgumentError("'text' must be a string or bytes.")
        size = len(text) if isinstance(text, (bytes, bytearray)) else len(text.encode("utf-8", errors="surrogatepass"))
        if size > self.config.max_input_bytes:
            logger.warning(f"Rejected JSON input of {size} bytes (limit {self.config.max_input_bytes})")
            raise OversizedInputError(f"JSON input exceeds limit of {self.config.max_input_bytes} bytes")

        try:
            if isinstance(text, (bytes, bytearray)):
                text = bytes(text).decode("utf-8")
            result: Any = json.loads(text, parse_constant=_reject_constant)
        except UnicodeDecodeError as e:
            logger.warning(f"JSON input is not valid UTF-8: {e}")
            raise MalformedInputError(f"JSON input is not valid UTF-8: {e}", pos=e.start) from e
        except json.JSONDecodeError as e:
            logger.warning(f"Malformed JSON input: {e}")
            raise MalformedInputError(
                f"Malformed JSON at line {e.lineno} column {e.colno}: {e.msg}",
                lineno=e.lineno,
                colno=e.colno,
                pos=e.pos,
            ) from e

        if not isinstance(result, dict):
            raise MalformedInputError(f"JSON text must encode an object, not {type(result).__name__}")
        return result

    def _dump(self, data: WireMap, indent: int | None, separators: tuple[str, str]) -> str:
        ensure_not_null("data", data)
        try:
            return json.dumps(
                data,
                indent=indent,
                separators=separators,
                ensure_ascii=self.config.json_ensure_ascii,
                allow_nan=False,
            )
        except (TypeError, ValueError) as e:
            raise InvalidArgumentError(f"Map cannot be rendered as JSON: {e}") from e
