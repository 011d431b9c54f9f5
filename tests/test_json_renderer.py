# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_dto

import json

import pytest

from coreason_dto.codec import MapCodec
from coreason_dto.config import CoreasonDtoConfig
from coreason_dto.exceptions import InvalidArgumentError, MalformedInputError, OversizedInputError
from coreason_dto.json_renderer import JsonRenderer
from coreason_dto.models import GrantType, TokenCreateRequest


def test_serialize_is_compact_and_ordered(renderer: JsonRenderer) -> None:
    text = renderer.serialize({"b": 1, "a": [True, None], "c": {"z": "x", "y": 1.5}})
    assert text == '{"b":1,"a":[true,null],"c":{"z":"x","y":1.5}}'


def test_serialize_pretty_uses_configured_indent() -> None:
    renderer = JsonRenderer(CoreasonDtoConfig(json_indent=2))
    assert renderer.serialize_pretty({"a": 1, "b": [1]}) == '{\n  "a": 1,\n  "b": [\n    1\n  ]\n}'


def test_serialize_non_ascii(renderer: JsonRenderer) -> None:
    assert renderer.serialize({"name": "Jürgen"}) == '{"name":"Jürgen"}'
    escaping = JsonRenderer(CoreasonDtoConfig(json_ensure_ascii=True))
    assert escaping.serialize({"name": "Jürgen"}) == '{"name":"J\\u00fcrgen"}'


def test_serialize_rejects_unrenderable_values(renderer: JsonRenderer) -> None:
    with pytest.raises(InvalidArgumentError):
        renderer.serialize({"grantType": GrantType.IMPLICIT})  # type: ignore[dict-item]
    with pytest.raises(InvalidArgumentError):
        renderer.serialize({"ratio": float("nan")})
    with pytest.raises(InvalidArgumentError):
        renderer.serialize(None)  # type: ignore[arg-type]


def test_parse_empty_object(renderer: JsonRenderer) -> None:
    assert renderer.parse("{}") == {}


def test_parse_preserves_key_order_and_number_types(renderer: JsonRenderer) -> None:
    result = renderer.parse('{"z": 1, "a": 1.0, "m": 1e3, "n": -7, "s": "x"}')
    assert list(result) == ["z", "a", "m", "n", "s"]
    assert type(result["z"]) is int
    assert type(result["a"]) is float
    assert type(result["m"]) is float
    assert result["n"] == -7


def test_parse_bytes(renderer: JsonRenderer) -> None:
    assert renderer.parse('{"name": "Jürgen"}'.encode("utf-8")) == {"name": "Jürgen"}
    assert renderer.parse(bytearray(b'{"a": 1}')) == {"a": 1}


def test_parse_malformed_reports_position(renderer: JsonRenderer) -> None:
    with pytest.raises(MalformedInputError) as excinfo:
        renderer.parse("{not valid json")
    error = excinfo.value
    assert error.lineno == 1
    assert error.colno == 2
    assert error.pos == 1
    assert isinstance(error.__cause__, json.JSONDecodeError)


@pytest.mark.parametrize("text", ['{"a": NaN}', '{"a": Infinity}', '{"a": -Infinity}'])
def test_parse_rejects_non_standard_constants(renderer: JsonRenderer, text: str) -> None:
    with pytest.raises(MalformedInputError):
        renderer.parse(text)


@pytest.mark.parametrize("text", ["[]", '"token"', "1", "null"])
def test_parse_rejects_non_object_documents(renderer: JsonRenderer, text: str) -> None:
    with pytest.raises(MalformedInputError, match="must encode an object"):
        renderer.parse(text)


def test_parse_rejects_invalid_utf8(renderer: JsonRenderer) -> None:
    with pytest.raises(MalformedInputError):
        renderer.parse(b'{"a": "\xff"}')


def test_parse_rejects_oversized_input(renderer: JsonRenderer) -> None:
    text = '{"a": "' + "x" * 5000 + '"}'
    with pytest.raises(OversizedInputError):
        renderer.parse(text)
    # Oversized input is a kind of malformed input
    with pytest.raises(MalformedInputError):
        renderer.parse(text.encode("utf-8"))


def test_scenario_json_contains_expected_pairs(renderer: JsonRenderer, codec: MapCodec) -> None:
    request = TokenCreateRequest(
        grant_type=GrantType.AUTHORIZATION_CODE,
        client_id=123,
        subject="user1",
        scopes=["read", "write"],
    )

    text = renderer.serialize(codec.to_map(request))

    assert text.startswith('{"grantType":"AUTHORIZATION_CODE","clientId":123,"subject":"user1","scopes":["read","write"],')
    assert renderer.parse(text)["scopes"] == ["read", "write"]


def test_parse_rejects_non_text(renderer: JsonRenderer) -> None:
    with pytest.raises(InvalidArgumentError):
        renderer.parse(None)  # type: ignore[arg-type]
    with pytest.raises(InvalidArgumentError):
        renderer.parse({"a": 1})  # type: ignore[arg-type]
