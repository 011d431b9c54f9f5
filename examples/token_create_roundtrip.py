import os
import sys

# Add src to path for running directly
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "../src")))

from coreason_dto import GrantType, JsonRenderer, MapCodec, Property, TokenCreateRequest


def main() -> None:
    """
    Demonstrates both directions of the wire mapping:
    - outbound: DTO -> ordered map -> JSON body
    - inbound: JSON body -> map -> DTO (every value re-validated)
    """
    codec = MapCodec()
    renderer = JsonRenderer()

    request = TokenCreateRequest(
        grant_type=GrantType.AUTHORIZATION_CODE,
        client_id=123,
        subject="user1",
        scopes=["read", "write"],
        access_token_duration=3600,
        refresh_token_duration=86400,
        properties=[Property(key="tenant", value="acme")],
    )

    wire_map = codec.to_map(request)
    body = renderer.serialize(wire_map)
    print(f">>> Outbound body: {body}")
    print(renderer.serialize_pretty(wire_map))

    decoded = codec.from_map(TokenCreateRequest, renderer.parse(body))
    print(f">>> Decoded grant type: {decoded.grant_type}")
    print(f">>> Round trip equal: {decoded == request}")


if __name__ == "__main__":
    main()
