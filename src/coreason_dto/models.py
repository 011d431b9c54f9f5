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
Data models for the coreason-dto package.

Closed sets and request/response shapes of the authorization server API. Wire keys follow
each endpoint's documented casing and must not be renamed.
"""

from typing import Annotated

from pydantic import Field

from coreason_dto.enums import WireEnum
from coreason_dto.fields import NOT_NEGATIVE, OR_ZERO
from coreason_dto.wire_model import WireModel


class GrantType(WireEnum):
    AUTHORIZATION_CODE = 1
    IMPLICIT = 2
    PASSWORD = 3
    CLIENT_CREDENTIALS = 4
    REFRESH_TOKEN = 5
    CIBA = 6
    DEVICE_CODE = 7
    TOKEN_EXCHANGE = 8
    JWT_BEARER = 9


class DeviceCompleteResult(WireEnum):
    """Result of end-user authorization in the device flow."""

    AUTHORIZED = 1
    ACCESS_DENIED = 2
    TRANSACTION_FAILED = 3


class Address(WireModel):
    """
    Postal address of an end-user (OpenID Connect Core, 5.1.1).

    Attributes:
        formatted (str | None): Full mailing address, formatted for display.
        street_address (str | None): Full street address component.
        locality (str | None): City or locality component.
        region (str | None): State, province, prefecture or region component.
        postal_code (str | None): Zip code or postal code component.
        country (str | None): Country name component.
    """

    formatted: str | None = Field(default=None, alias="formatted")
    street_address: str | None = Field(default=None, alias="street_address")
    locality: str | None = Field(default=None, alias="locality")
    region: str | None = Field(default=None, alias="region")
    postal_code: str | None = Field(default=None, alias="postal_code")
    country: str | None = Field(default=None, alias="country")


class Property(WireModel):
    """
    Arbitrary key-value pair attached to an access token.

    Hidden properties are not exposed to the client application.
    """

    key: str | None = Field(default=None, alias="key")
    value: str | None = Field(default=None, alias="value")
    hidden: bool = Field(default=False, alias="hidden")


class IntrospectionRequest(WireModel):
    """Request to the introspection API."""

    token: str | None = Field(default=None, alias="token")
    scopes: tuple[str, ...] | None = Field(default=None, alias="scopes")
    subject: str | None = Field(default=None, alias="subject")


class IntrospectionBatchRequest(WireModel):
    """Several introspection requests sent in one call."""

    requests: tuple[IntrospectionRequest, ...] | None = Field(default=None, alias="requests")


class TokenCreateRequest(WireModel):
    """
    Request to the token creation API, which creates an access token without a standard flow.

    Attributes:
        grant_type (GrantType | None): The grant type to emulate. Mandatory for the remote API.
        client_id (int | str | None): The client the token is issued to. Encoded as 0 when None.
        subject (str | None): The end-user the token is issued for.
        scopes (tuple[str, ...] | None): Scopes associated with the token.
        access_token_duration (int | str | None): Access token lifetime in seconds; 0 means the
            service default. Encoded as 0 when None.
        refresh_token_duration (int | str | None): Refresh token lifetime in seconds; 0 means the
            service default. Encoded as 0 when None.
        properties (tuple[Property, ...] | None): Extra properties associated with the token.
        client_id_alias_used (bool): Emulate use of the client ID alias.
        access_token (str | None): Value to use instead of a generated access token.
        refresh_token (str | None): Value to use instead of a generated refresh token.
        access_token_persistent (bool): Whether the access token never expires.
        certificate_thumbprint (str | None): Thumbprint of the client certificate bound to the token.
        dpop_key_thumbprint (str | None): Thumbprint of the DPoP public key bound to the token.
    """

    grant_type: GrantType | None = Field(default=None, alias="grantType")
    client_id: Annotated[int | str | None, OR_ZERO] = Field(default=None, alias="clientId")
    subject: str | None = Field(default=None, alias="subject")
    scopes: tuple[str, ...] | None = Field(default=None, alias="scopes")
    access_token_duration: Annotated[int | str | None, OR_ZERO] = Field(default=None, alias="accessTokenDuration")
    refresh_token_duration: Annotated[int | str | None, OR_ZERO] = Field(default=None, alias="refreshTokenDuration")
    properties: tuple[Property, ...] | None = Field(default=None, alias="properties")
    client_id_alias_used: bool = Field(default=False, alias="clientIdAliasUsed")
    access_token: str | None = Field(default=None, alias="accessToken")
    refresh_token: str | None = Field(default=None, alias="refreshToken")
    access_token_persistent: bool = Field(default=False, alias="accessTokenPersistent")
    certificate_thumbprint: str | None = Field(default=None, alias="certificateThumbprint")
    dpop_key_thumbprint: str | None = Field(default=None, alias="dpopKeyThumbprint")


class DeviceCompleteRequest(WireModel):
    """Request to the device flow completion API."""

    user_code: str | None = Field(default=None, alias="userCode")
    result: DeviceCompleteResult | None = Field(default=None, alias="result")
    subject: str | None = Field(default=None, alias="subject")
    auth_time: Annotated[int, NOT_NEGATIVE] = Field(default=0, alias="authTime")
    acr: str | None = Field(default=None, alias="acr")
    claims: str | None = Field(default=None, alias="claims")
    properties: tuple[Property, ...] | None = Field(default=None, alias="properties")
    scopes: tuple[str, ...] | None = Field(default=None, alias="scopes")
    error_description: str | None = Field(default=None, alias="errorDescription")
    error_uri: str | None = Field(default=None, alias="errorUri")


class UserClaims(WireModel):
    """Standard OpenID Connect claims about an end-user."""

    sub: str | None = Field(default=None, alias="sub")
    name: str | None = Field(default=None, alias="name")
    email: str | None = Field(default=None, alias="email")
    email_verified: bool = Field(default=False, alias="email_verified")
    address: Address | None = Field(default=None, alias="address")
