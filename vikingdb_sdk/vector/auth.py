# vikingdb_sdk/vector/auth.py
# SPDX-License-Identifier: Apache-2.0
"""
Credentials and request authenticators.

Callers describe credentials with `Auth`:

    Auth.iam(access_key, secret_key)   # V4 request signature
    Auth.api_key(token)                # Authorization: Bearer <token>
    Auth.none()                        # unsigned (e.g. behind a gateway)

The Transport turns the `Auth` into exactly one `Authenticator` when it is
constructed; the choice is never revisited per call. Missing or partial
credentials fail at that point with an InvalidParameter error.
"""
from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Optional, Protocol

import httpx

from vikingdb_sdk.vector.errors import invalid_parameter_error
from vikingdb_sdk.vector.signer import SERVICE_NAME, Signer, V4Signer


class AuthKind(enum.Enum):
    NONE = "none"
    IAM = "iam"
    API_KEY = "api_key"


@dataclass(frozen=True)
class Auth:
    """Credential selection. Build with the classmethods, not directly."""

    kind: AuthKind = AuthKind.NONE
    access_key: str = field(default="", repr=False)
    secret_key: str = field(default="", repr=False)
    api_key_token: str = field(default="", repr=False)

    @classmethod
    def none(cls) -> "Auth":
        return cls(kind=AuthKind.NONE)

    @classmethod
    def iam(cls, access_key: str, secret_key: str) -> "Auth":
        return cls(kind=AuthKind.IAM, access_key=access_key or "", secret_key=secret_key or "")

    @classmethod
    def api_key(cls, token: str) -> "Auth":
        return cls(kind=AuthKind.API_KEY, api_key_token=token or "")


class Authenticator(Protocol):
    """Adds proof of identity to an outgoing request."""

    def apply(self, request: httpx.Request) -> httpx.Request: ...


class NoAuth:
    def apply(self, request: httpx.Request) -> httpx.Request:
        return request


class APIKeyAuth:
    def __init__(self, token: str) -> None:
        self._token = token

    def apply(self, request: httpx.Request) -> httpx.Request:
        request.headers["Authorization"] = f"Bearer {self._token}"
        return request


class IAMAuth:
    def __init__(
        self,
        access_key: str,
        secret_key: str,
        region: str,
        *,
        signer: Optional[Signer] = None,
        service: str = SERVICE_NAME,
    ) -> None:
        self._ak = access_key
        self._sk = secret_key
        self._region = region
        self._service = service
        self._signer = signer or V4Signer()

    def apply(self, request: httpx.Request) -> httpx.Request:
        if not self._ak or not self._sk:
            raise invalid_parameter_error("access key and secret key cannot be empty")
        return self._signer.sign(request, self._ak, self._sk, self._region, self._service)


def resolve_authenticator(auth: Auth, *, region: str, signer: Optional[Signer] = None) -> Authenticator:
    """Validate `auth` and return the matching authenticator."""
    if auth.kind is AuthKind.IAM:
        if not auth.access_key or not auth.secret_key:
            raise invalid_parameter_error("access key and secret key cannot be empty")
        return IAMAuth(auth.access_key, auth.secret_key, region, signer=signer)
    if auth.kind is AuthKind.API_KEY:
        if not auth.api_key_token:
            raise invalid_parameter_error("api key cannot be empty")
        return APIKeyAuth(auth.api_key_token)
    return NoAuth()


__all__ = [
    "AuthKind",
    "Auth",
    "Authenticator",
    "NoAuth",
    "APIKeyAuth",
    "IAMAuth",
    "resolve_authenticator",
]
