# vikingdb_sdk/vector/signer.py
# SPDX-License-Identifier: Apache-2.0
"""
IAM request signing.

The signature itself is produced by the Volcengine SDK
(`volcengine.auth.SignerV4`). `V4Signer` only adapts between the two request
models: it copies method, path, query, headers and body of an outgoing
`httpx.Request` into a `volcengine.base.Request.Request`, signs that, and
copies the resulting headers (`X-Date`, `X-Content-Sha256`, `Authorization`,
...) back. Nothing else of the caller's request is changed.

Key validation is the caller's job (`IAMAuth` rejects empty keys before
signing is attempted).
"""
from __future__ import annotations

from typing import Dict, List, Protocol, Union, runtime_checkable

import httpx
from volcengine.Credentials import Credentials
from volcengine.auth.SignerV4 import SignerV4
from volcengine.base.Request import Request as VolcRequest

SERVICE_NAME = "vikingdb"


@runtime_checkable
class Signer(Protocol):
    """Contract for IAM signing primitives."""

    def sign(
        self,
        request: httpx.Request,
        access_key: str,
        secret_key: str,
        region: str,
        service: str = SERVICE_NAME,
    ) -> httpx.Request: ...


def _canonical_name(name: str) -> str:
    # SignerV4 selects signed headers by canonical spelling (Content-Type, Host, X-*)
    return "-".join(part.capitalize() for part in name.split("-"))


def _query(request: httpx.Request) -> Dict[str, Union[str, List[str]]]:
    query: Dict[str, Union[str, List[str]]] = {}
    for key, value in request.url.params.multi_items():
        if key not in query:
            query[key] = value
        elif isinstance(query[key], list):
            query[key].append(value)
        else:
            query[key] = [query[key], value]
    return query


def to_volc_request(request: httpx.Request) -> VolcRequest:
    volc = VolcRequest()
    volc.schema = request.url.scheme
    volc.method = request.method.upper()
    volc.host = request.url.netloc.decode("ascii")
    volc.path = request.url.path or "/"
    volc.query = _query(request)
    volc.headers = {_canonical_name(k): v for k, v in request.headers.items()}
    volc.headers.setdefault("Host", volc.host)
    volc.body = (request.content or b"").decode("utf-8")
    return volc


class V4Signer:
    """Default signer, backed by the Volcengine SDK."""

    def sign(
        self,
        request: httpx.Request,
        access_key: str,
        secret_key: str,
        region: str,
        service: str = SERVICE_NAME,
    ) -> httpx.Request:
        volc = to_volc_request(request)
        SignerV4.sign(volc, Credentials(access_key, secret_key, service, region))
        for name, value in volc.headers.items():
            request.headers[name] = value
        return request


__all__ = [
    "SERVICE_NAME",
    "Signer",
    "V4Signer",
    "to_volc_request",
]
