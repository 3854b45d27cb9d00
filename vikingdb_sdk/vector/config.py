# vikingdb_sdk/vector/config.py
# SPDX-License-Identifier: Apache-2.0
"""
Client-wide configuration.

`Config` is an immutable snapshot built by applying an ordered list of
`ClientOption` callables over `DEFAULT_CONFIG`:

    cfg = build_config(
        with_endpoint("https://api-vikingdb.vikingdb.cn-beijing.volces.com"),
        with_region("cn-beijing"),
        with_max_retries(5),
    )

Later options win. Unset fields keep their defaults; the Transport applies the
remaining normalisation (scheme, timeout and retry floors) when it is built.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Callable, Optional

import httpx

VERSION = "0.1.0"
DEFAULT_ENDPOINT = "https://api.vector.bytedance.com"
DEFAULT_REGION = "cn-beijing"
DEFAULT_TIMEOUT_S = 30.0
DEFAULT_MAX_RETRIES = 3
DEFAULT_USER_AGENT = f"vikingdb-python-sdk/{VERSION}"


@dataclass(frozen=True)
class Config:
    """
    Shared settings for every scoped client created from one VikingDBClient.

    Attributes:
        endpoint:    Base URL of the service; a bare host gets `https://`.
        region:      Region used in the IAM signature scope.
        timeout:     Per-request timeout in seconds (connect + read + write).
        max_retries: Retries after the first attempt for transient failures.
        http_client: Optional caller-owned `httpx.AsyncClient`. When supplied
                     the SDK neither configures nor closes it.
        user_agent:  User-Agent header value. Empty means the SDK default.
    """

    endpoint: str = DEFAULT_ENDPOINT
    region: str = DEFAULT_REGION
    timeout: float = DEFAULT_TIMEOUT_S
    max_retries: int = DEFAULT_MAX_RETRIES
    http_client: Optional[httpx.AsyncClient] = None
    user_agent: str = ""


DEFAULT_CONFIG = Config()

ClientOption = Callable[[Config], Config]


def build_config(*options: ClientOption, base: Config = DEFAULT_CONFIG) -> Config:
    cfg = base
    for opt in options:
        cfg = opt(cfg)
    return cfg


def with_endpoint(endpoint: str) -> ClientOption:
    return lambda cfg: replace(cfg, endpoint=endpoint)


def with_region(region: str) -> ClientOption:
    return lambda cfg: replace(cfg, region=region)


def with_timeout(timeout_s: float) -> ClientOption:
    return lambda cfg: replace(cfg, timeout=timeout_s)


def with_max_retries(max_retries: int) -> ClientOption:
    return lambda cfg: replace(cfg, max_retries=max_retries)


def with_http_client(http_client: httpx.AsyncClient) -> ClientOption:
    return lambda cfg: replace(cfg, http_client=http_client)


def with_user_agent(user_agent: str) -> ClientOption:
    return lambda cfg: replace(cfg, user_agent=user_agent)


__all__ = [
    "VERSION",
    "DEFAULT_ENDPOINT",
    "DEFAULT_REGION",
    "DEFAULT_TIMEOUT_S",
    "DEFAULT_MAX_RETRIES",
    "DEFAULT_USER_AGENT",
    "Config",
    "DEFAULT_CONFIG",
    "ClientOption",
    "build_config",
    "with_endpoint",
    "with_region",
    "with_timeout",
    "with_max_retries",
    "with_http_client",
    "with_user_agent",
]
