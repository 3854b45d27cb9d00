# SPDX-License-Identifier: Apache-2.0
"""
Shared fixtures for the VikingDB SDK test-suite.

`server` is a scripted fake of the HTTP API and `make_client` builds a
VikingDBClient wired to it. Retries use a millisecond backoff so that retry
tests stay fast without patching asyncio.
"""
from __future__ import annotations

from typing import Any, Callable, Optional

import httpx
import pytest

from tests.utils.mock_server import MockVikingDB
from vikingdb_sdk.core.retry import RetryPolicy
from vikingdb_sdk.vector import (
    Auth,
    ClientOption,
    VikingDBClient,
    with_endpoint,
    with_http_client,
)

TEST_ENDPOINT = "https://vikingdb.test"
TEST_API_KEY = "test-token"
FAST_RETRY_POLICY = RetryPolicy(initial_backoff_s=0.001, max_backoff_s=0.004)


@pytest.fixture
def server() -> MockVikingDB:
    return MockVikingDB()


@pytest.fixture
def make_client(server: MockVikingDB) -> Callable[..., VikingDBClient]:
    """
    Factory for clients talking to `server`.

    Extra ClientOptions are applied after the test endpoint and http client;
    keyword arguments go to VikingDBClient.
    """
    def factory(*options: ClientOption, auth: Optional[Auth] = None, **kwargs: Any) -> VikingDBClient:
        http = httpx.AsyncClient(transport=httpx.MockTransport(server))
        kwargs.setdefault("retry_policy", FAST_RETRY_POLICY)
        return VikingDBClient(
            auth or Auth.api_key(TEST_API_KEY),
            with_endpoint(TEST_ENDPOINT),
            with_http_client(http),
            *options,
            **kwargs,
        )
    return factory
