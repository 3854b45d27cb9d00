# SPDX-License-Identifier: Apache-2.0
"""
Vector: retry behaviour of the full pipeline.

The client fixture uses a millisecond backoff, so retries run for real.
"""

import httpx
import pytest

from tests.utils.mock_server import ok, reply
from vikingdb_sdk.core.operation_context import OperationContext
from vikingdb_sdk.vector import (
    ErrorCode,
    IndexLocator,
    SearchByVectorRequest,
    SearchResponse,
    UpsertDataRequest,
    VikingDBError,
    with_max_retries,
)

pytestmark = pytest.mark.asyncio

INDEX = IndexLocator("docs", "docs_idx")
SEARCH = SearchByVectorRequest(dense_vector=[0.1, 0.2, 0.3], limit=5)


async def test_retry_empty_429_exhausts_budget(server, make_client):
    server.always(reply(429))
    index = make_client(with_max_retries(2)).index(INDEX)

    with pytest.raises(VikingDBError) as exc_info:
        await index.search_by_vector(SEARCH)

    err = exc_info.value
    assert server.calls == 3
    assert err.code is ErrorCode.UNKNOWN
    assert err.status_code == 429
    assert err.message.startswith("unexpected 429 response")


async def test_retry_transient_status_then_success(server, make_client):
    server.queue(reply(503), reply(502, {"code": "ServiceUnavailable", "message": "busy"}), ok({"data": []}))

    resp = await make_client().index(INDEX).search_by_vector(SEARCH)

    assert isinstance(resp, SearchResponse)
    assert server.calls == 3


async def test_retry_transient_code_with_non_retryable_status(server, make_client):
    server.queue(reply(400, {"code": "RequestLimitExceeded", "message": "slow down"}), ok())

    resp = await make_client().index(INDEX).search_by_vector(SEARCH)

    assert resp.code == "Success"
    assert server.calls == 2


async def test_retry_permanent_error_is_not_retried(server, make_client):
    server.always(reply(400, {"code": "InvalidParameter", "message": "dense_vector dim mismatch"}))

    with pytest.raises(VikingDBError) as exc_info:
        await make_client().index(INDEX).search_by_vector(SEARCH)

    assert exc_info.value.code is ErrorCode.INVALID_PARAMETER
    assert server.calls == 1


async def test_retry_network_failures_then_success(server, make_client):
    server.queue(httpx.ConnectError("connection refused"), httpx.ReadTimeout("read timed out"), ok())

    resp = await make_client().collection("docs").upsert(UpsertDataRequest(data=[{"id": 1}]))

    assert resp.code == "Success"
    assert server.calls == 3


async def test_retry_network_failure_surfaces_as_http_request_failed(server, make_client):
    cause = httpx.ConnectError("connection refused")
    server.always(cause)

    with pytest.raises(VikingDBError) as exc_info:
        await make_client(with_max_retries(0)).collection("docs").upsert(UpsertDataRequest(data=[{"id": 1}]))

    err = exc_info.value
    assert err.code is ErrorCode.HTTP_REQUEST_FAILED
    assert err.status_code == 503
    assert err.cause is cause
    assert err.__cause__ is cause
    assert server.calls == 1


async def test_retry_per_call_budget_overrides_client_default(server, make_client):
    server.always(reply(503))
    index = make_client(with_max_retries(0)).index(INDEX)

    with pytest.raises(VikingDBError):
        await index.search_by_vector(SEARCH, ctx=OperationContext(max_retries=2))

    assert server.calls == 3


async def test_retry_non_positive_per_call_budget_keeps_default(server, make_client):
    server.always(reply(503))
    index = make_client(with_max_retries(1)).index(INDEX)

    with pytest.raises(VikingDBError):
        await index.search_by_vector(SEARCH, ctx=OperationContext(max_retries=0))

    assert server.calls == 2


async def test_retry_negative_client_budget_is_clamped(server, make_client):
    server.always(reply(500))
    client = make_client(with_max_retries(-3))

    with pytest.raises(VikingDBError):
        await client.index(INDEX).search_by_vector(SEARCH)

    assert client.config.max_retries == 0
    assert server.calls == 1


async def test_retry_resends_identical_body(server, make_client):
    server.queue(reply(503), ok())

    await make_client().index(INDEX).search_by_vector(SEARCH)

    assert server.requests[0].content == server.requests[1].content
