# SPDX-License-Identifier: Apache-2.0
"""
Vector: request pipeline: headers, query, authentication, serialization,
metrics and error context.
"""

import hashlib

import httpx
import pytest

from tests.utils.mock_server import RecordingMetrics, ok, reply
from vikingdb_sdk.core.error_context import get_context
from vikingdb_sdk.core.operation_context import OperationContext
from vikingdb_sdk.vector import (
    DEFAULT_USER_AGENT,
    REQUEST_ID_HEADER,
    Auth,
    CollectionLocator,
    DeleteDataRequest,
    DeleteDataResponse,
    ErrorCode,
    FetchDataInCollectionRequest,
    IndexLocator,
    UpsertDataRequest,
    UpsertDataResponse,
    VikingDBClient,
    VikingDBError,
)

pytestmark = pytest.mark.asyncio

UPSERT = UpsertDataRequest(data=[{"id": 1, "text": "hello"}])


async def test_pipeline_upsert_end_to_end_with_request_id(server, make_client):
    server.queue(ok({"token_usage": {"total_tokens": 3}}, request_id="abc"))
    collection = make_client().collection("docs")

    resp = await collection.upsert(UPSERT, ctx=OperationContext(request_id="abc"))

    assert isinstance(resp, UpsertDataResponse)
    assert resp.request_id == "abc"
    assert resp.code == "Success"
    assert resp.result.token_usage == {"total_tokens": 3}
    assert server.calls == 1
    assert server.last.headers[REQUEST_ID_HEADER] == "abc"


async def test_pipeline_sets_default_headers(server, make_client):
    await make_client().collection("docs").upsert(UPSERT)

    request = server.last
    assert request.method == "POST"
    assert request.url.host == "vikingdb.test"
    assert request.headers["Accept"] == "application/json"
    assert request.headers["Content-Type"] == "application/json"
    assert request.headers["User-Agent"] == DEFAULT_USER_AGENT
    assert request.headers["Authorization"] == "Bearer test-token"
    assert REQUEST_ID_HEADER not in request.headers


async def test_pipeline_context_headers_override_defaults(server, make_client):
    ctx = OperationContext(headers={"User-Agent": "custom/1.0", "X-Extra": "1"})

    await make_client().collection("docs").upsert(UPSERT, ctx=ctx)

    assert server.last.headers["User-Agent"] == "custom/1.0"
    assert server.last.headers["X-Extra"] == "1"


async def test_pipeline_request_id_option_owns_its_header(server, make_client):
    collection = make_client().collection("docs")

    await collection.upsert(UPSERT, ctx=OperationContext(request_id="abc", headers={"X-Tt-Logid": "generic"}))
    assert server.last.headers[REQUEST_ID_HEADER] == "abc"

    await collection.upsert(UPSERT, ctx=OperationContext(headers={"x-tt-logid": "generic"}))
    assert REQUEST_ID_HEADER not in server.last.headers


async def test_pipeline_context_query_is_appended(server, make_client):
    ctx = OperationContext(query={"trace": "on"})

    await make_client().collection("docs").upsert(UPSERT, ctx=ctx)

    assert server.last.url.path == "/api/vikingdb/data/upsert"
    assert server.last.url.params["trace"] == "on"


@pytest.mark.parametrize("bad_value", [object(), float("nan")])
async def test_pipeline_serialization_failure_sends_nothing(server, make_client, bad_value):
    with pytest.raises(VikingDBError) as exc_info:
        await make_client().collection("docs").upsert(UpsertDataRequest(data=[{"v": bad_value}]))

    err = exc_info.value
    assert err.code is ErrorCode.INVALID_PARAMETER
    assert err.status_code == 400
    assert err.cause is not None
    assert server.calls == 0


async def test_pipeline_empty_success_body_yields_empty_response(server, make_client):
    server.queue(reply(200))

    resp = await make_client().collection("docs").delete(DeleteDataRequest(ids=[1]))

    assert resp == DeleteDataResponse()


async def test_pipeline_iam_signature_headers(server, make_client):
    await make_client(auth=Auth.iam("AK", "SK")).collection("docs").upsert(UPSERT)

    request = server.last
    assert request.headers["Authorization"].startswith("HMAC-SHA256 Credential=AK/")
    assert "/cn-beijing/vikingdb/request" in request.headers["Authorization"]
    assert request.headers["X-Content-Sha256"] == hashlib.sha256(request.content).hexdigest()
    assert "X-Date" in request.headers


async def test_pipeline_no_auth_sends_no_authorization(server, make_client):
    await make_client(auth=Auth.none()).collection("docs").upsert(UPSERT)
    assert "Authorization" not in server.last.headers


async def test_pipeline_reports_metrics(server, make_client):
    metrics = RecordingMetrics()
    server.queue(reply(503), ok())

    await make_client(metrics=metrics).collection("docs").upsert(UPSERT)

    assert len(metrics.observations) == 1
    obs = metrics.observations[0]
    assert obs["component"] == "vector_transport"
    assert obs["op"] == "/api/vikingdb/data/upsert"
    assert obs["ok"] is True
    assert obs["extra"]["attempts"] == 2
    assert [c["name"] for c in metrics.counters] == ["retries"]


async def test_pipeline_failure_carries_error_context(server, make_client):
    metrics = RecordingMetrics()
    server.queue(reply(404, {"code": "CollectionNotExists", "message": "nope", "request_id": "r9"}))

    with pytest.raises(VikingDBError) as exc_info:
        await make_client(metrics=metrics).collection("docs").upsert(
            UPSERT, ctx=OperationContext(request_id="mine")
        )

    err = exc_info.value
    assert err.code is ErrorCode.COLLECTION_NOT_EXISTS
    assert err.request_id == "r9"
    ctx = get_context(err)
    assert ctx["component"] == "vector_transport"
    assert ctx["path"] == "/api/vikingdb/data/upsert"
    assert ctx["attempts"] == 1
    assert ctx["request_id"] == "mine"
    assert metrics.observations[0]["ok"] is False
    assert metrics.observations[0]["code"] == "CollectionNotExists"


async def test_pipeline_broken_metrics_sink_does_not_fail_calls(server, make_client):
    class Broken:
        def observe(self, **_):
            raise RuntimeError("metrics down")

        def counter(self, **_):
            raise RuntimeError("metrics down")

    server.queue(reply(503), ok())
    resp = await make_client(metrics=Broken()).collection("docs").upsert(UPSERT)
    assert resp.code == "Success"


async def test_pipeline_caller_owned_http_client_is_not_closed(make_client):
    client = make_client()
    await client.aclose()
    assert client.config.http_client.is_closed is False


async def test_pipeline_owned_http_client_is_closed_on_exit():
    async with VikingDBClient(Auth.none()) as client:
        http = client.transport._http
        assert isinstance(http, httpx.AsyncClient)
    assert http.is_closed


async def test_pipeline_scoped_clients_share_one_transport(make_client):
    client = make_client()
    collection = client.collection(CollectionLocator("docs", project_name="p1"))

    assert collection.collection_name == "docs"
    assert collection.project_name == "p1"
    assert collection.resource_id == ""
    index = client.index(IndexLocator("docs", "idx"))

    assert collection._transport is index._transport is client.transport


async def test_pipeline_fetched_numbers_reupsert_with_identical_digits(server, make_client):
    server.queue(
        reply(
            200,
            body=b'{"code":"Success","request_id":"r1","result":'
            b'{"fetch":[{"id":7,"fields":{"score":0.12345678901234567890,"rank":3}}]}}',
        )
    )
    collection = make_client().collection("docs")

    fetched = await collection.fetch(FetchDataInCollectionRequest(ids=[7]))
    item = fetched.result.items[0]
    await collection.upsert(UpsertDataRequest(data=[{"id": item.id, **item.fields}]))

    assert b'"score":0.12345678901234567890' in server.last.content
    assert b'"rank":3' in server.last.content
