# SPDX-License-Identifier: Apache-2.0
"""
Scripted in-process fake of the VikingDB HTTP API.

`MockVikingDB` is an httpx.MockTransport handler. Replies are consumed in
order from the script; once it is empty the fallback reply is used. A reply is
either an exception instance (raised as a network failure) or a callable
`request -> httpx.Response` (sync or async).

    server = MockVikingDB().queue(reply(503), ok({"data": []}))
    http = httpx.AsyncClient(transport=httpx.MockTransport(server))
"""
from __future__ import annotations

import inspect
import json
from typing import Any, Callable, Dict, List, Mapping, Optional, Union

import httpx

Reply = Union[BaseException, Callable[[httpx.Request], Any]]


def reply(
    status: int = 200,
    payload: Any = None,
    *,
    body: Optional[bytes] = None,
    headers: Optional[Mapping[str, str]] = None,
) -> Callable[[httpx.Request], httpx.Response]:
    """Build a fresh httpx.Response per call (JSON payload or raw body)."""
    def build(request: httpx.Request) -> httpx.Response:
        if body is not None:
            return httpx.Response(status, content=body, headers=headers)
        if payload is None:
            return httpx.Response(status, headers=headers)
        return httpx.Response(status, json=payload, headers=headers)
    return build


def ok(result: Any = None, **envelope: Any) -> Callable[[httpx.Request], httpx.Response]:
    """200 with the common envelope and an optional `result`."""
    payload: Dict[str, Any] = {"api": "", "code": "Success", "message": "", "request_id": "rid-1"}
    payload.update(envelope)
    if result is not None:
        payload["result"] = result
    return reply(200, payload)


class MockVikingDB:
    def __init__(self) -> None:
        self.requests: List[httpx.Request] = []
        self._script: List[Reply] = []
        self.fallback: Reply = ok()

    def queue(self, *replies: Reply) -> "MockVikingDB":
        self._script.extend(replies)
        return self

    def always(self, fallback: Reply) -> "MockVikingDB":
        self.fallback = fallback
        return self

    async def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        item = self._script.pop(0) if self._script else self.fallback
        if isinstance(item, BaseException):
            raise item
        response = item(request)
        if inspect.isawaitable(response):
            response = await response
        return response

    @property
    def calls(self) -> int:
        return len(self.requests)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def body(self, index: int = -1) -> Dict[str, Any]:
        return json.loads(self.requests[index].content)


class RecordingMetrics:
    """MetricsSink that keeps everything it is given."""

    def __init__(self) -> None:
        self.observations: List[Dict[str, Any]] = []
        self.counters: List[Dict[str, Any]] = []

    def observe(self, **kwargs: Any) -> None:
        self.observations.append(kwargs)

    def counter(self, **kwargs: Any) -> None:
        self.counters.append(kwargs)


__all__ = ["MockVikingDB", "RecordingMetrics", "ok", "reply"]
