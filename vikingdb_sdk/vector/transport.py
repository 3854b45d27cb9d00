# vikingdb_sdk/vector/transport.py
# SPDX-License-Identifier: Apache-2.0
"""
Transport: the single request pipeline behind every VikingDB operation.

Per call:

    Build      serialize the flat request envelope (InvalidParameter on failure,
               nothing is sent)
    Sign+Send  under the retry policy: build the httpx request (defaults, then
               ctx headers/query, then the request-id header), authenticate,
               send; network failures become retryable HTTPRequestFailed
    Decode     2xx → typed response, anything else → VikingDBError

Only `VikingDBError` leaves `execute()`, with one exception: cancelling the
calling task propagates `asyncio.CancelledError` untouched. A deadline set on
the OperationContext aborts the in-flight request and raises a
DeadlineExceeded error, which is never retried.

One Transport is shared by every scoped client of a VikingDBClient and is safe
for concurrent use: configuration is frozen after construction and connection
pooling is owned by the httpx client.
"""
from __future__ import annotations

import asyncio
import logging
import time
from dataclasses import replace
from typing import Any, Callable, Mapping, Optional, Union

import httpx

from vikingdb_sdk.core import json_codec
from vikingdb_sdk.core.error_context import attach_context
from vikingdb_sdk.core.metrics import MetricsSink, NoopMetrics
from vikingdb_sdk.core.operation_context import OperationContext
from vikingdb_sdk.core.retry import DEFAULT_RETRY_POLICY, RetryPolicy, retry_async
from vikingdb_sdk.vector.auth import Auth, Authenticator, resolve_authenticator
from vikingdb_sdk.vector.config import (
    DEFAULT_REGION,
    DEFAULT_TIMEOUT_S,
    DEFAULT_USER_AGENT,
    Config,
)
from vikingdb_sdk.vector.errors import (
    ErrorCode,
    VikingDBError,
    deadline_exceeded_error,
    invalid_parameter_error,
    is_retryable_error,
)
from vikingdb_sdk.vector.signer import Signer

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Tt-Logid"
JSON_CONTENT_TYPE = "application/json"

ResponseTarget = Union[type, Callable[[Mapping[str, Any]], Any]]


# =============================================================================
# Response decoding
# =============================================================================

def _factory(target: ResponseTarget) -> Callable[[Mapping[str, Any]], Any]:
    return getattr(target, "from_dict", target)


def decode_response(
    status_code: int,
    body: bytes,
    target: Optional[ResponseTarget] = None,
) -> Any:
    """
    Turn a raw HTTP response into a typed value or raise VikingDBError.

    - 2xx with a target and a non-empty body: lossless JSON decode, then
      `target.from_dict(payload)` (or `target(payload)` for plain callables).
    - 2xx with no target or an empty body: returns None.
    - anything else: the service error envelope `{code, message, request_id}`
      when recognizable, otherwise a generic Unknown error quoting the status
      and raw body.

    The function is pure; decoding the same input twice yields equivalent
    results.
    """
    if 200 <= status_code < 300:
        if target is None or not body:
            return None
        try:
            payload = json_codec.loads(body)
            return _factory(target)(payload)
        except (ValueError, TypeError, KeyError, AttributeError, ArithmeticError) as exc:
            raise VikingDBError(
                ErrorCode.UNKNOWN,
                "failed to unmarshal response body",
                status_code=status_code,
                cause=exc,
            ) from exc

    envelope: Any = None
    if body:
        try:
            envelope = json_codec.loads(body)
        except ValueError:
            envelope = None

    if isinstance(envelope, Mapping):
        code = str(envelope.get("code") or "")
        message = str(envelope.get("message") or "")
        request_id = str(envelope.get("request_id") or "")
        if code or message:
            raise VikingDBError(
                code,
                message,
                status_code=status_code,
                request_id=request_id,
            )

    text = body.decode("utf-8", errors="replace") if body else ""
    raise VikingDBError(
        ErrorCode.UNKNOWN,
        f"unexpected {status_code} response: {text}",
        status_code=status_code,
    )


# =============================================================================
# Transport
# =============================================================================

def _normalize_endpoint(endpoint: str) -> httpx.URL:
    raw = endpoint.strip()
    if "://" not in raw:
        raw = "https://" + raw
    try:
        url = httpx.URL(raw)
    except (httpx.InvalidURL, ValueError, TypeError) as exc:
        raise invalid_parameter_error("invalid endpoint", cause=exc) from exc
    if not url.host:
        raise invalid_parameter_error(f"invalid endpoint: {endpoint!r}")
    return url


class Transport:
    """
    Signed, retried JSON-over-HTTP calls against one VikingDB endpoint.

    Construction validates everything up front: an empty endpoint or
    incomplete credentials raise InvalidParameter immediately.
    """

    _component = "vector_transport"

    def __init__(
        self,
        config: Config,
        auth: Auth,
        *,
        metrics: Optional[MetricsSink] = None,
        signer: Optional[Signer] = None,
        retry_policy: RetryPolicy = DEFAULT_RETRY_POLICY,
    ) -> None:
        if not config.endpoint or not config.endpoint.strip():
            raise invalid_parameter_error("endpoint cannot be empty")

        base_url = _normalize_endpoint(config.endpoint)
        region = config.region or DEFAULT_REGION
        timeout = config.timeout if config.timeout and config.timeout > 0 else DEFAULT_TIMEOUT_S

        self._auth: Authenticator = resolve_authenticator(auth, region=region, signer=signer)
        self._config = replace(
            config,
            endpoint=str(base_url),
            region=region,
            timeout=timeout,
            max_retries=max(0, int(config.max_retries)),
            user_agent=config.user_agent or DEFAULT_USER_AGENT,
        )
        self._base_url = base_url
        self._retry_policy = retry_policy
        self._metrics: MetricsSink = metrics or NoopMetrics()

        if config.http_client is not None:
            self._http = config.http_client
            self._owns_http = False
        else:
            self._http = httpx.AsyncClient(timeout=timeout)
            self._owns_http = True

    # ------------------------------------------------------------------ #
    # Introspection
    # ------------------------------------------------------------------ #

    @property
    def config(self) -> Config:
        return self._config

    # ------------------------------------------------------------------ #
    # Lifecycle
    # ------------------------------------------------------------------ #

    async def aclose(self) -> None:
        """Close the underlying httpx client if this Transport created it."""
        if self._owns_http:
            await self._http.aclose()

    async def __aenter__(self) -> "Transport":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    # ------------------------------------------------------------------ #
    # Pipeline
    # ------------------------------------------------------------------ #

    async def execute(
        self,
        method: str,
        path: str,
        body: Any = None,
        response_type: Optional[ResponseTarget] = None,
        *,
        ctx: Optional[OperationContext] = None,
    ) -> Any:
        """
        Run one logical call: serialize `body`, send it (with retries) and
        decode the terminal response into `response_type`.

        Returns the decoded response, an empty `response_type` instance when
        the service answered 2xx with no body, or None without a
        `response_type`.
        """
        ctx = ctx or OperationContext()
        retries = ctx.max_retries if ctx.max_retries and ctx.max_retries > 0 else self._config.max_retries
        t0 = time.monotonic()
        attempts = 0

        async def attempt() -> Any:
            nonlocal attempts
            attempts += 1
            request = self._build_request(method, path, payload, ctx)
            logger.debug("vikingdb %s %s attempt=%d", method, path, attempts)
            response = await self._send(request)
            logger.debug(
                "vikingdb %s %s attempt=%d status=%d",
                method, path, attempts, response.status_code,
            )
            return decode_response(response.status_code, response.content, response_type)

        def on_backoff(retry_no: int, sleep_s: float, exc: BaseException) -> None:
            logger.warning(
                "vikingdb %s %s failed (%s), retry %d/%d in %.3fs",
                method, path, getattr(exc, "code", type(exc).__name__), retry_no, retries, sleep_s,
            )
            self._metrics.counter(component=self._component, name="retries", extra={"op": path})

        async def run() -> Any:
            return await retry_async(
                attempt,
                max_retries=retries,
                should_retry=is_retryable_error,
                policy=self._retry_policy,
                on_backoff=on_backoff,
            )

        try:
            payload = self._serialize(body)
            result = await self._within_deadline(run(), ctx)
        except VikingDBError as exc:
            attach_context(
                exc,
                self._component,
                operation=method,
                path=path,
                attempts=attempts,
                request_id=ctx.request_id,
            )
            self._record(path, t0, ok=False, code=str(exc.code), attempts=attempts)
            raise
        except asyncio.CancelledError:
            self._record(path, t0, ok=False, code="Cancelled", attempts=attempts)
            raise

        self._record(path, t0, ok=True, attempts=attempts)
        if result is None and response_type is not None:
            result = _factory(response_type)({})
        return result

    @staticmethod
    def _serialize(body: Any) -> bytes:
        if body is None:
            return b""
        try:
            return json_codec.dumps(body)
        except (TypeError, ValueError) as exc:
            raise VikingDBError(
                ErrorCode.INVALID_PARAMETER,
                "failed to marshal request",
                status_code=400,
                cause=exc,
            ) from exc

    async def _within_deadline(self, coro: Any, ctx: OperationContext) -> Any:
        remaining = ctx.remaining_ms()
        if remaining is None:
            return await coro
        if remaining <= 0:
            coro.close()
            raise deadline_exceeded_error("deadline exceeded before the request was sent")
        try:
            return await asyncio.wait_for(coro, timeout=remaining / 1000.0)
        except asyncio.TimeoutError as exc:
            raise deadline_exceeded_error(
                f"deadline exceeded after {remaining}ms", cause=exc
            ) from exc

    def _build_request(
        self,
        method: str,
        path: str,
        payload: bytes,
        ctx: OperationContext,
    ) -> httpx.Request:
        headers = httpx.Headers({"Accept": JSON_CONTENT_TYPE, "User-Agent": self._config.user_agent})
        if payload:
            headers["Content-Type"] = JSON_CONTENT_TYPE
        for key, value in ctx.headers.items():
            if key.lower() == REQUEST_ID_HEADER.lower():
                logger.debug("ignoring %s passed as a generic header; use request_id", key)
                continue
            headers[key] = value
        if ctx.request_id:
            headers[REQUEST_ID_HEADER] = ctx.request_id

        try:
            request = self._http.build_request(
                method,
                self._base_url.join(path),
                params=dict(ctx.query) or None,
                headers=headers,
                content=payload or None,
                timeout=self._config.timeout,
            )
        except (httpx.InvalidURL, TypeError, ValueError) as exc:
            raise VikingDBError(
                ErrorCode.UNKNOWN,
                "failed to create request",
                status_code=400,
                cause=exc,
            ) from exc
        return self._auth.apply(request)

    async def _send(self, request: httpx.Request) -> httpx.Response:
        try:
            return await self._http.send(request)
        except httpx.HTTPError as exc:
            raise VikingDBError(
                ErrorCode.HTTP_REQUEST_FAILED,
                "failed to execute http request",
                status_code=503,
                cause=exc,
            ) from exc

    def _record(self, op: str, t0: float, *, ok: bool, code: str = "OK", **extra: Any) -> None:
        try:
            self._metrics.observe(
                component=self._component,
                op=op,
                ms=(time.monotonic() - t0) * 1000.0,
                ok=ok,
                code=code,
                extra=extra or None,
            )
        except Exception as metrics_error:  # noqa: BLE001
            logger.debug("metrics sink failed: %s", metrics_error)


__all__ = [
    "REQUEST_ID_HEADER",
    "Transport",
    "decode_response",
]
