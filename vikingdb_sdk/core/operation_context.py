# vikingdb_sdk/core/operation_context.py
# SPDX-License-Identifier: Apache-2.0

"""
Per-call OperationContext for the VikingDB SDK.

Every public operation accepts an optional `ctx` carrying overrides that apply
to that single invocation only. Nothing in the context is persisted on the
client; the Transport layers it over its own defaults and discards it when the
call returns.

Typical usage
-------------

    from vikingdb_sdk.core.operation_context import OperationContext

    ctx = OperationContext(
        request_id="req-123",          # propagated as X-Tt-Logid
        headers={"X-Debug": "1"},
        query={"trace": "on"},
        max_retries=1,                 # overrides the client default when > 0
    ).with_timeout(5_000)              # absolute deadline 5s from now

    resp = await index.search_by_random(SearchByRandomRequest(limit=1), ctx=ctx)

Notes
-----
- `deadline_ms` is an absolute epoch timestamp in milliseconds. Use
  `with_timeout()` to derive one from a relative budget.
- `attrs` is the escape hatch for caller metadata. It is never sent on the
  wire.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field, replace
from typing import Any, Dict, Mapping, Optional


def now_ms() -> int:
    """Return current epoch time in milliseconds."""
    return int(time.time() * 1000)


@dataclass(frozen=True)
class OperationContext:
    """
    Request-scoped options for a single SDK call.

    Fields
    ------
    request_id:
        Caller-chosen identifier sent as the request-id header so that
        client-side and server-side logs can be correlated.

    headers:
        Extra HTTP headers. They override the SDK defaults (User-Agent,
        Accept, Content-Type) but not the request-id header, which is owned
        by `request_id`: an `X-Tt-Logid` entry here is always dropped, even
        when `request_id` is unset. Set `request_id` to send that header.

    query:
        Extra query-string parameters.

    max_retries:
        Retry budget for this call. Only honoured when positive; otherwise
        the client-wide default applies.

    deadline_ms:
        Absolute epoch deadline in milliseconds covering the whole call,
        retries included.

    attrs:
        Free-form caller metadata, never transmitted.
    """

    request_id: Optional[str] = None
    headers: Mapping[str, str] = field(default_factory=dict)
    query: Mapping[str, str] = field(default_factory=dict)
    max_retries: Optional[int] = None
    deadline_ms: Optional[int] = None
    attrs: Mapping[str, Any] = field(default_factory=dict)

    # ------------------------------------------------------------------ #
    # Deadline helpers
    # ------------------------------------------------------------------ #

    def remaining_ms(self) -> Optional[int]:
        """
        Return remaining milliseconds until the deadline, or None if no
        deadline is set. Never negative (0 once expired).
        """
        if self.deadline_ms is None:
            return None
        return max(0, self.deadline_ms - now_ms())

    def is_expired(self) -> bool:
        return self.remaining_ms() == 0

    def with_timeout(self, timeout_ms: int) -> "OperationContext":
        """Return a copy whose deadline is `timeout_ms` from now."""
        return replace(self, deadline_ms=now_ms() + max(0, int(timeout_ms)))

    # ------------------------------------------------------------------ #
    # Non-destructive mutation helpers
    # ------------------------------------------------------------------ #

    def with_updates(
        self,
        *,
        request_id: Optional[str] = None,
        headers: Optional[Mapping[str, str]] = None,
        query: Optional[Mapping[str, str]] = None,
        max_retries: Optional[int] = None,
        deadline_ms: Optional[int] = None,
        attrs: Optional[Mapping[str, Any]] = None,
    ) -> "OperationContext":
        """
        Return a new OperationContext with optional overrides.

        Scalar fields replace the existing value when not None. Mapping
        fields are merged into a copy of the existing mapping, with the new
        entries taking precedence.
        """
        return replace(
            self,
            request_id=request_id if request_id is not None else self.request_id,
            headers=_merged(self.headers, headers),
            query=_merged(self.query, query),
            max_retries=max_retries if max_retries is not None else self.max_retries,
            deadline_ms=deadline_ms if deadline_ms is not None else self.deadline_ms,
            attrs=_merged(self.attrs, attrs),
        )

    def with_header(self, key: str, value: str) -> "OperationContext":
        return self.with_updates(headers={key: value})

    def with_query_param(self, key: str, value: str) -> "OperationContext":
        return self.with_updates(query={key: value})

    def to_dict(self) -> Dict[str, Any]:
        """Normalized dict view, handy for logging."""
        return {
            "request_id": self.request_id,
            "headers": dict(self.headers),
            "query": dict(self.query),
            "max_retries": self.max_retries,
            "deadline_ms": self.deadline_ms,
            "attrs": dict(self.attrs),
        }


def _merged(base: Mapping[str, Any], extra: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    out = dict(base or {})
    if extra:
        out.update(extra)
    return out


__all__ = [
    "OperationContext",
    "now_ms",
]
