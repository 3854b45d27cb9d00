# vikingdb_sdk/core/error_context.py
# SPDX-License-Identifier: Apache-2.0

"""
Error context utilities for the VikingDB SDK.

The Transport enriches every error it raises with a small mapping of
debugging metadata (operation, path, attempt count, ...). The mapping is
stored as an exception attribute, so the error type and message reach the
caller unchanged while log handlers can still pick the context up:

    try:
        await index.search_by_vector(req)
    except VikingDBError as exc:
        ctx = get_context(exc)
        logger.error(
            "search failed",
            extra={"path": ctx.get("path"), "attempts": ctx.get("attempts")},
        )

Two attributes are set:

- `__vikingdb_context__` (canonical, merged across layers)
- `__<component>_context__` (e.g. `__vector_transport_context__`)

Repeated calls merge into the existing mapping; the first `component` wins.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional

logger = logging.getLogger(__name__)

_CANONICAL_ATTR = "__vikingdb_context__"


def attach_context(
    exc: BaseException,
    component: str,
    **context: Any,
) -> None:
    """
    Attach debugging context to an exception.

    Attachment is best-effort; a failure here is logged at DEBUG and never
    replaces the original exception.
    """
    try:
        merged: Dict[str, Any] = {}
        existing = getattr(exc, _CANONICAL_ATTR, None)
        if isinstance(existing, Mapping):
            merged.update(existing)

        merged.setdefault("component", component)
        merged.update(context)

        setattr(exc, _CANONICAL_ATTR, merged)
        setattr(exc, f"__{component}_context__", merged)
    except Exception as attachment_error:  # noqa: BLE001
        logger.debug(
            "Failed to attach error context to %s: %s",
            type(exc).__name__,
            attachment_error,
            extra={"component": component},
        )


def get_context(
    exc: BaseException,
    *,
    component: Optional[str] = None,
) -> Mapping[str, Any]:
    """
    Retrieve attached context from an exception, or an empty dict.

    When `component` is given its specific attribute is preferred over the
    canonical one.
    """
    if component:
        specific = getattr(exc, f"__{component}_context__", None)
        if isinstance(specific, Mapping):
            return specific

    ctx = getattr(exc, _CANONICAL_ATTR, None)
    if isinstance(ctx, Mapping):
        return ctx
    return {}


def has_context(exc: BaseException) -> bool:
    return len(get_context(exc)) > 0


__all__ = [
    "attach_context",
    "get_context",
    "has_context",
]
