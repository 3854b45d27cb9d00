# vikingdb_sdk/core/metrics.py
# SPDX-License-Identifier: Apache-2.0
"""
Metrics extension point.

The Transport reports one `observe` per call and one `counter("retries")` per
retry. Plug in any object with the same two methods to forward them to your
metrics system. Labels stay low-cardinality: component, operation path and
error code only.
"""
from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol


class MetricsSink(Protocol):
    """Protocol for metrics collection implementations."""

    def observe(
        self,
        *,
        component: str,
        op: str,
        ms: float,
        ok: bool,
        code: str = "OK",
        extra: Optional[Mapping[str, Any]] = None,
    ) -> None:
        """Record operation timing and status."""
        ...

    def counter(
        self,
        *,
        component: str,
        name: str,
        value: int = 1,
        extra: Optional[Mapping[str, Any]] = None,
    ) -> None:
        """Increment a counter metric."""
        ...


class NoopMetrics:
    """No-operation metrics sink, the default."""
    def observe(self, **_: Any) -> None: ...
    def counter(self, **_: Any) -> None: ...


__all__ = ["MetricsSink", "NoopMetrics"]
