# vikingdb_sdk/core/__init__.py
# SPDX-License-Identifier: Apache-2.0

"""
Protocol-agnostic building blocks: per-call context, retry, metrics, error
context and the lossless JSON codec.
"""

from vikingdb_sdk.core.error_context import attach_context, get_context, has_context
from vikingdb_sdk.core.metrics import MetricsSink, NoopMetrics
from vikingdb_sdk.core.operation_context import OperationContext, now_ms
from vikingdb_sdk.core.retry import DEFAULT_RETRY_POLICY, RetryPolicy, retry_async

__all__ = [
    "attach_context",
    "get_context",
    "has_context",
    "MetricsSink",
    "NoopMetrics",
    "OperationContext",
    "now_ms",
    "DEFAULT_RETRY_POLICY",
    "RetryPolicy",
    "retry_async",
]
