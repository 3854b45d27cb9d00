# SPDX-License-Identifier: Apache-2.0
"""
Environment helpers for the examples.

The SDK itself never reads the environment; the examples do, so that they can
run against a real deployment:

    export VIKINGDB_AK=... VIKINGDB_SK=...
    export VIKINGDB_HOST=api-vikingdb.vikingdb.cn-beijing.volces.com
    export VIKINGDB_REGION=cn-beijing
    export VIKINGDB_COLLECTION=... VIKINGDB_INDEX=...
    python -m examples.vector.ex01_connectivity
"""
from __future__ import annotations

import logging
import os
import uuid
from typing import Any, Optional

from vikingdb_sdk.core.metrics import MetricsSink
from vikingdb_sdk.vector import (
    Auth,
    CollectionLocator,
    IndexLocator,
    VikingDBClient,
    with_endpoint,
    with_region,
)

__all__ = [
    "require_env",
    "client_from_env",
    "collection_from_env",
    "index_from_env",
    "new_request_id",
    "setup_logging",
]


def require_env(name: str) -> str:
    value = os.getenv(name, "")
    if not value:
        raise SystemExit(f"missing environment variable {name}")
    return value


def client_from_env(*, metrics: Optional[MetricsSink] = None, **kwargs: Any) -> VikingDBClient:
    """IAM-authenticated client for VIKINGDB_HOST / VIKINGDB_REGION."""
    return VikingDBClient(
        Auth.iam(require_env("VIKINGDB_AK"), require_env("VIKINGDB_SK")),
        with_endpoint("https://" + require_env("VIKINGDB_HOST")),
        with_region(os.getenv("VIKINGDB_REGION", "cn-beijing")),
        metrics=metrics,
        **kwargs,
    )


def collection_from_env() -> CollectionLocator:
    return CollectionLocator(collection_name=require_env("VIKINGDB_COLLECTION"))


def index_from_env() -> IndexLocator:
    return IndexLocator.of(collection_from_env(), require_env("VIKINGDB_INDEX"))


def new_request_id() -> str:
    return f"req_{uuid.uuid4().hex[:16]}"


def setup_logging(level: int = logging.INFO) -> None:
    """Route SDK logs to stderr; DEBUG shows every attempt."""
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
