# vikingdb_sdk/vector/client.py
# SPDX-License-Identifier: Apache-2.0
"""
VikingDBClient: entry point of the SDK.

Owns one Transport (and through it one httpx connection pool) and hands out
lightweight scoped clients that share it:

    async with VikingDBClient(
        Auth.iam(ak, sk),
        with_endpoint("https://api-vikingdb.vikingdb.cn-beijing.volces.com"),
        with_region("cn-beijing"),
    ) as client:
        index = client.index(IndexLocator("docs", "docs_idx"))
        resp = await index.search_by_vector(SearchByVectorRequest(dense_vector=vec))

Scoped clients hold no state of their own beyond their locator, so creating
one per request is fine.
"""
from __future__ import annotations

import logging
from typing import Any, Optional, Union

from vikingdb_sdk.core.metrics import MetricsSink
from vikingdb_sdk.core.retry import DEFAULT_RETRY_POLICY, RetryPolicy
from vikingdb_sdk.vector.auth import Auth
from vikingdb_sdk.vector.collection_client import CollectionClient
from vikingdb_sdk.vector.config import ClientOption, Config, build_config
from vikingdb_sdk.vector.embedding_client import EmbeddingClient
from vikingdb_sdk.vector.index_client import IndexClient
from vikingdb_sdk.vector.model.common import CollectionLocator, IndexLocator
from vikingdb_sdk.vector.rerank_client import RerankClient
from vikingdb_sdk.vector.signer import Signer
from vikingdb_sdk.vector.transport import Transport

logger = logging.getLogger(__name__)


class VikingDBClient:
    """
    Client for the VikingDB data plane, embedding and rerank APIs.

    Args:
        auth:         Credentials (`Auth.iam`, `Auth.api_key` or `Auth.none`).
        *options:     `ClientOption` callables applied in order over the
                      defaults.
        config:       Starting configuration instead of `DEFAULT_CONFIG`.
        metrics:      Optional MetricsSink; NoopMetrics when omitted.
        signer:       Replacement IAM signer (any `Signer`).
        retry_policy: Backoff schedule for transient failures.

    Raises:
        VikingDBError(InvalidParameter): empty endpoint or incomplete
        credentials.
    """

    def __init__(
        self,
        auth: Auth,
        *options: ClientOption,
        config: Optional[Config] = None,
        metrics: Optional[MetricsSink] = None,
        signer: Optional[Signer] = None,
        retry_policy: RetryPolicy = DEFAULT_RETRY_POLICY,
    ) -> None:
        cfg = build_config(*options, base=config) if config is not None else build_config(*options)
        self._transport = Transport(
            cfg,
            auth,
            metrics=metrics,
            signer=signer,
            retry_policy=retry_policy,
        )
        logger.debug(
            "vikingdb client ready: endpoint=%s region=%s auth=%s",
            self._transport.config.endpoint,
            self._transport.config.region,
            auth.kind.value,
        )

    @property
    def config(self) -> Config:
        """Effective configuration after normalisation."""
        return self._transport.config

    @property
    def transport(self) -> Transport:
        return self._transport

    # ------------------------------------------------------------------ #
    # Scoped clients
    # ------------------------------------------------------------------ #

    def collection(self, locator: Union[CollectionLocator, str]) -> CollectionClient:
        """Client bound to one collection. A bare string is the collection name."""
        if isinstance(locator, str):
            locator = CollectionLocator(collection_name=locator)
        return CollectionClient(self._transport, locator)

    def index(self, locator: IndexLocator) -> IndexClient:
        return IndexClient(self._transport, locator)

    def embedding(self) -> EmbeddingClient:
        return EmbeddingClient(self._transport)

    def rerank(self) -> RerankClient:
        return RerankClient(self._transport)

    # ------------------------------------------------------------------ #
    # Lifecycle
    # ------------------------------------------------------------------ #

    async def aclose(self) -> None:
        await self._transport.aclose()

    async def __aenter__(self) -> "VikingDBClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()


__all__ = ["VikingDBClient"]
