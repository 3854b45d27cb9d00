# vikingdb_sdk/vector/embedding_client.py
# SPDX-License-Identifier: Apache-2.0
"""Embedding generation client."""
from __future__ import annotations

from typing import Optional

from vikingdb_sdk.core.operation_context import OperationContext
from vikingdb_sdk.vector.model.embedding import EmbeddingRequest, EmbeddingResponse
from vikingdb_sdk.vector.transport import Transport

EMBEDDING_PATH = "/api/vikingdb/embedding"


class EmbeddingClient:
    def __init__(self, transport: Transport) -> None:
        self._transport = transport

    async def embedding(
        self,
        request: EmbeddingRequest,
        *,
        ctx: Optional[OperationContext] = None,
    ) -> EmbeddingResponse:
        """Vectorize text/image/video inputs with the selected models."""
        return await self._transport.execute(
            "POST", EMBEDDING_PATH, request.to_dict(), EmbeddingResponse, ctx=ctx
        )


__all__ = ["EmbeddingClient"]
