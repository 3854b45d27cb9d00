# vikingdb_sdk/vector/rerank_client.py
# SPDX-License-Identifier: Apache-2.0
"""Rerank client."""
from __future__ import annotations

from typing import Optional

from vikingdb_sdk.core.operation_context import OperationContext
from vikingdb_sdk.vector.model.rerank import RerankRequest, RerankResponse
from vikingdb_sdk.vector.transport import Transport

RERANK_PATH = "/api/vikingdb/rerank"


class RerankClient:
    def __init__(self, transport: Transport) -> None:
        self._transport = transport

    async def rerank(
        self,
        request: RerankRequest,
        *,
        ctx: Optional[OperationContext] = None,
    ) -> RerankResponse:
        return await self._transport.execute(
            "POST", RERANK_PATH, request.to_dict(), RerankResponse, ctx=ctx
        )


__all__ = ["RerankClient"]
