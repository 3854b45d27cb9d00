# vikingdb_sdk/vector/collection_client.py
# SPDX-License-Identifier: Apache-2.0
"""
Collection-scoped data operations.

A `CollectionClient` is a cheap handle: it holds a `CollectionLocator` and a
reference to the shared Transport. Every call posts the locator fields merged
flat with the request fields, e.g.

    {"collection_name": "docs", "resource_id": "", "data": [...], "ttl": 60}
"""
from __future__ import annotations

from typing import Optional

from vikingdb_sdk.core.operation_context import OperationContext
from vikingdb_sdk.vector.model.collection_data import (
    DeleteDataRequest,
    DeleteDataResponse,
    FetchDataInCollectionRequest,
    FetchDataInCollectionResponse,
    UpdateDataRequest,
    UpdateDataResponse,
    UpsertDataRequest,
    UpsertDataResponse,
)
from vikingdb_sdk.vector.model.common import CollectionLocator, MapStr
from vikingdb_sdk.vector.transport import Transport

UPSERT_PATH = "/api/vikingdb/data/upsert"
UPDATE_PATH = "/api/vikingdb/data/update"
DELETE_PATH = "/api/vikingdb/data/delete"
FETCH_IN_COLLECTION_PATH = "/api/vikingdb/data/fetch_in_collection"


class CollectionClient:
    """Data plane operations against one collection."""

    def __init__(self, transport: Transport, locator: CollectionLocator) -> None:
        self._transport = transport
        self._locator = locator

    @property
    def locator(self) -> CollectionLocator:
        return self._locator

    @property
    def collection_name(self) -> str:
        return self._locator.collection_name

    @property
    def project_name(self) -> Optional[str]:
        return self._locator.project_name

    @property
    def resource_id(self) -> str:
        return self._locator.resource_id

    def _envelope(self, request) -> MapStr:
        return {**self._locator.to_dict(), **request.to_dict()}

    async def upsert(
        self,
        request: UpsertDataRequest,
        *,
        ctx: Optional[OperationContext] = None,
    ) -> UpsertDataResponse:
        """Insert or overwrite documents by primary key."""
        return await self._transport.execute(
            "POST", UPSERT_PATH, self._envelope(request), UpsertDataResponse, ctx=ctx
        )

    async def update(
        self,
        request: UpdateDataRequest,
        *,
        ctx: Optional[OperationContext] = None,
    ) -> UpdateDataResponse:
        """Partially update existing documents."""
        return await self._transport.execute(
            "POST", UPDATE_PATH, self._envelope(request), UpdateDataResponse, ctx=ctx
        )

    async def delete(
        self,
        request: DeleteDataRequest,
        *,
        ctx: Optional[OperationContext] = None,
    ) -> DeleteDataResponse:
        """Delete documents by id, or everything with `del_all=True`."""
        return await self._transport.execute(
            "POST", DELETE_PATH, self._envelope(request), DeleteDataResponse, ctx=ctx
        )

    async def fetch(
        self,
        request: FetchDataInCollectionRequest,
        *,
        ctx: Optional[OperationContext] = None,
    ) -> FetchDataInCollectionResponse:
        return await self._transport.execute(
            "POST",
            FETCH_IN_COLLECTION_PATH,
            self._envelope(request),
            FetchDataInCollectionResponse,
            ctx=ctx,
        )

    def __repr__(self) -> str:
        return f"CollectionClient(collection_name={self.collection_name!r})"


__all__ = ["CollectionClient"]
