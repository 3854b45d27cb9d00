# vikingdb_sdk/vector/index_client.py
# SPDX-License-Identifier: Apache-2.0
"""
Index-scoped fetch, search and aggregation.

Search requests share the `SearchBase` fields (filter, partition,
output_fields, limit, offset, advance); each variant adds the fields for its
mode and goes to its own path under `/api/vikingdb/data/search/`. All of
them answer with a `SearchResponse`.
"""
from __future__ import annotations

from typing import Optional

from vikingdb_sdk.core.operation_context import OperationContext
from vikingdb_sdk.vector.model.common import IndexLocator, MapStr
from vikingdb_sdk.vector.model.index_data import (
    AggRequest,
    AggResponse,
    FetchDataInIndexRequest,
    FetchDataInIndexResponse,
    SearchByIDRequest,
    SearchByKeywordsRequest,
    SearchByMultiModalRequest,
    SearchByRandomRequest,
    SearchByScalarRequest,
    SearchByVectorRequest,
    SearchResponse,
)
from vikingdb_sdk.vector.transport import Transport

FETCH_IN_INDEX_PATH = "/api/vikingdb/data/fetch_in_index"
SEARCH_BY_VECTOR_PATH = "/api/vikingdb/data/search/vector"
SEARCH_BY_MULTI_MODAL_PATH = "/api/vikingdb/data/search/multi_modal"
SEARCH_BY_ID_PATH = "/api/vikingdb/data/search/id"
SEARCH_BY_SCALAR_PATH = "/api/vikingdb/data/search/scalar"
SEARCH_BY_KEYWORDS_PATH = "/api/vikingdb/data/search/keywords"
SEARCH_BY_RANDOM_PATH = "/api/vikingdb/data/search/random"
AGGREGATE_PATH = "/api/vikingdb/data/agg"


class IndexClient:
    """Read operations against one index of a collection."""

    def __init__(self, transport: Transport, locator: IndexLocator) -> None:
        self._transport = transport
        self._locator = locator

    @property
    def locator(self) -> IndexLocator:
        return self._locator

    @property
    def collection_name(self) -> str:
        return self._locator.collection_name

    @property
    def index_name(self) -> str:
        return self._locator.index_name

    @property
    def project_name(self) -> Optional[str]:
        return self._locator.project_name

    @property
    def resource_id(self) -> str:
        return self._locator.resource_id

    def _envelope(self, request) -> MapStr:
        return {**self._locator.to_dict(), **request.to_dict()}

    async def _search(self, path: str, request, ctx: Optional[OperationContext]) -> SearchResponse:
        return await self._transport.execute(
            "POST", path, self._envelope(request), SearchResponse, ctx=ctx
        )

    async def fetch(
        self,
        request: FetchDataInIndexRequest,
        *,
        ctx: Optional[OperationContext] = None,
    ) -> FetchDataInIndexResponse:
        """Fetch documents by id as stored in this index (vectors included)."""
        return await self._transport.execute(
            "POST",
            FETCH_IN_INDEX_PATH,
            self._envelope(request),
            FetchDataInIndexResponse,
            ctx=ctx,
        )

    async def search_by_vector(
        self,
        request: SearchByVectorRequest,
        *,
        ctx: Optional[OperationContext] = None,
    ) -> SearchResponse:
        """Nearest neighbours of a dense (and optionally sparse) vector."""
        return await self._search(SEARCH_BY_VECTOR_PATH, request, ctx)

    async def search_by_multi_modal(
        self,
        request: SearchByMultiModalRequest,
        *,
        ctx: Optional[OperationContext] = None,
    ) -> SearchResponse:
        """Search with text/image/video input vectorized server-side."""
        return await self._search(SEARCH_BY_MULTI_MODAL_PATH, request, ctx)

    async def search_by_id(
        self,
        request: SearchByIDRequest,
        *,
        ctx: Optional[OperationContext] = None,
    ) -> SearchResponse:
        """Nearest neighbours of an already stored document."""
        return await self._search(SEARCH_BY_ID_PATH, request, ctx)

    async def search_by_scalar(
        self,
        request: SearchByScalarRequest,
        *,
        ctx: Optional[OperationContext] = None,
    ) -> SearchResponse:
        """Top documents ordered by a scalar field."""
        return await self._search(SEARCH_BY_SCALAR_PATH, request, ctx)

    async def search_by_keywords(
        self,
        request: SearchByKeywordsRequest,
        *,
        ctx: Optional[OperationContext] = None,
    ) -> SearchResponse:
        return await self._search(SEARCH_BY_KEYWORDS_PATH, request, ctx)

    async def search_by_random(
        self,
        request: SearchByRandomRequest,
        *,
        ctx: Optional[OperationContext] = None,
    ) -> SearchResponse:
        return await self._search(SEARCH_BY_RANDOM_PATH, request, ctx)

    async def aggregate(
        self,
        request: AggRequest,
        *,
        ctx: Optional[OperationContext] = None,
    ) -> AggResponse:
        """Run an aggregation (e.g. count grouped by a field)."""
        return await self._transport.execute(
            "POST", AGGREGATE_PATH, self._envelope(request), AggResponse, ctx=ctx
        )

    def __repr__(self) -> str:
        return (
            f"IndexClient(collection_name={self.collection_name!r}, "
            f"index_name={self.index_name!r})"
        )


__all__ = ["IndexClient"]
