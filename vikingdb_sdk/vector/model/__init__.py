# vikingdb_sdk/vector/model/__init__.py
# SPDX-License-Identifier: Apache-2.0

"""
Request/response data-transfer types for the VikingDB vector API.
"""

from vikingdb_sdk.vector.model.common import (
    MapStr,
    CollectionLocator,
    IndexLocator,
    CommonResponse,
)
from vikingdb_sdk.vector.model.collection_data import (
    DataItem,
    UpsertDataRequest,
    UpdateDataRequest,
    DeleteDataRequest,
    FetchDataInCollectionRequest,
    WriteDataResult,
    UpsertDataResult,
    UpdateDataResult,
    UpsertDataResponse,
    UpdateDataResponse,
    DeleteDataResponse,
    FetchDataInCollectionResult,
    FetchDataInCollectionResponse,
)
from vikingdb_sdk.vector.model.index_data import (
    ScalarOrder,
    FetchDataInIndexRequest,
    IndexDataItem,
    FetchDataInIndexResult,
    FetchDataInIndexResponse,
    SearchAdvance,
    SearchBase,
    SearchByVectorRequest,
    SearchByMultiModalRequest,
    SearchByIDRequest,
    SearchByScalarRequest,
    SearchByKeywordsRequest,
    SearchByRandomRequest,
    SearchItemResult,
    SearchResult,
    SearchResponse,
    AggRequest,
    AggResult,
    AggResponse,
)
from vikingdb_sdk.vector.model.embedding import (
    EmbeddingModelOpt,
    FullModalData,
    EmbeddingData,
    EmbeddingRequest,
    Embedding,
    EmbeddingResult,
    EmbeddingResponse,
)
from vikingdb_sdk.vector.model.rerank import (
    RerankRequest,
    RerankItem,
    RerankResult,
    RerankResponse,
)

__all__ = [
    # Common
    "MapStr",
    "CollectionLocator",
    "IndexLocator",
    "CommonResponse",
    # Collection data
    "DataItem",
    "UpsertDataRequest",
    "UpdateDataRequest",
    "DeleteDataRequest",
    "FetchDataInCollectionRequest",
    "WriteDataResult",
    "UpsertDataResult",
    "UpdateDataResult",
    "UpsertDataResponse",
    "UpdateDataResponse",
    "DeleteDataResponse",
    "FetchDataInCollectionResult",
    "FetchDataInCollectionResponse",
    # Index data
    "ScalarOrder",
    "FetchDataInIndexRequest",
    "IndexDataItem",
    "FetchDataInIndexResult",
    "FetchDataInIndexResponse",
    "SearchAdvance",
    "SearchBase",
    "SearchByVectorRequest",
    "SearchByMultiModalRequest",
    "SearchByIDRequest",
    "SearchByScalarRequest",
    "SearchByKeywordsRequest",
    "SearchByRandomRequest",
    "SearchItemResult",
    "SearchResult",
    "SearchResponse",
    "AggRequest",
    "AggResult",
    "AggResponse",
    # Embedding
    "EmbeddingModelOpt",
    "FullModalData",
    "EmbeddingData",
    "EmbeddingRequest",
    "Embedding",
    "EmbeddingResult",
    "EmbeddingResponse",
    # Rerank
    "RerankRequest",
    "RerankItem",
    "RerankResult",
    "RerankResponse",
]
