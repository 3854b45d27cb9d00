# vikingdb_sdk/vector/model/index_data.py
# SPDX-License-Identifier: Apache-2.0
"""Index-scoped operations: fetch, the search family, and aggregation."""
from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

from vikingdb_sdk.core.json_codec import to_float
from vikingdb_sdk.vector.model.collection_data import DataItem
from vikingdb_sdk.vector.model.common import (
    CommonResponse,
    MapStr,
    opt_int,
    to_wire,
)


class ScalarOrder(str, enum.Enum):
    ASC = "asc"
    DESC = "desc"


# =============================================================================
# Fetch
# =============================================================================

@dataclass
class FetchDataInIndexRequest:
    """
    Fetch documents (optionally with vectors) from an index.

    Attributes:
        ids: Primary keys to fetch
        partition: Optional partition (string or int partition value)
        output_fields: Restrict returned scalar fields
    """
    ids: List[Any] = field(default_factory=list)
    partition: Optional[Any] = None
    output_fields: Optional[List[str]] = None

    def to_dict(self) -> MapStr:
        return to_wire(self)


@dataclass
class IndexDataItem(DataItem):
    dense_dim: Optional[int] = None
    dense_vector: Optional[List[float]] = None

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "IndexDataItem":
        vec = payload.get("dense_vector")
        return cls(
            id=payload.get("id"),
            fields=dict(payload.get("fields") or {}),
            dense_dim=opt_int(payload.get("dense_dim")),
            dense_vector=[float(x) for x in vec] if vec is not None else None,
        )


@dataclass
class FetchDataInIndexResult:
    items: List[IndexDataItem] = field(default_factory=list)
    not_found_ids: List[Any] = field(default_factory=list)

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "FetchDataInIndexResult":
        return cls(
            items=[IndexDataItem.from_dict(x) for x in payload.get("fetch") or []],
            not_found_ids=list(payload.get("ids_not_exist") or []),
        )


@dataclass
class FetchDataInIndexResponse(CommonResponse):
    result: Optional[FetchDataInIndexResult] = None

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "FetchDataInIndexResponse":
        raw = payload.get("result")
        return cls(
            **cls.common_fields(payload),
            result=FetchDataInIndexResult.from_dict(raw) if raw is not None else None,
        )


# =============================================================================
# Search
# =============================================================================

@dataclass
class SearchAdvance:
    """Advanced search knobs; every field is optional."""
    dense_weight: Optional[float] = None
    ids_in: Optional[List[Any]] = None
    ids_not_in: Optional[List[Any]] = None
    post_process_ops: Optional[List[MapStr]] = None
    post_process_input_limit: Optional[int] = None
    scale_k: Optional[float] = None
    filter_pre_ann_limit: Optional[int] = None
    filter_pre_ann_ratio: Optional[float] = None


@dataclass
class SearchBase:
    """
    Filters and output hints shared by every search mode.

    Attributes:
        filter: Scalar filter DSL
        partition: Optional partition value
        output_fields: Fields to return per hit
        limit: Max hits
        offset: Hits to skip
        advance: Advanced options
    """
    filter: Optional[MapStr] = None
    partition: Optional[Any] = None
    output_fields: Optional[List[str]] = None
    limit: Optional[int] = None
    offset: Optional[int] = None
    advance: Optional[SearchAdvance] = None

    def to_dict(self) -> MapStr:
        return to_wire(self)


@dataclass
class SearchByVectorRequest(SearchBase):
    dense_vector: List[float] = field(default_factory=list)
    sparse_vector: Optional[Dict[str, float]] = None


@dataclass
class SearchByMultiModalRequest(SearchBase):
    text: Optional[str] = None
    image: Optional[Any] = None
    video: Optional[Any] = None
    need_instruction: Optional[bool] = None


@dataclass
class SearchByIDRequest(SearchBase):
    id: Any = None


@dataclass
class SearchByScalarRequest(SearchBase):
    field: Optional[str] = None
    order: Optional[ScalarOrder] = None


@dataclass
class SearchByKeywordsRequest(SearchBase):
    keywords: Optional[List[str]] = None
    query: Optional[str] = None
    case_sensitive: Optional[bool] = None


@dataclass
class SearchByRandomRequest(SearchBase):
    pass


@dataclass
class SearchItemResult:
    """A single hit. Scores are converted explicitly to float."""
    id: Any = None
    fields: MapStr = field(default_factory=dict)
    ann_score: float = 0.0
    score: float = 0.0

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "SearchItemResult":
        return cls(
            id=payload.get("id"),
            fields=dict(payload.get("fields") or {}),
            ann_score=to_float(payload.get("ann_score")),
            score=to_float(payload.get("score")),
        )


@dataclass
class SearchResult:
    data: List[SearchItemResult] = field(default_factory=list)
    filter_matched_count: int = 0
    total_return_count: int = 0
    real_text_query: str = ""
    token_usage: Optional[MapStr] = None

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "SearchResult":
        return cls(
            data=[SearchItemResult.from_dict(x) for x in payload.get("data") or []],
            filter_matched_count=int(payload.get("filter_matched_count") or 0),
            total_return_count=int(payload.get("total_return_count") or 0),
            real_text_query=payload.get("real_text_query") or "",
            token_usage=payload.get("token_usage"),
        )


@dataclass
class SearchResponse(CommonResponse):
    result: Optional[SearchResult] = None

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "SearchResponse":
        raw = payload.get("result")
        return cls(
            **cls.common_fields(payload),
            result=SearchResult.from_dict(raw) if raw is not None else None,
        )


# =============================================================================
# Aggregation
# =============================================================================

@dataclass
class AggRequest:
    """
    Aggregate over documents matching `filter`.

    Attributes:
        op: Aggregation operator, e.g. "count"
        field: Field to group by
        cond: Post-aggregation condition, e.g. {"gt": 1}
        order: Sort order of groups
    """
    op: str = "count"
    field: Optional[str] = None
    cond: Optional[MapStr] = None
    order: Optional[ScalarOrder] = None
    filter: Optional[MapStr] = None
    partition: Optional[Any] = None

    def to_dict(self) -> MapStr:
        return to_wire(self)


@dataclass
class AggResult:
    agg: MapStr = field(default_factory=dict)
    op: str = ""
    field: str = ""

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "AggResult":
        return cls(
            agg=dict(payload.get("agg") or {}),
            op=payload.get("op") or "",
            field=payload.get("field") or "",
        )


@dataclass
class AggResponse(CommonResponse):
    result: Optional[AggResult] = None

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "AggResponse":
        raw = payload.get("result")
        return cls(
            **cls.common_fields(payload),
            result=AggResult.from_dict(raw) if raw is not None else None,
        )


__all__ = [
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
]
