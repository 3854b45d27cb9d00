# vikingdb_sdk/vector/model/rerank.py
# SPDX-License-Identifier: Apache-2.0
"""Rerank shapes."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional

from vikingdb_sdk.core.json_codec import to_float
from vikingdb_sdk.vector.model.common import CommonResponse, MapStr, to_wire
from vikingdb_sdk.vector.model.embedding import FullModalData


@dataclass
class RerankRequest:
    """
    Score candidate documents against a query.

    Attributes:
        model_name: Rerank model name
        model_version: Rerank model version
        data: Candidates, each a multimodal sequence
        query: The query as a multimodal sequence
        instruction: Optional instruction prompt
        return_origin_data: Echo candidates back in the result
    """
    model_name: str = ""
    model_version: str = ""
    data: List[List[FullModalData]] = field(default_factory=list)
    query: List[FullModalData] = field(default_factory=list)
    instruction: Optional[str] = None
    return_origin_data: Optional[bool] = None

    def to_dict(self) -> MapStr:
        return to_wire(self)


@dataclass
class RerankItem:
    id: int = 0
    score: float = 0.0
    origin_data: Optional[List[FullModalData]] = None

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "RerankItem":
        origin = payload.get("origin_data")
        return cls(
            id=int(payload.get("id") or 0),
            score=to_float(payload.get("score")),
            origin_data=[FullModalData.from_dict(x) for x in origin] if origin is not None else None,
        )


@dataclass
class RerankResult:
    data: List[RerankItem] = field(default_factory=list)
    token_usage: Any = None

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "RerankResult":
        return cls(
            data=[RerankItem.from_dict(x) for x in payload.get("data") or []],
            token_usage=payload.get("token_usage"),
        )


@dataclass
class RerankResponse(CommonResponse):
    result: Optional[RerankResult] = None

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "RerankResponse":
        raw = payload.get("result")
        return cls(
            **cls.common_fields(payload),
            result=RerankResult.from_dict(raw) if raw is not None else None,
        )


__all__ = [
    "RerankRequest",
    "RerankItem",
    "RerankResult",
    "RerankResponse",
]
