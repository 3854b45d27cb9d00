# vikingdb_sdk/vector/model/embedding.py
# SPDX-License-Identifier: Apache-2.0
"""Embedding generation shapes."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

from vikingdb_sdk.vector.model.common import CommonResponse, MapStr, to_wire


@dataclass
class EmbeddingModelOpt:
    """Dense or sparse model selection. `name` is always sent."""
    name: str = ""
    version: Optional[str] = None
    dim: Optional[int] = None


@dataclass
class FullModalData:
    """One element of a multimodal sequence."""
    text: Optional[str] = None
    image: Optional[str] = None
    video: Optional[Any] = None

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "FullModalData":
        return cls(
            text=payload.get("text"),
            image=payload.get("image"),
            video=payload.get("video"),
        )


@dataclass
class EmbeddingData:
    text: Optional[str] = None
    image: Optional[Any] = None
    video: Optional[Any] = None
    full_modal_seq: Optional[List[FullModalData]] = None


@dataclass
class EmbeddingRequest:
    data: List[EmbeddingData] = field(default_factory=list)
    dense_model: Optional[EmbeddingModelOpt] = None
    sparse_model: Optional[EmbeddingModelOpt] = None
    project_name: Optional[str] = None

    def to_dict(self) -> MapStr:
        return to_wire(self)


@dataclass
class Embedding:
    dense_vectors: Optional[List[float]] = None
    sparse_vectors: Optional[Dict[str, float]] = None

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "Embedding":
        dense = payload.get("dense")
        sparse = payload.get("sparse")
        return cls(
            dense_vectors=[float(x) for x in dense] if dense is not None else None,
            sparse_vectors={k: float(v) for k, v in sparse.items()} if sparse is not None else None,
        )


@dataclass
class EmbeddingResult:
    data: List[Embedding] = field(default_factory=list)
    token_usage: Any = None

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "EmbeddingResult":
        return cls(
            data=[Embedding.from_dict(x) for x in payload.get("data") or []],
            token_usage=payload.get("token_usage"),
        )


@dataclass
class EmbeddingResponse(CommonResponse):
    result: Optional[EmbeddingResult] = None

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "EmbeddingResponse":
        raw = payload.get("result")
        return cls(
            **cls.common_fields(payload),
            result=EmbeddingResult.from_dict(raw) if raw is not None else None,
        )


__all__ = [
    "EmbeddingModelOpt",
    "FullModalData",
    "EmbeddingData",
    "EmbeddingRequest",
    "Embedding",
    "EmbeddingResult",
    "EmbeddingResponse",
]
