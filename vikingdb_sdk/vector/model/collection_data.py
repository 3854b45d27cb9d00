# vikingdb_sdk/vector/model/collection_data.py
# SPDX-License-Identifier: Apache-2.0
"""Collection-scoped data operations: upsert, update, delete, fetch."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional

from vikingdb_sdk.vector.model.common import CommonResponse, MapStr, to_wire


@dataclass
class DataItem:
    """A stored document: primary key plus scalar/vector fields."""
    id: Any = None
    fields: MapStr = field(default_factory=dict)

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "DataItem":
        return cls(id=payload.get("id"), fields=dict(payload.get("fields") or {}))


# =============================================================================
# Requests
# =============================================================================

@dataclass
class UpsertDataRequest:
    """
    Create or overwrite documents.

    Attributes:
        data: Documents as field-name → value mappings
        ttl: Optional time-to-live in seconds
        ignore_unknown_fields: Drop fields the collection schema does not know
        async_: Return before the write is indexed (sent as "async")
    """
    data: List[MapStr] = field(default_factory=list)
    ttl: Optional[int] = None
    ignore_unknown_fields: Optional[bool] = None
    async_: Optional[bool] = field(default=None, metadata={"json": "async"})

    def to_dict(self) -> MapStr:
        return to_wire(self)


@dataclass
class UpdateDataRequest:
    """Partially update existing documents (primary key required per item)."""
    data: List[MapStr] = field(default_factory=list)
    ttl: Optional[int] = None
    ignore_unknown_fields: Optional[bool] = None

    def to_dict(self) -> MapStr:
        return to_wire(self)


@dataclass
class DeleteDataRequest:
    """Delete by primary key, or everything with `del_all=True`."""
    ids: List[Any] = field(default_factory=list)
    del_all: Optional[bool] = None

    def to_dict(self) -> MapStr:
        return to_wire(self)


@dataclass
class FetchDataInCollectionRequest:
    ids: List[Any] = field(default_factory=list)

    def to_dict(self) -> MapStr:
        return to_wire(self)


# =============================================================================
# Responses
# =============================================================================

@dataclass
class WriteDataResult:
    token_usage: Any = None

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "WriteDataResult":
        return cls(token_usage=payload.get("token_usage"))


UpsertDataResult = WriteDataResult
UpdateDataResult = WriteDataResult


@dataclass
class UpsertDataResponse(CommonResponse):
    result: Optional[UpsertDataResult] = None

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "UpsertDataResponse":
        raw = payload.get("result")
        return cls(
            **cls.common_fields(payload),
            result=UpsertDataResult.from_dict(raw) if raw is not None else None,
        )


@dataclass
class UpdateDataResponse(CommonResponse):
    result: Optional[UpdateDataResult] = None

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "UpdateDataResponse":
        raw = payload.get("result")
        return cls(
            **cls.common_fields(payload),
            result=UpdateDataResult.from_dict(raw) if raw is not None else None,
        )


@dataclass
class DeleteDataResponse(CommonResponse):
    """Delete returns the common envelope only."""

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "DeleteDataResponse":
        return cls(**cls.common_fields(payload))


@dataclass
class FetchDataInCollectionResult:
    items: List[DataItem] = field(default_factory=list)
    not_found_ids: List[Any] = field(default_factory=list)

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "FetchDataInCollectionResult":
        return cls(
            items=[DataItem.from_dict(x) for x in payload.get("fetch") or []],
            not_found_ids=list(payload.get("ids_not_exist") or []),
        )


@dataclass
class FetchDataInCollectionResponse(CommonResponse):
    result: Optional[FetchDataInCollectionResult] = None

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "FetchDataInCollectionResponse":
        raw = payload.get("result")
        return cls(
            **cls.common_fields(payload),
            result=FetchDataInCollectionResult.from_dict(raw) if raw is not None else None,
        )


__all__ = [
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
]
