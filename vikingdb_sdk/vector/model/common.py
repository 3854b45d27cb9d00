# vikingdb_sdk/vector/model/common.py
# SPDX-License-Identifier: Apache-2.0
"""
Shared data-transfer shapes: locators, the common response envelope, and the
serialization helpers every request/response type uses.

Request dataclasses serialize with `to_wire()`: fields whose value is None are
omitted, nested dataclasses and enums are flattened, and a field can rename
itself on the wire with `metadata={"json": "<name>"}`.
"""
from __future__ import annotations

import dataclasses
import enum
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

MapStr = Dict[str, Any]


def wire_name(f: dataclasses.Field) -> str:
    return f.metadata.get("json", f.name)


def to_wire(value: Any) -> Any:
    """Recursively convert request values into JSON-ready structures."""
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        out: Dict[str, Any] = {}
        for f in dataclasses.fields(value):
            v = getattr(value, f.name)
            if v is None:
                continue
            out[wire_name(f)] = to_wire(v)
        return out
    if isinstance(value, enum.Enum):
        return value.value
    if isinstance(value, Mapping):
        return {k: to_wire(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_wire(v) for v in value]
    return value


def opt_int(value: Any) -> Optional[int]:
    return int(value) if value is not None else None


# =============================================================================
# Locators
# =============================================================================

@dataclass(frozen=True)
class CollectionLocator:
    """
    Identifies a collection.

    Attributes:
        collection_name: Collection name
        project_name: Optional project; omitted on the wire when unset
        resource_id: Optional resource id; sent as-is (empty string allowed)
    """
    collection_name: str = ""
    project_name: Optional[str] = None
    resource_id: str = ""

    def to_dict(self) -> MapStr:
        out: MapStr = {"collection_name": self.collection_name}
        if self.project_name:
            out["project_name"] = self.project_name
        out["resource_id"] = self.resource_id
        return out


@dataclass(frozen=True)
class IndexLocator:
    """Identifies an index within a collection."""
    collection_name: str = ""
    index_name: str = ""
    project_name: Optional[str] = None
    resource_id: str = ""

    @classmethod
    def of(cls, collection: CollectionLocator, index_name: str) -> "IndexLocator":
        return cls(
            collection_name=collection.collection_name,
            index_name=index_name,
            project_name=collection.project_name,
            resource_id=collection.resource_id,
        )

    @property
    def collection(self) -> CollectionLocator:
        return CollectionLocator(
            collection_name=self.collection_name,
            project_name=self.project_name,
            resource_id=self.resource_id,
        )

    def to_dict(self) -> MapStr:
        out = self.collection.to_dict()
        out["index_name"] = self.index_name
        return out


# =============================================================================
# Response envelope
# =============================================================================

@dataclass
class CommonResponse:
    """Fields shared by every VikingDB response."""
    api: str = ""
    message: str = ""
    code: str = ""
    request_id: str = ""

    @staticmethod
    def common_fields(payload: Mapping[str, Any]) -> MapStr:
        return {
            "api": payload.get("api") or "",
            "message": payload.get("message") or "",
            "code": payload.get("code") or "",
            "request_id": payload.get("request_id") or "",
        }

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "CommonResponse":
        return cls(**cls.common_fields(payload or {}))


__all__ = [
    "MapStr",
    "wire_name",
    "to_wire",
    "opt_int",
    "CollectionLocator",
    "IndexLocator",
    "CommonResponse",
]
