# vikingdb_sdk/core/json_codec.py
# SPDX-License-Identifier: Apache-2.0
"""
JSON encode/decode helpers used on the wire.

Decoding keeps numbers lossless: integers stay `int` (arbitrary precision)
and every non-integer literal becomes a `decimal.Decimal`, so a score of
`0.12345678901234567890` survives untouched. Callers that need a concrete
numeric type convert explicitly (`float(value)`, `int(value)`).

Encoding accepts those same representations back, so a fetched document can
be re-upserted as-is: a `Decimal` is written with exactly its own digits
(`simplejson.RawJSON`), never through `float`. NaN and infinities are
rejected.
"""
from __future__ import annotations

import enum
from decimal import Decimal
from typing import Any, Union

import simplejson

__all__ = ["dumps", "loads", "to_float", "to_int"]


def _default(obj: Any) -> Any:
    if isinstance(obj, Decimal):
        if not obj.is_finite():
            raise ValueError(f"non-finite number is not JSON compliant: {obj}")
        if obj == obj.to_integral_value() and obj.as_tuple().exponent >= 0:
            return int(obj)
        return simplejson.RawJSON(str(obj))
    if isinstance(obj, enum.Enum):
        return obj.value
    if isinstance(obj, (set, frozenset)):
        return list(obj)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def dumps(obj: Any) -> bytes:
    """Serialize `obj` to compact UTF-8 JSON bytes."""
    return simplejson.dumps(
        obj,
        default=_default,
        use_decimal=False,
        ensure_ascii=False,
        allow_nan=False,
        separators=(",", ":"),
    ).encode("utf-8")


def loads(data: Union[bytes, str]) -> Any:
    """Parse JSON, keeping integer and decimal literals lossless."""
    if isinstance(data, (bytes, bytearray)):
        data = data.decode("utf-8")
    return simplejson.loads(data, use_decimal=True)


def to_float(value: Any) -> float:
    """Explicit conversion from a preserved number (or None) to float."""
    if value is None:
        return 0.0
    return float(value)


def to_int(value: Any) -> int:
    """Explicit conversion from a preserved number (or None) to int."""
    if value is None:
        return 0
    return int(value)
