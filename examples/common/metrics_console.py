# SPDX-License-Identifier: Apache-2.0
"""
A console MetricsSink for examples and local debugging.

Implements the shape the Transport reports to:
  - observe(component, op, ms, ok, code="OK", extra=None)
  - counter(component, name, value=1, extra=None)

Lines are human-readable and machine-parseable:

    [OBS] {"ts":"...","component":"vector_transport","op":"/api/vikingdb/data/upsert","ms":41.2,"ok":true,...}
"""

from __future__ import annotations

import json
import sys
import threading
import time
from typing import Any, Dict, Mapping, Optional, TextIO

__all__ = ["ConsoleMetrics"]

_LOCK = threading.Lock()


class ConsoleMetrics:
    """
    Example metrics sink that prints one structured line per event.

    Args:
        output_file: File-like object to write to (default: stdout).
        max_extra_fields: Cap on the number of `extra` entries printed.
    """

    def __init__(self, *, output_file: Optional[TextIO] = None, max_extra_fields: int = 10) -> None:
        self.output_file = output_file or sys.stdout
        self.max_extra_fields = max_extra_fields

    def observe(
        self,
        *,
        component: str,
        op: str,
        ms: float,
        ok: bool,
        code: str = "OK",
        extra: Optional[Mapping[str, Any]] = None,
    ) -> None:
        payload: Dict[str, Any] = {
            "ts": time.strftime("%Y-%m-%dT%H:%M:%SZ", time.gmtime()),
            "component": component,
            "op": op,
            "ms": round(max(0.0, float(ms)), 3),
            "ok": bool(ok),
            "code": str(code or "OK"),
        }
        safe_extra = self._safe_extra(extra)
        if safe_extra:
            payload["extra"] = safe_extra
        self._write("OBS", payload)

    def counter(
        self,
        *,
        component: str,
        name: str,
        value: int = 1,
        extra: Optional[Mapping[str, Any]] = None,
    ) -> None:
        payload: Dict[str, Any] = {
            "ts": time.strftime("%Y-%m-%dT%H:%M:%SZ", time.gmtime()),
            "component": component,
            "name": name,
            "value": int(value),
        }
        safe_extra = self._safe_extra(extra)
        if safe_extra:
            payload["extra"] = safe_extra
        self._write("CTR", payload)

    def _write(self, kind: str, payload: Mapping[str, Any]) -> None:
        line = f"[{kind}] " + json.dumps(payload, separators=(",", ":"), ensure_ascii=False)
        with _LOCK:
            print(line, file=self.output_file, flush=True)

    def _safe_extra(self, extra: Optional[Mapping[str, Any]]) -> Optional[Dict[str, Any]]:
        """Keep only scalar, low-cardinality extra fields."""
        if not extra:
            return None
        safe: Dict[str, Any] = {}
        for k, v in sorted(extra.items())[: self.max_extra_fields]:
            if v is None or isinstance(v, (str, int, float, bool)):
                safe[k] = v
        return safe or None
