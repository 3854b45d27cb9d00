# SPDX-License-Identifier: Apache-2.0
"""
Tiny pretty-print helpers for the examples.

Includes:
  • box          boxed section headers
  • print_kv     aligned key/value output
  • print_table  fixed-width ASCII table
  • print_hits   search hits of a SearchResponse as a table
  • print_error  a VikingDBError with its attached context
"""
from __future__ import annotations

import json
import shutil
from decimal import Decimal
from typing import Any, Iterable, List, Mapping, Optional, Sequence

from vikingdb_sdk.core.error_context import get_context
from vikingdb_sdk.vector import SearchResponse, VikingDBError

__all__ = ["box", "print_kv", "print_table", "print_hits", "print_error"]


def _term_width(default: int = 100) -> int:
    cols = shutil.get_terminal_size((default, 20)).columns
    return max(40, min(cols, 200))


def _to_str(x: Any) -> str:
    if isinstance(x, (dict, list, tuple)):
        return json.dumps(x, ensure_ascii=False, default=lambda o: str(o) if isinstance(o, Decimal) else repr(o))
    return str(x)


def box(title: str, *, fill: str = "─") -> None:
    """Print a single-line boxed title."""
    width = _term_width()
    title = f" {title.strip()} "
    bar = fill * (width - 2)
    print(f"\n┌{bar}┐")
    print(f"│{title.center(width - 2)}│")
    print(f"└{bar}┘\n")


def print_kv(pairs: Mapping[str, Any], *, indent: int = 2) -> None:
    """Print aligned key/value pairs."""
    if not pairs:
        return
    k_width = max(len(str(k)) for k in pairs)
    for k, v in pairs.items():
        print(" " * indent + f"{str(k).rjust(k_width)}: {_to_str(v)}")


def print_table(
    rows: Iterable[Mapping[str, Any]],
    headers: Sequence[str],
    *,
    max_cell: int = 40,
    truncate_marker: str = "…",
) -> None:
    """Print dict rows as a fixed-width table, truncating long cells."""
    def fit(cell: str) -> str:
        if len(cell) <= max_cell:
            return cell
        return cell[: max_cell - len(truncate_marker)] + truncate_marker

    data: List[List[str]] = [[fit(_to_str(r.get(h, ""))) for h in headers] for r in rows]
    if not data:
        print("  (no rows)")
        return

    widths = [max(len(h), *(len(row[i]) for row in data)) for i, h in enumerate(headers)]
    print(" | ".join(h.ljust(widths[i]) for i, h in enumerate(headers)))
    print("-+-".join("-" * w for w in widths))
    for row in data:
        print(" | ".join(cell.ljust(widths[i]) for i, cell in enumerate(row)))


def print_hits(resp: SearchResponse, fields: Optional[Sequence[str]] = None) -> None:
    """Render search hits; `fields` selects which document fields to show."""
    hits = resp.result.data if resp.result else []
    fields = list(fields or [])
    rows = [
        {"id": hit.id, "score": round(hit.score, 4), **{f: hit.fields.get(f, "") for f in fields}}
        for hit in hits
    ]
    print_table(rows, ["id", "score", *fields])


def print_error(exc: VikingDBError) -> None:
    print_kv(
        {
            "code": exc.code,
            "status_code": exc.status_code,
            "message": exc.message,
            "request_id": exc.request_id or "-",
            "retryable": exc.retryable,
            "context": dict(get_context(exc)),
        }
    )
