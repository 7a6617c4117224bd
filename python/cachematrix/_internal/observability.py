from __future__ import annotations

import time
from dataclasses import asdict, dataclass
from typing import Any, Dict, Tuple


@dataclass
class SolveRecord:
    op: str
    route: str
    reason: str
    trace_tag: str
    shape: Tuple[int, int] | None
    dtype: str | None
    timestamp: float


def _shape(obj: Any) -> Tuple[int, int] | None:
    try:
        shape_attr = getattr(obj, "shape", None)
        if isinstance(shape_attr, tuple) and len(shape_attr) == 2:
            return int(shape_attr[0]), int(shape_attr[1])
    except (TypeError, ValueError):
        pass
    return None


def _dtype_label(obj: Any) -> str | None:
    dtype_attr = getattr(obj, "dtype", None)
    if dtype_attr is None:
        return None
    return str(dtype_attr)


class SolveObservability:
    """Keeps the most recent resolve record plus hit/miss counters."""

    def __init__(self) -> None:
        self._counter = 0
        self._hits = 0
        self._misses = 0
        self._last: dict[str, Any] | None = None

    def clear(self) -> None:
        self._counter = 0
        self._hits = 0
        self._misses = 0
        self._last = None

    def record(self, op: str, matrix: Any, *, hit: bool) -> dict[str, Any]:
        self._counter += 1
        if hit:
            self._hits += 1
            route, reason = "cache", "cached inverse present"
        else:
            self._misses += 1
            route, reason = "compute", "no cached inverse"

        record = SolveRecord(
            op=op,
            route=route,
            reason=reason,
            trace_tag=f"{op}:{self._counter}",
            shape=_shape(matrix),
            dtype=_dtype_label(matrix),
            timestamp=time.time(),
        )
        payload = asdict(record)
        self._last = payload
        return payload

    def last(self) -> dict[str, Any] | None:
        if self._last is None:
            return None
        return dict(self._last)

    def stats(self) -> Dict[str, int]:
        return {"hits": self._hits, "misses": self._misses, "total": self._counter}


# Module-level singleton helpers (optional convenience)
_default_observability = SolveObservability()


def default_instance() -> SolveObservability:
    return _default_observability
