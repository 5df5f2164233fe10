from __future__ import annotations

import time
from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Tuple

EVENTS: tuple[str, ...] = ("hit", "miss")


@dataclass
class SolveRecord:
    event: str
    trace_tag: str
    shape: Tuple[int, int] | None
    version: int | None
    timestamp: float


def _shape(obj: Any) -> Tuple[int, int] | None:
    try:
        return int(obj.rows()), int(obj.cols())
    except Exception:
        pass
    try:
        shape_attr = getattr(obj, "shape", None)
        if isinstance(shape_attr, tuple) and len(shape_attr) == 2:
            return int(shape_attr[0]), int(shape_attr[1])
    except Exception:
        pass
    return None


def _version(obj: Any) -> int | None:
    v = getattr(obj, "version", None)
    try:
        if v is None:
            return None
        if callable(v):
            return int(v())
        return int(v)
    except Exception:
        return None


class SolveObservability:
    """Records cache hits and misses of ``cache_solve``.

    Purely observational: nothing here feeds back into solving.
    """

    def __init__(self, *, max_records: int = 256) -> None:
        self._max_records = max(1, int(max_records))
        self._counter = 0
        self._hits = 0
        self._misses = 0
        self._records: List[Dict[str, Any]] = []

    @property
    def hits(self) -> int:
        return self._hits

    @property
    def misses(self) -> int:
        return self._misses

    def clear(self) -> None:
        self._counter = 0
        self._hits = 0
        self._misses = 0
        self._records.clear()

    def record(self, event: str, cache: Any) -> dict[str, Any]:
        if event not in EVENTS:
            raise ValueError(f"unknown solve event {event!r}")
        if event == "hit":
            self._hits += 1
        else:
            self._misses += 1

        self._counter += 1
        record = SolveRecord(
            event=event,
            trace_tag=f"{event}:{self._counter}",
            shape=_shape(cache),
            version=_version(cache),
            timestamp=time.time(),
        )
        payload = asdict(record)
        self._records.append(payload)
        if len(self._records) > self._max_records:
            del self._records[: len(self._records) - self._max_records]
        return payload

    def last(self, event: str | None = None) -> dict[str, Any] | None:
        for payload in reversed(self._records):
            if event is None or payload["event"] == event:
                return dict(payload)
        return None

    def records(self) -> list[dict[str, Any]]:
        return [dict(p) for p in self._records]

    def stats(self) -> dict[str, int]:
        return {"hits": self._hits, "misses": self._misses}


# Shared recorder for cache_solve calls made without an explicit observer.
_default_observability = SolveObservability()


def default_instance() -> SolveObservability:
    return _default_observability
