from __future__ import annotations

import time
from contextlib import contextmanager
from typing import Dict, Iterator, List


class Telemetry:
    """In-process counters and timings for evaluation calls."""

    def __init__(self) -> None:
        self.counters: Dict[str, int] = {}
        self.timings_ms: Dict[str, float] = {}
        self._samples_ms: Dict[str, List[float]] = {}

    def incr(self, name: str, value: int = 1) -> None:
        self.counters[name] = self.counters.get(name, 0) + value

    def observe_ms(self, name: str, ms: float) -> None:
        self.timings_ms[name] = self.timings_ms.get(name, 0.0) + ms
        self.incr(f"{name}:count")
        self._samples_ms.setdefault(name, []).append(ms)

    @contextmanager
    def timer(self, name: str) -> Iterator[None]:
        start = time.perf_counter()
        try:
            yield
        finally:
            self.observe_ms(name, (time.perf_counter() - start) * 1000.0)

    def summary(self) -> Dict[str, Dict[str, float]]:
        out: Dict[str, Dict[str, float]] = {}
        for name, total in self.timings_ms.items():
            count = self.counters.get(f"{name}:count", 0)
            samples = self._samples_ms.get(name, [])
            out[name] = {
                "count": float(count),
                "total_ms": round(total, 3),
                "avg_ms": round(total / count, 3) if count else 0.0,
                "max_ms": round(max(samples), 3) if samples else 0.0,
            }
        return out
