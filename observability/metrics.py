"""Per-call tracking for Daily API requests."""

from __future__ import annotations

from collections import Counter

from schemas.observability import APICallRecord


class APICallCollector:
    """Collects API call records made through a DailyClient."""

    def __init__(self) -> None:
        self.records: list[APICallRecord] = []

    def record(self, rec: APICallRecord) -> None:
        self.records.append(rec)

    @property
    def total_calls(self) -> int:
        return len(self.records)

    @property
    def failed_calls(self) -> int:
        return sum(1 for r in self.records if not r.success)

    @property
    def error_rate(self) -> float:
        if not self.records:
            return 0.0
        return round(self.failed_calls / len(self.records), 4)

    @property
    def avg_latency_ms(self) -> float:
        if not self.records:
            return 0.0
        return round(sum(r.latency_ms for r in self.records) / len(self.records), 2)

    def calls_by_endpoint(self) -> dict[str, int]:
        counts = Counter(f"{r.method} {r.path}" for r in self.records)
        return dict(counts)

    def summary(self) -> dict:
        return {
            "total_calls": self.total_calls,
            "failed_calls": self.failed_calls,
            "error_rate": self.error_rate,
            "avg_latency_ms": self.avg_latency_ms,
        }
