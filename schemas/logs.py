"""Call log and metric retrieval shapes."""

from __future__ import annotations

from typing import Any, TypedDict

from schemas.common import LogLevel, LogOrder

# The service does not document the entry schema; entries are returned as
# decoded JSON objects.
LogEntry = dict[str, Any]
MetricEntry = dict[str, Any]


class LogsRequest(TypedDict, total=False):
    """Filters for ``GET /logs``.

    At least one of ``userSessionId`` or ``mtgSessionId`` is required by the
    service. Time bounds are epoch milliseconds; ``endTime`` defaults to now.
    """

    includeLogs: bool
    includeMetrics: bool
    userSessionId: str
    mtgSessionId: str
    logLevel: LogLevel
    order: LogOrder
    startTime: int
    endTime: int
    limit: int
    offset: int


class LogsResponse(TypedDict):
    logs: list[LogEntry]
    logs_count: int
    metrics: list[MetricEntry]
