"""Observability schemas for Daily API calls."""

from __future__ import annotations

from datetime import datetime, timezone
from uuid import uuid4

from pydantic import BaseModel, Field


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class APICallRecord(BaseModel):
    """Record of a single HTTP call made against the Daily REST API."""

    call_id: str = Field(default_factory=lambda: str(uuid4()))
    timestamp: datetime = Field(default_factory=_utcnow)
    method: str
    path: str
    status_code: int | None = None  # None when the transport itself failed
    latency_ms: float = 0.0
    success: bool = True
    error_message: str = ""
