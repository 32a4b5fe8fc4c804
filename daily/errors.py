"""Errors raised by the Daily API client."""

from __future__ import annotations

from typing import Any


class DailyApiError(Exception):
    """The Daily API answered with a non-2xx status.

    ``body`` is the decoded JSON error body when there is one (the service
    sends ``{"error": ..., "info": ...}``), otherwise the raw response text.
    """

    def __init__(self, status_code: int, body: Any, *, method: str = "", path: str = "") -> None:
        self.status_code = status_code
        self.body = body
        self.method = method
        self.path = path
        super().__init__(f"{method} {path} failed with HTTP {status_code}: {body!r}")

    @property
    def error_type(self) -> str | None:
        if isinstance(self.body, dict):
            return self.body.get("error")
        return None
