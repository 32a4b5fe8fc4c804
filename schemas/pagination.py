"""Cursor pagination envelope used by the list endpoints."""

from __future__ import annotations

from typing import Generic, TypedDict, TypeVar

T = TypeVar("T")


class PaginatedRequest(TypedDict, total=False):
    """Cursor arguments sent as query parameters.

    ``starting_after`` and ``ending_before`` are opaque cursors returned by
    the service (usually the id of the last or first item of a page).
    """

    limit: int
    starting_after: str
    ending_before: str


class PaginatedResponse(TypedDict, Generic[T]):
    total_count: int
    data: list[T]
