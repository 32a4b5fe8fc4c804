"""Meeting session shapes (read-only analytics)."""

from __future__ import annotations

from typing import TypedDict


class MeetingsRequest(TypedDict, total=False):
    room: str
    # Unix timestamps (seconds) bounding the session start time.
    timeframe_start: int
    timeframe_end: int
    limit: int
    starting_after: str
    ending_before: str


class Participant(TypedDict):
    user_id: str | None
    participant_id: str
    user_name: str | None
    join_time: int
    duration: int


class MeetingsResponse(TypedDict):
    """One completed or ongoing session."""

    id: str
    room: str
    start_time: int
    duration: int
    ongoing: bool
    max_participants: int
    participants: list[Participant]
