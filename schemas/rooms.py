"""Room management shapes."""

from __future__ import annotations

from typing import TypedDict

from schemas.common import Privacy, RoomConfig


class Room(TypedDict):
    """A named video-call space."""

    name: str
    privacy: Privacy
    config: RoomConfig


class CreateRoomRequest(TypedDict, total=False):
    # The service generates a random name when omitted.
    name: str
    privacy: Privacy
    properties: RoomConfig


class UpdateRoomRequest(TypedDict, total=False):
    privacy: Privacy
    properties: RoomConfig


class CreateRoomResponse(TypedDict, total=False):
    """Room as returned by create, get and update.

    ``id``, ``api_created``, ``url`` and ``created_at`` are assigned by the
    service.
    """

    id: str
    name: str
    api_created: bool
    privacy: Privacy
    url: str
    created_at: str
    config: RoomConfig


class DeleteResponse(TypedDict):
    deleted: bool
    name: str
