"""Enumerated option values shared across the Daily REST API."""

from __future__ import annotations

from typing import Any, Literal

# UI language; "user" follows the browser's language when it is supported.
Language = Literal["en", "fr", "user"]

# Controls who may join a room.
Privacy = Literal["public", "private"]

# Where a recording is stored.
Recording = Literal["cloud", "local"]

LogOrder = Literal["ASC", "DESC"]

LogLevel = Literal["ERROR", "INFO", "DEBUG"]

# Room properties are defined by the service; the client treats them as opaque.
RoomConfig = dict[str, Any]
