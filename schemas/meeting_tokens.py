"""Meeting token shapes."""

from __future__ import annotations

from typing import TypedDict

from schemas.common import Language, Recording


class MeetingToken(TypedDict, total=False):
    """Properties of a signed, time-bounded meeting credential."""

    # Unix timestamps (seconds). The token is valid from nbf until exp.
    nbf: int
    exp: int

    # Without room_name the token is valid for every room in the domain.
    room_name: str
    is_owner: bool

    # Display name, shown when the camera is off and in chat.
    user_name: str
    # Saved in the meeting events log; defaults to the client's session id.
    user_id: str

    enable_screenshare: bool
    start_video_off: bool
    start_audio_off: bool
    enable_recording: Recording
    start_cloud_recording: bool

    # For meetings opened in their own browser tab.
    close_tab_on_exit: bool
    redirect_on_meeting_exit: str

    # Setting either eject option overrides the room's eject properties.
    eject_at_token_exp: bool
    eject_after_elapsed: bool

    lang: Language


class MeetingTokenRequest(TypedDict):
    properties: MeetingToken


class MeetingTokenResponse(TypedDict, total=False):
    token: str
