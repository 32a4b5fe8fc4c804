"""Domain (account-level) configuration shapes."""

from __future__ import annotations

from typing import TypedDict

from schemas.common import Language


class DomainConfig(TypedDict):
    """Defaults applied to every room of the domain.

    Field names are camelCase on the wire for this endpoint.
    """

    # Whether "Powered by Daily" shows in the in-call UI. Only settable on
    # plans that allow hiding the branding.
    hideDailyBranding: bool

    # Default call UI language. Rooms and meeting tokens can override it.
    lang: Language | None

    # URL loaded when a user leaves a meeting opened in its own tab. The
    # service appends ``recent_call=<domain>/<room>`` to the query string.
    redirectOnMeetingExit: str


class DomainResponse(TypedDict):
    domainName: str
    config: DomainConfig
