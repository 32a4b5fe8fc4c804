"""Async client for the Daily REST API.

Each coroutine maps to exactly one HTTP call. Inputs are forwarded as given
and response bodies are returned as decoded JSON without schema checks; the
service is the only authority on what it accepts.

Reference: https://docs.daily.co/reference/rest-api
"""

from __future__ import annotations

import time
from collections.abc import Mapping
from typing import Any
from urllib.parse import quote

import httpx

from config.settings import Settings, get_settings
from daily.errors import DailyApiError
from observability.logger import get_logger
from observability.metrics import APICallCollector
from protocols.transport import Transport
from providers.httpx_transport import HttpxTransport
from schemas.common import RoomConfig
from schemas.domain import DomainConfig, DomainResponse
from schemas.logs import LogsRequest, LogsResponse
from schemas.meeting_tokens import MeetingTokenRequest, MeetingTokenResponse
from schemas.meetings import MeetingsRequest, MeetingsResponse
from schemas.observability import APICallRecord
from schemas.pagination import PaginatedRequest, PaginatedResponse
from schemas.rooms import CreateRoomRequest, CreateRoomResponse, DeleteResponse, UpdateRoomRequest

log = get_logger(__name__)

DAILY_API_URL = "https://api.daily.co/v1"
REQUEST_TIMEOUT_SECONDS = 15.0


def _segment(value: str) -> str:
    # Keep names and tokens inside a single path segment.
    return quote(value, safe="")


class DailyClient:
    """Bearer-token client for one Daily domain.

    The only state kept across calls is the token and the transport, so a
    single instance can serve concurrent calls.
    """

    def __init__(
        self,
        token: str,
        *,
        transport: Transport | None = None,
        http_transport: httpx.AsyncBaseTransport | None = None,
        metrics: APICallCollector | None = None,
    ) -> None:
        if transport is not None and http_transport is not None:
            raise ValueError("pass either transport or http_transport, not both")
        self._token = token
        self._owns_transport = transport is None
        self._transport: Transport = transport or HttpxTransport(
            DAILY_API_URL,
            token,
            timeout=REQUEST_TIMEOUT_SECONDS,
            transport=http_transport,
        )
        self.metrics = metrics

    @classmethod
    def from_settings(
        cls,
        settings: Settings | None = None,
        *,
        metrics: APICallCollector | None = None,
    ) -> DailyClient:
        settings = settings or get_settings()
        if not settings.has_api_key:
            raise ValueError("DAILY_API_KEY is not set")
        return cls(settings.daily_api_key, metrics=metrics)

    @property
    def transport(self) -> Transport:
        return self._transport

    async def aclose(self) -> None:
        """Release the connection pool. Injected transports are left open."""
        if self._owns_transport:
            await self._transport.aclose()

    async def __aenter__(self) -> DailyClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    # --- Domain ---

    async def domain_config(self) -> DomainResponse:
        """Get top-level configuration of the domain."""
        return await self._request("GET", "/")

    async def update_domain_config(self, data: DomainConfig) -> DomainConfig:
        """Set top-level configuration options for the domain."""
        return await self._request("POST", "/", json=data)

    # --- Rooms ---

    async def list_rooms(
        self, params: PaginatedRequest | None = None
    ) -> PaginatedResponse[RoomConfig]:
        return await self._request("GET", "/rooms", params=params)

    async def create_room(self, data: CreateRoomRequest) -> CreateRoomResponse:
        return await self._request("POST", "/rooms", json=data)

    async def get_room(self, name: str) -> CreateRoomResponse:
        return await self._request("GET", f"/rooms/{_segment(name)}", route="/rooms/{name}")

    async def update_room(self, name: str, data: UpdateRoomRequest) -> CreateRoomResponse:
        """Set a room's privacy and config properties."""
        return await self._request(
            "POST", f"/rooms/{_segment(name)}", route="/rooms/{name}", json=data
        )

    async def delete_room(self, name: str) -> DeleteResponse:
        return await self._request("DELETE", f"/rooms/{_segment(name)}", route="/rooms/{name}")

    # --- Meetings ---

    async def list_meetings(
        self, params: MeetingsRequest | None = None
    ) -> PaginatedResponse[MeetingsResponse]:
        """List past and ongoing meeting sessions, newest first."""
        return await self._request("GET", "/meetings", params=params)

    # --- Meeting tokens ---

    async def create_meeting_token(self, data: MeetingTokenRequest) -> MeetingTokenResponse:
        return await self._request("POST", "/meeting-tokens", json=data)

    async def meeting_token(self, token: str) -> dict[str, Any]:
        """Validate a meeting token and return its decoded properties."""
        return await self._request(
            "GET", f"/meeting-tokens/{_segment(token)}", route="/meeting-tokens/{token}"
        )

    # --- Logs ---

    async def logs(self, params: LogsRequest) -> LogsResponse:
        return await self._request("GET", "/logs", params=params)

    async def _request(
        self,
        method: str,
        path: str,
        *,
        route: str | None = None,
        params: Mapping[str, Any] | None = None,
        json: Any = None,
    ) -> Any:
        # route is the path template; it is what gets logged so that meeting
        # tokens never end up in log output.
        route = route or path
        start = time.perf_counter()

        try:
            response = await self._transport.request(method, path, params=params, json=json)
        except DailyApiError as e:
            latency_ms = (time.perf_counter() - start) * 1000
            log.warning(
                "daily.request.failed",
                method=method,
                route=route,
                status_code=e.status_code,
                error=e.error_type,
                latency_ms=round(latency_ms, 2),
            )
            self._record(method, route, latency_ms, status_code=e.status_code, error=e.error_type or "")
            raise
        except Exception as e:
            latency_ms = (time.perf_counter() - start) * 1000
            log.error(
                "daily.request.failed",
                method=method,
                route=route,
                error=repr(e),
                latency_ms=round(latency_ms, 2),
            )
            self._record(method, route, latency_ms, error=repr(e))
            raise

        latency_ms = (time.perf_counter() - start) * 1000
        log.debug(
            "daily.request.success",
            method=method,
            route=route,
            status_code=response.status_code,
            latency_ms=round(latency_ms, 2),
        )
        self._record(method, route, latency_ms, status_code=response.status_code)
        return response.body

    def _record(
        self,
        method: str,
        route: str,
        latency_ms: float,
        *,
        status_code: int | None = None,
        error: str | None = None,
    ) -> None:
        if self.metrics is None:
            return
        self.metrics.record(
            APICallRecord(
                method=method,
                path=route,
                status_code=status_code,
                latency_ms=round(latency_ms, 2),
                success=error is None,
                error_message=error or "",
            )
        )
