"""Daily API transport built on httpx.AsyncClient."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import httpx

from daily.errors import DailyApiError
from protocols.transport import TransportResponse


def _decode_error_body(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return response.text


class HttpxTransport:
    """Sends requests to a fixed base URL with a bearer token. Implements Transport protocol."""

    def __init__(
        self,
        base_url: str,
        token: str,
        *,
        timeout: float,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._client = httpx.AsyncClient(
            base_url=base_url,
            timeout=timeout,
            headers={"Authorization": f"Bearer {token}"},
            transport=transport,
        )

    @property
    def base_url(self) -> httpx.URL:
        return self._client.base_url

    @property
    def headers(self) -> httpx.Headers:
        return self._client.headers

    @property
    def timeout(self) -> httpx.Timeout:
        return self._client.timeout

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: Mapping[str, Any] | None = None,
        json: Any = None,
    ) -> TransportResponse:
        response = await self._client.request(method, path, params=params, json=json)
        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise DailyApiError(
                response.status_code,
                _decode_error_body(response),
                method=method,
                path=path,
            ) from e

        body = response.json() if response.content else None
        return TransportResponse(response.status_code, body)

    async def aclose(self) -> None:
        await self._client.aclose()
