"""Transport protocol the Daily client sends its requests through."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable


@dataclass(frozen=True)
class TransportResponse:
    """A successful (2xx) response: its status and decoded JSON body."""

    status_code: int
    body: Any


@runtime_checkable
class Transport(Protocol):
    """Anything that can send one request to the Daily API.

    Implementations are bound to a base URL, inject the authorization header,
    enforce their own timeout, and return the status and decoded JSON body.
    A non-2xx response must raise; nothing is retried.
    """

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: Mapping[str, Any] | None = None,
        json: Any = None,
    ) -> TransportResponse: ...

    async def aclose(self) -> None: ...
