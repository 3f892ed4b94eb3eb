"""
Interfaces and protocols for dependency injection.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol


@dataclass(frozen=True)
class TransportResponse:
    """Raw result of one HTTP exchange."""

    status_code: int
    body: bytes = b""
    headers: dict[str, str] = field(default_factory=dict)


class ITransport(Protocol):
    """Protocol for the HTTP request/response exchanger used by the client.

    Implementations raise TransportError on network-level failures and
    otherwise return the response untouched, whatever its status code.
    """

    def send(
        self,
        method: str,
        url: str,
        headers: dict[str, str],
        body: bytes | None = None,
    ) -> TransportResponse: ...

    def close(self) -> None: ...
