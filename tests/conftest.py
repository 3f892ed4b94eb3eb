from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

import pytest

from moibit.client.client import Client
from moibit.common.interfaces import TransportResponse

BASE_URL = "http://moibit.test/v0"
PUBLIC_KEY = "0xdeadbeef"


def envelope(data: Any = None, code: int = 200, message: str = "OK", request_id: str = "req-1") -> bytes:
    """Encode a service envelope."""
    return json.dumps(
        {"meta": {"code": code, "requestID": request_id, "message": message}, "data": data}
    ).encode()


def auth_response(address: str = PUBLIC_KEY) -> TransportResponse:
    return TransportResponse(200, envelope({"address": address, "entropy": "e"}))


@dataclass
class SentRequest:
    method: str
    url: str
    headers: dict[str, str]
    body: bytes | None

    def json(self) -> Any:
        assert self.body is not None
        return json.loads(self.body)


@dataclass
class FakeTransport:
    """Replays queued responses and records every request."""

    responses: list[TransportResponse] = field(default_factory=list)
    sent: list[SentRequest] = field(default_factory=list)
    closed: bool = False

    def queue(self, body: bytes, status_code: int = 200) -> None:
        self.responses.append(TransportResponse(status_code, body))

    def send(
        self,
        method: str,
        url: str,
        headers: dict[str, str],
        body: bytes | None = None,
    ) -> TransportResponse:
        self.sent.append(SentRequest(method, url, dict(headers), body))
        return self.responses.pop(0)

    def close(self) -> None:
        self.closed = True

    @property
    def last(self) -> SentRequest:
        return self.sent[-1]


@pytest.fixture
def transport() -> FakeTransport:
    return FakeTransport(responses=[auth_response()])


@pytest.fixture
def client(transport: FakeTransport) -> Client:
    """Create an authenticated Client over the fake transport."""
    return Client(
        signature="sig-123",
        nonce="nonce-456",
        app_id="app-1",
        network_id="net-1",
        base_url=BASE_URL,
        transport=transport,
    )
