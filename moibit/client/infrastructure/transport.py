"""Infrastructure layer: HTTP transport backed by requests.
"""

from __future__ import annotations

import logging

import requests

from moibit.common.exceptions import TransportError
from moibit.common.interfaces import TransportResponse

logger = logging.getLogger(__name__)


class RequestsTransport:
    """Sends requests through a shared ``requests.Session``."""

    def __init__(self, timeout: float = 30.0, session: requests.Session | None = None):
        self.timeout = timeout
        self._session = session or requests.Session()

    def send(
        self,
        method: str,
        url: str,
        headers: dict[str, str],
        body: bytes | None = None,
    ) -> TransportResponse:
        logger.debug("%s %s", method, url)
        try:
            r = self._session.request(method, url, headers=headers, data=body, timeout=self.timeout)
        except requests.RequestException as err:
            msg = f"request failed: {err}"
            raise TransportError(msg, url=url) from err

        logger.debug("%s %s -> HTTP %s", method, url, r.status_code)
        return TransportResponse(
            status_code=r.status_code,
            body=r.content,
            headers=dict(r.headers),
        )

    def close(self) -> None:
        self._session.close()
