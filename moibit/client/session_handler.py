"""
Authentication handling for the MOIBit client.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pydantic import ValidationError

from moibit.common.exceptions import AuthenticationError
from moibit.common.models import AuthData, Envelope

if TYPE_CHECKING:
    from moibit.client.domain.entities import Credentials
    from moibit.common.interfaces import ITransport

HTTP_OK = 200

logger = logging.getLogger(__name__)


class SessionHandler:
    """Runs the one-time exchange that resolves the developer public key."""

    def __init__(self, auth_url: str, transport: ITransport):
        self.auth_url = auth_url
        self.transport = transport

    def authenticate(self, credentials: Credentials) -> str:
        """Exchange the signature/nonce pair for the developer public key.

        Only the nonce and signature travel with this request; the public key
        is what it returns.

        :raises AuthenticationError: On a non-200 status or a malformed reply.
        :raises TransportError: If the service cannot be reached.
        """
        logger.info("Authenticating with %s", self.auth_url)

        r = self.transport.send(
            "POST",
            self.auth_url,
            {"nonce": credentials.nonce, "signature": credentials.signature},
        )
        if r.status_code != HTTP_OK:
            logger.error("Authentication rejected [HTTP %s]", r.status_code)
            msg = f"authentication failed: non-ok response [HTTP {r.status_code}]"
            raise AuthenticationError(msg, r.status_code)

        try:
            envelope = Envelope.model_validate_json(r.body)
        except ValidationError as err:
            logger.error("Authentication response could not be decoded")
            msg = f"authentication failed: response decode failed: {err}"
            raise AuthenticationError(msg, r.status_code) from err

        if envelope.meta.code != HTTP_OK:
            logger.error("Authentication rejected [%s]: %s", envelope.meta.code, envelope.meta.message)
            msg = f"authentication failed: non-ok response [{envelope.meta.code}]: {envelope.meta.message}"
            raise AuthenticationError(msg, envelope.meta.code)

        try:
            data = AuthData.model_validate(envelope.data)
        except ValidationError as err:
            logger.error("Authentication payload could not be decoded")
            msg = f"authentication failed: response decode failed: {err}"
            raise AuthenticationError(msg, r.status_code) from err

        if not data.address:
            msg = "authentication failed: response carries no developer address"
            raise AuthenticationError(msg, r.status_code)

        logger.info("Authenticated as %s", data.address)
        return data.address
