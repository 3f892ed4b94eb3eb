"""Domain layer: Core session entities.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Credentials:
    """Developer signature and the nonce it was produced for."""

    signature: str
    nonce: str

    def __repr__(self) -> str:
        return f"Credentials(signature='***', nonce={self.nonce!r})"


@dataclass(frozen=True)
class SessionIdentity:
    """Identity of an authenticated session; fixed for the session's life."""

    credentials: Credentials
    public_key: str
    app_id: str
    network_id: str
    base_url: str

    def headers(self) -> dict[str, str]:
        """Headers carried by every authenticated request."""
        return {
            "nonce": self.credentials.nonce,
            "signature": self.credentials.signature,
            "developerKey": self.public_key,
            "networkID": self.network_id,
            "appID": self.app_id,
        }
