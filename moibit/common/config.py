"""
Configuration settings for the MOIBit client.
"""

from __future__ import annotations

import logging
import os

DEFAULT_NETWORK_ID = "12D3KooWSMAGyrB9TG45AAWaQNJmMdfJpnLQ5e1XM21hkm3FokHk"
DEFAULT_BASE_URL = "https://kfs.moibit.io/moibit/v0"


class Config:
    """Central configuration class for all client settings."""

    def __init__(self) -> None:
        # Service location and identity defaults
        self.BASE_URL: str = os.getenv("MOIBIT_BASE_URL", DEFAULT_BASE_URL).rstrip("/")
        self.NETWORK_ID: str = os.getenv("MOIBIT_NETWORK_ID", DEFAULT_NETWORK_ID)
        self.APP_ID: str = os.getenv("MOIBIT_APP_ID", "")

        # Transport settings
        self.REQUEST_TIMEOUT: float = float(os.getenv("MOIBIT_TIMEOUT", "30"))

        # Endpoint paths, relative to BASE_URL
        self.ENDPOINTS: dict[str, str] = {
            "authenticate": "/authenticate",
            "read_file": "/readfile",
            "write_file": "/writetexttofile",
            "remove_file": "/remove",
            "list_files": "/listfiles",
            "file_status": "/filestatus",
            "file_versions": "/fileversions",
            "make_directory": "/makedir",
        }

        # Logging
        self.LOG_LEVEL: int = logging.WARNING
        self.LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    def service_url(self, endpoint: str, base_url: str | None = None) -> str:
        """Build the full URL for a named endpoint."""
        try:
            path = self.ENDPOINTS[endpoint]
        except KeyError as err:
            msg = f"Unknown endpoint '{endpoint}'. Available: {sorted(self.ENDPOINTS)}"
            raise ValueError(msg) from err
        return f"{(base_url or self.BASE_URL).rstrip('/')}{path}"
