"""Infrastructure layer: Configuration loading.
"""

from __future__ import annotations

import logging

from moibit.common import Configurable, setup_logger
from moibit.common.config import Config
from moibit.common.models import ClientConfig

RESOLVED_SETTINGS = ["app_id", "network_id", "base_url", "request_timeout", "log_level"]


class ConfigLoader(Configurable):
    """Resolves per-client overrides against the environment defaults."""

    app_id: str
    network_id: str
    base_url: str
    request_timeout: float
    log_level: int

    def __init__(self, client_config: ClientConfig, config: Config | None = None):
        self.config: Config = config or Config()
        self.apply_overrides(
            client_config.model_dump(), self.config, RESOLVED_SETTINGS
        )
        self.base_url = self.base_url.rstrip("/")

        # Setup logging for the whole client package; later clients only
        # change the level when they ask for one
        self.logger = logging.getLogger("moibit")
        if client_config.log_level is not None or not self.logger.handlers:
            setup_logger(self.logger, self.log_level, self.config.LOG_FORMAT)

    def service_url(self, endpoint: str) -> str:
        return self.config.service_url(endpoint, self.base_url)
