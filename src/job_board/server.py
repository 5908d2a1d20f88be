from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from urllib.parse import urlparse

import uvicorn

from job_board.runtime import configure_logging

DEFAULT_BASE_URL = "http://localhost:5000/"

logger = logging.getLogger("job_board.server")


@dataclass
class ServerConfig:
    base_url: str = DEFAULT_BASE_URL
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "ServerConfig":
        return cls(
            base_url=(os.getenv("JOB_BOARD_URL") or "").strip() or DEFAULT_BASE_URL,
            log_level=(os.getenv("JOB_BOARD_LOG_LEVEL") or "").strip() or "INFO",
        )

    @property
    def host(self) -> str:
        return urlparse(self.base_url).hostname or "localhost"

    @property
    def port(self) -> int:
        parsed = urlparse(self.base_url)
        if parsed.port is not None:
            return parsed.port
        return 443 if parsed.scheme == "https" else 80


def run(config: ServerConfig | None = None) -> None:
    config = config or ServerConfig.from_env()
    configure_logging(config.log_level)
    logger.info("Server started on %s", config.base_url)
    uvicorn.run(
        "job_board.api.app:create_app",
        factory=True,
        host=config.host,
        port=config.port,
        log_level=config.log_level.lower(),
    )
