"""Configuration helpers for backend runtime."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


@dataclass(frozen=True)
class BackendSettings:
    host: str
    port: int
    log_level: str


def load_settings() -> BackendSettings:
    port_raw = os.getenv("ROOMSCHEDULER_PORT", "3000")
    return BackendSettings(
        host=os.getenv("ROOMSCHEDULER_HOST", "127.0.0.1"),
        port=int(port_raw),
        log_level=os.getenv("ROOMSCHEDULER_LOG_LEVEL", "INFO").upper(),
    )


def configure_logging(level: str) -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT)
