"""Run the scheduler API under uvicorn using environment settings."""

from __future__ import annotations

import logging

import uvicorn

from roomscheduler.backend.api import create_app
from roomscheduler.backend.config import configure_logging, load_settings

logger = logging.getLogger(__name__)


def main() -> int:
    settings = load_settings()
    configure_logging(settings.log_level)
    app = create_app()
    logger.info("Starting scheduler API on http://%s:%s", settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
