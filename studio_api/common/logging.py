"""
Logging configuration helpers.
Both the API process and the maintenance scripts call `configure_logging` once at startup.
"""

from __future__ import annotations

import logging

from studio_api.common.settings import get_settings

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

_LOGGING_CONFIGURED = False


def configure_logging(level_name: str | None = None) -> None:
    """Configure process-wide logging, defaulting the level to `LOG_LEVEL`."""

    global _LOGGING_CONFIGURED
    if _LOGGING_CONFIGURED:
        return

    resolved_name = (level_name or get_settings().LOG_LEVEL).upper()
    level = getattr(logging, resolved_name, logging.INFO)

    logging.basicConfig(level=level, format=LOG_FORMAT)
    # uvicorn installs its own handlers; keep its access log on the same level.
    logging.getLogger("uvicorn.access").setLevel(level)
    _LOGGING_CONFIGURED = True
