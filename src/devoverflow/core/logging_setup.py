"""Logging configuration for the API process."""

from __future__ import annotations

import logging
import sys

from devoverflow.core.settings import settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str | None = None) -> None:
    """Install a single stdout handler on the ``devoverflow`` logger tree."""
    logger = logging.getLogger("devoverflow")
    logger.setLevel((level or settings.log_level).upper())

    if not any(getattr(handler, "_devoverflow", False) for handler in logger.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._devoverflow = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
