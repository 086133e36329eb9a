"""Logging configuration."""

from __future__ import annotations

import logging

from .config import Settings


def configure_logging(settings: Settings) -> None:
    """Send log records to stderr so the game transcript on stdout stays clean."""

    level_name = str(settings.LOG_LEVEL or "WARNING").upper()
    level = getattr(logging, level_name, logging.WARNING)

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
