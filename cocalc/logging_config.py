"""Centralized logging configuration."""

from __future__ import annotations

import logging


def configure_logging(level: str = "WARNING") -> None:
    """Configure root logging for CLI runs.

    Unknown level names fall back to WARNING rather than failing startup.
    """
    log_level = getattr(logging, level.upper(), None)
    if not isinstance(log_level, int):
        log_level = logging.WARNING

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)8s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        force=True,  # Override any existing configuration
    )
    logging.getLogger("cocalc").setLevel(log_level)
