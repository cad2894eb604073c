"""Logging helpers for apicalypse."""

from __future__ import annotations

import logging
from typing import Optional

ROOT_LOGGER_NAME = "apicalypse"


def configure_logging(level: Optional[int] = None) -> logging.Logger:
    """
    Attach a stream handler to the package logger.

    Opt-in for scripts; library code never calls it, so records otherwise
    propagate to whatever the application configured.
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter("%(asctime)s | %(levelname)s | %(name)s | %(message)s")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    if level is not None:
        logger.setLevel(level)
    return logger


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
