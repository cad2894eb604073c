"""
Utility helpers shared across apicalypse packages.
"""

from .logging import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]
