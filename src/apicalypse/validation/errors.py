"""
Error hierarchy for apicalypse.
"""

from __future__ import annotations

from typing import Any


class ApicalypseError(Exception):
    """Base exception for all query-building errors."""

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "message": str(self),
        }


class ValidationError(ApicalypseError, ValueError):
    """
    Raised when an argument handed to the builder is rejected.

    ``param`` names the offending argument (``"limit"``, ``"field"``...) when
    it is known, so callers can map errors back to their own inputs.
    """

    def __init__(self, message: str, param: str | None = None) -> None:
        self.message = message
        self.param = param
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "VALIDATION_ERROR",
            "message": self.message,
            "param": self.param,
        }


class StateError(ApicalypseError, RuntimeError):
    """Raised when the where-clause chain is used out of order or is corrupted."""
