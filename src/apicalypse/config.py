"""
Builder configuration, optionally sourced from the environment.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from .validation import ValidationError

DEFAULT_STRICT_ENV = "APICALYPSE_STRICT_MODE"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _parse_bool(value: str, *, key: str) -> bool:
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ValidationError(f"Invalid boolean value '{value}' for {key}.", key)


@dataclass(frozen=True)
class BuilderConfig:
    """
    Defaults applied to new :class:`~apicalypse.query.QueryBuilder` instances.

    ``strict_mode`` controls whether ``str(builder)`` re-raises build errors
    or logs them and returns a sentinel string.
    """

    strict_mode: bool = False

    @classmethod
    def from_env(cls, env_var: str = DEFAULT_STRICT_ENV) -> "BuilderConfig":
        """
        Build a config from an environment variable holding a boolean flag.

        An unset or empty variable yields the defaults.
        """
        value = os.getenv(env_var)
        if not value:
            return cls()
        return cls(strict_mode=_parse_bool(value, key=env_var))
