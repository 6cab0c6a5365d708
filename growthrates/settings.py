"""Process-wide maximum level setting.

The maximum level is read by every growth rate conversion. It can be asked for
at any point during startup, including before configuration has been loaded,
so ``max_level()`` always has an answer: an explicitly configured value, then
the ``GROWTH_MAXIMUM_LEVEL`` environment variable, then the largest level the
bundled tables are built for.

The value may only change before any gameplay state (stored exp amounts)
exists; changing it later can move creatures between levels.
"""

from __future__ import annotations

import os
from typing import Optional

from growthrates.errors import InvalidLevelError
from growthrates.logging_utils import get_logger

DEFAULT_MAXIMUM_LEVEL = 100
ENV_VAR = "GROWTH_MAXIMUM_LEVEL"

_log = get_logger("settings")
_configured_max_level: Optional[int] = None


def validate_max_level(value) -> int:
    """Return ``value`` if it is a usable maximum level, else raise InvalidLevelError."""
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise InvalidLevelError(value)
    return value


def _from_env() -> Optional[int]:
    raw = os.getenv(ENV_VAR)
    if raw is None or not raw.strip():
        return None
    try:
        return validate_max_level(int(raw.strip()))
    except (ValueError, InvalidLevelError):
        _log.warn(event="bad_max_level_env", value=raw)
        return None


def configure_max_level(value: int) -> None:
    """Set the process-wide maximum level (overrides the environment)."""
    global _configured_max_level
    _configured_max_level = validate_max_level(value)
    _log.debug(event="max_level_configured", max_level=_configured_max_level)


def reset_max_level() -> None:
    """Forget the configured value; the environment or default applies again."""
    global _configured_max_level
    _configured_max_level = None


def max_level() -> int:
    """Return the maximum level a creature can attain."""
    if _configured_max_level is not None:
        return _configured_max_level
    env_value = _from_env()
    if env_value is not None:
        return env_value
    return DEFAULT_MAXIMUM_LEVEL


__all__ = ["DEFAULT_MAXIMUM_LEVEL", "validate_max_level", "configure_max_level", "reset_max_level", "max_level"]
