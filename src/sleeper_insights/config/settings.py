"""Environment-driven settings for the collaborators around the engine."""

from __future__ import annotations

import logging
import os
from datetime import timedelta

logger = logging.getLogger(__name__)

PLAYER_TTL_ENV = "SLEEPER_INSIGHTS_PLAYER_TTL_HOURS"
PARALLEL_JOBS_ENV = "SLEEPER_INSIGHTS_PARALLEL_JOBS"

PLAYER_TTL_HOURS_DEFAULT = 6.0
PARALLEL_JOBS_DEFAULT = 1


def _env_float(name: str, default: float, *, clamp_min: float | None = None) -> float:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = float(raw)
    except ValueError:
        logger.warning("Invalid float for %s: %s; using default %.2f", name, raw, default)
        return default
    if clamp_min is not None:
        value = max(clamp_min, value)
    return value


def _env_int(name: str, default: int, *, min_value: int | None = None) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Invalid int for %s: %s; using default %d", name, raw, default)
        return default
    if min_value is not None:
        value = max(min_value, value)
    return value


def player_refresh_interval() -> timedelta:
    """Refresh interval for the player directory cache."""

    hours = _env_float(PLAYER_TTL_ENV, PLAYER_TTL_HOURS_DEFAULT, clamp_min=0.0)
    return timedelta(hours=hours)


def parallel_jobs() -> int:
    return _env_int(PARALLEL_JOBS_ENV, PARALLEL_JOBS_DEFAULT, min_value=1)
