"""Configuration helpers for positions, insight thresholds and settings."""

from .positions import (
    COUNTED_POSITIONS,
    FLEX_ELIGIBLE,
    POSITION_ALIASES,
    classify_position,
)
from .rules import DEFAULT_RULES, InsightRules, get_rules, iter_rules
from .settings import parallel_jobs, player_refresh_interval

__all__ = [
    "COUNTED_POSITIONS",
    "FLEX_ELIGIBLE",
    "POSITION_ALIASES",
    "classify_position",
    "DEFAULT_RULES",
    "InsightRules",
    "get_rules",
    "iter_rules",
    "parallel_jobs",
    "player_refresh_interval",
]
