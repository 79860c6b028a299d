"""Thresholds that drive imbalance, risk and swap diagnostics."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Tuple

from .positions import FLEX_ELIGIBLE, RB, WR


@dataclass(frozen=True)
class InsightRules:
    name: str
    imbalance_positions: Tuple[str, ...]
    imbalance_tolerance: int
    min_starters: int
    min_flex_depth: int
    max_risk_messages: int
    swap_positions: frozenset[str]


_INSIGHT_RULES: Dict[str, InsightRules] = {
    "standard": InsightRules(
        name="standard",
        imbalance_positions=(RB, WR),
        imbalance_tolerance=1,
        min_starters=8,
        min_flex_depth=4,
        max_risk_messages=2,
        swap_positions=FLEX_ELIGIBLE,
    ),
}

DEFAULT_RULES: InsightRules = _INSIGHT_RULES["standard"]


def iter_rules() -> Iterable[InsightRules]:
    """Return an iterator of all configured rule sets."""

    return _INSIGHT_RULES.values()


def get_rules(name: str = "standard") -> InsightRules:
    """Fetch a rule set by name, raising KeyError if missing."""

    key = name.strip().lower()
    if key not in _INSIGHT_RULES:
        raise KeyError(f"No insight rules configured for name={name!r}")
    return _INSIGHT_RULES[key]
