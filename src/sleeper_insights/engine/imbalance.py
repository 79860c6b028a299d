"""Compare two lineups' position counts and flag imbalances and risks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

from sleeper_insights.config.rules import DEFAULT_RULES, InsightRules

from .counting import PositionCounts


@dataclass(frozen=True)
class ImbalanceReport:
    imbalance_messages: Tuple[str, ...]
    risk_messages: Tuple[str, ...]
    all_risk_messages: Tuple[str, ...]


def _position_imbalances(
    counts_a: PositionCounts,
    counts_b: PositionCounts,
    team_a: str,
    team_b: str,
    rules: InsightRules,
) -> List[str]:
    messages: List[str] = []
    for position in rules.imbalance_positions:
        diff = counts_a.get(position) - counts_b.get(position)
        if diff < -rules.imbalance_tolerance:
            messages.append(f"{team_b} has {abs(diff)} more {position}(s) starting")
        elif diff > rules.imbalance_tolerance:
            messages.append(f"{team_a} has {diff} more {position}(s) starting")
    return messages


def _risks(
    sides: Tuple[Tuple[str, PositionCounts, int], ...],
    rules: InsightRules,
) -> List[str]:
    # Each category runs for both teams before the next category starts.
    risks: List[str] = []
    for team, counts, _ in sides:
        if counts.QB == 0:
            risks.append(f"{team} has no QB starting")
    for team, _, starters in sides:
        if starters < rules.min_starters:
            risks.append(f"{team} has only {starters} starter(s) - may be incomplete lineup")
    for team, counts, _ in sides:
        if counts.flex_depth < rules.min_flex_depth:
            risks.append(f"{team} has limited RB/WR/TE depth ({counts.flex_depth} players)")
    return risks


def analyze_imbalance(
    counts_a: PositionCounts,
    counts_b: PositionCounts,
    team_a: str,
    team_b: str,
    *,
    starters_a: int,
    starters_b: int,
    rules: InsightRules = DEFAULT_RULES,
) -> ImbalanceReport:
    """Flag position imbalances and lineup risks for two opposing lineups.

    ``starters_a``/``starters_b`` are the raw starter list lengths, including
    players that were not classified into a position bucket. Risk messages
    are truncated to ``rules.max_risk_messages``; imbalance messages are not.
    """

    imbalances = _position_imbalances(counts_a, counts_b, team_a, team_b, rules)
    risks = _risks(((team_a, counts_a, starters_a), (team_b, counts_b, starters_b)), rules)
    return ImbalanceReport(
        imbalance_messages=tuple(imbalances),
        risk_messages=tuple(risks[: rules.max_risk_messages]),
        all_risk_messages=tuple(risks),
    )
