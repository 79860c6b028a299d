"""Find bench players who would have outscored a team's starters."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Mapping, Optional, Tuple, Union

from sleeper_insights.config.positions import classify_position
from sleeper_insights.config.rules import DEFAULT_RULES, InsightRules
from sleeper_insights.models import MatchupRecord, Player, RosterSnapshot


logger = logging.getLogger(__name__)

NO_ROSTER = "roster unavailable"
NO_STARTERS = "starters unavailable"
NO_POINTS = "player points unavailable"


@dataclass(frozen=True)
class SwapRecommendation:
    starter_id: str
    bench_id: str
    point_diff: float
    position: str


@dataclass(frozen=True)
class NoSwapData:
    """Not enough data to evaluate swaps (distinct from finding none)."""

    reason: str


@dataclass(frozen=True)
class SwapRecommendations:
    recommendations: Tuple[SwapRecommendation, ...] = ()

    def __len__(self) -> int:
        return len(self.recommendations)

    def __iter__(self):
        return iter(self.recommendations)


SwapResult = Union[NoSwapData, SwapRecommendations]


def _missing_data_reason(roster: Optional[RosterSnapshot], matchup: MatchupRecord) -> Optional[str]:
    if roster is None:
        return NO_ROSTER
    if matchup.starters is None:
        return NO_STARTERS
    if matchup.players_points is None:
        return NO_POINTS
    return None


def _best_bench_option(
    bench: List[Tuple[str, Optional[str], float]],
    position: str,
    starter_points: float,
) -> Optional[Tuple[str, float]]:
    best: Optional[Tuple[str, float]] = None
    for bench_id, bench_position, bench_points in bench:
        if bench_position != position or bench_points <= starter_points:
            continue
        # Strict comparison keeps the earliest roster entry on ties.
        if best is None or bench_points > best[1]:
            best = (bench_id, bench_points)
    return best


def recommend_swaps(
    roster: Optional[RosterSnapshot],
    matchup: MatchupRecord,
    directory: Mapping[str, Player],
    *,
    team_name: str = "",
    rules: InsightRules = DEFAULT_RULES,
) -> SwapResult:
    """Recommend, per flex-eligible starter, the best higher-scoring bench player.

    Returns :class:`NoSwapData` when the roster, the starters or the per-player
    points are missing. Recommendations follow the order of
    ``matchup.starters``; a bench player may be suggested for several starters.
    """

    reason = _missing_data_reason(roster, matchup)
    if reason is not None:
        logger.debug("No swap data for %s: %s", team_name or matchup.roster_id, reason)
        return NoSwapData(reason=reason)

    def position_of(player_id: str) -> Optional[str]:
        player = directory.get(player_id)
        return classify_position(player.position) if player is not None else None

    starter_ids = set(matchup.starters)
    bench = [
        (player_id, position_of(player_id), matchup.player_points(player_id))
        for player_id in roster.player_ids
        if player_id not in starter_ids
    ]

    recommendations: List[SwapRecommendation] = []
    seen: set[str] = set()
    for starter_id in matchup.starters:
        position = position_of(starter_id)
        if starter_id in seen or position not in rules.swap_positions:
            continue
        seen.add(starter_id)
        starter_points = matchup.player_points(starter_id)
        best = _best_bench_option(bench, position, starter_points)
        if best is None:
            continue
        bench_id, bench_points = best
        recommendations.append(
            SwapRecommendation(
                starter_id=starter_id,
                bench_id=bench_id,
                point_diff=bench_points - starter_points,
                position=position,
            )
        )
    return SwapRecommendations(recommendations=tuple(recommendations))
