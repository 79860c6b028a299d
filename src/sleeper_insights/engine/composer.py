"""Assemble per-matchup insight reports."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Iterable, List, Literal, Mapping, Optional, Tuple

from sleeper_insights.config.rules import DEFAULT_RULES, InsightRules
from sleeper_insights.models import MatchupRecord, Player, RosterSnapshot, TeamSide

from .counting import PositionCounts, count_positions
from .imbalance import analyze_imbalance
from .pairing import MatchupPair, pair_matchups
from .swaps import SwapResult, recommend_swaps


Leader = Literal["team1", "team2", "tied"]


@dataclass(frozen=True)
class Insight:
    score_diff: float
    leader: Leader
    imbalance_messages: Tuple[str, ...]
    risk_messages: Tuple[str, ...]


@dataclass(frozen=True)
class MatchupInsight:
    matchup_id: int
    team1: TeamSide
    team2: TeamSide
    insight: Insight
    counts: Mapping[str, PositionCounts]
    swaps: Mapping[str, SwapResult]


def default_team_name(roster_id: int) -> str:
    return f"Roster {roster_id}"


def _side(record: MatchupRecord, team_names: Mapping[int, str]) -> TeamSide:
    return TeamSide(
        roster_id=record.roster_id,
        name=team_names.get(record.roster_id) or default_team_name(record.roster_id),
        points=record.total_points,
    )


def _leader(score_diff: float) -> Leader:
    if score_diff == 0:
        return "tied"
    return "team1" if score_diff > 0 else "team2"


def compose_insight(
    pair: MatchupPair,
    rosters: Mapping[int, RosterSnapshot],
    directory: Mapping[str, Player],
    *,
    team_names: Optional[Mapping[int, str]] = None,
    rules: InsightRules = DEFAULT_RULES,
) -> MatchupInsight:
    """Build the insight report for one matchup pair."""

    team_names = team_names or {}
    side1 = _side(pair.team1, team_names)
    side2 = _side(pair.team2, team_names)

    counts1 = count_positions(pair.team1.starters, directory)
    counts2 = count_positions(pair.team2.starters, directory)
    imbalance = analyze_imbalance(
        counts1,
        counts2,
        side1.name,
        side2.name,
        starters_a=pair.team1.starter_count,
        starters_b=pair.team2.starter_count,
        rules=rules,
    )
    swaps1 = recommend_swaps(
        rosters.get(pair.team1.roster_id), pair.team1, directory, team_name=side1.name, rules=rules
    )
    swaps2 = recommend_swaps(
        rosters.get(pair.team2.roster_id), pair.team2, directory, team_name=side2.name, rules=rules
    )

    score_diff = side1.points - side2.points
    insight = Insight(
        score_diff=abs(score_diff),
        leader=_leader(score_diff),
        imbalance_messages=imbalance.imbalance_messages,
        risk_messages=imbalance.risk_messages,
    )
    return MatchupInsight(
        matchup_id=pair.matchup_id,
        team1=side1,
        team2=side2,
        insight=insight,
        counts={"team1": counts1, "team2": counts2},
        swaps={"team1": swaps1, "team2": swaps2},
    )


def build_week_insights(
    matchups: Iterable[MatchupRecord],
    rosters: Iterable[RosterSnapshot],
    directory: Mapping[str, Player],
    *,
    team_names: Optional[Mapping[int, str]] = None,
    rules: InsightRules = DEFAULT_RULES,
    parallel_jobs: Optional[int] = None,
) -> List[MatchupInsight]:
    """Pair a week's matchups and compose one insight per pair.

    Pairing errors surface before any pair is analyzed. With ``parallel_jobs``
    above 1 the pairs are composed on a thread pool; results keep pairing
    order either way.
    """

    pairs = pair_matchups(matchups)
    roster_lookup = {roster.roster_id: roster for roster in rosters}

    def compose(pair: MatchupPair) -> MatchupInsight:
        return compose_insight(pair, roster_lookup, directory, team_names=team_names, rules=rules)

    if parallel_jobs is None or parallel_jobs <= 1 or len(pairs) <= 1:
        return [compose(pair) for pair in pairs]
    with ThreadPoolExecutor(max_workers=parallel_jobs) as executor:
        return list(executor.map(compose, pairs))
