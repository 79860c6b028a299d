"""Matchup insight engine: pure diagnostics over two opposing lineups."""

from .composer import Insight, MatchupInsight, build_week_insights, compose_insight, default_team_name
from .counting import PositionCounts, count_positions
from .imbalance import ImbalanceReport, analyze_imbalance
from .pairing import MatchupPair, MatchupPairingError, pair_matchups
from .swaps import (
    NoSwapData,
    SwapRecommendation,
    SwapRecommendations,
    SwapResult,
    recommend_swaps,
)

__all__ = [
    "Insight",
    "MatchupInsight",
    "build_week_insights",
    "compose_insight",
    "default_team_name",
    "PositionCounts",
    "count_positions",
    "ImbalanceReport",
    "analyze_imbalance",
    "MatchupPair",
    "MatchupPairingError",
    "pair_matchups",
    "NoSwapData",
    "SwapRecommendation",
    "SwapRecommendations",
    "SwapResult",
    "recommend_swaps",
]
