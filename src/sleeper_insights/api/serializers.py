"""Convert engine results into API response models."""

from __future__ import annotations

from typing import Iterable, Mapping, Optional

from sleeper_insights.directory import display_name
from sleeper_insights.engine import MatchupInsight, NoSwapData, SwapResult
from sleeper_insights.models import Player

from .schemas import (
    MatchupInsightResponse,
    PositionCountsResponse,
    SwapRecommendationResponse,
    SwapResultResponse,
    TeamInsightResponse,
    WeekInsightsResponse,
)


def swap_result_to_response(result: SwapResult, directory: Mapping[str, Player]) -> SwapResultResponse:
    if isinstance(result, NoSwapData):
        return SwapResultResponse(status="no_data", reason=result.reason)
    return SwapResultResponse(
        status="ok",
        recommendations=[
            SwapRecommendationResponse(
                starter_id=rec.starter_id,
                starter_name=display_name(directory, rec.starter_id),
                bench_id=rec.bench_id,
                bench_name=display_name(directory, rec.bench_id),
                position=rec.position,
                point_diff=round(rec.point_diff, 2),
            )
            for rec in result
        ],
    )


def matchup_to_response(item: MatchupInsight, directory: Mapping[str, Player]) -> MatchupInsightResponse:
    def team(key: str) -> TeamInsightResponse:
        side = item.team1 if key == "team1" else item.team2
        return TeamInsightResponse(
            roster_id=side.roster_id,
            name=side.name,
            points=round(side.points, 2),
            position_counts=PositionCountsResponse(**item.counts[key].as_dict()),
            swaps=swap_result_to_response(item.swaps[key], directory),
        )

    insight = item.insight
    return MatchupInsightResponse(
        matchup_id=item.matchup_id,
        score_diff=round(insight.score_diff, 2),
        leader=insight.leader,
        imbalance_messages=list(insight.imbalance_messages),
        risk_messages=list(insight.risk_messages),
        team1=team("team1"),
        team2=team("team2"),
    )


def week_to_response(
    insights: Iterable[MatchupInsight],
    directory: Mapping[str, Player],
    *,
    week: Optional[int] = None,
) -> WeekInsightsResponse:
    return WeekInsightsResponse(
        week=week,
        matchups=[matchup_to_response(item, directory) for item in insights],
    )
