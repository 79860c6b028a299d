from __future__ import annotations

from typing import List, Literal

from pydantic import BaseModel, Field


class PositionCountsResponse(BaseModel):
    QB: int
    RB: int
    WR: int
    TE: int
    FLEX: int
    K: int
    DEF: int


class SwapRecommendationResponse(BaseModel):
    starter_id: str
    starter_name: str
    bench_id: str
    bench_name: str
    position: str
    point_diff: float


class SwapResultResponse(BaseModel):
    status: Literal["ok", "no_data"]
    reason: str | None = None
    recommendations: List[SwapRecommendationResponse] = Field(default_factory=list)


class TeamInsightResponse(BaseModel):
    roster_id: int
    name: str
    points: float
    position_counts: PositionCountsResponse
    swaps: SwapResultResponse


class MatchupInsightResponse(BaseModel):
    matchup_id: int
    score_diff: float
    leader: Literal["team1", "team2", "tied"]
    imbalance_messages: List[str]
    risk_messages: List[str]
    team1: TeamInsightResponse
    team2: TeamInsightResponse


class WeekInsightsResponse(BaseModel):
    week: int | None
    matchups: List[MatchupInsightResponse]
