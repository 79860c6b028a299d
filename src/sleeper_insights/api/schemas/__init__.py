"""Pydantic models for API I/O."""

from .insight import (
    MatchupInsightResponse,
    PositionCountsResponse,
    SwapRecommendationResponse,
    SwapResultResponse,
    TeamInsightResponse,
    WeekInsightsResponse,
)
from .request import InsightRequest

__all__ = [
    "InsightRequest",
    "MatchupInsightResponse",
    "PositionCountsResponse",
    "SwapRecommendationResponse",
    "SwapResultResponse",
    "TeamInsightResponse",
    "WeekInsightsResponse",
]
