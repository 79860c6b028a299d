"""REST API exposing matchup insights to presentation clients."""

from __future__ import annotations

import logging
from datetime import timedelta
from typing import Any, Callable, Mapping

from fastapi import FastAPI, HTTPException

from sleeper_insights.api.schemas import InsightRequest, WeekInsightsResponse
from sleeper_insights.api.serializers import week_to_response
from sleeper_insights.config import parallel_jobs as default_parallel_jobs
from sleeper_insights.directory import PlayerDirectory, PlayerDirectoryCache
from sleeper_insights.engine import MatchupPairingError, build_week_insights
from sleeper_insights.ingest import (
    PayloadError,
    parse_matchups,
    parse_players,
    parse_rosters,
    parse_team_names,
)


logger = logging.getLogger(__name__)

PlayersPayloadLoader = Callable[[], Mapping[str, Any]]


def create_app(
    player_loader: PlayersPayloadLoader | None = None,
    *,
    refresh_interval: timedelta | None = None,
) -> FastAPI:
    """Build the API.

    ``player_loader`` returns the league service's raw players payload; when
    given, requests that omit ``players`` are served from a read-through
    :class:`PlayerDirectoryCache` around it.
    """

    app = FastAPI(title="sleeper insights")
    player_cache: PlayerDirectoryCache | None = None
    if player_loader is not None:
        player_cache = PlayerDirectoryCache(
            lambda: parse_players(player_loader()),
            refresh_interval=refresh_interval,
        )
    app.state.player_cache = player_cache

    def _resolve_directory(payload: InsightRequest) -> PlayerDirectory:
        if payload.players is not None:
            return parse_players(payload.players)
        if player_cache is None:
            raise HTTPException(status_code=400, detail="players payload is required")
        try:
            return player_cache.get()
        except Exception as exc:
            logger.exception("Player directory unavailable")
            raise HTTPException(status_code=503, detail="player data unavailable") from exc

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.post("/insights", response_model=WeekInsightsResponse)
    async def insights(payload: InsightRequest) -> WeekInsightsResponse:
        try:
            directory = _resolve_directory(payload)
            rosters = parse_rosters(payload.rosters)
            matchups = parse_matchups(payload.matchups)
            team_names = parse_team_names(payload.users or [], rosters)
            results = build_week_insights(
                matchups,
                rosters,
                directory,
                team_names=team_names,
                parallel_jobs=payload.parallel_jobs or default_parallel_jobs(),
            )
        except (PayloadError, MatchupPairingError) as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc
        return week_to_response(results, directory, week=payload.week)

    return app


__all__ = ["create_app"]
