from __future__ import annotations

from typing import Any, Dict, List

from pydantic import BaseModel, Field


class InsightRequest(BaseModel):
    week: int | None = Field(default=None, ge=1)
    players: Dict[str, Any] | None = None
    rosters: List[Dict[str, Any]]
    matchups: List[Dict[str, Any]]
    users: List[Dict[str, Any]] | None = None
    parallel_jobs: int | None = Field(default=None, ge=1, le=32)
