"""Canonical player model shared across ingestion and the insight engine."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class Player(BaseModel):
    """Reference attributes for a single player."""

    player_id: str = Field(..., min_length=1)
    full_name: str
    position: Optional[str] = None
    team: Optional[str] = None

    model_config = ConfigDict(frozen=True)
