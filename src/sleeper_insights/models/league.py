"""Weekly league snapshots consumed by the insight engine."""

from __future__ import annotations

from typing import Dict, Optional, Tuple

from pydantic import BaseModel, Field, field_validator
from pydantic.config import ConfigDict


class RosterSnapshot(BaseModel):
    """Every player a roster holds, starters and bench alike.

    ``player_ids`` behaves as a set for membership but keeps the order the
    league service returned, which breaks ties between bench players.
    """

    roster_id: int
    owner_id: Optional[str] = None
    player_ids: Tuple[str, ...] = ()

    model_config = ConfigDict(frozen=True)

    @field_validator("player_ids", mode="before")
    @classmethod
    def _dedupe_player_ids(cls, value):
        if value is None:
            return ()
        return tuple(dict.fromkeys(str(pid) for pid in value))


class MatchupRecord(BaseModel):
    """One side of a weekly matchup.

    ``starters`` and ``players_points`` are ``None`` when the league service
    did not report them, which is not the same as reporting them empty.
    """

    matchup_id: Optional[int] = None
    roster_id: int
    points: Optional[float] = None
    starters: Optional[Tuple[str, ...]] = None
    players_points: Optional[Dict[str, float]] = None

    model_config = ConfigDict(frozen=True)

    @property
    def total_points(self) -> float:
        return self.points if self.points is not None else 0.0

    @property
    def starter_count(self) -> int:
        return len(self.starters) if self.starters is not None else 0

    def player_points(self, player_id: str) -> float:
        if not self.players_points:
            return 0.0
        return self.players_points.get(player_id, 0.0)


class TeamSide(BaseModel):
    """Display identity of one side of a matchup."""

    roster_id: int
    name: str
    points: float = Field(default=0.0)

    model_config = ConfigDict(frozen=True)
