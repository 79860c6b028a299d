"""Typed entities for players, rosters and matchups."""

from .league import MatchupRecord, RosterSnapshot, TeamSide
from .player import Player

__all__ = ["Player", "RosterSnapshot", "MatchupRecord", "TeamSide"]
