"""Input adapters that normalize league service payloads."""

from .sleeper import (
    PayloadError,
    load_json,
    parse_matchups,
    parse_players,
    parse_rosters,
    parse_team_names,
)

__all__ = [
    "PayloadError",
    "load_json",
    "parse_matchups",
    "parse_players",
    "parse_rosters",
    "parse_team_names",
]
