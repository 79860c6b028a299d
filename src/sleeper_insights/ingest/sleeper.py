"""Map already-retrieved league service payloads into typed entities."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence

from pydantic import ValidationError

from sleeper_insights.config.positions import POSITION_ALIASES
from sleeper_insights.directory import PlayerDirectory
from sleeper_insights.models import MatchupRecord, Player, RosterSnapshot


logger = logging.getLogger(__name__)


class PayloadError(ValueError):
    """Raised when a league service payload cannot be mapped."""


def load_json(path: Path) -> Any:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise PayloadError(f"{path} is not valid JSON: {exc}") from exc


def _player_name(player_id: str, data: Mapping[str, Any]) -> str:
    full_name = (data.get("full_name") or "").strip()
    if full_name:
        return full_name
    parts = [str(data.get(key) or "").strip() for key in ("first_name", "last_name")]
    joined = " ".join(part for part in parts if part)
    return joined or player_id


def _clean_position(value: Any) -> Optional[str]:
    if not value:
        return None
    token = str(value).strip().upper()
    return POSITION_ALIASES.get(token, token) or None


def _team(value: Any) -> Optional[str]:
    if not value:
        return None
    return str(value).strip().upper() or None


def parse_players(payload: Mapping[str, Any]) -> PlayerDirectory:
    """Build a directory from the league service's id -> player object map."""

    if not isinstance(payload, Mapping):
        raise PayloadError("players payload must be an object keyed by player id")

    players: Dict[str, Player] = {}
    skipped = 0
    for raw_id, data in payload.items():
        if not isinstance(data, Mapping):
            skipped += 1
            continue
        player_id = str(data.get("player_id") or raw_id)
        try:
            players[player_id] = Player(
                player_id=player_id,
                full_name=_player_name(player_id, data),
                position=_clean_position(data.get("position")),
                team=_team(data.get("team")),
            )
        except ValidationError as exc:
            raise PayloadError(f"player entry {raw_id!r} is malformed: {exc}") from exc
    if skipped:
        logger.info("Skipped %d malformed player entries", skipped)
    return PlayerDirectory(players)


def _id_list(values: Optional[Iterable[Any]]) -> Optional[List[str]]:
    if values is None:
        return None
    return [str(value) for value in values if value is not None]


def parse_rosters(payload: Sequence[Mapping[str, Any]]) -> List[RosterSnapshot]:
    """Convert the league's roster list into snapshots."""

    if not isinstance(payload, Sequence) or isinstance(payload, (str, bytes)):
        raise PayloadError("rosters payload must be a list")

    rosters: List[RosterSnapshot] = []
    for index, data in enumerate(payload):
        try:
            rosters.append(
                RosterSnapshot(
                    roster_id=data["roster_id"],
                    owner_id=str(data["owner_id"]) if data.get("owner_id") is not None else None,
                    player_ids=_id_list(data.get("players")) or (),
                )
            )
        except (AttributeError, KeyError, TypeError, ValidationError) as exc:
            raise PayloadError(f"roster entry {index} is malformed: {exc}") from exc
    return rosters


def _players_points(values: Optional[Mapping[str, Any]]) -> Optional[Dict[str, float]]:
    if values is None:
        return None
    return {str(player_id): float(points) for player_id, points in values.items() if points is not None}


def parse_matchups(payload: Sequence[Mapping[str, Any]]) -> List[MatchupRecord]:
    """Convert one week's matchup list, keeping absent lineup fields as ``None``."""

    if not isinstance(payload, Sequence) or isinstance(payload, (str, bytes)):
        raise PayloadError("matchups payload must be a list")

    records: List[MatchupRecord] = []
    for index, data in enumerate(payload):
        try:
            records.append(
                MatchupRecord(
                    matchup_id=data.get("matchup_id"),
                    roster_id=data["roster_id"],
                    points=data.get("points"),
                    starters=_id_list(data.get("starters")),
                    players_points=_players_points(data.get("players_points")),
                )
            )
        except (AttributeError, KeyError, TypeError, ValueError) as exc:
            raise PayloadError(f"matchup entry {index} is malformed: {exc}") from exc
    return records


def parse_team_names(
    users: Sequence[Mapping[str, Any]],
    rosters: Iterable[RosterSnapshot],
) -> Dict[int, str]:
    """Map roster id to the owner's team name, falling back to display name."""

    names_by_owner: Dict[str, str] = {}
    for user in users or ():
        user_id = user.get("user_id")
        if user_id is None:
            continue
        metadata = user.get("metadata") or {}
        name = (metadata.get("team_name") or user.get("display_name") or "").strip()
        if name:
            names_by_owner[str(user_id)] = name

    return {
        roster.roster_id: names_by_owner[roster.owner_id]
        for roster in rosters
        if roster.owner_id is not None and roster.owner_id in names_by_owner
    }
