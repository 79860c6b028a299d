"""Read-only snapshot of player reference data."""

from __future__ import annotations

from typing import Dict, Iterator, Mapping

from sleeper_insights.models import Player


class PlayerDirectory(Mapping[str, Player]):
    """Immutable mapping from player id to :class:`Player`."""

    def __init__(self, players: Mapping[str, Player] | None = None):
        self._players: Dict[str, Player] = dict(players or {})

    @classmethod
    def from_players(cls, players) -> "PlayerDirectory":
        return cls({player.player_id: player for player in players})

    def __getitem__(self, player_id: str) -> Player:
        return self._players[player_id]

    def __iter__(self) -> Iterator[str]:
        return iter(self._players)

    def __len__(self) -> int:
        return len(self._players)

    def display_name(self, player_id: str) -> str:
        """Return the player's name, or the raw id when the player is unknown."""

        player = self._players.get(player_id)
        if player is None or not player.full_name:
            return player_id
        return player.full_name


def display_name(directory: Mapping[str, Player], player_id: str) -> str:
    """Name to show for ``player_id`` in any directory-like mapping."""

    if isinstance(directory, PlayerDirectory):
        return directory.display_name(player_id)
    player = directory.get(player_id)
    if player is None or not player.full_name:
        return player_id
    return player.full_name
