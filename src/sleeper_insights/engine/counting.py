"""Classify a lineup's starters into position buckets."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Dict, Mapping, Optional, Sequence

from sleeper_insights.config.positions import COUNTED_POSITIONS, classify_position
from sleeper_insights.models import Player


@dataclass(frozen=True)
class PositionCounts:
    """Starter counts per position.

    FLEX is reserved but never incremented: a starter in a flex slot is
    counted under its real position, so FLEX stays 0.
    """

    QB: int = 0
    RB: int = 0
    WR: int = 0
    TE: int = 0
    FLEX: int = 0
    K: int = 0
    DEF: int = 0

    @property
    def classified_total(self) -> int:
        return self.QB + self.RB + self.WR + self.TE + self.K + self.DEF

    @property
    def flex_depth(self) -> int:
        return self.RB + self.WR + self.TE

    def get(self, position: str) -> int:
        return getattr(self, position)

    def as_dict(self) -> Dict[str, int]:
        return asdict(self)


def count_positions(
    starters: Optional[Sequence[str]],
    directory: Mapping[str, Player],
) -> PositionCounts:
    """Count starters by position, skipping unknown and unclassified players."""

    buckets = {position: 0 for position in COUNTED_POSITIONS}
    for player_id in starters or ():
        player = directory.get(player_id)
        if player is None:
            continue
        position = classify_position(player.position)
        if position in buckets:
            buckets[position] += 1
    return PositionCounts(**buckets)
