"""Position vocabulary shared by ingestion and the insight engine."""

from __future__ import annotations

from typing import Mapping, Optional

QB = "QB"
RB = "RB"
WR = "WR"
TE = "TE"
K = "K"
DEF = "DEF"

COUNTED_POSITIONS: frozenset[str] = frozenset({QB, RB, WR, TE, K, DEF})
FLEX_ELIGIBLE: frozenset[str] = frozenset({RB, WR, TE})

POSITION_ALIASES: Mapping[str, str] = {
    "DST": DEF,
}


def classify_position(position: Optional[str]) -> Optional[str]:
    """Return the counted position for an exact match, or None when unclassified.

    Matching is case-sensitive and does not strip whitespace; only DST is
    folded into DEF.
    """

    if position is None:
        return None
    position = POSITION_ALIASES.get(position, position)
    return position if position in COUNTED_POSITIONS else None
