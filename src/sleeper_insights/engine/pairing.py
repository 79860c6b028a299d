"""Group a week's matchup records into opposing pairs."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List

from sleeper_insights.models import MatchupRecord


logger = logging.getLogger(__name__)


class MatchupPairingError(ValueError):
    """Raised when a matchup id does not have exactly two records."""

    def __init__(self, matchup_id: int, count: int):
        super().__init__(f"matchup {matchup_id} has {count} record(s); expected exactly 2")
        self.matchup_id = matchup_id
        self.count = count


@dataclass(frozen=True)
class MatchupPair:
    matchup_id: int
    team1: MatchupRecord
    team2: MatchupRecord


def pair_matchups(records: Iterable[MatchupRecord]) -> List[MatchupPair]:
    """Pair records by ``matchup_id`` in first-seen order.

    Records without a matchup id (no opponent that week) are left out. Any
    matchup id with other than two records raises
    :class:`MatchupPairingError` before a single pair is returned.
    """

    groups: Dict[int, List[MatchupRecord]] = {}
    for record in records:
        if record.matchup_id is None:
            logger.debug("Skipping unpaired record for roster %s", record.roster_id)
            continue
        groups.setdefault(record.matchup_id, []).append(record)

    pairs: List[MatchupPair] = []
    for matchup_id, group in groups.items():
        if len(group) != 2:
            logger.warning("Rejecting matchup %s with %d record(s)", matchup_id, len(group))
            raise MatchupPairingError(matchup_id, len(group))
        pairs.append(MatchupPair(matchup_id=matchup_id, team1=group[0], team2=group[1]))
    return pairs
