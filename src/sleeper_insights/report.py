"""Plain-text rendering of matchup insights."""

from __future__ import annotations

from typing import List, Mapping

from sleeper_insights.directory import display_name
from sleeper_insights.engine import MatchupInsight, NoSwapData, SwapResult
from sleeper_insights.models import Player


def _format_counts(item: MatchupInsight, key: str) -> str:
    counts = item.counts[key].as_dict()
    return " ".join(f"{position}:{count}" for position, count in counts.items())


def _format_swaps(result: SwapResult, directory: Mapping[str, Player]) -> List[str]:
    if isinstance(result, NoSwapData):
        return [f"    Not enough data for swap suggestions ({result.reason})"]
    if not len(result):
        return ["    No bench player would have scored more"]
    return [
        f"    Start {display_name(directory, rec.bench_id)} over "
        f"{display_name(directory, rec.starter_id)} ({rec.position}, +{rec.point_diff:.2f})"
        for rec in result
    ]


def render_text(item: MatchupInsight, directory: Mapping[str, Player]) -> str:
    """Render one matchup insight as a readable block of text."""

    insight = item.insight
    lines = [
        f"Matchup {item.matchup_id}: {item.team1.name} {item.team1.points:.2f} vs "
        f"{item.team2.name} {item.team2.points:.2f}",
    ]
    if insight.leader == "tied":
        lines.append(f"  Tied ({insight.score_diff:.2f})")
    else:
        leader = item.team1 if insight.leader == "team1" else item.team2
        lines.append(f"  {leader.name} leads by {insight.score_diff:.2f}")
    for key, side in (("team1", item.team1), ("team2", item.team2)):
        lines.append(f"  {side.name} starters: {_format_counts(item, key)}")
    for message in insight.imbalance_messages:
        lines.append(f"  Imbalance: {message}")
    for message in insight.risk_messages:
        lines.append(f"  Risk: {message}")
    for key, side in (("team1", item.team1), ("team2", item.team2)):
        lines.append(f"  {side.name} swaps:")
        lines.extend(_format_swaps(item.swaps[key], directory))
    return "\n".join(lines)
