"""Command-line interface for computing matchup insights from saved payloads."""

from __future__ import annotations

import argparse
import json
from pathlib import Path

from sleeper_insights.api.serializers import week_to_response
from sleeper_insights.config import get_rules, parallel_jobs
from sleeper_insights.engine import MatchupPairingError, build_week_insights
from sleeper_insights.ingest import (
    PayloadError,
    load_json,
    parse_matchups,
    parse_players,
    parse_rosters,
    parse_team_names,
)
from sleeper_insights.report import render_text


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Compute weekly matchup insights from league data")
    parser.add_argument("players", type=Path, help="Path to players JSON (id -> player object)")
    parser.add_argument("rosters", type=Path, help="Path to league rosters JSON")
    parser.add_argument("matchups", type=Path, help="Path to one week's matchups JSON")
    parser.add_argument("--users", type=Path, default=None, help="Optional league users JSON for team names")
    parser.add_argument("--week", type=int, default=None, help="Week number to label the report with")
    parser.add_argument("--rules", default="standard", help="Named insight rule set")
    parser.add_argument(
        "--parallel-jobs",
        type=int,
        default=None,
        help="Number of matchups to analyze concurrently (default from environment)",
    )
    parser.add_argument("--json", action="store_true", help="Emit JSON instead of text")
    parser.add_argument("--output", type=Path, default=None, help="Write the report to this path")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = _parse_args(argv)

    try:
        rules = get_rules(args.rules)
    except KeyError as exc:
        raise SystemExit(str(exc)) from exc

    try:
        directory = parse_players(load_json(args.players))
        rosters = parse_rosters(load_json(args.rosters))
        matchups = parse_matchups(load_json(args.matchups))
        team_names = parse_team_names(load_json(args.users), rosters) if args.users else {}
        results = build_week_insights(
            matchups,
            rosters,
            directory,
            team_names=team_names,
            rules=rules,
            parallel_jobs=args.parallel_jobs or parallel_jobs(),
        )
    except (PayloadError, MatchupPairingError) as exc:
        raise SystemExit(f"error: {exc}") from exc
    except FileNotFoundError as exc:
        raise SystemExit(f"error: {exc.filename} not found") from exc

    if args.json:
        payload = week_to_response(results, directory, week=args.week).model_dump()
        text = json.dumps(payload, indent=2)
    elif results:
        text = "\n\n".join(render_text(item, directory) for item in results)
    else:
        label = f" for week {args.week}" if args.week else ""
        text = f"No matchups found{label}."

    if args.output:
        args.output.write_text(text + "\n", encoding="utf-8")
        print(f"Wrote insights to {args.output}")
    else:
        print(text)


if __name__ == "__main__":
    main()
