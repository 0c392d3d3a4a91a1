#!/usr/bin/env python3
"""Run the player auto-selection on a JSON file.

Input format:
  {
    "players": [{"id": "p1", "level": 3, "selectedCount": 0, "invitedCount": 5, "acceptedCount": 4}, ...],
    "teams": [{"id": "t1", "strength": 1, "maxPlayers": 4}, ...]
  }

camelCase and snake_case keys are both accepted.

Usage:
  python scripts/run_selection.py roster.json --seed 7
  python scripts/run_selection.py roster.json --output assignment.json
"""

import argparse
import json
import random
import re
import sys
from collections import defaultdict
from pathlib import Path

# Add backend to path
sys.path.insert(0, str(Path(__file__).parent.parent / "backend" / "src"))

from team_roster.models.player import CandidatePlayer
from team_roster.models.team import DEFAULT_TEAM_STRENGTH, TeamDescriptor
from team_roster.services.selection_engine import SelectionEngine, SelectionWeights
from team_roster.utils.strength_bands import StrengthBands


def _snake(key: str) -> str:
    return re.sub(r"(?<!^)(?=[A-Z])", "_", key).lower()


def _normalize_keys(entry: dict) -> dict:
    return {_snake(k): v for k, v in entry.items()}


def load_input(path: Path) -> tuple[list[CandidatePlayer], list[TeamDescriptor]]:
    """Parse players and teams from a JSON file."""
    with open(path) as f:
        data = json.load(f)

    players = []
    for raw in data.get("players", []):
        entry = _normalize_keys(raw)
        players.append(
            CandidatePlayer(
                id=str(entry["id"]),
                level=int(entry["level"]),
                selected_count=int(entry.get("selected_count", 0)),
                invited_count=int(entry.get("invited_count", 0)),
                accepted_count=int(entry.get("accepted_count", 0)),
            )
        )

    teams = []
    for raw in data.get("teams", []):
        entry = _normalize_keys(raw)
        teams.append(
            TeamDescriptor(
                id=str(entry["id"]),
                strength=int(entry.get("strength", DEFAULT_TEAM_STRENGTH)),
                max_players=int(entry["max_players"]),
            )
        )

    return players, teams


def print_summary(
    players: list[CandidatePlayer],
    teams: list[TeamDescriptor],
    assignments: dict[str, str],
    engine: SelectionEngine,
):
    by_team: dict[str, list[CandidatePlayer]] = defaultdict(list)
    by_id = {p.id: p for p in players}
    for player_id, team_id in assignments.items():
        by_team[team_id].append(by_id[player_id])

    print(f"\n{'Team':<12} {'Str':>4} {'Size':>9} {'Avg lvl':>8}")
    print("-" * 36)
    for team in sorted(teams, key=lambda t: t.strength):
        members = by_team.get(team.id, [])
        avg = sum(p.level for p in members) / len(members) if members else 0.0
        print(f"{team.id:<12} {team.strength:>4} {len(members):>4}/{team.max_players:<4} {avg:>8.1f}")

    left_out = [p for p in players if p.id not in assignments]
    if left_out:
        print("\nNot selected:")
        for p in sorted(left_out, key=engine.score_player, reverse=True):
            print(f"  {p.id:<12} level={p.level} score={engine.score_player(p):.1f}")


def main():
    parser = argparse.ArgumentParser(description="Assign players to teams fairly")
    parser.add_argument("input", type=Path, help="JSON file with players and teams")
    parser.add_argument("--seed", type=int, default=None, help="Seed for tie-breaking")
    parser.add_argument("--output", type=Path, default=None, help="Write assignment JSON here")
    parser.add_argument("--quiet", action="store_true", help="Skip the team summary")
    args = parser.parse_args()

    if not args.input.exists():
        print(f"Input file not found: {args.input}", file=sys.stderr)
        return 1

    players, teams = load_input(args.input)
    engine = SelectionEngine(
        weights=SelectionWeights.from_settings(),
        bands=StrengthBands.from_settings(),
        rng=random.Random(args.seed),
    )
    assignments = engine.select_players(players, teams)

    payload = json.dumps(assignments, indent=2, sort_keys=True)
    if args.output:
        args.output.write_text(payload + "\n")
        print(f"Assignment written to {args.output}")
    else:
        print(payload)

    if not args.quiet:
        print_summary(players, teams, assignments, engine)
    return 0


if __name__ == "__main__":
    sys.exit(main())
