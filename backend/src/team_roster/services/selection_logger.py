"""Diagnostic logging for selection runs.

Captures the scored candidates and the resulting assignment of each
auto-selection so that the fairness weights can be reviewed afterwards.

Usage:
    from team_roster.services.selection_logger import SelectionLogger

    logger = SelectionLogger(enabled=True)
    logger.start_run("event-42", teams=descriptors)
    logger.log_scores(scored_candidates)
    logger.log_assignments(assignments)
    logger.save()
"""
import json
import logging
import os
from dataclasses import asdict
from datetime import datetime
from pathlib import Path
from typing import Optional

from team_roster.models.team import TeamDescriptor
from team_roster.services.selection_engine import ScoredCandidate

module_logger = logging.getLogger("team_roster.selection_diagnostics")


class SelectionLogger:
    """Captures selection diagnostics for analysis."""

    def __init__(self, output_dir: Optional[Path] = None, enabled: bool = False):
        """Initialize selection logger.

        Args:
            output_dir: Directory to save diagnostic files. Defaults to logs/selection/
            enabled: Whether logging is active. SELECTION_DIAGNOSTICS=true/false overrides it.
        """
        env_enabled = os.environ.get("SELECTION_DIAGNOSTICS", "").lower()
        if env_enabled == "true":
            enabled = True
        elif env_enabled == "false":
            enabled = False

        self.enabled = enabled
        self.output_dir = output_dir or Path(__file__).parents[4] / "logs" / "selection"
        self.entries: list[dict] = []
        self.run_id: str = ""
        self._metadata: dict = {}

        if self.enabled:
            self.output_dir.mkdir(parents=True, exist_ok=True)
            module_logger.info(f"Selection diagnostics enabled, output dir: {self.output_dir}")

    def start_run(
        self,
        run_id: str,
        teams: list[TeamDescriptor],
        extra_metadata: Optional[dict] = None,
    ):
        """Begin a new run, discarding entries from a previous one."""
        if not self.enabled:
            return

        self.run_id = run_id
        self.entries = []
        self._metadata = {
            "run_id": run_id,
            "started_at": datetime.now().isoformat(),
            "teams": [asdict(team) for team in teams],
            **(extra_metadata or {}),
        }

    def log_scores(self, scored: list[ScoredCandidate]):
        """Log every candidate's score and tie-breaker."""
        if not self.enabled:
            return

        self.entries.append({
            "event": "scores",
            "timestamp": datetime.now().isoformat(),
            "candidates": [
                {
                    "player_id": c.player.id,
                    "level": c.player.level,
                    "selected_count": c.player.selected_count,
                    "invited_count": c.player.invited_count,
                    "accepted_count": c.player.accepted_count,
                    "score": round(c.score, 2),
                    "tie_breaker": round(c.tie_breaker, 4),
                }
                for c in sorted(scored, key=lambda c: c.sort_key, reverse=True)
            ],
        })

    def log_assignments(self, assignments: dict[str, str]):
        """Log the final player -> team mapping."""
        if not self.enabled:
            return

        self.entries.append({
            "event": "assignments",
            "timestamp": datetime.now().isoformat(),
            "assignments": dict(assignments),
        })

    def save(self) -> Optional[Path]:
        """Save diagnostics to a JSON file.

        Returns:
            Path to saved file, or None if disabled/empty
        """
        if not self.enabled or not self.entries:
            return None

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        run_short = self.run_id[:12] if self.run_id else "unknown"
        output_path = self.output_dir / f"selection_{run_short}_{timestamp}.json"

        with open(output_path, "w") as f:
            json.dump({
                "metadata": self._metadata,
                "summary": self._compute_summary(),
                "entries": self.entries,
            }, f, indent=2)

        module_logger.info(f"Selection diagnostics saved: {output_path}")
        return output_path

    def _compute_summary(self) -> dict:
        scores = [e for e in self.entries if e["event"] == "scores"]
        assigned = [e for e in self.entries if e["event"] == "assignments"]

        candidates = scores[-1]["candidates"] if scores else []
        assignments = assigned[-1]["assignments"] if assigned else {}

        per_team: dict[str, int] = {}
        for team_id in assignments.values():
            per_team[team_id] = per_team.get(team_id, 0) + 1

        return {
            "candidate_count": len(candidates),
            "selected_count": len(assignments),
            "unselected": [
                c["player_id"] for c in candidates if c["player_id"] not in assignments
            ],
            "per_team": per_team,
        }
