"""Auto-selection of an event's accepted players into its teams."""
import logging
from dataclasses import dataclass, field, replace
from typing import Optional

from team_roster.models.event import Event
from team_roster.models.player import CandidatePlayer, Player
from team_roster.models.statistics import SelectionStats, TeamSelectionSummary
from team_roster.models.team import Team, TeamDescriptor
from team_roster.services.player_stats import build_candidate
from team_roster.services.selection_engine import SelectionEngine
from team_roster.services.selection_logger import SelectionLogger

logger = logging.getLogger(__name__)


@dataclass
class AutoSelectionResult:
    """Outcome of auto-selecting an event."""

    event_id: str
    assignments: dict[str, str]
    teams: list[Team]
    stats: SelectionStats
    candidates: list[CandidatePlayer] = field(default_factory=list)

    @property
    def unselected_player_ids(self) -> list[str]:
        return [c.id for c in self.candidates if c.id not in self.assignments]


def _validate_event(event: Event) -> None:
    if event.max_players_per_team < 0:
        raise ValueError(
            f"Event {event.id} has negative max_players_per_team: {event.max_players_per_team}"
        )


def _with_event(history: Optional[list[Event]], event: Event) -> list[Event]:
    """History with the event itself counted exactly once."""
    others = [e for e in (history or []) if e.id != event.id]
    return others + [event]


def team_descriptors(event: Event) -> list[TeamDescriptor]:
    """Describe each team by strength and remaining capacity."""
    _validate_event(event)
    return [
        TeamDescriptor(
            id=team.id,
            strength=team.strength,
            max_players=max(event.max_players_per_team - len(team.selected_players), 0),
        )
        for team in event.teams
    ]


def apply_assignment(event: Event, assignment: dict[str, str]) -> list[Team]:
    """Return copies of the event's teams with assigned players appended.

    The event itself is left untouched.
    """
    added: dict[str, list[str]] = {team.id: [] for team in event.teams}
    for player_id, team_id in assignment.items():
        if team_id not in added:
            logger.warning(f"Assignment of {player_id} to unknown team {team_id} ignored")
            continue
        added[team_id].append(player_id)

    return [
        replace(team, selected_players=list(team.selected_players) + added[team.id])
        for team in event.teams
    ]


def get_selection_stats(event: Event, players: list[Player]) -> SelectionStats:
    """Summarise how many players are placed and how strong each team is."""
    by_id = {player.id: player for player in players}

    summaries: list[TeamSelectionSummary] = []
    for team in event.teams:
        levels = [by_id[pid].level for pid in team.selected_players if pid in by_id]
        average = round(sum(levels) / len(levels), 1) if levels else 0.0
        summaries.append(
            TeamSelectionSummary(
                team_id=team.id,
                team_name=team.name,
                player_count=len(team.selected_players),
                average_level=average,
            )
        )

    return SelectionStats(
        accepted_count=len(event.accepted_player_ids),
        total_selected_count=sum(len(team.selected_players) for team in event.teams),
        total_capacity=event.total_capacity,
        teams=summaries,
    )


class AutoSelectionService:
    """Prepares candidates for an event, runs the engine and applies the result."""

    def __init__(
        self,
        engine: Optional[SelectionEngine] = None,
        selection_logger: Optional[SelectionLogger] = None,
    ):
        self.engine = engine or SelectionEngine()
        self.selection_logger = selection_logger or SelectionLogger()

    def get_candidates(
        self,
        event: Event,
        players: list[Player],
        history: Optional[list[Event]] = None,
    ) -> list[CandidatePlayer]:
        """Accepted players of the event that are not on a team yet.

        Args:
            event: Event to select for
            players: Club roster used to resolve invitation player ids
            history: Past events for the selection/acceptance counters. The
                event itself is always included once.

        Returns:
            Candidates in invitation order
        """
        by_id = {player.id: player for player in players}
        events = _with_event(history, event)
        assigned = event.assigned_player_ids

        candidates: list[CandidatePlayer] = []
        for player_id in event.accepted_player_ids:
            if player_id in assigned:
                continue
            player = by_id.get(player_id)
            if player is None:
                logger.warning(f"Event {event.id}: accepted player {player_id} not in roster")
                continue
            candidate = build_candidate(player, events)
            if candidate.invited_count <= 0:
                continue
            candidates.append(candidate)

        return candidates

    def auto_select(
        self,
        event: Event,
        players: list[Player],
        history: Optional[list[Event]] = None,
    ) -> AutoSelectionResult:
        """Fill the event's teams with the fairest choice of accepted players."""
        descriptors = team_descriptors(event)
        candidates = self.get_candidates(event, players, history)

        self.selection_logger.start_run(
            event.id,
            descriptors,
            extra_metadata={"event_name": event.name, "event_date": event.date},
        )
        scored = self.engine.score_candidates(candidates)
        self.selection_logger.log_scores(scored)
        assignments = self.engine.assign(scored, descriptors)
        self.selection_logger.log_assignments(assignments)
        self.selection_logger.save()

        teams = apply_assignment(event, assignments)
        stats = get_selection_stats(replace(event, teams=teams), players)

        logger.info(
            f"Event {event.id}: {len(assignments)} of {len(candidates)} candidates selected, "
            f"{stats.unassigned_count} accepted players unassigned"
        )
        return AutoSelectionResult(
            event_id=event.id,
            assignments=assignments,
            teams=teams,
            stats=stats,
            candidates=candidates,
        )
