"""Player statistics and selection summary models."""

from dataclasses import asdict, dataclass, field

from team_roster.models.event import InvitationStatus


@dataclass
class PlayerStats:
    """Participation counters for one player across a set of events."""

    player_id: str
    invited_count: int = 0
    accepted_count: int = 0
    selected_count: int = 0

    @property
    def acceptance_rate(self) -> float:
        """Accepted invitations as a percentage (0-100) of all invitations."""
        if self.invited_count <= 0:
            return 0.0
        return self.accepted_count / self.invited_count * 100

    @property
    def selection_rate(self) -> float:
        """Selections as a percentage of accepted invitations."""
        if self.accepted_count <= 0:
            return 0.0
        return self.selected_count / self.accepted_count * 100

    def to_dict(self) -> dict:
        data = asdict(self)
        data["acceptance_rate"] = round(self.acceptance_rate, 1)
        data["selection_rate"] = round(self.selection_rate, 1)
        return data


@dataclass
class PlayerEventHistoryItem:
    """One event from a player's point of view."""

    event_id: str
    event_name: str
    event_date: str
    invitation_status: InvitationStatus
    is_selected: bool
    team_name: str | None = None


@dataclass
class TeamSelectionSummary:
    """Headcount and average level of a team after selection."""

    team_id: str
    team_name: str
    player_count: int
    average_level: float  # rounded to one decimal, 0.0 when empty


@dataclass
class SelectionStats:
    """Overview of how far an event's selection has progressed."""

    accepted_count: int
    total_selected_count: int
    total_capacity: int
    teams: list[TeamSelectionSummary] = field(default_factory=list)

    @property
    def unassigned_count(self) -> int:
        return self.accepted_count - self.total_selected_count

    def to_dict(self) -> dict:
        data = asdict(self)
        data["unassigned_count"] = self.unassigned_count
        return data
