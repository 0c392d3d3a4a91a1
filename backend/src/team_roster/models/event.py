"""Event and invitation models."""

from dataclasses import dataclass, field
from enum import Enum

from team_roster.models.team import Team


class InvitationStatus(str, Enum):
    """Lifecycle states of an event invitation."""

    OPEN = "open"
    ACCEPTED = "accepted"
    DECLINED = "declined"


@dataclass
class Invitation:
    """An invitation of a single player to an event."""

    id: str
    player_id: str
    status: InvitationStatus = InvitationStatus.OPEN


@dataclass
class Event:
    """A club event (tournament, match day) with its teams and invitations."""

    id: str
    name: str
    date: str  # ISO date string
    max_players_per_team: int
    teams: list[Team] = field(default_factory=list)
    invitations: list[Invitation] = field(default_factory=list)
    location: str | None = None

    @property
    def accepted_player_ids(self) -> list[str]:
        """Player ids with an accepted invitation, in invitation order, each once."""
        return list(dict.fromkeys(
            inv.player_id
            for inv in self.invitations
            if inv.status == InvitationStatus.ACCEPTED
        ))

    @property
    def assigned_player_ids(self) -> set[str]:
        """Player ids already placed on any team of this event."""
        return {
            player_id
            for team in self.teams
            for player_id in team.selected_players
        }

    @property
    def total_capacity(self) -> int:
        return len(self.teams) * self.max_players_per_team

    def has_accepted(self, player_id: str) -> bool:
        """Whether any invitation of the player to this event is accepted."""
        return any(
            inv.player_id == player_id and inv.status == InvitationStatus.ACCEPTED
            for inv in self.invitations
        )

    def get_invitation(self, player_id: str) -> Invitation | None:
        for inv in self.invitations:
            if inv.player_id == player_id:
                return inv
        return None

    def team_for_player(self, player_id: str) -> Team | None:
        for team in self.teams:
            if player_id in team.selected_players:
                return team
        return None
