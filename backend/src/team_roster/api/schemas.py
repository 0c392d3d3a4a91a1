"""Request body models shared by the API routes."""

from pydantic import BaseModel, Field

from team_roster.models.event import Event, Invitation, InvitationStatus
from team_roster.models.player import CandidatePlayer, Player
from team_roster.models.team import DEFAULT_TEAM_STRENGTH, Team, TeamDescriptor


class CandidatePlayerBody(BaseModel):
    """A player with precomputed history counters."""

    id: str
    level: int = Field(ge=1, le=5)
    selected_count: int = Field(default=0, ge=0)
    invited_count: int = Field(default=0, ge=0)
    accepted_count: int = Field(default=0, ge=0)

    def to_model(self) -> CandidatePlayer:
        return CandidatePlayer(**self.model_dump())


class TeamDescriptorBody(BaseModel):
    """A team as seen by the selection engine."""

    id: str
    strength: int = Field(default=DEFAULT_TEAM_STRENGTH, ge=1)
    max_players: int = Field(ge=0)

    def to_model(self) -> TeamDescriptor:
        return TeamDescriptor(**self.model_dump())


class PlayerBody(BaseModel):
    id: str
    first_name: str
    last_name: str
    birth_year: int
    level: int = Field(ge=1, le=5)
    birth_date: str | None = None

    def to_model(self) -> Player:
        return Player(**self.model_dump())


class InvitationBody(BaseModel):
    id: str
    player_id: str
    status: InvitationStatus = InvitationStatus.OPEN

    def to_model(self) -> Invitation:
        return Invitation(**self.model_dump())


class TeamBody(BaseModel):
    id: str
    name: str
    strength: int = Field(default=DEFAULT_TEAM_STRENGTH, ge=1)
    start_time: str = ""
    selected_players: list[str] = []
    trainer_id: str | None = None
    shirt_set_id: str | None = None

    def to_model(self) -> Team:
        return Team(**self.model_dump())


class EventBody(BaseModel):
    id: str
    name: str
    date: str
    max_players_per_team: int = Field(ge=0)
    location: str | None = None
    teams: list[TeamBody] = []
    invitations: list[InvitationBody] = []

    def to_model(self) -> Event:
        return Event(
            id=self.id,
            name=self.name,
            date=self.date,
            max_players_per_team=self.max_players_per_team,
            location=self.location,
            teams=[team.to_model() for team in self.teams],
            invitations=[inv.to_model() for inv in self.invitations],
        )
