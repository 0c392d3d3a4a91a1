"""Team models."""

from dataclasses import dataclass, field

DEFAULT_TEAM_STRENGTH = 2


@dataclass
class Team:
    """A team fielded at an event."""

    id: str
    name: str
    strength: int = DEFAULT_TEAM_STRENGTH  # 1 (highest) - 3 (lowest)
    start_time: str = ""  # HH:MM
    selected_players: list[str] = field(default_factory=list)
    trainer_id: str | None = None
    shirt_set_id: str | None = None


@dataclass(frozen=True)
class TeamDescriptor:
    """Capacity and strength of a team as seen by the selection engine."""

    id: str
    strength: int
    max_players: int
