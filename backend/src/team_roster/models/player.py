"""Player models."""

from dataclasses import dataclass


@dataclass
class Player:
    """A club member who can be invited to events."""

    id: str
    first_name: str
    last_name: str
    birth_year: int
    level: int  # 1 (weakest) - 5 (strongest)
    birth_date: str | None = None  # ISO date string

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


@dataclass
class CandidatePlayer:
    """A player eligible for auto-selection, annotated with history counters.

    The counters are aggregates over past events and are supplied by the
    caller. ``invited_count`` is expected to be greater than zero.
    """

    id: str
    level: int
    selected_count: int = 0
    invited_count: int = 0
    accepted_count: int = 0
