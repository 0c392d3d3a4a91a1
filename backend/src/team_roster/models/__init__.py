"""Data models for the team roster backend."""

from team_roster.models.player import CandidatePlayer, Player
from team_roster.models.team import DEFAULT_TEAM_STRENGTH, Team, TeamDescriptor
from team_roster.models.event import Event, Invitation, InvitationStatus
from team_roster.models.statistics import (
    PlayerEventHistoryItem,
    PlayerStats,
    SelectionStats,
    TeamSelectionSummary,
)

__all__ = [
    "CandidatePlayer",
    "Player",
    "DEFAULT_TEAM_STRENGTH",
    "Team",
    "TeamDescriptor",
    "Event",
    "Invitation",
    "InvitationStatus",
    "PlayerEventHistoryItem",
    "PlayerStats",
    "SelectionStats",
    "TeamSelectionSummary",
]
