"""Utility modules for team_roster."""

from team_roster.utils.strength_bands import (
    DEFAULT_LEVEL_BANDS,
    FALLBACK_LEVEL_BAND,
    PLAYER_LEVELS,
    StrengthBands,
)

__all__ = [
    "DEFAULT_LEVEL_BANDS",
    "FALLBACK_LEVEL_BAND",
    "PLAYER_LEVELS",
    "StrengthBands",
]
