"""Business logic services."""

from team_roster.services.selection_engine import (
    ScoredCandidate,
    SelectionEngine,
    SelectionWeights,
    select_players,
)
from team_roster.services.player_stats import (
    build_candidate,
    get_all_player_stats,
    get_player_event_history,
    get_player_stats,
)
from team_roster.services.auto_selection_service import (
    AutoSelectionResult,
    AutoSelectionService,
    apply_assignment,
    get_selection_stats,
    team_descriptors,
)
from team_roster.services.selection_logger import SelectionLogger

__all__ = [
    "ScoredCandidate",
    "SelectionEngine",
    "SelectionWeights",
    "select_players",
    "build_candidate",
    "get_all_player_stats",
    "get_player_event_history",
    "get_player_stats",
    "AutoSelectionResult",
    "AutoSelectionService",
    "apply_assignment",
    "get_selection_stats",
    "team_descriptors",
    "SelectionLogger",
]
