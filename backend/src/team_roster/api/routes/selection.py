"""REST endpoints for player auto-selection."""

import random
from dataclasses import asdict
from typing import Optional

from fastapi import APIRouter, HTTPException, Request
from pydantic import BaseModel

from team_roster.api.schemas import (
    CandidatePlayerBody,
    EventBody,
    PlayerBody,
    TeamDescriptorBody,
)
from team_roster.config import settings
from team_roster.services.auto_selection_service import (
    AutoSelectionService,
    get_selection_stats,
)
from team_roster.services.selection_engine import SelectionEngine, SelectionWeights
from team_roster.services.selection_logger import SelectionLogger
from team_roster.utils.strength_bands import StrengthBands

router = APIRouter(prefix="/api/selection", tags=["selection"])


class SelectionRequest(BaseModel):
    players: list[CandidatePlayerBody]
    teams: list[TeamDescriptorBody]
    seed: Optional[int] = None  # Fixes tie-breaking for reproducible results


class EventSelectionRequest(BaseModel):
    event: EventBody
    players: list[PlayerBody]
    history: list[EventBody] = []
    seed: Optional[int] = None


class EventStatsRequest(BaseModel):
    event: EventBody
    players: list[PlayerBody]


def _get_engine(request: Request, seed: Optional[int]) -> SelectionEngine:
    """Build a per-request engine from the weights and bands in app state."""
    if not hasattr(request.app.state, "selection_weights"):
        request.app.state.selection_weights = SelectionWeights.from_settings(settings)
    if not hasattr(request.app.state, "strength_bands"):
        request.app.state.strength_bands = StrengthBands.from_settings(settings)

    if seed is None:
        seed = settings.selection_seed

    return SelectionEngine(
        weights=request.app.state.selection_weights,
        bands=request.app.state.strength_bands,
        rng=random.Random(seed),
    )


def _check_event_id(event_id: str, event: EventBody) -> None:
    if event.id != event_id:
        raise HTTPException(
            status_code=400,
            detail=f"Event id mismatch: path {event_id}, body {event.id}",
        )


@router.post("")
def select_players(request: Request, body: SelectionRequest):
    """Assign candidate players to teams.

    Stateless: the caller supplies counters and capacities and persists the
    returned mapping itself.
    """
    engine = _get_engine(request, body.seed)
    players = [p.to_model() for p in body.players]
    assignments = engine.select_players(players, [t.to_model() for t in body.teams])

    return {
        "assignments": assignments,
        "selected_count": len(assignments),
        "unselected": [p.id for p in players if p.id not in assignments],
    }


@router.post("/events/{event_id}")
def auto_select_event(request: Request, event_id: str, body: EventSelectionRequest):
    """Select accepted, unassigned players of an event into its teams."""
    _check_event_id(event_id, body.event)

    service = AutoSelectionService(
        engine=_get_engine(request, body.seed),
        selection_logger=SelectionLogger(enabled=settings.selection_diagnostics),
    )
    try:
        result = service.auto_select(
            body.event.to_model(),
            [p.to_model() for p in body.players],
            [e.to_model() for e in body.history],
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return {
        "event_id": result.event_id,
        "assignments": result.assignments,
        "unselected": result.unselected_player_ids,
        "teams": [asdict(team) for team in result.teams],
        "stats": result.stats.to_dict(),
    }


@router.post("/events/{event_id}/stats")
def event_selection_stats(event_id: str, body: EventStatsRequest):
    """Summarise the current selection of an event."""
    _check_event_id(event_id, body.event)
    stats = get_selection_stats(
        body.event.to_model(),
        [p.to_model() for p in body.players],
    )
    return stats.to_dict()
