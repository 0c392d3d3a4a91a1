"""REST endpoints for player participation statistics."""

from dataclasses import asdict

from fastapi import APIRouter
from pydantic import BaseModel

from team_roster.api.schemas import EventBody, PlayerBody
from team_roster.services.player_stats import (
    get_all_player_stats,
    get_player_event_history,
)

router = APIRouter(prefix="/api/statistics", tags=["statistics"])


class PlayerStatisticsRequest(BaseModel):
    players: list[PlayerBody]
    events: list[EventBody]


class PlayerHistoryRequest(BaseModel):
    events: list[EventBody]


@router.post("/players")
def player_statistics(body: PlayerStatisticsRequest):
    """Invitation, acceptance and selection counters for every player."""
    players = [p.to_model() for p in body.players]
    events = [e.to_model() for e in body.events]
    by_id = {player.id: player for player in players}

    rows = []
    for stats in get_all_player_stats(players, events):
        player = by_id[stats.player_id]
        rows.append({
            "first_name": player.first_name,
            "last_name": player.last_name,
            "level": player.level,
            **stats.to_dict(),
        })

    return {"players": rows}


@router.post("/players/{player_id}/history")
def player_history(player_id: str, body: PlayerHistoryRequest):
    """Events the player was invited to, oldest first."""
    history = get_player_event_history(player_id, [e.to_model() for e in body.events])
    return {
        "player_id": player_id,
        "history": [asdict(item) for item in history],
    }
