"""Player participation statistics computed from event history."""
from typing import Iterable

from team_roster.models.event import Event, InvitationStatus
from team_roster.models.player import CandidatePlayer, Player
from team_roster.models.statistics import PlayerEventHistoryItem, PlayerStats


def get_player_stats(player_id: str, events: Iterable[Event]) -> PlayerStats:
    """Count invitations, acceptances and selections of a player.

    Each event counts at most once per counter:
    - invited: the player has an invitation in any status
    - accepted: any of its invitations for the player is accepted
    - selected: any team of the event lists the player

    Args:
        player_id: Player to count for
        events: Events to scan

    Returns:
        PlayerStats with raw counters (rates are derived properties)
    """
    stats = PlayerStats(player_id=player_id)

    for event in events:
        invitation = event.get_invitation(player_id)
        if invitation is not None:
            stats.invited_count += 1
            if event.has_accepted(player_id):
                stats.accepted_count += 1

        if event.team_for_player(player_id) is not None:
            stats.selected_count += 1

    return stats


def get_all_player_stats(players: list[Player], events: list[Event]) -> list[PlayerStats]:
    """Stats for every player, ordered by last name then first name."""
    ordered = sorted(players, key=lambda p: (p.last_name.lower(), p.first_name.lower()))
    return [get_player_stats(player.id, events) for player in ordered]


def get_player_event_history(player_id: str, events: Iterable[Event]) -> list[PlayerEventHistoryItem]:
    """Events the player was invited to, oldest first."""
    history: list[PlayerEventHistoryItem] = []

    for event in events:
        invitation = event.get_invitation(player_id)
        if invitation is None:
            continue
        team = event.team_for_player(player_id)
        history.append(
            PlayerEventHistoryItem(
                event_id=event.id,
                event_name=event.name,
                event_date=event.date,
                invitation_status=(
                    InvitationStatus.ACCEPTED if event.has_accepted(player_id) else invitation.status
                ),
                is_selected=team is not None,
                team_name=team.name if team else None,
            )
        )

    # ISO dates sort lexicographically
    history.sort(key=lambda item: item.event_date)
    return history


def build_candidate(player: Player, events: Iterable[Event]) -> CandidatePlayer:
    """Annotate a player with history counters for the selection engine."""
    stats = get_player_stats(player.id, events)
    return CandidatePlayer(
        id=player.id,
        level=player.level,
        selected_count=stats.selected_count,
        invited_count=stats.invited_count,
        accepted_count=stats.accepted_count,
    )
