"""Tests for player participation statistics."""
import pytest

from team_roster.models.event import Event, Invitation, InvitationStatus
from team_roster.models.player import Player
from team_roster.models.team import Team
from team_roster.services.player_stats import (
    build_candidate,
    get_all_player_stats,
    get_player_event_history,
    get_player_stats,
)


def _event(event_id, date, invitations, teams):
    return Event(
        id=event_id,
        name=f"Event {event_id}",
        date=date,
        max_players_per_team=4,
        invitations=[
            Invitation(id=f"{event_id}-{pid}", player_id=pid, status=status)
            for pid, status in invitations
        ],
        teams=teams,
    )


@pytest.fixture
def events():
    return [
        _event(
            "e1",
            "2025-03-01",
            [("p1", InvitationStatus.ACCEPTED), ("p2", InvitationStatus.DECLINED)],
            [Team(id="e1-t1", name="Blue", selected_players=["p1"])],
        ),
        _event(
            "e2",
            "2025-04-12",
            [("p1", InvitationStatus.ACCEPTED), ("p2", InvitationStatus.ACCEPTED)],
            [
                Team(id="e2-t1", name="Blue", selected_players=["p2"]),
                Team(id="e2-t2", name="Red", selected_players=[]),
            ],
        ),
        _event(
            "e3",
            "2025-02-01",
            [("p1", InvitationStatus.OPEN)],
            [Team(id="e3-t1", name="Blue")],
        ),
    ]


def test_get_player_stats_counts(events):
    stats = get_player_stats("p1", events)

    assert stats.invited_count == 3
    assert stats.accepted_count == 2
    assert stats.selected_count == 1
    assert stats.acceptance_rate == pytest.approx(200 / 3)
    assert stats.selection_rate == pytest.approx(50.0)


def test_get_player_stats_unknown_player(events):
    stats = get_player_stats("nobody", events)

    assert (stats.invited_count, stats.accepted_count, stats.selected_count) == (0, 0, 0)
    assert stats.acceptance_rate == 0.0
    assert stats.selection_rate == 0.0


def test_selection_counted_without_invitation():
    """Being placed on a team counts even if the invitation was removed."""
    events = [_event("e1", "2025-01-01", [], [Team(id="t", name="T", selected_players=["p9"])])]
    stats = get_player_stats("p9", events)
    assert stats.selected_count == 1
    assert stats.invited_count == 0


def test_to_dict_rounds_rates(events):
    data = get_player_stats("p1", events).to_dict()
    assert data["acceptance_rate"] == 66.7
    assert data["selection_rate"] == 50.0
    assert data["player_id"] == "p1"


def test_get_all_player_stats_sorted_by_name(events):
    players = [
        Player(id="p1", first_name="Zoe", last_name="Meyer", birth_year=2012, level=3),
        Player(id="p2", first_name="Anna", last_name="Becker", birth_year=2011, level=4),
        Player(id="p3", first_name="Ben", last_name="Meyer", birth_year=2012, level=2),
    ]

    stats = get_all_player_stats(players, events)

    assert [s.player_id for s in stats] == ["p2", "p3", "p1"]


def test_get_player_event_history(events):
    history = get_player_event_history("p1", events)

    assert [item.event_id for item in history] == ["e3", "e1", "e2"]
    assert history[0].invitation_status == InvitationStatus.OPEN
    assert history[1].is_selected is True
    assert history[1].team_name == "Blue"
    assert history[2].is_selected is False
    assert history[2].team_name is None


def test_history_is_chronological_regardless_of_input_order():
    events = [
        _event("new", "2025-06-01", [("p", InvitationStatus.ACCEPTED)], []),
        _event("old", "2024-01-01", [("p", InvitationStatus.ACCEPTED)], []),
        _event("mid", "2024-09-01", [("p", InvitationStatus.ACCEPTED)], []),
    ]

    history = get_player_event_history("p", events)

    assert [item.event_id for item in history] == ["old", "mid", "new"]


def test_any_accepted_invitation_counts_as_accepted():
    """A re-sent invitation that was accepted wins over an earlier decline."""
    events = [
        _event(
            "e1",
            "2025-01-01",
            [("p1", InvitationStatus.DECLINED), ("p1", InvitationStatus.ACCEPTED)],
            [],
        )
    ]

    stats = get_player_stats("p1", events)
    history = get_player_event_history("p1", events)

    assert (stats.invited_count, stats.accepted_count) == (1, 1)
    assert history[0].invitation_status == InvitationStatus.ACCEPTED
    assert events[0].accepted_player_ids == ["p1"]


def test_build_candidate(events):
    player = Player(id="p2", first_name="Anna", last_name="Becker", birth_year=2011, level=4)

    candidate = build_candidate(player, events)

    assert candidate.id == "p2"
    assert candidate.level == 4
    assert candidate.invited_count == 2
    assert candidate.accepted_count == 1
    assert candidate.selected_count == 1
