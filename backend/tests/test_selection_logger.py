"""Tests for selection diagnostics logging."""
import json
import random

import pytest

from team_roster.models.player import CandidatePlayer
from team_roster.models.team import TeamDescriptor
from team_roster.services.selection_engine import SelectionEngine
from team_roster.services.selection_logger import SelectionLogger


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    monkeypatch.delenv("SELECTION_DIAGNOSTICS", raising=False)


@pytest.fixture
def scored():
    engine = SelectionEngine(rng=random.Random(5))
    return engine.score_candidates([
        CandidatePlayer(id="p1", level=3, selected_count=0, invited_count=4, accepted_count=4),
        CandidatePlayer(id="p2", level=2, selected_count=2, invited_count=4, accepted_count=1),
    ])


def test_disabled_logger_saves_nothing(tmp_path, scored):
    logger = SelectionLogger(output_dir=tmp_path / "out", enabled=False)
    logger.start_run("run-1", [])
    logger.log_scores(scored)

    assert logger.entries == []
    assert logger.save() is None
    assert not (tmp_path / "out").exists()


def test_env_var_enables_logger(tmp_path, monkeypatch):
    monkeypatch.setenv("SELECTION_DIAGNOSTICS", "true")
    assert SelectionLogger(output_dir=tmp_path, enabled=False).enabled is True


def test_env_var_disables_logger(tmp_path, monkeypatch):
    monkeypatch.setenv("SELECTION_DIAGNOSTICS", "false")
    assert SelectionLogger(output_dir=tmp_path, enabled=True).enabled is False


def test_save_writes_summary(tmp_path, scored):
    logger = SelectionLogger(output_dir=tmp_path, enabled=True)
    logger.start_run("run-1", [TeamDescriptor(id="t1", strength=2, max_players=1)])
    logger.log_scores(scored)
    logger.log_assignments({"p1": "t1"})

    path = logger.save()

    data = json.loads(path.read_text())
    assert data["metadata"]["run_id"] == "run-1"
    assert data["metadata"]["teams"] == [{"id": "t1", "strength": 2, "max_players": 1}]
    assert data["summary"] == {
        "candidate_count": 2,
        "selected_count": 1,
        "unselected": ["p2"],
        "per_team": {"t1": 1},
    }
    # Candidates are listed best first
    candidates = data["entries"][0]["candidates"]
    assert [c["player_id"] for c in candidates] == ["p1", "p2"]
    assert candidates[0]["score"] == 140.0


def test_start_run_discards_previous_entries(tmp_path, scored):
    logger = SelectionLogger(output_dir=tmp_path, enabled=True)
    logger.start_run("run-1", [])
    logger.log_scores(scored)
    logger.start_run("run-2", [])

    assert logger.entries == []
    assert logger.save() is None
