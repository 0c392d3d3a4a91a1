"""Tests for strength tier level bands."""
import pytest

from team_roster.config import Settings
from team_roster.utils.strength_bands import FALLBACK_LEVEL_BAND, StrengthBands


def test_default_bands():
    bands = StrengthBands()
    assert bands.preferred_levels(1) == {4, 5}
    assert bands.preferred_levels(2) == {2, 3, 4}
    assert bands.preferred_levels(3) == {1, 2}


@pytest.mark.parametrize("strength", [0, 4, 7, -1])
def test_unknown_strength_uses_fallback(strength):
    """Strengths without an entry collapse into the lowest band."""
    assert StrengthBands().preferred_levels(strength) == FALLBACK_LEVEL_BAND


def test_is_preferred():
    bands = StrengthBands()
    assert bands.is_preferred(1, 5)
    assert not bands.is_preferred(1, 3)
    assert bands.is_preferred(2, 4)


def test_custom_fallback():
    bands = StrengthBands({1: {5}}, fallback={3})
    assert bands.preferred_levels(1) == {5}
    assert bands.preferred_levels(2) == {3}


def test_from_config_parses_string_keys():
    bands = StrengthBands.from_config({"1": [5], "2": [3, 4]})
    assert bands.preferred_levels(1) == {5}
    assert bands.preferred_levels(2) == {3, 4}
    assert bands.preferred_levels(3) == FALLBACK_LEVEL_BAND


def test_from_config_rejects_bad_strength():
    with pytest.raises(ValueError, match="Invalid team strength"):
        StrengthBands.from_config({"top": [5]})


def test_from_config_rejects_bad_levels():
    with pytest.raises(ValueError, match="Invalid player levels"):
        StrengthBands.from_config({"1": [4, 6]})


def test_from_settings_defaults_without_table():
    bands = StrengthBands.from_settings(Settings(selection_strength_bands=None))
    assert bands.preferred_levels(1) == {4, 5}
    assert bands.preferred_levels(3) == FALLBACK_LEVEL_BAND


def test_from_settings_uses_configured_table():
    bands = StrengthBands.from_settings(Settings(selection_strength_bands={"1": [5], "2": [1, 2]}))
    assert bands.preferred_levels(1) == {5}
    assert bands.preferred_levels(2) == {1, 2}
    assert not bands.is_preferred(1, 4)


def test_from_settings_reads_json_env(monkeypatch):
    monkeypatch.setenv("SELECTION_STRENGTH_BANDS", '{"1": [3]}')
    bands = StrengthBands.from_settings(Settings())
    assert bands.preferred_levels(1) == {3}


def test_from_settings_rejects_invalid_levels():
    with pytest.raises(ValueError, match="Invalid player levels"):
        StrengthBands.from_settings(Settings(selection_strength_bands={"1": [0]}))
