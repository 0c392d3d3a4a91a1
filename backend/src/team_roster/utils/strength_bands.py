"""Preferred player levels per team strength tier.

Strength 1 is the most competitive tier. Each tier prefers a band of player
levels (1 = weakest, 5 = strongest). Any strength without its own entry falls
into the lowest band, so strength 3 and everything beyond it behave the same.
"""

from typing import Mapping, Optional

PLAYER_LEVELS = frozenset({1, 2, 3, 4, 5})

DEFAULT_LEVEL_BANDS: dict[int, frozenset[int]] = {
    1: frozenset({4, 5}),
    2: frozenset({2, 3, 4}),
    3: frozenset({1, 2}),
}

# Band for strengths with no explicit entry
FALLBACK_LEVEL_BAND = frozenset({1, 2})


class StrengthBands:
    """Lookup table from team strength to preferred player levels."""

    def __init__(
        self,
        bands: Optional[Mapping[int, frozenset[int] | set[int]]] = None,
        fallback: Optional[frozenset[int] | set[int]] = None,
    ):
        source = DEFAULT_LEVEL_BANDS if bands is None else bands
        self._bands: dict[int, frozenset[int]] = {
            int(strength): frozenset(levels) for strength, levels in source.items()
        }
        self._fallback = frozenset(fallback) if fallback is not None else FALLBACK_LEVEL_BAND

    def preferred_levels(self, strength: int) -> frozenset[int]:
        """Get the preferred levels for a strength tier.

        Args:
            strength: Team strength (1 = strongest tier)

        Returns:
            Frozenset of player levels the tier should be filled with first
        """
        return self._bands.get(strength, self._fallback)

    def is_preferred(self, strength: int, level: int) -> bool:
        return level in self.preferred_levels(strength)

    @classmethod
    def from_config(cls, raw: Mapping[str, list[int]]) -> "StrengthBands":
        """Build bands from a JSON-style mapping such as ``{"1": [4, 5]}``.

        Raises:
            ValueError: If a key is not an integer or a level is outside 1-5
        """
        bands: dict[int, frozenset[int]] = {}
        for key, levels in raw.items():
            try:
                strength = int(key)
            except (TypeError, ValueError):
                raise ValueError(f"Invalid team strength: {key!r}") from None
            invalid = set(levels) - PLAYER_LEVELS
            if invalid:
                raise ValueError(f"Invalid player levels for strength {strength}: {sorted(invalid)}")
            bands[strength] = frozenset(levels)
        return cls(bands)

    @classmethod
    def from_settings(cls, settings=None) -> "StrengthBands":
        """Build bands from the SELECTION_STRENGTH_BANDS setting, or the defaults."""
        if settings is None:
            from team_roster.config import get_settings

            settings = get_settings()
        if not settings.selection_strength_bands:
            return cls()
        return cls.from_config(settings.selection_strength_bands)
