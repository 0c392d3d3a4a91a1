"""Fair player auto-selection across teams of an event."""
import logging
import random
from dataclasses import dataclass
from itertools import groupby
from typing import Iterable, Optional

from team_roster.models.player import CandidatePlayer
from team_roster.models.team import TeamDescriptor
from team_roster.utils.strength_bands import StrengthBands

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SelectionWeights:
    """Scoring constants for the fairness score.

    score = (base_weight - selected_count * penalty_per_selection)
            + min(acceptance_rate, acceptance_threshold) * acceptance_bonus
    """

    base_weight: float = 100.0
    penalty_per_selection: float = 30.0
    acceptance_bonus: float = 0.5
    acceptance_threshold: float = 80.0  # percent; higher rates give no extra bonus

    @classmethod
    def from_settings(cls, settings=None) -> "SelectionWeights":
        """Build weights from application settings."""
        if settings is None:
            from team_roster.config import get_settings

            settings = get_settings()
        return cls(
            base_weight=settings.selection_base_weight,
            penalty_per_selection=settings.selection_penalty_per_selection,
            acceptance_bonus=settings.selection_acceptance_bonus,
            acceptance_threshold=settings.selection_acceptance_threshold,
        )


@dataclass(frozen=True)
class ScoredCandidate:
    """A candidate with its fairness score and per-call tie-breaker."""

    player: CandidatePlayer
    score: float
    tie_breaker: float

    @property
    def sort_key(self) -> tuple[float, float]:
        return (self.score, self.tie_breaker)


class SelectionEngine:
    """Assigns candidate players to teams by fairness score and strength tier.

    Players who were selected less often and accept invitations reliably are
    picked first. Teams are filled tier by tier starting at strength 1; when
    the event mixes strengths, each tier prefers players from its level band
    before falling back to anyone left. Within a tier, players are dealt out
    round-robin so same-strength teams end up evenly sized.

    The engine performs no I/O. The only nondeterminism is the tie-breaker
    drawn from ``rng``; pass a seeded ``random.Random`` for reproducible runs.
    """

    def __init__(
        self,
        weights: Optional[SelectionWeights] = None,
        bands: Optional[StrengthBands] = None,
        rng: Optional[random.Random] = None,
    ):
        self.weights = weights or SelectionWeights()
        self.bands = bands or StrengthBands()
        self.rng = rng or random.Random()

    def score_player(self, player: CandidatePlayer) -> float:
        """Compute the fairness score of a single player.

        An ``invited_count`` of zero is treated as a 0% acceptance rate.
        """
        w = self.weights
        if player.invited_count > 0:
            acceptance_rate = player.accepted_count / player.invited_count * 100
        else:
            acceptance_rate = 0.0
        capped_rate = min(acceptance_rate, w.acceptance_threshold)
        return (w.base_weight - player.selected_count * w.penalty_per_selection) + (
            capped_rate * w.acceptance_bonus
        )

    def score_candidates(self, players: Iterable[CandidatePlayer]) -> list[ScoredCandidate]:
        """Score players and draw one tie-breaker each, in input order.

        Repeated player ids keep only their first occurrence.
        """
        scored: list[ScoredCandidate] = []
        seen: set[str] = set()
        for player in players:
            if player.id in seen:
                logger.debug(f"Ignoring duplicate candidate {player.id}")
                continue
            seen.add(player.id)
            scored.append(
                ScoredCandidate(
                    player=player,
                    score=self.score_player(player),
                    tie_breaker=self.rng.random(),
                )
            )
        return scored

    def rank_candidates(
        self,
        candidates: list[ScoredCandidate],
        strength: Optional[int] = None,
    ) -> list[ScoredCandidate]:
        """Order candidates for a tier, best first.

        Args:
            candidates: Scored candidates still available
            strength: Tier strength for level preference, or None to rank
                purely by score

        Returns:
            Preferred-level candidates by score, then everyone else by score
        """
        if strength is None:
            return sorted(candidates, key=lambda c: c.sort_key, reverse=True)

        preferred = [c for c in candidates if self.bands.is_preferred(strength, c.player.level)]
        others = [c for c in candidates if not self.bands.is_preferred(strength, c.player.level)]
        return (
            sorted(preferred, key=lambda c: c.sort_key, reverse=True)
            + sorted(others, key=lambda c: c.sort_key, reverse=True)
        )

    def select_players(
        self,
        players: list[CandidatePlayer],
        teams: list[TeamDescriptor],
    ) -> dict[str, str]:
        """Assign players to teams.

        Args:
            players: Candidates, all assumed to be invited and accepted
            teams: Target teams with strength and capacity

        Returns:
            Mapping of player id to team id. Players left out were not selected.
        """
        return self.assign(self.score_candidates(players), teams)

    def assign(
        self,
        scored: list[ScoredCandidate],
        teams: list[TeamDescriptor],
    ) -> dict[str, str]:
        """Fill teams tier by tier from already scored candidates."""
        pool = list(scored)
        assignments: dict[str, str] = {}
        if not teams or not pool:
            return assignments

        ordered_teams = sorted(teams, key=lambda t: t.strength)
        tiers = [
            (strength, list(group))
            for strength, group in groupby(ordered_teams, key=lambda t: t.strength)
        ]
        use_level_bands = len(tiers) > 1
        remaining_slots = sum(team.max_players for team in teams)

        for strength, tier_teams in tiers:
            if remaining_slots <= 0 or not pool:
                break

            tier_capacity = sum(team.max_players for team in tier_teams)
            ranked = self.rank_candidates(pool, strength if use_level_bands else None)
            take = max(min(tier_capacity, remaining_slots, len(ranked)), 0)
            chosen = ranked[:take]

            chosen_ids = {c.player.id for c in chosen}
            pool = [c for c in pool if c.player.id not in chosen_ids]
            remaining_slots -= take

            placed = self._distribute(chosen, tier_teams, assignments)
            logger.debug(
                f"Tier strength={strength}: capacity={tier_capacity}, "
                f"chosen={len(chosen)}, placed={placed}"
            )

        logger.info(
            f"Selected {len(assignments)} of {len(scored)} players "
            f"across {len(teams)} teams"
        )
        return assignments

    def _distribute(
        self,
        chosen: list[ScoredCandidate],
        tier_teams: list[TeamDescriptor],
        assignments: dict[str, str],
    ) -> int:
        """Deal chosen players round-robin over a tier's teams, skipping full ones."""
        counts = [0] * len(tier_teams)
        team_idx = 0
        placed = 0

        for candidate in chosen:
            assigned = False
            for _ in range(len(tier_teams)):
                team = tier_teams[team_idx]
                current = team_idx
                team_idx = (team_idx + 1) % len(tier_teams)
                if counts[current] < team.max_players:
                    counts[current] += 1
                    assignments[candidate.player.id] = team.id
                    placed += 1
                    assigned = True
                    break
            if not assigned:
                # Every team in the tier is full
                break

        return placed


def select_players(
    players: list[CandidatePlayer],
    teams: list[TeamDescriptor],
    rng: Optional[random.Random] = None,
) -> dict[str, str]:
    """Assign players to teams with the default weights and level bands."""
    return SelectionEngine(rng=rng).select_players(players, teams)
