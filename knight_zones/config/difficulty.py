"""Canonical difficulty ladder.

Each tier maps to a fixed search depth and a probability of playing a
uniformly random legal move instead of the searched one. The table is the
single source of truth; callers only ever pick a tier.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Union

from ..errors import ConfigurationError
from ..models import Difficulty

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DifficultyPolicy:
    """Search depth (plies) and random-move probability for one tier."""

    depth: int
    random_chance: float


DIFFICULTY_POLICIES: Dict[Difficulty, DifficultyPolicy] = {
    Difficulty.EASY: DifficultyPolicy(depth=2, random_chance=0.6),
    Difficulty.MEDIUM: DifficultyPolicy(depth=4, random_chance=0.3),
    Difficulty.HARD: DifficultyPolicy(depth=6, random_chance=0.0),
}

DIFFICULTY_DESCRIPTIONS: Dict[Difficulty, str] = {
    Difficulty.EASY: "Beginner - 2-ply search, random move 60% of the time",
    Difficulty.MEDIUM: "Amateur - 4-ply search, random move 30% of the time",
    Difficulty.HARD: "Expert - 6-ply search, never random",
}


def parse_difficulty(value: Union[Difficulty, str]) -> Difficulty:
    """Normalise a tier token, accepting enum members or their string values.

    Raises:
        ConfigurationError: for anything outside ``easy``/``medium``/``hard``.
    """
    if isinstance(value, Difficulty):
        return value
    try:
        return Difficulty(str(value).strip().lower())
    except ValueError:
        raise ConfigurationError(
            f"Unknown difficulty: {value!r}",
            context={"allowed": ",".join(d.value for d in Difficulty)},
        ) from None


def get_difficulty_policy(difficulty: Union[Difficulty, str]) -> DifficultyPolicy:
    """Return the policy for ``difficulty``."""
    return DIFFICULTY_POLICIES[parse_difficulty(difficulty)]


def get_difficulty_description(difficulty: Union[Difficulty, str]) -> str:
    return DIFFICULTY_DESCRIPTIONS[parse_difficulty(difficulty)]
