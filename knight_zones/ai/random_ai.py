"""Random AI implementation for Knight Zones.

This agent selects uniformly random legal moves using the per-instance RNG on
the :class:`BaseAI`. It is intended for baselines and self-play opponents,
not competitive play.
"""

from __future__ import annotations

from ..board import Coord
from ..game_state import GameNode
from .base import BaseAI


class RandomAI(BaseAI):
    """AI that selects random valid moves."""

    def select_move(self, node: GameNode) -> Coord:
        """Select a random legal destination, or pass when there is none."""
        valid_moves = self.get_valid_moves(node)

        if not valid_moves:
            return self.current_position(node)

        selected = self.get_random_element(valid_moves)

        self.move_count += 1
        return selected

    def evaluate_position(self, node: GameNode) -> float:
        """Return a small random evaluation for ``node``.

        RandomAI does not evaluate positions meaningfully; the value only adds
        variance for diagnostic tooling that inspects scalar evaluations.
        """
        _ = node  # unused in this implementation
        return self.rng.uniform(-0.1, 0.1)
