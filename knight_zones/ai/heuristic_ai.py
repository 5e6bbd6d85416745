"""
Heuristic AI implementation for Knight Zones.

This agent scores each legal move by the static evaluation of the position
it leads to and plays the best one (one ply, no lookahead). It also owns the
weight profile and perspective handling that :class:`MinimaxAI` builds on.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Mapping
from typing import Dict, Optional

from ..board import Coord
from ..game_state import GameNode
from ..models import AIConfig, Player
from .base import BaseAI
from .evaluation import evaluate, evaluate_breakdown
from .heuristic_weights import HEURISTIC_WEIGHT_KEYS, merge_weights

logger = logging.getLogger(__name__)


class HeuristicAI(BaseAI):
    """AI that greedily maximises the static evaluation."""

    WEIGHT_ZONE_BALANCE = 10.0
    WEIGHT_MOBILITY = 2.0

    def __init__(
        self,
        player: Player,
        config: AIConfig,
        rng: Optional[random.Random] = None,
        weights: Optional[Mapping[str, float]] = None,
    ) -> None:
        super().__init__(player, config, rng=rng)
        for name, value in merge_weights(weights).items():
            setattr(self, name, value)

    @property
    def weights(self) -> Dict[str, float]:
        return {name: getattr(self, name) for name in HEURISTIC_WEIGHT_KEYS}

    @property
    def perspective(self) -> int:
        """+1 when this AI plays Green, -1 when it plays Red."""
        return 1 if self.player is Player.GREEN else -1

    def evaluate_position(self, node: GameNode) -> float:
        return self.perspective * evaluate(node, self.weights)

    def get_evaluation_breakdown(self, node: GameNode) -> Dict[str, float]:
        breakdown = evaluate_breakdown(node, self.weights)
        return {name: self.perspective * value for name, value in breakdown.items()}

    def select_move(self, node: GameNode) -> Coord:
        valid_moves = self.get_valid_moves(node)
        if not valid_moves:
            return self.current_position(node)

        if self.should_pick_random_move():
            selected = self.get_random_element(valid_moves)
        else:
            selected = valid_moves[0]
            best_score = float("-inf")
            for move in valid_moves:
                score = self.evaluate_position(node.play(move, self.player))
                if score > best_score:
                    best_score = score
                    selected = move

        self.move_count += 1
        return selected
