"""
Base AI Player class for Knight Zones
Abstract base class that all AI implementations inherit from
"""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from ..board import Coord
from ..config.difficulty import DifficultyPolicy, get_difficulty_policy
from ..game_state import GameNode
from ..models import AIConfig, Player


def derive_seed(config: AIConfig, player: Player) -> int:
    """
    Derive a deterministic RNG seed when ``config.rng_seed`` is not given.

    The value mixes the difficulty tier and the colour so that two AIs in
    the same self-play game do not draw identical sequences.
    """
    tier = list(type(config.difficulty)).index(config.difficulty) + 1
    colour = 1 if player is Player.GREEN else 2
    base = (tier * 1_000_003) ^ (colour * 97_911)
    return int(base & 0xFFFFFFFF)


class BaseAI(ABC):
    """Abstract base class for all AI implementations"""

    def __init__(
        self,
        player: Player,
        config: AIConfig,
        rng: Optional[random.Random] = None,
    ):
        """
        Initialize AI player

        Args:
            player: The colour this AI controls
            config: AI configuration settings
            rng: Optional random source; when omitted one is seeded from
                ``config.rng_seed`` (or a derived seed)
        """
        self.player = player
        self.config = config
        self.policy: DifficultyPolicy = get_difficulty_policy(config.difficulty)
        self.move_count = 0

        # Every stochastic decision (random "mistake" moves, baselines) goes
        # through this instance so results are reproducible under a seed.
        if rng is not None:
            self.rng: random.Random = rng
            self.rng_seed: Optional[int] = config.rng_seed
        else:
            if config.rng_seed is not None:
                self.rng_seed = int(config.rng_seed)
            else:
                self.rng_seed = derive_seed(config, player)
            self.rng = random.Random(self.rng_seed)

    @abstractmethod
    def select_move(self, node: GameNode) -> Coord:
        """
        Select a destination for this AI's piece

        Args:
            node: Current game node

        Returns:
            Chosen destination, or the piece's current position when it has
            no legal move (a pass)
        """

    @abstractmethod
    def evaluate_position(self, node: GameNode) -> float:
        """
        Evaluate the position from this AI's perspective

        Args:
            node: Current game node

        Returns:
            Evaluation score (positive = good for this AI, negative = bad)
        """

    def get_evaluation_breakdown(self, node: GameNode) -> Dict[str, float]:
        return {"total": self.evaluate_position(node)}

    def get_valid_moves(self, node: GameNode) -> List[Coord]:
        return node.moves_for(self.player)

    def current_position(self, node: GameNode) -> Coord:
        return node.position_of(self.player)

    def should_pick_random_move(self) -> bool:
        """
        Determine if AI should pick a random move based on the difficulty policy

        Returns:
            True if should pick random move
        """
        if not self.policy.random_chance:
            return False
        return self.rng.random() < self.policy.random_chance

    def get_random_element(self, items: List[Any]) -> Optional[Any]:
        """
        Get random element from list using the per-instance RNG.

        Returns:
            Random item or None if list is empty
        """
        if not items:
            return None
        return self.rng.choice(items)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}"
            f"(player={self.player.value}, "
            f"difficulty={self.config.difficulty.value})"
        )
