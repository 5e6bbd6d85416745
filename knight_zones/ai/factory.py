"""Unified AI Factory for Knight Zones.

All AI creation should go through this factory so the service, the
self-play script and tests configure players the same way.

Usage:
    from knight_zones.ai.factory import AIFactory

    # Create AI from a difficulty tier (always minimax)
    ai = AIFactory.create_from_difficulty("hard", Player.GREEN)

    # Create AI with explicit type and config
    ai = AIFactory.create(AIType.RANDOM, Player.RED, AIConfig(rng_seed=7))
"""

from __future__ import annotations

import logging
import random
from typing import Optional, Union

from ..config.difficulty import parse_difficulty
from ..errors import ConfigurationError
from ..models import AIConfig, AIType, Difficulty, Player
from .base import BaseAI
from .heuristic_ai import HeuristicAI
from .minimax_ai import MinimaxAI
from .random_ai import RandomAI

logger = logging.getLogger(__name__)


class AIFactory:
    """Centralized factory for creating AI instances."""

    _registry: dict[AIType, type[BaseAI]] = {
        AIType.RANDOM: RandomAI,
        AIType.HEURISTIC: HeuristicAI,
        AIType.MINIMAX: MinimaxAI,
    }

    @classmethod
    def create(
        cls,
        ai_type: Union[AIType, str],
        player: Player,
        config: Optional[AIConfig] = None,
        rng: Optional[random.Random] = None,
    ) -> BaseAI:
        """Create an AI of ``ai_type`` for ``player``.

        Raises:
            ConfigurationError: if ``ai_type`` is not a known type.
        """
        try:
            resolved = AIType(ai_type)
        except ValueError:
            raise ConfigurationError(
                f"Unknown AI type: {ai_type!r}",
                context={"allowed": ",".join(t.value for t in AIType)},
            ) from None

        ai_class = cls._registry[resolved]
        config = config or AIConfig()
        logger.debug(
            f"Creating {ai_class.__name__} for {player.value} "
            f"(difficulty={config.difficulty.value}, seed={config.rng_seed})"
        )
        return ai_class(player, config, rng=rng)

    @classmethod
    def create_from_difficulty(
        cls,
        difficulty: Union[Difficulty, str],
        player: Player = Player.GREEN,
        rng_seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
    ) -> MinimaxAI:
        """Create the minimax player for a difficulty tier."""
        config = AIConfig(difficulty=parse_difficulty(difficulty), rng_seed=rng_seed)
        return cls.create(AIType.MINIMAX, player, config, rng=rng)  # type: ignore[return-value]
