"""AI implementations for Knight Zones.

Use the factory for gameplay:

    from knight_zones.ai import AIFactory

    ai = AIFactory.create_from_difficulty("medium", Player.GREEN, rng_seed=1)
    move = ai.select_move(node)

Architecture:
- base.py: BaseAI abstract base class (per-instance RNG, random-move policy)
- evaluation.py: static Green-perspective evaluator
- heuristic_ai.py: one-ply greedy player, weight profile handling
- minimax_ai.py: alpha-beta search and difficulty-aware move selection
- random_ai.py: uniform random baseline
- factory.py: AIFactory
"""

from knight_zones.ai.base import BaseAI
from knight_zones.ai.evaluation import evaluate, evaluate_breakdown
from knight_zones.ai.factory import AIFactory
from knight_zones.ai.heuristic_ai import HeuristicAI
from knight_zones.ai.minimax_ai import MinimaxAI, SearchResult
from knight_zones.ai.random_ai import RandomAI

__all__ = [
    "AIFactory",
    "BaseAI",
    "HeuristicAI",
    "MinimaxAI",
    "RandomAI",
    "SearchResult",
    "evaluate",
    "evaluate_breakdown",
]
