"""
Static position evaluation.

Scores are always from Green's point of view (higher favours Green). The
functions here are pure: identical nodes give identical scores, which the
alpha-beta search relies on.
"""

from __future__ import annotations

from collections.abc import Mapping

from ..board import zone_counts
from ..game_state import GameNode
from ..models import Player
from .heuristic_weights import BASE_WEIGHTS


def zone_balance(node: GameNode) -> int:
    """Sum over zones of green cells minus red cells."""
    return sum(green - red for green, red in zone_counts(node.board))


def mobility(node: GameNode) -> int:
    """Green's legal move count minus Red's."""
    return len(node.moves_for(Player.GREEN)) - len(node.moves_for(Player.RED))


def evaluate(node: GameNode, weights: Mapping[str, float] | None = None) -> float:
    w = weights if weights is not None else BASE_WEIGHTS
    return (
        w["WEIGHT_ZONE_BALANCE"] * zone_balance(node)
        + w["WEIGHT_MOBILITY"] * mobility(node)
    )


def evaluate_breakdown(
    node: GameNode, weights: Mapping[str, float] | None = None
) -> dict[str, float]:
    """Weighted terms of :func:`evaluate` plus their ``total``."""
    w = weights if weights is not None else BASE_WEIGHTS
    zone_term = w["WEIGHT_ZONE_BALANCE"] * zone_balance(node)
    mobility_term = w["WEIGHT_MOBILITY"] * mobility(node)
    return {
        "total": zone_term + mobility_term,
        "zone_balance": zone_term,
        "mobility": mobility_term,
    }
