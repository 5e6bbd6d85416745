"""Minimax AI implementation for Knight Zones.

This agent runs depth-limited minimax with alpha-beta pruning over
:class:`GameNode` values. Scores inside the search are always from Green's
point of view: Green is the maximiser, Red the minimiser, regardless of
which colour this AI plays.

Difficulty and depth:
    The difficulty tier on :class:`AIConfig` selects a
    :class:`DifficultyPolicy`:

    - easy   → depth 2, random move 60% of the time
    - medium → depth 4, random move 30% of the time
    - hard   → depth 6, never random

There is no transposition table and no move ordering. Children are visited
in knight-offset order and ties between equally scored root moves keep the
first move found, so hard-tier play is fully reproducible.
"""

from __future__ import annotations

import logging
import random
import time
from collections.abc import Mapping
from dataclasses import dataclass
from typing import List, Optional

from ..board import Coord
from ..errors import AIError
from ..game_state import GameNode
from ..models import AIConfig, Player
from .evaluation import evaluate
from .heuristic_ai import HeuristicAI

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SearchResult:
    """Outcome of one move decision.

    ``score`` is Green-perspective and is ``None`` when the move was drawn
    at random instead of searched.
    """

    move: Coord
    score: Optional[float]
    depth: int
    nodes_visited: int = 0
    random_move: bool = False
    passed: bool = False


class MinimaxAI(HeuristicAI):
    """AI that uses minimax with alpha-beta pruning."""

    def __init__(
        self,
        player: Player,
        config: AIConfig,
        rng: Optional[random.Random] = None,
        weights: Optional[Mapping[str, float]] = None,
    ) -> None:
        super().__init__(player, config, rng=rng, weights=weights)
        self.nodes_visited: int = 0

    def select_move(self, node: GameNode) -> Coord:
        return self.choose_move(node).move

    def choose_move(self, node: GameNode) -> SearchResult:
        """Pick a move under the difficulty policy.

        1. No legal move: return the current position (a pass).
        2. With probability ``random_chance``: a uniformly random legal move.
        3. Otherwise: the best move found by :meth:`search`.
        """
        valid_moves = self.get_valid_moves(node)
        depth = self.policy.depth

        if not valid_moves:
            logger.debug(
                f"MinimaxAI({self.player.value}): no legal moves, passing"
            )
            return SearchResult(
                move=self.current_position(node),
                score=None,
                depth=depth,
                passed=True,
            )

        if self.should_pick_random_move():
            selected = self.get_random_element(valid_moves)
            self.move_count += 1
            logger.debug(
                f"MinimaxAI({self.player.value}): random move {selected}"
            )
            return SearchResult(
                move=selected, score=None, depth=depth, random_move=True
            )

        try:
            result = self.search(node, depth=depth, valid_moves=valid_moves)
        except Exception as e:
            raise AIError(
                f"Search failed: {e}",
                context={"player": self.player.value, "depth": depth},
            ) from e
        self.move_count += 1
        return result

    def search(
        self,
        node: GameNode,
        depth: Optional[int] = None,
        valid_moves: Optional[List[Coord]] = None,
    ) -> SearchResult:
        """Score every root move with a full-window search and keep the best.

        Each root child is searched with ``(-inf, +inf)`` so its score is
        exact; only strictly better scores replace the current best, which
        makes the first-seen move win ties.
        """
        depth = self.policy.depth if depth is None else max(1, depth)
        if valid_moves is None:
            valid_moves = self.get_valid_moves(node)

        self.nodes_visited = 0
        start = time.time()

        if not valid_moves:
            return SearchResult(
                move=self.current_position(node),
                score=evaluate(node, self.weights),
                depth=depth,
                nodes_visited=1,
                passed=True,
            )

        weights = self.weights
        root_maximizing = self.player is Player.GREEN
        best_move = valid_moves[0]
        best_score = float("-inf") if root_maximizing else float("inf")

        for move in valid_moves:
            child = node.play(move, self.player)
            score = self.minimax(
                child,
                depth - 1,
                float("-inf"),
                float("inf"),
                not root_maximizing,
                weights,
            )
            if root_maximizing and score > best_score:
                best_score = score
                best_move = move
            elif not root_maximizing and score < best_score:
                best_score = score
                best_move = move

        logger.debug(
            f"MinimaxAI({self.player.value}): depth={depth} "
            f"best={best_move} score={best_score} "
            f"nodes={self.nodes_visited} "
            f"elapsed={time.time() - start:.3f}s"
        )
        return SearchResult(
            move=best_move,
            score=best_score,
            depth=depth,
            nodes_visited=self.nodes_visited,
        )

    def minimax(
        self,
        node: GameNode,
        depth: int,
        alpha: float,
        beta: float,
        maximizing: bool,
        weights: Optional[Mapping[str, float]] = None,
    ) -> float:
        """
        Alpha-beta minimax. Green moves when ``maximizing`` is True, Red
        otherwise; a mover with no legal move is a leaf.

        ``weights`` is resolved once by the caller and threaded through the
        recursion; it defaults to this AI's profile.
        """
        if weights is None:
            weights = self.weights
        self.nodes_visited += 1

        mover = Player.GREEN if maximizing else Player.RED
        moves = node.moves_for(mover)

        if depth == 0 or not moves:
            return evaluate(node, weights)

        if maximizing:
            value = float("-inf")
            for move in moves:
                score = self.minimax(
                    node.play(move, mover), depth - 1, alpha, beta, False, weights
                )
                value = max(value, score)
                alpha = max(alpha, score)
                if beta <= alpha:
                    break
            return value

        value = float("inf")
        for move in moves:
            score = self.minimax(
                node.play(move, mover), depth - 1, alpha, beta, True, weights
            )
            value = min(value, score)
            beta = min(beta, score)
            if beta <= alpha:
                break
        return value
