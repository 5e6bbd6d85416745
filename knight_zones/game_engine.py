"""Session-level game engine for Knight Zones.

The search layer applies moves without checking them. This module is the
validating surface for callers that drive a real game (the HTTP service and
the self-play script): it sets up new games, applies checked moves and
passes, and reports termination and the winner.

All methods are static and stateless. The caller owns the
:class:`GameNode` and threads it through each call.
"""

from __future__ import annotations

import logging
import random
from typing import List, Optional

from .board import Coord, ZONE_OF, initial_board, is_complete, painted_count, zone_control
from .errors import InvalidMoveError, RulesViolationError
from .game_state import GameNode
from .models import BOARD_SIZE, GameStatusSummary, Player
from .rules import is_legal_move

logger = logging.getLogger(__name__)

NEUTRAL_CELLS: List[Coord] = [
    (r, c)
    for r in range(BOARD_SIZE)
    for c in range(BOARD_SIZE)
    if (r, c) not in ZONE_OF
]


class GameEngine:
    """Validated game transitions over caller-owned nodes."""

    @staticmethod
    def new_game(rng: Optional[random.Random] = None) -> GameNode:
        """Start a game with both pieces on distinct random neutral cells.

        Green moves first.
        """
        rng = rng or random.Random()
        green, red = rng.sample(NEUTRAL_CELLS, 2)
        logger.debug(f"New game: green={green} red={red}")
        return GameNode(initial_board(), green, red, Player.GREEN)

    @staticmethod
    def get_valid_moves(node: GameNode, player: Optional[Player] = None) -> List[Coord]:
        return node.moves_for(player if player is not None else node.turn)

    @staticmethod
    def apply_move(node: GameNode, move: Coord) -> GameNode:
        """Move the side to move to ``move``, painting it if unclaimed.

        Raises:
            InvalidMoveError: if the game is over or ``move`` is not a legal
                knight destination for the side to move.
        """
        move = tuple(move)
        if GameEngine.is_game_over(node):
            raise InvalidMoveError(
                "Game is already over",
                context={"move": f"{move[0]},{move[1]}"},
            )

        if not is_legal_move(
            node.position_of(node.turn),
            move,
            node.board,
            node.position_of(node.turn.opponent),
        ):
            raise InvalidMoveError(
                f"Illegal move for {node.turn.value}",
                context={
                    "from": "{},{}".format(*node.position_of(node.turn)),
                    "to": f"{move[0]},{move[1]}",
                },
            )
        return node.play(move)

    @staticmethod
    def apply_pass(node: GameNode) -> GameNode:
        """Hand the turn over when the side to move is boxed in.

        Raises:
            RulesViolationError: if the side to move still has a legal move.
        """
        if node.moves_for(node.turn):
            raise RulesViolationError(
                f"{node.turn.value} has legal moves and cannot pass",
                rule_ref="pass-only-when-stuck",
            )
        logger.debug(f"{node.turn.value} passes")
        return node.passed()

    @staticmethod
    def advance(node: GameNode, move: Coord) -> GameNode:
        """Apply an AI decision, treating "stay in place" as a pass."""
        if tuple(move) == node.position_of(node.turn):
            return GameEngine.apply_pass(node)
        return GameEngine.apply_move(node, move)

    @staticmethod
    def is_game_over(node: GameNode) -> bool:
        """Every zone cell painted, or neither side can move."""
        if is_complete(node.board):
            return True
        # Unreachable on the fixed layout: every square has at least two
        # neutral knight destinations and the opponent blocks only one.
        return not node.moves_for(Player.GREEN) and not node.moves_for(Player.RED)

    @staticmethod
    def get_winner(node: GameNode) -> Optional[Player]:
        """Colour holding more zones, or ``None`` for a draw."""
        control = zone_control(node.board)
        if control.green_zones_won > control.red_zones_won:
            return Player.GREEN
        if control.red_zones_won > control.green_zones_won:
            return Player.RED
        return None

    @staticmethod
    def get_status(node: GameNode) -> GameStatusSummary:
        control = zone_control(node.board)
        game_over = GameEngine.is_game_over(node)
        return GameStatusSummary(
            greenZonesWon=control.green_zones_won,
            redZonesWon=control.red_zones_won,
            paintedCells=painted_count(node.board),
            gameOver=game_over,
            winner=GameEngine.get_winner(node) if game_over else None,
        )
