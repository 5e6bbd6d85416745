"""Shared node builders and a reference search for Knight Zones tests."""

import random
from typing import Dict, Optional, Tuple

from knight_zones.ai.evaluation import evaluate
from knight_zones.board import initial_board
from knight_zones.game_engine import GameEngine
from knight_zones.game_state import GameNode
from knight_zones.models import Player

Coord = Tuple[int, int]


def make_node(
    green: Coord,
    red: Coord,
    turn: Player = Player.GREEN,
    painted: Optional[Dict[Coord, Player]] = None,
) -> GameNode:
    """Build a node from the initial board with ``painted`` cells applied."""
    board = initial_board()
    for coord, player in (painted or {}).items():
        board = board.paint(coord, player)
    return GameNode(board, green, red, turn)


def random_playout(rng: random.Random, plies: int) -> GameNode:
    """Play ``plies`` uniformly random plies (passing when stuck) from a new game."""
    node = GameEngine.new_game(rng)
    for _ in range(plies):
        if GameEngine.is_game_over(node):
            break
        moves = node.moves_for(node.turn)
        if moves:
            node = GameEngine.apply_move(node, rng.choice(moves))
        else:
            node = GameEngine.apply_pass(node)
    return node


def full_width_minimax(node: GameNode, depth: int, maximizing: bool) -> float:
    """Unpruned reference search used for differential testing."""
    mover = Player.GREEN if maximizing else Player.RED
    moves = node.moves_for(mover)
    if depth == 0 or not moves:
        return evaluate(node)
    scores = [
        full_width_minimax(node.play(move, mover), depth - 1, not maximizing)
        for move in moves
    ]
    return max(scores) if maximizing else min(scores)


def count_full_width_nodes(node: GameNode, depth: int, maximizing: bool) -> int:
    mover = Player.GREEN if maximizing else Player.RED
    moves = node.moves_for(mover)
    if depth == 0 or not moves:
        return 1
    return 1 + sum(
        count_full_width_nodes(node.play(move, mover), depth - 1, not maximizing)
        for move in moves
    )
