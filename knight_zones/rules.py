"""Knight move generation.

Destinations are produced in the fixed offset order below; search ties are
broken by this order, so it must not change.
"""

from __future__ import annotations

from typing import List, Tuple

from .board import Board, Coord
from .models import BOARD_SIZE

KNIGHT_OFFSETS: Tuple[Coord, ...] = (
    (-2, -1), (-2, 1),
    (-1, -2), (-1, 2),
    (1, -2), (1, 2),
    (2, -1), (2, 1),
)


def is_on_board(coord: Coord) -> bool:
    return 0 <= coord[0] < BOARD_SIZE and 0 <= coord[1] < BOARD_SIZE


def legal_moves(position: Coord, board: Board, opponent_position: Coord) -> List[Coord]:
    """Return the legal knight destinations from ``position``.

    A destination is legal when it lies on the board, is not the opponent's
    square, and is either neutral or an unowned zone cell. An empty list is
    a normal result for a boxed-in piece.
    """
    row, col = position
    moves = []
    for dr, dc in KNIGHT_OFFSETS:
        r, c = row + dr, col + dc
        if not is_on_board((r, c)):
            continue
        if (r, c) == opponent_position:
            continue
        cell = board.cells[r][c]
        if cell is None or cell.owner is None:
            moves.append((r, c))
    return moves


def is_legal_move(
    position: Coord, destination: Coord, board: Board, opponent_position: Coord
) -> bool:
    return tuple(destination) in legal_moves(position, board, opponent_position)
