"""
Lightweight search-node representation.

:class:`GameNode` is the Pydantic-free snapshot the engine passes around:
board, both piece positions and the side to move. Nodes are values; every
transition builds a new node and leaves its parent untouched.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from .board import Board, Coord, initial_board
from .models import Player
from .rules import legal_moves


@dataclass(frozen=True, slots=True)
class GameNode:
    board: Board
    green: Coord
    red: Coord
    turn: Player = Player.GREEN

    def position_of(self, player: Player) -> Coord:
        return self.green if player is Player.GREEN else self.red

    def moves_for(self, player: Player) -> List[Coord]:
        """Legal destinations for ``player`` against the other piece."""
        return legal_moves(
            self.position_of(player),
            self.board,
            self.position_of(player.opponent),
        )

    def play(self, move: Coord, player: Optional[Player] = None) -> "GameNode":
        """Return the child node after ``player`` moves to ``move``.

        ``player`` defaults to the side to move. The destination is painted
        when it is an unowned zone cell and the turn passes to the other
        colour. Legality is not checked here.
        """
        mover = player if player is not None else self.turn
        board = self.board.paint(move, mover)
        if mover is Player.GREEN:
            return GameNode(board, tuple(move), self.red, Player.RED)
        return GameNode(board, self.green, tuple(move), Player.GREEN)

    def passed(self) -> "GameNode":
        """Return the node with the turn handed over and nothing else changed."""
        return GameNode(self.board, self.green, self.red, self.turn.opponent)

    def render(self) -> str:
        lines = []
        for r, row in enumerate(str(self.board).splitlines()):
            symbols = row.split(" ")
            if self.green[0] == r:
                symbols[self.green[1]] = "g"
            if self.red[0] == r:
                symbols[self.red[1]] = "r"
            lines.append(f"{r} " + " ".join(symbols))
        lines.append("  " + " ".join(str(c) for c in range(len(self.board.cells))))
        return "\n".join(lines)


def initial_node(green: Coord, red: Coord, turn: Player = Player.GREEN) -> GameNode:
    return GameNode(initial_board(), tuple(green), tuple(red), turn)
