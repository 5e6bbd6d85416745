"""
Pydantic Models for Knight Zones
Wire-level shapes exchanged with the presentation layer.

The search engine itself never touches these models; it works on the
lightweight :class:`~knight_zones.game_state.GameNode` value. Conversion
happens at the service boundary via :meth:`GameState.to_node` and
:meth:`GameState.from_node`.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, List, Optional, Tuple

from pydantic import BaseModel, Field

from .errors import InvalidStateError

if TYPE_CHECKING:
    from .game_state import GameNode


BOARD_SIZE = 8


class Player(str, Enum):
    """Piece colour enumeration"""
    GREEN = "green"
    RED = "red"

    @property
    def opponent(self) -> "Player":
        return Player.RED if self is Player.GREEN else Player.GREEN


class Difficulty(str, Enum):
    """Difficulty tier token selected once per session"""
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


class AIType(str, Enum):
    """AI type enumeration"""
    RANDOM = "random"
    HEURISTIC = "heuristic"
    MINIMAX = "minimax"


class Position(BaseModel):
    """Board position as (row, col)"""
    row: int = Field(ge=0, lt=BOARD_SIZE)
    col: int = Field(ge=0, lt=BOARD_SIZE)

    class Config:
        frozen = True

    def to_tuple(self) -> Tuple[int, int]:
        return (self.row, self.col)

    @classmethod
    def from_tuple(cls, coord: Tuple[int, int]) -> "Position":
        return cls(row=coord[0], col=coord[1])


class CellState(BaseModel):
    """Zone cell; neutral cells are sent as ``null``"""
    zone: int = Field(ge=0, le=3)
    owner: Optional[Player] = None


class GameState(BaseModel):
    """Complete, caller-owned game snapshot"""
    board: List[List[Optional[CellState]]]
    green_pos: Position = Field(alias="greenPos")
    red_pos: Position = Field(alias="redPos")
    turn: Player = Player.GREEN

    class Config:
        populate_by_name = True

    def to_node(self) -> "GameNode":
        """Convert to a search node, checking the board invariants.

        Raises:
            InvalidStateError: if the grid has the wrong shape, a zone cell is
                missing or misplaced, or both pieces share a square.
        """
        from .board import Board, Cell, ZONE_OF

        if len(self.board) != BOARD_SIZE or any(
            len(row) != BOARD_SIZE for row in self.board
        ):
            raise InvalidStateError(
                "Board must be an 8x8 grid",
                context={"rows": len(self.board)},
            )

        rows = []
        for r, row in enumerate(self.board):
            cells = []
            for c, cell in enumerate(row):
                expected_zone = ZONE_OF.get((r, c))
                actual_zone = cell.zone if cell is not None else None
                if expected_zone != actual_zone:
                    raise InvalidStateError(
                        "Zone layout does not match the fixed membership table",
                        context={
                            "cell": f"{r},{c}",
                            "expected": expected_zone,
                            "actual": actual_zone,
                        },
                    )
                cells.append(
                    None if cell is None else Cell(zone=cell.zone, owner=cell.owner)
                )
            rows.append(tuple(cells))

        green = self.green_pos.to_tuple()
        red = self.red_pos.to_tuple()
        if green == red:
            raise InvalidStateError(
                "Green and red pieces cannot share a square",
                context={"position": f"{green[0]},{green[1]}"},
            )

        from .game_state import GameNode

        return GameNode(
            board=Board(tuple(rows)),
            green=green,
            red=red,
            turn=self.turn,
        )

    @classmethod
    def from_node(cls, node: "GameNode") -> "GameState":
        board = [
            [
                None if cell is None else CellState(zone=cell.zone, owner=cell.owner)
                for cell in row
            ]
            for row in node.board.cells
        ]
        return cls(
            board=board,
            greenPos=Position.from_tuple(node.green),
            redPos=Position.from_tuple(node.red),
            turn=node.turn,
        )


class AIConfig(BaseModel):
    """AI configuration"""
    difficulty: Difficulty = Difficulty.MEDIUM
    rng_seed: Optional[int] = Field(None, alias="rngSeed", ge=0)

    class Config:
        populate_by_name = True


class GameStatusSummary(BaseModel):
    """Score and termination summary derived from a game state"""
    green_zones_won: int = Field(alias="greenZonesWon")
    red_zones_won: int = Field(alias="redZonesWon")
    painted_cells: int = Field(alias="paintedCells")
    game_over: bool = Field(alias="gameOver")
    winner: Optional[Player] = None

    class Config:
        populate_by_name = True
