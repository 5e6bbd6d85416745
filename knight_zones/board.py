"""Board model for Knight Zones.

The board is an immutable value: an 8x8 grid whose cells are either
``None`` (neutral, never paintable) or a :class:`Cell` belonging to one of
the four fixed corner zones. Painting returns a new :class:`Board`; rows
that did not change are shared between the old and new value.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, NamedTuple, Optional, Tuple

from .models import BOARD_SIZE, Player

Coord = Tuple[int, int]

ZONE_CELLS_PER_ZONE = 5

# Ordered membership table; index is the zone id.
ZONES: Tuple[Tuple[Coord, ...], ...] = (
    ((0, 0), (0, 1), (0, 2), (1, 0), (2, 0)),
    ((0, 7), (0, 6), (0, 5), (1, 7), (2, 7)),
    ((7, 0), (7, 1), (7, 2), (6, 0), (5, 0)),
    ((7, 7), (7, 6), (7, 5), (6, 7), (5, 7)),
)

ZONE_OF: Dict[Coord, int] = {
    coord: zone_id for zone_id, zone in enumerate(ZONES) for coord in zone
}

TOTAL_ZONE_CELLS = len(ZONE_OF)


@dataclass(frozen=True, slots=True)
class Cell:
    """Zone cell. ``owner`` is write-once."""

    zone: int
    owner: Optional[Player] = None


class ZoneControl(NamedTuple):
    green_zones_won: int
    red_zones_won: int


@dataclass(frozen=True, slots=True)
class Board:
    cells: Tuple[Tuple[Optional[Cell], ...], ...]

    def cell(self, coord: Coord) -> Optional[Cell]:
        return self.cells[coord[0]][coord[1]]

    def is_paintable(self, coord: Coord) -> bool:
        cell = self.cells[coord[0]][coord[1]]
        return cell is not None and cell.owner is None

    def paint(self, coord: Coord, player: Player) -> "Board":
        """Return a board with ``coord`` painted for ``player``.

        Neutral and already-painted cells are returned unchanged, so callers
        may paint every destination unconditionally.
        """
        row, col = coord
        cell = self.cells[row][col]
        if cell is None or cell.owner is not None:
            return self
        new_row = list(self.cells[row])
        new_row[col] = Cell(zone=cell.zone, owner=player)
        rows = list(self.cells)
        rows[row] = tuple(new_row)
        return Board(tuple(rows))

    def __str__(self) -> str:
        symbols = {None: "o", Player.GREEN: "G", Player.RED: "R"}
        lines = []
        for row in self.cells:
            lines.append(
                " ".join("." if cell is None else symbols[cell.owner] for cell in row)
            )
        return "\n".join(lines)


def initial_board() -> Board:
    """Build the starting board: every zone cell unowned, the rest neutral."""
    rows = []
    for r in range(BOARD_SIZE):
        row = []
        for c in range(BOARD_SIZE):
            zone_id = ZONE_OF.get((r, c))
            row.append(None if zone_id is None else Cell(zone=zone_id))
        rows.append(tuple(row))
    return Board(tuple(rows))


def zone_counts(board: Board) -> List[Tuple[int, int]]:
    """Return ``(green_cells, red_cells)`` for each zone, in zone-id order."""
    counts = []
    for zone in ZONES:
        green = red = 0
        for coord in zone:
            owner = board.cell(coord).owner
            if owner is Player.GREEN:
                green += 1
            elif owner is Player.RED:
                red += 1
        counts.append((green, red))
    return counts


def zone_control(board: Board) -> ZoneControl:
    """Count zones held by a strict majority of painted cells.

    A zone is credited to the colour with strictly more cells in it, whether
    or not the zone is fully painted. Equal counts (including 0-0) credit
    nobody.
    """
    green_won = red_won = 0
    for green, red in zone_counts(board):
        if green > red:
            green_won += 1
        elif red > green:
            red_won += 1
    return ZoneControl(green_won, red_won)


def painted_count(board: Board) -> int:
    return sum(
        1 for coord in ZONE_OF if board.cell(coord).owner is not None
    )


def is_complete(board: Board) -> bool:
    """True once every zone cell has an owner."""
    return all(board.cell(coord).owner is not None for coord in ZONE_OF)
