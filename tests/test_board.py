import random
import unittest

from knight_zones.board import (
    TOTAL_ZONE_CELLS,
    ZONE_OF,
    ZONES,
    Cell,
    initial_board,
    is_complete,
    painted_count,
    zone_control,
    zone_counts,
)
from knight_zones.models import Player


class TestInitialBoard(unittest.TestCase):
    def setUp(self) -> None:
        self.board = initial_board()

    def test_zone_and_neutral_cell_counts(self) -> None:
        cells = [cell for row in self.board.cells for cell in row]
        self.assertEqual(len(cells), 64)
        self.assertEqual(sum(1 for c in cells if c is not None), 20)
        self.assertEqual(sum(1 for c in cells if c is None), 44)
        self.assertEqual(TOTAL_ZONE_CELLS, 20)

    def test_zone_cells_match_membership_table(self) -> None:
        for zone_id, zone in enumerate(ZONES):
            self.assertEqual(len(zone), 5)
            for coord in zone:
                self.assertEqual(self.board.cell(coord), Cell(zone=zone_id))

        for r in range(8):
            for c in range(8):
                if (r, c) not in ZONE_OF:
                    self.assertIsNone(self.board.cell((r, c)))

    def test_initial_board_is_deterministic(self) -> None:
        self.assertEqual(initial_board(), initial_board())

    def test_initial_board_is_not_complete(self) -> None:
        self.assertFalse(is_complete(self.board))
        self.assertEqual(zone_control(self.board), (0, 0))


class TestPainting(unittest.TestCase):
    def test_paint_returns_new_board_and_leaves_original(self) -> None:
        board = initial_board()
        painted = board.paint((0, 0), Player.GREEN)

        self.assertIsNone(board.cell((0, 0)).owner)
        self.assertIs(painted.cell((0, 0)).owner, Player.GREEN)
        # Untouched rows are shared, the painted row is not.
        self.assertIs(painted.cells[3], board.cells[3])
        self.assertIsNot(painted.cells[0], board.cells[0])

    def test_paint_is_write_once(self) -> None:
        board = initial_board().paint((0, 1), Player.RED)
        repainted = board.paint((0, 1), Player.GREEN)
        self.assertIs(repainted, board)
        self.assertIs(repainted.cell((0, 1)).owner, Player.RED)

    def test_neutral_cells_are_never_painted(self) -> None:
        board = initial_board()
        self.assertIs(board.paint((4, 4), Player.GREEN), board)
        self.assertFalse(board.is_paintable((4, 4)))
        self.assertTrue(board.is_paintable((7, 7)))

    def test_complete_after_exactly_twenty_paints(self) -> None:
        board = initial_board()
        coords = list(ZONE_OF)
        random.Random(5).shuffle(coords)
        for i, coord in enumerate(coords):
            self.assertFalse(is_complete(board))
            board = board.paint(coord, Player.GREEN if i % 2 else Player.RED)
            self.assertEqual(painted_count(board), i + 1)
        self.assertTrue(is_complete(board))


class TestZoneControl(unittest.TestCase):
    def _paint(self, assignments):
        board = initial_board()
        for coord, player in assignments:
            board = board.paint(coord, player)
        return board

    def test_strict_majority_before_zone_is_full(self) -> None:
        board = self._paint([
            ((0, 0), Player.GREEN),
            ((0, 1), Player.GREEN),
            ((0, 2), Player.RED),
        ])
        self.assertEqual(zone_counts(board)[0], (2, 1))
        self.assertEqual(zone_control(board), (1, 0))

    def test_tie_credits_neither_side(self) -> None:
        board = self._paint([
            ((7, 7), Player.GREEN),
            ((7, 6), Player.GREEN),
            ((7, 5), Player.RED),
            ((6, 7), Player.RED),
        ])
        self.assertEqual(zone_counts(board)[3], (2, 2))
        self.assertEqual(zone_control(board), (0, 0))

    def test_full_board_awards_every_zone(self) -> None:
        assignments = []
        for zone_id, zone in enumerate(ZONES):
            winner = Player.GREEN if zone_id < 3 else Player.RED
            for i, coord in enumerate(zone):
                assignments.append((coord, winner if i < 3 else winner.opponent))
        board = self._paint(assignments)
        self.assertTrue(is_complete(board))
        self.assertEqual(zone_control(board), (3, 1))

    def test_control_is_recomputed_after_each_paint(self) -> None:
        board = self._paint([((7, 0), Player.RED)])
        self.assertEqual(zone_control(board), (0, 1))
        board = board.paint((7, 1), Player.GREEN)
        self.assertEqual(zone_control(board), (0, 0))
        board = board.paint((7, 2), Player.GREEN)
        self.assertEqual(zone_control(board), (1, 0))

    def test_counts_are_bounded_on_random_boards(self) -> None:
        rng = random.Random(99)
        for _ in range(200):
            board = initial_board()
            for coord in ZONE_OF:
                choice = rng.random()
                if choice < 0.33:
                    board = board.paint(coord, Player.GREEN)
                elif choice < 0.66:
                    board = board.paint(coord, Player.RED)
            for green, red in zone_counts(board):
                self.assertLessEqual(green + red, 5)
            control = zone_control(board)
            self.assertLessEqual(control.green_zones_won + control.red_zones_won, 4)


if __name__ == "__main__":
    unittest.main()
