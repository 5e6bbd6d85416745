"""Knight Zones: rules and decision engine for a two-knight zone-painting game.

The in-process surface the presentation layer needs:

    from knight_zones import GameEngine, legal_moves, is_complete, zone_control
    from knight_zones.ai import AIFactory
"""

from knight_zones.board import Board, Cell, ZONES, initial_board, is_complete, zone_control
from knight_zones.game_engine import GameEngine
from knight_zones.game_state import GameNode
from knight_zones.models import Difficulty, Player
from knight_zones.rules import legal_moves

__version__ = "1.0.0"

__all__ = [
    "Board",
    "Cell",
    "Difficulty",
    "GameEngine",
    "GameNode",
    "Player",
    "ZONES",
    "initial_board",
    "is_complete",
    "legal_moves",
    "zone_control",
]
