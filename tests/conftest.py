"""
Shared pytest fixtures for Knight Zones tests.

Builders live in tests/helpers.py so plain unittest classes can use them
too; the fixtures here only wrap them.
"""

from pathlib import Path
import random
import sys
from typing import Callable

import pytest

# Ensure the repository root is on sys.path so `import knight_zones`,
# `import tests.helpers` and `import scripts.run_selfplay` work when pytest
# is run from any directory.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from knight_zones.game_state import GameNode  # noqa: E402
from tests.helpers import make_node  # noqa: E402


# =============================================================================
# FACTORY FIXTURES
# =============================================================================


@pytest.fixture
def node_factory() -> Callable[..., GameNode]:
    return make_node


@pytest.fixture
def opening_node() -> GameNode:
    """Both pieces in the middle of the board on an untouched board."""
    return make_node((3, 3), (4, 5))


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)
