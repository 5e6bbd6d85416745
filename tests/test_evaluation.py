"""Tests for the static evaluator (Green-perspective scores)."""

import random

import pytest

from knight_zones.ai.evaluation import evaluate, evaluate_breakdown, mobility, zone_balance
from knight_zones.ai.heuristic_weights import BASE_WEIGHTS, merge_weights
from knight_zones.models import Player

from tests.helpers import make_node, random_playout


class TestEvaluate:
    def test_symmetric_opening_scores_zero(self, opening_node):
        assert zone_balance(opening_node) == 0
        assert mobility(opening_node) == 0
        assert evaluate(opening_node) == 0

    def test_known_position(self):
        node = make_node(
            (0, 0),
            (4, 5),
            painted={
                (0, 1): Player.GREEN,
                (7, 7): Player.GREEN,
                (0, 7): Player.RED,
            },
        )
        # Green has 2 moves from the corner, Red 8 from (4, 5).
        assert zone_balance(node) == 1
        assert mobility(node) == 2 - 8
        assert evaluate(node) == 10 * 1 + 2 * (2 - 8)

    def test_side_to_move_does_not_change_score(self):
        green_turn = make_node((0, 0), (4, 5), turn=Player.GREEN)
        red_turn = make_node((0, 0), (4, 5), turn=Player.RED)
        assert evaluate(green_turn) == evaluate(red_turn)

    def test_custom_weights(self):
        node = make_node((0, 0), (4, 5), painted={(0, 1): Player.GREEN})
        weights = merge_weights({"WEIGHT_MOBILITY": 0.0})
        assert evaluate(node, weights) == 10.0

    def test_breakdown_sums_to_total(self):
        node = make_node((2, 1), (4, 4), painted={(0, 0): Player.RED})
        breakdown = evaluate_breakdown(node)
        assert set(breakdown) == {"total", "zone_balance", "mobility"}
        assert breakdown["total"] == breakdown["zone_balance"] + breakdown["mobility"]
        assert breakdown["total"] == evaluate(node)

    def test_evaluation_is_deterministic(self):
        rng = random.Random(11)
        for _ in range(30):
            node = random_playout(rng, rng.randrange(0, 30))
            assert evaluate(node) == evaluate(node)
            assert evaluate(node) == evaluate(
                make_node(node.green, node.red, node.turn, _painted(node))
            )


class TestHeuristicWeights:
    def test_base_profile(self):
        assert BASE_WEIGHTS == {"WEIGHT_ZONE_BALANCE": 10.0, "WEIGHT_MOBILITY": 2.0}

    def test_merge_returns_copy(self):
        merged = merge_weights()
        merged["WEIGHT_MOBILITY"] = 99.0
        assert BASE_WEIGHTS["WEIGHT_MOBILITY"] == 2.0

    def test_unknown_key_rejected(self):
        with pytest.raises(KeyError):
            merge_weights({"WEIGHT_CENTRE": 1.0})


def _painted(node):
    return {
        (r, c): cell.owner
        for r, row in enumerate(node.board.cells)
        for c, cell in enumerate(row)
        if cell is not None and cell.owner is not None
    }
