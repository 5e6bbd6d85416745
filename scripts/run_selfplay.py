#!/usr/bin/env python3
"""
Run AI-vs-AI Knight Zones games.

Each side is either a difficulty tier (easy/medium/hard, minimax) or
``random``. The driver applies moves through the validating GameEngine and
hands the turn over when a side passes, so a stuck piece never stalls the
game.

Examples:
    python scripts/run_selfplay.py --green medium --red random --num-games 20
    python scripts/run_selfplay.py --green hard --red easy --seed 7 --output games.jsonl
"""

import argparse
import json
import os
import random
import sys
import time
from datetime import datetime
from pathlib import Path
from typing import Optional

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from knight_zones.ai.base import BaseAI  # noqa: E402
from knight_zones.ai.factory import AIFactory  # noqa: E402
from knight_zones.core.logging_config import setup_logging  # noqa: E402
from knight_zones.game_engine import GameEngine  # noqa: E402
from knight_zones.metrics import record_game_outcome  # noqa: E402
from knight_zones.models import AIConfig, AIType, Player  # noqa: E402

SIDE_CHOICES = ("easy", "medium", "hard", "random")

logger = setup_logging("run_selfplay", format_style="compact")


def create_player(kind: str, player: Player, seed: Optional[int]) -> BaseAI:
    if kind == "random":
        return AIFactory.create(AIType.RANDOM, player, AIConfig(rng_seed=seed))
    return AIFactory.create_from_difficulty(kind, player, rng_seed=seed)


def play_game(
    green_kind: str,
    red_kind: str,
    seed: Optional[int] = None,
    max_moves: int = 200,
    game_index: int = 0,
) -> dict:
    """Play one game and return a JSON-serialisable record."""
    rng = random.Random(seed)
    node = GameEngine.new_game(rng)
    players = {
        Player.GREEN: create_player(green_kind, Player.GREEN, rng.randrange(2**31)),
        Player.RED: create_player(red_kind, Player.RED, rng.randrange(2**31)),
    }
    start = {"green": list(node.green), "red": list(node.red)}
    game_start = time.time()
    moves = []
    passes = 0

    while not GameEngine.is_game_over(node) and len(moves) < max_moves:
        mover = node.turn
        destination = players[mover].select_move(node)
        if tuple(destination) == node.position_of(mover):
            passes += 1
        node = GameEngine.advance(node, destination)
        moves.append({"player": mover.value, "to": list(destination)})
        logger.debug(f"game {game_index} ply {len(moves)}: {mover.value} -> {destination}")

    status = GameEngine.get_status(node)
    finished = status.game_over
    winner = status.winner.value if status.winner is not None else None
    if finished:
        record_game_outcome(winner)

    return {
        "game_id": f"selfplay_{green_kind}_vs_{red_kind}_{game_index}_{int(time.time())}",
        "green": green_kind,
        "red": red_kind,
        "seed": seed,
        "start": start,
        "winner": winner,
        "completed": finished,
        "termination": "game_over" if finished else "max_moves",
        "green_zones": status.green_zones_won,
        "red_zones": status.red_zones_won,
        "painted_cells": status.painted_cells,
        "move_count": len(moves),
        "passes": passes,
        "moves": moves,
        "final_board": node.render(),
        "game_time_seconds": time.time() - game_start,
        "created_at": datetime.now().isoformat(),
    }


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run Knight Zones AI-vs-AI games")
    parser.add_argument("--green", choices=SIDE_CHOICES, default="medium",
                        help="Green player: difficulty tier or 'random'")
    parser.add_argument("--red", choices=SIDE_CHOICES, default="random",
                        help="Red player: difficulty tier or 'random'")
    parser.add_argument("--num-games", type=int, default=10)
    parser.add_argument("--seed", type=int, default=None,
                        help="Base seed; game i uses seed + i")
    parser.add_argument("--max-moves", type=int, default=200,
                        help="Ply cap per game")
    parser.add_argument("--output", type=Path, default=None,
                        help="Append one JSON record per game to this file")
    parser.add_argument("--log-level", default="INFO")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    logger.setLevel(args.log_level.upper())

    tally = {"green": 0, "red": 0, "draw": 0, "unfinished": 0}
    for i in range(args.num_games):
        seed = args.seed + i if args.seed is not None else None
        record = play_game(args.green, args.red, seed, args.max_moves, i)

        if not record["completed"]:
            tally["unfinished"] += 1
        else:
            tally[record["winner"] or "draw"] += 1

        logger.info(
            f"Game {i + 1}/{args.num_games}: winner={record['winner'] or 'draw'} "
            f"zones G{record['green_zones']}-R{record['red_zones']} "
            f"moves={record['move_count']} passes={record['passes']} "
            f"({record['game_time_seconds']:.2f}s)"
        )

        if args.output is not None:
            args.output.parent.mkdir(parents=True, exist_ok=True)
            with open(args.output, "a") as f:
                f.write(json.dumps(record) + "\n")

    logger.info(
        f"{args.green} (green) vs {args.red} (red): "
        f"green={tally['green']} red={tally['red']} draw={tally['draw']} "
        f"unfinished={tally['unfinished']}"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
