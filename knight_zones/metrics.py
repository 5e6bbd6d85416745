"""Prometheus metrics for the Knight Zones service.

Counters and histograms shared by the /ai/move handler and the self-play
script, labeled by difficulty so local Prometheus setups can filter tiers.
"""

from __future__ import annotations

from typing import Final, Optional

from prometheus_client import Counter, Histogram

AI_MOVE_REQUESTS: Final[Counter] = Counter(
    "knight_zones_ai_move_requests_total",
    "Total number of /ai/move requests, labeled by difficulty and outcome.",
    labelnames=("difficulty", "outcome"),
)

AI_MOVE_LATENCY: Final[Histogram] = Histogram(
    "knight_zones_ai_move_latency_seconds",
    "Latency of AI move selection in seconds, labeled by difficulty.",
    labelnames=("difficulty",),
    # Hard (6-ply) searches can take a few seconds in CPython.
    buckets=(0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.0, 5.0, 10.0),
)

SEARCH_NODES: Final[Histogram] = Histogram(
    "knight_zones_search_nodes",
    "Minimax nodes visited per searched move, labeled by difficulty.",
    labelnames=("difficulty",),
    buckets=(10, 100, 1_000, 10_000, 100_000, 1_000_000),
)

GAME_OUTCOMES: Final[Counter] = Counter(
    "knight_zones_game_outcomes_total",
    "Completed self-play games, labeled by outcome (green, red or draw).",
    labelnames=("outcome",),
)


def record_ai_move(
    difficulty: str,
    outcome: str,
    latency_seconds: float,
    nodes_visited: int = 0,
) -> None:
    """Record one AI move selection."""
    AI_MOVE_REQUESTS.labels(difficulty, outcome).inc()
    AI_MOVE_LATENCY.labels(difficulty).observe(latency_seconds)
    if nodes_visited:
        SEARCH_NODES.labels(difficulty).observe(nodes_visited)


def record_game_outcome(winner: Optional[str]) -> None:
    GAME_OUTCOMES.labels(winner or "draw").inc()
