"""Heuristic weight profiles for Knight Zones.

The keys mirror the attribute names on :class:`HeuristicAI` so that a
profile can be applied with ``setattr(ai, name, value)``.

Zone balance dominates because zone majorities decide the game; mobility is
a smaller tie-breaker that rewards keeping options open and boxing the
opponent in.
"""

from __future__ import annotations

from collections.abc import Mapping

HeuristicWeights = dict[str, float]


BASE_WEIGHTS: HeuristicWeights = {
    "WEIGHT_ZONE_BALANCE": 10.0,
    "WEIGHT_MOBILITY": 2.0,
}

HEURISTIC_WEIGHT_KEYS: tuple[str, ...] = tuple(BASE_WEIGHTS)


def merge_weights(overrides: Mapping[str, float] | None = None) -> HeuristicWeights:
    """Return the base profile with ``overrides`` applied.

    Unknown keys are rejected so a typo cannot silently produce a profile
    that ignores one of the terms.
    """
    weights = dict(BASE_WEIGHTS)
    if not overrides:
        return weights
    unknown = set(overrides) - set(HEURISTIC_WEIGHT_KEYS)
    if unknown:
        raise KeyError(f"Unknown heuristic weight(s): {sorted(unknown)}")
    weights.update({k: float(v) for k, v in overrides.items()})
    return weights
