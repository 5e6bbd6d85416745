"""Configuration for Knight Zones: difficulty ladder and service settings."""

from knight_zones.config.difficulty import (
    DIFFICULTY_DESCRIPTIONS,
    DIFFICULTY_POLICIES,
    DifficultyPolicy,
    get_difficulty_description,
    get_difficulty_policy,
    parse_difficulty,
)
from knight_zones.config.settings import ServiceSettings, load_settings

__all__ = [
    "DIFFICULTY_DESCRIPTIONS",
    "DIFFICULTY_POLICIES",
    "DifficultyPolicy",
    "ServiceSettings",
    "get_difficulty_description",
    "get_difficulty_policy",
    "load_settings",
    "parse_difficulty",
]
