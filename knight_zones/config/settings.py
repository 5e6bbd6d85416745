"""Environment-driven service settings.

Values are read once per :func:`load_settings` call so tests can patch the
environment and reload.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import List

from ..models import Difficulty
from .difficulty import parse_difficulty


@dataclass(frozen=True)
class ServiceSettings:
    log_level: str = "INFO"
    log_format: str = "default"
    cors_origins: List[str] = field(default_factory=lambda: ["*"])
    default_difficulty: Difficulty = Difficulty.MEDIUM


def load_settings() -> ServiceSettings:
    """Build :class:`ServiceSettings` from ``KNIGHT_ZONES_*`` variables.

    Raises:
        ConfigurationError: if ``KNIGHT_ZONES_DEFAULT_DIFFICULTY`` is not a
            known tier.
    """
    origins = [
        origin.strip()
        for origin in os.getenv("CORS_ORIGINS", "*").split(",")
        if origin.strip()
    ]
    return ServiceSettings(
        log_level=os.getenv("KNIGHT_ZONES_LOG_LEVEL", "INFO").upper(),
        log_format=os.getenv("KNIGHT_ZONES_LOG_FORMAT", "default").lower(),
        cors_origins=origins or ["*"],
        default_difficulty=parse_difficulty(
            os.getenv("KNIGHT_ZONES_DEFAULT_DIFFICULTY", Difficulty.MEDIUM.value)
        ),
    )
