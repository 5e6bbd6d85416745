"""Tests for AIFactory, the difficulty ladder and service settings."""

import random

import pytest

from knight_zones.ai import AIFactory, HeuristicAI, MinimaxAI, RandomAI
from knight_zones.ai.base import derive_seed
from knight_zones.config import (
    DIFFICULTY_POLICIES,
    get_difficulty_description,
    get_difficulty_policy,
    load_settings,
    parse_difficulty,
)
from knight_zones.errors import ConfigurationError
from knight_zones.models import AIConfig, AIType, Difficulty, Player


class TestDifficultyLadder:
    def test_canonical_policies(self):
        assert DIFFICULTY_POLICIES[Difficulty.EASY].depth == 2
        assert DIFFICULTY_POLICIES[Difficulty.EASY].random_chance == 0.6
        assert DIFFICULTY_POLICIES[Difficulty.MEDIUM].depth == 4
        assert DIFFICULTY_POLICIES[Difficulty.MEDIUM].random_chance == 0.3
        assert DIFFICULTY_POLICIES[Difficulty.HARD].depth == 6
        assert DIFFICULTY_POLICIES[Difficulty.HARD].random_chance == 0.0

    @pytest.mark.parametrize("token", ["hard", "HARD", " Hard ", Difficulty.HARD])
    def test_parse_accepts_tokens(self, token):
        assert parse_difficulty(token) is Difficulty.HARD

    @pytest.mark.parametrize("token", ["expert", "", "3"])
    def test_parse_rejects_unknown(self, token):
        with pytest.raises(ConfigurationError) as exc_info:
            parse_difficulty(token)
        assert exc_info.value.code == "CONFIGURATION_ERROR"
        assert "easy" in exc_info.value.context["allowed"]

    def test_policy_and_description_lookups(self):
        assert get_difficulty_policy("medium").depth == 4
        assert "6-ply" in get_difficulty_description(Difficulty.HARD)


class TestAIFactory:
    @pytest.mark.parametrize(
        "ai_type,expected",
        [
            (AIType.RANDOM, RandomAI),
            (AIType.HEURISTIC, HeuristicAI),
            (AIType.MINIMAX, MinimaxAI),
            ("minimax", MinimaxAI),
        ],
    )
    def test_create_by_type(self, ai_type, expected):
        ai = AIFactory.create(ai_type, Player.RED)
        assert type(ai) is expected
        assert ai.player is Player.RED
        assert ai.config.difficulty is Difficulty.MEDIUM

    def test_unknown_type_raises(self):
        with pytest.raises(ConfigurationError):
            AIFactory.create("mcts", Player.GREEN)

    def test_create_from_difficulty(self):
        ai = AIFactory.create_from_difficulty("Easy", Player.RED, rng_seed=7)
        assert isinstance(ai, MinimaxAI)
        assert ai.policy.depth == 2
        assert ai.rng_seed == 7
        assert "difficulty=easy" in repr(ai)

    def test_create_from_unknown_difficulty_raises(self):
        with pytest.raises(ConfigurationError):
            AIFactory.create_from_difficulty("nightmare")

    def test_explicit_rng_is_used(self):
        rng = random.Random(0)
        ai = AIFactory.create(AIType.RANDOM, Player.GREEN, rng=rng)
        assert ai.rng is rng

    def test_derived_seed_is_stable_and_colour_specific(self):
        config = AIConfig(difficulty=Difficulty.HARD)
        assert derive_seed(config, Player.GREEN) == derive_seed(config, Player.GREEN)
        assert derive_seed(config, Player.GREEN) != derive_seed(config, Player.RED)
        ai = AIFactory.create(AIType.MINIMAX, Player.GREEN, config)
        assert ai.rng_seed == derive_seed(config, Player.GREEN)

    def test_negative_seed_rejected(self):
        with pytest.raises(ValueError):
            AIConfig(rng_seed=-1)


class TestServiceSettings:
    def test_defaults(self, monkeypatch):
        for var in (
            "KNIGHT_ZONES_LOG_LEVEL",
            "KNIGHT_ZONES_LOG_FORMAT",
            "CORS_ORIGINS",
            "KNIGHT_ZONES_DEFAULT_DIFFICULTY",
        ):
            monkeypatch.delenv(var, raising=False)
        settings = load_settings()
        assert settings.log_level == "INFO"
        assert settings.log_format == "default"
        assert settings.cors_origins == ["*"]
        assert settings.default_difficulty is Difficulty.MEDIUM

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("KNIGHT_ZONES_LOG_LEVEL", "debug")
        monkeypatch.setenv("KNIGHT_ZONES_LOG_FORMAT", "Compact")
        monkeypatch.setenv("CORS_ORIGINS", "http://a.test, http://b.test,")
        monkeypatch.setenv("KNIGHT_ZONES_DEFAULT_DIFFICULTY", "hard")
        settings = load_settings()
        assert settings.log_level == "DEBUG"
        assert settings.log_format == "compact"
        assert settings.cors_origins == ["http://a.test", "http://b.test"]
        assert settings.default_difficulty is Difficulty.HARD

    def test_bad_default_difficulty(self, monkeypatch):
        monkeypatch.setenv("KNIGHT_ZONES_DEFAULT_DIFFICULTY", "insane")
        with pytest.raises(ConfigurationError):
            load_settings()
