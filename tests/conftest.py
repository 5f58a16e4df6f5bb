"""
Dig & Bust - Test Configuration and Fixtures

Common fixtures and test data for all test modules.
"""

from typing import Callable, Sequence

import pytest

from digbust.engine.base import DigConfig


class ScriptedRandom:
    """Deterministic random source that replays a fixed sequence of draws."""

    def __init__(self, values: Sequence[float]) -> None:
        self._values = list(values)
        self.calls = 0

    def __call__(self) -> float:
        if self.calls >= len(self._values):
            raise AssertionError(
                f"Random source exhausted after {self.calls} draws."
            )
        value = self._values[self.calls]
        self.calls += 1
        return value

    @property
    def remaining(self) -> int:
        return len(self._values) - self.calls


# =============================================================================
# RANDOM SOURCES
# =============================================================================

@pytest.fixture
def scripted_rng() -> Callable[..., ScriptedRandom]:
    """Factory: ``scripted_rng(0.9, 0.1, ...)`` replays the given draws."""
    def _make(*values: float) -> ScriptedRandom:
        return ScriptedRandom(values)
    return _make


# =============================================================================
# CONFIGURATIONS
# =============================================================================

@pytest.fixture
def config() -> DigConfig:
    """Production balancing constants."""
    return DigConfig()


@pytest.fixture
def always_jackpot_config() -> DigConfig:
    """First dig is always a jackpot."""
    return DigConfig(
        bust_base_chance=0.0,
        bust_increment=0.0,
        gem_chance=0.0,
        jackpot_threshold=0,
        jackpot_base_chance=1.0,
        jackpot_max_chance=1.0,
    )


@pytest.fixture
def always_bust_config() -> DigConfig:
    """First dig is always a bust."""
    return DigConfig(
        bust_base_chance=1.0,
        jackpot_base_chance=0.0,
        jackpot_increment=0.0,
        jackpot_max_chance=0.0,
    )


@pytest.fixture
def safe_config() -> DigConfig:
    """Never busts, never jackpots: only gems and dirt."""
    return DigConfig(
        bust_base_chance=0.0,
        bust_increment=0.0,
        gem_chance=0.5,
        jackpot_threshold=10_000,
    )


# =============================================================================
# SCORE ROWS
# =============================================================================

@pytest.fixture
def score_row() -> dict:
    """A row as returned by the `scores` table."""
    return {
        "id": "2f1c4a0e-8d4b-4d7c-9a53-5b0f0f6c1e11",
        "player_id": "guest_abc123",
        "display_name": "Digger",
        "score": 650,
        "digs": 34,
        "outcome": "jackpot",
        "created_at": "2026-10-19T12:00:00+00:00",
    }
