"""
Dig & Bust - Game Engine Base Classes

This module defines the foundational data structures and enums used throughout
the game engine. All classes are immutable (frozen dataclasses) so a session
can only move forward by being replaced, never by being edited in place.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable

from digbust.engine.validators import (
    validate_non_negative,
    validate_probability,
)

# Uniform [0, 1) generator. ``random.random`` in production, scripted in tests.
RandomSource = Callable[[], float]


class DigOutcome(Enum):
    """Classification of a single dig."""
    DIRT = "dirt"
    GEM = "gem"
    BUST = "bust"
    JACKPOT = "jackpot"

    @property
    def is_terminal(self) -> bool:
        """Bust and jackpot end the session."""
        return self in (DigOutcome.BUST, DigOutcome.JACKPOT)


class SessionStatus(Enum):
    """Play status of a session. PLAYING is the only non-terminal state."""
    PLAYING = "playing"
    BUSTED = "busted"
    JACKPOT = "jackpot"

    @property
    def is_terminal(self) -> bool:
        return self is not SessionStatus.PLAYING


class DigUsageError(Exception):
    """Programmer error in how the game engine is driven."""


class SessionFinishedError(DigUsageError):
    """Raised when digging on a session that already busted or hit the jackpot."""


class SessionInProgressError(DigUsageError):
    """Raised when submitting a session that has not reached a terminal state."""


@dataclass(frozen=True)
class DigConfig:
    """
    Balancing constants for the dig game.

    Attributes:
        bust_base_chance: Bust probability at attempt 0
        bust_increment: Added to the bust chance per attempt already taken
        gem_chance: Probability of a gem when not busted or jackpotted
        gem_min_points: Smallest gem reward (inclusive)
        gem_max_points: Largest gem reward (inclusive)
        jackpot_threshold: Attempts required before a jackpot is possible
        jackpot_base_chance: Jackpot probability at the threshold
        jackpot_increment: Added to the jackpot chance per attempt past the threshold
        jackpot_max_chance: Ceiling for the jackpot chance
        jackpot_bonus: Points awarded for a jackpot
        submit_cooldown_ms: Minimum interval between score submissions
    """
    bust_base_chance: float = 0.05
    bust_increment: float = 0.002
    gem_chance: float = 0.30
    gem_min_points: int = 5
    gem_max_points: int = 25
    jackpot_threshold: int = 30
    jackpot_base_chance: float = 0.02
    jackpot_increment: float = 0.01
    jackpot_max_chance: float = 0.50
    jackpot_bonus: int = 500
    submit_cooldown_ms: int = 5000

    def __post_init__(self) -> None:
        """Validate configuration."""
        for name in (
            "bust_base_chance",
            "bust_increment",
            "gem_chance",
            "jackpot_base_chance",
            "jackpot_increment",
            "jackpot_max_chance",
        ):
            validate_probability(getattr(self, name), name)

        for name in (
            "gem_min_points",
            "gem_max_points",
            "jackpot_threshold",
            "jackpot_bonus",
            "submit_cooldown_ms",
        ):
            validate_non_negative(getattr(self, name), name)

        if self.gem_min_points > self.gem_max_points:
            raise ValueError(
                f"gem_min_points ({self.gem_min_points}) cannot exceed "
                f"gem_max_points ({self.gem_max_points})."
            )

        if self.jackpot_max_chance < self.jackpot_base_chance:
            raise ValueError(
                f"jackpot_max_chance ({self.jackpot_max_chance}) must be at least "
                f"jackpot_base_chance ({self.jackpot_base_chance})."
            )


@dataclass(frozen=True)
class DigResult:
    """
    Outcome of a single dig.

    Attributes:
        outcome: What the dig turned up
        reward: Points earned by this dig (0 for dirt and bust)
    """
    outcome: DigOutcome
    reward: int = 0


@dataclass(frozen=True)
class Session:
    """
    Complete state of one play-through.

    Attributes:
        score: Points earned this session
        attempts: Number of digs taken
        status: Playing, busted, or jackpot
        last_outcome: Classification of the most recent dig (None before the first dig)
        last_reward: Points from the most recent dig
    """
    score: int = 0
    attempts: int = 0
    status: SessionStatus = SessionStatus.PLAYING
    last_outcome: DigOutcome | None = None
    last_reward: int = 0

    @property
    def is_playing(self) -> bool:
        return self.status is SessionStatus.PLAYING

    @property
    def is_terminal(self) -> bool:
        return self.status.is_terminal
