"""
Dig & Bust - Session State Machine

Drives a play-through one dig at a time:

    PLAYING --dirt/gem--> PLAYING
    PLAYING --bust------> BUSTED   (terminal, score unchanged)
    PLAYING --jackpot---> JACKPOT  (terminal, bonus added)

Sessions are immutable; every dig returns a new Session. The caller is
responsible for submitting the score once the returned session is terminal.
"""

import random
from dataclasses import dataclass, replace
from enum import Enum

from digbust.engine.base import (
    DigConfig,
    DigOutcome,
    RandomSource,
    Session,
    SessionFinishedError,
    SessionStatus,
)
from digbust.engine.outcome import OutcomeEngine

# Progress points gained per dig past the jackpot threshold
_PROGRESS_STEP_AFTER_THRESHOLD = 2.0

_TERMINAL_STATUS: dict[DigOutcome, SessionStatus] = {
    DigOutcome.BUST: SessionStatus.BUSTED,
    DigOutcome.JACKPOT: SessionStatus.JACKPOT,
}


class ProgressTier(Enum):
    """Motivational message tiers, keyed by progress toward the diamond wall."""
    KEEP_DIGGING = "KEEP DIGGING!"
    GETTING_CLOSER = "Getting closer..."
    NEAR_THE_WALL = "NEAR THE DIAMOND WALL!"
    SO_CLOSE = "SO CLOSE! DON'T GIVE UP!"

    @property
    def message(self) -> str:
        return self.value


@dataclass(frozen=True)
class DisplayState:
    """
    Everything the presentation layer needs to draw a session.

    Attributes:
        score: Current score
        attempts: Digs taken
        status: Session status
        last_outcome: Most recent dig classification (None before the first dig)
        last_reward: Points from the most recent dig
        progress: Display-only progress toward the diamond wall (0-100)
        tier: Motivational tier derived from progress
    """
    score: int
    attempts: int
    status: SessionStatus
    last_outcome: DigOutcome | None
    last_reward: int
    progress: float
    tier: ProgressTier

    @property
    def message(self) -> str:
        return self.tier.message


class SessionEngine:
    """
    Stateless state machine for dig sessions.

    All methods are class methods operating on immutable data.
    State is passed in and returned, never stored.
    """

    @classmethod
    def new_session(cls) -> Session:
        """Create a fresh session: no score, no attempts, still playing."""
        return Session()

    @classmethod
    def reset(cls) -> Session:
        """Start over ("play again")."""
        return cls.new_session()

    @classmethod
    def dig(
        cls,
        session: Session,
        config: DigConfig,
        rng: RandomSource = random.random,
    ) -> Session:
        """Take one dig.

        Args:
            session: Current session (must be playing)
            config: Balancing constants
            rng: Uniform [0, 1) source passed through to the outcome engine

        Returns:
            The next session

        Raises:
            SessionFinishedError: If the session already busted or hit the jackpot
        """
        if session.is_terminal:
            raise SessionFinishedError(
                f"Cannot dig: session already ended ({session.status.value})."
            )

        result = OutcomeEngine.decide(session.attempts, config, rng)

        # Bust keeps the score earned so far
        gained = 0 if result.outcome is DigOutcome.BUST else result.reward
        status = SessionStatus.PLAYING
        if result.outcome.is_terminal:
            status = _TERMINAL_STATUS[result.outcome]

        return replace(
            session,
            score=session.score + gained,
            attempts=session.attempts + 1,
            status=status,
            last_outcome=result.outcome,
            last_reward=result.reward,
        )

    @classmethod
    def progress_fraction(cls, attempts: int, config: DigConfig) -> float:
        """Display-only progress toward the diamond wall.

        Ramps linearly from 0 to 50 over ``[0, jackpot_threshold]`` attempts,
        then climbs from 50 toward 100 and saturates there. Has no effect on
        outcome odds.
        """
        threshold = config.jackpot_threshold
        if attempts >= threshold:
            extra = min(
                (attempts - threshold) * _PROGRESS_STEP_AFTER_THRESHOLD, 50.0
            )
            return 50.0 + extra
        return (max(attempts, 0) / threshold) * 50.0

    @classmethod
    def progress_tier(cls, progress: float) -> ProgressTier:
        """Pick the motivational tier for a progress value."""
        if progress < 25:
            return ProgressTier.KEEP_DIGGING
        if progress < 50:
            return ProgressTier.GETTING_CLOSER
        if progress < 75:
            return ProgressTier.NEAR_THE_WALL
        return ProgressTier.SO_CLOSE

    @classmethod
    def progress_message(cls, progress: float) -> str:
        return cls.progress_tier(progress).message

    @classmethod
    def display(cls, session: Session, config: DigConfig) -> DisplayState:
        """Build the display snapshot for a session."""
        progress = cls.progress_fraction(session.attempts, config)
        return DisplayState(
            score=session.score,
            attempts=session.attempts,
            status=session.status,
            last_outcome=session.last_outcome,
            last_reward=session.last_reward,
            progress=progress,
            tier=cls.progress_tier(progress),
        )
