"""
Dig & Bust - Game Manager

Drives one play-through at a time: applies the pacing delay, asks the
session engine for the next state, and on the terminal transition updates
the local stats and hands the final tally to the submission gate exactly
once. Stats and the last-submit timestamp outlive individual sessions.
"""

from __future__ import annotations

import logging
import random
import time
from dataclasses import dataclass
from typing import Callable

from digbust.database.stats_store import PlayerStats, StatsStore
from digbust.engine.base import DigConfig, RandomSource, Session, SessionFinishedError
from digbust.engine.session import DisplayState, SessionEngine
from digbust.engine.submission import PlayerIdentity, SubmissionGate, SubmissionResult

logger = logging.getLogger(__name__)


def _now_ms() -> int:
    return int(time.time() * 1000)


@dataclass(frozen=True)
class GameView:
    """
    Display snapshot plus the cross-session counters.

    Attributes:
        state: Session display state (score, progress, message, ...)
        best_score: Best final score stored locally
        attempt_number: 1-based number of the current play-through
    """

    state: DisplayState
    best_score: int
    attempt_number: int


class DigGameManager:
    """Owns the current session and the process-wide game counters."""

    def __init__(
        self,
        config: DigConfig,
        gate: SubmissionGate,
        stats_store: StatsStore,
        identity: PlayerIdentity | None = None,
        *,
        dig_delay_ms: int = 0,
        rng: RandomSource = random.random,
        clock: Callable[[], int] = _now_ms,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.config = config
        self._gate = gate
        self._stats_store = stats_store
        self._identity = identity
        self._dig_delay_ms = dig_delay_ms
        self._rng = rng
        self._clock = clock
        self._sleep = sleep

        self._session = SessionEngine.new_session()
        self._stats = stats_store.load()
        self._last_submit_ms: int | None = None
        self._last_submission: SubmissionResult | None = None

    @property
    def session(self) -> Session:
        return self._session

    @property
    def stats(self) -> PlayerStats:
        return self._stats

    @property
    def last_submission(self) -> SubmissionResult | None:
        """Gate decision for the most recent terminal transition."""
        return self._last_submission

    @property
    def identity(self) -> PlayerIdentity | None:
        return self._identity

    @identity.setter
    def identity(self, identity: PlayerIdentity | None) -> None:
        self._identity = identity

    def dig(self) -> Session:
        """Take one dig on the current session.

        The pacing delay runs before randomness is drawn; once requested,
        the dig is always applied.

        Raises:
            SessionFinishedError: If the current session is already over
        """
        if self._session.is_terminal:
            raise SessionFinishedError(
                "Cannot dig: session already ended, start a new one first."
            )

        if self._dig_delay_ms > 0:
            self._sleep(self._dig_delay_ms / 1000)

        self._session = SessionEngine.dig(self._session, self.config, self._rng)

        if self._session.is_terminal:
            self._finish()
        return self._session

    def play_again(self) -> Session:
        """Replace the current session with a fresh one."""
        self._session = SessionEngine.reset()
        self._last_submission = None
        return self._session

    def view(self) -> GameView:
        """Everything the play page renders."""
        return GameView(
            state=SessionEngine.display(self._session, self.config),
            best_score=self._stats.best_score,
            attempt_number=self._stats.attempts + 1,
        )

    def _finish(self) -> None:
        """Terminal transition bookkeeping; runs once per session."""
        session = self._session
        logger.info(
            "Session ended: %s with %d points after %d digs",
            session.status.value,
            session.score,
            session.attempts,
        )

        self._stats = self._stats_store.record(session.score)

        now = self._clock()
        identity = self._identity or PlayerIdentity.anonymous(now)
        result = self._gate.submit(session, identity, self._last_submit_ms, now)
        self._last_submit_ms = result.last_submit_ms
        self._last_submission = result
