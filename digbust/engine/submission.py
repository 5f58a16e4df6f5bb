"""
Dig & Bust - Score Submission Gate

Throttles leaderboard submissions to one per cooldown window. The gate only
decides whether a finished session may be forwarded; the downstream write is
owned by the sink and never retried or awaited here.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

from digbust.engine.base import (
    DigConfig,
    DigOutcome,
    Session,
    SessionInProgressError,
    SessionStatus,
)

logger = logging.getLogger(__name__)

REJECTED_COOLDOWN = "cooldown"

_STATUS_OUTCOME: dict[SessionStatus, DigOutcome] = {
    SessionStatus.BUSTED: DigOutcome.BUST,
    SessionStatus.JACKPOT: DigOutcome.JACKPOT,
}


@dataclass(frozen=True)
class PlayerIdentity:
    """Who a score belongs to."""

    player_id: str
    display_name: str

    @classmethod
    def anonymous(cls, now_ms: int) -> PlayerIdentity:
        """Identity used for guests who never picked a name."""
        return cls(player_id=f"anonymous_{now_ms}", display_name="Anonymous")


@dataclass(frozen=True)
class SubmissionRecord:
    """
    A finished session as sent to the leaderboard.

    Attributes:
        player_id: Player identifier
        display_name: Name shown on the leaderboard
        score: Final score
        digs: Total digs taken
        outcome: BUST or JACKPOT
        submitted_at: Epoch milliseconds at submission
    """

    player_id: str
    display_name: str
    score: int
    digs: int
    outcome: DigOutcome
    submitted_at: int

    def to_row(self) -> dict:
        """Column values for the ``scores`` table."""
        return {
            "player_id": self.player_id,
            "display_name": self.display_name,
            "score": self.score,
            "digs": self.digs,
            "outcome": self.outcome.value,
        }


@dataclass(frozen=True)
class SubmissionResult:
    """
    Gate decision.

    Attributes:
        accepted: Whether the record was forwarded to the sink
        last_submit_ms: Timestamp to carry into the next call
        reason: Why the submission was rejected (None when accepted)
        record: The forwarded record (None when rejected)
    """

    accepted: bool
    last_submit_ms: int | None
    reason: str | None = None
    record: SubmissionRecord | None = None

    @classmethod
    def accept(cls, now_ms: int, record: SubmissionRecord) -> SubmissionResult:
        return cls(accepted=True, last_submit_ms=now_ms, record=record)

    @classmethod
    def reject(cls, last_submit_ms: int | None, reason: str) -> SubmissionResult:
        return cls(accepted=False, last_submit_ms=last_submit_ms, reason=reason)


ScoreSink = Callable[[SubmissionRecord], object]


class SubmissionGate:
    """Minimum-interval throttle in front of the score sink."""

    def __init__(self, config: DigConfig, sink: ScoreSink) -> None:
        self.config = config
        self.sink = sink

    def is_cooling_down(self, last_submit_ms: int | None, now_ms: int) -> bool:
        """True while the previous submission is inside the cooldown window."""
        if last_submit_ms is None:
            return False
        return now_ms - last_submit_ms < self.config.submit_cooldown_ms

    def submit(
        self,
        session: Session,
        identity: PlayerIdentity,
        last_submit_ms: int | None,
        now_ms: int,
    ) -> SubmissionResult:
        """Forward a finished session unless the cooldown is still running.

        Args:
            session: A busted or jackpot session
            identity: Player the score belongs to
            last_submit_ms: Time of the previous accepted submission, or None
            now_ms: Current time in epoch milliseconds

        Returns:
            SubmissionResult; accepted even when the downstream write later fails

        Raises:
            SessionInProgressError: If the session is still being played
        """
        outcome = _STATUS_OUTCOME.get(session.status)
        if outcome is None:
            raise SessionInProgressError(
                "Only busted or jackpot sessions can be submitted."
            )

        if self.is_cooling_down(last_submit_ms, now_ms):
            logger.debug(
                "Score submission rate limited for %s (%d ms since last)",
                identity.player_id,
                now_ms - last_submit_ms,
            )
            return SubmissionResult.reject(last_submit_ms, REJECTED_COOLDOWN)

        record = SubmissionRecord(
            player_id=identity.player_id,
            display_name=identity.display_name,
            score=session.score,
            digs=session.attempts,
            outcome=outcome,
            submitted_at=now_ms,
        )
        logger.info(
            "Submitting score %d (%s after %d digs) for %s",
            record.score,
            record.outcome.value,
            record.digs,
            record.player_id,
        )
        self.sink(record)
        return SubmissionResult.accept(now_ms, record)
