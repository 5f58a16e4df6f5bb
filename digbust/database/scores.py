"""
Dig & Bust - Score Manager

CRUD operations for the `scores` table (the shared leaderboard).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime

import httpx
from postgrest.exceptions import APIError
from pydantic import ValidationError
from supabase import Client

from digbust.database.models import Score
from digbust.engine.submission import SubmissionRecord

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WriteResult:
    """
    Outcome of a leaderboard write.

    Attributes:
        ok: Whether the row was stored
        score: The stored row (None on failure)
        error: Failure description (None on success)
    """

    ok: bool
    score: Score | None = None
    error: str | None = None

    @classmethod
    def success(cls, score: Score) -> WriteResult:
        return cls(ok=True, score=score)

    @classmethod
    def failure(cls, error: str) -> WriteResult:
        return cls(ok=False, error=error)


def _start_of_day(now: datetime | None = None) -> datetime:
    """Local midnight for the day containing ``now``."""
    now = now or datetime.now().astimezone()
    return now.replace(hour=0, minute=0, second=0, microsecond=0)


class ScoreManager:
    """Manages leaderboard rows in Supabase."""

    def __init__(self, client: Client) -> None:
        self.client = client
        self.table = client.table("scores")

    def insert(self, record: SubmissionRecord) -> WriteResult:
        """Store a finished session.

        Network and storage errors are reported through the result and
        logged; they never propagate into gameplay.
        """
        try:
            data = (
                self.table
                .insert(record.to_row())
                .execute()
            )
            if not data.data:
                logger.error(
                    "Score insert for %s returned no row", record.player_id
                )
                return WriteResult.failure("Insert returned no data.")
            score = Score.model_validate(data.data[0])
        except (APIError, httpx.HTTPError, OSError, ValidationError) as exc:
            error = str(exc) or type(exc).__name__
            logger.error(
                "Failed to submit score for %s: %s", record.player_id, error
            )
            return WriteResult.failure(error)

        logger.info("Score submitted: %s (%d)", score.id, score.score)
        return WriteResult.success(score)

    def top_scores(self, limit: int = 50) -> list[Score]:
        """All-time leaderboard, highest score first."""
        data = (
            self.table
            .select("*")
            .order("score", desc=True)
            .limit(limit)
            .execute()
        )
        return [Score.model_validate(row) for row in data.data]

    def top_scores_since(self, since: datetime, limit: int = 50) -> list[Score]:
        """Leaderboard restricted to rows created at or after ``since``."""
        data = (
            self.table
            .select("*")
            .gte("created_at", since.isoformat())
            .order("score", desc=True)
            .limit(limit)
            .execute()
        )
        return [Score.model_validate(row) for row in data.data]

    def today_scores(
        self, limit: int = 50, now: datetime | None = None
    ) -> list[Score]:
        """Leaderboard for the current local day."""
        return self.top_scores_since(_start_of_day(now), limit)

    def list_by_player(self, player_id: str, limit: int = 20) -> list[Score]:
        """A player's own finished sessions, newest first."""
        data = (
            self.table
            .select("*")
            .eq("player_id", player_id)
            .order("created_at", desc=True)
            .limit(limit)
            .execute()
        )
        return [Score.model_validate(row) for row in data.data]
