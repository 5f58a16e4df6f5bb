"""
Dig & Bust - Local Stats Store

Best score and attempt count kept in a simple key-value mapping. In the
app this is ``st.session_state``, so the totals last for the browser session
and start over on a page reload. Tests pass a plain dict.
"""

from __future__ import annotations

from collections.abc import MutableMapping
from dataclasses import dataclass
from typing import Any

from digbust.engine.validators import validate_score

BEST_SCORE_KEY = "dig_bust_best"
ATTEMPTS_KEY = "dig_bust_attempts"


@dataclass(frozen=True)
class PlayerStats:
    """Process-wide totals across play-throughs."""

    best_score: int = 0
    attempts: int = 0


def _read_int(store: MutableMapping[str, Any], key: str) -> int:
    """Stored values may be strings (browser storage); bad values read as 0."""
    raw = store.get(key)
    if raw is None:
        return 0
    try:
        return max(int(raw), 0)
    except (TypeError, ValueError):
        return 0


class StatsStore:
    """Reads and updates the local best-score / attempts counters."""

    def __init__(self, store: MutableMapping[str, Any]) -> None:
        self.store = store

    def load(self) -> PlayerStats:
        """Read the stored totals (zeros when nothing is stored)."""
        return PlayerStats(
            best_score=_read_int(self.store, BEST_SCORE_KEY),
            attempts=_read_int(self.store, ATTEMPTS_KEY),
        )

    def record(self, final_score: int) -> PlayerStats:
        """Count a finished session.

        The best score only changes when beaten; attempts always go up by one.
        """
        validate_score(final_score)
        current = self.load()
        best = current.best_score
        if final_score > best:
            best = final_score
            self.store[BEST_SCORE_KEY] = best

        attempts = current.attempts + 1
        self.store[ATTEMPTS_KEY] = attempts
        return PlayerStats(best_score=best, attempts=attempts)
