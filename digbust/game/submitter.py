"""
Dig & Bust - Background Score Submitter

Fire-and-forget sink for the submission gate. The leaderboard write runs on
a daemon thread so digging is never blocked on the network; the result is
reported through an optional callback.
"""

from __future__ import annotations

import logging
import threading
from typing import Callable

from digbust.database.scores import ScoreManager, WriteResult
from digbust.engine.submission import SubmissionRecord

logger = logging.getLogger(__name__)


class BackgroundSubmitter:
    """Callable score sink that writes through a ScoreManager.

    With ``background=False`` the write happens inline, which is what the
    tests and scripted simulations use.
    """

    def __init__(
        self,
        score_manager: ScoreManager,
        *,
        background: bool = True,
        on_result: Callable[[WriteResult], None] | None = None,
    ) -> None:
        self._score_mgr = score_manager
        self._background = background
        self._on_result = on_result
        self._threads: list[threading.Thread] = []

    def __call__(self, record: SubmissionRecord) -> None:
        if not self._background:
            self._write(record)
            return

        thread = threading.Thread(
            target=self._write,
            args=(record,),
            daemon=True,
            name=f"submit-{record.player_id[:8]}",
        )
        self._threads = [t for t in self._threads if t.is_alive()]
        self._threads.append(thread)
        thread.start()

    def _write(self, record: SubmissionRecord) -> WriteResult:
        try:
            result = self._score_mgr.insert(record)
        except Exception as exc:
            logger.exception("Unexpected error writing score for %s", record.player_id)
            result = WriteResult.failure(str(exc) or type(exc).__name__)
        if not result.ok:
            logger.warning(
                "Leaderboard write failed for %s: %s", record.player_id, result.error
            )
        if self._on_result is not None:
            try:
                self._on_result(result)
            except Exception:
                logger.exception("Error in submission result callback")
        return result

    @property
    def pending(self) -> int:
        """Number of writes still in flight."""
        return sum(1 for t in self._threads if t.is_alive())

    def wait(self, timeout: float = 5.0) -> None:
        """Block until in-flight writes finish (shutdown and tests)."""
        for thread in list(self._threads):
            thread.join(timeout=timeout)
        self._threads = [t for t in self._threads if t.is_alive()]
