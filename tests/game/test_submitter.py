"""Tests for digbust/game/submitter.py: BackgroundSubmitter."""

from unittest.mock import MagicMock

import pytest

from digbust.database.scores import WriteResult
from digbust.engine.base import DigOutcome
from digbust.engine.submission import SubmissionRecord
from digbust.game.submitter import BackgroundSubmitter


@pytest.fixture
def record() -> SubmissionRecord:
    return SubmissionRecord("guest_abc123", "Digger", 40, 12, DigOutcome.BUST, 0)


@pytest.fixture
def score_mgr():
    mgr = MagicMock()
    mgr.insert.return_value = WriteResult.failure("offline")
    return mgr


class TestInline:
    def test_writes_inline(self, score_mgr, record):
        results = []
        submitter = BackgroundSubmitter(score_mgr, background=False, on_result=results.append)
        submitter(record)
        score_mgr.insert.assert_called_once_with(record)
        assert results == [WriteResult.failure("offline")]

    def test_callback_error_does_not_propagate(self, score_mgr, record):
        def boom(result):
            raise RuntimeError("callback broke")

        submitter = BackgroundSubmitter(score_mgr, background=False, on_result=boom)
        submitter(record)
        score_mgr.insert.assert_called_once()


class TestBackground:
    def test_writes_on_thread(self, score_mgr, record):
        results = []
        submitter = BackgroundSubmitter(score_mgr, on_result=results.append)
        submitter(record)
        submitter.wait()
        assert submitter.pending == 0
        score_mgr.insert.assert_called_once_with(record)
        assert results[0].ok is False

    def test_insert_error_reported_from_thread(self, score_mgr, record):
        score_mgr.insert.side_effect = OSError("dns")
        results = []
        submitter = BackgroundSubmitter(score_mgr, on_result=results.append)
        submitter(record)
        submitter.wait()
        assert results == [WriteResult.failure("dns")]


class TestInsertErrors:
    def test_insert_error_reported_inline(self, score_mgr, record):
        score_mgr.insert.side_effect = RuntimeError("driver crashed")
        results = []
        submitter = BackgroundSubmitter(score_mgr, background=False, on_result=results.append)
        submitter(record)
        assert results == [WriteResult.failure("driver crashed")]

    def test_write_returns_failure(self, score_mgr, record):
        score_mgr.insert.side_effect = KeyError("id")
        result = BackgroundSubmitter(score_mgr, background=False)._write(record)
        assert result.ok is False
        assert result.error
