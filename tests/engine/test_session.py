"""
Dig & Bust - Session State Machine Tests

Transitions, terminal-state guards, progress display, and end-to-end runs.
"""

import random

import pytest

from digbust.engine.base import (
    DigConfig,
    DigOutcome,
    Session,
    SessionFinishedError,
    SessionStatus,
)
from digbust.engine.session import DisplayState, ProgressTier, SessionEngine


# === Lifecycle ===


class TestNewSession:
    def test_new_session_defaults(self):
        session = SessionEngine.new_session()
        assert session == Session()
        assert session.status is SessionStatus.PLAYING

    def test_reset_returns_fresh_session(self):
        assert SessionEngine.reset() == Session()


# === Dig transitions ===


class TestDig:
    """Tests for SessionEngine.dig()."""

    def test_dirt_keeps_playing(self, config, scripted_rng):
        session = SessionEngine.dig(Session(score=10, attempts=3), config, scripted_rng(0.99, 0.99))
        assert session.status is SessionStatus.PLAYING
        assert session.score == 10
        assert session.attempts == 4
        assert session.last_outcome is DigOutcome.DIRT
        assert session.last_reward == 0

    def test_gem_adds_reward(self, config, scripted_rng):
        session = SessionEngine.dig(Session(score=10), config, scripted_rng(0.99, 0.0, 0.5))
        assert session.status is SessionStatus.PLAYING
        assert session.last_outcome is DigOutcome.GEM
        assert session.score == 10 + session.last_reward
        assert 5 <= session.last_reward <= 25

    def test_bust_keeps_score(self, config, scripted_rng):
        session = SessionEngine.dig(Session(score=42, attempts=7), config, scripted_rng(0.0))
        assert session.status is SessionStatus.BUSTED
        assert session.score == 42
        assert session.attempts == 8
        assert session.last_outcome is DigOutcome.BUST
        assert session.last_reward == 0

    def test_jackpot_adds_bonus(self, config, scripted_rng):
        session = SessionEngine.dig(Session(score=80, attempts=30), config, scripted_rng(0.0))
        assert session.status is SessionStatus.JACKPOT
        assert session.score == 80 + config.jackpot_bonus
        assert session.attempts == 31
        assert session.last_outcome is DigOutcome.JACKPOT
        assert session.last_reward == config.jackpot_bonus

    def test_returns_new_instance(self, config, scripted_rng):
        original = Session()
        updated = SessionEngine.dig(original, config, scripted_rng(0.99, 0.99))
        assert updated is not original
        assert original == Session()

    @pytest.mark.parametrize("status", [SessionStatus.BUSTED, SessionStatus.JACKPOT])
    def test_dig_on_terminal_raises(self, config, status, scripted_rng):
        session = Session(score=15, attempts=9, status=status, last_outcome=DigOutcome.BUST)
        rng = scripted_rng()
        with pytest.raises(SessionFinishedError):
            SessionEngine.dig(session, config, rng)
        assert session.attempts == 9
        assert rng.calls == 0

    def test_score_never_decreases(self, config):
        rng = random.Random(99).random
        for _ in range(200):
            session = Session()
            while session.is_playing:
                previous = session.score
                session = SessionEngine.dig(session, config, rng)
                assert session.score >= previous

    def test_attempts_advance_by_one(self, config):
        rng = random.Random(5).random
        session = Session()
        while session.is_playing:
            before = session.attempts
            session = SessionEngine.dig(session, config, rng)
            assert session.attempts == before + 1


# === End-to-end scenarios ===


class TestScenarios:
    def test_first_dig_jackpot(self, always_jackpot_config):
        session = SessionEngine.dig(Session(), always_jackpot_config, random.Random(3).random)
        assert session.status is SessionStatus.JACKPOT
        assert session.last_outcome is DigOutcome.JACKPOT
        assert session.score == always_jackpot_config.jackpot_bonus
        assert session.attempts == 1

    def test_first_dig_bust(self, always_bust_config):
        session = SessionEngine.dig(Session(), always_bust_config, random.Random(3).random)
        assert session.status is SessionStatus.BUSTED
        assert session.score == 0
        assert session.attempts == 1

    def test_jackpot_unlocks_at_threshold(self):
        config = DigConfig(
            bust_base_chance=0.0,
            bust_increment=0.0,
            gem_chance=0.5,
            jackpot_threshold=30,
            jackpot_base_chance=1.0,
            jackpot_max_chance=1.0,
        )
        always_zero = lambda: 0.0

        session = Session()
        for _ in range(30):
            session = SessionEngine.dig(session, config, always_zero)
            assert session.status is SessionStatus.PLAYING
            assert session.last_outcome is DigOutcome.GEM

        assert session.attempts == 30
        assert session.score == 30 * config.gem_min_points

        session = SessionEngine.dig(session, config, always_zero)
        assert session.status is SessionStatus.JACKPOT
        assert session.attempts == 31
        assert session.score == 30 * config.gem_min_points + config.jackpot_bonus


# === Progress ===


class TestProgressFraction:
    """Tests for SessionEngine.progress_fraction()."""

    @pytest.mark.parametrize(
        "attempts,expected",
        [(0, 0.0), (15, 25.0), (30, 50.0), (31, 52.0), (40, 70.0), (55, 100.0), (500, 100.0)],
    )
    def test_known_points(self, config, attempts, expected):
        assert SessionEngine.progress_fraction(attempts, config) == pytest.approx(expected)

    def test_monotonic_and_bounded(self, config):
        values = [SessionEngine.progress_fraction(n, config) for n in range(200)]
        assert values == sorted(values)
        assert all(0.0 <= v <= 100.0 for v in values)

    def test_zero_threshold(self):
        config = DigConfig(jackpot_threshold=0)
        assert SessionEngine.progress_fraction(0, config) == 50.0
        assert SessionEngine.progress_fraction(25, config) == 100.0

    def test_ignores_odds(self):
        a = DigConfig(bust_base_chance=0.0)
        b = DigConfig(bust_base_chance=0.9)
        assert SessionEngine.progress_fraction(12, a) == SessionEngine.progress_fraction(12, b)


class TestProgressTier:
    @pytest.mark.parametrize(
        "progress,tier",
        [
            (0, ProgressTier.KEEP_DIGGING),
            (24.9, ProgressTier.KEEP_DIGGING),
            (25, ProgressTier.GETTING_CLOSER),
            (49.9, ProgressTier.GETTING_CLOSER),
            (50, ProgressTier.NEAR_THE_WALL),
            (74.9, ProgressTier.NEAR_THE_WALL),
            (75, ProgressTier.SO_CLOSE),
            (100, ProgressTier.SO_CLOSE),
        ],
    )
    def test_thresholds(self, progress, tier):
        assert SessionEngine.progress_tier(progress) is tier

    def test_messages(self):
        assert SessionEngine.progress_message(0) == "KEEP DIGGING!"
        assert SessionEngine.progress_message(30) == "Getting closer..."
        assert SessionEngine.progress_message(60) == "NEAR THE DIAMOND WALL!"
        assert SessionEngine.progress_message(90) == "SO CLOSE! DON'T GIVE UP!"


class TestDisplay:
    def test_display_snapshot(self, config):
        session = Session(score=35, attempts=31, last_outcome=DigOutcome.GEM, last_reward=12)
        state = SessionEngine.display(session, config)
        assert isinstance(state, DisplayState)
        assert state.score == 35
        assert state.attempts == 31
        assert state.status is SessionStatus.PLAYING
        assert state.last_outcome is DigOutcome.GEM
        assert state.last_reward == 12
        assert state.progress == pytest.approx(52.0)
        assert state.tier is ProgressTier.NEAR_THE_WALL
        assert state.message == "NEAR THE DIAMOND WALL!"

    def test_display_fresh_session(self, config):
        state = SessionEngine.display(Session(), config)
        assert state.last_outcome is None
        assert state.message == "KEEP DIGGING!"
