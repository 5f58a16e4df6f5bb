"""
Dig & Bust Game Engine.

Pure Python game logic with zero UI/database dependencies.
Handles dig outcomes, session transitions, and submission throttling.
"""

from digbust.engine.base import (
    DigConfig,
    DigOutcome,
    DigResult,
    DigUsageError,
    RandomSource,
    Session,
    SessionFinishedError,
    SessionInProgressError,
    SessionStatus,
)
from digbust.engine.outcome import OutcomeEngine
from digbust.engine.session import DisplayState, ProgressTier, SessionEngine
from digbust.engine.submission import (
    PlayerIdentity,
    SubmissionGate,
    SubmissionRecord,
    SubmissionResult,
)

__all__ = [
    # Data Classes
    "DigConfig",
    "DigResult",
    "DisplayState",
    "PlayerIdentity",
    "Session",
    "SubmissionRecord",
    "SubmissionResult",
    # Enums
    "DigOutcome",
    "ProgressTier",
    "SessionStatus",
    # Errors
    "DigUsageError",
    "SessionFinishedError",
    "SessionInProgressError",
    # Engines
    "OutcomeEngine",
    "SessionEngine",
    "SubmissionGate",
    # Types
    "RandomSource",
]
