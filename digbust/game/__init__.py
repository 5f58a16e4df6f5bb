"""
Dig & Bust Game Driver.

Ties the pure engine to the stats store and the leaderboard sink.
"""

from digbust.game.manager import DigGameManager, GameView
from digbust.game.submitter import BackgroundSubmitter

__all__ = ["BackgroundSubmitter", "DigGameManager", "GameView"]
