"""Dig & Bust: a push-your-luck mining game with a shared leaderboard."""

__version__ = "0.1.0"
