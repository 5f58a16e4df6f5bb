"""
Dig & Bust Database Layer.

Supabase integration for the leaderboard plus the local stats store.
"""

from digbust.database.client import get_supabase_client
from digbust.database.models import Score
from digbust.database.scores import ScoreManager, WriteResult
from digbust.database.stats_store import PlayerStats, StatsStore

__all__ = [
    "get_supabase_client",
    "PlayerStats",
    "Score",
    "ScoreManager",
    "StatsStore",
    "WriteResult",
]
