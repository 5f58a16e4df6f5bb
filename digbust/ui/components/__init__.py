"""UI components for Dig & Bust."""

from digbust.ui.components.dig_controls import render_dig_controls
from digbust.ui.components.leaderboard_table import (
    render_leaderboard_table,
    render_recent_runs,
)
from digbust.ui.components.stats_bar import render_stats_bar

__all__ = [
    "render_dig_controls",
    "render_leaderboard_table",
    "render_recent_runs",
    "render_stats_bar",
]
