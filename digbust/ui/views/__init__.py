"""Page renderers for Dig & Bust."""

from digbust.ui.views.home import render_home_page
from digbust.ui.views.leaderboard import render_leaderboard_page
from digbust.ui.views.play import render_play_page

__all__ = ["render_home_page", "render_leaderboard_page", "render_play_page"]
