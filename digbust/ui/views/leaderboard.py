"""Leaderboard page: all-time and today's top miners."""

from __future__ import annotations

import logging

import httpx
import streamlit as st
from postgrest.exceptions import APIError

from digbust.config.settings import get_settings
from digbust.database.client import get_supabase_client
from digbust.database.scores import ScoreManager
from digbust.ui.components.leaderboard_table import (
    render_leaderboard_table,
    render_recent_runs,
)

logger = logging.getLogger(__name__)


def render_leaderboard_page() -> None:
    """Render the leaderboard page."""
    ss = st.session_state
    st.title("Leaderboard")
    st.caption("Top miners who reached the diamond wall")

    limit = get_settings().leaderboard_limit
    score_mgr = ScoreManager(get_supabase_client())

    player_id = ss.get("player_id")
    all_time_tab, today_tab, mine_tab = st.tabs(["All Time", "Today", "My Runs"])
    try:
        with all_time_tab:
            render_leaderboard_table(score_mgr.top_scores(limit), player_id)
        with today_tab:
            render_leaderboard_table(score_mgr.today_scores(limit), player_id)
        with mine_tab:
            if player_id:
                render_recent_runs(score_mgr.list_by_player(player_id))
            else:
                st.info("Enter a name on the home page to keep track of your runs.")
    except (APIError, httpx.HTTPError) as exc:
        logger.error("Error fetching scores: %s", exc)
        st.error(f"Could not load the leaderboard ({type(exc).__name__}).")

    st.divider()
    if st.button("Start Digging!", type="primary", use_container_width=True):
        ss["page"] = "play"
        st.rerun()
