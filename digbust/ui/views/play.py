"""Play page: stats, progress, dig button, and end-of-run result."""

from __future__ import annotations

import streamlit as st

from digbust.config.settings import get_settings
from digbust.database.client import get_supabase_client
from digbust.database.scores import ScoreManager
from digbust.database.stats_store import StatsStore
from digbust.engine.base import DigConfig, DigOutcome, SessionStatus
from digbust.engine.submission import SubmissionGate
from digbust.game.manager import DigGameManager
from digbust.game.submitter import BackgroundSubmitter
from digbust.ui.components.dig_controls import render_dig_controls
from digbust.ui.components.stats_bar import render_stats_bar
from digbust.ui.themes.animations import (
    render_bust_animation,
    render_gem_popup,
    render_jackpot_animation,
    render_progress_bar,
)


def _get_manager() -> DigGameManager:
    """One manager per browser session, kept across reruns."""
    ss = st.session_state
    manager = ss.get("_game_manager")
    if manager is None:
        settings = get_settings()
        config = DigConfig()
        submitter = BackgroundSubmitter(
            ScoreManager(get_supabase_client()),
            background=settings.background_submit,
        )
        manager = DigGameManager(
            config,
            SubmissionGate(config, submitter),
            StatsStore(ss),
            ss.get("identity"),
            dig_delay_ms=settings.dig_delay_ms,
        )
        ss["_game_manager"] = manager
    manager.identity = ss.get("identity")
    return manager


def render_play_page() -> None:
    """Render the main play page."""
    ss = st.session_state
    manager = _get_manager()

    identity = manager.identity
    st.caption(f"Playing as **{identity.display_name if identity else 'Guest'}**")

    view = manager.view()
    state = view.state

    render_stats_bar(state.score, state.attempts, view.best_score)

    if state.status is SessionStatus.PLAYING:
        render_progress_bar(state.progress, state.message)
        if state.last_outcome is DigOutcome.GEM and state.last_reward > 0:
            render_gem_popup(state.last_reward)
    elif state.status is SessionStatus.JACKPOT:
        render_jackpot_animation(state.score)
        st.caption(f"Final score: **{state.score}** | Total digs: {state.attempts}")
    else:
        render_bust_animation()
        st.caption(f"Final score: **{state.score}** | Total digs: {state.attempts}")

    action = render_dig_controls(
        is_playing=state.status is SessionStatus.PLAYING,
        attempts=state.attempts,
    )

    if action == "dig":
        with st.spinner("Digging..."):
            manager.dig()
        st.rerun()
    elif action == "play_again":
        manager.play_again()
        st.rerun()

    st.caption(f"Attempt #{view.attempt_number}")

    col1, col2 = st.columns(2)
    with col1:
        if st.button("Leaderboard", use_container_width=True):
            ss["page"] = "leaderboard"
            st.rerun()
    with col2:
        if st.button("Change Name", use_container_width=True):
            ss["page"] = "home"
            st.rerun()
