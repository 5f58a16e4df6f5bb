"""Dig & Bust: Streamlit Application Entrypoint."""

from __future__ import annotations

import streamlit as st


def main() -> None:
    """Application entrypoint. Must call ``st.set_page_config`` first."""
    st.set_page_config(
        page_title="Dig & Bust",
        page_icon="⛏️",
        layout="centered",
        initial_sidebar_state="collapsed",
    )

    from digbust.config.settings import configure_logging, get_settings
    from digbust.ui.themes import load_css

    configure_logging(get_settings().log_level)
    load_css()

    if "page" not in st.session_state:
        st.session_state["page"] = "home"

    # Page routing (lazy imports to avoid circular deps)
    page = st.session_state["page"]

    if page == "home":
        from digbust.ui.views.home import render_home_page
        render_home_page()
    elif page == "play":
        from digbust.ui.views.play import render_play_page
        render_play_page()
    elif page == "leaderboard":
        from digbust.ui.views.leaderboard import render_leaderboard_page
        render_leaderboard_page()
    else:
        st.session_state["page"] = "home"
        st.rerun()


if __name__ == "__main__":
    main()
