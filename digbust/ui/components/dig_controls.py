"""Dig controls: the Dig button while playing, Play Again once finished."""

from __future__ import annotations

import streamlit as st


def render_dig_controls(is_playing: bool, attempts: int) -> str | None:
    """Render the contextual action button.

    Returns:
        ``"dig"``, ``"play_again"``, or ``None`` if no action taken.
    """
    if is_playing:
        if st.button(
            "Dig",
            key=f"btn_dig_{attempts}",
            type="primary",
            use_container_width=True,
        ):
            return "dig"
        return None

    if st.button(
        "Play Again",
        key="btn_play_again",
        type="primary",
        use_container_width=True,
    ):
        return "play_again"
    return None
