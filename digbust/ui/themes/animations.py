"""CSS injection and HTML animation helpers for the mine theme."""

from pathlib import Path

import streamlit as st


def load_css() -> None:
    """Inject the mine CSS theme into the Streamlit app."""
    css_path = Path(__file__).parent / "mine.css"
    css_text = css_path.read_text(encoding="utf-8")
    st.markdown(f"<style>{css_text}</style>", unsafe_allow_html=True)


def render_bust_animation() -> None:
    """Render the bust overlay with shake animation."""
    st.markdown(
        '<div class="bust-overlay">'
        "<h2>BUSTED!</h2>"
        "<p>You were SO close... don't give up next time!</p>"
        "</div>",
        unsafe_allow_html=True,
    )


def render_jackpot_animation(score: int) -> None:
    """Render the jackpot overlay with glow animation."""
    st.markdown(
        '<div class="jackpot-overlay">'
        '<span class="diamond">&#128142;</span>'
        "<h1>JACKPOT!</h1>"
        f"<p>You broke through the diamond wall with {score} points.</p>"
        "</div>",
        unsafe_allow_html=True,
    )


def render_gem_popup(points: int) -> None:
    """Render an animated gem reward popup."""
    st.markdown(
        f'<div class="gem-popup">+{points} &#128142;</div>',
        unsafe_allow_html=True,
    )


def render_progress_bar(progress: float, message: str) -> None:
    """Render progress toward the diamond wall with its motivational message.

    Args:
        progress: Display progress (0-100).
        message: Tiered message for the current progress.
    """
    level = "hot" if progress >= 75 else "warm" if progress >= 50 else "cold"
    st.markdown(
        f'<div class="progress-message {level}">{message}</div>',
        unsafe_allow_html=True,
    )
    st.progress(min(int(round(progress)), 100))
