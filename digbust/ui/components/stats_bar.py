"""Stats bar component: score, digs, and best score."""

from __future__ import annotations

import streamlit as st


def render_stats_bar(score: int, digs: int, best_score: int) -> None:
    """Render the three headline counters above the dig area."""
    cells = [
        ("score", score, "Score"),
        ("digs", digs, "Digs"),
        ("best", best_score, "Best"),
    ]
    html = ['<div class="stats-bar">']
    for css_class, value, label in cells:
        html.append(
            f'<div class="stat {css_class}">'
            f'<div class="value">{value}</div>'
            f'<div class="label">{label}</div>'
            f"</div>"
        )
    html.append("</div>")
    st.markdown("".join(html), unsafe_allow_html=True)
