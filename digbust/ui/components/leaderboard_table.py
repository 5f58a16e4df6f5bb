"""Leaderboard table: ranked finished sessions."""

from __future__ import annotations

import html

import streamlit as st

from digbust.database.models import Score


def _rank_label(rank: int) -> str:
    if rank == 1:
        return "1st"
    if rank == 2:
        return "2nd"
    if rank == 3:
        return "3rd"
    return f"#{rank}"


def render_leaderboard_table(scores: list[Score], my_player_id: str | None = None) -> None:
    """Render the leaderboard rows.

    Args:
        scores: Rows ordered by score, highest first.
        my_player_id: Highlights the local player's rows when given.
    """
    if not scores:
        st.info("No scores yet. Be the first to dig!")
        return

    rows = ['<div class="leaderboard">']
    for rank, row in enumerate(scores, 1):
        classes = ["leaderboard-row"]
        if rank <= 3:
            classes.append("podium")

        name = html.escape(row.display_name)
        if my_player_id and row.player_id == my_player_id:
            name += " (You)"

        result = "&#128142; Jackpot" if row.is_jackpot else "&#128165; Bust"
        rows.append(
            f'<div class="{" ".join(classes)}">'
            f'<span class="rank">{_rank_label(rank)}</span>'
            f'<span class="name">{name}</span>'
            f'<span class="score">{row.score:,}</span>'
            f'<span class="digs">{row.digs}</span>'
            f'<span class="result">{result}</span>'
            f"</div>"
        )
    rows.append("</div>")
    st.markdown("".join(rows), unsafe_allow_html=True)


def render_recent_runs(scores: list[Score]) -> None:
    """Render a player's own runs, newest first."""
    if not scores:
        st.info("No finished runs yet.")
        return

    rows = ['<div class="leaderboard">']
    for row in scores:
        result = "&#128142; Jackpot" if row.is_jackpot else "&#128165; Bust"
        rows.append(
            f'<div class="leaderboard-row">'
            f'<span class="rank">{row.created_at:%b %d %H:%M}</span>'
            f'<span class="score">{row.score:,}</span>'
            f'<span class="digs">{row.digs}</span>'
            f'<span class="result">{result}</span>'
            f"</div>"
        )
    rows.append("</div>")
    st.markdown("".join(rows), unsafe_allow_html=True)
