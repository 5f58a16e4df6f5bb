"""Home page: title, rules, and player name entry."""

from __future__ import annotations

import uuid

import streamlit as st

from digbust.engine.base import DigConfig
from digbust.engine.submission import PlayerIdentity


def _rules(config: DigConfig) -> str:
    return f"""\
**Keep digging toward the diamond wall!**

- Each dig turns up **dirt** (nothing), a **gem** ({config.gem_min_points}-{config.gem_max_points} pts),
  a **bust**, or the **jackpot**
- The tunnel gets shakier with every dig: bust odds start at
  {config.bust_base_chance:.0%} and rise {config.bust_increment:.1%} per dig
- After **{config.jackpot_threshold} digs** the diamond wall is within reach:
  jackpot odds start at {config.jackpot_base_chance:.0%}, grow {config.jackpot_increment:.0%}
  per dig, up to {config.jackpot_max_chance:.0%}
- **Jackpot** = +{config.jackpot_bonus} pts and the run ends in glory
- **Bust** = the run ends, but you keep what you dug up

Every finished run goes on the leaderboard.
"""


def render_home_page() -> None:
    """Render the home / landing page."""
    ss = st.session_state
    st.title("Dig & Bust")
    st.caption("How deep will you dig before you give up?")

    with st.form("enter_mine"):
        name = st.text_input(
            "Miner name",
            value=ss.get("display_name", ""),
            max_chars=30,
            placeholder="Leave blank to play as a guest",
        )
        submitted = st.form_submit_button(
            "Enter the Mine", type="primary", use_container_width=True
        )

    if submitted:
        name = name.strip()
        if name:
            player_id = ss.get("player_id") or f"guest_{uuid.uuid4().hex[:12]}"
            ss["player_id"] = player_id
            ss["display_name"] = name
            ss["identity"] = PlayerIdentity(player_id=player_id, display_name=name)
        else:
            ss["identity"] = None
        ss["page"] = "play"
        st.rerun()

    if st.button("Leaderboard", use_container_width=True):
        ss["page"] = "leaderboard"
        st.rerun()

    st.divider()

    with st.expander("How to play"):
        st.markdown(_rules(DigConfig()))
