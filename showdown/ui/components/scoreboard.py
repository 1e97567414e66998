"""Scoreboard component — round number, both scores and the target."""

from __future__ import annotations

import streamlit as st

from showdown.engine.match import MatchState


def render_scoreboard(state: MatchState) -> None:
    """Render the scoreboard panel.

    Args:
        state: Current match state.
    """
    config = state.config
    cols = st.columns(3)
    cols[0].metric(config.player_name, state.student_score)
    cols[1].metric("Round", state.round_number or "-")
    cols[2].metric(config.ai_name, state.ai_score)
    st.caption(
        f"First to {config.winning_score} points wins — make the "
        f"**{config.objective.value}** number!"
    )
