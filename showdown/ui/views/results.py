"""Results page — final score, high score persistence and replay."""

from __future__ import annotations

import logging

import streamlit as st

from showdown.config.settings import get_settings
from showdown.database.client import get_supabase_client
from showdown.database.high_scores import HighScoreManager
from showdown.engine.base import MatchResult

logger = logging.getLogger(__name__)


def render_results_page() -> None:
    """Render the results / victory page."""
    ss = st.session_state
    controller = ss.get("controller")
    result: MatchResult | None = ss.get("match_result")

    if controller is None or result is None:
        ss["page"] = "setup"
        st.rerun()
        return

    state = controller.state
    config = state.config

    st.title("Game Over")
    st.success(state.status_message)

    cols = st.columns(2)
    cols[0].metric(config.player_name, result.final_student_score)
    cols[1].metric(config.ai_name, result.final_ai_score)

    config_id = st.query_params.get("config", config.title)
    _save_score(result, config.player_name, config_id)

    st.divider()

    col1, col2 = st.columns(2)

    with col1:
        if st.button("Play Again", type="primary", use_container_width=True):
            from showdown.ui.views.setup import start_match
            start_match(config)

    with col2:
        if st.button("New Setup", use_container_width=True):
            _return_home()


def _save_score(result: MatchResult, player_name: str, config_id: str) -> None:
    """Persist the final score once per match and show the leaderboard."""
    ss = st.session_state
    settings = get_settings()
    if not settings.persistence_enabled:
        st.caption("Scores are not saved (no database configured).")
        return

    try:
        manager = HighScoreManager(get_supabase_client(), settings.high_scores_table)
        if not ss.get("_score_saved"):
            manager.record_result(result, player_name, config_id)
            ss["_score_saved"] = True
        top = manager.top_scores(config_id)
    except Exception as exc:
        logger.exception("Could not save score for %s", player_name)
        st.error(f"Could not save your score. ({type(exc).__name__})")
        return

    st.subheader("High Scores")
    for rank, entry in enumerate(top, 1):
        st.markdown(f"{rank}. **{entry.player_name}** — {entry.score}")


def _return_home() -> None:
    """Clean up session and go back to setup."""
    ss = st.session_state
    controller = ss.pop("controller", None)
    if controller is not None:
        controller.stop()
    for key in ("match_result", "_score_saved"):
        ss.pop(key, None)
    ss["page"] = "setup"
    st.rerun()
