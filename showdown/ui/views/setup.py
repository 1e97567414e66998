"""Setup page — configure the board and start a match."""

from __future__ import annotations

import logging

import streamlit as st

from showdown.config.settings import get_settings
from showdown.engine.base import BoardConfig, Difficulty, MatchResult, Objective
from showdown.host.controller import MatchController, MatchTimings

logger = logging.getLogger(__name__)


def render_setup_page() -> None:
    """Render the match configuration form."""
    st.title("Place Value Showdown")
    st.caption("Build the biggest (or smallest) number before the teacher does!")

    with st.form("setup_form"):
        player_name = st.text_input("Your name", value="Student", max_chars=50)
        ai_name = st.text_input("Opponent name", value="Teacher", max_chars=50)
        whole_digits = st.selectbox("Number of digits", options=[1, 2, 3, 4, 5], index=2)
        objective = st.selectbox(
            "Objective",
            options=list(Objective),
            format_func=lambda o: f"{o.value.title()} number",
        )
        difficulty = st.selectbox(
            "Opponent difficulty",
            options=list(Difficulty),
            index=1,
            format_func=lambda d: d.value.title(),
        )
        winning_score = st.number_input("Winning score", min_value=1, max_value=20, value=5)
        include_decimal = st.toggle("Include decimal places", value=False)
        decimal_places = st.selectbox("Decimal places", options=[1, 2, 3], index=2)
        enable_hints = st.toggle("Enable place value toggle buttons", value=True)

        submitted = st.form_submit_button("Start Match", type="primary", use_container_width=True)

    if not submitted:
        return

    try:
        config = BoardConfig(
            whole_digit_count=whole_digits,
            include_decimal=include_decimal,
            decimal_place_count=decimal_places if include_decimal else 0,
            objective=objective,
            winning_score=int(winning_score),
            ai_difficulty=difficulty,
            player_name=player_name,
            ai_name=ai_name,
            enable_hints=enable_hints,
        )
    except ValueError as exc:
        st.error(str(exc))
        return

    start_match(config)


def start_match(config: BoardConfig) -> None:
    """Create a controller for *config* and switch to the match page."""
    ss = st.session_state

    previous = ss.get("controller")
    if previous is not None:
        previous.stop()

    def on_complete(result: MatchResult) -> None:
        ss["match_result"] = result
        ss["page"] = "results"

    controller = MatchController(
        config,
        timings=MatchTimings.from_settings(get_settings()),
        on_complete=on_complete,
    )
    controller.start()

    ss["controller"] = controller
    ss.pop("match_result", None)
    ss.pop("_score_saved", None)
    ss["page"] = "match"
    logger.info("Starting match for %s", config.player_name)
    st.rerun()
