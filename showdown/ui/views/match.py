"""Match page — boards, card pool, educational toggles and round controls."""

from __future__ import annotations

import time

import streamlit as st

from showdown.engine.base import IllegalActionError, Phase
from showdown.host.controller import MatchController
from showdown.ui.components.board import render_board, render_expanded_values, render_pool
from showdown.ui.components.scoreboard import render_scoreboard

# Longest pause between reruns while timers are pending
_POLL_SECONDS = 0.25


def render_match_page() -> None:
    """Render the live match."""
    ss = st.session_state
    controller: MatchController | None = ss.get("controller")
    if controller is None:
        ss["page"] = "setup"
        st.rerun()
        return

    controller.tick()
    if ss.get("page") != "match":
        st.rerun()
        return

    state = controller.state
    config = state.config

    st.title(config.title)
    render_scoreboard(state)
    st.info(state.status_message)

    show_labels = show_numbers = show_words = False
    if config.enable_hints:
        cols = st.columns(3)
        show_labels = cols[0].toggle("📊 Place values", key="show_labels")
        show_numbers = cols[1].toggle("🔢 Expanded numbers", key="show_numbers")
        show_words = cols[2].toggle("📝 Expanded words", key="show_words")

    render_board(state, state.ai_hand, f"{config.ai_name}'s Turn", True, show_labels)
    render_expanded_values(state, state.ai_hand, show_numbers, show_words)

    st.divider()

    action = render_board(state, state.student_hand, f"{config.player_name}'s Turn", False, show_labels)
    render_expanded_values(state, state.student_hand, show_numbers, show_words)
    picked = render_pool(state)

    advance = False
    if state.phase == Phase.REVEALING:
        advance = st.button("Next Round", type="primary", use_container_width=True)

    try:
        if picked is not None:
            controller.select_card(picked)
        elif action is not None:
            kind, target = action
            if kind == "slot":
                controller.select_slot(target)
            else:
                controller.return_card_to_pool(target)
        elif advance:
            controller.advance_to_next_round()
        else:
            _wait_for_timers(controller)
            return
    except IllegalActionError as exc:
        st.warning(str(exc))
        return
    st.rerun()


def _wait_for_timers(controller: MatchController) -> None:
    """Sleep until the next timer is due, then rerun the script."""
    delay = controller.scheduler.next_delay()
    if delay is None:
        return
    time.sleep(min(delay, _POLL_SECONDS))
    st.rerun()
