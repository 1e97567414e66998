"""Place Value Showdown — Streamlit Application Entrypoint."""

from __future__ import annotations

import streamlit as st

from showdown.config.settings import configure_logging


_RULES = """\
**Goal:** Win rounds by building the better number!

**Each round:**
- You and the teacher are dealt the same number of digit cards
- Pick a card, then pick an empty slot to place it
- Click a placed card to send it back to your pile
- The teacher arranges its cards at the same time

**Scoring:**
- Largest mode: the bigger number wins the round
- Smallest mode: the smaller number wins the round
- Equal numbers are a tie (no point)
- First to the winning score takes the match
"""


def main() -> None:
    """Application entrypoint. Must call ``st.set_page_config`` first."""
    st.set_page_config(
        page_title="Place Value Showdown",
        page_icon="🏆",
        layout="wide",
        initial_sidebar_state="collapsed",
    )
    configure_logging()

    with st.sidebar:
        st.markdown("### How to Play")
        st.markdown(_RULES)

    # Session state defaults
    if "page" not in st.session_state:
        st.session_state["page"] = "setup"

    # Page routing (lazy imports to avoid circular deps)
    page = st.session_state["page"]

    if page == "setup":
        from showdown.ui.views.setup import render_setup_page
        render_setup_page()
    elif page == "match":
        from showdown.ui.views.match import render_match_page
        render_match_page()
    elif page == "results":
        from showdown.ui.views.results import render_results_page
        render_results_page()
    else:
        st.session_state["page"] = "setup"
        st.rerun()


if __name__ == "__main__":
    main()
