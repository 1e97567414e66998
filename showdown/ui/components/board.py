"""
Place-value board component.

Displays one side's slots (with optional place-value labels), the
student's card pool, and the expanded notation once a round is revealed.
"""

from __future__ import annotations

import streamlit as st

from showdown.engine.base import DigitCard, Phase, card_in_slot
from showdown.engine.match import MatchState
from showdown.engine.place_value import PlaceValueEngine


def render_board(
    state: MatchState,
    cards: tuple[DigitCard, ...],
    owner_name: str,
    is_ai: bool,
    show_labels: bool,
) -> tuple[str, int | str] | None:
    """
    Render a row of slots for one side.

    Args:
        state: Current match state
        cards: The side's hand
        owner_name: Display name shown above the slots
        is_ai: AI slots are read-only and hidden until the reveal
        show_labels: Show place-value names under each slot

    Returns:
        ``("slot", index)`` when an empty student slot is clicked,
        ``("return", card_id)`` when a slotted student card is clicked,
        otherwise None.
    """
    st.markdown(f"#### {owner_name}")
    layout = PlaceValueEngine.slot_layout(state.config)
    is_ready = state.ai_ready if is_ai else state.student_ready
    arranging = state.phase == Phase.ARRANGING

    # Decimal point and commas take a narrow column of their own
    widths: list[float] = []
    for info in layout:
        if info.decimal_point_before:
            widths.append(0.3)
        widths.append(1.0)
        if info.comma_after:
            widths.append(0.3)
    columns = iter(st.columns(widths))

    action = None
    for info in layout:
        if info.decimal_point_before:
            next(columns).markdown("### .")

        with next(columns):
            card = card_in_slot(cards, info.index)
            if card is None:
                label = "·"
            elif is_ai and not state.ai_hand_revealed:
                label = "?"
            else:
                label = str(card.digit)

            clicked = st.button(
                label,
                key=f"{'ai' if is_ai else 'student'}_slot_{state.round_number}_{info.index}",
                use_container_width=True,
                disabled=is_ai or not arranging,
            )
            if clicked and not is_ai:
                action = ("slot", info.index) if card is None else ("return", card.card_id)
            if show_labels:
                st.caption(info.label)

        if info.comma_after:
            next(columns).markdown("### ,")

    if arranging and is_ready:
        st.success("✅ Ready!")

    return action


def render_pool(state: MatchState) -> str | None:
    """
    Render the student's unplaced cards.

    Returns:
        The clicked card id, or None.
    """
    pool = state.pool
    if not pool:
        return None

    st.caption("Your cards — pick one, then pick an empty slot")
    clicked = None
    for column, card in zip(st.columns(len(pool)), pool):
        with column:
            selected = card.card_id == state.selected_card_id
            if st.button(
                f"[{card.digit}]" if selected else str(card.digit),
                key=f"pool_{state.round_number}_{card.card_id}",
                use_container_width=True,
                type="primary" if selected else "secondary",
                disabled=state.phase != Phase.ARRANGING,
            ):
                clicked = card.card_id
    return clicked


def render_expanded_values(
    state: MatchState,
    cards: tuple[DigitCard, ...],
    show_numbers: bool,
    show_words: bool,
) -> None:
    """Show expanded notation and words for a revealed hand."""
    if state.phase != Phase.REVEALING or state.last_round_result is None:
        return

    config = state.config
    value = PlaceValueEngine.value_of(cards, config)
    if show_numbers:
        st.markdown(
            f"**{PlaceValueEngine.format_value(value, config)} =** "
            f"{PlaceValueEngine.expanded_notation(cards, config) or '0'}"
        )
    if show_words:
        st.markdown(f"**In Words:** {PlaceValueEngine.expanded_words(value, config)}")
