"""
Place Value Showdown - Match Event Definitions

Event types and payloads emitted by the host as the match state changes.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any

from showdown.engine.base import Phase
from showdown.engine.match import MatchState


class MatchEvent(Enum):
    """Events that can occur during a match."""

    MATCH_ANNOUNCED = auto()
    ROUND_STARTED = auto()
    ARRANGING_STARTED = auto()
    CARD_SELECTED = auto()
    CARD_PLACED = auto()
    CARD_RETURNED = auto()
    STUDENT_READY = auto()
    AI_READY = auto()
    ROUND_REVEALED = auto()
    GAME_COMPLETED = auto()
    STATE_UPDATED = auto()


@dataclass
class EventPayload:
    """Wrapper for match event data."""

    event: MatchEvent
    round_number: int
    data: dict[str, Any] = field(default_factory=dict)


# Map phase changes to match events
_PHASE_EVENT_MAP: dict[Phase, MatchEvent] = {
    Phase.ARRANGING: MatchEvent.ARRANGING_STARTED,
    Phase.REVEALING: MatchEvent.ROUND_REVEALED,
    Phase.GAME_COMPLETE: MatchEvent.GAME_COMPLETED,
}


def _placed_count(state: MatchState) -> int:
    return sum(1 for card in state.student_hand if card.is_placed)


def classify_transition(old: MatchState, new: MatchState) -> MatchEvent | None:
    """Determine the match event between two successive states.

    Returns None when nothing changed.
    """
    if old == new:
        return None

    if new.round_number != old.round_number:
        return MatchEvent.ROUND_STARTED
    if new.phase != old.phase and new.phase in _PHASE_EVENT_MAP:
        return _PHASE_EVENT_MAP[new.phase]

    if new.student_ready and not old.student_ready:
        return MatchEvent.STUDENT_READY
    if new.ai_ready and not old.ai_ready:
        return MatchEvent.AI_READY

    placed_before, placed_after = _placed_count(old), _placed_count(new)
    if placed_after > placed_before:
        return MatchEvent.CARD_PLACED
    if placed_after < placed_before:
        return MatchEvent.CARD_RETURNED
    if new.selected_card_id != old.selected_card_id:
        return MatchEvent.CARD_SELECTED

    if new.phase == Phase.DEALING and new.round_number == 0:
        return MatchEvent.MATCH_ANNOUNCED

    return MatchEvent.STATE_UPDATED


def build_payload(event: MatchEvent, state: MatchState) -> EventPayload:
    """Snapshot of the fields a subscriber typically needs."""
    data: dict[str, Any] = {
        "phase": state.phase.value,
        "student_score": state.student_score,
        "ai_score": state.ai_score,
        "status_message": state.status_message,
    }
    if state.last_round_result is not None:
        result = state.last_round_result
        data["round_result"] = {
            "student_value": str(result.student_value),
            "ai_value": str(result.ai_value),
            "winner": result.winner.value,
        }
    return EventPayload(event=event, round_number=state.round_number, data=data)
