"""
Place Value Showdown - Match Controller

Owns the live MatchState for one match and drives the timer-triggered
transitions (intro, deal, AI move, completion) through a TimerScheduler.
Player actions from the UI are forwarded to the pure MatchEngine; after
every transition the controller classifies the change, notifies
subscribers and reschedules timers.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

from showdown.engine.base import BoardConfig, MatchResult, Phase
from showdown.engine.match import MatchEngine, MatchState
from showdown.host.events import EventPayload, build_payload, classify_transition
from showdown.host.scheduler import TimerScheduler

if TYPE_CHECKING:
    from showdown.config.settings import Settings

logger = logging.getLogger(__name__)

INTRO_TIMER = "intro"
KICKOFF_TIMER = "kickoff"
DEAL_TIMER = "deal"
AI_MOVE_TIMER = "ai_move"
COMPLETE_TIMER = "complete"


@dataclass(frozen=True)
class MatchTimings:
    """Delays (seconds) between automatic transitions."""

    intro_delay: float = 3.0
    kickoff_delay: float = 1.5
    deal_delay: float = 1.5
    ai_min_delay: float = 2.0
    ai_max_delay: float = 5.0
    completion_delay: float = 3.0

    def __post_init__(self) -> None:
        if self.ai_max_delay < self.ai_min_delay:
            raise ValueError("ai_max_delay must not be smaller than ai_min_delay.")

    @classmethod
    def from_settings(cls, settings: Settings) -> MatchTimings:
        """Build timings from application settings."""
        return cls(
            intro_delay=settings.intro_delay_seconds,
            kickoff_delay=settings.kickoff_delay_seconds,
            deal_delay=settings.deal_delay_seconds,
            ai_min_delay=settings.ai_min_delay_seconds,
            ai_max_delay=settings.ai_max_delay_seconds,
            completion_delay=settings.completion_delay_seconds,
        )


class MatchController:
    """Drives one match for a host UI.

    The host forwards clicks to the action methods and calls ``tick``
    regularly so that due timers fire. ``on_complete`` receives the
    MatchResult exactly once, ``completion_delay`` seconds after the
    match ends.
    """

    def __init__(
        self,
        config: BoardConfig,
        scheduler: TimerScheduler | None = None,
        *,
        timings: MatchTimings | None = None,
        rng: random.Random | None = None,
        on_complete: Callable[[MatchResult], None] | None = None,
    ) -> None:
        self._state = MatchEngine.create_match(config)
        self._scheduler = scheduler if scheduler is not None else TimerScheduler()
        self._timings = timings if timings is not None else MatchTimings()
        self._rng = rng if rng is not None else random.Random()
        self._on_complete = on_complete
        self._listeners: list[Callable[[EventPayload], None]] = []
        self._started = False
        self._completed = False

    @property
    def state(self) -> MatchState:
        """Current match state."""
        return self._state

    @property
    def scheduler(self) -> TimerScheduler:
        return self._scheduler

    @property
    def is_completed(self) -> bool:
        """Whether the completion record has been delivered."""
        return self._completed

    def subscribe(self, listener: Callable[[EventPayload], None]) -> None:
        """Register a callback for every match event."""
        self._listeners.append(listener)

    def unsubscribe(self, listener: Callable[[EventPayload], None]) -> None:
        """Remove a previously registered callback."""
        if listener in self._listeners:
            self._listeners.remove(listener)

    # -- Lifecycle --------------------------------------------------------

    def start(self) -> None:
        """Begin the intro countdown. Calling again has no effect."""
        if self._started:
            return
        self._started = True
        logger.info(
            "Match started: %d whole + %d decimal slots, objective=%s, difficulty=%s",
            self._state.config.whole_digit_count,
            self._state.config.active_decimal_places,
            self._state.config.objective.value,
            self._state.config.ai_difficulty.value,
        )
        self._scheduler.schedule(INTRO_TIMER, self._timings.intro_delay, self._on_intro)

    def tick(self, now: float | None = None) -> int:
        """Fire due timers. Returns how many fired."""
        return self._scheduler.run_due(now)

    def stop(self) -> None:
        """Cancel every pending timer (host navigated away)."""
        for name in (INTRO_TIMER, KICKOFF_TIMER, DEAL_TIMER, AI_MOVE_TIMER, COMPLETE_TIMER):
            self._scheduler.cancel(name)
        logger.debug("Match stopped in round %d", self._state.round_number)

    # -- Player actions -------------------------------------------------

    def select_card(self, card_id: str) -> MatchState:
        return self._apply(MatchEngine.select_card(self._state, card_id))

    def select_slot(self, slot_index: int) -> MatchState:
        return self._apply(MatchEngine.select_slot(self._state, slot_index))

    def place_card(self, card_id: str, slot_index: int) -> MatchState:
        return self._apply(MatchEngine.place_card(self._state, card_id, slot_index))

    def return_card_to_pool(self, card_id: str) -> MatchState:
        return self._apply(MatchEngine.return_card_to_pool(self._state, card_id))

    def advance_to_next_round(self) -> MatchState:
        return self._apply(MatchEngine.advance_to_next_round(self._state, self._rng))

    # -- Timer callbacks --------------------------------------------------

    def _on_intro(self) -> None:
        self._apply(MatchEngine.announce_start(self._state))
        self._scheduler.schedule(KICKOFF_TIMER, self._timings.kickoff_delay, self._on_kickoff)

    def _on_kickoff(self) -> None:
        self._apply(MatchEngine.start_first_round(self._state, self._rng))

    def _on_deal(self, round_number: int) -> None:
        self._apply(MatchEngine.start_arranging(self._state, round_number))

    def _on_ai_move(self, round_number: int) -> None:
        self._apply(MatchEngine.apply_ai_move(self._state, round_number, self._rng))

    def _on_complete_timer(self) -> None:
        if self._completed:
            return
        self._completed = True
        result = MatchEngine.match_result(self._state)
        logger.info(
            "Match complete: student %d, ai %d, winner=%s",
            result.final_student_score,
            result.final_ai_score,
            result.winner.value,
        )
        if self._on_complete is not None:
            self._on_complete(result)

    # -- Internals -------------------------------------------------------

    def _apply(self, new_state: MatchState) -> MatchState:
        old_state = self._state
        self._state = new_state

        event = classify_transition(old_state, new_state)
        if event is None:
            logger.debug("Ignored stale or no-op transition in round %d", new_state.round_number)
            return new_state

        logger.debug("Round %d: %s", new_state.round_number, event.name)
        self._sync_timers(old_state, new_state)
        self._notify(build_payload(event, new_state))
        return new_state

    def _sync_timers(self, old: MatchState, new: MatchState) -> None:
        if new.round_number != old.round_number:
            round_number = new.round_number
            self._scheduler.cancel(AI_MOVE_TIMER)
            self._scheduler.schedule(
                DEAL_TIMER,
                self._timings.deal_delay,
                lambda: self._on_deal(round_number),
            )

        if new.phase == Phase.ARRANGING and old.phase != Phase.ARRANGING:
            round_number = new.round_number
            delay = self._rng.uniform(self._timings.ai_min_delay, self._timings.ai_max_delay)
            self._scheduler.schedule(
                AI_MOVE_TIMER,
                delay,
                lambda: self._on_ai_move(round_number),
            )

        if new.phase == Phase.GAME_COMPLETE and old.phase != Phase.GAME_COMPLETE:
            self._scheduler.cancel(DEAL_TIMER)
            self._scheduler.cancel(AI_MOVE_TIMER)
            self._scheduler.schedule(
                COMPLETE_TIMER,
                self._timings.completion_delay,
                self._on_complete_timer,
            )

    def _notify(self, payload: EventPayload) -> None:
        for listener in list(self._listeners):
            try:
                listener(payload)
            except Exception:
                logger.exception("Error handling %s event", payload.event.name)
