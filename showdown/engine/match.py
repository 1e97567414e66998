"""
Place Value Showdown - Match State Machine

Phases: dealing -> arranging -> revealing -> (dealing | gameComplete)

All methods are class methods operating on an immutable MatchState.
State is passed in and returned, never stored. Transitions fired by
timers (``start_first_round``, ``start_arranging``, ``apply_ai_move``)
carry the round they were scheduled for and leave the state unchanged
when it has moved on. Player actions that are not allowed raise
IllegalActionError; the caller's state is never modified.
"""

import random
from dataclasses import dataclass, replace
from typing import Sequence

from showdown.engine.base import (
    BoardConfig,
    DigitCard,
    Hand,
    IllegalActionError,
    MatchResult,
    Phase,
    RoundResult,
    RoundWinner,
    card_in_slot,
    find_card,
    is_hand_complete,
)
from showdown.engine.cards import CardGenerator
from showdown.engine.judge import RoundJudge
from showdown.engine.place_value import PlaceValueEngine
from showdown.engine.strategist import AIStrategist
from showdown.engine.validators import validate_slot_index


@dataclass(frozen=True)
class MatchState:
    """
    Complete state of a match.

    Attributes:
        config: Board configuration for the whole match
        phase: Current phase
        round_number: 0 before the first deal, then 1, 2, ...
        student_score: Rounds won by the student
        ai_score: Rounds won by the AI
        student_hand: Student cards for the current round
        ai_hand: AI cards for the current round
        last_round_result: Result of the revealed round, if any
        student_ready: Student hand is complete
        ai_ready: AI has arranged its hand
        status_message: Text for the host to display
        selected_card_id: Card picked up by the student, awaiting a slot
    """
    config: BoardConfig
    phase: Phase = Phase.DEALING
    round_number: int = 0
    student_score: int = 0
    ai_score: int = 0
    student_hand: Hand = ()
    ai_hand: Hand = ()
    last_round_result: RoundResult | None = None
    student_ready: bool = False
    ai_ready: bool = False
    status_message: str = ""
    selected_card_id: str | None = None

    @property
    def ai_hand_revealed(self) -> bool:
        """AI card faces are hidden until the reveal."""
        return self.phase in (Phase.REVEALING, Phase.GAME_COMPLETE)

    @property
    def pool(self) -> tuple[DigitCard, ...]:
        """Student cards not yet placed, in generation order."""
        return tuple(card for card in self.student_hand if not card.is_placed)


class MatchEngine:
    """Stateless engine for the match state machine."""

    @classmethod
    def _objective_word(cls, config: BoardConfig) -> str:
        return config.objective.value

    @classmethod
    def welcome_message(cls, config: BoardConfig) -> str:
        """Opening message shown while the match warms up."""
        decimals = (
            f" + {config.active_decimal_places} decimal" if config.active_decimal_places else ""
        )
        return (
            f"🟢 In this game, each of you will be dealt {config.whole_digit_count}{decimals} "
            f"digit cards. Your mission is to place them into the slots to create the "
            f"{cls._objective_word(config)} number possible! The winner of each round earns "
            f"1 point! First to {config.winning_score} points wins!"
        )

    @classmethod
    def create_match(cls, config: BoardConfig) -> MatchState:
        """
        Create a new match in the dealing phase with a 0-0 score.

        Args:
            config: Validated board configuration

        Raises:
            ValueError: If config is not a BoardConfig
        """
        if not isinstance(config, BoardConfig):
            raise ValueError(f"Match requires a BoardConfig, got {type(config).__name__}.")
        return MatchState(config=config, status_message=cls.welcome_message(config))

    @classmethod
    def announce_start(cls, state: MatchState) -> MatchState:
        """Swap the welcome text for the kick-off announcement."""
        if state.phase != Phase.DEALING or state.round_number != 0:
            return state

        config = state.config
        if config.active_decimal_places:
            detail = (
                f"We'll be working with {config.whole_digit_count} whole number cards "
                f"and {config.active_decimal_places} decimal place cards."
            )
        else:
            detail = f"We'll be working with {config.whole_digit_count} digit cards."
        return replace(state, status_message=f"📣 Let's get started! {detail}")

    @classmethod
    def begin_round(cls, state: MatchState, rng: random.Random | None = None) -> MatchState:
        """
        Deal a fresh round.

        Increments the round number, deals new hands to both sides and
        clears the previous result, readiness flags and selection.
        """
        return replace(
            state,
            phase=Phase.DEALING,
            round_number=state.round_number + 1,
            student_hand=CardGenerator.generate_hand(state.config, rng),
            ai_hand=CardGenerator.generate_hand(state.config, rng),
            last_round_result=None,
            student_ready=False,
            ai_ready=False,
            selected_card_id=None,
            status_message="🎴 Shuffling the cards...",
        )

    @classmethod
    def start_first_round(cls, state: MatchState, rng: random.Random | None = None) -> MatchState:
        """Deal round 1; ignored once any round has been dealt."""
        if state.phase != Phase.DEALING or state.round_number != 0:
            return state
        return cls.begin_round(state, rng)

    @classmethod
    def start_arranging(cls, state: MatchState, round_number: int) -> MatchState:
        """Open the board for arranging after the deal delay."""
        if state.phase != Phase.DEALING or state.round_number != round_number:
            return state
        return replace(
            state,
            phase=Phase.ARRANGING,
            status_message=(
                f"Now, arrange your cards to make the {cls._objective_word(state.config)} "
                f"number possible! Pick a card, then pick a slot to place it."
            ),
        )

    @classmethod
    def apply_ai_move(
        cls,
        state: MatchState,
        round_number: int,
        rng: random.Random | None = None,
    ) -> MatchState:
        """Let the AI arrange its hand; reveals if the student is already ready."""
        if (
            state.phase != Phase.ARRANGING
            or state.round_number != round_number
            or state.ai_ready
        ):
            return state
        arranged = AIStrategist.arrange(state.ai_hand, state.config, rng)
        return cls._maybe_reveal(replace(state, ai_hand=arranged, ai_ready=True))

    @classmethod
    def _require_phase(cls, state: MatchState, phase: Phase, action: str) -> None:
        if state.phase != phase:
            raise IllegalActionError(
                f"Cannot {action} during {state.phase.value}; only during {phase.value}."
            )

    @classmethod
    def _require_card(cls, state: MatchState, card_id: str) -> DigitCard:
        card = find_card(state.student_hand, card_id)
        if card is None:
            raise IllegalActionError(f"Card {card_id!r} is not in the student hand.")
        return card

    @classmethod
    def _replace_card(cls, hand: Sequence[DigitCard], updated: DigitCard) -> Hand:
        return tuple(updated if card.card_id == updated.card_id else card for card in hand)

    @classmethod
    def select_card(cls, state: MatchState, card_id: str) -> MatchState:
        """
        Pick up a pooled card; selecting the same card again puts it down.

        Raises:
            IllegalActionError: Outside arranging, unknown card, or card already slotted
        """
        cls._require_phase(state, Phase.ARRANGING, "select a card")
        card = cls._require_card(state, card_id)
        if card.is_placed:
            raise IllegalActionError(
                f"Card {card_id!r} is already in slot {card.slot_index}; return it to the pool first."
            )
        if state.selected_card_id == card_id:
            return replace(state, selected_card_id=None)
        return replace(state, selected_card_id=card_id)

    @classmethod
    def select_slot(cls, state: MatchState, slot_index: int) -> MatchState:
        """
        Drop the selected card into a slot.

        Raises:
            IllegalActionError: Outside arranging, no card selected, or slot occupied
        """
        cls._require_phase(state, Phase.ARRANGING, "select a slot")
        if state.selected_card_id is None:
            raise IllegalActionError("Select a card before choosing a slot.")
        return cls.place_card(state, state.selected_card_id, slot_index)

    @classmethod
    def place_card(cls, state: MatchState, card_id: str, slot_index: int) -> MatchState:
        """
        Place a pooled student card into an empty slot.

        The student becomes ready when the last slot is filled; the round is
        revealed right away if the AI is ready too.

        Raises:
            IllegalActionError: Outside arranging, unknown or slotted card,
                slot out of range or occupied
        """
        cls._require_phase(state, Phase.ARRANGING, "place a card")
        card = cls._require_card(state, card_id)
        try:
            validate_slot_index(slot_index, state.config.total_slots)
        except ValueError as exc:
            raise IllegalActionError(str(exc)) from exc
        if card.is_placed:
            raise IllegalActionError(
                f"Card {card_id!r} is already in slot {card.slot_index}; return it to the pool first."
            )
        occupant = card_in_slot(state.student_hand, slot_index)
        if occupant is not None:
            raise IllegalActionError(f"Slot {slot_index} is already occupied.")

        hand = cls._replace_card(state.student_hand, card.placed_at(slot_index))
        return cls._maybe_reveal(replace(
            state,
            student_hand=hand,
            student_ready=is_hand_complete(hand, state.config.total_slots),
            selected_card_id=None,
        ))

    @classmethod
    def return_card_to_pool(cls, state: MatchState, card_id: str) -> MatchState:
        """
        Move a slotted student card back to the pool.

        Returning a card that is already pooled changes nothing.

        Raises:
            IllegalActionError: Outside arranging or unknown card
        """
        cls._require_phase(state, Phase.ARRANGING, "return a card")
        card = cls._require_card(state, card_id)
        if not card.is_placed:
            return state

        hand = cls._replace_card(state.student_hand, card.unplaced())
        return replace(
            state,
            student_hand=hand,
            student_ready=is_hand_complete(hand, state.config.total_slots),
        )

    @classmethod
    def _maybe_reveal(cls, state: MatchState) -> MatchState:
        if state.phase != Phase.ARRANGING or not (state.student_ready and state.ai_ready):
            return state

        config = state.config
        student_value = PlaceValueEngine.value_of(state.student_hand, config)
        ai_value = PlaceValueEngine.value_of(state.ai_hand, config)
        winner = RoundJudge.decide_winner(student_value, ai_value, config.objective)

        if winner == RoundWinner.STUDENT:
            verdict = f"{config.player_name} wins the round!"
        elif winner == RoundWinner.AI:
            verdict = f"{config.ai_name} wins the round!"
        else:
            verdict = "It's a tie!"

        return replace(
            state,
            phase=Phase.REVEALING,
            last_round_result=RoundResult(
                student_value=student_value,
                ai_value=ai_value,
                winner=winner,
            ),
            selected_card_id=None,
            status_message=f"Let's see who made the better number! {verdict}",
        )

    @classmethod
    def advance_to_next_round(
        cls,
        state: MatchState,
        rng: random.Random | None = None,
    ) -> MatchState:
        """
        Score the revealed round, then deal the next one or finish the match.

        Raises:
            IllegalActionError: Outside revealing
        """
        cls._require_phase(state, Phase.REVEALING, "advance to the next round")
        winner = state.last_round_result.winner

        student_score = state.student_score + (1 if winner == RoundWinner.STUDENT else 0)
        ai_score = state.ai_score + (1 if winner == RoundWinner.AI else 0)
        scored = replace(state, student_score=student_score, ai_score=ai_score)

        winning_score = state.config.winning_score
        if student_score >= winning_score or ai_score >= winning_score:
            return replace(
                scored,
                phase=Phase.GAME_COMPLETE,
                status_message=cls.final_message(scored),
            )
        return cls.begin_round(scored, rng)

    @classmethod
    def final_message(cls, state: MatchState) -> str:
        """Closing message naming the match winner."""
        config = state.config
        winner = RoundJudge.match_winner(state.student_score, state.ai_score)
        if winner == RoundWinner.STUDENT:
            announcement = f"And the grand winner is... {config.player_name}!"
        elif winner == RoundWinner.AI:
            announcement = f"And the grand winner is... {config.ai_name}!"
        else:
            announcement = "It's a draw!"
        return (
            f"🎉 That's game! The final score is: {config.ai_name} {state.ai_score}, "
            f"{config.player_name} {state.student_score}. {announcement} "
            f"Great job practicing place value!"
        )

    @classmethod
    def match_result(cls, state: MatchState) -> MatchResult:
        """
        Completion record for the host.

        Raises:
            IllegalActionError: Before the match is complete
        """
        cls._require_phase(state, Phase.GAME_COMPLETE, "report the match result")
        return MatchResult(
            final_student_score=state.student_score,
            final_ai_score=state.ai_score,
            winner=RoundJudge.match_winner(state.student_score, state.ai_score),
        )
