"""
Place Value Showdown - Game Engine Base Classes

This module defines the foundational data structures and enums used throughout
the game engine. All classes are immutable (frozen dataclasses) so that every
state transition produces a new value and stale references stay valid.
"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any, Sequence

from showdown.engine.validators import (
    validate_decimal_place_count,
    validate_digit,
    validate_display_name,
    validate_whole_digit_count,
    validate_winning_score,
)


class IllegalActionError(ValueError):
    """A player action that is not allowed in the current match state."""


class Objective(Enum):
    """What kind of number each round rewards."""
    LARGEST = "largest"
    SMALLEST = "smallest"


class Difficulty(Enum):
    """How well the AI opponent arranges its cards."""
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


class Phase(Enum):
    """Mutually exclusive phases of a match."""
    DEALING = "dealing"
    ARRANGING = "arranging"
    REVEALING = "revealing"
    GAME_COMPLETE = "gameComplete"


class Side(Enum):
    """Owner of a hand."""
    STUDENT = "student"
    AI = "ai"


class RoundWinner(Enum):
    """Outcome of a single round (or of the match)."""
    STUDENT = "student"
    AI = "ai"
    TIE = "tie"


@dataclass(frozen=True)
class DigitCard:
    """
    A single digit card.

    Attributes:
        card_id: Opaque identifier, unique within a round
        digit: Face value 0-9
        slot_index: Slot the card occupies, or None while it sits in the pool
    """
    card_id: str
    digit: int
    slot_index: int | None = None

    def __post_init__(self) -> None:
        """Validate digit and slot."""
        validate_digit(self.digit)
        if self.slot_index is not None and self.slot_index < 0:
            raise ValueError(f"Slot index cannot be negative, got {self.slot_index}.")

    @property
    def is_placed(self) -> bool:
        """Returns True if the card sits in a slot."""
        return self.slot_index is not None

    def placed_at(self, slot_index: int) -> "DigitCard":
        """Copy of this card moved into a slot."""
        return DigitCard(card_id=self.card_id, digit=self.digit, slot_index=slot_index)

    def unplaced(self) -> "DigitCard":
        """Copy of this card moved back to the pool."""
        return DigitCard(card_id=self.card_id, digit=self.digit, slot_index=None)


Hand = tuple[DigitCard, ...]


@dataclass(frozen=True)
class BoardConfig:
    """
    Immutable per-match configuration.

    Attributes:
        whole_digit_count: Number of integer-place slots (1-5)
        include_decimal: Whether decimal slots follow the whole slots
        decimal_place_count: Number of decimal slots when enabled (0-3)
        objective: Largest or smallest number wins a round
        winning_score: Round wins needed to take the match (1-20)
        ai_difficulty: Strategy tier of the AI opponent
        player_name: Display name of the student
        ai_name: Display name of the AI opponent
        title: Display title of the match
        enable_hints: Whether the host offers place-value display aids
    """
    whole_digit_count: int = 3
    include_decimal: bool = False
    decimal_place_count: int = 0
    objective: Objective = Objective.LARGEST
    winning_score: int = 5
    ai_difficulty: Difficulty = Difficulty.MEDIUM
    player_name: str = "Student"
    ai_name: str = "Teacher"
    title: str = "Place Value Showdown"
    enable_hints: bool = True

    def __post_init__(self) -> None:
        """Validate configuration."""
        validate_whole_digit_count(self.whole_digit_count)
        if self.include_decimal:
            validate_decimal_place_count(self.decimal_place_count)
        validate_winning_score(self.winning_score)
        validate_display_name(self.player_name, "Player name")
        validate_display_name(self.ai_name, "AI name")
        if not isinstance(self.objective, Objective):
            raise ValueError(f"Objective must be an Objective, got {self.objective!r}.")
        if not isinstance(self.ai_difficulty, Difficulty):
            raise ValueError(f"AI difficulty must be a Difficulty, got {self.ai_difficulty!r}.")

    @property
    def active_decimal_places(self) -> int:
        """Decimal slots actually on the board."""
        return self.decimal_place_count if self.include_decimal else 0

    @property
    def total_slots(self) -> int:
        """Total number of slots (and cards per hand)."""
        return self.whole_digit_count + self.active_decimal_places

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "BoardConfig":
        """Create a BoardConfig from a teacher-authored configuration record."""
        try:
            return cls(
                whole_digit_count=int(data.get("numberOfCards", 3)),
                include_decimal=bool(data.get("includeDecimal", False)),
                decimal_place_count=int(data.get("decimalPlaces", 0)),
                objective=Objective(data.get("objective", "largest")),
                winning_score=int(data.get("winningScore", 5)),
                ai_difficulty=Difficulty(data.get("aiDifficulty", "medium")),
                player_name=data.get("playerName") or "Student",
                ai_name=data.get("teacherName") or "Teacher",
                title=data.get("title") or "Place Value Showdown",
                enable_hints=bool(data.get("enableHints", True)),
            )
        except (TypeError, KeyError) as exc:
            raise ValueError(f"Invalid board configuration record: {exc}") from exc

    def to_dict(self) -> dict[str, Any]:
        """Convert to the configuration record format."""
        return {
            "numberOfCards": self.whole_digit_count,
            "includeDecimal": self.include_decimal,
            "decimalPlaces": self.decimal_place_count,
            "objective": self.objective.value,
            "winningScore": self.winning_score,
            "aiDifficulty": self.ai_difficulty.value,
            "playerName": self.player_name,
            "teacherName": self.ai_name,
            "title": self.title,
            "enableHints": self.enable_hints,
        }


@dataclass(frozen=True)
class RoundResult:
    """
    Outcome of one revealed round.

    Attributes:
        student_value: Numeric value of the student's arrangement
        ai_value: Numeric value of the AI's arrangement
        winner: Which side won the round
    """
    student_value: Decimal
    ai_value: Decimal
    winner: RoundWinner


@dataclass(frozen=True)
class MatchResult:
    """Completion record handed to the host once the match is over."""
    final_student_score: int
    final_ai_score: int
    winner: RoundWinner


def find_card(hand: Sequence[DigitCard], card_id: str) -> DigitCard | None:
    """Look up a card by id."""
    return next((card for card in hand if card.card_id == card_id), None)


def card_in_slot(hand: Sequence[DigitCard], slot_index: int) -> DigitCard | None:
    """Card occupying a slot, or None when the slot is empty."""
    return next((card for card in hand if card.slot_index == slot_index), None)


def is_hand_complete(hand: Sequence[DigitCard], total_slots: int) -> bool:
    """A hand is complete when every slot in [0, total_slots) holds exactly one card."""
    occupied = [card.slot_index for card in hand if card.is_placed]
    return sorted(occupied) == list(range(total_slots))
