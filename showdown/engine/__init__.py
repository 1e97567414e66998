"""
Place Value Showdown Game Engine.

Pure Python game logic with zero UI/database dependencies.
Handles card dealing, place-value arithmetic, the AI opponent,
round judging and the match state machine.
"""

from showdown.engine.base import (
    BoardConfig,
    Difficulty,
    DigitCard,
    IllegalActionError,
    MatchResult,
    Objective,
    Phase,
    RoundResult,
    RoundWinner,
    Side,
)
from showdown.engine.cards import CardGenerator
from showdown.engine.judge import RoundJudge
from showdown.engine.match import MatchEngine, MatchState
from showdown.engine.place_value import PlaceValueEngine, SlotInfo
from showdown.engine.strategist import AIStrategist

__all__ = [
    # Data Classes
    "BoardConfig",
    "DigitCard",
    "MatchResult",
    "MatchState",
    "RoundResult",
    "SlotInfo",
    # Enums
    "Difficulty",
    "Objective",
    "Phase",
    "RoundWinner",
    "Side",
    # Errors
    "IllegalActionError",
    # Engines
    "AIStrategist",
    "CardGenerator",
    "MatchEngine",
    "PlaceValueEngine",
    "RoundJudge",
]
