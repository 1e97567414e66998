"""
Place Value Showdown - AI Strategist

Arranges the AI's hand into slots according to its difficulty tier:
- Easy: uniformly random permutation
- Medium: optimal ordering 70% of the time, otherwise random (per round)
- Hard: always optimal (descending for largest, ascending for smallest)

Equal digits keep their generation order.
"""

import random
from typing import ClassVar, Sequence

from showdown.engine.base import BoardConfig, Difficulty, DigitCard, Hand, Objective


class AIStrategist:
    """Stateless AI opponent."""

    MEDIUM_OPTIMAL_CHANCE: ClassVar[float] = 0.7

    @classmethod
    def optimal_order(cls, hand: Sequence[DigitCard], objective: Objective) -> list[DigitCard]:
        """Cards sorted for the objective; ties keep generation order."""
        return sorted(hand, key=lambda card: card.digit, reverse=objective == Objective.LARGEST)

    @classmethod
    def random_order(cls, hand: Sequence[DigitCard], rng=None) -> list[DigitCard]:
        """Uniformly random permutation of the cards."""
        source = rng if rng is not None else random
        return source.sample(list(hand), len(hand))

    @classmethod
    def arrange(
        cls,
        hand: Sequence[DigitCard],
        config: BoardConfig,
        rng: random.Random | None = None,
    ) -> Hand:
        """
        Place every card of the AI hand into a slot.

        Args:
            hand: The AI's dealt cards (generation order)
            config: Board configuration (objective and difficulty)
            rng: Optional random source (for deterministic tests)

        Returns:
            The same cards, fully slotted left to right in strategy order
        """
        source = rng if rng is not None else random
        difficulty = config.ai_difficulty

        if difficulty == Difficulty.HARD:
            ordered = cls.optimal_order(hand, config.objective)
        elif difficulty == Difficulty.MEDIUM:
            if source.random() < cls.MEDIUM_OPTIMAL_CHANCE:
                ordered = cls.optimal_order(hand, config.objective)
            else:
                ordered = cls.random_order(hand, source)
        else:
            ordered = cls.random_order(hand, source)

        return tuple(card.placed_at(index) for index, card in enumerate(ordered))
