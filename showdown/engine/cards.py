"""
Place Value Showdown - Card Generator

Deals a fresh hand of digit cards for one side at the start of every round.
Digits are independent and uniform in 0-9; repeats within a hand are allowed.
"""

import random
import uuid

from showdown.engine.base import BoardConfig, DigitCard, Hand


class CardGenerator:
    """Stateless dealer of digit cards."""

    @classmethod
    def new_card_id(cls) -> str:
        """Allocate a fresh opaque card identifier."""
        return f"card-{uuid.uuid4().hex}"

    @classmethod
    def generate_hand(cls, config: BoardConfig, rng: random.Random | None = None) -> Hand:
        """
        Deal one unplaced card per slot.

        Args:
            config: Board configuration (determines hand size)
            rng: Optional random source (for deterministic tests)

        Returns:
            Tuple of ``config.total_slots`` cards, all in the pool
        """
        source = rng if rng is not None else random
        return tuple(
            DigitCard(card_id=cls.new_card_id(), digit=source.randint(0, 9))
            for _ in range(config.total_slots)
        )

    @classmethod
    def hand_from_digits(cls, digits: list[int] | tuple[int, ...], *, slotted: bool = False) -> Hand:
        """
        Build a hand with predetermined digits.

        Args:
            digits: Digits in generation order
            slotted: Place card ``i`` into slot ``i`` when True

        Returns:
            Tuple of cards with fresh identifiers
        """
        return tuple(
            DigitCard(
                card_id=cls.new_card_id(),
                digit=digit,
                slot_index=index if slotted else None,
            )
            for index, digit in enumerate(digits)
        )
