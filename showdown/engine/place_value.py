"""
Place Value Showdown - Place-Value Arithmetic

Converts a slotted hand into its numeric value and into human-readable
expanded notation and words.

Slot ``i`` (0-based, left to right) carries the power-of-ten exponent:
- Whole region (``i < whole_digit_count``): ``whole_digit_count - 1 - i``
- Decimal region: ``-(i - whole_digit_count + 1)`` (tenths, hundredths, ...)

All arithmetic uses ``decimal.Decimal`` so that equal arrangements always
compare equal, including on decimal boards.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import ClassVar, Sequence

from showdown.engine.base import BoardConfig, DigitCard, is_hand_complete


_ONES = ("", "one", "two", "three", "four", "five", "six", "seven", "eight", "nine")
_TEENS = (
    "ten", "eleven", "twelve", "thirteen", "fourteen",
    "fifteen", "sixteen", "seventeen", "eighteen", "nineteen",
)
_TENS = ("", "", "twenty", "thirty", "forty", "fifty", "sixty", "seventy", "eighty", "ninety")


@dataclass(frozen=True)
class SlotInfo:
    """
    Display information for one slot.

    Attributes:
        index: Slot index, left to right
        exponent: Power of ten carried by the slot
        label: Place name (``"hundreds"``, ``"tenths"``, ...)
        comma_after: A thousands separator follows this slot
        decimal_point_before: The decimal point precedes this slot
    """
    index: int
    exponent: int
    label: str
    comma_after: bool
    decimal_point_before: bool


class PlaceValueEngine:
    """Stateless place-value arithmetic and notation."""

    WHOLE_PLACE_NAMES: ClassVar[tuple[str, ...]] = (
        "ones", "tens", "hundreds", "thousands", "ten thousands",
    )
    DECIMAL_PLACE_NAMES: ClassVar[tuple[str, ...]] = ("tenth", "hundredth", "thousandth")
    MAX_WORDED_VALUE: ClassVar[int] = 99_999

    @classmethod
    def slot_exponent(cls, slot_index: int, config: BoardConfig) -> int:
        """Power of ten carried by a slot."""
        whole = config.whole_digit_count
        if slot_index < whole:
            return whole - 1 - slot_index
        return -(slot_index - whole + 1)

    @classmethod
    def place_value_label(cls, slot_index: int, config: BoardConfig) -> str:
        """
        Human-readable place name for a slot.

        Args:
            slot_index: Slot index, left to right
            config: Board configuration

        Returns:
            ``"ones"`` .. ``"ten thousands"`` or ``"tenths"`` .. ``"thousandths"``
        """
        exponent = cls.slot_exponent(slot_index, config)
        if exponent >= 0:
            if exponent < len(cls.WHOLE_PLACE_NAMES):
                return cls.WHOLE_PLACE_NAMES[exponent]
            return f"10^{exponent}"
        return f"{cls.DECIMAL_PLACE_NAMES[-exponent - 1]}s"

    @classmethod
    def slot_layout(cls, config: BoardConfig) -> tuple[SlotInfo, ...]:
        """Per-slot display information for the whole board."""
        layout = []
        for index in range(config.total_slots):
            exponent = cls.slot_exponent(index, config)
            layout.append(SlotInfo(
                index=index,
                exponent=exponent,
                label=cls.place_value_label(index, config),
                comma_after=exponent == 3,
                decimal_point_before=(
                    config.active_decimal_places > 0
                    and index == config.whole_digit_count
                ),
            ))
        return tuple(layout)

    @classmethod
    def _term(cls, card: DigitCard, config: BoardConfig) -> Decimal:
        return Decimal(card.digit).scaleb(cls.slot_exponent(card.slot_index, config))

    @classmethod
    def _slotted(cls, hand: Sequence[DigitCard]) -> list[DigitCard]:
        return sorted((card for card in hand if card.is_placed), key=lambda c: c.slot_index)

    @classmethod
    def value_of(cls, hand: Sequence[DigitCard], config: BoardConfig) -> Decimal:
        """
        Numeric value of a slotted hand.

        An incomplete hand is worth 0 by convention; the host is expected to
        gate calculation on completeness.

        Args:
            hand: Cards of one side
            config: Board configuration

        Returns:
            Exact sum of ``digit * 10**exponent`` over slotted cards
        """
        if not is_hand_complete(hand, config.total_slots):
            return Decimal(0)
        return sum((cls._term(card, config) for card in hand), Decimal(0))

    @classmethod
    def format_value(cls, value: Decimal | int, config: BoardConfig) -> str:
        """
        Format a value for display.

        Whole boards use thousands separators (``"12,345"``); decimal boards
        print exactly ``decimal_place_count`` decimals (``"12.340"``).
        """
        places = config.active_decimal_places
        if places:
            return f"{Decimal(value):,.{places}f}"
        return f"{int(value):,}"

    @classmethod
    def expanded_notation(cls, hand: Sequence[DigitCard], config: BoardConfig) -> str:
        """
        Sum-of-place-values representation, e.g. ``"500 + 8"``.

        Zero terms are omitted; slot order is preserved.
        """
        parts = []
        for card in cls._slotted(hand):
            if card.digit == 0:
                continue
            exponent = cls.slot_exponent(card.slot_index, config)
            if exponent >= 0:
                parts.append(f"{card.digit * 10 ** exponent:,}")
            else:
                parts.append(format(cls._term(card, config), "f"))
        return " + ".join(parts)

    @classmethod
    def _two_digit_words(cls, number: int) -> str:
        if number < 10:
            return _ONES[number]
        if number < 20:
            return _TEENS[number - 10]
        tens, ones = divmod(number, 10)
        if ones:
            return f"{_TENS[tens]}-{_ONES[ones]}"
        return _TENS[tens]

    @classmethod
    def number_to_words(cls, number: int) -> str:
        """
        Spell a whole number in check-writing style.

        Examples: ``508 -> "five hundred, and eight"``,
        ``12345 -> "twelve thousand, three hundred, and forty-five"``.

        Raises:
            ValueError: If number is negative or above 99,999
        """
        if not (0 <= number <= cls.MAX_WORDED_VALUE):
            raise ValueError(
                f"Can only spell numbers between 0 and {cls.MAX_WORDED_VALUE:,}, got {number}."
            )
        if number == 0:
            return "zero"

        parts = []
        thousands, remainder = divmod(number, 1000)
        if thousands:
            parts.append(f"{cls._two_digit_words(thousands)} thousand,")

        hundreds, remainder = divmod(remainder, 100)
        if hundreds:
            suffix = "," if remainder else ""
            parts.append(f"{_ONES[hundreds]} hundred{suffix}")

        if remainder:
            if parts:
                parts.append("and")
            parts.append(cls._two_digit_words(remainder))

        return " ".join(parts).rstrip(",")

    @classmethod
    def expanded_words(cls, value: Decimal | int, config: BoardConfig) -> str:
        """
        Render a value in English words.

        Decimal boards read ``"<whole> and <decimal digits> <place name>"``,
        e.g. ``12.34 -> "twelve and thirty-four hundredths"``. The place name
        is singular only when the decimal digits equal exactly 1, and a zero
        remainder still reads ``"zero tenths"`` etc.
        """
        value = Decimal(value)
        whole = int(value)
        whole_words = cls.number_to_words(whole)

        places = config.active_decimal_places
        if not places:
            return whole_words

        fraction = int((value - whole).scaleb(places).to_integral_value())
        place_name = cls.DECIMAL_PLACE_NAMES[places - 1]
        if fraction != 1:
            place_name += "s"
        return f"{whole_words} and {cls.number_to_words(fraction)} {place_name}"

    @classmethod
    def expanded_words_for_hand(cls, hand: Sequence[DigitCard], config: BoardConfig) -> str:
        """Words for a hand's value; empty when nothing is slotted."""
        if not any(card.is_placed for card in hand):
            return ""
        return cls.expanded_words(cls.value_of(hand, config), config)
