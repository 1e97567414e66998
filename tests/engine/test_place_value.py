"""
Tests for place-value arithmetic and notation.
"""

from decimal import Decimal

import pytest

from showdown.engine.base import BoardConfig, DigitCard
from showdown.engine.place_value import PlaceValueEngine


def _decimal_board(whole: int, places: int) -> BoardConfig:
    return BoardConfig(whole_digit_count=whole, include_decimal=True, decimal_place_count=places)


class TestValueOf:
    """Tests for converting slotted hands into numbers."""

    def test_whole_number(self, whole_config, hand_factory):
        """Test [5, 0, 8] reads as 508."""
        assert PlaceValueEngine.value_of(hand_factory([5, 0, 8]), whole_config) == 508

    def test_decimal_number(self, decimal_config, hand_factory):
        """Test [1, 2, 3, 4] with two decimals reads as 12.34 exactly."""
        value = PlaceValueEngine.value_of(hand_factory([1, 2, 3, 4]), decimal_config)
        assert value == Decimal("12.34")
        assert isinstance(value, Decimal)

    def test_incomplete_hand_is_zero(self, whole_config, hand_factory):
        """Test a hand with a pooled card is worth 0."""
        hand = hand_factory([5, 0, 8])
        hand = (hand[0], hand[1].unplaced(), hand[2])
        assert PlaceValueEngine.value_of(hand, whole_config) == 0

    def test_value_follows_slots_not_generation_order(self, whole_config):
        """Test generation order is irrelevant; slot order decides."""
        hand = (
            DigitCard(card_id="x", digit=8, slot_index=2),
            DigitCard(card_id="y", digit=5, slot_index=0),
            DigitCard(card_id="z", digit=0, slot_index=1),
        )
        assert PlaceValueEngine.value_of(hand, whole_config) == 508
        assert PlaceValueEngine.value_of(tuple(reversed(hand)), whole_config) == 508

    def test_swapping_distinct_digits_changes_value(self, whole_config):
        """Test exchanging the slots of two different digits changes the value."""
        a = DigitCard(card_id="a", digit=3, slot_index=0)
        b = DigitCard(card_id="b", digit=7, slot_index=2)
        c = DigitCard(card_id="c", digit=1, slot_index=1)
        swapped = (a.placed_at(2), b.placed_at(0), c)
        assert PlaceValueEngine.value_of((a, b, c), whole_config) == 317
        assert PlaceValueEngine.value_of(swapped, whole_config) == 713

    def test_swapping_equal_digits_keeps_value(self, whole_config):
        """Test exchanging two equal digits leaves the value alone."""
        a = DigitCard(card_id="a", digit=4, slot_index=0)
        b = DigitCard(card_id="b", digit=4, slot_index=1)
        c = DigitCard(card_id="c", digit=2, slot_index=2)
        swapped = (a.placed_at(1), b.placed_at(0), c)
        assert PlaceValueEngine.value_of((a, b, c), whole_config) == PlaceValueEngine.value_of(
            swapped, whole_config
        )

    def test_no_float_drift(self, hand_factory):
        """Test tenths and hundredths sum exactly (0.1 + 0.2 style)."""
        config = _decimal_board(1, 2)
        value = PlaceValueEngine.value_of(hand_factory([0, 1, 2]), config)
        assert value == Decimal("0.12")
        assert str(value) == "0.12"

    def test_largest_board(self, hand_factory):
        """Test five whole digits and three decimals."""
        config = _decimal_board(5, 3)
        value = PlaceValueEngine.value_of(hand_factory([9, 8, 7, 6, 5, 4, 3, 2]), config)
        assert value == Decimal("98765.432")


class TestLabelsAndLayout:
    """Tests for slot display helpers."""

    def test_whole_labels(self, whole_config):
        labels = [PlaceValueEngine.place_value_label(i, whole_config) for i in range(3)]
        assert labels == ["hundreds", "tens", "ones"]

    def test_decimal_labels(self, decimal_config):
        labels = [PlaceValueEngine.place_value_label(i, decimal_config) for i in range(4)]
        assert labels == ["tens", "ones", "tenths", "hundredths"]

    def test_five_digit_labels(self):
        config = BoardConfig(whole_digit_count=5)
        assert PlaceValueEngine.place_value_label(0, config) == "ten thousands"
        assert PlaceValueEngine.place_value_label(1, config) == "thousands"

    def test_comma_after_thousands(self):
        """Test the thousands slot carries the separator."""
        layout = PlaceValueEngine.slot_layout(BoardConfig(whole_digit_count=5))
        assert [info.comma_after for info in layout] == [False, True, False, False, False]

    def test_no_comma_below_thousands(self, whole_config):
        layout = PlaceValueEngine.slot_layout(whole_config)
        assert not any(info.comma_after for info in layout)

    def test_decimal_point_position(self, decimal_config):
        layout = PlaceValueEngine.slot_layout(decimal_config)
        assert [info.decimal_point_before for info in layout] == [False, False, True, False]
        assert [info.exponent for info in layout] == [1, 0, -1, -2]


class TestFormatValue:

    def test_thousands_separator(self):
        config = BoardConfig(whole_digit_count=5)
        assert PlaceValueEngine.format_value(Decimal(98765), config) == "98,765"

    def test_fixed_decimals(self, decimal_config):
        assert PlaceValueEngine.format_value(Decimal("12.3"), decimal_config) == "12.30"


class TestExpandedNotation:
    """Tests for sum-of-place-values rendering."""

    def test_zero_terms_omitted(self, whole_config, hand_factory):
        """Test [5, 0, 8] renders as 500 + 8."""
        assert PlaceValueEngine.expanded_notation(hand_factory([5, 0, 8]), whole_config) == "500 + 8"

    def test_decimal_terms(self, decimal_config, hand_factory):
        notation = PlaceValueEngine.expanded_notation(hand_factory([1, 2, 3, 4]), decimal_config)
        assert notation == "10 + 2 + 0.3 + 0.04"

    def test_large_terms_use_separators(self, hand_factory):
        config = BoardConfig(whole_digit_count=5)
        notation = PlaceValueEngine.expanded_notation(hand_factory([5, 5, 8, 0, 0]), config)
        assert notation == "50,000 + 5,000 + 800"

    def test_all_zero(self, whole_config, hand_factory):
        assert PlaceValueEngine.expanded_notation(hand_factory([0, 0, 0]), whole_config) == ""

    def test_partial_hand(self, whole_config):
        """Test pooled cards are skipped."""
        hand = (
            DigitCard(card_id="a", digit=5, slot_index=0),
            DigitCard(card_id="b", digit=9),
        )
        assert PlaceValueEngine.expanded_notation(hand, whole_config) == "500"


class TestNumberToWords:
    """Tests for check-style whole-number words."""

    @pytest.mark.parametrize(
        "number,expected",
        [
            (0, "zero"),
            (7, "seven"),
            (10, "ten"),
            (15, "fifteen"),
            (20, "twenty"),
            (21, "twenty-one"),
            (99, "ninety-nine"),
            (100, "one hundred"),
            (508, "five hundred, and eight"),
            (1000, "one thousand"),
            (1500, "one thousand, five hundred"),
            (10000, "ten thousand"),
            (12345, "twelve thousand, three hundred, and forty-five"),
            (20001, "twenty thousand, and one"),
            (99999, "ninety-nine thousand, nine hundred, and ninety-nine"),
        ],
    )
    def test_words(self, number, expected):
        assert PlaceValueEngine.number_to_words(number) == expected

    def test_out_of_range(self):
        with pytest.raises(ValueError, match="between 0 and 99,999"):
            PlaceValueEngine.number_to_words(100000)


class TestExpandedWords:
    """Tests for value-to-words rendering with decimals."""

    def test_whole_board(self, whole_config):
        assert PlaceValueEngine.expanded_words(Decimal(508), whole_config) == "five hundred, and eight"

    def test_zero(self, whole_config):
        assert PlaceValueEngine.expanded_words(Decimal(0), whole_config) == "zero"

    def test_hundredths(self, decimal_config):
        words = PlaceValueEngine.expanded_words(Decimal("12.34"), decimal_config)
        assert words == "twelve and thirty-four hundredths"

    def test_singular_place_name(self):
        assert PlaceValueEngine.expanded_words(Decimal("3.1"), _decimal_board(1, 1)) == (
            "three and one tenth"
        )
        assert PlaceValueEngine.expanded_words(Decimal("0.001"), _decimal_board(1, 3)) == (
            "zero and one thousandth"
        )

    def test_zero_remainder_is_spelled(self, decimal_config):
        """Test a zero decimal part still reads 'zero hundredths'."""
        assert PlaceValueEngine.expanded_words(Decimal("5.00"), decimal_config) == (
            "five and zero hundredths"
        )

    def test_leading_decimal_zeros(self):
        assert PlaceValueEngine.expanded_words(Decimal("0.05"), _decimal_board(1, 2)) == (
            "zero and five hundredths"
        )

    def test_for_hand(self, decimal_config, hand_factory):
        words = PlaceValueEngine.expanded_words_for_hand(hand_factory([1, 2, 3, 4]), decimal_config)
        assert words == "twelve and thirty-four hundredths"

    def test_for_empty_hand(self, whole_config, hand_factory):
        assert PlaceValueEngine.expanded_words_for_hand(hand_factory([1, 2, 3], slotted=False), whole_config) == ""
