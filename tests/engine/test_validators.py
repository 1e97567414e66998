"""
Tests for input validation utilities.
"""

import pytest

from showdown.engine.validators import (
    validate_decimal_place_count,
    validate_digit,
    validate_display_name,
    validate_slot_index,
    validate_whole_digit_count,
    validate_winning_score,
)


class TestValidateDigit:

    @pytest.mark.parametrize("digit", [0, 5, 9])
    def test_valid(self, digit):
        assert validate_digit(digit) == digit

    def test_rejects_bool(self):
        """Test booleans are not accepted as digits."""
        with pytest.raises(ValueError, match="must be an integer"):
            validate_digit(True)

    def test_rejects_float(self):
        with pytest.raises(ValueError, match="must be an integer, got float"):
            validate_digit(3.0)


class TestValidateCounts:

    def test_whole_digit_bounds(self):
        assert validate_whole_digit_count(1) == 1
        assert validate_whole_digit_count(5) == 5
        with pytest.raises(ValueError, match="between 1 and 5"):
            validate_whole_digit_count(6)

    def test_decimal_bounds(self):
        assert validate_decimal_place_count(0) == 0
        assert validate_decimal_place_count(3) == 3
        with pytest.raises(ValueError, match="between 0 and 3"):
            validate_decimal_place_count(4)

    def test_winning_score_bounds(self):
        assert validate_winning_score(1) == 1
        assert validate_winning_score(20) == 20
        with pytest.raises(ValueError, match="between 1 and 20"):
            validate_winning_score(0)

    def test_display_name(self):
        assert validate_display_name("Ada") == "Ada"
        with pytest.raises(ValueError, match="AI name"):
            validate_display_name("", "AI name")


class TestValidateSlotIndex:

    def test_in_range(self):
        assert validate_slot_index(0, 3) == 0
        assert validate_slot_index(2, 3) == 2

    def test_out_of_range(self):
        """Test index equal to slot count is rejected."""
        with pytest.raises(ValueError, match="out of range"):
            validate_slot_index(3, 3)

        with pytest.raises(ValueError, match="out of range"):
            validate_slot_index(-1, 3)
