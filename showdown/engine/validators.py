"""
Place Value Showdown - Input Validation Utilities

Provides validation functions for game engine inputs. All validators
either return validated data or raise descriptive ValueError exceptions.
"""

MAX_WHOLE_DIGITS = 5
MAX_DECIMAL_PLACES = 3
MAX_WINNING_SCORE = 20


def validate_digit(digit: int) -> int:
    """
    Validate a card digit.

    Args:
        digit: Face value of a card

    Returns:
        Validated digit

    Raises:
        ValueError: If digit is not an integer in 0-9
    """
    if not isinstance(digit, int) or isinstance(digit, bool):
        raise ValueError(f"Digit must be an integer, got {type(digit).__name__}.")

    if not (0 <= digit <= 9):
        raise ValueError(f"Digit must be between 0 and 9, got {digit}.")

    return digit


def validate_whole_digit_count(count: int) -> int:
    """
    Validate the number of whole-number slots.

    Args:
        count: Number of integer-place slots

    Returns:
        Validated count

    Raises:
        ValueError: If count is not 1-5
    """
    if not isinstance(count, int) or isinstance(count, bool):
        raise ValueError(f"Whole digit count must be an integer, got {type(count).__name__}.")

    if not (1 <= count <= MAX_WHOLE_DIGITS):
        raise ValueError(
            f"Whole digit count must be between 1 and {MAX_WHOLE_DIGITS}, got {count}."
        )

    return count


def validate_decimal_place_count(count: int) -> int:
    """
    Validate the number of decimal slots.

    Args:
        count: Number of decimal-place slots

    Returns:
        Validated count

    Raises:
        ValueError: If count is not 0-3
    """
    if not isinstance(count, int) or isinstance(count, bool):
        raise ValueError(f"Decimal place count must be an integer, got {type(count).__name__}.")

    if not (0 <= count <= MAX_DECIMAL_PLACES):
        raise ValueError(
            f"Decimal place count must be between 0 and {MAX_DECIMAL_PLACES}, got {count}."
        )

    return count


def validate_winning_score(score: int) -> int:
    """
    Validate the winning score of a match.

    Args:
        score: Round wins needed to take the match

    Returns:
        Validated score

    Raises:
        ValueError: If score is not 1-20
    """
    if not isinstance(score, int) or isinstance(score, bool):
        raise ValueError(f"Winning score must be an integer, got {type(score).__name__}.")

    if not (1 <= score <= MAX_WINNING_SCORE):
        raise ValueError(
            f"Winning score must be between 1 and {MAX_WINNING_SCORE}, got {score}."
        )

    return score


def validate_display_name(name: str, label: str = "Name") -> str:
    """Validate a non-empty display name."""
    if not isinstance(name, str) or not name.strip():
        raise ValueError(f"{label} must be a non-empty string.")
    return name


def validate_slot_index(slot_index: int, total_slots: int) -> int:
    """
    Validate a slot index against the board size.

    Args:
        slot_index: Slot to validate
        total_slots: Number of slots on the board

    Returns:
        Validated slot index

    Raises:
        ValueError: If slot index is out of range
    """
    if not isinstance(slot_index, int) or isinstance(slot_index, bool):
        raise ValueError(f"Slot index must be an integer, got {type(slot_index).__name__}.")

    if not (0 <= slot_index < total_slots):
        raise ValueError(
            f"Slot index {slot_index} is out of range. Must be between 0 and {total_slots - 1}."
        )

    return slot_index
