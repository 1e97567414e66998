"""
Place Value Showdown - Test Configuration and Fixtures

Common fixtures and test doubles for all test modules.
"""

import random

import pytest

from showdown.engine.base import BoardConfig, Difficulty, DigitCard, Objective


class FakeRandom(random.Random):
    """Random source with scripted ``random()`` and ``randint()`` results.

    ``sample`` reverses the population so "random" permutations are
    predictable and distinguishable from sorted order.
    """

    def __init__(self, randoms=(), ints=()) -> None:
        super().__init__(0)
        self._randoms = list(randoms)
        self._ints = list(ints)

    def random(self) -> float:
        if self._randoms:
            return self._randoms.pop(0)
        return 0.5

    def randint(self, a: int, b: int) -> int:
        if self._ints:
            return self._ints.pop(0)
        return a

    def uniform(self, a: float, b: float) -> float:
        return a

    def sample(self, population, k, **kwargs):
        return list(reversed(list(population)))[:k]


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 100.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def make_hand(digits, slotted: bool = True) -> tuple[DigitCard, ...]:
    """Hand with ids c0, c1, ...; card ``i`` in slot ``i`` when slotted."""
    return tuple(
        DigitCard(card_id=f"c{i}", digit=d, slot_index=i if slotted else None)
        for i, d in enumerate(digits)
    )


@pytest.fixture
def fake_random():
    """Factory for scripted random sources."""
    return FakeRandom


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def whole_config() -> BoardConfig:
    """Three whole-number slots, largest wins."""
    return BoardConfig(whole_digit_count=3)


@pytest.fixture
def decimal_config() -> BoardConfig:
    """Two whole slots plus two decimal slots."""
    return BoardConfig(whole_digit_count=2, include_decimal=True, decimal_place_count=2)


@pytest.fixture
def hard_config() -> BoardConfig:
    """Hard AI, largest wins, first to one point."""
    return BoardConfig(
        whole_digit_count=3,
        objective=Objective.LARGEST,
        winning_score=1,
        ai_difficulty=Difficulty.HARD,
    )


@pytest.fixture
def hand_factory():
    """Factory for hands with predictable card ids."""
    return make_hand
