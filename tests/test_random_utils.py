import random

import pytest

from termgames.random_utils import get_random_engine, randint


def test_engine_is_shared():
    first = get_random_engine()
    second = get_random_engine()
    assert first is second
    assert isinstance(first, random.Random)


def test_randint_stays_in_range():
    values = [randint(1, 6) for _ in range(500)]
    assert min(values) >= 1
    assert max(values) <= 6


def test_randint_covers_whole_range():
    values = {randint(0, 2) for _ in range(1000)}
    assert values == {0, 1, 2}


def test_randint_single_value_range():
    assert randint(7, 7) == 7


def test_randint_negative_bounds():
    values = [randint(-3, -1) for _ in range(200)]
    assert all(-3 <= value <= -1 for value in values)


def test_randint_empty_range_raises():
    with pytest.raises(ValueError):
        randint(6, 1)