"""Shared random number source for the games."""

from __future__ import annotations

import random
import time

_engine: random.Random | None = None


def get_random_engine() -> random.Random:
    """Return the process-wide generator, seeding it from the clock on first use."""
    global _engine
    if _engine is None:
        _engine = random.Random(time.time_ns())
    return _engine


def randint(low: int, high: int) -> int:
    """Return a uniformly distributed integer in the closed range [low, high]."""
    if low > high:
        raise ValueError(f"empty range: {low} > {high}")
    return get_random_engine().randint(low, high)