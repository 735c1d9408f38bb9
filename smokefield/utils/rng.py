"""
Random sampling helpers shared by the particle variants
"""

import random
from typing import Sequence, Tuple, TypeVar

T = TypeVar("T")


def sample(rng: random.Random, bounds: Tuple[float, float]) -> float:
    """Uniform sample from an inclusive (low, high) pair."""
    low, high = bounds
    if low == high:
        return low
    return low + rng.random() * (high - low)


def jitter(rng: random.Random, spread: float) -> float:
    """Centred uniform offset in [-spread/2, spread/2)."""
    return (rng.random() - 0.5) * spread


def pick(rng: random.Random, choices: Sequence[T]) -> T:
    return choices[int(rng.random() * len(choices))]
