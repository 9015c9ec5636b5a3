"""
Utility functions for game mechanics
"""

from __future__ import annotations
import random
from typing import Callable, Optional

import numpy as np

# Uniform integer in [0, n)
RandInt = Callable[[int], int]


def clamp(x: float, lo: float, hi: float) -> float:
    """Clamp value between low and high bounds"""
    return lo if x < lo else hi if x > hi else x


def point_in_box(px: float, py: float, bx: float, by: float, bw: float, bh: float) -> bool:
    """Check if a point lies strictly inside a box (edges excluded)"""
    return bx < px < bx + bw and by < py < by + bh


def make_randint(seed: Optional[int] = None) -> RandInt:
    """Build a uniform integer source backed by its own random.Random"""
    rng = random.Random(seed)
    return rng.randrange


def numpy_randint(generator: np.random.Generator) -> RandInt:
    """Adapt a numpy Generator to the uniform integer source signature"""
    return lambda n: int(generator.integers(n))

