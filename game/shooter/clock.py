"""
Clocks used to gate fire cooldown and enemy spawning.

Instants are plain floats in milliseconds. Only differences between two
instants from the same clock are meaningful.
"""

import time
from abc import ABC, abstractmethod


class Clock(ABC):
    """Monotonic time source"""

    @abstractmethod
    def now(self) -> float:
        raise NotImplementedError

    def elapsed_ms(self, since: float) -> int:
        """Whole milliseconds elapsed since a previously captured instant"""
        return int(self.now() - since)


class MonotonicClock(Clock):
    """Wall clock backed by time.monotonic()"""

    def now(self) -> float:
        return time.monotonic() * 1000.0


class ManualClock(Clock):
    """Clock that only moves when told to; used by the RL env and tests"""

    def __init__(self, start_ms: float = 0.0):
        self._now = float(start_ms)

    def now(self) -> float:
        return self._now

    def advance(self, ms: float) -> float:
        if ms < 0:
            raise ValueError(f"cannot move clock backwards by {ms} ms")
        self._now += ms
        return self._now
