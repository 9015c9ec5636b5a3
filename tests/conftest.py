import pytest

from game.shooter import GameConfig, ManualClock, ShooterGame
from game.shooter.entities import Player
from game.shooter.state import RunState


class ScriptedRandInt:
    """Uniform-integer stand-in that replays fixed values and records bounds"""

    def __init__(self, values=()):
        self.values = list(values)
        self.calls = []

    def __call__(self, n):
        self.calls.append(n)
        value = self.values.pop(0) if self.values else 0
        assert 0 <= value < n
        return value


@pytest.fixture
def config():
    return GameConfig()


@pytest.fixture
def clock():
    return ManualClock()


@pytest.fixture
def randint():
    return ScriptedRandInt([123, 7, 359])


@pytest.fixture
def state(config, clock):
    return RunState(
        player=Player(x=config.width / 2),
        spawn_interval_ms=1000,
        last_spawn_time=clock.now(),
    )


@pytest.fixture
def make_game(config, clock, randint):
    def _make(**kwargs):
        kwargs.setdefault("config", config)
        kwargs.setdefault("clock", clock)
        kwargs.setdefault("randint", randint)
        return ShooterGame(**kwargs)
    return _make
