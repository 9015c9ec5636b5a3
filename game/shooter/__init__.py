"""Arcade shooter module - simulation core, Gymnasium env, Arcade front end"""

from .clock import Clock, ManualClock, MonotonicClock
from .config import GameConfig
from .difficulty import DEFAULT_DIFFICULTY, FLAT_DIFFICULTY, spawn_interval_for_score
from .entities import Bullet, Enemy, Player
from .game import ShooterGame
from .shooter_env import ShooterEnv, run_random_episode
from .state import InputState, Phase, RunState

__all__ = [
    'Clock', 'ManualClock', 'MonotonicClock',
    'GameConfig',
    'DEFAULT_DIFFICULTY', 'FLAT_DIFFICULTY', 'spawn_interval_for_score',
    'Bullet', 'Enemy', 'Player',
    'ShooterGame',
    'ShooterEnv', 'run_random_episode',
    'InputState', 'Phase', 'RunState',
]
