"""
Run state owned by the simulation: entity store, score, timers, phase
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from .entities import Bullet, Enemy, Player


class Phase(Enum):
    PLAYING = "playing"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class InputState:
    """Level-triggered key snapshot polled once per tick"""
    left: bool = False
    right: bool = False
    fire: bool = False
    restart: bool = False


@dataclass
class RunState:
    """Single owned aggregate every system receives explicitly"""
    player: Player
    spawn_interval_ms: int
    last_spawn_time: float
    last_fire_time: Optional[float] = None  # None: never fired this run
    bullets: List[Bullet] = field(default_factory=list)
    enemies: List[Enemy] = field(default_factory=list)
    score: int = 0
    phase: Phase = Phase.PLAYING

    @property
    def is_game_over(self) -> bool:
        return self.phase is Phase.GAME_OVER
