"""
Game configuration
"""

from dataclasses import dataclass

from .difficulty import DEFAULT_DIFFICULTY, DifficultyTable, validate_table
from .entities import (
    BULLET_HEIGHT,
    BULLET_WIDTH,
    ENEMY_HEIGHT,
    ENEMY_WIDTH,
    PLAYER_HEIGHT,
    PLAYER_WIDTH,
)


@dataclass(frozen=True)
class GameConfig:
    """Tunables for the simulation core. Units are pixels, ticks and ms."""

    # Arena
    width: int = 400
    height: int = 600

    # Player
    player_speed: float = 5.0  # px/tick
    player_width: float = PLAYER_WIDTH
    player_height: float = PLAYER_HEIGHT
    player_y_offset: float = 50.0  # drawn at height - offset

    # Bullets
    bullet_width: float = BULLET_WIDTH
    bullet_height: float = BULLET_HEIGHT
    bullet_speed: float = 8.0  # px/tick, upward
    bullet_x_offset: float = 15.0  # relative to player x
    bullet_y_offset: float = 60.0  # spawned at height - offset
    fire_cooldown_ms: int = 300
    cull_offscreen_bullets: bool = True

    # Enemies
    enemy_width: float = ENEMY_WIDTH
    enemy_height: float = ENEMY_HEIGHT
    enemy_speed: float = 1.0  # px/tick, downward
    enemy_spawn_y: float = 50.0
    initial_enemies: int = 5
    initial_enemy_spacing: float = 80.0

    # Scoring
    score_per_kill: int = 10
    difficulty: DifficultyTable = DEFAULT_DIFFICULTY

    def __post_init__(self):
        for name in ("width", "height", "player_width", "player_height",
                     "bullet_width", "bullet_height", "enemy_width", "enemy_height"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive, got {getattr(self, name)}")
        if self.player_width > self.width:
            raise ValueError("player is wider than the field")
        if int(self.width - self.enemy_width) < 1:
            raise ValueError("enemy must be at least 1 px narrower than the field")
        if self.fire_cooldown_ms < 0:
            raise ValueError(f"fire_cooldown_ms must be >= 0, got {self.fire_cooldown_ms}")
        if self.initial_enemies < 0:
            raise ValueError(f"initial_enemies must be >= 0, got {self.initial_enemies}")
        validate_table(self.difficulty)

    @property
    def player_max_x(self) -> float:
        return self.width - self.player_width

    @property
    def player_y(self) -> float:
        return self.height - self.player_y_offset

    @property
    def game_over_y(self) -> float:
        """An enemy whose y exceeds this line ends the run"""
        return self.height - self.enemy_height
