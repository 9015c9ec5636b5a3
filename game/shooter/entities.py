"""
Game entity dataclasses
"""

from dataclasses import dataclass

PLAYER_WIDTH = 40
PLAYER_HEIGHT = 10
BULLET_WIDTH = 5
BULLET_HEIGHT = 10
ENEMY_WIDTH = 40
ENEMY_HEIGHT = 40


@dataclass
class Player:
    """Player ship; only moves horizontally"""
    x: float
    width: float = PLAYER_WIDTH
    height: float = PLAYER_HEIGHT


@dataclass
class Bullet:
    """Projectile fired upward by the player"""
    x: float
    y: float
    width: float = BULLET_WIDTH
    height: float = BULLET_HEIGHT


@dataclass
class Enemy:
    """Enemy descending toward the bottom edge"""
    x: float
    y: float
    width: float = ENEMY_WIDTH
    height: float = ENEMY_HEIGHT
