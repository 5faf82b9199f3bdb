"""
Game entities
"""

from invaders.entities.enemies import Direction, Enemy, EnemyRow
from invaders.entities.player import Player
from invaders.entities.projectile import CollideWith, Projectile
from invaders.entities.shields import Shield, ShieldPart

__all__ = [
    "CollideWith",
    "Direction",
    "Enemy",
    "EnemyRow",
    "Player",
    "Projectile",
    "Shield",
    "ShieldPart",
]
