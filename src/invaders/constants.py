"""
Constants for the game.
"""

from __future__ import annotations

FPS = 60
CANVAS_SIZE = (800, 500)
TITLE = "Invaders"

BACKGROUND_COLOR = (0, 0, 0)
PLAYER_COLOR = (255, 255, 255)
PROJECTILE_COLOR = (255, 255, 255)
ENEMY_COLOR = (0, 128, 0)
SHIELD_COLOR = (255, 255, 255)
TEXT_COLOR = (255, 255, 255)
