"""
Player entity
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import pygame

from invaders.config import Settings
from invaders.constants import PLAYER_COLOR
from invaders.entities.projectile import CollideWith, Projectile
from invaders.utils import logger

if TYPE_CHECKING:
    from invaders.world import World


@dataclass
class Player:
    """
    Player ship, steered with the keyboard state of the world
    """

    x: float
    y: float
    w: int = 40
    h: int = 20
    speed: int = 10
    cooldown_between_shots: int = 50
    projectile_speed: int = -10
    current_cooldown: int = 0
    destroy: bool = False

    @classmethod
    def spawn(cls, settings: Settings) -> "Player":
        """
        Create the player centred at the bottom of the surface

        :param settings: Game settings
        :type settings: Settings

        :return: Player
        """
        window, player = settings.window, settings.player
        return cls(
            x=window.width / 2 - player.w / 2,
            y=window.height - player.bottom_offset,
            w=player.w,
            h=player.h,
            speed=player.speed,
            cooldown_between_shots=player.cooldown_between_shots,
            projectile_speed=player.projectile_speed,
        )

    def update(self, world: World):
        """
        Move the player, keep it inside the surface and fire when the
        cooldown allows it.

        :param world: World holding the keyboard state and projectiles
        :type world: World
        """
        if self.destroy:
            return

        keyboard = world.keyboard
        if keyboard.right:
            self.x += self.speed
        if keyboard.left:
            self.x -= self.speed

        width = world.settings.window.width
        self.x = max(self.x, 0)
        self.x = min(self.x, width - self.w)

        if self.current_cooldown == 0:
            if keyboard.firing:
                self.shoot(world)
        else:
            self.current_cooldown -= 1

    def shoot(self, world: World):
        projectile = Projectile(
            self.x + self.w / 2,
            self.y,
            self.projectile_speed,
            collide_with=CollideWith(enemies=True),
            r=world.settings.projectile.r,
        )
        world.projectiles.append(projectile)
        self.current_cooldown = self.cooldown_between_shots
        logger.debug(f"Player shot at ({projectile.x}, {projectile.y})")

    def draw(self, surface: pygame.Surface):
        if self.destroy:
            return
        pygame.draw.rect(
            surface, PLAYER_COLOR, pygame.Rect(int(self.x), int(self.y), self.w, self.h)
        )
