"""
Projectile entity
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import pygame

from invaders.constants import PROJECTILE_COLOR
from invaders.geometry import is_circle_rect_colliding

if TYPE_CHECKING:
    from invaders.world import World


@dataclass(frozen=True)
class CollideWith:
    """
    What a projectile is allowed to hit besides shields
    """

    player: bool = False
    enemies: bool = False


@dataclass
class Projectile:
    """
    A round shot travelling vertically. Negative speed moves up.
    """

    x: float
    y: float
    speed: float
    collide_with: CollideWith = field(default_factory=CollideWith)
    r: float = 5
    destroy: bool = False

    def update(self, world: World):
        """
        Move the projectile and resolve its hits against shields, the
        player and enemies.

        :param world: World holding the possible targets
        :type world: World
        """
        self.y += self.speed
        self.destroy = self.y < 0 or self.y > world.settings.window.height

        for shield in world.shields:
            for part in shield.parts:
                if self.destroy:
                    break
                if is_circle_rect_colliding(self, part):
                    self.destroy = True
                    part.destroy = True

        player = world.player
        if (
            self.collide_with.player
            and not self.destroy
            and not player.destroy
            and is_circle_rect_colliding(self, player)
        ):
            player.destroy = True
            self.destroy = True

        if not self.collide_with.enemies:
            return

        for enemy in world.enemies:
            if self.destroy:
                return
            if not enemy.destroy and is_circle_rect_colliding(self, enemy):
                enemy.destroy = True
                self.destroy = True

    def draw(self, surface: pygame.Surface):
        pygame.draw.circle(surface, PROJECTILE_COLOR, (self.x, self.y), self.r)
