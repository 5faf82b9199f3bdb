"""
Enemy entities and the row formation that marches them across the surface
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

import pygame

from invaders.config import EnemySettings
from invaders.constants import ENEMY_COLOR
from invaders.entities.projectile import CollideWith, Projectile
from invaders.utils import logger

if TYPE_CHECKING:
    from invaders.world import World


class Direction(str, Enum):
    RIGHT = "R"
    DOWN_LEFT = "DL"
    LEFT = "L"
    DOWN_RIGHT = "DR"

    def next(self) -> "Direction":
        return _NEXT_DIRECTION[self]

    @property
    def descending(self) -> bool:
        return self in (Direction.DOWN_LEFT, Direction.DOWN_RIGHT)


_NEXT_DIRECTION = {
    Direction.RIGHT: Direction.DOWN_LEFT,
    Direction.DOWN_LEFT: Direction.LEFT,
    Direction.LEFT: Direction.DOWN_RIGHT,
    Direction.DOWN_RIGHT: Direction.RIGHT,
}


@dataclass
class Enemy:
    """
    Enemy entity
    """

    x: float
    y: float
    w: int = 30
    h: int = 30
    cooldown_between_shots: int = 50
    fire_every: int = 50
    fire_chance: float = 0.015
    projectile_speed: int = 10
    current_cooldown: int = 0
    destroy: bool = False

    @classmethod
    def from_settings(cls, x: float, y: float, settings: EnemySettings) -> "Enemy":
        return cls(
            x=x,
            y=y,
            w=settings.w,
            h=settings.h,
            cooldown_between_shots=settings.cooldown_between_shots,
            fire_every=settings.fire_every,
            fire_chance=settings.fire_chance,
            projectile_speed=settings.projectile_speed,
        )

    def update(self, world: World):
        """
        Fire at the player every now and then. Shots are only considered on
        frames that are a multiple of ``fire_every`` and while the cooldown
        is over.

        :param world: World providing the frame counter and random source
        :type world: World
        """
        if self.current_cooldown == 0:
            if world.frame % self.fire_every == 0 and world.rng.random() < self.fire_chance:
                self.shoot(world)
        else:
            self.current_cooldown -= 1

    def shoot(self, world: World):
        world.projectiles.append(
            Projectile(
                self.x + self.w / 2,
                self.y + self.h,
                self.projectile_speed,
                collide_with=CollideWith(player=True),
                r=world.settings.projectile.r,
            )
        )
        self.current_cooldown = self.cooldown_between_shots
        logger.debug(f"Enemy at ({self.x}, {self.y}) fired")

    def draw(self, surface: pygame.Surface):
        pygame.draw.rect(
            surface, ENEMY_COLOR, pygame.Rect(int(self.x), int(self.y), self.w, self.h)
        )


@dataclass
class EnemyRow:
    """
    One row of the enemy formation.

    The row marches right until its outermost enemy touches the right edge,
    drops ``drop`` pixels, marches left to the left edge, drops again and
    starts over (R -> DL -> L -> DR -> R). A row left without enemies marks
    itself destroyed on its next update.

    Rows march independently: a row that lost its outer enemies sweeps
    further before each drop, so rows above it can catch up and pass
    through it.
    """

    enemies: list[Enemy] = field(default_factory=list)
    speed_x: float = 1.0
    speed_y: float = 1.0
    drop: float = 20.0
    direction: Direction = Direction.RIGHT
    descended: float = 0.0
    destroy: bool = False

    @classmethod
    def build(cls, index: int, settings: EnemySettings) -> "EnemyRow":
        """
        Create the ``index``-th row of the formation

        :param index: Row number, 0 is the top row
        :type index: int

        :param settings: Enemy settings
        :type settings: EnemySettings

        :return: EnemyRow
        """
        y = index * (settings.h + settings.gap_y) + settings.offset_y
        enemies = [
            Enemy.from_settings(j * (settings.w + settings.gap_x) + settings.offset_x, y, settings)
            for j in range(settings.cols)
        ]
        return cls(
            enemies=enemies,
            speed_x=settings.speed_x,
            speed_y=settings.speed_y,
            drop=settings.drop,
        )

    def bounds(self) -> tuple[float, float] | None:
        """
        Horizontal extent of the live enemies, or None when there are none.

        :return: (left, right)
        """
        live = [enemy for enemy in self.enemies if not enemy.destroy]
        if not live:
            return None
        return min(e.x for e in live), max(e.x + e.w for e in live)

    def _shift(self, dx: float, dy: float):
        for enemy in self.enemies:
            enemy.x += dx
            enemy.y += dy

    def march(self, width: float):
        """
        Move the row one frame along its current direction.

        :param width: Width of the surface
        :type width: float
        """
        bounds = self.bounds()
        if bounds is None:
            return
        left, right = bounds

        if self.direction is Direction.RIGHT:
            dx = max(0.0, min(self.speed_x, width - right))
            self._shift(dx, 0)
            if right + dx >= width:
                self.direction = self.direction.next()
        elif self.direction is Direction.LEFT:
            dx = max(0.0, min(self.speed_x, left))
            self._shift(-dx, 0)
            if left - dx <= 0:
                self.direction = self.direction.next()
        else:
            dy = min(self.speed_y, self.drop - self.descended)
            self._shift(0, dy)
            self.descended += dy
            if self.descended >= self.drop:
                self.descended = 0.0
                self.direction = self.direction.next()

    def update(self, world: World):
        if not self.enemies:
            self.destroy = True
            return

        self.march(world.settings.window.width)
        for enemy in self.enemies:
            enemy.update(world)

    def draw(self, surface: pygame.Surface):
        for enemy in self.enemies:
            enemy.draw(surface)
