"""
World state: every live entity plus the frame counter and the outcome
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import Enum

from invaders.config import Settings
from invaders.controls import Keyboard, Mouse
from invaders.entities import Enemy, EnemyRow, Player, Projectile, Shield
from invaders.utils import logger


class Outcome(str, Enum):
    PLAYING = "playing"
    WON = "won"
    LOST = "lost"


def where_not_destroyed(items: list) -> list:
    return [item for item in items if not item.destroy]


@dataclass
class World:
    """
    Owner of all entity collections.

    Entities receive the world in their ``update`` so they can read the
    input state and append the projectiles they fire.
    """

    settings: Settings
    player: Player
    projectiles: list[Projectile] = field(default_factory=list)
    enemy_rows: list[EnemyRow] = field(default_factory=list)
    shields: list[Shield] = field(default_factory=list)
    keyboard: Keyboard = field(default_factory=Keyboard)
    mouse: Mouse = field(default_factory=Mouse)
    frame: int = 0
    outcome: Outcome = Outcome.PLAYING
    rng: random.Random = field(default_factory=random.Random)

    @classmethod
    def create(
        cls, settings: Settings | None = None, rng: random.Random | None = None
    ) -> "World":
        """
        Lay out the player, the enemy formation and the shields.

        :param settings: Game settings, defaults are used when omitted
        :type settings: Settings | None

        :param rng: Random source for enemy fire
        :type rng: random.Random | None

        :return: World
        """
        settings = settings or Settings()
        world = cls(
            settings=settings,
            player=Player.spawn(settings),
            rng=rng or random.Random(),
        )

        world.enemy_rows = [
            EnemyRow.build(i, settings.enemy) for i in range(settings.enemy.rows)
        ]

        shield = settings.shield
        y = settings.window.height - shield.bottom_offset
        world.shields = [
            Shield.build(shield.spacing * i, y, shield)
            for i in range(1, shield.count + 1)
        ]

        logger.info(
            f"World created: {len(world.enemies)} enemies in "
            f"{len(world.enemy_rows)} rows, {len(world.shields)} shields"
        )
        return world

    @property
    def enemies(self) -> list[Enemy]:
        return [enemy for row in self.enemy_rows for enemy in row.enemies]

    @property
    def finished(self) -> bool:
        return self.outcome is not Outcome.PLAYING

    def cleanup(self):
        """
        Drop every entity flagged as destroyed
        """
        self.projectiles = where_not_destroyed(self.projectiles)
        self.enemy_rows = where_not_destroyed(self.enemy_rows)
        for row in self.enemy_rows:
            row.enemies = where_not_destroyed(row.enemies)
        for shield in self.shields:
            shield.parts = where_not_destroyed(shield.parts)

    def check_outcome(self) -> Outcome:
        """
        Decide whether the game is won or lost. A decided outcome is final.

        :return: Outcome
        """
        if self.finished:
            return self.outcome

        if self.player.destroy or any(
            enemy.y + enemy.h >= self.player.y for enemy in self.enemies
        ):
            self.outcome = Outcome.LOST
        elif not self.enemies:
            self.outcome = Outcome.WON

        if self.finished:
            logger.info(f"Game {self.outcome.value} at frame {self.frame}")
        return self.outcome
