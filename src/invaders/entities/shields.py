"""
Shield entities
"""

from __future__ import annotations

from dataclasses import dataclass, field

import pygame

from invaders.config import ShieldSettings
from invaders.constants import SHIELD_COLOR


@dataclass
class ShieldPart:
    x: float
    y: float
    w: int = 10
    h: int = 10
    destroy: bool = False

    def draw(self, surface: pygame.Surface):
        pygame.draw.rect(
            surface, SHIELD_COLOR, pygame.Rect(int(self.x), int(self.y), self.w, self.h)
        )


@dataclass
class Shield:
    """
    A block of parts that projectiles chip away one part at a time
    """

    x: float
    y: float
    parts: list[ShieldPart] = field(default_factory=list)

    @classmethod
    def build(cls, x: float, y: float, settings: ShieldSettings) -> "Shield":
        """
        :param x: Left edge of the shield
        :type x: float

        :param y: Top edge of the shield
        :type y: float

        :param settings: Shield settings
        :type settings: ShieldSettings

        :return: Shield
        """
        size = settings.part_size
        parts = [
            ShieldPart(x + i * size, y + j * size, size, size)
            for i in range(settings.parts_x)
            for j in range(settings.parts_y)
        ]
        return cls(x, y, parts)

    def update(self, world):  # pylint: disable=unused-argument
        """Shields are passive, projectiles resolve the hits."""

    def draw(self, surface: pygame.Surface):
        for part in self.parts:
            part.draw(surface)
