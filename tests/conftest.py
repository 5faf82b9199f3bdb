import os
import random

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame  # noqa: E402
import pytest  # noqa: E402

from invaders.config import Settings  # noqa: E402
from invaders.world import World  # noqa: E402


class FixedRandom(random.Random):
    """Random source that always draws the same value."""

    def __init__(self, value: float):
        super().__init__()
        self.value = value

    def random(self):
        return self.value


@pytest.fixture
def settings():
    return Settings()


@pytest.fixture
def world(settings):
    return World.create(settings, random.Random(1234))


@pytest.fixture
def empty_world(settings):
    """World with only the player, so nothing gets in a projectile's way."""
    w = World.create(settings, random.Random(1234))
    w.enemy_rows = []
    w.shields = []
    return w


@pytest.fixture
def surface(settings):
    return pygame.Surface((settings.window.width, settings.window.height))


@pytest.fixture
def fixed_random():
    return FixedRandom
