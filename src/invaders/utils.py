"""
Invaders utils
"""

from __future__ import annotations

import logging

import pygame

logger = logging.getLogger("invaders")

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: int | str = logging.INFO) -> None:
    """
    Configure the root logging handler.

    :param level: Logging level, either a number or a name like ``"DEBUG"``
    :type level: int | str
    """
    if isinstance(level, str):
        level = level.upper()
    logging.basicConfig(level=level, format=LOG_FORMAT)


def set_screen(caption: str, width: int, height: int) -> pygame.Surface:
    """
    Set the screen

    :param caption: Caption of the screen
    :type caption: str

    :param width: Width of the screen
    :type width: int

    :param height: Height of the screen
    :type height: int

    :return: pygame.Surface
    """
    screen = pygame.display.set_mode((width, height))
    pygame.display.set_caption(caption)

    return screen
