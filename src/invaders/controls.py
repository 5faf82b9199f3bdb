"""
Input state shared between the event pump and the entities
"""

from __future__ import annotations

from dataclasses import dataclass

import pygame


@dataclass
class Keyboard:
    left: bool = False
    right: bool = False
    firing: bool = False


@dataclass
class Mouse:
    """
    Pointer position. ``w`` and ``h`` let the pointer be tested as a tiny
    rectangle.
    """

    x: float = 0
    y: float = 0
    w: float = 0.1
    h: float = 0.1


KEY_FLAGS = {
    pygame.K_LEFT: "left",
    pygame.K_RIGHT: "right",
    pygame.K_SPACE: "firing",
}


def handle_event(event: pygame.event.Event, keyboard: Keyboard, mouse: Mouse) -> None:
    """
    Update the input state from a pygame event. Events that are not about
    the movement keys, the fire key or the pointer are ignored.

    :param event: Event from the pygame queue
    :type event: pygame.event.Event

    :param keyboard: Keyboard state to update
    :type keyboard: Keyboard

    :param mouse: Mouse state to update
    :type mouse: Mouse
    """
    if event.type in (pygame.KEYDOWN, pygame.KEYUP):
        flag = KEY_FLAGS.get(event.key)
        if flag is not None:
            setattr(keyboard, flag, event.type == pygame.KEYDOWN)
    elif event.type in (pygame.MOUSEMOTION, pygame.MOUSEBUTTONDOWN):
        mouse.x, mouse.y = event.pos
