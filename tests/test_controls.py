import pygame
import pytest

from invaders.controls import Keyboard, Mouse, handle_event


@pytest.mark.parametrize(
    "key, flag",
    [(pygame.K_LEFT, "left"), (pygame.K_RIGHT, "right"), (pygame.K_SPACE, "firing")],
)
def test_key_down_and_up_toggle_flag(key, flag):
    keyboard, mouse = Keyboard(), Mouse()

    handle_event(pygame.event.Event(pygame.KEYDOWN, key=key), keyboard, mouse)
    assert getattr(keyboard, flag) is True

    handle_event(pygame.event.Event(pygame.KEYUP, key=key), keyboard, mouse)
    assert getattr(keyboard, flag) is False


def test_other_keys_are_ignored():
    keyboard, mouse = Keyboard(), Mouse()
    handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_a), keyboard, mouse)
    assert keyboard == Keyboard()


@pytest.mark.parametrize("event_type", [pygame.MOUSEMOTION, pygame.MOUSEBUTTONDOWN])
def test_pointer_events_set_position(event_type):
    keyboard, mouse = Keyboard(), Mouse()
    handle_event(pygame.event.Event(event_type, pos=(120, 45)), keyboard, mouse)
    assert (mouse.x, mouse.y) == (120, 45)
    assert keyboard == Keyboard()
