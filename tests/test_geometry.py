import random
from types import SimpleNamespace

import pytest

from invaders.geometry import is_circle_rect_colliding, is_rect_rect_colliding


def circle(x, y, r):
    return SimpleNamespace(x=x, y=y, r=r)


def rect(x, y, w, h):
    return SimpleNamespace(x=x, y=y, w=w, h=h)


def brute_circle_rect(c, rc):
    closest_x = min(max(c.x, rc.x), rc.x + rc.w)
    closest_y = min(max(c.y, rc.y), rc.y + rc.h)
    dx = c.x - closest_x
    dy = c.y - closest_y
    return dx * dx + dy * dy <= c.r * c.r


def brute_rect_rect(a, b):
    return max(a.x, b.x) <= min(a.x + a.w, b.x + b.w) and max(a.y, b.y) <= min(
        a.y + a.h, b.y + b.h
    )


@pytest.mark.parametrize(
    "c, expected",
    [
        (circle(15, 15, 5), True),  # inside
        (circle(35, 15, 5), True),  # touching the right edge
        (circle(36, 15, 5), False),
        (circle(15, -5, 5), True),  # touching the top edge
        (circle(33, 33, 5), True),  # near corner, within radius
        (circle(35, 35, 5), False),  # diagonal distance is 5 * sqrt(2)
    ],
)
def test_circle_rect_cases(c, expected):
    assert is_circle_rect_colliding(c, rect(0, 0, 30, 30)) is expected


def test_circle_rect_mirror_symmetry():
    rng = random.Random(7)
    for _ in range(500):
        rc = rect(rng.randint(0, 100), rng.randint(0, 100), rng.randint(1, 40), rng.randint(1, 40))
        c = circle(rng.randint(-50, 200), rng.randint(-50, 200), rng.randint(1, 15))
        centre_x = rc.x + rc.w / 2
        centre_y = rc.y + rc.h / 2
        mirrored = circle(2 * centre_x - c.x, 2 * centre_y - c.y, c.r)
        assert is_circle_rect_colliding(c, rc) == is_circle_rect_colliding(mirrored, rc)


def test_circle_rect_agrees_with_brute_force():
    rng = random.Random(42)
    hits = 0
    for _ in range(2000):
        rc = rect(rng.randint(0, 100), rng.randint(0, 100), rng.randint(1, 40), rng.randint(1, 40))
        c = circle(rng.randint(-30, 170), rng.randint(-30, 170), rng.randint(1, 15))
        expected = brute_circle_rect(c, rc)
        hits += expected
        assert is_circle_rect_colliding(c, rc) == expected
    assert hits > 0


def test_rect_rect_cases():
    base = rect(0, 0, 10, 10)
    assert is_rect_rect_colliding(base, rect(5, 5, 10, 10))
    assert is_rect_rect_colliding(base, rect(10, 0, 10, 10))  # shared edge
    assert not is_rect_rect_colliding(base, rect(11, 0, 10, 10))
    assert not is_rect_rect_colliding(base, rect(0, 11, 10, 10))
    assert is_rect_rect_colliding(base, rect(2, 2, 1, 1))  # contained


def test_rect_rect_none_never_collides():
    assert not is_rect_rect_colliding(None, rect(0, 0, 1, 1))
    assert not is_rect_rect_colliding(rect(0, 0, 1, 1), None)


def test_rect_rect_symmetric_and_agrees_with_brute_force():
    rng = random.Random(3)
    for _ in range(2000):
        a = rect(rng.randint(0, 100), rng.randint(0, 100), rng.randint(1, 40), rng.randint(1, 40))
        b = rect(rng.randint(0, 100), rng.randint(0, 100), rng.randint(1, 40), rng.randint(1, 40))
        result = is_rect_rect_colliding(a, b)
        assert result == is_rect_rect_colliding(b, a)
        assert result == brute_rect_rect(a, b)


def test_mouse_pointer_as_rect():
    from invaders.controls import Mouse

    assert is_rect_rect_colliding(Mouse(x=5, y=5), rect(0, 0, 10, 10))
    assert not is_rect_rect_colliding(Mouse(x=50, y=5), rect(0, 0, 10, 10))
