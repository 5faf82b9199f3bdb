"""
Overlap tests between circles and axis-aligned rectangles.

Circles expose ``x``, ``y`` (centre) and ``r``. Rectangles expose ``x``,
``y`` (top-left corner), ``w`` and ``h``. Touching shapes count as
colliding.
"""

from __future__ import annotations


def is_circle_rect_colliding(circle, rect) -> bool:
    """
    Check whether a circle overlaps a rectangle.

    :param circle: Object with ``x``, ``y`` and ``r``
    :param rect: Object with ``x``, ``y``, ``w`` and ``h``

    :return: bool
    """
    half_w = rect.w / 2
    half_h = rect.h / 2
    dist_x = abs(circle.x - rect.x - half_w)
    dist_y = abs(circle.y - rect.y - half_h)

    if dist_x > half_w + circle.r:
        return False
    if dist_y > half_h + circle.r:
        return False
    if dist_x <= half_w:
        return True
    if dist_y <= half_h:
        return True

    # corner region
    dx = dist_x - half_w
    dy = dist_y - half_h
    return dx * dx + dy * dy <= circle.r * circle.r


def is_rect_rect_colliding(first, second) -> bool:
    """
    Check whether two rectangles overlap.

    :param first: Object with ``x``, ``y``, ``w`` and ``h``, or None
    :param second: Object with ``x``, ``y``, ``w`` and ``h``, or None

    :return: bool
    """
    if first is None or second is None:
        return False
    return not (
        first.x > second.x + second.w
        or first.x + first.w < second.x
        or first.y > second.y + second.h
        or first.y + first.h < second.y
    )
