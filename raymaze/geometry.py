import math

import pygame

# |D| below this counts as parallel (cos/sin never give an exact 0)
PARALLEL_EPSILON = 1e-9


def wrap_degrees(deg):
    deg = deg % 360.0
    # -1e-17 % 360 rounds to 360.0
    return 0.0 if deg >= 360.0 else deg


def direction_from_angle(deg):
    rad = math.radians(deg)
    return pygame.Vector2(math.cos(rad), math.sin(rad))


def unit_vector(x, y):
    length = math.hypot(x, y)
    if length == 0:
        raise ValueError("cannot normalize a zero-length vector")
    return pygame.Vector2(x / length, y / length)


def intersect(origin, direction, a, b):
    """Ray/segment intersection parameters.

    The ray is ``origin + u * direction`` for ``u >= 0`` and the segment is
    ``a + t * (b - a)``. Returns ``(t, u)`` when the ray crosses the open
    segment strictly ahead of its origin, otherwise None. Parallel and
    colinear pairs are both a miss.
    """
    x1, y1 = a
    x2, y2 = b
    x3, y3 = origin
    x4, y4 = x3 + direction[0], y3 + direction[1]

    den = (x1 - x2) * (y3 - y4) - (y1 - y2) * (x3 - x4)
    if abs(den) < PARALLEL_EPSILON:
        return None

    t = ((x1 - x3) * (y3 - y4) - (y1 - y3) * (x3 - x4)) / den
    u = -((x1 - x2) * (y1 - y3) - (y1 - y2) * (x1 - x3)) / den
    if 0 < t < 1 and u > 0:
        return t, u
    return None


def cast(origin, direction, segment):
    """Hit point of the ray on ``segment`` or None."""
    hit = intersect(origin, direction, segment.a, segment.b)
    if hit is None:
        return None
    t = hit[0]
    (x1, y1), (x2, y2) = segment.a, segment.b
    return pygame.Vector2(x1 + t * (x2 - x1), y1 + t * (y2 - y1))
