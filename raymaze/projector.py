import math
from dataclasses import dataclass

import pygame

from .config import HEIGHT_SCALE, MIN_BRIGHTNESS, SHADE_DISTANCE


@dataclass(frozen=True)
class Column:
    x: float
    y: float
    width: float
    height: float
    color: pygame.Color
    distance: float


def clamp(v, lo, hi): return max(lo, min(hi, v))


def perpendicular_distance(distance, offset):
    """Raw hit distance with the fisheye removed (``offset`` in degrees)."""
    return distance * math.cos(math.radians(offset))


def column_height(dist, screen_h, height_scale=HEIGHT_SCALE):
    if math.isinf(dist):
        return 0.0
    if dist <= 0:
        return float(screen_h)
    return clamp(screen_h / (dist * height_scale), 0.0, float(screen_h))


def brightness(dist, shade_distance=SHADE_DISTANCE, min_brightness=MIN_BRIGHTNESS):
    if math.isinf(dist):
        return float(min_brightness)
    return clamp(255.0 * (1.0 - dist / shade_distance), float(min_brightness), 255.0)


def shade(color, level):
    color = pygame.Color(color)
    k = level / 255.0
    return pygame.Color(
        int(clamp(round(color.r * k), 0, 255)),
        int(clamp(round(color.g * k), 0, 255)),
        int(clamp(round(color.b * k), 0, 255)),
        color.a,
    )


def project(hits, offsets, screen_w, screen_h, height_scale=HEIGHT_SCALE,
            shade_distance=SHADE_DISTANCE, min_brightness=MIN_BRIGHTNESS,
            background=(0, 0, 0)):
    """Turn one fan's hit records into first-person wall strips.

    ``offsets`` are the per-ray angles from the fan center, in the same
    order as ``hits``. Strip ``i`` sits at ``i * screen_w / N`` and is
    vertically centered.
    """
    if len(hits) != len(offsets):
        raise ValueError(f"{len(hits)} hits for {len(offsets)} rays")
    n = len(hits)
    if n == 0:
        return []
    strip_w = screen_w / n
    columns = []
    for i, (rec, offset) in enumerate(zip(hits, offsets)):
        if not rec.hit:
            columns.append(Column(i * strip_w, screen_h / 2, strip_w, 0.0,
                                  pygame.Color(background), math.inf))
            continue
        d = perpendicular_distance(rec.distance, offset)
        h = column_height(d, screen_h, height_scale)
        level = brightness(d, shade_distance, min_brightness)
        columns.append(Column(i * strip_w, (screen_h - h) / 2, strip_w, h, shade(rec.color, level), d))
    return columns
