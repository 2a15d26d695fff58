import math
from dataclasses import dataclass
from typing import Optional

import pygame

from .geometry import cast


@dataclass(frozen=True)
class HitRecord:
    distance: float
    color: pygame.Color
    point: Optional[pygame.Vector2] = None

    @property
    def hit(self):
        return self.point is not None


def no_hit(background):
    return HitRecord(math.inf, pygame.Color(background))


def nearest_hit(origin, ray, segments, background=(0, 0, 0)):
    """Closest intersection of ``ray`` over ``segments``.

    Distances are measured from ``origin`` (the viewer position). Only a
    strictly closer hit replaces the current best, so on exact ties the
    segment that comes first in the list wins.
    """
    record = math.inf
    closest = None
    color = background
    for seg in segments:
        point = cast(ray.pos, ray.dir, seg)
        if point is None:
            continue
        d = math.hypot(origin[0] - point.x, origin[1] - point.y)
        if d < record:
            record = d
            closest = point
            color = seg.color
    if closest is None:
        return no_hit(background)
    return HitRecord(record, pygame.Color(color), closest)


def resolve(viewer, segments, background=(0, 0, 0)):
    # O(rays * segments): the dominant cost of a frame
    return [nearest_hit(viewer.pos, ray, segments, background) for ray in viewer.rays]
