import pygame

from .geometry import direction_from_angle, wrap_degrees


class Ray:
    def __init__(self, x, y, angle, offset, color):
        self.pos = pygame.Vector2(x, y)
        self.angle = wrap_degrees(angle)
        self.offset = offset  # degrees from the viewer heading
        self.dir = direction_from_angle(angle)
        self.color = pygame.Color(color)


class Viewer:
    """A light source / camera that owns its fan of rays.

    Heading changes only mark the fan stale; ``sync()`` rebuilds it at most
    once per tick and snaps every ray origin to the current position.
    """

    def __init__(self, x, y, heading=0.0, fov=60.0, ray_count=240,
                 color=(255, 255, 237), ray_color=(255, 255, 0, 204)):
        if ray_count < 1:
            raise ValueError(f"ray_count must be >= 1, got {ray_count}")
        if not 0 < fov <= 360:
            raise ValueError(f"fov must be in (0, 360], got {fov}")
        self.pos = pygame.Vector2(x, y)
        self.heading = wrap_degrees(heading)
        self.fov = float(fov)
        self.ray_count = int(ray_count)
        self.color = pygame.Color(color)
        self.ray_color = pygame.Color(ray_color)
        self.rays = []
        self._fan_heading = None
        self.rebuild()

    @property
    def step(self):
        return self.fov / self.ray_count

    @property
    def forward(self):
        return direction_from_angle(self.heading)

    @property
    def right(self):
        # y grows downward, so +90 degrees is the viewer's right hand
        return direction_from_angle(self.heading + 90.0)

    @property
    def stale(self):
        return self._fan_heading != self.heading

    def rebuild(self):
        """Reconstruct the whole fan from the current heading."""
        start = -self.fov / 2
        step = self.step
        self.rays = [
            Ray(self.pos.x, self.pos.y, self.heading + start + i * step, start + i * step, self.ray_color)
            for i in range(self.ray_count)
        ]
        self._fan_heading = self.heading

    def set_heading(self, deg):
        self.heading = wrap_degrees(deg)

    def turn(self, delta):
        self.set_heading(self.heading + delta)

    def move(self, dx, dy):
        self.pos.x += dx
        self.pos.y += dy

    def move_to(self, x, y):
        self.pos.update(x, y)

    def sync(self):
        if self.stale:
            self.rebuild()
        for ray in self.rays:
            ray.pos.update(self.pos)
        return self.rays
