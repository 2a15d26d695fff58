import dataclasses
import random

from . import config as cfg
from .boundaries import build_segments, recolor
from .controls import MovementState
from .geometry import unit_vector
from .maze import cell_at, cell_center, generate_maze, is_blocking, pick_spawn
from .projector import project
from .resolver import resolve
from .viewer import Viewer


class World:
    """All simulation state for one run: maze, walls, viewers, input state.

    Owned by the frame loop and passed to the renderer; nothing here is
    global, so tests can build as many worlds as they like.
    """

    def __init__(self, config=None):
        self.config = (config or cfg.EngineConfig()).validate()
        self.mode = self.config.mode
        self.movement = MovementState()
        self.wall_color_idx = 0
        self.reset()

    # ---------- Setup ----------
    def reset(self):
        c = self.config
        self.rng = random.Random(c.seed)
        self.grid = generate_maze(c.rows, c.cols, self.rng, start=c.start)
        self.segments = build_segments(self.grid, c.cell_w, c.cell_h, self.wall_color, with_bounds=c.with_bounds)
        self.viewers = []
        # primary viewer starts at the carve root
        x, y = cell_center(c.start, c.cell_w, c.cell_h)
        self.add_viewer(x, y, color=cfg.VIEWER_COLORS[0])
        for i in range(1, c.viewer_count):
            x, y = cell_center(pick_spawn(self.grid, self.rng), c.cell_w, c.cell_h)
            heading = self.rng.uniform(0.0, 360.0)
            self.add_viewer(x, y, heading=heading, color=cfg.VIEWER_COLORS[i])
        self.movement.clear()
        return self

    def regenerate(self, seed=None):
        """New maze from a fresh seed (or ``seed``); ``reset()`` replays the current one."""
        if seed is None:
            seed = self.config.seed
            while seed == self.config.seed:
                seed = random.randint(0, 2**31 - 1)
        self.config = dataclasses.replace(self.config, seed=seed)
        return self.reset()

    def add_viewer(self, x, y, heading=0.0, color=None):
        if not (0 <= x <= self.width and 0 <= y <= self.height):
            raise ValueError(f"viewer at ({x}, {y}) is outside the {self.width}x{self.height} world")
        v = Viewer(x, y, heading=heading, fov=self.config.fov, ray_count=self.config.ray_count,
                   color=color or cfg.VIEWER_COLORS[len(self.viewers) % len(cfg.VIEWER_COLORS)],
                   ray_color=cfg.RAY_COLOR)
        self.viewers.append(v)
        return v

    @property
    def width(self):
        return self.config.cols * self.config.cell_w

    @property
    def height(self):
        return self.config.rows * self.config.cell_h

    @property
    def primary(self):
        return self.viewers[0]

    @property
    def wall_color(self):
        return cfg.WALL_COLORS[self.wall_color_idx]

    # ---------- Commands ----------
    def toggle_wall_color(self):
        self.wall_color_idx = (self.wall_color_idx + 1) % len(cfg.WALL_COLORS)
        recolor(self.segments, self.wall_color)
        return self.wall_color

    def cycle_mode(self):
        modes = cfg.RENDER_MODES
        if self.config.fov >= 180:
            modes = ("top_down",)
        i = modes.index(self.mode) if self.mode in modes else -1
        self.mode = modes[(i + 1) % len(modes)]
        return self.mode

    def turn(self, delta):
        self.primary.turn(delta)

    def rotate(self, direction):
        self.turn(direction * self.config.rotate_step)

    # ---------- Movement ----------
    def _blocked(self, x, y):
        if not (0 < x < self.width and 0 < y < self.height):
            return True
        if not self.config.collide_walls:
            return False
        c = self.config
        pad = cfg.BODY_PAD
        for px in (x - pad, x + pad):
            for py in (y - pad, y + pad):
                r, col = cell_at(px, py, c.cell_w, c.cell_h)
                if is_blocking(self.grid, r, col):
                    return True
        return False

    def apply_movement(self, dt):
        m = self.movement
        v = self.primary
        fwd = (1 if m.forward else 0) - (1 if m.back else 0)
        side = (1 if m.right else 0) - (1 if m.left else 0)
        if fwd == 0 and side == 0:
            return False
        f, r = v.forward, v.right
        step = unit_vector(f.x * fwd + r.x * side, f.y * fwd + r.y * side) * (self.config.move_speed * dt)

        moved = False
        # axis-separated so the viewer slides along walls
        if not self._blocked(v.pos.x + step.x, v.pos.y):
            v.move(step.x, 0)
            moved = True
        if not self._blocked(v.pos.x, v.pos.y + step.y):
            v.move(0, step.y)
            moved = True
        return moved

    # ---------- Frame ----------
    def step(self, dt):
        """One tick: move, sync every fan, resolve every ray.

        Returns one list of HitRecords per viewer, in viewer order.
        """
        self.apply_movement(dt)
        frame = []
        for v in self.viewers:
            v.sync()
            frame.append(resolve(v, self.segments, cfg.BACKGROUND))
        return frame

    def columns(self, hits, screen_w=None, screen_h=None):
        c = self.config
        offsets = [ray.offset for ray in self.primary.rays]
        return project(hits, offsets,
                       screen_w if screen_w is not None else c.screen_w,
                       screen_h if screen_h is not None else c.screen_h,
                       height_scale=c.height_scale, shade_distance=c.shade_distance,
                       min_brightness=c.min_brightness, background=cfg.BACKGROUND)
