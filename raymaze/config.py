import random
from dataclasses import dataclass, field

import pygame

# ---------- Config ----------
SCREEN_W, SCREEN_H = 1050, 550
FPS_CAP = 60

# Maze config (odd dimensions only)
MAZE_ROWS = 11
MAZE_COLS = 21
MAZE_START = (1, 1)  # (row, col)

# Viewer / ray fan
FOV_DEG = 60.0
RAY_COUNT = 240
VIEWER_COUNT = 1
VIEWER_RADIUS = 5
RAY_STUB_LEN = 5       # short tick drawn along each ray in top-down mode

# Movement
MOVE_SPEED = 120.0     # px / sec
ROTATE_STEP = 5.0      # degrees per Q/E press
MOUSE_SENS = 0.25      # degrees per px (fixed mode)
MOUSE_SENS_VELOCITY = 10.0  # degrees per (px / ms) (velocity mode)
BODY_PAD = 4.0         # px kept between viewer and walls

# Projection / shading
HEIGHT_SCALE = 0.02
SHADE_DISTANCE = 600.0  # px at which walls reach MIN_BRIGHTNESS
MIN_BRIGHTNESS = 30

# Colors
BACKGROUND = pygame.Color(18, 18, 24)
CEILING = pygame.Color(20, 20, 28)
FLOOR = pygame.Color(38, 38, 46)
WALL_COLORS = (pygame.Color(235, 235, 235), pygame.Color(90, 160, 255))
VIEWER_COLORS = (
    pygame.Color(255, 255, 237),
    pygame.Color(255, 70, 90),
    pygame.Color(80, 200, 255),
    pygame.Color(140, 255, 120),
)
RAY_COLOR = pygame.Color(255, 255, 0, 204)
HIT_ALPHA = 40
MINIMAP_MARGIN = 10
MINIMAP_BG_ALPHA = 120   # 0..255
MINIMAP_SIZE = 240       # longest side, px
HUD_COLOR = pygame.Color(230, 230, 235)

RENDER_MODES = ("top_down", "first_person", "split")


@dataclass
class EngineConfig:
    """Everything a World needs to (re)build itself.

    The defaults come from the module constants above; the command line
    overrides individual fields with ``dataclasses.replace``.
    """
    screen_w: int = SCREEN_W
    screen_h: int = SCREEN_H
    rows: int = MAZE_ROWS
    cols: int = MAZE_COLS
    start: tuple = MAZE_START
    fov: float = FOV_DEG
    ray_count: int = RAY_COUNT
    viewer_count: int = VIEWER_COUNT
    mode: str = "top_down"
    seed: int = field(default_factory=lambda: random.randint(0, 2**31 - 1))
    with_bounds: bool = True
    collide_walls: bool = True
    move_speed: float = MOVE_SPEED
    rotate_step: float = ROTATE_STEP
    velocity_turn: bool = True
    mouse_sens: float = MOUSE_SENS
    mouse_sens_velocity: float = MOUSE_SENS_VELOCITY
    height_scale: float = HEIGHT_SCALE
    shade_distance: float = SHADE_DISTANCE
    min_brightness: int = MIN_BRIGHTNESS

    @property
    def cell_w(self):
        return self.screen_w / self.cols

    @property
    def cell_h(self):
        return self.screen_h / self.rows

    def validate(self):
        for name in ("rows", "cols"):
            n = getattr(self, name)
            if n < 3 or n % 2 == 0:
                raise ValueError(f"{name} must be odd and >= 3, got {n}")
        if self.screen_w <= 0 or self.screen_h <= 0:
            raise ValueError(f"screen size must be positive, got {self.screen_w}x{self.screen_h}")
        if self.ray_count < 1:
            raise ValueError(f"ray_count must be >= 1, got {self.ray_count}")
        if not 0 < self.fov <= 360:
            raise ValueError(f"fov must be in (0, 360], got {self.fov}")
        if self.mode not in RENDER_MODES:
            raise ValueError(f"unknown render mode {self.mode!r}")
        # cos() correction flips sign past 90 degrees off-center
        if self.mode != "top_down" and self.fov >= 180:
            raise ValueError(f"first-person projection needs fov < 180, got {self.fov}")
        if not 1 <= self.viewer_count <= len(VIEWER_COLORS):
            raise ValueError(f"viewer_count must be in 1..{len(VIEWER_COLORS)}, got {self.viewer_count}")
        if self.shade_distance <= 0 or self.height_scale <= 0:
            raise ValueError("shade_distance and height_scale must be positive")
        if not 0 <= self.min_brightness <= 255:
            raise ValueError(f"min_brightness must be in 0..255, got {self.min_brightness}")
        return self
