import pygame
import pytest

from raymaze.config import EngineConfig
from raymaze.render import PygameCanvas, Viewport, draw_first_person, draw_frame
from raymaze.projector import Column, project
from raymaze.resolver import HitRecord
from raymaze.world import World


class RecordingCanvas:
    width = 400
    height = 200

    def __init__(self):
        self.calls = []

    def clear(self, color=None):
        self.calls.append(("clear", color))

    def draw_line(self, p1, p2, color, width=1):
        self.calls.append(("line", tuple(p1), tuple(p2), color))

    def fill_rect(self, x, y, w, h, color):
        self.calls.append(("rect", x, y, w, h, color))

    def fill_circle(self, center, radius, color):
        self.calls.append(("circle", tuple(center), radius, color))

    def kinds(self, kind):
        return [c for c in self.calls if c[0] == kind]


def test_top_down_draws_rays_viewer_and_segments() -> None:
    world = World(EngineConfig(rows=5, cols=5, ray_count=6, seed=1))
    frame = world.step(0.0)
    canvas = RecordingCanvas()
    draw_frame(canvas, world, frame)
    assert canvas.calls[0][0] == "clear"
    hits = sum(1 for h in frame[0] if h.hit)
    assert len(canvas.kinds("line")) == hits + 6 + len(world.segments)
    assert len(canvas.kinds("circle")) == 1
    assert not canvas.kinds("rect")


def test_first_person_fills_one_strip_per_visible_column() -> None:
    world = World(EngineConfig(rows=5, cols=5, ray_count=8, fov=60, mode="first_person", seed=1))
    frame = world.step(0.0)
    canvas = RecordingCanvas()
    draw_frame(canvas, world, frame)
    visible = sum(1 for h in frame[0] if h.hit)
    assert len(canvas.kinds("rect")) == 2 + visible
    assert not canvas.kinds("circle")


def test_split_mode_adds_minimap() -> None:
    world = World(EngineConfig(rows=5, cols=5, ray_count=8, fov=60, mode="split", seed=1))
    frame = world.step(0.0)
    canvas = RecordingCanvas()
    draw_frame(canvas, world, frame)
    assert len(canvas.kinds("circle")) == 1
    assert canvas.kinds("line")


def test_first_person_skips_empty_columns() -> None:
    canvas = RecordingCanvas()
    cols = [
        Column(0, 50, 200, 100, pygame.Color(10, 10, 10), 5.0),
        Column(200, 100, 200, 0, pygame.Color(0, 0, 0), float("inf")),
    ]
    draw_first_person(canvas, cols)
    rects = canvas.kinds("rect")
    assert len(rects) == 3
    assert rects[-1][1:5] == (0, 50, 200, 100)


def test_viewport_scales_and_offsets() -> None:
    inner = RecordingCanvas()
    vp = Viewport(inner, 10, 20, 0.5)
    vp.draw_line((0, 0), (100, 100), pygame.Color(1, 1, 1))
    vp.fill_rect(10, 10, 40, 20, pygame.Color(1, 1, 1))
    assert inner.calls[0][1:3] == ((10, 20), (60, 70))
    assert inner.calls[1][1:5] == pytest.approx((15, 25, 20, 10))


def test_fractional_strips_cover_every_pixel() -> None:
    red = pygame.Color(255, 0, 0)
    surface = pygame.Surface((1050, 100))
    canvas = PygameCanvas(surface)
    hits = [HitRecord(1.0, pygame.Color(0, 200, 0), pygame.Vector2(1, 0))] * 240
    cols = project(hits, [0.0] * 240, 1050, 100)
    draw_first_person(canvas, cols, ceiling=red, floor=red)
    seams = [x for x in range(1050) if surface.get_at((x, 50)) == red]
    assert seams == []
