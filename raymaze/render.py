import pygame

from . import config as cfg


class PygameCanvas:
    """The four drawing primitives the engine needs, on a pygame Surface."""

    def __init__(self, surface):
        self.surface = surface

    @property
    def width(self):
        return self.surface.get_width()

    @property
    def height(self):
        return self.surface.get_height()

    def clear(self, color=cfg.BACKGROUND):
        self.surface.fill(color)

    def draw_line(self, p1, p2, color, width=1):
        color = pygame.Color(color)
        if color.a < 255:
            # pygame.draw ignores alpha on opaque surfaces
            x0, y0 = min(p1[0], p2[0]), min(p1[1], p2[1])
            w = int(abs(p2[0] - p1[0])) + width + 1
            h = int(abs(p2[1] - p1[1])) + width + 1
            layer = pygame.Surface((w, h), pygame.SRCALPHA)
            pygame.draw.line(layer, color, (p1[0] - x0, p1[1] - y0), (p2[0] - x0, p2[1] - y0), width)
            self.surface.blit(layer, (x0, y0))
        else:
            pygame.draw.line(self.surface, color, p1, p2, width)

    def fill_rect(self, x, y, w, h, color):
        color = pygame.Color(color)
        # round both edges so fractional strips tile without seams
        left, top = int(round(x)), int(round(y))
        right, bottom = int(round(x + w)), int(round(y + h))
        rect = pygame.Rect(left, top, max(1, right - left), max(0, bottom - top))
        if color.a < 255:
            layer = pygame.Surface(rect.size, pygame.SRCALPHA)
            layer.fill(color)
            self.surface.blit(layer, rect.topleft)
        else:
            self.surface.fill(color, rect)

    def fill_circle(self, center, radius, color):
        pygame.draw.circle(self.surface, color, (int(center[0]), int(center[1])), max(1, int(radius)))


class Viewport:
    """World-space drawing into a scaled, offset region of another canvas."""

    def __init__(self, canvas, x, y, scale):
        self.canvas = canvas
        self.ox, self.oy = x, y
        self.scale = scale

    @property
    def width(self):
        return self.canvas.width

    @property
    def height(self):
        return self.canvas.height

    def _pt(self, p):
        return (self.ox + p[0] * self.scale, self.oy + p[1] * self.scale)

    def clear(self, color=cfg.BACKGROUND):
        self.canvas.clear(color)

    def draw_line(self, p1, p2, color, width=1):
        self.canvas.draw_line(self._pt(p1), self._pt(p2), color, width)

    def fill_rect(self, x, y, w, h, color):
        px, py = self._pt((x, y))
        self.canvas.fill_rect(px, py, w * self.scale, h * self.scale, color)

    def fill_circle(self, center, radius, color):
        self.canvas.fill_circle(self._pt(center), max(2, radius * self.scale), color)


# ---------- Top-down ----------
def draw_top_down(canvas, world, frame):
    for viewer, hits in zip(world.viewers, frame):
        beam = pygame.Color(viewer.color)
        beam.a = cfg.HIT_ALPHA
        for ray, rec in zip(viewer.rays, hits):
            if rec.hit:
                canvas.draw_line(viewer.pos, rec.point, beam)
            tip = ray.pos + ray.dir * cfg.RAY_STUB_LEN
            canvas.draw_line(ray.pos, tip, ray.color)
        canvas.fill_circle(viewer.pos, cfg.VIEWER_RADIUS, viewer.color)
    for seg in world.segments:
        canvas.draw_line(seg.a, seg.b, seg.color)


# ---------- First person ----------
def draw_first_person(canvas, columns, ceiling=cfg.CEILING, floor=cfg.FLOOR):
    w, h = canvas.width, canvas.height
    canvas.fill_rect(0, 0, w, h // 2, ceiling)
    canvas.fill_rect(0, h // 2, w, h - h // 2, floor)
    for col in columns:
        if col.height <= 0:
            continue
        canvas.fill_rect(col.x, col.y, col.width, col.height, col.color)


# ---------- Minimap ----------
def minimap_scale(world, size=cfg.MINIMAP_SIZE):
    return size / max(world.width, world.height)


def draw_minimap(canvas, world, frame, size=cfg.MINIMAP_SIZE, margin=cfg.MINIMAP_MARGIN):
    scale = minimap_scale(world, size)
    bg = pygame.Color(0, 0, 0, cfg.MINIMAP_BG_ALPHA)
    canvas.fill_rect(margin, margin, world.width * scale, world.height * scale, bg)
    draw_top_down(Viewport(canvas, margin, margin, scale), world, frame)


def draw_frame(canvas, world, frame):
    """Draw one tick's results in the world's current render mode."""
    canvas.clear(cfg.BACKGROUND)
    if world.mode == "top_down":
        draw_top_down(canvas, world, frame)
        return
    columns = world.columns(frame[0], canvas.width, canvas.height)
    draw_first_person(canvas, columns)
    if world.mode == "split":
        draw_minimap(canvas, world, frame)
