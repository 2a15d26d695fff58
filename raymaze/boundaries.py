from dataclasses import dataclass

import pygame

from .maze import OPEN, WALL, in_grid


@dataclass(eq=False)
class Segment:
    """One wall edge. Endpoints are fixed; only ``color`` ever changes."""
    a: tuple
    b: tuple
    color: pygame.Color

    def __post_init__(self):
        self.a = (float(self.a[0]), float(self.a[1]))
        self.b = (float(self.b[0]), float(self.b[1]))
        self.color = pygame.Color(self.color)


def _is_open(grid, r, c):
    return in_grid(grid, r, c) and grid[r][c] == OPEN


def extract_segments(grid, cell_w, cell_h, color):
    """Edges between wall cells and open cells only.

    Wall/wall and open/open sides produce nothing, so thick walls are only
    outlined once and open areas stay empty.
    """
    segments = []
    for r, row in enumerate(grid):
        for c, t in enumerate(row):
            if t != WALL:
                continue
            x1 = c * cell_w
            y1 = r * cell_h
            x2 = (c + 1) * cell_w
            y2 = (r + 1) * cell_h

            if _is_open(grid, r - 1, c):  # top
                segments.append(Segment((x1, y1), (x2, y1), color))
            if _is_open(grid, r, c - 1):  # left
                segments.append(Segment((x1, y1), (x1, y2), color))
            if _is_open(grid, r, c + 1):  # right
                segments.append(Segment((x2, y1), (x2, y2), color))
            if _is_open(grid, r + 1, c):  # bottom
                segments.append(Segment((x1, y2), (x2, y2), color))
    return segments


def bounding_segments(width, height, color):
    w, h = width, height
    return [
        Segment((0, 0), (w, 0), color),
        Segment((w, 0), (w, h), color),
        Segment((w, h), (0, h), color),
        Segment((0, h), (0, 0), color),
    ]


def build_segments(grid, cell_w, cell_h, color, with_bounds=True):
    segments = extract_segments(grid, cell_w, cell_h, color)
    if with_bounds:
        rows, cols = len(grid), len(grid[0])
        segments += bounding_segments(cols * cell_w, rows * cell_h, color)
    return segments


def recolor(segments, color):
    color = pygame.Color(color)
    for seg in segments:
        seg.color = pygame.Color(color)
