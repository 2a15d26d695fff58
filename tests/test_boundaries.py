import random

import pygame

from raymaze.boundaries import bounding_segments, build_segments, extract_segments, recolor
from raymaze.maze import OPEN, WALL, generate_maze

BLACK = pygame.Color(0, 0, 0)


def cells_beside(seg):
    """The two unit cells a unit-length grid edge separates, as (row, col)."""
    (x1, y1), (x2, y2) = seg.a, seg.b
    if y1 == y2:  # horizontal
        c = int(min(x1, x2))
        r = int(y1)
        return (r - 1, c), (r, c)
    r = int(min(y1, y2))
    c = int(x1)
    return (r, c - 1), (r, c)


def test_segments_only_between_wall_and_open() -> None:
    grid = generate_maze(11, 15, random.Random(4))
    segments = extract_segments(grid, 1, 1, BLACK)
    assert segments
    for seg in segments:
        (r1, c1), (r2, c2) = cells_beside(seg)
        kinds = {grid[r1][c1], grid[r2][c2]}
        assert kinds == {WALL, OPEN}


def test_every_wall_open_side_gets_one_segment() -> None:
    grid = generate_maze(9, 9, random.Random(8))
    expected = 0
    for r in range(9):
        for c in range(9):
            if grid[r][c] != WALL:
                continue
            for dr, dc in ((-1, 0), (1, 0), (0, -1), (0, 1)):
                nr, nc = r + dr, c + dc
                if 0 <= nr < 9 and 0 <= nc < 9 and grid[nr][nc] == OPEN:
                    expected += 1
    assert len(extract_segments(grid, 1, 1, BLACK)) == expected


def test_single_room_outline_uses_cell_size() -> None:
    grid = [
        [WALL, WALL, WALL],
        [WALL, OPEN, WALL],
        [WALL, WALL, WALL],
    ]
    segments = extract_segments(grid, 10, 20, BLACK)
    assert [(s.a, s.b) for s in segments] == [
        ((10.0, 20.0), (20.0, 20.0)),  # bottom of the wall above
        ((10.0, 20.0), (10.0, 40.0)),  # right of the wall to the left
        ((20.0, 20.0), (20.0, 40.0)),  # left of the wall to the right
        ((10.0, 40.0), (20.0, 40.0)),  # top of the wall below
    ]


def test_solid_and_empty_grids_emit_nothing() -> None:
    solid = [[WALL] * 3 for _ in range(3)]
    empty = [[OPEN] * 3 for _ in range(3)]
    assert extract_segments(solid, 1, 1, BLACK) == []
    assert extract_segments(empty, 1, 1, BLACK) == []


def test_bounds_enclose_play_area() -> None:
    bounds = bounding_segments(300, 200, BLACK)
    assert len(bounds) == 4
    points = {p for s in bounds for p in (s.a, s.b)}
    assert points == {(0.0, 0.0), (300.0, 0.0), (300.0, 200.0), (0.0, 200.0)}


def test_build_segments_appends_bounds_last() -> None:
    grid = generate_maze(5, 5, random.Random(1))
    inner = extract_segments(grid, 10, 10, BLACK)
    full = build_segments(grid, 10, 10, BLACK, with_bounds=True)
    assert len(full) == len(inner) + 4
    assert [(s.a, s.b) for s in full[-4:]] == [(s.a, s.b) for s in bounding_segments(50, 50, BLACK)]
    assert len(build_segments(grid, 10, 10, BLACK, with_bounds=False)) == len(inner)


def test_recolor_changes_color_only() -> None:
    segments = bounding_segments(10, 10, BLACK)
    before = [(s.a, s.b) for s in segments]
    recolor(segments, (255, 255, 255))
    assert all(s.color == pygame.Color(255, 255, 255) for s in segments)
    assert [(s.a, s.b) for s in segments] == before


def test_bounds_start_at_world_origin() -> None:
    bounds = bounding_segments(50, 30, BLACK)
    assert [(s.a, s.b) for s in bounds] == [
        ((0.0, 0.0), (50.0, 0.0)),
        ((50.0, 0.0), (50.0, 30.0)),
        ((50.0, 30.0), (0.0, 30.0)),
        ((0.0, 30.0), (0.0, 0.0)),
    ]
