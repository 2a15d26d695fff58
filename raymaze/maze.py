import random

# ---------- Maze Generation ----------
# 1=wall, 0=open, grid[row][col]
WALL = 1
OPEN = 0

DIRECTIONS = ((-1, 0), (1, 0), (0, -1), (0, 1))  # up, down, left, right


def new_grid(rows, cols):
    if rows < 3 or cols < 3 or rows % 2 == 0 or cols % 2 == 0:
        raise ValueError(f"maze must be odd-sized and at least 3x3, got {rows}x{cols}")
    return [[WALL for _ in range(cols)] for _ in range(rows)]


def in_grid(grid, r, c):
    return 0 <= r < len(grid) and 0 <= c < len(grid[0])


def _shuffled(rng):
    dirs = list(DIRECTIONS)
    rng.shuffle(dirs)
    return dirs


def carve(grid, cell, rng=None):
    """Depth-first stride-2 carve starting at ``cell`` (already open).

    Same walk as the recursive version: every frame keeps its own shuffled
    direction list and resumes it after the child returns.
    """
    rng = rng or random
    stack = [(cell, iter(_shuffled(rng)))]
    while stack:
        (r, c), dirs = stack[-1]
        for dr, dc in dirs:
            tr, tc = r + dr * 2, c + dc * 2
            if in_grid(grid, tr, tc) and grid[tr][tc] == WALL:
                grid[r + dr][c + dc] = OPEN
                grid[tr][tc] = OPEN
                stack.append(((tr, tc), iter(_shuffled(rng))))
                break
        else:
            stack.pop()
    return grid


def generate_maze(rows, cols, rng=None, start=(1, 1)):
    grid = new_grid(rows, cols)
    r, c = start
    if not in_grid(grid, r, c) or r % 2 == 0 or c % 2 == 0:
        raise ValueError(f"start cell {start} must be an odd cell inside the {rows}x{cols} grid")
    grid[r][c] = OPEN
    return carve(grid, (r, c), rng)


def open_cells(grid):
    return [(r, c) for r, row in enumerate(grid) for c, t in enumerate(row) if t == OPEN]


def count_doorways(grid):
    """Number of 4-adjacent open/open pairs (edges of the open-cell graph)."""
    n = 0
    for r, c in open_cells(grid):
        if in_grid(grid, r + 1, c) and grid[r + 1][c] == OPEN:
            n += 1
        if in_grid(grid, r, c + 1) and grid[r][c + 1] == OPEN:
            n += 1
    return n


def pick_spawn(grid, rng=None):
    cells = open_cells(grid)
    if not cells:
        raise ValueError("grid has no open cell to spawn in")
    return (rng or random).choice(cells)


def cell_center(cell, cell_w, cell_h):
    r, c = cell
    return ((c + 0.5) * cell_w, (r + 0.5) * cell_h)


def cell_at(x, y, cell_w, cell_h):
    return (int(y // cell_h), int(x // cell_w))


def is_blocking(grid, r, c):
    if not in_grid(grid, r, c):
        return True
    return grid[r][c] == WALL
