# src/coinmaze/mapgen/carve.py
# Randomized depth-first backtracker on the odd-indexed "room" lattice.
# Rooms sit at odd (row, col); the even cells between two rooms are the walls
# that get knocked out when the walk passes through.

from typing import List, Tuple

from ..config import START
from ..grid import Cell, Grid
from ..rng import PMRandom
from ..tiles import PATH, WALL

# Two-cell hops: up, right, down, left (shuffled before every step)
STEPS: Tuple[Tuple[int, int], ...] = ((-2, 0), (0, 2), (2, 0), (0, -2))


def check_dimensions(rows: int, cols: int) -> None:
    if rows < 5 or cols < 5 or rows % 2 == 0 or cols % 2 == 0:
        raise ValueError(f"maze dimensions must be odd and >= 5, got {rows}x{cols}")


def in_carve_bounds(grid: Grid, row: int, col: int) -> bool:
    # Strictly inside the outer rim
    return 0 < row < grid.rows - 1 and 0 < col < grid.cols - 1


def carve_maze(rows: int, cols: int, rng: PMRandom, start: Cell = START) -> Grid:
    """
    Produce a perfect maze: every path cell reachable from ``start`` and no
    cycles. The outer rim always stays wall.
    """
    check_dimensions(rows, cols)
    grid = Grid.filled(rows, cols, WALL)

    grid.set(start[0], start[1], PATH)
    stack: List[Cell] = [start]

    while stack:
        row, col = stack[-1]
        moved = False
        for dr, dc in rng.shuffle(STEPS):
            nr, nc = row + dr, col + dc
            if in_carve_bounds(grid, nr, nc) and grid.get(nr, nc) == WALL:
                grid.set(row + dr // 2, col + dc // 2, PATH)
                grid.set(nr, nc, PATH)
                stack.append((nr, nc))
                moved = True
                break
        if not moved:
            stack.pop()

    return grid
