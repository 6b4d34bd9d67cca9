# src/coinmaze/mapgen/goal.py
# Breadth-first search from the start; the finish is the farthest path cell.

from collections import deque
from typing import Deque, Dict, Tuple

from ..grid import Cell, Grid

# Neighbour order matters for tie-breaking: up, down, left, right.
NEIGHBOURS: Tuple[Tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))


def bfs_distances(grid: Grid, start: Cell) -> Dict[Cell, int]:
    """Distance (in steps) from ``start`` to every reachable path cell, in discovery order."""
    dist: Dict[Cell, int] = {start: 0}
    queue: Deque[Cell] = deque([start])
    while queue:
        row, col = queue.popleft()
        d = dist[(row, col)]
        for dr, dc in NEIGHBOURS:
            nxt = (row + dr, col + dc)
            if nxt not in dist and grid.is_path(*nxt):
                dist[nxt] = d + 1
                queue.append(nxt)
    return dist


def farthest_cell(grid: Grid, start: Cell) -> Cell:
    """
    Return the path cell with the greatest BFS distance from ``start``.
    Ties go to the cell dequeued first: the incumbent is only replaced on a
    strictly greater distance.
    """
    best, best_dist = start, 0
    for cell, d in bfs_distances(grid, start).items():
        if d > best_dist:
            best, best_dist = cell, d
    return best
