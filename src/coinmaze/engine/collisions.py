# src/coinmaze/engine/collisions.py
# Passability, hazard classification and on-enter effects (no pygame).

from __future__ import annotations

from typing import Dict, Iterable, Optional, Set, Tuple

from ..grid import Grid

Cell = Tuple[int, int]

HAZARD_TRAP = "trap"
HAZARD_ADVERSARY = "adversary"

# Unit steps keyed by the four input directions.
DIRECTIONS: Dict[str, Cell] = {
    "up": (-1, 0),
    "down": (1, 0),
    "left": (0, -1),
    "right": (0, 1),
}


def step(cell: Cell, direction: str) -> Optional[Cell]:
    off = DIRECTIONS.get(direction)
    if off is None:
        return None
    return (cell[0] + off[0], cell[1] + off[1])


def is_passable(grid: Grid, cell: Cell) -> bool:
    # Same rule for player and adversaries: in bounds and not a wall.
    return grid.is_path(cell[0], cell[1])


def hazard_at(cell: Cell, traps: Set[Cell], adversaries: Iterable[Cell]) -> Optional[str]:
    if cell in traps:
        return HAZARD_TRAP
    if any(a == cell for a in adversaries):
        return HAZARD_ADVERSARY
    return None


def on_enter_player(cell: Cell, coins: Set[Cell]) -> Dict[str, bool]:
    """Consume a coin on ``cell`` if there is one. Mutates ``coins``."""
    events = {"coin_collected": False}
    if cell in coins:
        coins.discard(cell)
        events["coin_collected"] = True
    return events
