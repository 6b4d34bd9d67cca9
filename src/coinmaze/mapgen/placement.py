# src/coinmaze/mapgen/placement.py
from typing import AbstractSet, List, Set

from ..config import TRAP_RATE
from ..grid import Cell, Grid
from ..rng import PMRandom


def place_coins(grid: Grid, rate: float, start: Cell, finish: Cell, rng: PMRandom) -> Set[Cell]:
    # One Bernoulli draw per eligible path cell, row-major.
    coins: Set[Cell] = set()
    for cell in grid.path_cells():
        if cell == start or cell == finish:
            continue
        if rng.chance(rate):
            coins.add(cell)
    return coins


def place_traps(
    grid: Grid,
    start: Cell,
    finish: Cell,
    coins: AbstractSet[Cell],
    rng: PMRandom,
    rate: float = TRAP_RATE,
) -> Set[Cell]:
    traps: Set[Cell] = set()
    for cell in grid.path_cells():
        if cell == start or cell == finish or cell in coins:
            continue
        if rng.chance(rate):
            traps.add(cell)
    return traps


def place_adversaries(grid: Grid, count: int, start: Cell, finish: Cell, rng: PMRandom) -> List[Cell]:
    """
    Shuffle every path cell except start/finish and keep the first ``count``.
    Coins and traps are not excluded, so an adversary may spawn on either.
    """
    candidates = [c for c in grid.path_cells() if c != start and c != finish]
    return rng.shuffle(candidates)[:max(0, count)]
