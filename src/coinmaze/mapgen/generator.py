# src/coinmaze/mapgen/generator.py
# Level pipeline: carve -> farthest finish -> coins -> traps -> adversaries.

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Set

import structlog

from ..config import START, DifficultyProfile, GameOptions
from ..grid import Cell, Grid
from ..rng import PMRandom
from ..tiles import PATH
from .carve import carve_maze
from .goal import farthest_cell
from .placement import place_adversaries, place_coins, place_traps

log = structlog.get_logger(__name__)


@dataclass
class Level:
    grid: Grid
    start: Cell
    finish: Cell
    coins: Set[Cell] = field(default_factory=set)
    traps: Set[Cell] = field(default_factory=set)
    adversaries: List[Cell] = field(default_factory=list)


def generate_level(
    profile: DifficultyProfile,
    options: Optional[GameOptions] = None,
    rng: Optional[PMRandom] = None,
) -> Level:
    options = options or GameOptions()
    rng = rng or PMRandom.from_entropy()
    start = START

    grid = carve_maze(profile.rows, profile.cols, rng, start=start)
    finish = farthest_cell(grid, start)
    grid.set(finish[0], finish[1], PATH)  # finish is always open

    coins = place_coins(grid, profile.coin_rate, start, finish, rng)
    traps = place_traps(grid, start, finish, coins, rng) if options.traps_enabled else set()
    adversaries = (
        place_adversaries(grid, profile.adversary_count, start, finish, rng)
        if options.adversaries_enabled else []
    )

    log.debug(
        "level generated",
        difficulty=profile.name,
        rows=profile.rows,
        cols=profile.cols,
        finish=finish,
        coins=len(coins),
        traps=len(traps),
        adversaries=len(adversaries),
    )
    return Level(grid=grid, start=start, finish=finish, coins=coins, traps=traps, adversaries=adversaries)
