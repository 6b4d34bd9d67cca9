# src/coinmaze/engine/adversary.py
# Wandering adversaries: every tick each one takes a uniformly random legal
# unit step, or stays put when boxed in.
# - Adversaries may overlap each other and may stand on coins or traps; there
#   is no occupancy map.
# - List order is identity; it never changes during a session.

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple

from ..grid import Grid
from ..rng import PMRandom
from .collisions import DIRECTIONS, is_passable

Cell = Tuple[int, int]

UNIT_STEPS: Tuple[Cell, ...] = tuple(DIRECTIONS.values())


@dataclass
class Adversary:
    row: int
    col: int

    @property
    def pos(self) -> Cell:
        return (self.row, self.col)


@dataclass
class AdversaryTickEvents:
    moved: int = 0
    player_hit: bool = False


@dataclass
class AdversaryManager:
    grid: Grid
    rng: PMRandom
    adversaries: List[Adversary] = field(default_factory=list)

    @classmethod
    def from_cells(cls, grid: Grid, rng: PMRandom, cells: List[Cell]) -> "AdversaryManager":
        return cls(grid=grid, rng=rng, adversaries=[Adversary(r, c) for r, c in cells])

    @property
    def positions(self) -> List[Cell]:
        return [a.pos for a in self.adversaries]

    def tick(self, player_pos: Cell) -> AdversaryTickEvents:
        ev = AdversaryTickEvents()
        for a in self.adversaries:
            for dr, dc in self.rng.shuffle(UNIT_STEPS):
                target = (a.row + dr, a.col + dc)
                if is_passable(self.grid, target):
                    a.row, a.col = target
                    ev.moved += 1
                    break
        # Collision is checked once everyone has moved.
        ev.player_hit = any(a.pos == player_pos for a in self.adversaries)
        return ev
