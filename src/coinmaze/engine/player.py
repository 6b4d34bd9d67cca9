# src/coinmaze/engine/player.py
# Engine-only Player: one cell per accepted move, coin pickup via collisions.

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Set, Tuple

from ..grid import Grid
from .collisions import is_passable, on_enter_player, step

Cell = Tuple[int, int]


@dataclass
class Player:
    grid: Grid
    spawn: Cell

    # dynamic fields (filled in __post_init__)
    row: int = 0
    col: int = 0
    coin_count: int = 0

    def __post_init__(self) -> None:
        self.row, self.col = self.spawn

    @property
    def pos(self) -> Cell:
        return (self.row, self.col)

    def can_move(self, direction: str) -> bool:
        target = step(self.pos, direction)
        return target is not None and is_passable(self.grid, target)

    def try_step(self, direction: str, coins: Set[Cell]) -> Dict[str, bool]:
        """
        Move one cell if the target is open. Returns event flags:
        ``moved`` and ``coin_collected``. A rejected move leaves everything as it was.
        """
        if not self.can_move(direction):
            return {"moved": False, "coin_collected": False}

        self.row, self.col = step(self.pos, direction)
        ev = on_enter_player(self.pos, coins)
        if ev["coin_collected"]:
            self.coin_count += 1
        return {"moved": True, "coin_collected": ev["coin_collected"]}
