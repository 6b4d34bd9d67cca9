# src/coinmaze/render/layers.py
# Compose one display tile per cell from a GameState (no pygame, no Pillow).

from __future__ import annotations

from typing import List

from ..engine.state import GameState
from ..tiles import (
    PATH,
    T_ADVERSARY,
    T_COIN,
    T_FINISH,
    T_PATH,
    T_PLAYER,
    T_TRAP,
    T_WALL,
    TEXT_GLYPHS,
)


def compose_view(state: GameState) -> List[List[int]]:
    """
    Player over finish over everything else. Coins, traps and adversaries
    are only drawn on plain path cells; traps/adversaries only when the session
    was generated with their toggle on. A toggle flipped mid-game does not
    hide anything that can still be hit. On a shared cell the adversary
    hides the trap, the trap hides the coin.
    """
    options = state.options
    coins = state.coins
    traps = state.traps if options.traps_enabled else frozenset()
    adversaries = set(state.adversaries) if options.adversaries_enabled else set()

    view: List[List[int]] = []
    for r in range(state.grid.rows):
        row: List[int] = []
        for c in range(state.grid.cols):
            cell = (r, c)
            if cell == state.player_pos:
                t = T_PLAYER
            elif cell == state.finish:
                t = T_FINISH
            elif state.grid.get(r, c) != PATH:
                t = T_WALL
            elif cell in adversaries:
                t = T_ADVERSARY
            elif cell in traps:
                t = T_TRAP
            elif cell in coins:
                t = T_COIN
            else:
                t = T_PATH
            row.append(t)
        view.append(row)
    return view


def to_text(view: List[List[int]]) -> str:
    return "\n".join("".join(TEXT_GLYPHS.get(t, "?") for t in row) for row in view)
