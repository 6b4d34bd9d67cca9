# src/coinmaze/render/palette.py
# Colours per display tile, shared by the pygame tileset and the PNG tool.
from __future__ import annotations

from typing import Dict, Tuple

from ..tiles import T_ADVERSARY, T_COIN, T_FINISH, T_PATH, T_PLAYER, T_TRAP, T_WALL

RGBA = Tuple[int, int, int, int]

# Cell backgrounds follow the original palette: dark walls, white paths,
# green player, yellow finish.
FILL: Dict[int, RGBA] = {
    T_WALL: (55, 65, 81, 255),
    T_PATH: (255, 255, 255, 255),
    T_PLAYER: (34, 197, 94, 255),
    T_FINISH: (250, 204, 21, 255),
    T_COIN: (255, 255, 255, 255),
    T_TRAP: (255, 255, 255, 255),
    T_ADVERSARY: (255, 255, 255, 255),
}

# Marker drawn on top of a path-coloured cell
MARKER: Dict[int, RGBA] = {
    T_COIN: (234, 179, 8, 255),
    T_TRAP: (220, 38, 38, 255),
    T_ADVERSARY: (147, 51, 234, 255),
}

GRID_LINE: RGBA = (209, 213, 219, 255)


def fallback_color(tile_id: int) -> RGBA:
    return FILL.get(tile_id, (255, 0, 255, 255))
