# src/coinmaze/render/tileset.py
from __future__ import annotations

from functools import lru_cache

import pygame

from .palette import GRID_LINE, MARKER, fallback_color
from ..tiles import T_COIN, T_TRAP


class Tileset:
    """
    Tiny cached builder of one pygame.Surface per display tile id, sized
    (tile_size, tile_size). Markers: coin = disc, trap = triangle,
    adversary = square.
    """
    def __init__(self, tile_size: int):
        self.tile_size = tile_size

    @lru_cache(maxsize=64)
    def get(self, tile_id: int) -> pygame.Surface:
        s = self.tile_size
        img = pygame.Surface((s, s), pygame.SRCALPHA)
        img.fill(fallback_color(tile_id))
        marker = MARKER.get(tile_id)
        if marker is not None:
            q = max(1, s // 4)
            if tile_id == T_COIN:
                pygame.draw.circle(img, marker, (s // 2, s // 2), q)
            elif tile_id == T_TRAP:
                pygame.draw.polygon(img, marker, [(s // 2, q), (s - q, s - q), (q, s - q)])
            else:
                pygame.draw.rect(img, marker, pygame.Rect(q, q, s - 2 * q, s - 2 * q))
        pygame.draw.rect(img, GRID_LINE, img.get_rect(), 1)
        return img
