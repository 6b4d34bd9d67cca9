# src/coinmaze/ui/hud.py
from typing import List

from ..engine.state import GameState

COINS_LABEL = "Coins collected"
LOST_BANNER = "Game over! You hit a trap or ran into a wanderer."
WON_BANNER = "Congratulations! You reached the end of the maze!"


def coin_digits(count: int, width: int = 3) -> str:
    """Zero-padded counter, clamped to what fits in ``width`` digits."""
    if width < 1:
        raise ValueError("width must be >= 1")
    return f"{max(0, min(count, 10 ** width - 1)):0{width}d}"


def hud_lines(state: GameState) -> List[str]:
    lines = [f"{COINS_LABEL}: {state.coin_count}"]
    if state.lost:
        lines.append(LOST_BANNER)
    elif state.won:
        lines.append(WON_BANNER)
    return lines
