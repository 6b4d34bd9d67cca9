# src/coinmaze/ui/keys.py
# Key-name -> direction. Names are what pygame.key.name() reports, plus the
# browser-style "ArrowUp" family so other front-ends can reuse the table.
from typing import Optional

KEY_TO_DIRECTION = {
    "up": "up",
    "down": "down",
    "left": "left",
    "right": "right",
    "w": "up",
    "s": "down",
    "a": "left",
    "d": "right",
    "arrowup": "up",
    "arrowdown": "down",
    "arrowleft": "left",
    "arrowright": "right",
}


def direction_for_key(key_name: str) -> Optional[str]:
    # Anything that is not one of the four directions is ignored.
    return KEY_TO_DIRECTION.get(key_name.lower())
