from __future__ import annotations

import tomllib
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Dict, Optional, Tuple

import structlog

log = structlog.get_logger(__name__)

START: Tuple[int, int] = (1, 1)
TRAP_RATE = 0.05


@dataclass(frozen=True)
class DifficultyProfile:
    name: str
    rows: int
    cols: int
    coin_rate: float
    adversary_count: int

    def __post_init__(self) -> None:
        # Carving steps two cells at a time; even sides break wall/passage parity.
        for label, n in (("rows", self.rows), ("cols", self.cols)):
            if n < 5 or n % 2 == 0:
                raise ValueError(f"{self.name}: {label} must be odd and >= 5, got {n}")
        if not 0.0 <= self.coin_rate <= 1.0:
            raise ValueError(f"{self.name}: coin_rate must be within [0, 1]")
        if self.adversary_count < 0:
            raise ValueError(f"{self.name}: adversary_count must be >= 0")


PRESETS: Dict[str, DifficultyProfile] = {
    "easy": DifficultyProfile("easy", 11, 11, 0.20, 0),
    "medium": DifficultyProfile("medium", 15, 15, 0.15, 1),
    "hard": DifficultyProfile("hard", 21, 21, 0.10, 2),
    "extreme": DifficultyProfile("extreme", 31, 31, 0.07, 3),
}

DIFFICULTY_ORDER = ("easy", "medium", "hard", "extreme")


def get_preset(name: str) -> DifficultyProfile:
    try:
        return PRESETS[name]
    except KeyError:
        raise ValueError(f"unknown difficulty {name!r}; expected one of {', '.join(DIFFICULTY_ORDER)}") from None


@dataclass(frozen=True)
class GameOptions:
    # Menu toggles; both default off like the original start screen.
    traps_enabled: bool = False
    adversaries_enabled: bool = False

    def with_traps(self, enabled: bool) -> "GameOptions":
        return replace(self, traps_enabled=enabled)

    def with_adversaries(self, enabled: bool) -> "GameOptions":
        return replace(self, adversaries_enabled=enabled)


@dataclass(frozen=True)
class Settings:
    difficulty: str = "easy"
    options: GameOptions = field(default_factory=GameOptions)
    seed: Optional[int] = None

    @property
    def profile(self) -> DifficultyProfile:
        return get_preset(self.difficulty)


def _flag(table: dict, key: str) -> bool:
    value = table.get(key, False)
    if not isinstance(value, bool):
        raise ValueError(f"[game].{key} must be true or false, got {value!r}")
    return value


def load_settings(path: Path | str) -> Settings:
    """
    Read a TOML settings file. Only the ``[game]`` table is consulted:

        [game]
        difficulty = "hard"
        traps = true
        adversaries = true
        seed = 1234
    """
    path = Path(path)
    if not path.is_file():
        log.error("settings file not found", path=str(path))
        raise FileNotFoundError(f"settings file not found: {path}")
    try:
        with path.open("rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        log.error("error parsing settings TOML", path=str(path), error=str(e))
        raise

    game = data.get("game", {})
    difficulty = str(game.get("difficulty", "easy"))
    get_preset(difficulty)  # validate early
    seed = game.get("seed")
    settings = Settings(
        difficulty=difficulty,
        options=GameOptions(
            traps_enabled=_flag(game, "traps"),
            adversaries_enabled=_flag(game, "adversaries"),
        ),
        seed=int(seed) if seed is not None else None,
    )
    log.info("settings loaded", path=str(path), difficulty=difficulty, seed=settings.seed)
    return settings
