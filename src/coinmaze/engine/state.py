# src/coinmaze/engine/state.py
# GameState: the one session object. Mutated only by move_player, tick and
# regenerate; read by the presentation layer between events.

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet, List, Optional, Tuple, Union

import structlog

from ..config import DifficultyProfile, GameOptions, get_preset
from ..grid import Grid
from ..mapgen.generator import Level, generate_level
from ..rng import PMRandom
from .adversary import AdversaryManager
from .collisions import HAZARD_ADVERSARY, hazard_at
from .player import Player

log = structlog.get_logger(__name__)

Cell = Tuple[int, int]
ProfileLike = Union[DifficultyProfile, str]


class Status(Enum):
    PLAYING = "playing"
    WON = "won"
    LOST = "lost"


@dataclass
class MoveEvents:
    moved: bool = False
    coin_collected: bool = False
    hazard: Optional[str] = None   # "trap" / "adversary"
    won: bool = False
    lost: bool = False


@dataclass
class TickEvents:
    fired: bool = False
    moved: int = 0
    player_hit: bool = False


def _resolve_profile(profile: ProfileLike) -> DifficultyProfile:
    return get_preset(profile) if isinstance(profile, str) else profile


class GameState:
    def __init__(
        self,
        level: Level,
        profile: ProfileLike,
        *,
        options: Optional[GameOptions] = None,
        rng: Optional[PMRandom] = None,
    ) -> None:
        self.profile = _resolve_profile(profile)
        self.options = options or GameOptions()
        self.rng = rng or PMRandom.from_entropy()
        self.generation = 0
        self._load(level)

    @classmethod
    def new(
        cls,
        profile: ProfileLike,
        options: Optional[GameOptions] = None,
        rng: Optional[PMRandom] = None,
    ) -> "GameState":
        profile = _resolve_profile(profile)
        options = options or GameOptions()
        rng = rng or PMRandom.from_entropy()
        return cls(generate_level(profile, options, rng), profile, options=options, rng=rng)

    @classmethod
    def from_level(
        cls,
        level: Level,
        profile: ProfileLike = "easy",
        *,
        options: Optional[GameOptions] = None,
        rng: Optional[PMRandom] = None,
    ) -> "GameState":
        return cls(level, profile, options=options, rng=rng)

    # ---- Lifecycle ----
    def _load(self, level: Level) -> None:
        # Replace every piece of session data; nothing survives from before.
        self.level = level
        self.grid: Grid = level.grid
        self.start: Cell = level.start
        self.finish: Cell = level.finish
        self._coins = set(level.coins)
        self._traps = set(level.traps)
        self.player = Player(grid=self.grid, spawn=self.start)
        self.adversary_manager = AdversaryManager.from_cells(self.grid, self.rng, list(level.adversaries))
        self.status = Status.PLAYING
        self.generation += 1

    def regenerate(
        self,
        profile: Optional[ProfileLike] = None,
        traps_enabled: Optional[bool] = None,
        adversaries_enabled: Optional[bool] = None,
    ) -> "GameState":
        if profile is not None:
            self.profile = _resolve_profile(profile)
        if traps_enabled is not None:
            self.options = self.options.with_traps(traps_enabled)
        if adversaries_enabled is not None:
            self.options = self.options.with_adversaries(adversaries_enabled)
        self._load(generate_level(self.profile, self.options, self.rng))
        log.debug("session regenerated", difficulty=self.profile.name, generation=self.generation)
        return self

    # ---- Read accessors ----
    @property
    def player_pos(self) -> Cell:
        return self.player.pos

    @property
    def coin_count(self) -> int:
        return self.player.coin_count

    @property
    def coins(self) -> FrozenSet[Cell]:
        return frozenset(self._coins)

    @property
    def traps(self) -> FrozenSet[Cell]:
        return frozenset(self._traps)

    @property
    def adversaries(self) -> List[Cell]:
        return self.adversary_manager.positions

    @property
    def won(self) -> bool:
        return self.status is Status.WON

    @property
    def lost(self) -> bool:
        return self.status is Status.LOST

    @property
    def is_over(self) -> bool:
        return self.status is not Status.PLAYING

    # ---- Mutations ----
    def move_player(self, direction: str) -> MoveEvents:
        ev = MoveEvents()
        if self.is_over:
            return ev

        pev = self.player.try_step(direction, self._coins)
        if not pev["moved"]:
            return ev
        ev.moved = True
        ev.coin_collected = pev["coin_collected"]

        # Coin is already credited; hazards beat the finish.
        hazard = hazard_at(self.player_pos, self._traps, self.adversaries)
        if hazard is not None:
            ev.hazard = hazard
            ev.lost = True
            self._finish_game(Status.LOST, cause=hazard)
        elif self.player_pos == self.finish:
            ev.won = True
            self._finish_game(Status.WON)
        return ev

    def tick(self) -> TickEvents:
        ev = TickEvents()
        if self.is_over:
            return ev
        aev = self.adversary_manager.tick(self.player_pos)
        ev.fired = True
        ev.moved = aev.moved
        if aev.player_hit:
            ev.player_hit = True
            self._finish_game(Status.LOST, cause=HAZARD_ADVERSARY)
        return ev

    def _finish_game(self, status: Status, cause: Optional[str] = None) -> None:
        self.status = status
        if status is Status.WON:
            log.info("player reached the finish", coins=self.coin_count, pos=self.player_pos)
        else:
            log.info("player lost", cause=cause, coins=self.coin_count, pos=self.player_pos)


def new_session(
    profile: ProfileLike,
    traps_enabled: bool = False,
    adversaries_enabled: bool = False,
    rng: Optional[PMRandom] = None,
) -> GameState:
    options = GameOptions(traps_enabled=traps_enabled, adversaries_enabled=adversaries_enabled)
    return GameState.new(profile, options, rng)
