# src/coinmaze/engine/loop.py
# Single-queue event loop. GameLoop is the only writer of GameState: input,
# timer ticks and lifecycle requests all arrive as events and each one runs to
# completion before the next is taken off the queue.
#
# Scheduler discipline
# - The adversary scheduler runs only while a session exists, the menu is
#   closed, adversaries are enabled and the session is still PLAYING.
# - It is cancelled before any regeneration and re-armed afterwards, so a
#   period never straddles two mazes.
# - Ticks carry the session generation they were scheduled for; a tick for
#   an older generation is dropped.

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Deque, List, Optional, Union

import structlog

from ..config import GameOptions, Settings, get_preset
from ..rng import PMRandom
from .scheduler import AdversaryScheduler
from .state import GameState, MoveEvents, TickEvents
from .timing import DEFAULT_TIMING, TimingModel

log = structlog.get_logger(__name__)


# ---------- Events ----------

@dataclass(frozen=True)
class Move:
    direction: str


@dataclass(frozen=True)
class AdversaryTick:
    generation: int


@dataclass(frozen=True)
class Regenerate:
    pass


@dataclass(frozen=True)
class ChangeDifficulty:
    name: str


@dataclass(frozen=True)
class SetTraps:
    enabled: bool


@dataclass(frozen=True)
class SetAdversaries:
    enabled: bool


@dataclass(frozen=True)
class StartGame:
    pass


@dataclass(frozen=True)
class OpenMenu:
    pass


Event = Union[Move, AdversaryTick, Regenerate, ChangeDifficulty, SetTraps, SetAdversaries, StartGame, OpenMenu]
Outcome = Union[MoveEvents, TickEvents, None]


class GameLoop:
    def __init__(
        self,
        difficulty: str = "easy",
        options: Optional[GameOptions] = None,
        *,
        rng: Optional[PMRandom] = None,
        timing: TimingModel = DEFAULT_TIMING,
    ) -> None:
        self.profile = get_preset(difficulty)
        self.options = options or GameOptions()
        self.rng = rng or PMRandom.from_entropy()
        self.timing = timing
        self.scheduler = AdversaryScheduler(period_ticks=timing.adversary_period_ticks)
        self.state: Optional[GameState] = None
        self.in_menu = True
        self.queue: Deque[Event] = deque()

    @classmethod
    def from_settings(cls, settings: Settings, *, timing: TimingModel = DEFAULT_TIMING) -> "GameLoop":
        rng = PMRandom(settings.seed) if settings.seed is not None else None
        return cls(settings.difficulty, settings.options, rng=rng, timing=timing)

    # ---- Queue ----
    def post(self, event: Event) -> None:
        self.queue.append(event)

    def pump(self) -> List[Outcome]:
        """Drain the queue; return the outcome of every processed event."""
        out: List[Outcome] = []
        while self.queue:
            out.append(self._dispatch(self.queue.popleft()))
        return out

    def advance_frame(self, ticks: int = 1) -> List[Outcome]:
        """Run one frame: let the scheduler count down, queue due ticks, drain."""
        fired = self.scheduler.advance(ticks)
        if fired and self.state is not None:
            for _ in range(fired):
                self.post(AdversaryTick(self.state.generation))
        return self.pump()

    # ---- Dispatch ----
    def _dispatch(self, event: Event) -> Outcome:
        result: Outcome = None
        if isinstance(event, Move):
            if self.state is not None and not self.in_menu:
                result = self.state.move_player(event.direction)
        elif isinstance(event, AdversaryTick):
            result = self._on_tick(event)
        elif isinstance(event, Regenerate):
            if not self.in_menu:
                self._regenerate()
        elif isinstance(event, ChangeDifficulty):
            profile = get_preset(event.name)
            self.scheduler.cancel()
            self.profile = profile
            if not self.in_menu:
                self._regenerate()
        elif isinstance(event, SetTraps):
            # Applies to placement at the next regeneration.
            self.options = self.options.with_traps(event.enabled)
        elif isinstance(event, SetAdversaries):
            self.options = self.options.with_adversaries(event.enabled)
            if not event.enabled:
                self.scheduler.cancel()
        elif isinstance(event, StartGame):
            self.in_menu = False
            self._regenerate()
        elif isinstance(event, OpenMenu):
            self.scheduler.cancel()
            self.in_menu = True
        else:
            raise TypeError(f"unknown event {event!r}")
        self._sync_scheduler()
        return result

    def _on_tick(self, event: AdversaryTick) -> Optional[TickEvents]:
        if self.state is None or self.in_menu:
            return None
        if event.generation != self.state.generation:
            log.debug("stale adversary tick dropped", tick_generation=event.generation, current=self.state.generation)
            return None
        return self.state.tick()

    def _regenerate(self) -> None:
        # Stop the timer before touching the maze, then rebuild wholesale.
        self.scheduler.cancel()
        if self.state is None:
            self.state = GameState.new(self.profile, self.options, self.rng)
        else:
            self.state.regenerate(self.profile, self.options.traps_enabled, self.options.adversaries_enabled)
        # Anything still queued for the previous maze is stale.
        self.queue = deque(e for e in self.queue if not isinstance(e, AdversaryTick))

    def scheduler_should_run(self) -> bool:
        return (
            self.state is not None
            and not self.in_menu
            and self.options.adversaries_enabled
            and not self.state.is_over
        )

    def _sync_scheduler(self) -> None:
        want = self.scheduler_should_run()
        if want and not self.scheduler.active:
            self.scheduler.start()
        elif not want and self.scheduler.active:
            self.scheduler.cancel()
