# src/coinmaze/engine/scheduler.py
# Cancellable periodic countdown measured in engine ticks.

from __future__ import annotations

from dataclasses import dataclass

import structlog

log = structlog.get_logger(__name__)


@dataclass
class AdversaryScheduler:
    period_ticks: int = 60
    active: bool = False
    _countdown: int = 0

    def __post_init__(self) -> None:
        if self.period_ticks < 1:
            raise ValueError("period_ticks must be >= 1")

    def start(self) -> None:
        """Arm (or re-arm) with a full period before the first firing."""
        self.active = True
        self._countdown = self.period_ticks
        log.debug("adversary scheduler started", period_ticks=self.period_ticks)

    def cancel(self) -> None:
        if self.active:
            log.debug("adversary scheduler cancelled")
        self.active = False
        self._countdown = 0

    @property
    def ticks_until_fire(self) -> int:
        return self._countdown if self.active else 0

    def advance(self, ticks: int = 1) -> int:
        """Advance by ``ticks`` engine ticks; return how many periods elapsed."""
        if not self.active:
            return 0
        fired = 0
        for _ in range(max(0, ticks)):
            self._countdown -= 1
            if self._countdown <= 0:
                fired += 1
                self._countdown = self.period_ticks
        return fired
