# src/coinmaze/engine/timing.py
# Centralized timing model so the runner and the scheduler agree on tick length.

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class TimingModel:
    # Runner drives the engine at frame_rate ticks per second
    frame_rate: int = 60
    # Adversaries step once per second
    adversary_period_ticks: int = 60

    def seconds_to_ticks(self, seconds: float) -> int:
        return max(1, round(seconds * self.frame_rate))

    @property
    def adversary_period_seconds(self) -> float:
        return self.adversary_period_ticks / self.frame_rate


DEFAULT_TIMING = TimingModel()
