import os
from dataclasses import dataclass
from typing import List, Sequence, TypeVar

T = TypeVar("T")

A = 16807
M = 0x7FFFFFFF  # 2^31-1


def pm_next(state: int) -> int:
    return (state * A) % M


def normalize_seed(seed: int) -> int:
    # Park–Miller state must live in 1..M-1; 0 would stick forever.
    s = seed % M
    return s if s else 1


def fresh_seed() -> int:
    return normalize_seed(int.from_bytes(os.urandom(4), "little"))


@dataclass
class PMRandom:
    state: int

    def __post_init__(self) -> None:
        self.state = normalize_seed(self.state)

    @classmethod
    def from_entropy(cls) -> "PMRandom":
        return cls(fresh_seed())

    def next32(self) -> int:
        self.state = pm_next(self.state)
        return self.state

    def random(self) -> float:
        """Uniform float in [0, 1)."""
        return (self.next32() - 1) / (M - 1)

    def below(self, n: int) -> int:
        assert n > 0
        return int(self.random() * n)

    def chance(self, p: float) -> bool:
        return self.random() < p

    def shuffle(self, seq: Sequence[T]) -> List[T]:
        """
        Fisher–Yates over a copy: walk from the back, swap each slot with a
        uniformly chosen slot at or before it. The input is left untouched.
        """
        out = list(seq)
        for i in range(len(out) - 1, 0, -1):
            j = self.below(i + 1)
            out[i], out[j] = out[j], out[i]
        return out
