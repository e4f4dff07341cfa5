"""
GridFleet Synthetic Fleet — Deterministic Randomness
======================================================
The only source of randomness in the generator:

  - DeterministicRandomSource: Park–Miller minimal-standard LCG
        state = state * 16807 mod (2^31 - 1)
        next  = (state - 1) / (2^31 - 2)          ∈ [0, 1)
  - derive_seed: 32-bit polynomial string hash (h = h*31 + ord(c)) → seed ≥ 1
  - channel_source: one fresh stream per (tag, synthesis channel)
  - CategoricalSampler: weighted pick with a last-bucket fail-safe

There is no module-level stream. Every channel constructs its own instance and
passes it explicitly, so call order elsewhere cannot perturb its output.
"""

from __future__ import annotations
from enum import IntEnum
from typing import Callable, Sequence, TypeVar

T = TypeVar("T")

LCG_MULTIPLIER = 16807
LCG_MODULUS = 2147483647           # 2^31 - 1


class Channel(IntEnum):
    """Fixed seed offsets separating per-asset synthesis streams."""
    EQUIPMENT = 0
    HEALTH = 999
    DIAGNOSTIC = 7777
    SCENARIO = 8888
    WORK_ORDERS = 9999


class DeterministicRandomSource:
    """Pure linear-congruential stream; bit-identical on every platform."""

    def __init__(self, seed: int):
        self.seed = seed
        # A state of 0 (mod 2^31 - 1) would repeat forever
        self._state = seed % LCG_MODULUS or 1

    def next(self) -> float:
        self._state = (self._state * LCG_MULTIPLIER) % LCG_MODULUS
        return (self._state - 1) / (LCG_MODULUS - 1)

    __call__ = next

    def uniform(self, low: float, high: float) -> float:
        return low + self.next() * (high - low)

    def int_from(self, low: int, span: int) -> int:
        """low + floor(next * span): an integer in [low, low + span)."""
        return low + int(self.next() * span)

    def choice(self, items: Sequence[T]) -> T:
        return items[int(self.next() * len(items))]

    def triangular_unit(self) -> float:
        """Sum of three uniforms minus 1.5: peaked at 0, bounded by ±1.5."""
        return self.next() + self.next() + self.next() - 1.5

    def __repr__(self) -> str:
        return f"DeterministicRandomSource(seed={self.seed}, state={self._state})"


def derive_seed(tag: str) -> int:
    """Map an asset tag to a stable positive seed (never zero)."""
    h = 0
    for ch in tag:
        h = (h * 31 + ord(ch)) & 0xFFFFFFFF
    if h >= 0x80000000:            # Reinterpret as signed 32-bit
        h -= 0x100000000
    return max(abs(h), 1)


def channel_seed(tag: str, channel: Channel) -> int:
    return derive_seed(tag) + int(channel)


def channel_source(tag: str, channel: Channel) -> DeterministicRandomSource:
    """Fresh, independent stream for one synthesis channel of one asset."""
    return DeterministicRandomSource(channel_seed(tag, channel))


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
#  CATEGORICAL SAMPLER — Weighted choice among labeled buckets
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class CategoricalSampler:
    """
    Weighted choice over an ordered list of (label, weight) buckets.

    Weights need not sum to 1. One draw in [0, total) is walked against the
    running cumulative weight; the first bucket whose cumulative weight
    exceeds the draw wins. Floating-point exhaustion falls back to the last
    bucket, so a pick never comes back empty.
    """

    def __init__(self, buckets: Sequence[tuple[T, float]]):
        if not buckets:
            raise ValueError("CategoricalSampler needs at least one bucket")
        self.labels = tuple(label for label, _ in buckets)
        self.weights = tuple(float(w) for _, w in buckets)
        self.total = sum(self.weights)

    @classmethod
    def by_weight(cls, items: Sequence[T], weight: Callable[[T], float]) -> "CategoricalSampler":
        return cls([(item, weight(item)) for item in items])

    def pick_with(self, draw: float) -> T:
        """Resolve a unit draw in [0, 1) to a bucket."""
        target = draw * self.total
        cumulative = 0.0
        for label, w in zip(self.labels, self.weights):
            cumulative += w
            if target < cumulative:
                return label
        return self.labels[-1]

    def sample(self, rng: DeterministicRandomSource) -> T:
        return self.pick_with(rng.next())
