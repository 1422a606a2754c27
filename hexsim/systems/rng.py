"""Domain-separated deterministic RNG using xxhash.

Every draw is a pure function of (WorldSeed, Domain, Key, Step), so the
same seed always generates the same map, the same spawn positions and the
same monster decisions, regardless of how many other draws happened in
between.
"""

from __future__ import annotations

import struct
from typing import Sequence

import xxhash

from hexsim.core.enums import Domain


class DeterministicRNG:
    """Stateless domain-separated pseudo-random number generator."""

    __slots__ = ("_seed",)

    _MAX_UINT64 = (1 << 64) - 1

    def __init__(self, seed: int) -> None:
        self._seed = seed

    @property
    def seed(self) -> int:
        return self._seed

    def _hash(self, domain: Domain, key: int, step: int) -> int:
        payload = struct.pack("<qiqq", self._seed, domain.value, key, step)
        return xxhash.xxh64(payload).intdigest()

    def next_float(self, domain: Domain, key: int, step: int) -> float:
        """Return a deterministic float in [0.0, 1.0)."""
        return self._hash(domain, key, step) / (self._MAX_UINT64 + 1)

    def next_int(self, domain: Domain, key: int, step: int, low: int, high: int) -> int:
        """Return a deterministic integer in [low, high] inclusive."""
        f = self.next_float(domain, key, step)
        return low + int(f * (high - low + 1))

    def next_bool(self, domain: Domain, key: int, step: int, probability: float = 0.5) -> bool:
        """Return True with the given probability."""
        return self.next_float(domain, key, step) < probability

    def next_weighted(self, domain: Domain, key: int, step: int, weights: Sequence[int]) -> int:
        """Return an index into *weights*, chosen in proportion to its weight."""
        roll = self.next_int(domain, key, step, 0, sum(weights) - 1)
        for idx, weight in enumerate(weights):
            if roll < weight:
                return idx
            roll -= weight
        return len(weights) - 1
