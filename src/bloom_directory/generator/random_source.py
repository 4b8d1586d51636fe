"""Deterministic pseudo-random source (Mulberry32)."""

from typing import Iterator

_MASK = 0xFFFFFFFF
_INCREMENT = 0x6D2B79F5
_DIVISOR = 4294967296.0  # 2 ** 32


def _imul(a: int, b: int) -> int:
    """32-bit wrapping multiplication."""
    return (a * b) & _MASK


class SeededRandom:
    """Restartable stream of floats in [0, 1) fully determined by a seed.

    Every step works on a 32-bit state with masked arithmetic, so the same
    seed produces the same sequence on every platform and interpreter.
    Instances share no state with each other.
    """

    def __init__(self, seed: int):
        self.seed = seed
        self._state = seed & _MASK

    def random(self) -> float:
        """Advance the state and return the next float in [0, 1)."""
        self._state = (self._state + _INCREMENT) & _MASK
        state = self._state
        t = _imul(state ^ (state >> 15), state | 1)
        t = ((t + _imul(t ^ (t >> 7), t | 61)) & _MASK) ^ t
        return ((t ^ (t >> 14)) & _MASK) / _DIVISOR

    __call__ = random

    def reset(self) -> None:
        """Restart the sequence from the original seed."""
        self._state = self.seed & _MASK

    def __iter__(self) -> Iterator[float]:
        while True:
            yield self.random()

    def __repr__(self) -> str:
        return f"SeededRandom(seed={self.seed})"
