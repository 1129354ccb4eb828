"""Randomness sources for the collapse resolver.

The resolver never touches the global ``random`` module. It draws through a
:class:`RandomSource` so that games can be replayed from a seed and tests can
script the exact selections and branch rolls.
"""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from typing import Iterable, Sequence, TypeVar

from .errors import InvalidStateError

__all__ = ["RandomSource", "ScriptedRandomSource", "SeededRandomSource"]

T = TypeVar("T")


class RandomSource(ABC):
    """Uniform selection from a non-empty sequence and uniform [0, 1) draws."""

    @abstractmethod
    def choice(self, items: Sequence[T]) -> T:
        """Return one element of ``items`` chosen uniformly."""

    @abstractmethod
    def random(self) -> float:
        """Return a float drawn uniformly from [0, 1)."""

    @staticmethod
    def _require_items(items: Sequence[T]) -> None:
        if not items:
            raise InvalidStateError("cannot select from an empty sequence")


class SeededRandomSource(RandomSource):
    """RandomSource backed by a per-instance :class:`random.Random`.

    Passing the same ``seed`` reproduces the same sequence of draws.
    """

    def __init__(self, seed: int | None = None):
        self.seed = seed
        self.rng: random.Random = random.Random(seed)

    def choice(self, items: Sequence[T]) -> T:
        self._require_items(items)
        return self.rng.choice(items)

    def random(self) -> float:
        return self.rng.random()


class ScriptedRandomSource(RandomSource):
    """Deterministic RandomSource for tests and replays.

    ``choice`` always returns ``items[index]`` (clamped to the last element
    for shorter sequences). ``random`` returns the scripted ``rolls`` in
    order and keeps repeating the final roll once they run out.
    """

    def __init__(self, index: int = 0, rolls: Iterable[float] = (0.0,)):
        if index < 0:
            raise ValueError("index must be non-negative")
        self.index = index
        self.rolls = list(rolls) or [0.0]
        for roll in self.rolls:
            if not 0.0 <= roll < 1.0:
                raise ValueError(f"roll {roll} outside [0, 1)")
        self._cursor = 0
        self.choice_calls = 0
        self.random_calls = 0

    def choice(self, items: Sequence[T]) -> T:
        self._require_items(items)
        self.choice_calls += 1
        return items[min(self.index, len(items) - 1)]

    def random(self) -> float:
        self.random_calls += 1
        roll = self.rolls[min(self._cursor, len(self.rolls) - 1)]
        self._cursor += 1
        return roll
