"""
Random number sources for mine placement.

The board only ever asks for "an integer in [low, high)", so any host
can plug in its own generator. Tests use ScriptedRandomSource to force
exact mine layouts.
"""
import random
from typing import Iterable, Optional, Protocol, Union, runtime_checkable

import numpy as np

from .errors import MinesweeperError


# ============================================================================
# Interface
# ============================================================================

@runtime_checkable
class RandomSource(Protocol):
    """Capability to draw uniformly distributed integers."""

    def next_int(self, low: int, high: int) -> int:
        """Return an integer in the half-open range [low, high)."""
        ...


# ============================================================================
# Implementations
# ============================================================================

class PythonRandomSource:
    """Random source backed by the standard library generator."""

    def __init__(self, seed: Optional[int] = None) -> None:
        self._rng = random.Random(seed)

    def next_int(self, low: int, high: int) -> int:
        return self._rng.randrange(low, high)


class NumpyRandomSource:
    """
    Random source backed by a numpy Generator.

    Accepts either an existing Generator (e.g. a Gymnasium env's
    ``np_random``) or a seed for a fresh one.
    """

    def __init__(
        self, generator: Union[np.random.Generator, int, None] = None
    ) -> None:
        if isinstance(generator, np.random.Generator):
            self._rng = generator
        else:
            self._rng = np.random.default_rng(generator)

    def next_int(self, low: int, high: int) -> int:
        return int(self._rng.integers(low, high))


class ScriptedRandomSource:
    """
    Random source replaying a fixed sequence of values.

    Raises MinesweeperError when the script runs out or a value does
    not fit the requested range.
    """

    def __init__(self, values: Iterable[int]) -> None:
        self._values = list(values)
        self._index = 0

    @property
    def remaining(self) -> int:
        """Number of values not yet drawn."""
        return len(self._values) - self._index

    def next_int(self, low: int, high: int) -> int:
        if self._index >= len(self._values):
            raise MinesweeperError("Scripted random source exhausted")
        value = self._values[self._index]
        self._index += 1
        if not low <= value < high:
            raise MinesweeperError(
                f"Scripted value {value} outside range [{low}, {high})"
            )
        return value
