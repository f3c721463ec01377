"""Time grids used as tenors."""

from __future__ import annotations

import math
from typing import Iterator, Sequence

import numpy as np

from curvelib.errors import ConstructionError


class TimeDiscretization:
    """Strictly increasing sequence of times t_0 < t_1 < ... < t_n."""

    def __init__(self, times: Sequence[float]):
        times = np.asarray(times, dtype=float)
        if times.ndim != 1 or len(times) == 0:
            raise ConstructionError("Time discretization needs at least one time")
        if not np.all(np.isfinite(times)):
            raise ConstructionError("Time discretization times must be finite")
        if np.any(np.diff(times) <= 0.0):
            raise ConstructionError("Time discretization times must be strictly increasing")
        self._times = times

    @classmethod
    def from_tenor(cls, start: float, number_of_steps: int, step: float) -> "TimeDiscretization":
        """Regular grid start, start + step, ..., start + number_of_steps * step."""
        if number_of_steps < 0:
            raise ConstructionError("number_of_steps must not be negative")
        if not step > 0.0 or not math.isfinite(step):
            raise ConstructionError(f"step must be positive, got {step}")
        return cls(start + step * np.arange(number_of_steps + 1))

    @property
    def number_of_times(self) -> int:
        return len(self._times)

    @property
    def number_of_time_steps(self) -> int:
        return len(self._times) - 1

    def get_time(self, index: int) -> float:
        return float(self._times[index])

    def get_time_step(self, index: int) -> float:
        """Length of the period [t_index, t_index+1]."""
        if not 0 <= index < self.number_of_time_steps:
            raise IndexError(f"Time step index {index} out of range")
        return float(self._times[index + 1] - self._times[index])

    def get_time_index(self, time: float) -> int:
        """Index of ``time`` in the grid, or -1 if it is not a grid time."""
        idx = int(np.searchsorted(self._times, time))
        if idx < len(self._times) and self._times[idx] == time:
            return idx
        return -1

    def as_array(self) -> np.ndarray:
        return self._times.copy()

    def __len__(self) -> int:
        return len(self._times)

    def __iter__(self) -> Iterator[float]:
        return (float(t) for t in self._times)

    def __repr__(self) -> str:
        return f"TimeDiscretization({self._times.tolist()})"
