"""Wall-clock timer and frame time steps."""

from __future__ import annotations

import time
from dataclasses import dataclass


class Timer:
    """Measures time elapsed since creation or the last reset."""

    def __init__(self) -> None:
        self._start = 0
        self.reset()

    def reset(self) -> None:
        self._start = time.perf_counter_ns()

    def elapsed_seconds(self) -> float:
        return (time.perf_counter_ns() - self._start) * 1e-9

    def elapsed_millis(self) -> float:
        return self.elapsed_seconds() * 1000.0


@dataclass(frozen=True)
class Timestep:
    """A span of time, stored in seconds."""

    seconds: float = 0.0

    def milliseconds(self) -> float:
        return self.seconds * 1000.0

    def __float__(self) -> float:
        return float(self.seconds)