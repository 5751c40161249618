"""Wall-clock timing of algorithm runs and random test data."""

from __future__ import annotations

import random
import time
from typing import Any

RANDOM_MAX = 1_000_000


def format_elapsed(seconds: float) -> str:
    """Render an elapsed time as the standard report line."""
    return f"Execution time: {seconds:.8f} seconds."


class Stopwatch:
    """Measures the time since :meth:`start`; also usable as a context manager."""

    def __init__(self) -> None:
        self._begin: float | None = None
        self.elapsed: float | None = None

    def start(self) -> Stopwatch:
        """Begin (or restart) timing."""
        self._begin = time.perf_counter()
        self.elapsed = None
        return self

    def stop(self) -> float:
        """Record and return the seconds since the last start."""
        if self._begin is None:
            raise RuntimeError("stopwatch was not started")
        self.elapsed = time.perf_counter() - self._begin
        return self.elapsed

    def report(self) -> str:
        """Stop the watch and return the formatted elapsed time."""
        return format_elapsed(self.stop())

    def __enter__(self) -> Stopwatch:
        return self.start()

    def __exit__(self, *args: Any) -> None:
        self.stop()


def random_int_list(quantity: int, rng: random.Random | None = None) -> list[int]:
    """Return ``quantity`` random integers between 1 and 1,000,000."""
    generator = rng if rng is not None else random.Random()
    return [generator.randint(1, RANDOM_MAX) for _ in range(quantity)]