"""Shared state of the dinner: philosophers, forks and the stop flag."""

from __future__ import annotations

import sys
import threading
from dataclasses import dataclass, field
from typing import Callable, List, Optional, TextIO

from philosim.config import SimulationConfig
from philosim.timing import current_time_ms


@dataclass(eq=False)
class Philosopher:
    """One diner and the two forks within reach."""

    id: int
    left_fork: threading.Lock = field(repr=False)
    right_fork: threading.Lock = field(repr=False)
    last_meal_ms: int
    meals_eaten: int = 0
    is_eating: bool = False


class Table:
    """Everything the philosopher threads and the monitor share."""

    def __init__(
        self,
        config: SimulationConfig,
        output: Optional[TextIO] = None,
        clock: Optional[Callable[[], int]] = None,
    ) -> None:
        self.config = config
        self.output = output if output is not None else sys.stdout
        self.clock = clock if clock is not None else current_time_ms
        self.print_lock = threading.Lock()
        self.dead_lock = threading.Lock()
        self.meal_lock = threading.Lock()
        self._over = False
        count = config.philosopher_count
        self.forks: List[threading.Lock] = [threading.Lock() for _ in range(count)]
        self.start_ms = self.clock()
        self.philosophers: List[Philosopher] = [
            Philosopher(
                id=index + 1,
                left_fork=self.forks[index],
                right_fork=self.forks[(index - 1) % count],
                last_meal_ms=self.clock(),
            )
            for index in range(count)
        ]

    def is_over(self) -> bool:
        """Tell whether the dinner has ended."""
        with self.dead_lock:
            return self._over

    def stop(self) -> None:
        """End the dinner; later announcements are suppressed."""
        with self.dead_lock:
            self._over = True

    def announce(self, philosopher: Philosopher, message: str) -> bool:
        """Print a timestamped status line unless the dinner is over.

        Returns whether the line was written.
        """
        with self.print_lock:
            elapsed = self.elapsed_ms()
            if self.is_over():
                return False
            self.output.write(f"{elapsed} {philosopher.id} {message}\n")
            self.output.flush()
            return True

    def record_meal(self, philosopher: Philosopher) -> None:
        """Note that ``philosopher`` has just started a meal."""
        with self.meal_lock:
            philosopher.last_meal_ms = self.clock()
            philosopher.meals_eaten += 1

    def elapsed_ms(self) -> int:
        """Milliseconds since the dinner started."""
        return self.clock() - self.start_ms