"""Command-line validation and the simulation parameters."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from philosim.timing import parse_leading_int

INT_MAX = 2**31 - 1
MAX_PHILOSOPHERS = 200


class ConfigError(ValueError):
    """Raised when the simulation arguments are invalid."""


@dataclass(frozen=True)
class SimulationConfig:
    """Parameters of one dinner; times are in milliseconds."""

    philosopher_count: int
    time_to_die: int
    time_to_eat: int
    time_to_sleep: int
    meals_required: Optional[int] = None


def _validated(text: Optional[str], low: int, high: int, message: str) -> int:
    if not text or any(char not in "0123456789" for char in text):
        raise ConfigError(message)
    value = parse_leading_int(text)
    if not low <= value <= high:
        raise ConfigError(message)
    return value


def parse_config(args: Sequence[str]) -> SimulationConfig:
    """Validate four or five argument strings and build a configuration.

    The arguments are, in order: number of philosophers, time to die, time
    to eat, time to sleep and, optionally, the meals each must eat.
    """
    if len(args) not in (4, 5):
        raise ConfigError("Invalid number of arguments")
    count = _validated(args[0], 1, MAX_PHILOSOPHERS, "Invalid number of philosophers")
    die = _validated(args[1], 1, INT_MAX, "Invalid time to die")
    eat = _validated(args[2], 1, INT_MAX, "Invalid time to eat")
    sleep = _validated(args[3], 1, INT_MAX, "Invalid time to sleep")
    meals = None
    if len(args) == 5:
        meals = _validated(
            args[4], 0, INT_MAX, "Invalid number of times each philosopher must eat"
        )
    return SimulationConfig(count, die, eat, sleep, meals)