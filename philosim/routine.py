"""What each philosopher does: take forks, eat, sleep and think in a loop."""

from __future__ import annotations

from philosim.table import Philosopher, Table
from philosim.timing import precise_sleep

TAKEN_FORK = "has taken a fork"
EATING = "is eating"
SLEEPING = "is sleeping"
THINKING = "is thinking"


def eat(table: Table, philosopher: Philosopher) -> None:
    """Take both forks, eat for ``time_to_eat`` and put the forks back.

    A philosopher alone at the table has only one fork and simply waits
    out ``time_to_die``.
    """
    if table.is_over():
        return
    config = table.config
    if config.philosopher_count == 1:
        precise_sleep(config.time_to_die)
        return
    with philosopher.right_fork:
        table.announce(philosopher, TAKEN_FORK)
        with philosopher.left_fork:
            table.announce(philosopher, TAKEN_FORK)
            philosopher.is_eating = True
            try:
                table.announce(philosopher, EATING)
                table.record_meal(philosopher)
                precise_sleep(config.time_to_eat)
            finally:
                philosopher.is_eating = False


def nap(table: Table, philosopher: Philosopher) -> None:
    """Announce sleeping and sleep for ``time_to_sleep``."""
    table.announce(philosopher, SLEEPING)
    precise_sleep(table.config.time_to_sleep)


def think(table: Table, philosopher: Philosopher) -> None:
    """Announce thinking."""
    table.announce(philosopher, THINKING)


def run_philosopher(table: Table, philosopher: Philosopher) -> None:
    """Eat, sleep and think until the dinner is over.

    Even-numbered philosophers start a moment late so neighbours do not
    all reach for the same fork at once.
    """
    if philosopher.id % 2 == 0:
        precise_sleep(1)
    while not table.is_over():
        eat(table, philosopher)
        nap(table, philosopher)
        think(table, philosopher)