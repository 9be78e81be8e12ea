"""The watcher that ends the dinner on a death or when everyone has eaten."""

from __future__ import annotations

import time

from philosim.table import Table

DEFAULT_POLL_INTERVAL = 0.0001


def check_death(table: Table) -> bool:
    """Announce and stop on the first philosopher who starved."""
    for philosopher in table.philosophers:
        with table.meal_lock:
            starving = table.clock() - philosopher.last_meal_ms >= table.config.time_to_die
            if starving and not philosopher.is_eating:
                table.announce(philosopher, "died")
                died = True
            else:
                died = False
        if died:
            table.stop()
            return True
    return False


def check_all_ate(table: Table) -> bool:
    """Stop the dinner once every philosopher ate the required meals."""
    required = table.config.meals_required
    if required is None:
        return False
    with table.meal_lock:
        fed = sum(1 for p in table.philosophers if p.meals_eaten >= required)
    if fed == len(table.philosophers):
        table.stop()
        return True
    return False


def watch(table: Table, poll_interval: float = DEFAULT_POLL_INTERVAL) -> None:
    """Poll the table until a philosopher dies or all have eaten enough."""
    while not (check_death(table) or check_all_ate(table)):
        time.sleep(poll_interval)