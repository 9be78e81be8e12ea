import io

import pytest

from philosim.config import SimulationConfig
from philosim.table import Table


class FakeClock:
    def __init__(self, now=1000):
        self.now = now

    def __call__(self):
        return self.now


def make_table(count=3, clock=None):
    config = SimulationConfig(count, 800, 200, 200)
    output = io.StringIO()
    clock = clock or FakeClock()
    return Table(config, output, clock), output, clock


def test_philosopher_ids_start_at_one():
    table, _, _ = make_table(4)
    assert [p.id for p in table.philosophers] == [1, 2, 3, 4]


@pytest.mark.parametrize("count", [2, 3, 5])
def test_fork_assignment(count):
    table, _, _ = make_table(count)
    for index, philosopher in enumerate(table.philosophers):
        assert philosopher.left_fork is table.forks[index]
        assert philosopher.right_fork is table.forks[(index - 1) % count]


def test_neighbours_share_a_fork():
    table, _, _ = make_table(3)
    first, second, _ = table.philosophers
    assert second.right_fork is first.left_fork


def test_single_philosopher_has_one_fork():
    table, _, _ = make_table(1)
    only = table.philosophers[0]
    assert only.left_fork is only.right_fork
    assert len(table.forks) == 1


def test_announce_writes_elapsed_time_and_id():
    table, output, clock = make_table()
    clock.now += 250
    assert table.announce(table.philosophers[0], "is eating") is True
    assert output.getvalue() == "250 1 is eating\n"


def test_announce_silent_after_stop():
    table, output, _ = make_table()
    assert table.is_over() is False
    table.stop()
    assert table.is_over() is True
    assert table.announce(table.philosophers[1], "is sleeping") is False
    assert output.getvalue() == ""


def test_record_meal_updates_state():
    table, _, clock = make_table()
    philosopher = table.philosophers[2]
    clock.now += 300
    table.record_meal(philosopher)
    table.record_meal(philosopher)
    assert philosopher.meals_eaten == 2
    assert philosopher.last_meal_ms == clock.now


def test_initial_state():
    table, _, clock = make_table()
    for philosopher in table.philosophers:
        assert philosopher.meals_eaten == 0
        assert philosopher.is_eating is False
        assert philosopher.last_meal_ms == clock.now


def test_elapsed_ms_follows_clock():
    table, _, clock = make_table()
    assert table.elapsed_ms() == 0
    clock.now += 42
    assert table.elapsed_ms() == 42