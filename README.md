# philosim

A simulation of the dining philosophers problem. Each philosopher runs in
its own thread and shares a fork with each neighbour, and a monitor thread
watches the table. Philosophers eat, sleep and think in a loop. The
simulation ends when one of them starves or, if a number of meals is given,
when every philosopher has eaten at least that many times.

## Installation

```
pip install .
```

## Usage

```
philosim NUMBER_OF_PHILOSOPHERS TIME_TO_DIE TIME_TO_EAT TIME_TO_SLEEP [MEALS_REQUIRED]
```

The same entry point can also be started with
`python -m philosim.simulation`.

- `NUMBER_OF_PHILOSOPHERS`: from 1 to 200.
- `TIME_TO_DIE`, `TIME_TO_EAT`, `TIME_TO_SLEEP`: times in milliseconds,
  each from 1 to 2147483647.
- `MEALS_REQUIRED` (optional): from 0 to 2147483647. The simulation stops
  once every philosopher has eaten at least this many times. Without it,
  the simulation runs until a philosopher dies.

Every argument must be written in plain digits only: no sign, no spaces.
A wrong number of arguments or an invalid argument prints a message such as
`Invalid time to die` on standard error, and the command exits with
status 1. A successful run exits with status 0.

Example:

```
philosim 5 800 200 200 7
```

Each event is printed on standard output on its own line:

```
<milliseconds since start> <philosopher id> <action>
```

The action is one of `has taken a fork`, `is eating`, `is sleeping`,
`is thinking` or `died`. Philosophers are numbered from 1. Once the
simulation has ended no further lines are printed.

A philosopher takes the fork on the right before the one on the left, and
even-numbered philosophers start one millisecond late. A philosopher alone
at the table has only one fork and waits until `TIME_TO_DIE` has passed.

## Library use

```python
import sys

from philosim.config import parse_config
from philosim.simulation import run_simulation

config = parse_config(["5", "800", "200", "200", "3"])
table = run_simulation(config, sys.stdout)
print([p.meals_eaten for p in table.philosophers])
```

- `philosim.config.parse_config(args)` takes four or five argument strings
  and returns a frozen `SimulationConfig`; it raises `ConfigError` (a
  `ValueError`) when they are invalid.
- `philosim.simulation.run_simulation(config, output=None)` runs one dinner
  to its end, writing events to `output` (standard output by default), and
  returns the final `Table`. It raises `RuntimeError` if a thread cannot be
  started.
- `philosim.table.Table` holds the philosophers, the forks and the stop
  flag; `philosim.monitor.watch` and `philosim.routine.run_philosopher` are
  the monitor and philosopher loops.