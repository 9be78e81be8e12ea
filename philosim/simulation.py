"""Start the philosopher and monitor threads and the command-line entry."""

from __future__ import annotations

import sys
import threading
from typing import List, Optional, Sequence, TextIO

from philosim.config import ConfigError, SimulationConfig, parse_config
from philosim.monitor import watch
from philosim.routine import run_philosopher
from philosim.table import Table


def run_simulation(config: SimulationConfig, output: Optional[TextIO] = None) -> Table:
    """Run one dinner to its end and return the final table.

    Raises ``RuntimeError`` if a thread cannot be started.
    """
    table = Table(config, output)
    monitor = threading.Thread(target=watch, args=(table,), name="monitor")
    try:
        monitor.start()
    except RuntimeError as exc:
        raise RuntimeError("Error creating monitor thread") from exc

    workers: List[threading.Thread] = []
    for philosopher in table.philosophers:
        worker = threading.Thread(
            target=run_philosopher,
            args=(table, philosopher),
            name=f"philosopher-{philosopher.id}",
        )
        try:
            worker.start()
        except RuntimeError as exc:
            for started in workers:
                started.join()
            monitor.join()
            raise RuntimeError("Error creating philosopher thread") from exc
        workers.append(worker)

    monitor.join()
    for worker in workers:
        worker.join()
    return table


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Parse the arguments, run the dinner and return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        config = parse_config(args)
    except ConfigError as exc:
        sys.stderr.write(f"{exc}\n")
        return 1
    try:
        run_simulation(config, sys.stdout)
    except RuntimeError as exc:
        sys.stderr.write(f"{exc}\n")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())