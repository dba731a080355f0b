"""Command-line entry point: load a configuration and run the simulation."""

from __future__ import annotations

import sys

from .actions import clear_backup
from .simulation import Simulation


def main(argv: list[str] | None = None) -> int:
    """Run the simulation with the configuration file named in `argv`."""
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 1:
        print("usage: simulation <config_path>")
        return 0
    simulation = Simulation(args[0])
    try:
        simulation.start()
    finally:
        clear_backup()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())