"""Central control system that wires the modules together and runs them."""

from __future__ import annotations

import argparse
import time
from collections.abc import Sequence

from .command import Command
from .ds import DSModule
from .module_manager import ModuleManager
from .ses import SESModule


class CVS:
    """Central controller owning the module manager."""

    def __init__(self) -> None:
        self.manager = ModuleManager()

    def initialize(self) -> None:
        """Register the power and drive modules and request power for the drive."""
        self.manager.register_module("SES", SESModule())
        self.manager.register_module("DS", DSModule())
        self.manager.send_command(Command("SES", "enable_power", {"target": "DS"}))

    def main_loop(self, iterations: int | None = None, interval: float = 0.01) -> None:
        """Tick all modules every ``interval`` seconds; forever if ``iterations`` is None."""
        done = 0
        while iterations is None or done < iterations:
            self.manager.update_all()
            time.sleep(interval)
            done += 1


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="arachnopod", description="Run the simulator.")
    parser.add_argument(
        "--iterations", type=int, default=None, help="number of ticks (default: run forever)"
    )
    parser.add_argument(
        "--interval", type=float, default=0.01, help="seconds between ticks"
    )
    args = parser.parse_args(argv)

    cvs = CVS()
    cvs.initialize()
    cvs.main_loop(args.iterations, args.interval)
    return 0