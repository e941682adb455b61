"""Power supply (energy system) module."""

from __future__ import annotations

from enum import Enum

from .command import Command, Module


class SESState(Enum):
    POWER_OFF = "OFF"
    POWERING_ON = "BOOT"
    ACTIVE = "ACTIVE"
    ERROR_STATE = "ERROR_STATE"


class SESModule(Module):
    """Simulated power system that enables power for other modules."""

    def __init__(self) -> None:
        self.state: SESState | None = None

    def initialize(self) -> None:
        self.state = SESState.POWERING_ON
        print("SES: powering on.")

    def process_command(self, cmd: Command) -> None:
        if cmd.action == "enable_power":
            self.state = SESState.ACTIVE
            print(f"SES: power enabled for {cmd.args['target']}")

    def update(self) -> None:
        """Power monitoring is not simulated yet; nothing changes per tick."""

    def status(self) -> str:
        return self.state.value if self.state is not None else "UNKNOWN"