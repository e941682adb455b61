"""Drive system module."""

from __future__ import annotations

from enum import Enum

from .command import Command, Module


class DSState(Enum):
    IDLE = "IDLE"
    MOVING = "MOVING"
    ERROR_STATE = "ERROR_STATE"


class DSModule(Module):
    """Simulated drive system that reacts to ``move`` commands."""

    def __init__(self) -> None:
        self.state: DSState | None = None

    def initialize(self) -> None:
        self.state = DSState.IDLE
        print("DS: initialized.")

    def process_command(self, cmd: Command) -> None:
        if cmd.action == "move":
            direction = cmd.args["direction"]
            print(f"DS: moving in direction: {direction}")
            self.state = DSState.MOVING

    def update(self) -> None:
        """Movement status is not simulated yet; nothing changes per tick."""

    def status(self) -> str:
        return self.state.value if self.state is not None else "UNKNOWN"