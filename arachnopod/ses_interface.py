"""Binary message interface between the central controller and a module."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field


def _check_byte(name: str, value: int) -> None:
    if not 0 <= value <= 0xFF:
        raise ValueError(f"{name} must fit in one byte, got {value}")


@dataclass(frozen=True)
class SesCommand:
    """A command sent from the controller to a module."""

    command_id: int
    payload: bytes = field(default=b"")

    def __post_init__(self) -> None:
        _check_byte("command_id", self.command_id)
        object.__setattr__(self, "payload", bytes(self.payload))


@dataclass(frozen=True)
class Response:
    """A reply sent from a module back to the controller."""

    status_code: int
    data: bytes = field(default=b"")

    def __post_init__(self) -> None:
        _check_byte("status_code", self.status_code)
        object.__setattr__(self, "data", bytes(self.data))


class ModuleInterface(ABC):
    """What a module offers to the controller."""

    @abstractmethod
    def receive_command(self, cmd: SesCommand) -> None:
        """Accept a command from the controller."""

    @abstractmethod
    def get_response(self) -> Response:
        """Produce the reply requested by the controller."""

    @abstractmethod
    def module_name(self) -> str:
        """Return the module's name for diagnostics."""