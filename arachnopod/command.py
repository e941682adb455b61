"""Commands passed between simulator modules and the module interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field


@dataclass
class Command:
    """A request addressed to the module registered under ``target``."""

    target: str
    action: str
    args: dict[str, str] = field(default_factory=dict)


class Module(ABC):
    """Interface every simulated subsystem implements."""

    @abstractmethod
    def initialize(self) -> None:
        """Bring the module into its starting state."""

    @abstractmethod
    def process_command(self, cmd: Command) -> None:
        """Handle a command addressed to this module."""

    @abstractmethod
    def update(self) -> None:
        """Advance the module by one simulation tick."""

    @abstractmethod
    def status(self) -> str:
        """Return a short text describing the module's state."""