"""Registry of modules and the queue of commands routed to them."""

from __future__ import annotations

from collections import deque

from .command import Command, Module


class ModuleManager:
    """Routes queued commands to registered modules and ticks them."""

    def __init__(self) -> None:
        self.modules: dict[str, Module] = {}
        self._queue: deque[Command] = deque()

    def register_module(self, name: str, module: Module) -> None:
        """Register ``module`` under ``name``, replacing any previous one."""
        self.modules[name] = module

    def send_command(self, cmd: Command) -> None:
        """Queue a command for delivery on the next ``update_all``."""
        self._queue.append(cmd)

    def update_all(self) -> None:
        """Deliver queued commands, then update every module in name order."""
        while self._queue:
            cmd = self._queue.popleft()
            module = self.modules.get(cmd.target)
            if module is not None:
                module.process_command(cmd)
        for name in sorted(self.modules):
            self.modules[name].update()