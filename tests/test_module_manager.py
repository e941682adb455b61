from arachnopod.command import Command, Module
from arachnopod.module_manager import ModuleManager


class _Recorder(Module):
    def __init__(self, name, journal):
        self.name = name
        self.journal = journal

    def initialize(self):
        pass

    def process_command(self, cmd):
        self.journal.append((self.name, cmd.action))

    def update(self):
        self.journal.append((self.name, "update"))

    def status(self):
        return self.name


def test_commands_dispatched_before_updates():
    journal = []
    manager = ModuleManager()
    manager.register_module("A", _Recorder("A", journal))
    manager.send_command(Command("A", "first"))
    manager.send_command(Command("A", "second"))
    manager.update_all()
    assert journal == [("A", "first"), ("A", "second"), ("A", "update")]


def test_unknown_target_is_dropped():
    journal = []
    manager = ModuleManager()
    manager.register_module("A", _Recorder("A", journal))
    manager.send_command(Command("missing", "noop"))
    manager.update_all()
    assert journal == [("A", "update")]


def test_queue_is_drained():
    journal = []
    manager = ModuleManager()
    manager.register_module("A", _Recorder("A", journal))
    manager.send_command(Command("A", "once"))
    manager.update_all()
    manager.update_all()
    assert journal.count(("A", "once")) == 1
    assert journal.count(("A", "update")) == 2


def test_updates_in_name_order():
    journal = []
    manager = ModuleManager()
    manager.register_module("b", _Recorder("b", journal))
    manager.register_module("a", _Recorder("a", journal))
    manager.register_module("c", _Recorder("c", journal))
    manager.update_all()
    assert [name for name, _ in journal] == ["a", "b", "c"]


def test_register_replaces_existing():
    journal = []
    manager = ModuleManager()
    manager.register_module("A", _Recorder("old", journal))
    manager.register_module("A", _Recorder("new", journal))
    manager.update_all()
    assert journal == [("new", "update")]