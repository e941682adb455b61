# arachnopod

This package simulates the on-board control system of the Arachnopod robot.
The control unit (`arachnopod.cvs.CVS`) owns a `ModuleManager`. The manager
delivers queued `Command` objects to the subsystem modules registered with it:

- `SESModule` (`arachnopod.ses`) is the power supply subsystem. Its states are
  listed in `SESState`, and its status text is one of `OFF`, `BOOT`, `ACTIVE`
  or `ERROR_STATE`.
- `DSModule` (`arachnopod.ds`) is the drive subsystem. Its states are listed in
  `DSState`, and its status text is one of `IDLE`, `MOVING` or `ERROR_STATE`.

A module reports `UNKNOWN` as its status until `initialize()` has been called
on it.

## Installation

```
pip install .
```

## Running the simulator

```
arachnopod-sim
```

This command does the following:

1. Registers an `SESModule` under `SES` and a `DSModule` under `DS`.
2. Queues an `enable_power` command for `SES` with the argument `target=DS`.
3. Runs the update loop. Each tick processes the queued commands and then
   sleeps.

When SES handles the command it prints `SES: power enabled for DS`.

Options:

- `--iterations N`: run N ticks and then exit. By default the loop runs until
  it is interrupted.
- `--interval SECONDS`: the pause between ticks. The default is `0.01`.

The same behaviour is available from Python through `arachnopod.cvs.main(argv)`,
or through `CVS().initialize()` followed by `CVS.main_loop(iterations, interval)`.

## Using it as a library

```python
from arachnopod.command import Command
from arachnopod.module_manager import ModuleManager
from arachnopod.ses import SESModule
from arachnopod.ds import DSModule

manager = ModuleManager()
ses = SESModule()
ds = DSModule()
ses.initialize()   # prints "SES: powering on."
ds.initialize()    # prints "DS: initialized."
manager.register_module("SES", ses)
manager.register_module("DS", ds)

manager.send_command(Command("SES", "enable_power", {"target": "DS"}))
manager.send_command(Command("DS", "move", {"direction": "forward"}))
manager.update_all()

print(ses.status())  # ACTIVE
print(ds.status())   # MOVING
```

### How the manager handles commands

- `register_module(name, module)` replaces any module already registered under
  that name.
- The manager drops any command addressed to a name that has no registered
  module.
- Each call to `update_all()` first delivers the queued commands, in the order
  they were sent. It then calls `update()` on every module, in the sorted order
  of their names.

### Commands each module handles

- `SESModule` handles `enable_power` and reads the `target` argument.
- `DSModule` handles `move` and reads the `direction` argument. If that
  argument is missing, it raises `KeyError`.
- Both modules ignore any other action.
- Neither module's `update()` changes its state.

### Writing your own subsystem

Subclass `arachnopod.command.Module` and implement `initialize`,
`process_command`, `update` and `status`.

## Byte-level message interface

`arachnopod.ses_interface` defines the byte-level messages exchanged with the
control unit:

- `SesCommand(command_id, payload)`: a command sent to a module.
- `Response(status_code, data)`: a reply sent back by a module.
- `ModuleInterface`: an abstract class with `receive_command`, `get_response`
  and `module_name`.

`command_id` and `status_code` must be in the range 0–255; any other value
raises `ValueError`. The payload and the data are stored as `bytes`.

## Logging

`arachnopod.logger.init_logging(path)` sets up a logger that writes
debug-level records to the file at `path`. Each record has the form
`[HH:MM:SS] [level] message`. The default path is `logs/robot_log.txt`, and
missing directories are created. `init_logging` returns the logger.

`get_logger()` returns the same logger. If `init_logging` has not been called,
it returns `None`. The `arachnopod-sim` command does not set up logging.

## What the package does not do

The simulator has no graphical view. It does not open a window or render the
robot; it only prints text to the console. The modules do not simulate
movement or power monitoring over time: a module's state changes only when it
handles a command.

## Tests

```
pip install .[test]
pytest
```