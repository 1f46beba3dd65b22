# robarm

Motion control for a three-axis desktop robot arm on a linear rail: G-code
parsing, inverse kinematics, timed moves within workspace limits, and the
drivers for steppers, endstops, grippers and switched outputs. The drivers talk
to a board object; `robarm.hal.SimulatedBoard` stands in for real hardware so
everything runs, and can be tested, anywhere Python runs.

## Modules

- `robarm.config` — `RobotConfig`, a frozen dataclass with the arm's
  dimensions, homing, stepper, rail, gripper, speed-profile, logging and
  move-limit settings. Its properties `r_min`, `r_max`, `z_max` and
  `initial_position` derive the workspace limits and the start position.
  `default_config()`, `sffactory_rail_config()` and
  `ftobler_original_config()` return ready-made settings. `SpeedProfile`
  (`FLAT`, `ARCTAN`, `COSINE`) and `GripperType` (`BYJ`, `SERVO`) are enums.
- `robarm.presets` — settings of earlier releases, `v031_config()`,
  `v041_config()` and `v051_config()`; `preset(name)` looks any preset up by
  name (raising `ValueError` for an unknown one) and `preset_names()` lists the
  names.
- `robarm.geometry` — inverse kinematics. `RobotGeometry(ee_offset,
  low_shank_length, high_shank_length).set(x, y, z)` returns `JointAngles`
  (`rot`, `low`, `high`, in radians) for shanks of any lengths;
  `EqualShankGeometry(ee_offset, shank_length)` is the simpler model for equal
  shanks. Positions out of reach raise `UnreachablePosition`.
- `robarm.interpolation` — `Point(x, y, z, e)` and `Interpolation`, which moves
  the tool from a start to a target over time (`set_interpolation`,
  `set_interpolation_between`, `update_actual_position`, `is_finished`,
  `position`) with the configured speed profile, and stops at the workspace
  limits given by `within_limits` or `within_limits_equal_shank`. It also keeps
  a position offset (`set_pos_offset`, `reset_pos_offset`, `pos_offset`).
- `robarm.command` — `Command` reads G-code one character at a time
  (`handle_char`, a carriage return ends the line) or a whole line
  (`process_message`) into a `Cmd`. A line not starting with `G` or `M` makes
  `process_message` raise `UnrecognizedCommand`; `handle_char` logs it
  instead and returns `None`. `cmd_move` turns a parsed move into absolute
  targets, `cmd_dwell` pauses on a board for the `S` value in seconds.
- `robarm.command_queue` — `CommandQueue(capacity)`, a bounded FIFO that
  raises `QueueFull` and `QueueEmpty`.
- `robarm.actuators` — `RampsStepper`, `Endstop`, `BYJGripper`,
  `ServoGripper`, `Equipment` and `FanControl`, each driving pins on a board.
- `robarm.hal` — `SimulatedBoard` with pins, a clock that advances only on
  delays, scripted inputs (`set_input`) and servos; `ramps_pinout()` and
  `uno_pinout()` give the pin assignments as `Pinout`.
- `robarm.logger` — `Logger` writing `ERROR:`, `INFO:` and `DEBUG:` lines to a
  stream, filtered by `LogLevel`.

## Example

```python
from robarm.command import Command
from robarm.config import default_config
from robarm.geometry import RobotGeometry

config = default_config()
geometry = RobotGeometry(
    config.end_effector_offset,
    config.low_shank_length,
    config.high_shank_length,
)
x, y, z, _ = config.initial_position
print(geometry.set(x, y, z))

command = Command()
cmd = command.process_message("G1 X10 Y180 Z100")
print(cmd.letter, cmd.num, cmd.x, cmd.y, cmd.z)
```

## What it does not do

There is no serial connection, no command-line program and no main control
loop: nothing here reads G-code from a port, queues it, and dispatches each
command to the interpolation and the steppers. The pieces are there to be
wired together by the caller. Only `SimulatedBoard` implements the board
interface; driving real pins needs a board object of your own with the same
methods.

## Running the tests

```
pip install -e .[test]
pytest
```