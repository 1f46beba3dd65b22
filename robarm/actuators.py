"""Stepper motors, endstops, grippers and switched outputs of the arm."""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import Protocol

from robarm.config import RobotConfig, default_config
from robarm.hal import HIGH, LOW, PinMode

# Half-step coil patterns of a 28BYJ-48 motor, one per step of the cycle.
_HALF_STEPS = (
    (LOW, LOW, LOW, HIGH),
    (LOW, LOW, HIGH, HIGH),
    (LOW, LOW, HIGH, LOW),
    (LOW, HIGH, HIGH, LOW),
    (LOW, HIGH, LOW, LOW),
    (HIGH, HIGH, LOW, LOW),
    (HIGH, LOW, LOW, LOW),
    (HIGH, LOW, LOW, HIGH),
)

_SETTLE_US = 5
_SERVO_SETTLE_MS = 300


class Board(Protocol):
    """What the actuators need from a controller board."""

    def pin_mode(self, pin: int, mode: PinMode) -> None: ...
    def digital_write(self, pin: int, value: object) -> None: ...
    def digital_read(self, pin: int) -> int: ...
    def millis(self) -> int: ...
    def delay(self, ms: float) -> None: ...
    def delay_microseconds(self, us: float) -> None: ...
    def attach_servo(self, pin: int) -> None: ...
    def write_servo(self, pin: int, angle: float) -> None: ...
    def detach_servo(self, pin: int) -> None: ...


def _pulse(board: Board, pin: int) -> None:
    board.digital_write(pin, HIGH)
    board.digital_write(pin, LOW)


class RampsStepper:
    """Stepper driven through step, direction and active-low enable pins."""

    def __init__(
        self,
        board: Board,
        step_pin: int,
        dir_pin: int,
        enable_pin: int,
        inverse: bool = False,
        config: RobotConfig | None = None,
    ) -> None:
        config = config if config is not None else default_config()
        self.board = board
        self.step_pin = step_pin
        self.dir_pin = dir_pin
        self.enable_pin = enable_pin
        self.inverse = inverse
        self.rad_to_step_factor = 0.0
        self.set_reduction_ratio(
            config.main_gear_teeth / config.motor_gear_teeth,
            config.microsteps * config.steps_per_rev,
        )
        self._position = 0
        self._target = 0
        for pin in (step_pin, dir_pin, enable_pin):
            board.pin_mode(pin, PinMode.OUTPUT)
        self.enable(False)

    def enable(self, value: bool = True) -> None:
        self.board.digital_write(self.enable_pin, not value)

    def is_on_position(self) -> bool:
        return self._position == self._target

    @property
    def position(self) -> int:
        """Current position in steps."""
        return self._position

    @property
    def target(self) -> int:
        return self._target

    def set_position(self, value: int) -> None:
        """Declare the current position without stepping."""
        self._position = int(value)
        self._target = int(value)

    def step_to_position(self, value: int) -> None:
        self._target = int(value)

    def step_to_position_mm(self, mm: float, steps_per_mm: float) -> None:
        self._target = int(mm * steps_per_mm)

    def step_relative(self, value: int) -> None:
        self.step_to_position(self._position + int(value))

    @property
    def position_rad(self) -> float:
        return self._position / self.rad_to_step_factor

    def set_position_rad(self, rad: float) -> None:
        self.set_position(int(rad * self.rad_to_step_factor))

    def step_to_position_rad(self, rad: float) -> None:
        self._target = int(rad * self.rad_to_step_factor)

    def step_relative_rad(self, rad: float) -> None:
        self.step_relative(int(rad * self.rad_to_step_factor))

    def update(self) -> None:
        """Step until the motor reaches its target."""
        while self._target < self._position:
            self.board.digital_write(self.dir_pin, not self.inverse)
            _pulse(self.board, self.step_pin)
            self._position -= 1
        while self._target > self._position:
            self.board.digital_write(self.dir_pin, self.inverse)
            _pulse(self.board, self.step_pin)
            self._position += 1

    def set_reduction_ratio(self, gear_ratio: float, steps_per_rev: int) -> None:
        self.rad_to_step_factor = gear_ratio * steps_per_rev / 2 / math.pi


class Endstop:
    """Limit switch used to home one stepper axis."""

    def __init__(
        self,
        board: Board,
        min_pin: int,
        dir_pin: int,
        step_pin: int,
        en_pin: int,
        switch_input: int,
        step_offset: int,
        home_dwell: int,
    ) -> None:
        self.board = board
        self.min_pin = min_pin
        self.dir_pin = dir_pin
        self.step_pin = step_pin
        self.en_pin = en_pin
        self.switch_input = switch_input
        self.step_offset = step_offset
        self.home_dwell = home_dwell
        self.last_state = False
        board.pin_mode(min_pin, PinMode.INPUT_PULLUP)

    def _read(self) -> bool:
        self.last_state = bool(self.board.digital_read(self.min_pin)) == bool(self.switch_input)
        return self.last_state

    def _prepare(self, direction: bool) -> None:
        self.board.digital_write(self.en_pin, LOW)
        self.board.delay_microseconds(_SETTLE_US)
        self.board.digital_write(self.dir_pin, HIGH if direction else LOW)
        self.board.delay_microseconds(_SETTLE_US)

    def _step(self) -> None:
        _pulse(self.board, self.step_pin)
        self.board.delay_microseconds(self.home_dwell)

    def home(self, direction: bool) -> None:
        """Step towards the switch until it triggers, then back off the offset."""
        self._prepare(direction)
        while not self._read():
            self._step()
        self.home_offset(direction)

    def home_offset(self, direction: bool) -> None:
        """Step ``step_offset`` steps away from the switch."""
        self.board.digital_write(self.dir_pin, LOW if direction else HIGH)
        self.board.delay_microseconds(_SETTLE_US)
        for _ in range(self.step_offset):
            self._step()

    def one_step_to_endstop(self, direction: bool) -> bool:
        """Take one step towards the switch unless it is triggered; return its state."""
        self._prepare(direction)
        if not self._read():
            self._step()
        return self._read()

    def state(self) -> bool:
        return self._read()


class BYJGripper:
    """Gripper driven by a four-coil 28BYJ-48 stepper in half steps."""

    def __init__(self, board: Board, pins: Sequence[int], steps: int) -> None:
        if len(pins) != 4:
            raise ValueError("a 28BYJ-48 motor needs exactly four pins")
        self.board = board
        self.pins = tuple(pins)
        self.grip_steps = steps
        self.step_cycle = 0
        for pin in self.pins:
            board.pin_mode(pin, PinMode.OUTPUT)

    def _run(self, forward: bool) -> None:
        for _ in range(self.grip_steps):
            for pin, level in zip(self.pins, _HALF_STEPS[self.step_cycle]):
                self.board.digital_write(pin, level)
            self.step_cycle = (self.step_cycle + (1 if forward else -1)) % len(_HALF_STEPS)
            self.board.delay(1)

    def cmd_on(self) -> None:
        self._run(forward=True)

    def cmd_off(self) -> None:
        self._run(forward=False)


class ServoGripper:
    """Gripper driven by a hobby servo between two angles."""

    def __init__(self, board: Board, pin: int, grip_degree: float, ungrip_degree: float) -> None:
        self.board = board
        self.pin = pin
        self.grip_degree = grip_degree
        self.ungrip_degree = ungrip_degree

    def _move(self, angle: float) -> None:
        self.board.attach_servo(self.pin)
        self.board.write_servo(self.pin, angle)
        self.board.delay(_SERVO_SETTLE_MS)
        self.board.detach_servo(self.pin)

    def cmd_on(self) -> None:
        self._move(self.grip_degree)

    def cmd_off(self) -> None:
        self._move(self.ungrip_degree)


class Equipment:
    """A switched output such as a laser or an air pump."""

    def __init__(self, board: Board, pin: int) -> None:
        self.board = board
        self.pin = pin
        board.pin_mode(pin, PinMode.OUTPUT)

    def cmd_on(self) -> None:
        self.board.digital_write(self.pin, HIGH)

    def cmd_off(self) -> None:
        self.board.digital_write(self.pin, LOW)


class FanControl:
    """Fan that keeps running for ``fan_delay`` seconds after being disabled."""

    def __init__(self, board: Board, pin: int, fan_delay: int) -> None:
        self.board = board
        self.pin = pin
        self.fan_delay_ms = fan_delay * 1000
        self.next_shutdown = 0
        self.enabled = False
        board.pin_mode(pin, PinMode.OUTPUT)
        board.digital_write(pin, LOW)

    def enable(self, value: bool = True) -> None:
        if value:
            self.enabled = True
            self.board.digital_write(self.pin, HIGH)
        else:
            self.disable()

    def disable(self) -> None:
        self.enabled = False
        self.next_shutdown = self.board.millis() + self.fan_delay_ms
        self.update()

    def update(self) -> None:
        """Switch the fan off once its run-on time has passed."""
        if not self.enabled and self.board.millis() >= self.next_shutdown:
            self.board.digital_write(self.pin, LOW)