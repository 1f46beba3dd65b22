"""Pin maps of the supported controller boards and a simulated board."""

from __future__ import annotations

import enum
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

LOW = 0
HIGH = 1


class PinMode(enum.Enum):
    """Electrical mode of a digital pin."""

    INPUT = "input"
    OUTPUT = "output"
    INPUT_PULLUP = "input_pullup"


@dataclass(frozen=True)
class Pinout:
    """Pin numbers of one controller board; ``None`` marks an unwired pin."""

    x_step: int | None
    x_dir: int | None
    x_enable: int | None
    x_min: int | None
    x_max: int | None
    y_step: int | None
    y_dir: int | None
    y_enable: int | None
    y_min: int | None
    y_max: int | None
    z_step: int | None
    z_dir: int | None
    z_enable: int | None
    z_min: int | None
    z_max: int | None
    e0_step: int | None
    e0_dir: int | None
    e0_enable: int | None
    e0_min: int | None
    e1_step: int | None
    e1_dir: int | None
    e1_enable: int | None
    byj_0: int | None
    byj_1: int | None
    byj_2: int | None
    byj_3: int | None
    servo: int | None
    pump: int | None
    laser: int | None
    led: int | None
    sd_power: int | None
    sd_ss: int | None
    fan: int | None
    ps_on: int | None
    kill: int | None
    temp_0: int | None
    temp_1: int | None


def ramps_pinout() -> Pinout:
    """Pin map of a Mega2560 with a RAMPS 1.4 shield."""
    return Pinout(
        x_step=54, x_dir=55, x_enable=38, x_min=3, x_max=2,
        y_step=60, y_dir=61, y_enable=56, y_min=14, y_max=15,
        z_step=46, z_dir=48, z_enable=62, z_min=18, z_max=19,
        e0_step=26, e0_dir=28, e0_enable=24, e0_min=20,
        e1_step=36, e1_dir=34, e1_enable=30,
        byj_0=40, byj_1=63, byj_2=59, byj_3=64,
        servo=4,
        pump=8, laser=10, led=13,
        sd_power=None, sd_ss=53,
        fan=9,
        ps_on=12, kill=None,
        temp_0=13, temp_1=14,
    )


def uno_pinout() -> Pinout:
    """Pin map of an Uno with a CNC shield."""
    return Pinout(
        x_step=2, x_dir=5, x_enable=8, x_min=9, x_max=None,
        y_step=3, y_dir=6, y_enable=8, y_min=10, y_max=None,
        z_step=4, z_dir=7, z_enable=8, z_min=11, z_max=None,
        e0_step=None, e0_dir=None, e0_enable=None, e0_min=None,
        e1_step=None, e1_dir=None, e1_enable=None,
        byj_0=None, byj_1=None, byj_2=None, byj_3=None,
        servo=12,
        pump=None, laser=None, led=None,
        sd_power=None, sd_ss=None,
        fan=None,
        ps_on=None, kill=None,
        temp_0=None, temp_1=None,
    )


def _level(value: object) -> int:
    return HIGH if value else LOW


class _Signal:
    """Input driven by a scripted sequence of levels; the last level sticks."""

    def __init__(self, levels: Iterator[object], last: int) -> None:
        self._levels = levels
        self._last = last

    def read(self) -> int:
        try:
            self._last = _level(next(self._levels))
        except StopIteration:
            pass
        return self._last


class SimulatedBoard:
    """In-memory board: pins, a clock that only moves on delays, and servos."""

    def __init__(self) -> None:
        self.modes: dict[int, PinMode] = {}
        self.levels: dict[int, int] = {}
        self.writes: list[tuple[int, int, int]] = []
        self.servo_angles: dict[int, float] = {}
        self.attached_servos: set[int] = set()
        self._inputs: dict[int, _Signal] = {}
        self._clock_us = 0

    def pin_mode(self, pin: int, mode: PinMode) -> None:
        self.modes[pin] = PinMode(mode)

    def digital_write(self, pin: int, value: object) -> None:
        level = _level(value)
        self.levels[pin] = level
        self.writes.append((self._clock_us, pin, level))

    def digital_read(self, pin: int) -> int:
        signal = self._inputs.get(pin)
        if signal is not None:
            return signal.read()
        if pin in self.levels:
            return self.levels[pin]
        if self.modes.get(pin) is PinMode.INPUT_PULLUP:
            return HIGH
        return LOW

    def set_input(self, pin: int, value: object) -> None:
        """Drive an input with a constant level or with a sequence read one by one."""
        if isinstance(value, Iterable) and not isinstance(value, (str, bytes)):
            self._inputs[pin] = _Signal(iter(value), LOW)
        else:
            self._inputs[pin] = _Signal(iter(()), _level(value))

    def millis(self) -> int:
        return self._clock_us // 1000

    def micros(self) -> int:
        return self._clock_us

    def delay(self, ms: float) -> None:
        if ms < 0:
            raise ValueError("delay must not be negative")
        self._clock_us += int(ms * 1000)

    def delay_microseconds(self, us: float) -> None:
        if us < 0:
            raise ValueError("delay must not be negative")
        self._clock_us += int(us)

    def attach_servo(self, pin: int) -> None:
        self.attached_servos.add(pin)

    def write_servo(self, pin: int, angle: float) -> None:
        self.servo_angles[pin] = float(angle)

    def detach_servo(self, pin: int) -> None:
        self.attached_servos.discard(pin)