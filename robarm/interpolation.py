"""Timed linear moves of the tool with speed profiles and workspace limits."""

from __future__ import annotations

import math
import time
from collections.abc import Callable
from dataclasses import dataclass, fields

from robarm.config import RobotConfig, SpeedProfile, default_config
from robarm.logger import Logger

_MIN_SPEED = 5.0


@dataclass(frozen=True)
class Point:
    """Tool position in millimetres; ``e`` is the rail axis."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    e: float = 0.0

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y, self.z + other.z, self.e + other.e)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y, self.z - other.z, self.e - other.e)

    def scaled(self, factor: float) -> Point:
        return Point(self.x * factor, self.y * factor, self.z * factor, self.e * factor)

    def as_tuple(self) -> tuple[float, float, float, float]:
        return tuple(getattr(self, f.name) for f in fields(self))  # type: ignore[return-value]


def _within_common_limits(point: Point, config: RobotConfig) -> bool:
    return config.z_min <= point.z <= config.z_max and point.e <= config.rail_length


def within_limits(point: Point, config: RobotConfig) -> bool:
    """Whether the wrist lies within the reach of shanks of any lengths."""
    rrot_ee = math.hypot(point.x, point.y)
    if rrot_ee == 0.0:
        return False
    rrot = rrot_ee - config.end_effector_offset
    rrot_x = rrot * (point.y / rrot_ee)
    rrot_y = rrot * (point.x / rrot_ee)
    squared = rrot_x * rrot_x + rrot_y * rrot_y + point.z * point.z
    return (
        config.r_min ** 2 <= squared <= config.r_max ** 2
        and _within_common_limits(point, config)
    )


def within_limits_equal_shank(point: Point, config: RobotConfig) -> bool:
    """Whether the tool lies within the approximate reach of equal shanks."""
    shank = config.low_shank_length
    r_min = shank * 0.85 + config.end_effector_offset
    r_max = shank * 1.85 + config.end_effector_offset
    squared = point.x * point.x + point.y * point.y + point.z * point.z
    return r_min * r_min <= squared <= r_max * r_max and _within_common_limits(point, config)


def _fmt(value: float) -> str:
    return f"{value:.2f}"


def _default_clock() -> int:
    return time.monotonic_ns() // 1000


class Interpolation:
    """Moves the tool from a start to a target point over time."""

    def __init__(
        self,
        config: RobotConfig | None = None,
        clock: Callable[[], int] | None = None,
        logger: Logger | None = None,
        limit: Callable[[Point, RobotConfig], bool] = within_limits,
    ) -> None:
        self.config = config if config is not None else default_config()
        self._clock = clock if clock is not None else _default_clock
        self.logger = logger if logger is not None else Logger(self.config.log_level)
        self._limit = limit
        self._offset = Point()
        self._start = Point()
        self._delta = Point()
        self._position = Point()
        self._finished = True
        self._start_time = 0
        self._tmul = 0.0
        self.speed = 0.0

    def set_current_pos(self, point: Point) -> None:
        """Declare where the tool is without moving it."""
        self._start = point
        self._delta = Point()

    def set_interpolation(self, target: Point, speed: float = 0.0) -> None:
        """Start a move from the end of the previous move to ``target``."""
        self.set_interpolation_between(self._start + self._delta, target, speed)

    def set_interpolation_between(self, start: Point, target: Point, speed: float = 0.0) -> None:
        """Start a move from ``start`` to ``target`` at ``speed`` mm/s."""
        delta = target - start
        dist = max(math.sqrt(delta.x ** 2 + delta.y ** 2 + delta.z ** 2), abs(delta.e))
        if speed < _MIN_SPEED:
            speed = math.sqrt(dist) * 10
        speed = max(speed, _MIN_SPEED)
        self.speed = speed
        self._tmul = speed / dist if dist > 0 else math.inf
        self._start = start
        self._delta = delta
        self._finished = False
        self._start_time = self._clock()

    def _progress(self, t: float) -> tuple[float, bool]:
        scaled = math.inf if math.isinf(self._tmul) else t * self._tmul
        profile = self.config.speed_profile
        if profile is SpeedProfile.FLAT:
            progress = scaled
            done = progress >= 1.0
        elif profile is SpeedProfile.ARCTAN:
            progress = math.atan(math.pi * scaled - math.pi * 0.5) * 0.5 + 0.5
            done = progress >= 1.0
        else:
            done = scaled >= 1.0
            progress = 1.0 if done else -math.cos(scaled * math.pi) * 0.5 + 0.5
        return (1.0 if done else progress), done

    def update_actual_position(self) -> None:
        """Advance the tool along the current move according to the clock."""
        if self._finished:
            return
        t = (self._clock() - self._start_time) / 1_000_000.0
        progress, done = self._progress(t)
        if done:
            self._finished = True
        candidate = self._start + self._delta.scaled(progress)
        if self.is_allowed_position(candidate):
            self._position = candidate
        else:
            self._finished = True
            self._start = self._position
            self._delta = Point()

    def is_finished(self) -> bool:
        return self._finished

    @property
    def position(self) -> Point:
        """Last position reached inside the workspace."""
        return self._position

    def is_allowed_position(self, point: Point) -> bool:
        """Check the workspace limits, logging an error when they are broken."""
        allowed = self._limit(point, self.config)
        if not allowed:
            self.logger.error(
                f"LIMIT REACHED: [X:{_fmt(point.x)} Y:{_fmt(point.y)}"
                f" Z:{_fmt(point.z)} E:{_fmt(point.e)}]"
            )
        return allowed

    def set_pos_offset(self, x: float, y: float, z: float, e: float) -> None:
        """Make the current position read as (x, y, z, e) from now on."""
        self._offset = self._position - Point(x, y, z, e)
        off = self._offset
        self.logger.info(
            f"POSITION OFFSET: [X{_fmt(off.x)} Y:{_fmt(off.y)} Z:{_fmt(off.z)} E:{_fmt(off.e)}]"
        )
        self.logger.info(f"CURRENT POSITION: [X:{_fmt(x)} Y:{_fmt(y)} Z:{_fmt(z)} E:{_fmt(e)}]")

    def reset_pos_offset(self) -> None:
        self._offset = Point()

    @property
    def pos_offset(self) -> Point:
        return self._offset