"""Machine settings of the arm and the bundled sample configurations."""

from __future__ import annotations

import dataclasses
import enum
import math
from dataclasses import dataclass

from robarm.logger import LogLevel


class SpeedProfile(enum.IntEnum):
    """Shape of the progress curve of a move."""

    FLAT = 0
    ARCTAN = 1
    COSINE = 2


class GripperType(enum.IntEnum):
    """Motor driving the gripper."""

    BYJ = 0
    SERVO = 1


@dataclass(frozen=True)
class RobotConfig:
    """All tunable settings; defaults match the stock belt-driven arm."""

    baud: int = 115200
    use_uno: bool = False

    low_shank_length: float = 140.0
    high_shank_length: float = 140.0
    end_effector_offset: float = 54.0

    initial_x: float = 0.0
    initial_e0: float = 0.0

    x_home_steps: int = 1020
    y_home_steps: int = 1900
    z_home_steps: int = 3640
    e0_home_steps: int = 0

    home_x_stepper: bool = True
    home_y_stepper: bool = True
    home_z_stepper: bool = True
    home_e0_stepper: bool = True
    home_on_boot: bool = False
    home_dwell: int = 1400

    microsteps: int = 16
    steps_per_rev: int = 200
    inverse_x_stepper: bool = True
    inverse_y_stepper: bool = False
    inverse_z_stepper: bool = True
    inverse_e0_stepper: bool = False

    rail: bool = True
    steps_per_mm_rail: float = 80.0
    rail_length: float = 200.0

    x_min_input: int = 1
    y_min_input: int = 1
    z_min_input: int = 1
    e0_min_input: int = 1

    motor_gear_teeth: float = 20.0
    main_gear_teeth: float = 90.0

    laser: bool = False
    pump: bool = False
    fan_delay: int = 120

    gripper: GripperType = GripperType.BYJ
    byj_grip_steps: int = 1200
    servo_grip_degree: float = 90.0
    servo_ungrip_degree: float = 0.0

    queue_size: int = 15

    print_reply: bool = False
    print_reply_msg: str = "ok"

    speed_profile: SpeedProfile = SpeedProfile.COSINE
    log_level: LogLevel = LogLevel.DEBUG

    z_min: float = -140.0
    z_max_margin: float = 30.0
    shanks_min_angle_cos: float = 0.791436948
    shanks_max_angle_cos: float = -0.774944489

    def __post_init__(self) -> None:
        object.__setattr__(self, "gripper", GripperType(self.gripper))
        object.__setattr__(self, "speed_profile", SpeedProfile(self.speed_profile))
        object.__setattr__(self, "log_level", LogLevel(self.log_level))
        if self.low_shank_length <= 0 or self.high_shank_length <= 0:
            raise ValueError("shank lengths must be positive")
        if self.motor_gear_teeth <= 0 or self.main_gear_teeth <= 0:
            raise ValueError("gear teeth must be positive")
        if self.microsteps < 1 or self.steps_per_rev < 1:
            raise ValueError("microsteps and steps per revolution must be positive")
        if self.queue_size < 1:
            raise ValueError("queue size must be at least 1")
        for cos in (self.shanks_min_angle_cos, self.shanks_max_angle_cos):
            if not -1.0 <= cos <= 1.0:
                raise ValueError("shank angle cosines must lie in [-1, 1]")

    def _reach(self, cos_angle: float) -> float:
        low, high = self.low_shank_length, self.high_shank_length
        return math.sqrt(max(0.0, low * low + high * high - 2 * low * high * cos_angle))

    @property
    def r_min(self) -> float:
        """Smallest reach of the shanks, by the law of cosines."""
        return self._reach(self.shanks_min_angle_cos)

    @property
    def r_max(self) -> float:
        """Largest reach of the shanks, by the law of cosines."""
        return self._reach(self.shanks_max_angle_cos)

    @property
    def z_max(self) -> float:
        return self.low_shank_length + self.z_max_margin

    @property
    def initial_position(self) -> tuple[float, float, float, float]:
        """(x, y, z, e) with the lower arm vertical and the upper arm horizontal."""
        return (
            self.initial_x,
            self.high_shank_length + self.end_effector_offset,
            self.low_shank_length,
            self.initial_e0,
        )


def default_config() -> RobotConfig:
    return RobotConfig()


def sffactory_rail_config() -> RobotConfig:
    """Belt-driven arm on a rail."""
    return RobotConfig()


def ftobler_original_config() -> RobotConfig:
    """Gear-driven stationary arm without endstops."""
    return dataclasses.replace(
        RobotConfig(),
        low_shank_length=120.0,
        high_shank_length=120.0,
        z_home_steps=0,
        home_x_stepper=False,
        home_y_stepper=False,
        home_z_stepper=False,
        home_e0_stepper=False,
        rail=False,
        motor_gear_teeth=9.0,
        main_gear_teeth=32.0,
        z_min=-120.0,
    )