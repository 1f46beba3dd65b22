import dataclasses

import pytest

from robarm.config import (
    GripperType,
    RobotConfig,
    SpeedProfile,
    default_config,
    ftobler_original_config,
    sffactory_rail_config,
)
from robarm.logger import LogLevel


def test_default_values_from_source():
    cfg = default_config()
    assert cfg.baud == 115200
    assert cfg.low_shank_length == 140.0
    assert cfg.end_effector_offset == 54.0
    assert cfg.queue_size == 15
    assert cfg.speed_profile is SpeedProfile.COSINE
    assert cfg.log_level is LogLevel.DEBUG
    assert cfg.gripper is GripperType.BYJ
    assert cfg.print_reply_msg == "ok"


def test_initial_position():
    assert default_config().initial_position == (0.0, 194.0, 140.0, 0.0)


def test_z_max():
    assert default_config().z_max == pytest.approx(170.0)


def test_reach_limits_ordered():
    cfg = default_config()
    assert 0 < cfg.r_min < cfg.r_max
    assert cfg.r_max < cfg.low_shank_length + cfg.high_shank_length


def test_reach_scales_with_shank_length():
    ratio = ftobler_original_config().r_min / default_config().r_min
    assert ratio == pytest.approx(120.0 / 140.0)
    ratio = ftobler_original_config().r_max / default_config().r_max
    assert ratio == pytest.approx(120.0 / 140.0)


def test_reach_extremes():
    cfg = RobotConfig(shanks_min_angle_cos=1.0, shanks_max_angle_cos=-1.0)
    assert cfg.r_min == pytest.approx(0.0)
    assert cfg.r_max == pytest.approx(cfg.low_shank_length + cfg.high_shank_length)


def test_sffactory_matches_default():
    assert sffactory_rail_config() == default_config()


def test_ftobler_sample():
    cfg = ftobler_original_config()
    assert cfg.low_shank_length == cfg.high_shank_length == 120.0
    assert (cfg.motor_gear_teeth, cfg.main_gear_teeth) == (9.0, 32.0)
    assert cfg.z_min == -120.0
    assert cfg.rail is False
    assert not any(
        (cfg.home_x_stepper, cfg.home_y_stepper, cfg.home_z_stepper, cfg.home_e0_stepper)
    )
    assert cfg.z_home_steps == 0


def test_enum_fields_coerced():
    cfg = RobotConfig(gripper=1, speed_profile=0, log_level=1)
    assert cfg.gripper is GripperType.SERVO
    assert cfg.speed_profile is SpeedProfile.FLAT
    assert cfg.log_level is LogLevel.INFO


def test_frozen():
    cfg = default_config()
    with pytest.raises(dataclasses.FrozenInstanceError):
        cfg.baud = 9600  # type: ignore[misc]
    assert cfg.baud == 115200


def test_replace_builds_new_config():
    cfg = default_config()
    changed = dataclasses.replace(cfg, baud=9600)
    assert changed.baud == 9600
    assert cfg.baud == 115200


@pytest.mark.parametrize(
    "kwargs",
    [
        {"queue_size": 0},
        {"low_shank_length": 0.0},
        {"motor_gear_teeth": -1.0},
        {"microsteps": 0},
        {"shanks_min_angle_cos": 1.5},
        {"speed_profile": 7},
    ],
)
def test_invalid_settings_rejected(kwargs):
    with pytest.raises(ValueError):
        RobotConfig(**kwargs)