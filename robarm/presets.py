"""Settings of earlier firmware releases and a lookup of every named preset."""

from __future__ import annotations

import dataclasses
from collections.abc import Callable

from robarm.config import (
    GripperType,
    RobotConfig,
    default_config,
    ftobler_original_config,
    sffactory_rail_config,
)


def v031_config() -> RobotConfig:
    """Release 0.31: one shank length and the approximate equal-shank workspace.

    Its reach is checked with
    :func:`robarm.interpolation.within_limits_equal_shank`.
    """
    return dataclasses.replace(
        RobotConfig(),
        low_shank_length=140.0,
        high_shank_length=140.0,
        end_effector_offset=55.0,
        x_home_steps=765,
        y_home_steps=1750,
        z_home_steps=3721,
        e0_home_steps=0,
        gripper=GripperType.BYJ,
        byj_grip_steps=1200,
        z_min=-125.0,
    )


def v041_config() -> RobotConfig:
    """Release 0.41: separate shank lengths and a law-of-cosines workspace."""
    return dataclasses.replace(
        RobotConfig(),
        low_shank_length=140.0,
        high_shank_length=140.0,
        end_effector_offset=55.0,
        x_home_steps=765,
        y_home_steps=1940,
        z_home_steps=3600,
        e0_home_steps=0,
        gripper=GripperType.BYJ,
        byj_grip_steps=1200,
        z_min=-125.0,
    )


def v051_config() -> RobotConfig:
    """Release 0.51: shorter shanks and a servo gripper."""
    return dataclasses.replace(
        RobotConfig(),
        low_shank_length=120.0,
        high_shank_length=120.0,
        end_effector_offset=54.0,
        x_home_steps=820,
        y_home_steps=1850,
        z_home_steps=3600,
        e0_home_steps=0,
        gripper=GripperType.SERVO,
        byj_grip_steps=1200,
        servo_grip_degree=90.0,
        servo_ungrip_degree=0.0,
        z_min=-140.0,
    )


_PRESETS: dict[str, Callable[[], RobotConfig]] = {
    "v0.31": v031_config,
    "v0.41": v041_config,
    "v0.51": v051_config,
    "v0.61": default_config,
    "20sffactory_rail": sffactory_rail_config,
    "ftobler_original": ftobler_original_config,
}


def preset_names() -> tuple[str, ...]:
    """Names accepted by :func:`preset`, sorted."""
    return tuple(sorted(_PRESETS))


def preset(name: str) -> RobotConfig:
    """Return the configuration registered under ``name``."""
    try:
        factory = _PRESETS[name]
    except KeyError:
        known = ", ".join(preset_names())
        raise ValueError(f"unknown preset {name!r}; known presets: {known}") from None
    return factory()