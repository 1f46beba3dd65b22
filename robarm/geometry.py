"""Inverse kinematics: Cartesian tool positions to joint angles."""

from __future__ import annotations

import math
from dataclasses import dataclass

_EPSILON = 1e-12


class UnreachablePosition(ValueError):
    """Raised when no joint angles put the tool at the requested position."""


@dataclass(frozen=True)
class JointAngles:
    """Joint angles in radians: base rotation, lower arm and upper arm."""

    rot: float
    low: float
    high: float


def _clamped(value: float) -> float:
    if value > 1.0 + _EPSILON or value < -1.0 - _EPSILON or math.isnan(value):
        raise UnreachablePosition("position is outside the reach of the arm")
    return max(-1.0, min(1.0, value))


def _acos(value: float) -> float:
    return math.acos(_clamped(value))


def _asin(value: float) -> float:
    return math.asin(_clamped(value))


def _top_view(x: float, y: float, ee_offset: float) -> tuple[float, float]:
    """Return the radius to the tool and the radius to the wrist, seen from above."""
    rrot_ee = math.hypot(x, y)
    if rrot_ee == 0.0:
        raise UnreachablePosition("position lies on the rotation axis")
    return rrot_ee, rrot_ee - ee_offset


class _ArmGeometry:
    """Holds the last requested position and the joint angles found for it."""

    def __init__(self) -> None:
        self.x = 0.0
        self.y = 0.0
        self.z = 0.0
        self._angles = JointAngles(0.0, 0.0, 0.0)

    def _store(self, x: float, y: float, z: float, angles: JointAngles) -> JointAngles:
        self.x, self.y, self.z = x, y, z
        self._angles = angles
        return angles

    @property
    def angles(self) -> JointAngles:
        return self._angles

    @property
    def rot(self) -> float:
        return self._angles.rot

    @property
    def low(self) -> float:
        return self._angles.low

    @property
    def high(self) -> float:
        return self._angles.high


class RobotGeometry(_ArmGeometry):
    """Arm with lower and upper shanks of any lengths."""

    def __init__(
        self,
        ee_offset: float,
        low_shank_length: float,
        high_shank_length: float,
    ) -> None:
        super().__init__()
        if low_shank_length <= 0 or high_shank_length <= 0:
            raise ValueError("shank lengths must be positive")
        self.ee_offset = ee_offset
        self.low_shank_length = low_shank_length
        self.high_shank_length = high_shank_length

    def set(self, x: float, y: float, z: float) -> JointAngles:
        """Solve the joint angles for a tool position and remember both."""
        return self._store(x, y, z, self._solve(x, y, z))

    def _solve(self, x: float, y: float, z: float) -> JointAngles:
        rrot_ee, rrot = _top_view(x, y, self.ee_offset)
        rside = math.hypot(rrot, z)
        if rside == 0.0:
            raise UnreachablePosition("wrist would sit on the shoulder joint")
        low_len, high_len = self.low_shank_length, self.high_shank_length
        rside_2 = rside * rside
        low_2 = low_len * low_len
        high_2 = high_len * high_len

        rot = _asin(x / rrot_ee)
        high = math.pi - _acos((low_2 + high_2 - rside_2) / (2 * low_len * high_len))
        shoulder = _acos((low_2 - high_2 + rside_2) / (2 * low_len * rside))
        if z > 0:
            low = _acos(z / rside) - shoulder
        else:
            low = math.pi - _asin(rrot / rside) - shoulder
        return JointAngles(rot=rot, low=low, high=high + low)


class EqualShankGeometry(_ArmGeometry):
    """Arm whose lower and upper shanks have the same length."""

    def __init__(self, ee_offset: float, shank_length: float) -> None:
        super().__init__()
        if shank_length <= 0:
            raise ValueError("shank length must be positive")
        self.ee_offset = ee_offset
        self.shank_length = shank_length

    def set(self, x: float, y: float, z: float) -> JointAngles:
        """Solve the joint angles for a tool position and remember both."""
        return self._store(x, y, z, self._solve(x, y, z))

    def _solve(self, x: float, y: float, z: float) -> JointAngles:
        rrot_ee, rrot = _top_view(x, y, self.ee_offset)
        rside = math.hypot(rrot, z)
        if rside == 0.0:
            raise UnreachablePosition("wrist would sit on the shoulder joint")

        rot = _asin(x / rrot_ee)
        high = _acos((rside * 0.5) / self.shank_length) * 2.0
        if z > 0:
            low = _asin(rrot / rside) + (math.pi - high) / 2.0 - math.pi / 2.0
        else:
            low = math.pi - _asin(rrot / rside) + (math.pi - high) / 2.0 - math.pi / 2.0
        return JointAngles(rot=rot, low=low, high=high + low)