"""Motion control for a three-axis robot arm: G-code, kinematics, moves and simulated hardware."""

__version__ = "0.61.0"