"""Kinematic robot-arm primitives: geometry, FK/IK, arm geometry, ports, a PD controller and goals."""

__version__ = "0.1.0"