"""Bezier path sampling, vehicle kinematics, integration and path-following control."""

__version__ = "0.0.1"