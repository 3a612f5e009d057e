"""Kinematics, pose mapping, stylus state filtering and trajectory types for haptic teleoperation."""

__version__ = "0.1.0"

__all__ = [
    "continuum",
    "otg",
    "geometry",
    "pose_mapping",
    "haptic_state",
]