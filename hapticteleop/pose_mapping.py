"""Mapping of stylus poses and joint readings onto the follower arm."""

from __future__ import annotations

import math
import threading
from typing import Sequence

from hapticteleop.geometry import Quaternion, matrix_to_rpy, quaternion_to_matrix

ARM_JOINT_NAMES = (
    "shoulder_joint",
    "upperArm_joint",
    "foreArm_joint",
    "wrist1_joint",
    "wrist2_joint",
    "wrist3_joint",
)


def map_pose(
    position: Sequence[float], orientation: Quaternion | Sequence[float]
) -> tuple[float, float, float, float, float, float]:
    """Map a stylus pose to the follower target (x, y, z, roll, pitch, yaw).

    The stylus y and z axes are swapped and pitch and yaw are mirrored.
    """
    x, y, z = position[0], position[1], position[2]
    roll, pitch, yaw = matrix_to_rpy(quaternion_to_matrix(orientation))
    return (x, z, y, roll, -pitch, -yaw)


def round_to_three_digits(value: float) -> float:
    """Round to three decimals, halves away from zero."""
    scaled = abs(value) * 1000.0
    whole = math.floor(scaled)
    if scaled - whole >= 0.5:
        whole += 1
    return math.copysign(whole, value) / 1000.0


class JointHold:
    """Keeps the last valid inverse-kinematics solution for failed solves."""

    def __init__(self, joint_count: int = len(ARM_JOINT_NAMES)) -> None:
        if joint_count < 1:
            raise ValueError("joint_count must be positive")
        self.joint_count = joint_count
        self.positions: tuple[float, ...] = (0.0,) * joint_count

    def update(self, solution: Sequence[float] | None) -> tuple[float, ...]:
        """Take a solution, or None for a failed solve; return the positions to publish."""
        if solution is not None:
            if len(solution) < self.joint_count:
                raise ValueError(
                    f"solution has {len(solution)} values, expected {self.joint_count}"
                )
            self.positions = tuple(float(v) for v in solution[: self.joint_count])
        return self.positions


class JointPositionBuffer:
    """Thread-safe store of the latest joint positions received from the stylus."""

    def __init__(self, joint_count: int = 6) -> None:
        if joint_count < 1:
            raise ValueError("joint_count must be positive")
        self.joint_count = joint_count
        self._lock = threading.Lock()
        self._positions: tuple[float, ...] = (0.0,) * joint_count
        self._new_data = False

    @property
    def new_data(self) -> bool:
        with self._lock:
            return self._new_data

    def on_joint_state(self, positions: Sequence[float]) -> None:
        """Store the first ``joint_count`` positions of a joint-state message."""
        if len(positions) < self.joint_count:
            raise ValueError(
                f"joint state has {len(positions)} positions, expected {self.joint_count}"
            )
        values = tuple(float(v) for v in positions[: self.joint_count])
        with self._lock:
            self._positions = values
            self._new_data = True

    def snapshot(self) -> tuple[float, ...]:
        """Return the latest positions and mark them as consumed."""
        with self._lock:
            self._new_data = False
            return self._positions