"""State of a haptic stylus: device samples, velocity filtering and joint mapping."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Sequence

from hapticteleop.geometry import Quaternion, matmul3, matrix_to_quaternion

logger = logging.getLogger(__name__)

Vector3 = tuple[float, float, float]

ZERO3: Vector3 = (0.0, 0.0, 0.0)

BUTTON_1 = 1 << 0
BUTTON_2 = 1 << 1

UNIT_RATIOS = {"mm": 1.0, "cm": 10.0, "dm": 100.0, "m": 1000.0}

JOINT_NAMES = ("waist", "shoulder", "elbow", "yaw", "pitch", "roll")

# Quarter turn about z, taking the device frame to the published frame.
ROTATION_OFFSET = ((0.0, -1.0, 0.0), (1.0, 0.0, 0.0), (0.0, 0.0, 1.0))

_IDENTITY4 = (
    (1.0, 0.0, 0.0, 0.0),
    (0.0, 1.0, 0.0, 0.0),
    (0.0, 0.0, 1.0, 0.0),
    (0.0, 0.0, 0.0, 1.0),
)


def units_ratio(units: str) -> float:
    """Return the divisor that turns device millimetres into ``units``.

    Unknown units are reported and millimetres are used instead.
    """
    ratio = UNIT_RATIOS.get(units)
    if ratio is None:
        logger.warning("Unknown units [%s] using [mm]", units)
        return UNIT_RATIOS["mm"]
    return ratio


def joint_state_positions(thetas: Sequence[float]) -> dict[str, float]:
    """Map the seven device angles to the named joint positions of the model."""
    if len(thetas) < 7:
        raise ValueError(f"expected 7 angles, got {len(thetas)}")
    positions = (
        -thetas[1],
        thetas[2],
        thetas[3],
        -thetas[4] + math.pi,
        -thetas[5] - 3.0 * math.pi / 4.0,
        -thetas[6] - math.pi,
    )
    return dict(zip(JOINT_NAMES, positions))


def _vec(values: Sequence[float]) -> Vector3:
    if len(values) != 3:
        raise ValueError(f"expected 3 components, got {len(values)}")
    return (float(values[0]), float(values[1]), float(values[2]))


@dataclass
class VelocityEstimator:
    """Second-order backward difference followed by a 20 Hz low-pass filter."""

    sample_period: float = 0.002
    velocity: Vector3 = ZERO3
    inp_vel1: Vector3 = ZERO3
    inp_vel2: Vector3 = ZERO3
    inp_vel3: Vector3 = ZERO3
    out_vel1: Vector3 = ZERO3
    out_vel2: Vector3 = ZERO3
    out_vel3: Vector3 = ZERO3
    pos_hist1: Vector3 = ZERO3
    pos_hist2: Vector3 = ZERO3

    def update(self, position: Sequence[float]) -> Vector3:
        """Feed one position sample; return the filtered velocity."""
        position = _vec(position)
        vel_buff = tuple(
            (3.0 * p - 4.0 * h1 + h2) / self.sample_period
            for p, h1, h2 in zip(position, self.pos_hist1, self.pos_hist2)
        )
        velocity = tuple(
            (0.2196 * (vb + i3) + 0.6588 * (i1 + i2)) / 1000.0
            - (-2.7488 * o1 + 2.5282 * o2 - 0.7776 * o3)
            for vb, i1, i2, i3, o1, o2, o3 in zip(
                vel_buff,
                self.inp_vel1,
                self.inp_vel2,
                self.inp_vel3,
                self.out_vel1,
                self.out_vel2,
                self.out_vel3,
            )
        )
        self.pos_hist2, self.pos_hist1 = self.pos_hist1, position
        self.inp_vel3, self.inp_vel2, self.inp_vel1 = (
            self.inp_vel2,
            self.inp_vel1,
            vel_buff,  # type: ignore[assignment]
        )
        self.out_vel3, self.out_vel2, self.out_vel1 = (
            self.out_vel2,
            self.out_vel1,
            velocity,  # type: ignore[assignment]
        )
        self.velocity = velocity  # type: ignore[assignment]
        return self.velocity


@dataclass(frozen=True)
class DeviceSample:
    """One frame read from the device.

    ``transform`` is a 4x4 matrix whose last row holds the translation.
    """

    buttons: int = 0
    transform: Sequence[Sequence[float]] = _IDENTITY4
    joint_angles: Vector3 = ZERO3
    gimbal_angles: Vector3 = ZERO3
    velocity: Vector3 = ZERO3
    position: Vector3 = ZERO3

    def __post_init__(self) -> None:
        if len(self.transform) != 4 or any(len(row) != 4 for row in self.transform):
            raise ValueError("transform must be a 4x4 matrix")

    @property
    def button_states(self) -> tuple[int, int]:
        """(grey, white) as 0 or 1."""
        return (
            1 if self.buttons & BUTTON_1 else 0,
            1 if self.buttons & BUTTON_2 else 0,
        )

    @property
    def mapped_position(self) -> Vector3:
        """Translation with y and z swapped and the device z inverted, in mm."""
        t = self.transform[3]
        return (float(t[0]), -float(t[2]), float(t[1]))

    @property
    def orientation(self) -> Quaternion:
        """Orientation of the stylus after the fixed frame offset."""
        rotation = tuple(tuple(row[:3]) for row in self.transform[:3])
        return matrix_to_quaternion(matmul3(ROTATION_OFFSET, rotation))

    @property
    def thetas(self) -> tuple[float, ...]:
        """The seven angles: a placeholder, three arm joints and three gimbal angles."""
        j = self.joint_angles
        g = self.gimbal_angles
        return (0.0, j[0], j[1], j[2] - j[1], g[0], g[1], g[2])


def _thetas() -> list[float]:
    return [0.0] * 7


def _pair() -> list[int]:
    return [0, 0]


@dataclass
class HapticState:
    """Everything known about the stylus between device frames and publishing."""

    units_ratio: float = 1.0
    position: Vector3 = ZERO3
    position_origin: Vector3 = ZERO3
    lock_pos: Vector3 = ZERO3
    velocity: Vector3 = ZERO3
    velocity_origin: Vector3 = ZERO3
    rotation: Quaternion = field(default_factory=Quaternion)
    joints: Vector3 = ZERO3
    gimbal_angles: Vector3 = ZERO3
    thetas: list[float] = field(default_factory=_thetas)
    thetas_origin: list[float] = field(default_factory=_thetas)
    force: Vector3 = ZERO3
    force_get_origin: Vector3 = ZERO3
    buttons: list[int] = field(default_factory=_pair)
    buttons_prev: list[int] = field(default_factory=_pair)
    lock: bool = False
    close_gripper: bool = False
    estimator: VelocityEstimator = field(default_factory=VelocityEstimator)