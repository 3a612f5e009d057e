"""Shared types and numeric helpers for online trajectory generation."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import IntEnum

VARIANTB_NODES_NUM = 9
SEG_NUM = 13
OTG_INFINITY = 1.0e100
RML_INPUT_VALUE_EPSILON = 1.0e-10
RML_VALID_SOLUTION_EPSILON = 1.0e-10
MAXIMAL_NO_OF_POLYNOMIALS = 7
RML_MAX_EXECUTION_TIME = 1e10
RML_ADDITIONAL_RELATIVE_POSITION_ERROR_IN_CASE_OF_EQUALITY = 1e-7
RML_ADDITIONAL_ABSOLUTE_POSITION_ERROR_IN_CASE_OF_EQUALITY = 1e-7
POSITIVE_ZERO = 1.0e-50
ABSOLUTE_PHASE_SYNC_EPSILON = 1.0e-6
RELATIVE_PHASE_SYNC_EPSILON = 1.0e-3
RML_INFINITY = 1.0e100
RML_POSITION_EXTREMS_TIME_EPSILON = 1.0e-4
PHASE_SYNC_COLLINEARITY_REL_EPSILON = 1.0e-2
EQUATION_SOLUTION_EPSILON = 1.0e-5


def rml_sqrt(value: float) -> float:
    """Square root that returns a tiny positive number for non-positive input."""
    return POSITIVE_ZERO if value <= 0.0 else math.sqrt(value)


def sign(value: float) -> int:
    """Return -1 for negative values, otherwise 1."""
    return -1 if value < 0.0 else 1


def fsign(value: float) -> float:
    """Return -1.0 for negative values, otherwise 1.0."""
    return -1.0 if value < 0.0 else 1.0


def pow2(value: float) -> float:
    return value * value


def is_epsilon_equal(a: float, b: float, epsilon: float) -> bool:
    """True when ``a`` and ``b`` differ by at most ``epsilon``."""
    return abs(a - b) <= epsilon


def is_input_epsilon_equal(a: float, b: float) -> bool:
    """Compare two input values with the input tolerance."""
    return is_epsilon_equal(a, b, RML_INPUT_VALUE_EPSILON)


class Step1Profile(IntEnum):
    UNDEFINED = 0
    POS_LIN_HLD_NEG_LIN = 1
    POS_TRAP_ZERO_NEG_TRI = 2
    NEG_TRAP_ZERO_POS_TRI = 3
    POS_TRI_ZERO_NEG_TRI = 4
    NEG_TRI_ZERO_POS_TRI = 5
    POS_TRAP_ZERO_NEG_TRAP = 6
    NEG_TRAP_ZERO_POS_TRAP = 7
    POS_TRI_ZERO_NEG_TRAP = 8
    NEG_TRI_ZERO_POS_TRAP = 9
    POS_TRAP_NEG_TRI = 10
    NEG_TRAP_POS_TRI = 11
    POS_TRAP_NEG_TRAP = 12
    NEG_TRAP_POS_TRAP = 13
    POS_TRI_NEG_TRAP = 14
    NEG_TRI_POS_TRAP = 15
    POS_TRI_NEG_TRI = 16
    NEG_TRI_POS_TRI = 17
    NEG_LIN_POS_TRI = 18
    POS_LIN_NEG_TRI = 19
    NEG_LIN_POS_TRAP = 20
    POS_LIN_NEG_TRAP = 21


class Step2Profile(IntEnum):
    POS_TRAP_ZERO_NEG_TRI = 0
    NEG_TRAP_ZERO_POS_TRI = 1
    POS_TRI_ZERO_NEG_TRI = 2
    NEG_TRI_ZERO_POS_TRI = 3
    POS_TRAP_ZERO_NEG_TRAP = 4
    NEG_TRAP_ZERO_POS_TRAP = 5
    POS_TRI_ZERO_NEG_TRAP = 6
    NEG_TRI_ZERO_POS_TRAP = 7
    POS_TRAP_ZERO_POS_TRI = 8
    NEG_TRAP_ZERO_NEG_TRI = 9
    POS_TRI_ZERO_POS_TRI = 10
    NEG_TRI_ZERO_NEG_TRI = 11
    POS_TRI_ZERO_POS_TRAP = 12
    NEG_TRI_ZERO_NEG_TRAP = 13
    POS_TRAP_ZERO_POS_TRAP = 14
    NEG_TRAP_ZERO_NEG_TRAP = 15
    POS_TRAP_HLD_NEG_LIN = 16
    NEG_TRAP_HLD_POS_LIN = 17
    POS_TRI_HLD_NEG_LIN = 18
    NEG_TRI_HLD_POS_LIN = 19
    NEG_LIN_HLD_POS_TRAP = 20
    POS_LIN_HLD_NEG_TRAP = 21
    NEG_LIN_HLD_POS_TRI = 22
    POS_LIN_HLD_NEG_TRI = 23
    POS_LIN_HLD_POS_TRI = 24
    NEG_LIN_HLD_NEG_TRI = 25
    POS_LIN_HLD_POS_TRAP = 26
    NEG_LIN_HLD_NEG_TRAP = 27
    UNDEFINED = 28


class VelocityProfile(IntEnum):
    POS_TRAP = 0
    NEG_TRAP = 1
    POS_TRI = 2
    NEG_TRI = 3
    POS_LIN_HLD_NEG_LIN = 4
    NEG_LIN_HLD_POS_LIN = 5
    NEG_LIN_HLD_NEG_LIN = 6
    POS_LIN_HLD_POS_LIN = 7
    UNDEFINED = 8


def _segments() -> list[float]:
    return [0.0] * SEG_NUM


@dataclass
class MotionState:
    """State of one axis while a jerk-limited profile is planned and sampled."""

    current_position: float = 0.0
    target_position: float = 0.0
    current_velocity: float = 0.0
    target_velocity: float = 0.0
    current_acceleration: float = 0.0
    max_velocity: float = 0.0
    old_position: float = 0.0
    old_acceleration: float = 0.0
    max_acceleration: float = 0.0
    max_jerk: float = 0.0
    total_time: float = 0.0
    segment_count: int = 0
    segment_time: list[float] = field(default_factory=_segments)
    segment_acceleration: list[float] = field(default_factory=_segments)
    segment_velocity: list[float] = field(default_factory=_segments)
    segment_position: list[float] = field(default_factory=_segments)
    reserved_value: list[float] = field(default_factory=_segments)
    intermediate_inversion: int = 0
    synchronization_time: float = 0.0
    control_cycle: float = 0.0
    applied_profile: Step1Profile = Step1Profile.UNDEFINED
    applied_profile2: Step2Profile = Step2Profile.UNDEFINED
    velocity_profile: VelocityProfile = VelocityProfile.UNDEFINED
    segment_b_count: int = 0
    inv_b: int = 0
    bp: float = 0.0
    bv: float = 0.0
    ba: float = 0.0
    bpt: float = 0.0
    bvt: float = 0.0
    total_time_b: float = 0.0
    step2_segment_para_calc: int = 0
    step1_finished: bool = False
    first_iteration: bool = False
    reduced: bool = False
    current_sample_index: int = 0
    current_section: int = 0


@dataclass
class MotionProperty:
    u_factor: float = 0.0
    target_position: float = 0.0
    current_velocity: float = 0.0
    target_velocity: float = 0.0
    current_acceleration: float = 0.0
    max_velocity: float = 0.0
    max_acceleration: float = 0.0
    max_jerk: float = 0.0


class JointTrajectoryInput:
    """Per-joint inputs for a multi-axis trajectory step."""

    def __init__(self, dof: int, control_cycle: float) -> None:
        if dof < 0:
            raise ValueError("number of degrees of freedom must not be negative")
        self.dof = dof
        self.control_cycle = control_cycle
        self.current_position = [0.0] * dof
        self.target_position = [0.0] * dof
        self.current_velocity = [0.0] * dof
        self.target_velocity = [0.0] * dof
        self.current_acceleration = [0.0] * dof
        self.max_velocity = [0.0] * dof
        self.max_acceleration = [0.0] * dof
        self.max_jerk = [0.0] * dof


class JointTrajectoryOutput:
    """Per-joint results of a multi-axis trajectory step."""

    def __init__(self, dof: int) -> None:
        if dof < 0:
            raise ValueError("number of degrees of freedom must not be negative")
        self.dof = dof
        self.new_position = [0.0] * dof
        self.new_velocity = [0.0] * dof
        self.new_acceleration = [0.0] * dof
        self.left_time = 0.0