import threading

import pytest

from hapticteleop.geometry import Quaternion, matrix_to_quaternion, rpy_to_matrix
from hapticteleop.pose_mapping import (
    ARM_JOINT_NAMES,
    JointHold,
    JointPositionBuffer,
    map_pose,
    round_to_three_digits,
)


def test_map_pose_swaps_y_and_z_with_identity_orientation():
    assert map_pose((1.0, 2.0, 3.0), Quaternion()) == pytest.approx(
        (1.0, 3.0, 2.0, 0.0, 0.0, 0.0)
    )


def test_map_pose_mirrors_pitch_and_yaw():
    q = matrix_to_quaternion(rpy_to_matrix(0.2, 0.3, -0.4))
    result = map_pose((0.0, 0.0, 0.0), q)
    assert result[3:] == pytest.approx((0.2, -0.3, 0.4), abs=1e-9)


def test_map_pose_accepts_tuple_orientation():
    q = matrix_to_quaternion(rpy_to_matrix(0.1, 0.0, 0.5))
    assert map_pose((4.0, 5.0, 6.0), tuple(q)) == pytest.approx(
        map_pose((4.0, 5.0, 6.0), q)
    )


def test_round_halves_away_from_zero():
    assert round_to_three_digits(1.0625) == 1.063
    assert round_to_three_digits(-1.0625) == -1.063


def test_round_is_idempotent():
    for value in (3.14159, -2.71828, 0.0004, 12.3456):
        once = round_to_three_digits(value)
        assert round_to_three_digits(once) == once
        assert abs(once - value) <= 0.0005 + 1e-12


def test_joint_hold_starts_at_zero_and_keeps_last_solution():
    hold = JointHold()
    assert hold.update(None) == (0.0,) * len(ARM_JOINT_NAMES)
    solution = (0.1, 0.2, 0.3, 0.4, 0.5, 0.6)
    assert hold.update(solution) == solution
    assert hold.update(None) == solution


def test_joint_hold_uses_first_joints_and_rejects_short():
    hold = JointHold(3)
    assert hold.update([1.0, 2.0, 3.0, 4.0]) == (1.0, 2.0, 3.0)
    with pytest.raises(ValueError):
        hold.update([1.0])
    with pytest.raises(ValueError):
        JointHold(0)


def test_buffer_snapshot_clears_new_data_flag():
    buffer = JointPositionBuffer()
    assert buffer.new_data is False
    assert buffer.snapshot() == (0.0,) * 6
    buffer.on_joint_state([1, 2, 3, 4, 5, 6, 7])
    assert buffer.new_data is True
    assert buffer.snapshot() == (1.0, 2.0, 3.0, 4.0, 5.0, 6.0)
    assert buffer.new_data is False


def test_buffer_rejects_short_message():
    buffer = JointPositionBuffer(6)
    with pytest.raises(ValueError):
        buffer.on_joint_state([0.0, 1.0])


def test_buffer_from_other_thread():
    buffer = JointPositionBuffer(2)
    worker = threading.Thread(target=buffer.on_joint_state, args=([0.5, -0.5],))
    worker.start()
    worker.join()
    assert buffer.snapshot() == (0.5, -0.5)