import math

import pytest

from hapticteleop.geometry import (
    IDENTITY,
    Quaternion,
    matmul3,
    matrix_to_quaternion,
    matrix_to_rpy,
    quaternion_to_matrix,
    rpy_to_matrix,
)

_IDENTITY_FLAT = [1.0, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 1.0]


def _flat(m):
    return [value for row in m for value in row]


def _transpose(m):
    return tuple(zip(*m))


def test_identity_quaternion_gives_identity_matrix():
    result = quaternion_to_matrix(Quaternion())
    assert _flat(result) == pytest.approx(_IDENTITY_FLAT, abs=1e-9)


def test_identity_matrix_gives_zero_angles():
    assert matrix_to_rpy(IDENTITY) == (0.0, 0.0, 0.0)


def test_matmul_with_identity_is_unchanged():
    m = rpy_to_matrix(0.3, -0.2, 1.1)
    right = matmul3(m, IDENTITY)
    left = matmul3(IDENTITY, m)
    assert _flat(right) == pytest.approx(_flat(m), abs=1e-9)
    assert _flat(left) == pytest.approx(_flat(m), abs=1e-9)


@pytest.mark.parametrize(
    "angles",
    [(0.1, 0.2, 0.3), (-1.0, 0.5, 2.5), (3.0, -1.2, -3.0), (0.0, 0.0, -1.5)],
)
def test_rpy_round_trip(angles):
    back = matrix_to_rpy(rpy_to_matrix(*angles))
    assert back == pytest.approx(angles, abs=1e-9)


@pytest.mark.parametrize("angles", [(0.4, -0.7, 1.9), (2.0, 1.0, -0.5)])
def test_rotation_matrix_is_orthonormal(angles):
    m = rpy_to_matrix(*angles)
    product = matmul3(m, _transpose(m))
    assert _flat(product) == pytest.approx(_IDENTITY_FLAT, abs=1e-9)


@pytest.mark.parametrize(
    "q",
    [
        Quaternion(0.1, 0.2, 0.3, 0.9),
        Quaternion(0.9, -0.1, 0.2, 0.1),
        Quaternion(0.0, 0.99, 0.1, 0.05),
        Quaternion(-0.1, 0.1, 0.95, 0.2),
    ],
)
def test_quaternion_round_trip(q):
    unit = q.normalized()
    back = matrix_to_quaternion(quaternion_to_matrix(q))
    if unit.w < 0:
        unit = Quaternion(-unit.x, -unit.y, -unit.z, -unit.w)
    assert tuple(back) == pytest.approx(tuple(unit), abs=1e-9)


def test_quaternion_and_rpy_agree():
    m = rpy_to_matrix(0.2, 0.3, -0.4)
    back = quaternion_to_matrix(matrix_to_quaternion(m))
    assert _flat(back) == pytest.approx(_flat(m), abs=1e-9)


def test_gimbal_lock_reports_zero_yaw_and_keeps_rotation():
    m = rpy_to_matrix(0.5, math.pi / 2, 0.0)
    roll, pitch, yaw = matrix_to_rpy(m)
    assert yaw == 0.0
    assert pitch == pytest.approx(math.pi / 2)
    rebuilt = rpy_to_matrix(roll, pitch, yaw)
    assert _flat(rebuilt) == pytest.approx(_flat(m), abs=1e-9)


def test_zero_quaternion_is_rejected():
    with pytest.raises(ValueError):
        quaternion_to_matrix(Quaternion(0.0, 0.0, 0.0, 0.0))
    with pytest.raises(ValueError):
        Quaternion(0.0, 0.0, 0.0, 0.0).normalized()


def test_sequence_input_accepted():
    result = quaternion_to_matrix((0.0, 0.0, 0.0, 2.0))
    assert _flat(result) == pytest.approx(_IDENTITY_FLAT, abs=1e-9)