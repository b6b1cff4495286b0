import math

import pytest

from tilesprite.matrices import identity_mat4, rotate_x_deg, rotate_z_deg
from tilesprite.quaternions import (
    Versor,
    dot_versor,
    format_versor,
    normalise_versor,
    quat_from_axis_deg,
    quat_from_axis_rad,
    quat_to_mat4,
    slerp,
)


def test_zero_angle_gives_identity():
    assert tuple(quat_from_axis_deg(0.0, 0.0, 0.0, 1.0)) == pytest.approx(
        tuple(Versor())
    )


def test_deg_and_rad_agree():
    a = quat_from_axis_deg(90.0, 0.0, 1.0, 0.0)
    b = quat_from_axis_rad(math.pi / 2.0, 0.0, 1.0, 0.0)
    assert tuple(a) == pytest.approx(tuple(b))


def test_axis_quaternion_is_unit():
    q = quat_from_axis_deg(73.0, 0.6, 0.0, 0.8)
    assert dot_versor(q, q) == pytest.approx(1.0)


def test_normalise_makes_unit_and_keeps_direction():
    q = Versor(2.0, 4.0, 6.0, 8.0)
    n = normalise_versor(q)
    assert dot_versor(n, n) == pytest.approx(1.0)
    assert tuple(n * 2.0) == pytest.approx(tuple(q / math.sqrt(dot_versor(q, q)) * 2.0))


def test_normalise_leaves_near_unit_alone():
    q = Versor(1.00001, 0.0, 0.0, 0.0)
    assert normalise_versor(q) is q


def test_scalar_division_and_multiplication_are_inverse():
    q = Versor(1.0, 2.0, 3.0, 4.0)
    assert tuple((q * 3.0) / 3.0) == pytest.approx(tuple(q))


def test_negation():
    q = Versor(1.0, -2.0, 3.0, -4.0)
    assert tuple(-q) == (-1.0, 2.0, -3.0, 4.0)


def test_multiply_by_identity():
    q = quat_from_axis_deg(40.0, 1.0, 0.0, 0.0)
    assert tuple(q * Versor()) == pytest.approx(tuple(q))
    assert tuple(Versor() * q) == pytest.approx(tuple(q))


def test_same_axis_rotations_compose():
    a = quat_from_axis_deg(30.0, 0.0, 0.0, 1.0)
    b = quat_from_axis_deg(60.0, 0.0, 0.0, 1.0)
    assert tuple(a * b) == pytest.approx(tuple(quat_from_axis_deg(90.0, 0.0, 0.0, 1.0)))


def test_addition_is_normalised():
    a = quat_from_axis_deg(10.0, 0.0, 1.0, 0.0)
    b = quat_from_axis_deg(50.0, 0.0, 1.0, 0.0)
    s = a + b
    assert dot_versor(s, s) == pytest.approx(1.0)
    assert tuple(s) == pytest.approx(tuple(quat_from_axis_deg(30.0, 0.0, 1.0, 0.0)))


def test_quat_to_mat4_matches_axis_rotation():
    m = quat_to_mat4(quat_from_axis_deg(35.0, 0.0, 0.0, 1.0))
    assert list(m) == pytest.approx(list(rotate_z_deg(identity_mat4(), 35.0)))
    m = quat_to_mat4(quat_from_axis_deg(-20.0, 1.0, 0.0, 0.0))
    assert list(m) == pytest.approx(list(rotate_x_deg(identity_mat4(), -20.0)))


def test_identity_versor_gives_identity_matrix():
    assert list(quat_to_mat4(Versor())) == list(identity_mat4())


def test_slerp_endpoints():
    q = quat_from_axis_deg(0.0, 0.0, 1.0, 0.0)
    r = quat_from_axis_deg(80.0, 0.0, 1.0, 0.0)
    assert tuple(slerp(q, r, 0.0)) == pytest.approx(tuple(q))
    assert tuple(slerp(q, r, 1.0)) == pytest.approx(tuple(r))


def test_slerp_midpoint_is_half_angle():
    q = quat_from_axis_deg(0.0, 0.0, 1.0, 0.0)
    r = quat_from_axis_deg(80.0, 0.0, 1.0, 0.0)
    mid = slerp(q, r, 0.5)
    assert tuple(mid) == pytest.approx(tuple(quat_from_axis_deg(40.0, 0.0, 1.0, 0.0)))
    assert dot_versor(mid, mid) == pytest.approx(1.0)


def test_slerp_takes_short_way():
    q = quat_from_axis_deg(0.0, 0.0, 1.0, 0.0)
    r = quat_from_axis_deg(80.0, 0.0, 1.0, 0.0)
    direct = slerp(q, r, 0.3)
    flipped = slerp(-q, r, 0.3)
    assert tuple(flipped) == pytest.approx(tuple(direct))


def test_slerp_of_equal_versors_returns_it():
    q = quat_from_axis_deg(0.0, 1.0, 0.0, 0.0)
    assert slerp(q, q, 0.7) == q


def test_format_versor():
    assert format_versor(Versor()) == "[1.00 ,0.00, 0.00, 0.00]"