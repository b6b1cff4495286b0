import math

import pytest

from tilesprite.vectors import (
    Vec2,
    Vec3,
    Vec4,
    cross,
    direction_to_heading,
    dot,
    format_vec,
    get_squared_dist,
    heading_to_direction,
    length,
    length2,
    normalise,
)


def test_vec3_from_vec2_keeps_components():
    v = Vec3.from_vec2(Vec2(1.5, -2.5), 7.0)
    assert tuple(v) == (1.5, -2.5, 7.0)


def test_vec3_from_vec4_drops_w():
    v = Vec3.from_vec4(Vec4(1.0, 2.0, 3.0, 4.0))
    assert v == Vec3(1.0, 2.0, 3.0)


def test_vec4_constructors_round_trip():
    base = Vec3(1.0, 2.0, 3.0)
    v4 = Vec4.from_vec3(base, 9.0)
    assert Vec3.from_vec4(v4) == base
    assert v4.w == 9.0
    v4b = Vec4.from_vec2(Vec2(1.0, 2.0), 3.0, 9.0)
    assert v4b == v4
    assert list(v4b) == [1.0, 2.0, 3.0, 9.0]


def test_add_then_sub_is_identity():
    a = Vec3(1.25, -3.5, 8.0)
    b = Vec3(0.5, 2.0, -4.0)
    assert (a + b) - b == a


def test_scalar_add_and_sub_are_inverse():
    a = Vec3(1.0, 2.0, 3.0)
    assert (a + 2.5) - 2.5 == a


def test_scalar_multiply_matches_repeated_addition():
    a = Vec3(1.5, -2.0, 4.0)
    assert a * 2 == a + a
    assert 2 * a == a * 2


def test_divide_undoes_multiply():
    a = Vec3(3.0, -6.0, 12.0)
    assert (a * 4.0) / 4.0 == a


def test_augmented_assignment_updates_value():
    a = Vec3(1.0, 1.0, 1.0)
    a += Vec3(1.0, 2.0, 3.0)
    assert a == Vec3(2.0, 3.0, 4.0)
    a -= Vec3(0.5, 0.5, 0.5)
    assert a == Vec3(1.5, 2.5, 3.5)
    a *= 2.0
    assert a == Vec3(3.0, 5.0, 7.0)


def test_negation():
    a = Vec3(1.0, -2.0, 3.0)
    assert a + (-a) == Vec3(0.0, 0.0, 0.0)


def test_unsupported_operand_raises():
    with pytest.raises(TypeError):
        Vec3(1.0, 2.0, 3.0) * Vec3(1.0, 2.0, 3.0)


def test_format_vec():
    assert format_vec(Vec2(1.0, 2.0)) == "[1.00, 2.00]"
    assert format_vec(Vec4(1.0, 2.0, 3.0, 4.0)).count(",") == 3


def test_length_squared_matches_dot():
    v = Vec3(2.0, -3.0, 6.0)
    assert length2(v) == dot(v, v)
    assert length(v) == pytest.approx(math.sqrt(dot(v, v)))


def test_normalise_gives_unit_length():
    v = normalise(Vec3(3.0, -4.0, 12.0))
    assert length(v) == pytest.approx(1.0)


def test_normalise_zero_vector():
    assert normalise(Vec3(0.0, 0.0, 0.0)) == Vec3(0.0, 0.0, 0.0)


def test_cross_of_axes():
    assert cross(Vec3(1.0, 0.0, 0.0), Vec3(0.0, 1.0, 0.0)) == Vec3(0.0, 0.0, 1.0)


def test_cross_is_orthogonal_and_anticommutative():
    a = Vec3(1.0, 2.0, 3.0)
    b = Vec3(-4.0, 0.5, 2.0)
    c = cross(a, b)
    assert dot(c, a) == pytest.approx(0.0)
    assert dot(c, b) == pytest.approx(0.0)
    assert cross(b, a) == -c


def test_squared_distance_symmetric_and_consistent():
    a = Vec3(1.0, 2.0, 3.0)
    b = Vec3(4.0, -1.0, 0.5)
    assert get_squared_dist(a, b) == pytest.approx(get_squared_dist(b, a))
    assert get_squared_dist(a, b) == pytest.approx(length2(b - a))
    assert get_squared_dist(a, a) == 0.0


def test_heading_zero_points_down_negative_z():
    assert tuple(heading_to_direction(0.0)) == pytest.approx((0.0, 0.0, -1.0))


@pytest.mark.parametrize("degrees", [-170.0, -90.0, -30.0, 0.0, 45.0, 90.0, 135.0])
def test_heading_round_trip(degrees):
    d = heading_to_direction(degrees)
    assert length(d) == pytest.approx(1.0)
    assert direction_to_heading(d) == pytest.approx(degrees)


def test_heading_ignores_direction_magnitude():
    d = heading_to_direction(60.0)
    assert direction_to_heading(d * 5.0) == pytest.approx(direction_to_heading(d))