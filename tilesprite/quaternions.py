"""Unit quaternions (versors) for rotations and interpolation."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Union

from tilesprite.matrices import Mat4
from tilesprite.vectors import ONE_DEG_IN_RAD

_UNIT_THRESHOLD = 0.0001


@dataclass(frozen=True, slots=True)
class Versor:
    """A quaternion ``w + xi + yj + zk``; the default is the identity rotation."""

    w: float = 1.0
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __truediv__(self, rhs: float) -> Versor:
        if isinstance(rhs, (int, float)):
            return Versor(self.w / rhs, self.x / rhs, self.y / rhs, self.z / rhs)
        return NotImplemented

    def __mul__(self, rhs: Union[Versor, float]) -> Versor:
        if isinstance(rhs, Versor):
            q0, q1, q2, q3 = self
            r0, r1, r2, r3 = rhs
            product = Versor(
                r0 * q0 - r1 * q1 - r2 * q2 - r3 * q3,
                r0 * q1 + r1 * q0 - r2 * q3 + r3 * q2,
                r0 * q2 + r1 * q3 + r2 * q0 - r3 * q1,
                r0 * q3 - r1 * q2 + r2 * q1 + r3 * q0,
            )
            return normalise_versor(product)
        if isinstance(rhs, (int, float)):
            return Versor(self.w * rhs, self.x * rhs, self.y * rhs, self.z * rhs)
        return NotImplemented

    def __add__(self, rhs: Versor) -> Versor:
        if isinstance(rhs, Versor):
            return normalise_versor(
                Versor(
                    self.w + rhs.w, self.x + rhs.x, self.y + rhs.y, self.z + rhs.z
                )
            )
        return NotImplemented

    def __neg__(self) -> Versor:
        return Versor(-self.w, -self.x, -self.y, -self.z)

    def __iter__(self) -> Iterator[float]:
        yield self.w
        yield self.x
        yield self.y
        yield self.z


def format_versor(q: Versor) -> str:
    """Render a versor's four components with two decimals."""
    return f"[{q.w:.2f} ,{q.x:.2f}, {q.y:.2f}, {q.z:.2f}]"


def quat_from_axis_rad(radians: float, x: float, y: float, z: float) -> Versor:
    """Rotation by ``radians`` about the axis ``(x, y, z)``."""
    half = radians / 2.0
    s = math.sin(half)
    return Versor(math.cos(half), s * x, s * y, s * z)


def quat_from_axis_deg(degrees: float, x: float, y: float, z: float) -> Versor:
    """Rotation by ``degrees`` about the axis ``(x, y, z)``."""
    return quat_from_axis_rad(ONE_DEG_IN_RAD * degrees, x, y, z)


def quat_to_mat4(q: Versor) -> Mat4:
    """Rotation matrix equivalent to ``q``."""
    w, x, y, z = q
    return Mat4(
        (
            1.0 - 2.0 * y * y - 2.0 * z * z,
            2.0 * x * y + 2.0 * w * z,
            2.0 * x * z - 2.0 * w * y,
            0.0,
            2.0 * x * y - 2.0 * w * z,
            1.0 - 2.0 * x * x - 2.0 * z * z,
            2.0 * y * z + 2.0 * w * x,
            0.0,
            2.0 * x * z + 2.0 * w * y,
            2.0 * y * z - 2.0 * w * x,
            1.0 - 2.0 * x * x - 2.0 * y * y,
            0.0,
            0.0,
            0.0,
            0.0,
            1.0,
        )
    )


def normalise_versor(q: Versor) -> Versor:
    """Scale ``q`` to unit magnitude unless it is already close to unit."""
    total = dot_versor(q, q)
    if abs(1.0 - total) < _UNIT_THRESHOLD:
        return q
    return q / math.sqrt(total)


def dot_versor(q: Versor, r: Versor) -> float:
    """Four-component dot product."""
    return sum(a * b for a, b in zip(q, r))


def slerp(q: Versor, r: Versor, t: float) -> Versor:
    """Spherical linear interpolation from ``q`` (t=0) to ``r`` (t=1) the short way."""
    cos_half_theta = dot_versor(q, r)
    if cos_half_theta < 0.0:
        q = -q
        cos_half_theta = dot_versor(q, r)
    if abs(cos_half_theta) >= 1.0:
        return q
    sin_half_theta = math.sqrt(1.0 - cos_half_theta * cos_half_theta)
    if abs(sin_half_theta) < 0.001:
        return Versor(*((1.0 - t) * a + t * b for a, b in zip(q, r)))
    half_theta = math.acos(cos_half_theta)
    a = math.sin((1.0 - t) * half_theta) / sin_half_theta
    b = math.sin(t * half_theta) / sin_half_theta
    return Versor(*(qa * a + rb * b for qa, rb in zip(q, r)))