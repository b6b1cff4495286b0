"""Small fixed-size vectors and the vector functions used by the renderer."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Union

ONE_DEG_IN_RAD = (2.0 * math.pi) / 360.0
ONE_RAD_IN_DEG = 360.0 / (2.0 * math.pi)


@dataclass(frozen=True, slots=True)
class Vec2:
    """A two-component vector."""

    x: float = 0.0
    y: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y


@dataclass(frozen=True, slots=True)
class Vec3:
    """A three-component vector supporting vector and scalar arithmetic."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def from_vec2(cls, vv: Vec2, z: float) -> Vec3:
        """Build from a 2D vector and a z component."""
        return cls(vv.x, vv.y, z)

    @classmethod
    def from_vec4(cls, vv: Vec4) -> Vec3:
        """Build by dropping the w component of a 4D vector."""
        return cls(vv.x, vv.y, vv.z)

    def __add__(self, rhs: Union[Vec3, float]) -> Vec3:
        if isinstance(rhs, Vec3):
            return Vec3(self.x + rhs.x, self.y + rhs.y, self.z + rhs.z)
        if isinstance(rhs, (int, float)):
            return Vec3(self.x + rhs, self.y + rhs, self.z + rhs)
        return NotImplemented

    def __sub__(self, rhs: Union[Vec3, float]) -> Vec3:
        if isinstance(rhs, Vec3):
            return Vec3(self.x - rhs.x, self.y - rhs.y, self.z - rhs.z)
        if isinstance(rhs, (int, float)):
            return Vec3(self.x - rhs, self.y - rhs, self.z - rhs)
        return NotImplemented

    def __mul__(self, rhs: float) -> Vec3:
        if isinstance(rhs, (int, float)):
            return Vec3(self.x * rhs, self.y * rhs, self.z * rhs)
        return NotImplemented

    __rmul__ = __mul__

    def __truediv__(self, rhs: float) -> Vec3:
        if isinstance(rhs, (int, float)):
            return Vec3(self.x / rhs, self.y / rhs, self.z / rhs)
        return NotImplemented

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z


@dataclass(frozen=True, slots=True)
class Vec4:
    """A four-component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

    @classmethod
    def from_vec2(cls, vv: Vec2, z: float, w: float) -> Vec4:
        """Build from a 2D vector plus z and w components."""
        return cls(vv.x, vv.y, z, w)

    @classmethod
    def from_vec3(cls, vv: Vec3, w: float) -> Vec4:
        """Build from a 3D vector plus a w component."""
        return cls(vv.x, vv.y, vv.z, w)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z
        yield self.w


def format_vec(v: Union[Vec2, Vec3, Vec4]) -> str:
    """Render a vector as ``[a, b, ...]`` with two decimals per component."""
    return "[" + ", ".join(f"{c:.2f}" for c in v) + "]"


def length(v: Vec3) -> float:
    """Euclidean length of a 3D vector."""
    return math.sqrt(length2(v))


def length2(v: Vec3) -> float:
    """Squared length of a 3D vector."""
    return v.x * v.x + v.y * v.y + v.z * v.z


def normalise(v: Vec3) -> Vec3:
    """Unit vector in the direction of ``v``; the zero vector stays zero."""
    magnitude = length(v)
    if magnitude == 0.0:
        return Vec3(0.0, 0.0, 0.0)
    return v / magnitude


def dot(a: Vec3, b: Vec3) -> float:
    """Dot product of two 3D vectors."""
    return a.x * b.x + a.y * b.y + a.z * b.z


def cross(a: Vec3, b: Vec3) -> Vec3:
    """Cross product of two 3D vectors."""
    return Vec3(
        a.y * b.z - a.z * b.y,
        a.z * b.x - a.x * b.z,
        a.x * b.y - a.y * b.x,
    )


def get_squared_dist(start: Vec3, end: Vec3) -> float:
    """Squared distance between two points."""
    return length2(end - start)


def direction_to_heading(d: Vec3) -> float:
    """Heading in degrees of an un-normalised direction in the xz plane."""
    return math.atan2(-d.x, -d.z) * ONE_RAD_IN_DEG


def heading_to_direction(degrees: float) -> Vec3:
    """Unit direction in the xz plane for a heading in degrees."""
    rad = degrees * ONE_DEG_IN_RAD
    return Vec3(-math.sin(rad), 0.0, -math.cos(rad))