"""Vector helpers on plain sequences and point-in-triangle tests in 2D.

Vectors are any indexable sequences of floats. Triangles are flat sequences
``(p1x, p1y, p2x, p2y, p3x, p3y)`` and points are ``(x, y)``.
"""

from __future__ import annotations

import math
from typing import Sequence

Vector = Sequence[float]


def length3(v: Vector) -> float:
    """Length of the first three components of ``v``."""
    return math.sqrt(v[0] * v[0] + v[1] * v[1] + v[2] * v[2])


def length2d(v: Vector) -> float:
    """Length of the first two components of ``v``."""
    return math.sqrt(v[0] * v[0] + v[1] * v[1])


def normalise3(v: Vector) -> tuple[float, float, float]:
    """Unit 3D vector in the direction of ``v``; a zero vector stays zero."""
    magnitude = length3(v)
    if magnitude == 0.0:
        return (0.0, 0.0, 0.0)
    return (v[0] / magnitude, v[1] / magnitude, v[2] / magnitude)


def normalise2d(v: Vector) -> tuple[float, float]:
    """Unit 2D vector in the direction of ``v``; a zero vector stays zero."""
    magnitude = length2d(v)
    if magnitude == 0.0:
        return (0.0, 0.0)
    return (v[0] / magnitude, v[1] / magnitude)


def dot2d(a: Vector, b: Vector) -> float:
    """Dot product of the first two components."""
    return a[0] * b[0] + a[1] * b[1]


def dot3(a: Vector, b: Vector) -> float:
    """Dot product of the first three components."""
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]


def cross3(a: Vector, b: Vector) -> tuple[float, float, float]:
    """Cross product of two 3D vectors."""
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def triangle_area_2d(triangle: Vector) -> float:
    """Unsigned area of a triangle given as six flat coordinates."""
    x1, y1, x2, y2, x3, y3 = triangle[:6]
    return abs(((x2 - x1) * (y3 - y1) - (x3 - x1) * (y2 - y1)) / 2)


def triangle_collide_point_2d(triangle: Vector, point: Vector) -> bool:
    """True when the three sub-triangles around ``point`` add up to the whole.

    The comparison is exact, so points on the boundary count as inside while
    rounding error may reject points that are inside.
    """
    x1, y1, x2, y2, x3, y3 = triangle[:6]
    px, py = point[0], point[1]
    whole = triangle_area_2d(triangle)
    parts = (
        triangle_area_2d((x1, y1, x2, y2, px, py))
        + triangle_area_2d((x1, y1, px, py, x3, y3))
        + triangle_area_2d((px, py, x2, y2, x3, y3))
    )
    return whole == parts


def _angle_deg(a: Vector, b: Vector) -> float:
    cosine = max(-1.0, min(1.0, dot2d(a, b)))
    return math.acos(cosine) / math.pi * 180.0


def collide_by_dot_product(triangle: Vector, point: Vector) -> bool:
    """True when ``point`` lies strictly within the angle at the first vertex.

    Only the angle at the first vertex is checked, so points beyond the
    opposite edge but inside that angle are also accepted.
    """
    x1, y1, x2, y2, x3, y3 = triangle[:6]
    ab = normalise2d((x2 - x1, y2 - y1))
    ac = normalise2d((x3 - x1, y3 - y1))
    ap = normalise2d((point[0] - x1, point[1] - y1))
    a_bc = _angle_deg(ab, ac)
    a_pb = _angle_deg(ap, ab)
    a_cp = _angle_deg(ac, ap)
    return a_bc > a_cp and a_bc > a_pb