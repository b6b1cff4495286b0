"""Column-major 3x3 and 4x4 matrices and the affine and camera helpers."""

from __future__ import annotations

import math
import warnings
from dataclasses import dataclass
from typing import Iterator, Sequence, Union

from tilesprite.vectors import ONE_DEG_IN_RAD, Vec3, Vec4, cross, normalise


def _checked(values: Sequence[float], size: int, name: str) -> tuple[float, ...]:
    result = tuple(float(x) for x in values)
    if len(result) != size:
        raise ValueError(f"{name} needs {size} components, got {len(result)}")
    return result


@dataclass(frozen=True, slots=True)
class Mat3:
    """A 3x3 matrix stored in column order (a d g / b e h / c f i)."""

    m: tuple[float, ...] = (0.0,) * 9

    def __post_init__(self) -> None:
        object.__setattr__(self, "m", _checked(self.m, 9, "Mat3"))

    def __getitem__(self, index: int) -> float:
        return self.m[index]

    def __iter__(self) -> Iterator[float]:
        return iter(self.m)


@dataclass(frozen=True, slots=True)
class Mat4:
    """A 4x4 matrix stored in column order; element (row, col) is ``m[col * 4 + row]``."""

    m: tuple[float, ...] = (0.0,) * 16

    def __post_init__(self) -> None:
        object.__setattr__(self, "m", _checked(self.m, 16, "Mat4"))

    def __mul__(self, rhs: Union[Mat4, Vec4]) -> Union[Mat4, Vec4]:
        if isinstance(rhs, Mat4):
            return Mat4(
                sum(self.m[row + i * 4] * rhs.m[i + col * 4] for i in range(4))
                for col in range(4)
                for row in range(4)
            )
        if isinstance(rhs, Vec4):
            components = tuple(rhs)
            return Vec4(
                *(
                    sum(self.m[row + i * 4] * components[i] for i in range(4))
                    for row in range(4)
                )
            )
        return NotImplemented

    def __getitem__(self, index: int) -> float:
        return self.m[index]

    def __iter__(self) -> Iterator[float]:
        return iter(self.m)


def format_mat(m: Union[Mat3, Mat4]) -> str:
    """Render a matrix row by row, each entry as ``[x.xx]``, after a blank line."""
    size = 3 if isinstance(m, Mat3) else 4
    rows = (
        "".join(f"[{m.m[col * size + row]:.2f}]" for col in range(size))
        for row in range(size)
    )
    return "\n" + "".join(f"{line}\n" for line in rows)


def zero_mat3() -> Mat3:
    """The 3x3 zero matrix."""
    return Mat3((0.0,) * 9)


def identity_mat3() -> Mat3:
    """The 3x3 identity matrix."""
    return Mat3(1.0 if col == row else 0.0 for col in range(3) for row in range(3))


def zero_mat4() -> Mat4:
    """The 4x4 zero matrix."""
    return Mat4((0.0,) * 16)


def identity_mat4() -> Mat4:
    """The 4x4 identity matrix."""
    return Mat4(1.0 if col == row else 0.0 for col in range(4) for row in range(4))


def _rows(mm: Mat4) -> list[list[float]]:
    return [[mm.m[col * 4 + row] for col in range(4)] for row in range(4)]


def _minor(rows: list[list[float]], skip_row: int, skip_col: int) -> list[list[float]]:
    return [
        [value for c, value in enumerate(row) if c != skip_col]
        for r, row in enumerate(rows)
        if r != skip_row
    ]


def _det(rows: list[list[float]]) -> float:
    if len(rows) == 1:
        return rows[0][0]
    return sum(
        (-1) ** c * value * _det(_minor(rows, 0, c)) for c, value in enumerate(rows[0])
    )


def determinant(mm: Mat4) -> float:
    """Determinant of a 4x4 matrix."""
    return _det(_rows(mm))


def inverse(mm: Mat4) -> Mat4:
    """Inverse of a 4x4 matrix; a singular matrix is returned unchanged with a warning."""
    det = determinant(mm)
    if det == 0.0:
        warnings.warn(
            "matrix has no determinant. can not invert", RuntimeWarning, stacklevel=2
        )
        return mm
    rows = _rows(mm)
    inv_det = 1.0 / det
    # inverse(r, c) = cofactor(c, r) / det, stored at index c * 4 + r
    return Mat4(
        inv_det * (-1) ** (row + col) * _det(_minor(rows, col, row))
        for col in range(4)
        for row in range(4)
    )


def transpose(mm: Mat4) -> Mat4:
    """The matrix flipped on its main diagonal."""
    return Mat4(mm.m[row * 4 + col] for col in range(4) for row in range(4))


def _replaced(base: Mat4, entries: dict[int, float]) -> Mat4:
    return Mat4(entries.get(index, value) for index, value in enumerate(base.m))


def translate(m: Mat4, v: Vec3) -> Mat4:
    """Apply a translation by ``v`` after ``m``."""
    m_t = _replaced(identity_mat4(), {12: v.x, 13: v.y, 14: v.z})
    return m_t * m


def rotate_x_deg(m: Mat4, deg: float) -> Mat4:
    """Apply a rotation about the x axis by ``deg`` degrees after ``m``."""
    rad = deg * ONE_DEG_IN_RAD
    c, s = math.cos(rad), math.sin(rad)
    m_r = _replaced(identity_mat4(), {5: c, 9: -s, 6: s, 10: c})
    return m_r * m


def rotate_y_deg(m: Mat4, deg: float) -> Mat4:
    """Apply a rotation about the y axis by ``deg`` degrees after ``m``."""
    rad = deg * ONE_DEG_IN_RAD
    c, s = math.cos(rad), math.sin(rad)
    m_r = _replaced(identity_mat4(), {0: c, 8: s, 2: -s, 10: c})
    return m_r * m


def rotate_z_deg(m: Mat4, deg: float) -> Mat4:
    """Apply a rotation about the z axis by ``deg`` degrees after ``m``."""
    rad = deg * ONE_DEG_IN_RAD
    c, s = math.cos(rad), math.sin(rad)
    m_r = _replaced(identity_mat4(), {0: c, 4: -s, 1: s, 5: c})
    return m_r * m


def scale(m: Mat4, v: Vec3) -> Mat4:
    """Apply a scale by ``v`` after ``m``."""
    a = _replaced(identity_mat4(), {0: v.x, 5: v.y, 10: v.z})
    return a * m


def look_at(cam_pos: Vec3, targ_pos: Vec3, up: Vec3) -> Mat4:
    """View matrix for a camera at ``cam_pos`` looking at ``targ_pos``."""
    p = translate(identity_mat4(), -cam_pos)
    f = normalise(targ_pos - cam_pos)
    r = normalise(cross(f, up))
    u = normalise(cross(r, f))
    ori = _replaced(
        identity_mat4(),
        {
            0: r.x, 4: r.y, 8: r.z,
            1: u.x, 5: u.y, 9: u.z,
            2: -f.x, 6: -f.y, 10: -f.z,
        },
    )
    return ori * p


def perspective(fovy: float, aspect: float, near: float, far: float) -> Mat4:
    """Perspective projection with a vertical field of view in degrees."""
    fov_rad = fovy * ONE_DEG_IN_RAD
    rng = math.tan(fov_rad / 2.0) * near
    sx = (2.0 * near) / (rng * aspect + rng * aspect)
    sy = near / rng
    sz = -(far + near) / (far - near)
    pz = -(2.0 * far * near) / (far - near)
    return _replaced(zero_mat4(), {0: sx, 5: sy, 10: sz, 14: pz, 11: -1.0})


def ortho(left: float, right: float, bottom: float, top: float) -> Mat4:
    """Two-dimensional orthographic projection onto the unit cube."""
    return _replaced(
        identity_mat4(),
        {
            0: 2.0 / (right - left),
            5: 2.0 / (top - bottom),
            10: -1.0,
            12: -(right + left) / (right - left),
            13: -(top + bottom) / (top - bottom),
        },
    )