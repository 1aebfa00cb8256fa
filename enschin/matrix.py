"""4x4 matrix helpers working on flat, column-major sequences of 16 floats.

Every function returns a new list and leaves its arguments untouched.
"""

from __future__ import annotations

import math
from typing import List, Sequence

from .vectors import Vec2f, Vec3f

__all__ = [
    "length",
    "multiply",
    "translate",
    "rotate",
    "set_rotate",
    "scale",
    "frustum",
    "ortho",
    "set_look_at",
    "format_matrix",
    "format_flat",
]

Matrix = List[float]

_X_AXIS = Vec3f(1.0, 0.0, 0.0)
_Y_AXIS = Vec3f(0.0, 1.0, 0.0)
_Z_AXIS = Vec3f(0.0, 0.0, 1.0)


def _checked(m: Sequence[float]) -> Matrix:
    values = [float(v) for v in m]
    if len(values) != 16:
        raise ValueError(f"a 4x4 matrix needs 16 values, got {len(values)}")
    return values


def length(v: Vec3f) -> float:
    """Euclidean length of a three component vector."""
    return math.sqrt(v.x * v.x + v.y * v.y + v.z * v.z)


def multiply(lhs: Sequence[float], rhs: Sequence[float]) -> Matrix:
    """Multiply two matrices, row block of ``lhs`` by columns of ``rhs``."""
    a = _checked(lhs)
    b = _checked(rhs)
    return [
        sum(a[row + k] * b[4 * k + col] for k in range(4))
        for row in (0, 4, 8, 12)
        for col in range(4)
    ]


def translate(m: Sequence[float], pos: Vec2f | Vec3f, z: float = 0.0) -> Matrix:
    """Translate the matrix by ``pos``; ``z`` is used when ``pos`` is two-dimensional."""
    result = _checked(m)
    if isinstance(pos, Vec3f):
        x, y, dz = pos.x, pos.y, pos.z
    else:
        x, y, dz = pos.x, pos.y, z
    result[12:16] = [
        result[12 + i] + result[i] * x + result[4 + i] * y + result[8 + i] * dz
        for i in range(4)
    ]
    return result


def set_rotate(angle: float, axis: Vec3f) -> Matrix:
    """Build a rotation matrix for ``angle`` radians around ``axis``."""
    rm = [0.0] * 16
    rm[15] = 1.0
    a = -angle
    s = math.sin(a)
    c = math.cos(a)
    if axis == _X_AXIS:
        rm[5] = c
        rm[10] = c
        rm[6] = s
        rm[9] = -s
        rm[0] = 1.0
    elif axis == _Y_AXIS:
        rm[0] = c
        rm[10] = c
        rm[8] = s
        rm[2] = -s
        rm[5] = 1.0
    elif axis == _Z_AXIS:
        rm[0] = c
        rm[5] = c
        rm[1] = s
        rm[4] = -s
        rm[10] = 1.0
    else:
        size = length(axis)
        if size != 1.0:
            axis = axis * (1.0 / size)
        nc = 1.0 - c
        xy = axis.x * axis.y
        yz = axis.y * axis.z
        zx = axis.z * axis.x
        xs = axis.x * s
        ys = axis.y * s
        zs = axis.z * s
        rm[0] = axis.x * axis.x * nc + c
        rm[4] = xy * nc - zs
        rm[8] = zx * nc + ys
        rm[1] = xy * nc + zs
        rm[5] = axis.y * axis.y * nc + c
        rm[9] = yz * nc - xs
        rm[2] = zx * nc - ys
        rm[6] = yz * nc + xs
        rm[10] = axis.z * axis.z * nc + c
    return rm


def rotate(
    m: Sequence[float], angle: float = 0.0, axis: Vec3f = Vec3f(0.0, 0.0, -1.0)
) -> Matrix:
    """Rotate the matrix by ``angle`` radians around ``axis``."""
    return multiply(set_rotate(angle, axis), m)


def scale(m: Sequence[float], scaling: Vec3f) -> Matrix:
    """Scale the first three columns of the matrix."""
    values = _checked(m)
    return (
        [v * scaling.x for v in values[0:4]]
        + [v * scaling.y for v in values[4:8]]
        + [v * scaling.z for v in values[8:12]]
        + values[12:16]
    )


def frustum(
    left: float, right: float, bottom: float, top: float, near: float, far: float
) -> Matrix:
    """Perspective projection matrix for the given clipping planes."""
    r_width = 1.0 / (right - left)
    r_height = 1.0 / (top - bottom)
    r_depth = 1.0 / (near - far)
    m = [0.0] * 16
    m[0] = 2.0 * (near * r_width)
    m[5] = 2.0 * (near * r_height)
    m[8] = (right + left) * r_width
    m[9] = (top + bottom) * r_height
    m[10] = (far + near) * r_depth
    m[14] = 2.0 * (far * near * r_depth)
    m[11] = -1.0
    return m


def ortho(
    left: float, right: float, bottom: float, top: float, near: float, far: float
) -> Matrix:
    """Orthographic projection matrix for the given clipping planes."""
    r_width = 1.0 / (right - left)
    r_height = 1.0 / (top - bottom)
    r_depth = 1.0 / (far - near)
    m = [0.0] * 16
    m[0] = 2.0 * r_width
    m[5] = 2.0 * r_height
    m[10] = -2.0 * r_depth
    m[12] = -(right + left) * r_width
    m[13] = -(top + bottom) * r_height
    m[14] = -(far + near) * r_depth
    m[15] = 1.0
    return m


def set_look_at(eye: Vec3f, center: Vec3f, up: Vec3f) -> Matrix:
    """View matrix looking from ``eye`` toward ``center`` with ``up`` as up."""
    f = center - eye
    f = f * (1.0 / length(f))
    s = Vec3f(
        f.y * up.z - f.z * up.y,
        f.z * up.x - f.x * up.z,
        f.x * up.y - f.y * up.x,
    )
    s = s * (1.0 / length(s))
    u = Vec3f(
        s.y * f.z - s.z * f.y,
        s.z * f.x - s.x * f.z,
        s.x * f.y - s.y * f.x,
    )
    rm = [
        s.x, u.x, -f.x, 0.0,
        s.y, u.y, -f.y, 0.0,
        s.z, u.z, -f.z, 0.0,
        0.0, 0.0, 0.0, 1.0,
    ]
    return translate(rm, -eye)


def _fmt(value: float) -> str:
    return f"{value:g}"


def format_matrix(m: Sequence[float]) -> str:
    """Render the matrix as four tab separated rows under a header."""
    values = _checked(m)
    rows = (
        "".join(_fmt(v) + "\t" for v in values[start:start + 4]) + "\n"
        for start in (0, 4, 8, 12)
    )
    return "Matrix: \n" + "".join(rows)


def format_flat(m: Sequence[float]) -> str:
    """Render all sixteen values on a single line under a header."""
    values = _checked(m)
    return "Matrix as Wurst: \n" + "".join(" " + _fmt(v) for v in values) + "\n"