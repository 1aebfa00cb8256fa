"""Small two- and three-component vectors with component-wise arithmetic."""

from __future__ import annotations

from dataclasses import dataclass, fields
from numbers import Real
from typing import Any, Iterator

__all__ = ["Vec2f", "Vec2i", "Vec3f", "Vec3i", "NULL_VEC2"]


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


class _Vector:
    """Shared component handling for the vector dataclasses."""

    __slots__ = ()
    _component_type: type = float

    def __post_init__(self) -> None:
        for f in fields(self):
            object.__setattr__(self, f.name, self._component_type(getattr(self, f.name)))

    def __iter__(self) -> Iterator[Any]:
        return (getattr(self, f.name) for f in fields(self))


def _is_scalar(vector: _Vector, value: object) -> bool:
    if vector._component_type is int:
        return isinstance(value, int)
    return isinstance(value, Real)


def _divide(vector: _Vector, a, b):
    if vector._component_type is int:
        return _trunc_div(a, b)
    return a / b


def _format(value) -> str:
    return f"{value:g}" if isinstance(value, float) else str(value)


def _add(a: _Vector, b: object):
    if type(b) is not type(a):
        return NotImplemented
    return type(a)(*(x + y for x, y in zip(a, b)))


def _sub(a: _Vector, b: object):
    if type(b) is not type(a):
        return NotImplemented
    return type(a)(*(x - y for x, y in zip(a, b)))


def _mul(a: _Vector, b: object):
    if type(b) is type(a):
        return type(a)(*(x * y for x, y in zip(a, b)))
    if _is_scalar(a, b):
        return type(a)(*(x * b for x in a))
    return NotImplemented


def _truediv(a: _Vector, b: object):
    if type(b) is type(a):
        return type(a)(*(_divide(a, x, y) for x, y in zip(a, b)))
    if _is_scalar(a, b):
        return type(a)(*(_divide(a, x, b) for x in a))
    return NotImplemented


def _neg(a: _Vector):
    return type(a)(*(-x for x in a))


def _str(a: _Vector) -> str:
    return "{" + ", ".join(_format(x) for x in a) + "}"


@dataclass(frozen=True, slots=True)
class Vec2f(_Vector):
    """Two floating point components."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other):
        return _add(self, other)

    def __sub__(self, other):
        return _sub(self, other)

    def __mul__(self, other):
        return _mul(self, other)

    def __truediv__(self, other):
        return _truediv(self, other)

    def __neg__(self):
        return _neg(self)

    def __str__(self) -> str:
        return _str(self)


@dataclass(frozen=True, slots=True)
class Vec2i(_Vector):
    """Two integer components; division truncates toward zero."""

    _component_type = int

    x: int = 0
    y: int = 0

    def __add__(self, other):
        return _add(self, other)

    def __sub__(self, other):
        return _sub(self, other)

    def __mul__(self, other):
        return _mul(self, other)

    def __truediv__(self, other):
        return _truediv(self, other)

    def __neg__(self):
        return _neg(self)

    def __str__(self) -> str:
        return _str(self)


@dataclass(frozen=True, slots=True)
class Vec3f(_Vector):
    """Three floating point components."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other):
        return _add(self, other)

    def __sub__(self, other):
        return _sub(self, other)

    def __mul__(self, other):
        return _mul(self, other)

    def __truediv__(self, other):
        return _truediv(self, other)

    def __neg__(self):
        return _neg(self)

    def __str__(self) -> str:
        return _str(self)


@dataclass(frozen=True, slots=True)
class Vec3i(_Vector):
    """Three integer components; division truncates toward zero."""

    _component_type = int

    x: int = 0
    y: int = 0
    z: int = 0

    def __add__(self, other):
        return _add(self, other)

    def __sub__(self, other):
        return _sub(self, other)

    def __mul__(self, other):
        return _mul(self, other)

    def __truediv__(self, other):
        return _truediv(self, other)

    def __neg__(self):
        return _neg(self)

    def __str__(self) -> str:
        return _str(self)


NULL_VEC2 = Vec2f(0.0, 0.0)