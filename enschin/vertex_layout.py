"""Description of how vertex attributes are laid out in a vertex buffer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import List, Tuple

__all__ = ["ElementType", "VertexBufferElement", "VertexBufferLayout"]

# Every component is counted with the size of a 32-bit type, whatever its kind.
_COMPONENT_BYTES = 4


class ElementType(IntEnum):
    """Attribute component types, valued as their OpenGL enumerants."""

    UNSIGNED_BYTE = 0x1401
    UNSIGNED_INT = 0x1405
    FLOAT = 0x1406


@dataclass(frozen=True)
class VertexBufferElement:
    """One attribute: its component type, component count and normalisation."""

    type: ElementType
    count: int
    normalized: bool


class VertexBufferLayout:
    """An ordered list of attributes and the resulting stride in bytes."""

    def __init__(self) -> None:
        self._elements: List[VertexBufferElement] = []
        self.stride = 0

    @property
    def elements(self) -> Tuple[VertexBufferElement, ...]:
        return tuple(self._elements)

    def _push(self, kind: ElementType, count: int, normalized: bool) -> None:
        if count < 0:
            raise ValueError(f"attribute component count must not be negative, got {count}")
        self._elements.append(VertexBufferElement(kind, count, normalized))
        self.stride += count * _COMPONENT_BYTES

    def add_float(self, count: int) -> None:
        """Append an attribute of ``count`` floats."""
        self._push(ElementType.FLOAT, count, False)

    def add_unsigned_int(self, count: int) -> None:
        """Append an attribute of ``count`` unsigned integers."""
        self._push(ElementType.UNSIGNED_INT, count, False)

    def add_unsigned_byte(self, count: int) -> None:
        """Append a normalised attribute of ``count`` unsigned bytes."""
        self._push(ElementType.UNSIGNED_BYTE, count, True)