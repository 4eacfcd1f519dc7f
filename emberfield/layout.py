"""Vertex attribute layouts describing how vertex buffer data is laid out."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import List, Optional, Tuple

GL_NONE = 0
GL_BYTE = 0x1400
GL_UNSIGNED_BYTE = 0x1401
GL_UNSIGNED_INT = 0x1405
GL_FLOAT = 0x1406


class DataType(IntEnum):
    """Component types a vertex attribute can have."""

    FLOAT = 1
    INT = 2
    BYTE = 3
    UNSIGNED_INT = 4
    UNSIGNED_BYTE = 5


_SIZES = {DataType.FLOAT: 4, DataType.BYTE: 1, DataType.UNSIGNED_INT: 4}
_GL_TYPES = {
    DataType.FLOAT: GL_FLOAT,
    DataType.BYTE: GL_BYTE,
    DataType.UNSIGNED_BYTE: GL_UNSIGNED_BYTE,
    DataType.UNSIGNED_INT: GL_UNSIGNED_INT,
}


def size_of(data_type: DataType) -> int:
    """Size in bytes of one component, or 0 for types without a known size."""
    return _SIZES.get(DataType(data_type), 0)


def gl_type(data_type: DataType) -> int:
    """The GL enum for a component type, or ``GL_NONE``."""
    return _GL_TYPES.get(DataType(data_type), GL_NONE)


@dataclass(frozen=True)
class BufferElement:
    """One vertex attribute: component count, GL type, normalisation and offset."""

    count: int
    type: int
    normalized: bool
    offset: int


class BufferLayout:
    """An ordered list of attributes with the stride of interleaved data."""

    def __init__(self) -> None:
        self.stride = 0
        self._elements: List[BufferElement] = []
        self._offset_count = 0

    @property
    def elements(self) -> Tuple[BufferElement, ...]:
        return tuple(self._elements)

    def push(
        self,
        count: int,
        data_type: DataType,
        normalized: bool,
        offset: Optional[int] = None,
    ) -> None:
        """Append an attribute.

        Without ``offset`` the attribute is interleaved: it follows the previous
        ones and widens the stride. With ``offset`` the data is not interleaved
        and the stride is left alone.
        """
        self._offset_count += count
        if offset is None:
            size = size_of(data_type)
            self.stride += count * size
            offset = (self._offset_count - count) * size
        self._elements.append(BufferElement(count, gl_type(data_type), normalized, offset))

    def push_element(self, element: BufferElement) -> None:
        """Append a ready-made attribute without touching the stride."""
        self._elements.append(element)

    def flush(self) -> None:
        """Remove every attribute and reset the stride."""
        self.stride = 0
        self._offset_count = 0
        self._elements.clear()