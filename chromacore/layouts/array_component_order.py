"""
Array Component Orders
======================

Layouts of 8-bit color channels inside a flat buffer. Each layout stores one
color in ``component_count`` consecutive elements and names, per logical
channel, the offset inside that group or ``None`` when the channel is absent.

Reads of an absent channel return a default (0 for R, G and B, 255 for A);
writes to an absent channel are skipped.
"""

from __future__ import annotations
from enum import Enum
from typing import List, Optional
import numpy as np
from ..constants import ALPHA_DEFAULT, BYTE_MASK, COLOR_DEFAULT
from ..types.color_types import Buffer
from ..utils.validators import require_index, require_instance, require_multiple, require_not_none


class ArrayComponentOrder(Enum):
    # (offset_r, offset_g, offset_b, offset_a)
    ARGB = (1, 2, 3, 0)
    BGR = (2, 1, 0, None)
    BGRA = (2, 1, 0, 3)
    RGB = (0, 1, 2, None)
    RGBA = (0, 1, 2, 3)

    def __init__(self, offset_r: int, offset_g: int, offset_b: int, offset_a: Optional[int]) -> None:
        self.offset_r = offset_r
        self.offset_g = offset_g
        self.offset_b = offset_b
        self.offset_a = offset_a

    @property
    def offsets(self) -> tuple:
        return (self.offset_r, self.offset_g, self.offset_b, self.offset_a)

    @property
    def component_count(self) -> int:
        return sum(offset is not None for offset in self.offsets)

    @property
    def has_offset_r(self) -> bool:
        return self.offset_r is not None

    @property
    def has_offset_g(self) -> bool:
        return self.offset_g is not None

    @property
    def has_offset_b(self) -> bool:
        return self.offset_b is not None

    @property
    def has_offset_a(self) -> bool:
        return self.offset_a is not None

    # ------------------ READ / WRITE ------------------
    @staticmethod
    def _read(buffer: Buffer, offset: int, channel_offset: Optional[int], default: int) -> int:
        require_not_none(buffer, "buffer")
        if channel_offset is None:
            return default
        index = require_index(buffer, offset + channel_offset)
        return int(buffer[index]) & BYTE_MASK

    def read_r(self, buffer: Buffer, offset: int = 0) -> int:
        return self._read(buffer, offset, self.offset_r, COLOR_DEFAULT)

    def read_g(self, buffer: Buffer, offset: int = 0) -> int:
        return self._read(buffer, offset, self.offset_g, COLOR_DEFAULT)

    def read_b(self, buffer: Buffer, offset: int = 0) -> int:
        return self._read(buffer, offset, self.offset_b, COLOR_DEFAULT)

    def read_a(self, buffer: Buffer, offset: int = 0) -> int:
        return self._read(buffer, offset, self.offset_a, ALPHA_DEFAULT)

    def read(self, buffer: Buffer, offset: int = 0) -> tuple[int, int, int, int]:
        """Read one color as an ``(r, g, b, a)`` tuple of 8-bit values."""
        return (
            self.read_r(buffer, offset),
            self.read_g(buffer, offset),
            self.read_b(buffer, offset),
            self.read_a(buffer, offset),
        )

    def write(self, buffer: Buffer, offset: int, r: int, g: int, b: int, a: int = ALPHA_DEFAULT) -> None:
        """
        Write one color into a mutable buffer at ``offset``.

        Only the channels this layout has are written. Values are masked to
        8 bits before storing. Signed numpy buffers receive the wrapped
        two's-complement value, so 255 is stored as -1 in an int8 array.

        Raises:
            IndexError: if any written position lies outside the buffer.
        """
        require_not_none(buffer, "buffer")
        for channel_offset, value in zip(self.offsets, (r, g, b, a)):
            if channel_offset is not None:
                index = require_index(buffer, offset + channel_offset)
                _store(buffer, index, int(value) & BYTE_MASK)

    # ------------------ CONVERSION ------------------
    @staticmethod
    def convert(order_a: ArrayComponentOrder, order_b: ArrayComponentOrder, buffer: Buffer) -> Buffer:
        """
        Convert a whole buffer from layout ``order_a`` to layout ``order_b``.

        Every element is read with all of ``order_a``'s channels (defaults
        for the ones it lacks) and written with all of ``order_b``'s
        channels. The result has the same kind as the input: ``bytes``,
        ``bytearray``, ``numpy.ndarray`` (same dtype) or ``list``.

        Raises:
            TypeError: if any argument is None.
            ValueError: if ``len(buffer)`` is not a multiple of
                ``order_a.component_count``.
        """
        require_instance(order_a, ArrayComponentOrder, "order_a")
        require_instance(order_b, ArrayComponentOrder, "order_b")
        require_not_none(buffer, "buffer")

        count_a = order_a.component_count
        count_b = order_b.component_count
        resolution = require_multiple(len(buffer), count_a, "len(buffer)")

        converted: List[int] = [0] * (resolution * count_b)
        for i in range(resolution):
            r, g, b, a = order_a.read(buffer, i * count_a)
            order_b.write(converted, i * count_b, r, g, b, a)

        return _like(buffer, converted)


def _store(buffer: Buffer, index: int, value: int) -> None:
    if isinstance(buffer, np.ndarray):
        # signed byte arrays take the wrapped value, like a narrowing cast
        buffer[index] = np.array(value, dtype=np.int64).astype(buffer.dtype)
    else:
        buffer[index] = value


def _like(template: Buffer, values: List[int]) -> Buffer:
    """Return ``values`` in the container kind of ``template``."""
    if isinstance(template, bytes):
        return bytes(values)
    if isinstance(template, bytearray):
        return bytearray(values)
    if isinstance(template, np.ndarray):
        # astype wraps like a narrowing cast for signed byte arrays
        return np.array(values, dtype=np.int64).astype(template.dtype)
    return values
