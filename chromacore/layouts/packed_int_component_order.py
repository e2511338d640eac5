"""
Packed Integer Component Orders
===============================

Layouts of 8-bit channels inside one 32-bit word. Each layout names the bit
shift of every logical channel, or ``None`` when the channel is absent.

Words are handled as unsigned Python ints in ``[0, 2**32)``. Unpacking an
absent color channel yields 0, an absent alpha yields 255.
"""

from __future__ import annotations
from enum import Enum
from typing import List, Optional, Sequence
from ..constants import ALPHA_DEFAULT, BYTE_MASK, COLOR_DEFAULT, WORD_MASK
from ..types.color_types import Buffer
from ..utils.validators import require_instance, require_multiple, require_not_none
from .array_component_order import ArrayComponentOrder, _like


class PackedIntComponentOrder(Enum):
    # (shift_r, shift_g, shift_b, shift_a)
    ABGR = (0, 8, 16, 24)
    ARGB = (16, 8, 0, 24)
    BGR = (0, 8, 16, None)
    RGB = (16, 8, 0, None)

    def __init__(self, shift_r: int, shift_g: int, shift_b: int, shift_a: Optional[int]) -> None:
        self.shift_r = shift_r
        self.shift_g = shift_g
        self.shift_b = shift_b
        self.shift_a = shift_a

    @property
    def shifts(self) -> tuple:
        return (self.shift_r, self.shift_g, self.shift_b, self.shift_a)

    @property
    def component_count(self) -> int:
        return sum(shift is not None for shift in self.shifts)

    @property
    def has_shift_r(self) -> bool:
        return self.shift_r is not None

    @property
    def has_shift_g(self) -> bool:
        return self.shift_g is not None

    @property
    def has_shift_b(self) -> bool:
        return self.shift_b is not None

    @property
    def has_shift_a(self) -> bool:
        return self.shift_a is not None

    # ------------------ SINGLE WORD ------------------
    def pack(self, r: int, g: int, b: int, a: Optional[int] = None) -> int:
        """
        Pack 8-bit channels into one word.

        Each channel is masked to 8 bits. Alpha is stored only when it is
        given and this layout has an alpha shift.
        """
        word = 0
        for shift, value in zip(self.shifts, (r, g, b, a)):
            if shift is not None and value is not None:
                word |= (int(value) & BYTE_MASK) << shift
        return word & WORD_MASK

    @staticmethod
    def _unpack(word: int, shift: Optional[int], default: int) -> int:
        if shift is None:
            return default
        return (int(word) >> shift) & BYTE_MASK

    def unpack_r(self, word: int) -> int:
        return self._unpack(word, self.shift_r, COLOR_DEFAULT)

    def unpack_g(self, word: int) -> int:
        return self._unpack(word, self.shift_g, COLOR_DEFAULT)

    def unpack_b(self, word: int) -> int:
        return self._unpack(word, self.shift_b, COLOR_DEFAULT)

    def unpack_a(self, word: int) -> int:
        return self._unpack(word, self.shift_a, ALPHA_DEFAULT)

    def unpack(self, word: int) -> tuple[int, int, int, int]:
        """Unpack one word into an ``(r, g, b, a)`` tuple."""
        return self.unpack_r(word), self.unpack_g(word), self.unpack_b(word), self.unpack_a(word)

    # ------------------ SEQUENCES ------------------
    def pack_array(self, array_order: ArrayComponentOrder, buffer: Buffer) -> List[int]:
        """
        Pack every color of a flat buffer laid out as ``array_order``.

        Raises:
            TypeError: if ``array_order`` or ``buffer`` is None.
            ValueError: if ``len(buffer)`` is not a multiple of the array
                layout's component count.
        """
        require_instance(array_order, ArrayComponentOrder, "array_order")
        require_not_none(buffer, "buffer")

        count = array_order.component_count
        resolution = require_multiple(len(buffer), count, "len(buffer)")
        return [self.pack(*array_order.read(buffer, i * count)) for i in range(resolution)]

    def unpack_array(self, array_order: ArrayComponentOrder, words: Sequence[int]) -> List[int]:
        """Unpack words into a flat list laid out as ``array_order``."""
        require_instance(array_order, ArrayComponentOrder, "array_order")
        require_not_none(words, "words")

        count = array_order.component_count
        flat = [0] * (len(words) * count)
        for i, word in enumerate(words):
            array_order.write(flat, i * count, *self.unpack(word))
        return flat

    @staticmethod
    def convert(
        order_a: PackedIntComponentOrder,
        order_b: PackedIntComponentOrder,
        words: Sequence[int],
    ) -> Sequence[int]:
        """Repack every word from layout ``order_a`` into layout ``order_b``."""
        require_instance(order_a, PackedIntComponentOrder, "order_a")
        require_instance(order_b, PackedIntComponentOrder, "order_b")
        require_not_none(words, "words")
        converted = [order_b.pack(*order_a.unpack(word)) for word in words]
        return _like(words, converted)
