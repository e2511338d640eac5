from __future__ import annotations
import math
import struct
from abc import ABC
from typing import Any, BinaryIO, Callable, ClassVar, Iterator, List, Optional, Self, Sequence, Union
import numpy as np
from numpy import ndarray
from ..constants import ALPHA_DEFAULT, LUMINANCE_WEIGHTS, DEFAULT_PRIMARY_THRESHOLD, SECONDARY_THRESHOLD
from ..layouts import ArrayComponentOrder, PackedIntComponentOrder
from ..types.color_types import Buffer, ChannelValues, ColorElement, Scalar, element_to_array
from ..types.precision_type import Precision, precision_struct_formats
from ..utils.floats import float_key, saturate_int, to_8bit
from ..utils.validators import (
    require_instance,
    require_multiple,
    require_non_negative,
    require_not_none,
)

ColorInput = Union["ColorBase", ColorElement, None]


def _same_float(a: float, b: float) -> bool:
    """Bitwise float equality: NaN equals NaN, -0.0 differs from +0.0."""
    if math.isnan(a) or math.isnan(b):
        return math.isnan(a) and math.isnan(b)
    return a == b and math.copysign(1.0, a) == math.copysign(1.0, b)


class ColorBase:
    """
    Immutable color value with a fixed channel count and float precision.

    Concrete variants set the class variables; channels are stored as a tuple
    of Python floats already rounded to the variant's precision.
    """

    __slots__ = ('_value', '_is_frozen')  # no instance dict → immutability

    num_channels: ClassVar[int] = 3
    precision:    ClassVar[Precision]
    _type:        ClassVar[type]

    # injected by colors.color
    convert: Callable[[ColorBase, int, Precision | None], ColorBase]
    with_alpha: Callable[[ColorBase, Scalar], ColorBase]
    without_alpha: Callable[[ColorBase], ColorBase]
    to_precision: Callable[[ColorBase, Precision], ColorBase]

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, value: ColorInput = 0.0, alpha: Optional[Scalar] = None) -> None:
        # ---- Gather raw channels ----
        if isinstance(value, ColorBase):
            channels = list(value.value)
        elif value is None:
            raise TypeError(f"{self.__class__.__name__} value must not be None")
        elif isinstance(value, (int, float, np.number)):
            channels = [float(value)] * 3
        else:
            channels = element_to_array(value).tolist()

        if len(channels) not in (3, 4):
            raise ValueError(
                f"{self.__class__.__name__} expects 3 or 4 channels, got {len(channels)}"
            )

        # ---- Match arity ----
        if self.num_channels == 4:
            if len(channels) == 3:
                channels.append(1.0 if alpha is None else alpha)
            elif alpha is not None:
                channels[3] = alpha
        else:
            if alpha is not None:
                raise ValueError(f"{self.__class__.__name__} has no alpha channel")
            channels = channels[:3]

        # ---- Round to precision ----
        arr = np.asarray(channels, dtype=np.float64).astype(self._type)
        self._value = tuple(float(v) for v in arr)

        super().__setattr__('_is_frozen', True)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> ChannelValues:
        return self._value

    @property
    def array(self) -> ndarray:
        """Channels as a fresh numpy array in the variant's dtype."""
        return np.array(self._value, dtype=self._type)

    @property
    def has_alpha(self) -> bool:
        return self.num_channels == 4

    @property
    def component1(self) -> float:
        return self._value[0]

    @property
    def component2(self) -> float:
        return self._value[1]

    @property
    def component3(self) -> float:
        return self._value[2]

    r = x = component1
    g = y = component2
    b = z = component3

    @property
    def as_int_r(self) -> int:
        return to_8bit(self._value[0])

    @property
    def as_int_g(self) -> int:
        return to_8bit(self._value[1])

    @property
    def as_int_b(self) -> int:
        return to_8bit(self._value[2])

    as_int_x = as_int_component1 = as_int_r
    as_int_y = as_int_component2 = as_int_g
    as_int_z = as_int_component3 = as_int_b

    # ------------------ DERIVED SCALARS ------------------
    def _color_channels(self) -> ndarray:
        return np.array(self._value[:3], dtype=self._type)

    @property
    def average(self) -> float:
        c = self._color_channels()
        return float((c[0] + c[1] + c[2]) / self._type(3.0))

    @property
    def lightness(self) -> float:
        return float((self._type(self.maximum) + self._type(self.minimum)) / self._type(2.0))

    @property
    def luminance(self) -> float:
        c = self._color_channels()
        w = np.asarray(LUMINANCE_WEIGHTS, dtype=self._type)
        return float(w[0] * c[0] + w[1] * c[1] + w[2] * c[2])

    @property
    def maximum(self) -> float:
        return max(self._value[:3])

    @property
    def minimum(self) -> float:
        return min(self._value[:3])

    # ------------------ PREDICATES ------------------
    def is_red(self, threshold_g: float = DEFAULT_PRIMARY_THRESHOLD, threshold_b: float = DEFAULT_PRIMARY_THRESHOLD) -> bool:
        r, g, b = self._color_channels()
        return bool(r - self._type(threshold_g) >= g and r - self._type(threshold_b) >= b)

    def is_green(self, threshold_r: float = DEFAULT_PRIMARY_THRESHOLD, threshold_b: float = DEFAULT_PRIMARY_THRESHOLD) -> bool:
        r, g, b = self._color_channels()
        return bool(g - self._type(threshold_r) >= r and g - self._type(threshold_b) >= b)

    def is_blue(self, threshold_r: float = DEFAULT_PRIMARY_THRESHOLD, threshold_g: float = DEFAULT_PRIMARY_THRESHOLD) -> bool:
        r, g, b = self._color_channels()
        return bool(b - self._type(threshold_r) >= r and b - self._type(threshold_g) >= g)

    def is_cyan(self) -> bool:
        return self.is_green(DEFAULT_PRIMARY_THRESHOLD, SECONDARY_THRESHOLD) and self.is_blue(DEFAULT_PRIMARY_THRESHOLD, SECONDARY_THRESHOLD)

    def is_magenta(self) -> bool:
        return self.is_red(DEFAULT_PRIMARY_THRESHOLD, SECONDARY_THRESHOLD) and self.is_blue(SECONDARY_THRESHOLD, DEFAULT_PRIMARY_THRESHOLD)

    def is_yellow(self) -> bool:
        return self.is_red(SECONDARY_THRESHOLD, DEFAULT_PRIMARY_THRESHOLD) and self.is_green(SECONDARY_THRESHOLD, DEFAULT_PRIMARY_THRESHOLD)

    def is_grayscale(self) -> bool:
        c1, c2, c3 = self._value[:3]
        return _same_float(c1, c2) and _same_float(c2, c3)

    def is_black(self) -> bool:
        return self.is_grayscale() and self._value[0] == 0.0

    def is_white(self) -> bool:
        return self.is_grayscale() and self._value[0] >= 1.0

    def has_infinites(self) -> bool:
        return any(math.isinf(v) for v in self._value)

    def has_nans(self) -> bool:
        return any(math.isnan(v) for v in self._value)

    # ------------------ EQUALITY ------------------
    def _key(self) -> bytes:
        return float_key(self.array)

    def __eq__(self, other: Any) -> bool:
        if other is self:
            return True
        if not isinstance(other, ColorBase) or type(other) is not type(self):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._key()))

    def is_close(self, other: ColorBase, rel_tol: float = 1e-5, abs_tol: float = 1e-8) -> bool:
        """Tolerance-aware channel comparison; NaN channels compare equal."""
        require_instance(other, ColorBase, "other")
        if other.num_channels != self.num_channels:
            return False
        return bool(np.allclose(self._value, other.value, rtol=rel_tol, atol=abs_tol, equal_nan=True))

    def __iter__(self) -> Iterator[float]:
        return iter(self._value)

    def __len__(self) -> int:
        return self.num_channels

    def __repr__(self) -> str:
        channels = ", ".join(f"{v:+.10f}" for v in self._value)
        return f"{self.__class__.__name__}({channels})"

    # ------------------ 8-BIT CONSTRUCTION ------------------
    @classmethod
    def from_ints(cls, r: int, g: int, b: int, a: Optional[int] = None) -> Self:
        """
        Build a color from 8-bit channels.

        Each channel is saturated to ``[0, 255]`` and divided by 255. Alpha
        defaults to 255 on 4-channel variants and is rejected on 3-channel ones.
        """
        values = [saturate_int(c) / 255.0 for c in (r, g, b)]
        if cls.num_channels == 4:
            values.append(saturate_int(ALPHA_DEFAULT if a is None else a) / 255.0)
        elif a is not None:
            raise ValueError(f"{cls.__name__} has no alpha channel")
        return cls(values)

    @classmethod
    def random(cls, rng: Optional[np.random.Generator] = None) -> Self:
        """Uniformly random color channels in ``[0, 1)``; alpha is 1."""
        rng = rng if rng is not None else np.random.default_rng()
        return cls(rng.random(3))

    # ------------------ PACKING ------------------
    def pack(self, order: PackedIntComponentOrder = PackedIntComponentOrder.ARGB) -> int:
        require_instance(order, PackedIntComponentOrder, "order")
        alpha = self.as_int_a if self.has_alpha else ALPHA_DEFAULT  # type: ignore[attr-defined]
        return order.pack(self.as_int_r, self.as_int_g, self.as_int_b, alpha)

    @classmethod
    def unpack(cls, word: int, order: PackedIntComponentOrder = PackedIntComponentOrder.ARGB) -> Self:
        require_not_none(word, "word")
        require_instance(order, PackedIntComponentOrder, "order")
        r, g, b, a = order.unpack(word)
        return cls.from_ints(r, g, b, a if cls.num_channels == 4 else None)

    # ------------------ SEQUENCES ------------------
    @classmethod
    def array_of(cls, length: int, supplier: Optional[Callable[[], ColorBase]] = None) -> List[Self]:
        """
        Return ``length`` colors produced by ``supplier`` (default: black).

        Raises:
            ValueError: if ``length`` is negative.
            TypeError: if the supplier returns None.
        """
        require_non_negative(length, "length")
        supplier = supplier if supplier is not None else cls
        colors = []
        for _ in range(length):
            colors.append(require_not_none(supplier(), "supplier()"))
        return colors

    @classmethod
    def array_random(cls, length: int, rng: Optional[np.random.Generator] = None) -> List[Self]:
        rng = rng if rng is not None else np.random.default_rng()
        return cls.array_of(length, lambda: cls.random(rng))

    @classmethod
    def array_read(cls, buffer: Buffer, order: ArrayComponentOrder = ArrayComponentOrder.RGB) -> List[Self]:
        """
        Decode every color of a flat 8-bit buffer laid out as ``order``.

        Raises:
            ValueError: if ``len(buffer)`` is not a multiple of the layout's
                component count.
        """
        require_not_none(buffer, "buffer")
        require_instance(order, ArrayComponentOrder, "order")
        count = order.component_count
        resolution = require_multiple(len(buffer), count, "len(buffer)")
        colors = []
        for i in range(resolution):
            r, g, b, a = order.read(buffer, i * count)
            colors.append(cls.from_ints(r, g, b, a if cls.num_channels == 4 else None))
        return colors

    @classmethod
    def array_unpack(cls, words: Sequence[int], order: PackedIntComponentOrder = PackedIntComponentOrder.ARGB) -> List[Self]:
        require_not_none(words, "words")
        require_instance(order, PackedIntComponentOrder, "order")
        return [cls.unpack(word, order) for word in words]

    # ------------------ BINARY RECORDS ------------------
    @classmethod
    def _record_struct(cls) -> struct.Struct:
        fmt = precision_struct_formats[cls.precision]
        return struct.Struct(fmt[0] + fmt[1] * cls.num_channels)

    def write(self, stream: BinaryIO) -> None:
        """Write the channels as big-endian floats; the caller owns ``stream``."""
        require_not_none(stream, "stream")
        stream.write(self._record_struct().pack(*self._value))

    @classmethod
    def read(cls, stream: BinaryIO) -> Self:
        """
        Read one record written by :meth:`write`.

        Raises:
            EOFError: if the stream ends before a full record.
        """
        require_not_none(stream, "stream")
        record = cls._record_struct()
        data = stream.read(record.size)
        if len(data) < record.size:
            raise EOFError(
                f"{cls.__name__} record needs {record.size} bytes, stream had {len(data)}"
            )
        return cls(record.unpack(data))


class WithAlpha(ABC):
    """
    Mixin for a 4-channel variant. Alpha is the last channel and stays
    separate from the three color channels in derived scalars.
    """

    __slots__ = ()

    _value: ChannelValues

    @property
    def component4(self) -> float:
        return self._value[3]

    a = w = component4

    @property
    def as_int_a(self) -> int:
        return to_8bit(self._value[3])

    as_int_w = as_int_component4 = as_int_a


def build_registry(*classes: type[ColorBase]):
    return {
        (cls.num_channels, cls.precision): cls
        for cls in classes
    }
