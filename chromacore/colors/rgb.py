from typing import ClassVar
from ..types.precision_type import Precision, precision_dtypes
from .color_base import ColorBase, WithAlpha, build_registry


class Color3F(ColorBase):
    __slots__ = ()
    num_channels: ClassVar[int] = 3
    precision: ClassVar[Precision] = Precision.FLOAT32
    _type: ClassVar[type] = precision_dtypes[Precision.FLOAT32]


class Color3D(ColorBase):
    __slots__ = ()
    num_channels: ClassVar[int] = 3
    precision: ClassVar[Precision] = Precision.FLOAT64
    _type: ClassVar[type] = precision_dtypes[Precision.FLOAT64]


class Color4F(ColorBase, WithAlpha):
    __slots__ = ()
    num_channels: ClassVar[int] = 4
    precision: ClassVar[Precision] = Precision.FLOAT32
    _type: ClassVar[type] = precision_dtypes[Precision.FLOAT32]


class Color4D(ColorBase, WithAlpha):
    __slots__ = ()
    num_channels: ClassVar[int] = 4
    precision: ClassVar[Precision] = Precision.FLOAT64
    _type: ClassVar[type] = precision_dtypes[Precision.FLOAT64]


rgb_tuple_to_class = build_registry(
    Color3F,
    Color3D,
    Color4F,
    Color4D,
)
