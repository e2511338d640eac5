from .precision_type import Precision, precision_dtypes, precision_struct_formats
from .color_types import Scalar, ChannelValues, ColorElement, Buffer

__all__ = [
    "Precision", "precision_dtypes", "precision_struct_formats",
    "Scalar", "ChannelValues", "ColorElement", "Buffer",
]
