from __future__ import annotations
from typing import Sequence, Tuple, Union
import numpy as np
from numpy import ndarray

Scalar = int | float
ChannelValues = Tuple[float, ...]
# Anything a color constructor accepts besides another color instance
ColorElement = Union[Scalar, Sequence[Scalar], ndarray]
# Indexable 8-bit channel storage
Buffer = Union[bytes, bytearray, Sequence[int], ndarray]


def element_to_array(element: ColorElement, dtype=np.float64) -> np.ndarray:
    """
    Convert a color element to a 1D numpy array.

    Args:
        element: Scalar, sequence, or already an ndarray
        dtype: Target dtype

    Returns:
        numpy array representation
    """
    if isinstance(element, (int, float)):
        return np.array([element], dtype=dtype)
    return np.asarray(element, dtype=dtype).reshape(-1)
