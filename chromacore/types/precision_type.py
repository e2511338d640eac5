# No dependencies
from enum import Enum
import numpy as np


class Precision(str, Enum):
    FLOAT32 = "float32"
    FLOAT64 = "float64"


precision_dtypes = {
    Precision.FLOAT32: np.float32,
    Precision.FLOAT64: np.float64,
}

# Big-endian binary record formats
precision_struct_formats = {
    Precision.FLOAT32: ">f",
    Precision.FLOAT64: ">d",
}

# Smallest positive subnormal, the default floor of the filmic tone curve
precision_min_values = {
    Precision.FLOAT32: float(np.finfo(np.float32).smallest_subnormal),
    Precision.FLOAT64: float(np.finfo(np.float64).smallest_subnormal),
}
