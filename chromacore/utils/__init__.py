from .floats import as_float_array, finite_or_default, float_key, lerp, saturate, saturate_int, to_int, to_8bit
from .validators import (
    require_not_none,
    require_non_negative,
    require_positive,
    require_multiple,
    require_index,
    require_instance,
)

__all__ = [
    "as_float_array", "finite_or_default", "float_key", "lerp", "saturate", "saturate_int", "to_int", "to_8bit",
    "require_not_none", "require_non_negative", "require_positive",
    "require_multiple", "require_index", "require_instance",
]
