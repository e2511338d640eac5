"""
Channel layouts for flat 8-bit buffers and packed 32-bit words.

Classes
-------
ArrayComponentOrder: offsets of R, G, B, A inside a flat buffer element
PackedIntComponentOrder: bit shifts of R, G, B, A inside a 32-bit word
"""

from .array_component_order import ArrayComponentOrder
from .packed_int_component_order import PackedIntComponentOrder

__all__ = ["ArrayComponentOrder", "PackedIntComponentOrder"]
