"""
Interning of equal immutable values.

A :class:`ColorCache` is owned by whoever creates it; nothing in chromacore
keeps a process-wide instance.
"""

from __future__ import annotations
import logging
import threading
from typing import Dict, Generic, Hashable, TypeVar

from ..utils.validators import require_not_none

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Hashable)


class ColorCache(Generic[T]):
    """
    Unbounded map from a value to its canonical instance.

    Insert-if-absent is atomic: two threads racing to insert equal values
    both get the same canonical instance back. There is no eviction; call
    :meth:`clear` to drop everything.

    Example:
        >>> cache = ColorCache()
        >>> a = cache.get_cached(Color3F(0.5))
        >>> cache.get_cached(Color3F(0.5)) is a
        True
    """

    __slots__ = ("_entries", "_lock")

    def __init__(self) -> None:
        self._entries: Dict[T, T] = {}
        self._lock = threading.Lock()

    def get_cached(self, value: T) -> T:
        """
        Return the stored instance equal to ``value``, storing ``value``
        first if no equal instance is present.

        Raises:
            TypeError: if ``value`` is None or unhashable.
        """
        require_not_none(value, "value")
        with self._lock:
            return self._entries.setdefault(value, value)

    def size(self) -> int:
        with self._lock:
            return len(self._entries)

    def clear(self) -> None:
        with self._lock:
            dropped = len(self._entries)
            self._entries.clear()
        logger.debug("Cleared color cache (%d entries)", dropped)

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, value: object) -> bool:
        with self._lock:
            return value in self._entries
