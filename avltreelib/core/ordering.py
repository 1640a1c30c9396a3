"""Key ordering strategies for AVLTreeLib.

A search tree never compares keys directly; it asks its Ordering. This is
what lets one tree type hold keys sorted naturally, by a key function, or
in descending order.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Optional


class Ordering(ABC):
    """Total order over stored keys.

    ``less`` decides which subtree a key descends into: keys that are not
    less than a node's key (including equal ones) go right.
    """

    @abstractmethod
    def less(self, a: Any, b: Any) -> bool:
        """Return True if a sorts strictly before b."""
        pass

    @abstractmethod
    def equal(self, a: Any, b: Any) -> bool:
        """Return True if a and b sort as the same key."""
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class NaturalOrdering(Ordering):
    """Orders keys with their own ``<`` and ``==`` operators."""

    def less(self, a: Any, b: Any) -> bool:
        return a < b

    def equal(self, a: Any, b: Any) -> bool:
        return a == b


class KeyOrdering(Ordering):
    """Orders keys by a derived sort key, optionally reversed.

    Works like the ``key`` and ``reverse`` arguments of ``sorted``.
    """

    def __init__(self, key: Optional[Callable[[Any], Any]] = None, reverse: bool = False):
        """Initialize the ordering.

        Args:
            key: Function mapping a stored key to its sort key (None = identity)
            reverse: Sort in descending order
        """
        self.key = key
        self.reverse = reverse

    def _sort_key(self, value: Any) -> Any:
        return self.key(value) if self.key is not None else value

    def less(self, a: Any, b: Any) -> bool:
        if self.reverse:
            return self._sort_key(b) < self._sort_key(a)
        return self._sort_key(a) < self._sort_key(b)

    def equal(self, a: Any, b: Any) -> bool:
        return self._sort_key(a) == self._sort_key(b)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(key={self.key!r}, reverse={self.reverse})"
