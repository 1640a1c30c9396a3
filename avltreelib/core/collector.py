"""Visitor objects for AVLTreeLib traversals.

A visitor is any single-argument callable; it is invoked once per key and
its return value is ignored. The classes here are visitors that carry
state across calls, so the outcome of a traversal can be read back from
the visitor once the traversal finishes.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, List, Optional


class KeyVisitor(ABC):
    """Abstract base class for stateful visitors.

    Subclasses implement ``visit``; instances are passed directly to any
    traversal method.
    """

    @abstractmethod
    def visit(self, key: Any) -> None:
        """Process one key.

        Args:
            key: The key of the node being visited
        """
        pass

    def __call__(self, key: Any) -> None:
        self.visit(key)


class KeyCollector(KeyVisitor):
    """Collects visited keys in visit order.

    Example:
        collector = KeyCollector()
        tree.in_order_traversal(collector)
        assert collector.keys == sorted(collector.keys)
    """

    def __init__(self):
        self.keys: List[Any] = []

    def visit(self, key: Any) -> None:
        self.keys.append(key)


class CountingVisitor(KeyVisitor):
    """Counts visited keys."""

    def __init__(self):
        self.count = 0

    def visit(self, key: Any) -> None:
        self.count += 1


class CallbackVisitor(KeyVisitor):
    """Wraps a plain function, optionally stopping after a number of keys.

    Keys beyond the limit are ignored; the traversal itself still runs to
    completion.
    """

    def __init__(self, callback: Callable[[Any], None], limit: Optional[int] = None):
        """Initialize the visitor.

        Args:
            callback: Function called with each key
            limit: Maximum number of keys forwarded to callback (None = all)
        """
        self.callback = callback
        self.limit = limit
        self.forwarded = 0

    def visit(self, key: Any) -> None:
        if self.limit is not None and self.forwarded >= self.limit:
            return
        self.forwarded += 1
        self.callback(key)


class RankFinder(KeyVisitor):
    """Locates the in-order rank of a target key.

    Intended for an in-order traversal: every key visited before the
    target increments the running count, and once the target has been
    seen all further keys are ignored.

    Attributes:
        target: Key being looked for
        count: Rank of the last counted key (-1 before any key)
        found: Whether target has been seen
    """

    def __init__(self, target: Any, equals: Callable[[Any, Any], bool]):
        """Initialize the finder.

        Args:
            target: Key to locate
            equals: Equality test from the tree's ordering
        """
        self.target = target
        self.equals = equals
        self.count = -1
        self.found = False

    def visit(self, key: Any) -> None:
        if self.found:
            return
        self.count += 1
        if self.equals(key, self.target):
            self.found = True

    @property
    def rank(self) -> int:
        """In-order index of target, or -1 when it was not visited."""
        return self.count if self.found else -1
