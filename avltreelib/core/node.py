"""Node abstraction for AVLTreeLib.

The Node is the graph unit of a binary tree and nothing more. Ordering,
balancing and traversal logic live in the strategies and trees that
operate on nodes.

Child links own their subtree. The parent link is a weak reference: it is
only used to walk upward and never keeps a node alive, so a detached
subtree is reclaimed as soon as the last owning child link is dropped.
"""

import weakref
from typing import Any, Iterator, Optional


class Node:
    """A key with two owned child slots and a weak parent back-reference.

    Structural mirroring is the caller's responsibility: whenever a child
    slot is changed, the new child's ``parent`` must be pointed back at
    this node in the same step.
    """

    __slots__ = ('key', 'left', 'right', '_parent_ref', '__weakref__')

    def __init__(self, key: Any):
        """Create a detached leaf.

        Args:
            key: The key stored in this node
        """
        self.key = key
        self.left: Optional['Node'] = None
        self.right: Optional['Node'] = None
        self._parent_ref: Optional[weakref.ReferenceType] = None

    @property
    def parent(self) -> Optional['Node']:
        """Parent node, or None for a root or detached node."""
        if self._parent_ref is None:
            return None
        return self._parent_ref()

    @parent.setter
    def parent(self, node: Optional['Node']) -> None:
        self._parent_ref = weakref.ref(node) if node is not None else None

    def is_root(self) -> bool:
        """Check if this node has no parent."""
        return self.parent is None

    def is_leaf(self) -> bool:
        """Check if this node has no children."""
        return self.left is None and self.right is None

    def children(self) -> Iterator['Node']:
        """Iterate over present children, left first."""
        if self.left is not None:
            yield self.left
        if self.right is not None:
            yield self.right

    def detach(self) -> None:
        """Drop every link held by this node."""
        self.left = None
        self.right = None
        self._parent_ref = None

    def __repr__(self) -> str:
        """Detailed representation for debugging."""
        return f"{self.__class__.__name__}(key={self.key!r})"


def subtree_size(node: Optional[Node]) -> int:
    """Count the nodes under node, node included (0 for None)."""
    count = 0
    stack = [node] if node is not None else []
    while stack:
        current = stack.pop()
        count += 1
        stack.extend(current.children())
    return count


def subtree_height(node: Optional[Node]) -> int:
    """Compute the height of the subtree under node from scratch.

    The height of an absent subtree is -1, so a single leaf has height 0.
    Levels are counted iteratively so degenerate trees are safe.

    Args:
        node: Subtree root, or None

    Returns:
        Number of edges on the longest downward path
    """
    height = -1
    level = [node] if node is not None else []
    while level:
        height += 1
        level = [child for parent in level for child in parent.children()]
    return height
