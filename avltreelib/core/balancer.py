"""Rebalancing strategies for AVLTreeLib.

A Rebalancer is handed the freshly inserted leaf and may restructure the
tree with rotations. Rotations only need the transplant primitive of the
tree they act on, so they work on any BinaryTree.

Removal never triggers rebalancing: a tree that has had keys removed may
no longer satisfy the AVL height invariant.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Tuple

from .node import Node, subtree_height

if TYPE_CHECKING:
    from ..binary_tree import BinaryTree

logger = logging.getLogger(__name__)


def rotate_left(tree: 'BinaryTree', x: Node) -> Optional[Node]:
    """Rotate left around x and its right child y.

    y's left subtree becomes x's right subtree, y takes x's place, and x
    becomes y's left child::

          x                y
         / \\              / \\
        a   y     =>     x   c
           / \\          / \\
          b   c        a   b

    Args:
        tree: Tree that x belongs to
        x: Pivot node

    Returns:
        y, the new root of the rotated subtree, or None (and no change)
        if x has no right child
    """
    y = x.right
    if y is None:
        return None
    x.right = y.left
    if y.left is not None:
        y.left.parent = x
    tree.transplant(x, y)
    y.left = x
    x.parent = y
    logger.debug("Left rotation at %r", x.key)
    return y


def rotate_right(tree: 'BinaryTree', x: Node) -> Optional[Node]:
    """Rotate right around x and its left child y; mirrors rotate_left.

    Returns:
        y, the new root of the rotated subtree, or None (and no change)
        if x has no left child
    """
    y = x.left
    if y is None:
        return None
    x.left = y.right
    if y.right is not None:
        y.right.parent = x
    tree.transplant(x, y)
    y.right = x
    x.parent = y
    logger.debug("Right rotation at %r", x.key)
    return y


@dataclass
class RotationStats:
    """Rotation counters kept by a rebalancer.

    ``last`` holds the (direction, pivot key) pairs performed by the most
    recent rebalance call or by-key rotation on a SearchTree, in order.
    """
    left: int = 0
    right: int = 0
    last: List[Tuple[str, Any]] = field(default_factory=list)

    @property
    def total(self) -> int:
        return self.left + self.right


class Rebalancer(ABC):
    """Abstract base class for rebalancing strategies."""

    def __init__(self):
        self.stats = RotationStats()

    @abstractmethod
    def rebalance(self, tree: 'BinaryTree', node: Node) -> None:
        """Restore balance after node was inserted into tree.

        Args:
            tree: Tree the node was inserted into
            node: The newly attached leaf
        """
        pass

    @abstractmethod
    def is_balanced(self, root: Optional[Node]) -> bool:
        """Check whether the subtree under root meets this strategy's invariant."""
        pass

    def rotate_left(self, tree: 'BinaryTree', x: Node) -> Optional[Node]:
        """Rotate left at x, recording the rotation."""
        y = rotate_left(tree, x)
        if y is not None:
            self.stats.left += 1
            self.stats.last.append(('left', x.key))
        return y

    def rotate_right(self, tree: 'BinaryTree', x: Node) -> Optional[Node]:
        """Rotate right at x, recording the rotation."""
        y = rotate_right(tree, x)
        if y is not None:
            self.stats.right += 1
            self.stats.last.append(('right', x.key))
        return y

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(rotations={self.stats.total})"


class NoRebalancing(Rebalancer):
    """Leaves the tree exactly as insertion shaped it."""

    def rebalance(self, tree: 'BinaryTree', node: Node) -> None:
        pass

    def is_balanced(self, root: Optional[Node]) -> bool:
        """Always True: there is no invariant to break, whatever the shape."""
        return True


class AVLRebalancer(Rebalancer):
    """Height-balancing strategy of the AVL tree.

    After each insertion, walks from the new leaf up to the root. At every
    node the subtree heights are recomputed from scratch; when one side is
    more than one level taller, a single rotation fixes the straight-line
    case and a double rotation fixes the zig-zag case.
    """

    def rebalance(self, tree: 'BinaryTree', node: Node) -> None:
        self.stats.last = []
        current: Optional[Node] = node
        while current is not None:
            left_height = subtree_height(current.left)
            right_height = subtree_height(current.right)

            if left_height > right_height + 1:
                left = current.left
                if subtree_height(left.left) >= subtree_height(left.right):
                    # Straight-line case
                    self.rotate_right(tree, current)
                else:
                    # Zig-zag case
                    self.rotate_left(tree, left)
                    self.rotate_right(tree, current)
            elif right_height > left_height + 1:
                right = current.right
                if subtree_height(right.right) >= subtree_height(right.left):
                    self.rotate_left(tree, current)
                else:
                    self.rotate_right(tree, right)
                    self.rotate_left(tree, current)

            # current may have moved down; its parent is the next node to check
            current = current.parent

    def is_balanced(self, root: Optional[Node]) -> bool:
        heights: Dict[int, int] = {}
        stack: List[Tuple[Node, bool]] = [(root, False)] if root is not None else []
        while stack:
            node, children_done = stack.pop()
            if not children_done:
                stack.append((node, True))
                stack.extend((child, False) for child in node.children())
                continue
            left = heights[id(node.left)] if node.left is not None else -1
            right = heights[id(node.right)] if node.right is not None else -1
            if abs(left - right) > 1:
                return False
            heights[id(node)] = max(left, right) + 1
        return True
