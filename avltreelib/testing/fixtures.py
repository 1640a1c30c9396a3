"""Test fixtures for AVLTreeLib consumers.

These fixtures check the structural invariants of a tree. They read its
nodes through the low-level accessors ``BinaryTree.root_node`` and
``SearchTree.shape``, which hand out live Node objects; visitors passed
to traversals only ever receive keys.
"""

import random
from typing import Any, Dict, List, Optional, Union

from ..binary_tree import BinaryTree
from ..core.node import Node
from ..core.ordering import NaturalOrdering, Ordering
from ..core.traverser import IterativePreOrderTraverser
from ..search_tree import SearchTree


class TreeInvariantChecker:
    """Public test fixture for invariant verification.

    Checks parent/child mirroring, search ordering and AVL height balance
    over every node of a tree.

    Example:
        tree = avl_tree(range(100))
        checker = TreeInvariantChecker(tree)
        assert checker.violations(balanced=True) == []
    """

    def __init__(self, tree: Union[BinaryTree, SearchTree]):
        """Initialize with the tree to inspect.

        Args:
            tree: BinaryTree or SearchTree
        """
        if isinstance(tree, SearchTree):
            self._shape = tree.shape
            self._ordering: Ordering = tree.ordering
        else:
            self._shape = tree
            self._ordering = NaturalOrdering()

    def _nodes(self) -> List[Node]:
        return list(IterativePreOrderTraverser().walk(self._shape.root_node))

    def parent_link_violations(self) -> List[str]:
        """Find child slots whose child does not point back at its parent."""
        problems = []
        root = self._shape.root_node
        if root is not None and root.parent is not None:
            problems.append(f"root {root.key!r} has a parent")
        for node in self._nodes():
            for side, child in (('left', node.left), ('right', node.right)):
                if child is not None and child.parent is not node:
                    problems.append(f"{side} child {child.key!r} of {node.key!r} has wrong parent")
        return problems

    def ordering_violations(self) -> List[str]:
        """Find adjacent in-order keys that are out of order.

        Only the in-order sequence is checked, since rotations may move a
        duplicate key into the left subtree of an equal key.
        """
        keys = list(self._shape)
        return [
            f"{before!r} precedes {after!r}"
            for before, after in zip(keys, keys[1:])
            if self._ordering.less(after, before)
        ]

    def balance_violations(self) -> List[str]:
        """Find nodes whose subtree heights differ by more than one."""
        heights: Dict[int, int] = {}
        problems = []
        # Reverse pre-order (visit, left, right) visits children before parents
        for node in reversed(self._nodes()):
            left = heights[id(node.left)] if node.left is not None else -1
            right = heights[id(node.right)] if node.right is not None else -1
            if abs(left - right) > 1:
                problems.append(f"node {node.key!r} heights {left} vs {right}")
            heights[id(node)] = max(left, right) + 1
        return problems

    def violations(self, balanced: bool = False) -> List[str]:
        """Collect every invariant violation.

        Args:
            balanced: Also require AVL height balance

        Returns:
            List of human-readable problems (empty if the tree is valid)
        """
        problems = self.parent_link_violations() + self.ordering_violations()
        if balanced:
            problems += self.balance_violations()
        return problems

    def get_summary(self) -> Dict[str, Any]:
        """Returns high-level invariant state for testing."""
        return {
            'size': self._shape.size(),
            'height': self._shape.height(),
            'parent_links_ok': not self.parent_link_violations(),
            'ordered': not self.ordering_violations(),
            'balanced': not self.balance_violations(),
        }


def random_keys(count: int, seed: Optional[int] = None, unique: bool = True) -> List[int]:
    """Generate a reproducible list of integer keys.

    Args:
        count: Number of keys
        seed: Random seed (None = nondeterministic)
        unique: Draw without repetition

    Returns:
        List of ints in random order
    """
    rng = random.Random(seed)
    if unique:
        return rng.sample(range(count * 10), count)
    return [rng.randrange(count) for _ in range(count)]
