"""Plain binary tree for AVLTreeLib.

BinaryTree owns a root node and knows nothing about key order. It answers
shape questions (size, height), offers every traversal strategy, and
provides the transplant primitive that ordered trees and rotations use to
splice subtrees in and out.
"""

import logging
from collections import deque
from typing import Any, Deque, Iterable, Iterator, List, Optional, Union

from .config import TraversalStrategy
from .core.node import Node, subtree_height, subtree_size
from .core.traverser import (
    TreeTraverser,
    Visitor,
    PreOrderTraverser,
    InOrderTraverser,
    PostOrderTraverser,
    IterativePreOrderTraverser,
    IterativeInOrderTraverser,
    TwoStackPostOrderTraverser,
    OneStackPostOrderTraverser,
    BreadthFirstTraverser,
)
from .core.collector import KeyCollector
from .exceptions import EmptyTreeError, MalformedConstructionError
from .planning import resolve_traverser

logger = logging.getLogger(__name__)

StrategyLike = Union[TraversalStrategy, TreeTraverser, str]


class BinaryTree:
    """A binary tree of arbitrary shape.

    Example:
        tree = BinaryTree([5, 3, 8, None, 4, None, 9])
        collector = KeyCollector()
        tree.in_order_traversal(collector)
        assert collector.keys == [3, 4, 5, 8, 9]
    """

    def __init__(self, layout: Optional[Iterable[Any]] = None):
        """Create a tree, empty or from a breadth-first layout.

        Args:
            layout: Keys in level order with None marking absent positions;
                see ``from_breadth_first``

        Raises:
            MalformedConstructionError: If layout gives children to an
                absent position
        """
        self._root: Optional[Node] = None
        if layout is not None:
            self._root = self._build_from_layout(layout)

    @classmethod
    def from_breadth_first(cls, layout: Iterable[Any]) -> 'BinaryTree':
        """Build a tree from its breadth-first layout.

        The first element is the root. The rest are taken in (left, right)
        pairs, each pair belonging to the next entry of a FIFO queue of
        positions filled in construction order, absent positions included.

        Args:
            layout: Keys in level order, None for absent positions

        Returns:
            New BinaryTree (empty if layout is empty or starts with None)

        Raises:
            MalformedConstructionError: If a pair belongs to an absent position
        """
        return cls(layout)

    @staticmethod
    def _build_from_layout(layout: Iterable[Any]) -> Optional[Node]:
        items = list(layout)
        if not items or items[0] is None:
            return None

        root = Node(items[0])
        # Absent positions are queued too; they must never receive children
        positions: Deque[Optional[Node]] = deque([root])
        parent: Optional[Node] = None

        for index in range(1, len(items)):
            if index % 2 == 1:
                parent = positions.popleft()
                if parent is None:
                    logger.debug("Layout assigns children to an absent node at %d", index)
                    raise MalformedConstructionError(
                        "Layout assigns children to an absent node", index
                    )
            child = Node(items[index]) if items[index] is not None else None
            if child is not None:
                child.parent = parent
            if index % 2 == 1:
                parent.left = child
            else:
                parent.right = child
            positions.append(child)

        return root

    # Properties: empty, root, size and height

    @property
    def root_node(self) -> Optional[Node]:
        """Root node, or None for an empty tree.

        This is the live node graph, for rotations and invariant checks.
        Changing links through it must keep parent references mirrored.
        """
        return self._root

    @root_node.setter
    def root_node(self, node: Optional[Node]) -> None:
        self._root = node
        if node is not None:
            node.parent = None

    @property
    def root(self) -> Any:
        """Key stored at the root.

        Raises:
            EmptyTreeError: If the tree is empty
        """
        if self._root is None:
            raise EmptyTreeError("Empty tree has no root.")
        return self._root.key

    def is_empty(self) -> bool:
        """Check if the tree has no nodes."""
        return self._root is None

    def size(self) -> int:
        """Return the number of nodes."""
        return subtree_size(self._root)

    def height(self) -> int:
        """Return the height of the tree (-1 when empty, 0 for a single node)."""
        return subtree_height(self._root)

    # Structural primitive

    def transplant(self, old: Node, new: Optional[Node]) -> None:
        """Replace the subtree rooted at old with the subtree rooted at new.

        new takes old's place in old's parent (or becomes the root), and
        old is left without a parent. old's own children are untouched.

        Args:
            old: Node currently attached to this tree
            new: Replacement subtree root, or None to empty the slot

        Raises:
            RuntimeError: If old's parent does not list old as a child
        """
        parent = old.parent
        if parent is None:
            self._root = new
        elif parent.left is old:
            parent.left = new
        elif parent.right is old:
            parent.right = new
        else:
            raise RuntimeError('Replaced child does not exist in parent')
        if new is not None:
            new.parent = parent
        old.parent = None

    # Tree traversal algorithms

    def traverse(self, visitor: Visitor, strategy: StrategyLike = TraversalStrategy.IN_ORDER_ITERATIVE) -> None:
        """Invoke visitor once per key using the given strategy.

        Args:
            visitor: Single-argument callable receiving each key
            strategy: TraversalStrategy, strategy name or traverser instance
        """
        resolve_traverser(strategy).traverse(self._root, visitor)

    def keys(self, strategy: StrategyLike = TraversalStrategy.IN_ORDER_ITERATIVE) -> List[Any]:
        """Collect every key in the order of the given strategy."""
        collector: KeyCollector = KeyCollector()
        self.traverse(collector, strategy)
        return collector.keys

    # Recursive tree traversals
    def pre_order_traversal(self, visitor: Visitor) -> None:
        PreOrderTraverser().traverse(self._root, visitor)

    def in_order_traversal(self, visitor: Visitor) -> None:
        InOrderTraverser().traverse(self._root, visitor)

    def post_order_traversal(self, visitor: Visitor) -> None:
        PostOrderTraverser().traverse(self._root, visitor)

    # Iterative tree traversals
    def pre_order_iter_traversal(self, visitor: Visitor) -> None:
        IterativePreOrderTraverser().traverse(self._root, visitor)

    def in_order_iter_traversal(self, visitor: Visitor) -> None:
        IterativeInOrderTraverser().traverse(self._root, visitor)

    def post_order_iter_traversal_two_stacks(self, visitor: Visitor) -> None:
        TwoStackPostOrderTraverser().traverse(self._root, visitor)

    def post_order_iter_traversal_one_stack(self, visitor: Visitor) -> None:
        OneStackPostOrderTraverser().traverse(self._root, visitor)

    def breadth_first_traversal(self, visitor: Visitor) -> None:
        BreadthFirstTraverser().traverse(self._root, visitor)

    # Python protocol

    def __len__(self) -> int:
        return self.size()

    def __iter__(self) -> Iterator[Any]:
        for node in IterativeInOrderTraverser().walk(self._root):
            yield node.key

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(size={self.size()}, height={self.height()})"
