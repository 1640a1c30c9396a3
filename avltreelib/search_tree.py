"""Ordered search trees for AVLTreeLib.

SearchTree is the single concrete ordered tree type. It is composed of:

- a BinaryTree holding the node graph (shape, traversals, transplant)
- an Ordering deciding how keys compare
- a Rebalancer run after every insertion

A plain binary search tree and an AVL tree differ only in the rebalancer
their TreeConfig selects.

Keys that compare equal are allowed; they are routed to the right subtree.
"""

import logging
from typing import Any, Iterable, Iterator, List, Optional

from .binary_tree import BinaryTree, StrategyLike
from .config import TreeConfig, InsertMethod
from .core.node import Node
from .core.collector import KeyCollector, RankFinder
from .core.traverser import IterativeInOrderTraverser, Visitor
from .exceptions import (
    EmptyTreeError,
    KeyNotFoundError,
    NoSuccessorError,
    NoPredecessorError,
    MalformedConstructionError,
)
from .planning import TreePlan

logger = logging.getLogger(__name__)


class SearchTree:
    """Binary search tree with pluggable ordering and rebalancing.

    Example:
        tree = SearchTree([10, 20, 30], config=TreeConfig.avl())
        assert tree.root == 20
        assert list(tree) == [10, 20, 30]
    """

    def __init__(self, keys: Optional[Iterable[Any]] = None, config: Optional[TreeConfig] = None):
        """Create a tree, inserting keys in the given order.

        Args:
            keys: Keys to insert one by one
            config: Tree configuration (defaults to an unbalanced tree)

        Raises:
            ConfigurationError: If config is inconsistent
        """
        self.plan = TreePlan(config)
        self.config = self.plan.config
        self.ordering = self.plan.ordering
        self.rebalancer = self.plan.rebalancer
        self.shape = BinaryTree()
        if keys is not None:
            self.update(keys)

    @classmethod
    def from_breadth_first(cls, layout: Iterable[Any], config: Optional[TreeConfig] = None) -> 'SearchTree':
        """Build a search tree from a breadth-first layout.

        The layout is read exactly as BinaryTree reads it, then checked
        against the ordering (and against the balance invariant when the
        configured rebalancer has one).

        Raises:
            MalformedConstructionError: If the layout is malformed, out of
                order, or unbalanced for the configured strategy
        """
        tree = cls(config=config)
        shape = BinaryTree(layout)
        if not tree._is_ordered(shape.root_node):
            raise MalformedConstructionError("Layout violates search tree ordering")
        if not tree.rebalancer.is_balanced(shape.root_node):
            raise MalformedConstructionError(
                f"Layout violates {tree.rebalancer.__class__.__name__} balance"
            )
        tree.shape = shape
        return tree

    def _is_ordered(self, root: Optional[Node]) -> bool:
        """Check left subtree < node <= right subtree everywhere under root."""
        less = self.ordering.less
        stack = [(root, None, None)] if root is not None else []
        while stack:
            node, low, high = stack.pop()
            # low.key <= key < high.key
            if low is not None and less(node.key, low.key):
                return False
            if high is not None and not less(node.key, high.key):
                return False
            if node.left is not None:
                stack.append((node.left, low, node))
            if node.right is not None:
                stack.append((node.right, node, high))
        return True

    # Properties delegated to the shape

    @property
    def root(self) -> Any:
        """Key stored at the root.

        Raises:
            EmptyTreeError: If the tree is empty
        """
        return self.shape.root

    def is_empty(self) -> bool:
        return self.shape.is_empty()

    def size(self) -> int:
        return self.shape.size()

    def height(self) -> int:
        return self.shape.height()

    # Search and order statistics

    def _find_node(self, key: Any) -> Optional[Node]:
        """Iteratively locate a node holding key."""
        node = self.shape.root_node
        while node is not None and not self.ordering.equal(key, node.key):
            if self.ordering.less(key, node.key):
                node = node.left
            else:
                node = node.right
        return node

    def _find_node_recursive(self, node: Optional[Node], key: Any) -> Optional[Node]:
        if node is None or self.ordering.equal(key, node.key):
            return node
        if self.ordering.less(key, node.key):
            return self._find_node_recursive(node.left, key)
        return self._find_node_recursive(node.right, key)

    def _require_node(self, key: Any) -> Node:
        node = self._find_node(key)
        if node is None:
            logger.debug("Key %r not in tree", key)
            raise KeyNotFoundError(key)
        return node

    def search(self, key: Any) -> bool:
        """Check whether key is stored in the tree, in O(height)."""
        return self._find_node(key) is not None

    def search_recursive(self, key: Any) -> bool:
        """Recursive form of search; only safe on shallow trees."""
        return self._find_node_recursive(self.shape.root_node, key) is not None

    def find(self, key: Any) -> int:
        """Return the in-order index of key, or -1 if it is absent.

        Runs a full in-order traversal, so this is O(n).
        """
        finder = RankFinder(key, self.ordering.equal)
        self.shape.in_order_iter_traversal(finder)
        return finder.rank

    @staticmethod
    def _leftmost(node: Node) -> Node:
        while node.left is not None:
            node = node.left
        return node

    @staticmethod
    def _rightmost(node: Node) -> Node:
        while node.right is not None:
            node = node.right
        return node

    def minimum(self) -> Any:
        """Return the smallest key.

        Raises:
            EmptyTreeError: If the tree is empty
        """
        if self.shape.root_node is None:
            raise EmptyTreeError("Empty search tree has no minimum.")
        return self._leftmost(self.shape.root_node).key

    def maximum(self) -> Any:
        """Return the largest key.

        Raises:
            EmptyTreeError: If the tree is empty
        """
        if self.shape.root_node is None:
            raise EmptyTreeError("Empty search tree has no maximum.")
        return self._rightmost(self.shape.root_node).key

    def successor(self, key: Any) -> Any:
        """Return the key that follows key in sorted order.

        Raises:
            EmptyTreeError: If the tree is empty
            KeyNotFoundError: If key is not in the tree
            NoSuccessorError: If key is the maximum
        """
        if self.shape.root_node is None:
            raise EmptyTreeError("Empty search tree has no successor.")
        node = self._require_node(key)
        if node.right is not None:
            return self._leftmost(node.right).key
        # Climb while node is a right child; the first left-child link leads to the successor
        parent = node.parent
        while parent is not None and node is parent.right:
            node = parent
            parent = parent.parent
        if parent is None:
            raise NoSuccessorError(key)
        return parent.key

    def predecessor(self, key: Any) -> Any:
        """Return the key that precedes key in sorted order.

        Raises:
            EmptyTreeError: If the tree is empty
            KeyNotFoundError: If key is not in the tree
            NoPredecessorError: If key is the minimum
        """
        if self.shape.root_node is None:
            raise EmptyTreeError("Empty search tree has no predecessor.")
        node = self._require_node(key)
        if node.left is not None:
            return self._rightmost(node.left).key
        parent = node.parent
        while parent is not None and node is parent.left:
            node = parent
            parent = parent.parent
        if parent is None:
            raise NoPredecessorError(key)
        return parent.key

    # Insertion

    def insert(self, key: Any) -> None:
        """Insert key using the configured insert method, then rebalance."""
        if self.plan.insert_method == InsertMethod.RECURSIVE:
            self.insert_recursive(key)
        else:
            self.insert_iterative(key)

    def insert_iterative(self, key: Any) -> None:
        """Descend with a trailing parent pointer and attach a new leaf."""
        new_node = Node(key)
        parent: Optional[Node] = None
        current = self.shape.root_node
        while current is not None:
            parent = current
            if self.ordering.less(key, current.key):
                current = current.left
            else:
                current = current.right

        new_node.parent = parent
        if parent is None:
            self.shape.root_node = new_node
        elif self.ordering.less(key, parent.key):
            parent.left = new_node
        else:
            parent.right = new_node
        self.rebalancer.rebalance(self.shape, new_node)

    def insert_recursive(self, key: Any) -> None:
        """Rebuild the path to the insertion point, relinking parents on the way up.

        Recurses once per level, so only safe on shallow trees.
        """
        created: List[Node] = []

        def _insert(node: Optional[Node]) -> Node:
            if node is None:
                leaf = Node(key)
                created.append(leaf)
                return leaf
            if self.ordering.less(key, node.key):
                node.left = _insert(node.left)
                node.left.parent = node
            else:
                node.right = _insert(node.right)
                node.right.parent = node
            return node

        self.shape.root_node = _insert(self.shape.root_node)
        self.rebalancer.rebalance(self.shape, created[0])

    def update(self, keys: Iterable[Any]) -> None:
        """Insert every key in order."""
        for key in keys:
            self.insert(key)

    # Removal

    def remove(self, key: Any) -> None:
        """Remove one node holding key.

        The tree is not rebalanced afterwards, so an AVL tree may lose its
        height balance through removals.

        Raises:
            KeyNotFoundError: If key is not in the tree
        """
        node = self._require_node(key)
        shape = self.shape

        if node.left is None:
            shape.transplant(node, node.right)
        elif node.right is None:
            shape.transplant(node, node.left)
        else:
            heir = self._leftmost(node.right)
            if heir is not node.right:
                # Lift the heir out of the right subtree, then hang that subtree below it
                shape.transplant(heir, heir.right)
                heir.right = node.right
                heir.right.parent = heir
            shape.transplant(node, heir)
            heir.left = node.left
            heir.left.parent = heir

        node.detach()
        logger.debug("Removed key %r", key)

    # Rotations by key

    def rotate_left(self, key: Any) -> bool:
        """Rotate left at the node holding key.

        Each call starts a fresh ``rebalancer.stats.last``, so afterwards it
        holds only this rotation (or nothing if none was performed).

        Returns:
            False (and no change) if that node has no right child

        Raises:
            KeyNotFoundError: If key is not in the tree
        """
        node = self._require_node(key)
        self.rebalancer.stats.last = []
        return self.rebalancer.rotate_left(self.shape, node) is not None

    def rotate_right(self, key: Any) -> bool:
        """Rotate right at the node holding key; mirrors rotate_left."""
        node = self._require_node(key)
        self.rebalancer.stats.last = []
        return self.rebalancer.rotate_right(self.shape, node) is not None

    def is_balanced(self) -> bool:
        """Check the configured rebalancer's invariant over the whole tree.

        A tree without rebalancing has no such invariant and always reports
        True, even when its shape is a chain.
        """
        return self.rebalancer.is_balanced(self.shape.root_node)

    # Traversals delegated to the shape

    def traverse(self, visitor: Visitor, strategy: Optional[StrategyLike] = None) -> None:
        """Invoke visitor once per key.

        Args:
            visitor: Single-argument callable receiving each key
            strategy: Traversal to use (defaults to the configured one)
        """
        self.shape.traverse(visitor, strategy if strategy is not None else self.plan.traverser)

    def keys(self, strategy: Optional[StrategyLike] = None) -> List[Any]:
        collector: KeyCollector = KeyCollector()
        self.traverse(collector, strategy)
        return collector.keys

    def pre_order_traversal(self, visitor: Visitor) -> None:
        self.shape.pre_order_traversal(visitor)

    def in_order_traversal(self, visitor: Visitor) -> None:
        self.shape.in_order_traversal(visitor)

    def post_order_traversal(self, visitor: Visitor) -> None:
        self.shape.post_order_traversal(visitor)

    def pre_order_iter_traversal(self, visitor: Visitor) -> None:
        self.shape.pre_order_iter_traversal(visitor)

    def in_order_iter_traversal(self, visitor: Visitor) -> None:
        self.shape.in_order_iter_traversal(visitor)

    def post_order_iter_traversal_two_stacks(self, visitor: Visitor) -> None:
        self.shape.post_order_iter_traversal_two_stacks(visitor)

    def post_order_iter_traversal_one_stack(self, visitor: Visitor) -> None:
        self.shape.post_order_iter_traversal_one_stack(visitor)

    def breadth_first_traversal(self, visitor: Visitor) -> None:
        self.shape.breadth_first_traversal(visitor)

    # Python protocol

    def __len__(self) -> int:
        return self.shape.size()

    def __contains__(self, key: Any) -> bool:
        return self.search(key)

    def __iter__(self) -> Iterator[Any]:
        for node in IterativeInOrderTraverser().walk(self.shape.root_node):
            yield node.key

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(size={self.size()}, "
            f"balancing={self.config.balancing.value!r})"
        )
