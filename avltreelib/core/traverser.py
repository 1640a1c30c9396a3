"""Tree traversal strategies for AVLTreeLib.

Traversers implement different algorithms for walking through a binary
tree. They only read the tree: each one walks the nodes below a root and
hands every key to a visitor exactly once, in its own order.
"""

from abc import ABC, abstractmethod
from collections import deque
from typing import Any, Callable, Deque, Iterator, List, Optional

from .node import Node


Visitor = Callable[[Any], None]


class TreeTraverser(ABC):
    """Abstract base class for tree traversal strategies.

    Subclasses only define the node order through ``walk``. Visitors are
    given keys, never nodes, so nothing outside the tree can hold on to
    its internal structure.
    """

    #: Whether the walk recurses on the Python call stack
    recursive = False

    @abstractmethod
    def walk(self, root: Optional[Node]) -> Iterator[Node]:
        """Yield the nodes of the subtree under root in traversal order.

        Args:
            root: Starting node, or None for an empty tree

        Yields:
            Node instances, each exactly once
        """
        pass

    def traverse(self, root: Optional[Node], visitor: Visitor) -> None:
        """Invoke visitor once per key in traversal order.

        Args:
            root: Starting node, or None for an empty tree
            visitor: Single-argument callable receiving each key
        """
        for node in self.walk(root):
            visitor(node.key)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class PreOrderTraverser(TreeTraverser):
    """Recursive pre-order traversal: visit, left, right.

    ``traverse`` recurses and calls the visitor directly, so it runs in
    O(n); ``walk`` chains generators and costs O(n * height).
    """

    recursive = True

    def traverse(self, root: Optional[Node], visitor: Visitor) -> None:
        if root is None:
            return
        visitor(root.key)
        self.traverse(root.left, visitor)
        self.traverse(root.right, visitor)

    def walk(self, root: Optional[Node]) -> Iterator[Node]:
        if root is None:
            return
        yield root
        yield from self.walk(root.left)
        yield from self.walk(root.right)


class InOrderTraverser(TreeTraverser):
    """Recursive in-order traversal: left, visit, right.

    On a search tree this yields keys in sorted order.
    """

    recursive = True

    def traverse(self, root: Optional[Node], visitor: Visitor) -> None:
        if root is None:
            return
        self.traverse(root.left, visitor)
        visitor(root.key)
        self.traverse(root.right, visitor)

    def walk(self, root: Optional[Node]) -> Iterator[Node]:
        if root is None:
            return
        yield from self.walk(root.left)
        yield root
        yield from self.walk(root.right)


class PostOrderTraverser(TreeTraverser):
    """Recursive post-order traversal: left, right, visit."""

    recursive = True

    def traverse(self, root: Optional[Node], visitor: Visitor) -> None:
        if root is None:
            return
        self.traverse(root.left, visitor)
        self.traverse(root.right, visitor)
        visitor(root.key)

    def walk(self, root: Optional[Node]) -> Iterator[Node]:
        if root is None:
            return
        yield from self.walk(root.left)
        yield from self.walk(root.right)
        yield root


class IterativePreOrderTraverser(TreeTraverser):
    """Pre-order traversal with an explicit stack.

    The right child is pushed before the left one so the left subtree is
    processed first.
    """

    def walk(self, root: Optional[Node]) -> Iterator[Node]:
        if root is None:
            return
        stack: List[Node] = [root]
        while stack:
            node = stack.pop()
            yield node
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)


class IterativeInOrderTraverser(TreeTraverser):
    """In-order traversal with an explicit stack.

    Descends left pushing every node, then pops one, visits it and moves
    into its right subtree.
    """

    def walk(self, root: Optional[Node]) -> Iterator[Node]:
        stack: List[Node] = []
        node = root
        while stack or node is not None:
            if node is not None:
                stack.append(node)
                node = node.left
            else:
                node = stack.pop()
                yield node
                node = node.right


class TwoStackPostOrderTraverser(TreeTraverser):
    """Post-order traversal with two stacks.

    The first stack produces a reversed post-order (visit, right, left)
    into the second stack, which is then drained.
    """

    def walk(self, root: Optional[Node]) -> Iterator[Node]:
        if root is None:
            return
        pending: List[Node] = [root]
        output: List[Node] = []
        while pending:
            node = pending.pop()
            output.append(node)
            if node.left is not None:
                pending.append(node.left)
            if node.right is not None:
                pending.append(node.right)
        while output:
            yield output.pop()


class OneStackPostOrderTraverser(TreeTraverser):
    """Post-order traversal with a single stack.

    Tracks the last emitted node: on returning to a node whose right child
    exists and was not the last one emitted, the walk descends right
    instead of emitting the node.
    """

    def walk(self, root: Optional[Node]) -> Iterator[Node]:
        stack: List[Node] = []
        node = root
        last: Optional[Node] = None
        while stack or node is not None:
            if node is not None:
                stack.append(node)
                node = node.left
            else:
                top = stack[-1]
                if top.right is None or top.right is last:
                    yield top
                    stack.pop()
                    last = top
                else:
                    node = top.right


class BreadthFirstTraverser(TreeTraverser):
    """Breadth-first (level-order) traversal strategy.

    Visits all nodes at depth N before visiting nodes at depth N+1,
    left to right within a level.
    """

    def walk(self, root: Optional[Node]) -> Iterator[Node]:
        if root is None:
            return
        queue: Deque[Node] = deque([root])
        while queue:
            node = queue.popleft()
            yield node
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)


# Factory function for creating traversers by name
def create_traverser(strategy: str) -> TreeTraverser:
    """Create a traverser instance by strategy name.

    Args:
        strategy: Name of traversal strategy (pre_order, pre_order_iter,
            in_order, in_order_iter, post_order, post_order_two_stacks,
            post_order_one_stack, bfs)

    Returns:
        TreeTraverser instance

    Raises:
        ValueError: If strategy name is not recognized
    """
    strategies = {
        'pre_order': PreOrderTraverser,
        'pre_order_iter': IterativePreOrderTraverser,
        'in_order': InOrderTraverser,
        'in_order_iter': IterativeInOrderTraverser,
        'post_order': PostOrderTraverser,
        'post_order_two_stacks': TwoStackPostOrderTraverser,
        'post_order_one_stack': OneStackPostOrderTraverser,
        'bfs': BreadthFirstTraverser,
        'breadth_first': BreadthFirstTraverser,
        'level_order': BreadthFirstTraverser,
    }

    strategy_lower = strategy.lower()
    if strategy_lower not in strategies:
        raise ValueError(
            f"Unknown traversal strategy: {strategy}. "
            f"Choose from: {', '.join(strategies.keys())}"
        )

    return strategies[strategy_lower]()
