"""AVLTreeLib - Ordered, self-balancing binary trees.

AVLTreeLib provides a binary tree with every classic traversal, and a
search tree composed of a key ordering and a rebalancing strategy.

Choose your tree:
━━━━━━━━━━━━━━━━━━━━━━━━━━
Plain binary tree from a breadth-first layout:
    from avltreelib import build_tree

Unbalanced binary search tree:
    from avltreelib import binary_search_tree

AVL tree:
    from avltreelib import avl_tree
━━━━━━━━━━━━━━━━━━━━━━━━━━
"""

import logging

__version__ = "0.1.0"

# Core components
from .core.node import Node
from .core.traverser import (
    TreeTraverser,
    PreOrderTraverser,
    InOrderTraverser,
    PostOrderTraverser,
    IterativePreOrderTraverser,
    IterativeInOrderTraverser,
    TwoStackPostOrderTraverser,
    OneStackPostOrderTraverser,
    BreadthFirstTraverser,
    create_traverser,
)
from .core.collector import (
    KeyVisitor,
    KeyCollector,
    CountingVisitor,
    CallbackVisitor,
    RankFinder,
)
from .core.ordering import Ordering, NaturalOrdering, KeyOrdering
from .core.balancer import (
    Rebalancer,
    NoRebalancing,
    AVLRebalancer,
    RotationStats,
    rotate_left,
    rotate_right,
)

# Trees
from .binary_tree import BinaryTree
from .search_tree import SearchTree

# Configuration and planning
from .config import TreeConfig, TraversalStrategy, BalancingStrategy, InsertMethod
from .planning import TreePlan

# Errors
from .exceptions import (
    TreeError,
    EmptyTreeError,
    KeyNotFoundError,
    NoSuccessorError,
    NoPredecessorError,
    MalformedConstructionError,
    ConfigurationError,
)

# High-level API
from .api import (
    build_tree,
    binary_search_tree,
    avl_tree,
    create_tree,
    traverse_tree,
    collect_keys,
    get_tree_stats,
    avl_sort,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    # Core
    "Node",
    "TreeTraverser",
    "PreOrderTraverser",
    "InOrderTraverser",
    "PostOrderTraverser",
    "IterativePreOrderTraverser",
    "IterativeInOrderTraverser",
    "TwoStackPostOrderTraverser",
    "OneStackPostOrderTraverser",
    "BreadthFirstTraverser",
    "create_traverser",
    "KeyVisitor",
    "KeyCollector",
    "CountingVisitor",
    "CallbackVisitor",
    "RankFinder",
    "Ordering",
    "NaturalOrdering",
    "KeyOrdering",
    "Rebalancer",
    "NoRebalancing",
    "AVLRebalancer",
    "RotationStats",
    "rotate_left",
    "rotate_right",
    # Trees
    "BinaryTree",
    "SearchTree",
    # Configuration
    "TreeConfig",
    "TraversalStrategy",
    "BalancingStrategy",
    "InsertMethod",
    "TreePlan",
    # Errors
    "TreeError",
    "EmptyTreeError",
    "KeyNotFoundError",
    "NoSuccessorError",
    "NoPredecessorError",
    "MalformedConstructionError",
    "ConfigurationError",
    # API
    "build_tree",
    "binary_search_tree",
    "avl_tree",
    "create_tree",
    "traverse_tree",
    "collect_keys",
    "get_tree_stats",
    "avl_sort",
]
