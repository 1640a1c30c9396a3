"""Core building blocks for AVLTreeLib.

This package contains the node type and the strategy families the trees
are composed of: traversers, visitors, orderings and rebalancers.
"""

from .node import Node
from .traverser import TreeTraverser, create_traverser
from .collector import KeyVisitor, KeyCollector, RankFinder
from .ordering import Ordering, NaturalOrdering, KeyOrdering
from .balancer import Rebalancer, NoRebalancing, AVLRebalancer

__all__ = [
    "Node",
    "TreeTraverser",
    "create_traverser",
    "KeyVisitor",
    "KeyCollector",
    "RankFinder",
    "Ordering",
    "NaturalOrdering",
    "KeyOrdering",
    "Rebalancer",
    "NoRebalancing",
    "AVLRebalancer",
]
