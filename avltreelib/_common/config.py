"""Configuration system for AVLTreeLib.

This module defines how users specify the behaviour of a search tree:
how keys are ordered, whether and how the tree rebalances, which insert
algorithm is used and which traversal order is the default.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Callable, Any, List


class TraversalStrategy(Enum):
    """Order in which a traversal visits keys.

    Each depth-first order comes in a recursive and an iterative form.
    The recursive forms are only safe on trees known to stay shallow.
    """
    PRE_ORDER = "pre_order"                          # Visit, left, right
    PRE_ORDER_ITERATIVE = "pre_order_iter"           # Same, explicit stack
    IN_ORDER = "in_order"                            # Left, visit, right
    IN_ORDER_ITERATIVE = "in_order_iter"             # Same, explicit stack
    POST_ORDER = "post_order"                        # Left, right, visit
    POST_ORDER_TWO_STACKS = "post_order_two_stacks"  # Same, two stacks
    POST_ORDER_ONE_STACK = "post_order_one_stack"    # Same, one stack
    BREADTH_FIRST = "bfs"                            # Level by level
    CUSTOM = "custom"                                # User-defined traverser


class BalancingStrategy(Enum):
    """How a search tree restores balance after insertion."""
    NONE = "none"        # Plain binary search tree
    AVL = "avl"          # Height-balanced via rotations
    CUSTOM = "custom"    # User-defined rebalancer


class InsertMethod(Enum):
    """Algorithm used to attach new keys."""
    ITERATIVE = "iterative"   # Descend with a trailing parent pointer
    RECURSIVE = "recursive"   # Rebuild the path on the way back up


@dataclass
class TreeConfig:
    """Complete configuration for a search tree.

    This is the primary way users specify what kind of tree they want.
    The TreePlan validates this configuration and assembles the ordering,
    rebalancing and traversal components it names.
    """

    # Balancing
    balancing: BalancingStrategy = BalancingStrategy.NONE
    custom_rebalancer: Optional[Any] = None  # Custom Rebalancer instance

    # Insertion
    insert_method: InsertMethod = InsertMethod.ITERATIVE

    # Default traversal for traverse(), keys() and friends
    traversal: TraversalStrategy = TraversalStrategy.IN_ORDER_ITERATIVE
    custom_traverser: Optional[Any] = None  # Custom TreeTraverser instance

    # Ordering
    key: Optional[Callable[[Any], Any]] = None  # Sort key, like sorted(key=...)
    reverse: bool = False                        # Descending order
    custom_ordering: Optional[Any] = None        # Custom Ordering instance

    # Convenience constructors for common configurations

    @classmethod
    def unbalanced(cls, key: Optional[Callable[[Any], Any]] = None) -> 'TreeConfig':
        """Create config for a plain binary search tree.

        Args:
            key: Optional sort key applied to stored keys

        Returns:
            TreeConfig without rebalancing
        """
        return cls(balancing=BalancingStrategy.NONE, key=key)

    @classmethod
    def avl(cls, key: Optional[Callable[[Any], Any]] = None) -> 'TreeConfig':
        """Create config for an AVL tree.

        Args:
            key: Optional sort key applied to stored keys

        Returns:
            TreeConfig with AVL rebalancing after every insert
        """
        return cls(balancing=BalancingStrategy.AVL, key=key)

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not isinstance(self.balancing, BalancingStrategy):
            errors.append(f"balancing must be a BalancingStrategy, got {self.balancing!r}")
        if not isinstance(self.insert_method, InsertMethod):
            errors.append(f"insert_method must be an InsertMethod, got {self.insert_method!r}")
        if not isinstance(self.traversal, TraversalStrategy):
            errors.append(f"traversal must be a TraversalStrategy, got {self.traversal!r}")

        # Check ordering configuration
        if self.key is not None and not callable(self.key):
            errors.append("key must be callable")
        if self.custom_ordering is not None and (self.key is not None or self.reverse):
            errors.append("custom_ordering cannot be combined with key or reverse")

        # Check custom components
        if self.balancing == BalancingStrategy.CUSTOM and self.custom_rebalancer is None:
            errors.append("custom_rebalancer required when balancing is CUSTOM")

        if self.traversal == TraversalStrategy.CUSTOM and self.custom_traverser is None:
            errors.append("custom_traverser required when traversal is CUSTOM")

        return errors
