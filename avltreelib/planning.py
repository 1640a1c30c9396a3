"""Tree planning for AVLTreeLib.

The TreePlan validates that a TreeConfig is consistent and assembles the
ordering, rebalancing and traversal components a SearchTree is built from.
"""

from typing import Any, Dict, Optional, Union

from .config import TreeConfig, TraversalStrategy, BalancingStrategy, InsertMethod
from .core.traverser import TreeTraverser, create_traverser
from .core.ordering import Ordering, NaturalOrdering, KeyOrdering
from .core.balancer import Rebalancer, NoRebalancing, AVLRebalancer
from .exceptions import ConfigurationError


def resolve_traverser(strategy: Union[TraversalStrategy, TreeTraverser, str]) -> TreeTraverser:
    """Turn a strategy enum, name or traverser instance into a traverser.

    Args:
        strategy: TraversalStrategy member, strategy name, or a ready traverser

    Returns:
        TreeTraverser instance

    Raises:
        ValueError: If strategy is CUSTOM or an unknown name
    """
    if isinstance(strategy, TreeTraverser):
        return strategy
    if isinstance(strategy, TraversalStrategy):
        if strategy == TraversalStrategy.CUSTOM:
            raise ValueError("CUSTOM traversal needs a traverser instance")
        return create_traverser(strategy.value)
    return create_traverser(str(strategy))


class TreePlan:
    """Validated component selection for a search tree.

    The TreePlan is the bridge between user intent (TreeConfig) and the
    tree. It validates the configuration before any node exists and picks
    the components the tree delegates to.
    """

    def __init__(self, config: Optional[TreeConfig] = None):
        """Create and validate a plan.

        Args:
            config: Tree configuration (defaults to an unbalanced tree)

        Raises:
            ConfigurationError: If the configuration is inconsistent
        """
        self.config = config if config is not None else TreeConfig()

        config_errors = self.config.validate()
        if config_errors:
            raise ConfigurationError(
                f"Invalid configuration: {'; '.join(config_errors)}"
            )

        # Select components
        self.ordering = self._select_ordering()
        self.rebalancer = self._select_rebalancer()
        self.traverser = self._select_traverser()
        self.insert_method = self.config.insert_method

    def _select_ordering(self) -> Ordering:
        """Select the key ordering.

        Returns:
            Ordering instance
        """
        if self.config.custom_ordering is not None:
            return self.config.custom_ordering
        if self.config.key is None and not self.config.reverse:
            return NaturalOrdering()
        return KeyOrdering(key=self.config.key, reverse=self.config.reverse)

    def _select_rebalancer(self) -> Rebalancer:
        """Select the rebalancing strategy.

        Returns:
            Rebalancer instance
        """
        if self.config.balancing == BalancingStrategy.CUSTOM:
            return self.config.custom_rebalancer

        rebalancer_map = {
            BalancingStrategy.NONE: NoRebalancing,
            BalancingStrategy.AVL: AVLRebalancer,
        }
        return rebalancer_map[self.config.balancing]()

    def _select_traverser(self) -> TreeTraverser:
        """Select the default traverser.

        Returns:
            TreeTraverser instance
        """
        if self.config.traversal == TraversalStrategy.CUSTOM:
            return self.config.custom_traverser
        return resolve_traverser(self.config.traversal)

    def get_summary(self) -> Dict[str, Any]:
        """Get summary of the plan.

        Useful for debugging and logging.

        Returns:
            Dictionary with plan details
        """
        return {
            'balancing': self.config.balancing.value,
            'insert_method': self.insert_method.value,
            'traversal': self.config.traversal.value,
            'ordering': self.ordering.__class__.__name__,
            'rebalancer': self.rebalancer.__class__.__name__,
            'traverser': self.traverser.__class__.__name__,
            'recursive_insert': self.insert_method == InsertMethod.RECURSIVE,
        }
