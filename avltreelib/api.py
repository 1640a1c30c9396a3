"""High-level API for AVLTreeLib.

This module provides simple, functional interfaces for common tree
operations. These functions wrap the object-oriented API for ease of use
in simple cases.
"""

from typing import Any, Callable, Dict, Iterable, List, Optional, Union

from .binary_tree import BinaryTree
from .config import TreeConfig, TraversalStrategy, BalancingStrategy, InsertMethod
from .core.traverser import TreeTraverser, Visitor
from .search_tree import SearchTree

TreeLike = Union[BinaryTree, SearchTree]


def build_tree(layout: Iterable[Any]) -> BinaryTree:
    """Build a plain binary tree from a breadth-first layout.

    Args:
        layout: Keys in level order, None for absent positions

    Returns:
        BinaryTree with that shape

    Example:
        >>> tree = build_tree([5, 3, 8, None, 4, None, 9])
        >>> collect_keys(tree, 'in_order')
        [3, 4, 5, 8, 9]
    """
    return BinaryTree.from_breadth_first(layout)


def binary_search_tree(
    keys: Optional[Iterable[Any]] = None,
    key: Optional[Callable[[Any], Any]] = None,
    **kwargs
) -> SearchTree:
    """Create an unbalanced binary search tree.

    Args:
        keys: Keys to insert in order
        key: Optional sort key
        **kwargs: Additional config options (see create_tree)

    Returns:
        SearchTree without rebalancing
    """
    if key is not None:
        kwargs['key'] = key
    return create_tree(keys, balancing=BalancingStrategy.NONE, **kwargs)


def avl_tree(
    keys: Optional[Iterable[Any]] = None,
    key: Optional[Callable[[Any], Any]] = None,
    **kwargs
) -> SearchTree:
    """Create an AVL tree.

    Args:
        keys: Keys to insert in order
        key: Optional sort key
        **kwargs: Additional config options (see create_tree)

    Returns:
        SearchTree rebalanced after every insert

    Example:
        >>> tree = avl_tree([10, 20, 30])
        >>> tree.root
        20
    """
    if key is not None:
        kwargs['key'] = key
    return create_tree(keys, balancing=BalancingStrategy.AVL, **kwargs)


def create_tree(
    keys: Optional[Iterable[Any]] = None,
    config: Optional[TreeConfig] = None,
    **kwargs
) -> SearchTree:
    """Create a search tree from a config or keyword options.

    Args:
        keys: Keys to insert in order
        config: Complete configuration; keyword options override its fields
        **kwargs: balancing, insert_method, traversal (enums or names),
            key, reverse, custom_* components

    Returns:
        Configured SearchTree

    Raises:
        ConfigurationError: If the resulting configuration is inconsistent
        ValueError: If a strategy name is not recognized
    """
    config = _build_config_from_kwargs(config, **kwargs)
    return SearchTree(keys, config=config)


def traverse_tree(
    tree: TreeLike,
    visitor: Visitor,
    strategy: Union[TraversalStrategy, TreeTraverser, str, None] = None
) -> None:
    """Invoke visitor once per key of tree.

    Args:
        tree: BinaryTree or SearchTree
        visitor: Single-argument callable
        strategy: Traversal strategy (enum, name or traverser); defaults to
            the tree's configured traversal, or in-order for a BinaryTree
    """
    if strategy is not None and not isinstance(strategy, TreeTraverser):
        strategy = _parse_strategy(strategy)
    if isinstance(tree, SearchTree):
        tree.traverse(visitor, strategy)
    else:
        tree.traverse(visitor, strategy if strategy is not None else TraversalStrategy.IN_ORDER_ITERATIVE)


def collect_keys(
    tree: TreeLike,
    strategy: Union[TraversalStrategy, TreeTraverser, str, None] = None
) -> List[Any]:
    """Return every key of tree in traversal order."""
    keys: List[Any] = []
    traverse_tree(tree, keys.append, strategy)
    return keys


def get_tree_stats(tree: TreeLike) -> Dict[str, Any]:
    """Get statistics about a tree.

    Args:
        tree: BinaryTree or SearchTree

    Returns:
        Dictionary with size, height, root, and for search trees minimum,
        maximum, and 'invariant_ok': whether the configured rebalancer's
        invariant holds (always True without rebalancing)
    """
    empty = tree.is_empty()
    stats: Dict[str, Any] = {
        'size': tree.size(),
        'height': tree.height(),
        'root': None if empty else tree.root,
    }
    if isinstance(tree, SearchTree):
        stats.update({
            'minimum': None if empty else tree.minimum(),
            'maximum': None if empty else tree.maximum(),
            'invariant_ok': tree.is_balanced(),
            'balancing': tree.config.balancing.value,
            'rotations': tree.rebalancer.stats.total,
        })
    return stats


def avl_sort(
    items: Iterable[Any],
    key: Optional[Callable[[Any], Any]] = None,
    reverse: bool = False
) -> List[Any]:
    """Sort items by inserting them into an AVL tree and reading it in order.

    Equal items keep their input order.

    Args:
        items: Items to sort
        key: Optional sort key, as for sorted()
        reverse: Sort in descending order

    Returns:
        New sorted list
    """
    tree = create_tree(items, balancing=BalancingStrategy.AVL, key=key, reverse=reverse)
    return list(tree)


def _parse_strategy(strategy: Union[TraversalStrategy, str]) -> TraversalStrategy:
    """Parse traversal strategy from string or enum.

    Args:
        strategy: Strategy as enum or string

    Returns:
        TraversalStrategy enum value
    """
    if isinstance(strategy, TraversalStrategy):
        return strategy

    # Map string names to enum values
    strategy_map = {
        'pre_order': TraversalStrategy.PRE_ORDER,
        'preorder': TraversalStrategy.PRE_ORDER,
        'pre_order_iter': TraversalStrategy.PRE_ORDER_ITERATIVE,
        'in_order': TraversalStrategy.IN_ORDER,
        'inorder': TraversalStrategy.IN_ORDER,
        'in_order_iter': TraversalStrategy.IN_ORDER_ITERATIVE,
        'post_order': TraversalStrategy.POST_ORDER,
        'postorder': TraversalStrategy.POST_ORDER,
        'post_order_two_stacks': TraversalStrategy.POST_ORDER_TWO_STACKS,
        'post_order_one_stack': TraversalStrategy.POST_ORDER_ONE_STACK,
        'bfs': TraversalStrategy.BREADTH_FIRST,
        'breadth_first': TraversalStrategy.BREADTH_FIRST,
        'level_order': TraversalStrategy.BREADTH_FIRST,
    }

    strategy_lower = strategy.lower() if isinstance(strategy, str) else str(strategy)
    if strategy_lower in strategy_map:
        return strategy_map[strategy_lower]

    raise ValueError(f"Unknown traversal strategy: {strategy}")


def _parse_balancing(balancing: Union[BalancingStrategy, str]) -> BalancingStrategy:
    """Parse balancing strategy from string or enum."""
    if isinstance(balancing, BalancingStrategy):
        return balancing
    try:
        return BalancingStrategy(str(balancing).lower())
    except ValueError:
        raise ValueError(f"Unknown balancing strategy: {balancing}") from None


def _parse_insert_method(method: Union[InsertMethod, str]) -> InsertMethod:
    """Parse insert method from string or enum."""
    if isinstance(method, InsertMethod):
        return method
    try:
        return InsertMethod(str(method).lower())
    except ValueError:
        raise ValueError(f"Unknown insert method: {method}") from None


def _build_config_from_kwargs(config: Optional[TreeConfig] = None, **kwargs) -> TreeConfig:
    """Build TreeConfig from keyword arguments.

    Args:
        config: Base configuration to copy (None = defaults)
        **kwargs: Configuration options

    Returns:
        TreeConfig instance
    """
    if config is None:
        config = TreeConfig()
    else:
        config = TreeConfig(**vars(config))

    # Map common kwargs to config attributes
    if 'balancing' in kwargs:
        config.balancing = _parse_balancing(kwargs.pop('balancing'))

    if 'insert_method' in kwargs:
        config.insert_method = _parse_insert_method(kwargs.pop('insert_method'))

    if 'traversal' in kwargs:
        config.traversal = _parse_strategy(kwargs.pop('traversal'))

    # Apply any remaining kwargs directly
    for name, value in kwargs.items():
        if hasattr(config, name):
            setattr(config, name, value)

    return config
